from __future__ import annotations
from PySide6.QtCore import Qt
from PySide6.QtWidgets import QWidget, QVBoxLayout, QLabel
from .editor import EditorModel

HINT = ("Drag elements from the sidebar onto the canvas. Click to select. "
        "Drag the bottom-right corner to resize.")


def describe(el) -> str:
    return (f"Selected: {el.type} | "
            f"Position: ({el.x:g}, {el.y:g}) | "
            f"Size: {el.width:g}x{el.height:g} | "
            f"Rotation: {el.rotation}°")


class InfoPanel(QWidget):
    """Hint line plus a readout of the selected element."""

    def __init__(self, model: EditorModel, parent=None):
        super().__init__(parent)
        self.model = model

        root = QVBoxLayout(self)
        root.setContentsMargins(8, 8, 8, 8)
        root.setSpacing(4)

        self.lbl_hint = QLabel(HINT)
        self.lbl_hint.setWordWrap(True)
        self.lbl_hint.setAlignment(Qt.AlignCenter)
        self.lbl_hint.setStyleSheet("color:#4b5563;")
        root.addWidget(self.lbl_hint)

        self.lbl_selected = QLabel("")
        self.lbl_selected.setAlignment(Qt.AlignCenter)
        self.lbl_selected.setStyleSheet("font-weight: 600; color:#1f2937;")
        root.addWidget(self.lbl_selected)
        self.refresh()

    def refresh(self):
        el = self.model.selected
        self.lbl_selected.setVisible(el is not None)
        self.lbl_selected.setText(describe(el) if el is not None else "")

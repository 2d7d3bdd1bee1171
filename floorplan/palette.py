from __future__ import annotations
from typing import Optional
from PySide6.QtCore import Qt, QPoint, QRect, QSize, QMimeData
from PySide6.QtGui import QPainter, QPen, QDrag, QColor, QCursor
from PySide6.QtWidgets import QWidget, QVBoxLayout, QLabel, QApplication
from .models import ElementType
from .utils import TILE_ICON_SIZE, fill_for, make_type_icon, DOOR_STROKE


class PreviewTile(QWidget):
    """Palette entry. Dragging it carries the element type as plain text."""

    def __init__(self, element_type: str, parent: QWidget | None = None):
        super().__init__(parent)
        self.element_type = element_type
        self.setMouseTracking(True)
        self._press_pos: Optional[QPoint] = None
        self._icon_rect: QRect = QRect()
        self.setObjectName("PreviewTile")
        self.setProperty("class", "PreviewTile")
        self.setToolTip(f"Drag onto the canvas to place a {element_type.lower()}")

    def sizeHint(self) -> QSize:
        return QSize(160, TILE_ICON_SIZE + 38)

    def _layout_icon_rect(self) -> QRect:
        s = TILE_ICON_SIZE
        r = QRect((self.width() - s) // 2, 8, s, s)
        self._icon_rect = r
        return r

    def paintEvent(self, ev):
        p = QPainter(self); p.setRenderHint(QPainter.Antialiasing)
        r = self._layout_icon_rect()
        p.setBrush(fill_for(self.element_type))
        if self.element_type == ElementType.DOOR:
            p.setPen(QPen(DOOR_STROKE, 2))
        else:
            p.setPen(Qt.NoPen)
        if self.element_type == ElementType.CHAIR:
            p.drawEllipse(r)
        else:
            p.drawRect(r)

        p.setPen(QPen(QColor("#222"), 1))
        fm = p.fontMetrics()
        text_w = fm.horizontalAdvance(self.element_type)
        p.drawText(max(8, (self.width() - text_w) // 2), r.bottom() + 20, self.element_type)
        p.end()

    def enterEvent(self, ev):
        pos = self.mapFromGlobal(QCursor.pos())
        self.setCursor(Qt.OpenHandCursor if self._icon_rect.contains(pos) else Qt.ArrowCursor)

    def mousePressEvent(self, ev):
        self._press_pos = ev.pos() if ev.button() == Qt.LeftButton else None
        super().mousePressEvent(ev)

    def mouseMoveEvent(self, ev):
        if self._press_pos is None:
            return
        if (ev.pos() - self._press_pos).manhattanLength() < QApplication.startDragDistance():
            return

        drag = QDrag(self)
        mime = QMimeData()
        mime.setText(self.element_type)
        drag.setMimeData(mime)
        drag.setPixmap(make_type_icon(self.element_type).pixmap(TILE_ICON_SIZE, TILE_ICON_SIZE))
        drag.exec(Qt.CopyAction)
        self._press_pos = None

    def mouseReleaseEvent(self, ev):
        self._press_pos = None
        super().mouseReleaseEvent(ev)


class PalettePanel(QWidget):
    def __init__(self, parent=None):
        super().__init__(parent)
        self.tiles = {}
        self._build_ui()

    def _build_ui(self):
        root = QVBoxLayout(self)
        root.setContentsMargins(8, 8, 8, 8)
        root.setSpacing(8)

        title = QLabel("Floor plan elements")
        title.setStyleSheet("font-weight: 600; color:#374151;")
        root.addWidget(title)

        for kind in ElementType.ALL:
            tile = PreviewTile(kind, self)
            self.tiles[kind] = tile
            root.addWidget(tile)
        root.addStretch(1)

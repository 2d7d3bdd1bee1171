from __future__ import annotations
from PySide6.QtCore import Qt
from PySide6.QtGui import QColor, QPixmap, QPainter, QPen, QIcon
from .models import ElementType

# ===== Canvas =====
BG_COLOR = QColor("#f5f5f5")
OUTLINE_COLOR = QColor("#333333")
OUTLINE_W = 2
HANDLE_COLOR = QColor("#3498db")

# ===== Element colors (derived from type, never persisted) =====
TYPE_FILL = {
    ElementType.TABLE: QColor("#6b4f4f"),
    ElementType.CHAIR: QColor("#8d6e63"),
    ElementType.DOOR:  QColor("#c4a79d"),
}
DOOR_STROKE = QColor("#5c4033")

# ===== Palette =====
TILE_ICON_SIZE = 40

# payload carried by palette drags
DRAG_MIME = "text/plain"


def fill_for(element_type: str) -> QColor:
    return TYPE_FILL.get(element_type, OUTLINE_COLOR)


def make_type_icon(element_type: str, size: int = TILE_ICON_SIZE) -> QIcon:
    pm = QPixmap(size, size); pm.fill(Qt.transparent)
    p = QPainter(pm); p.setRenderHint(QPainter.Antialiasing, True)
    p.setBrush(fill_for(element_type))
    if element_type == ElementType.DOOR:
        p.setPen(QPen(DOOR_STROKE, 2))
    else:
        p.setPen(Qt.NoPen)
    if element_type == ElementType.CHAIR:
        p.drawEllipse(4, 4, size - 8, size - 8)
    else:
        p.drawRect(4, 4, size - 8, size - 8)
    p.end()
    return QIcon(pm)

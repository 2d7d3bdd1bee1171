from __future__ import annotations
from typing import Optional

from PySide6.QtCore import Qt, QRectF, QPointF, QSize, Signal
from PySide6.QtGui import QPainter, QPen
from PySide6.QtWidgets import QWidget

from .editor import EditorModel
from .models import ElementType, PlacedElement, CANVAS_W, CANVAS_H
from .utils import (BG_COLOR, OUTLINE_W, HANDLE_COLOR, DOOR_STROKE,
                    DRAG_MIME, fill_for)


def draw_element(p: QPainter, el: PlacedElement):
    p.save()
    cx, cy = el.center()
    p.translate(cx, cy)
    p.rotate(el.rotation)
    body = QRectF(-el.width / 2, -el.height / 2, el.width, el.height)
    p.setPen(Qt.NoPen)
    p.setBrush(fill_for(el.type))
    if el.type == ElementType.TABLE:
        p.drawRect(body)
    elif el.type == ElementType.CHAIR:
        r = el.width / 2
        p.drawEllipse(QPointF(0, 0), r, r)
    elif el.type == ElementType.DOOR:
        p.setPen(QPen(DOOR_STROKE, OUTLINE_W))
        p.drawRect(body)
    p.restore()


def draw_layout(p: QPainter, model: EditorModel, w: float = CANVAS_W, h: float = CANVAS_H):
    """Full repaint: background, elements in insertion order, then the handle."""
    p.setRenderHint(QPainter.Antialiasing, True)
    p.fillRect(QRectF(0, 0, w, h), BG_COLOR)
    for el in model.elements:
        draw_element(p, el)
        if el.id == model.selected_id:
            hx, hy, hw, hh = el.handle_rect()
            p.fillRect(QRectF(hx, hy, hw, hh), HANDLE_COLOR)


class PlanCanvas(QWidget):
    """Drop target and pointer surface for the editor model."""

    selectionChanged = Signal()
    layoutChanged = Signal()

    def __init__(self, model: Optional[EditorModel] = None, parent=None):
        super().__init__(parent)
        self.model = model or EditorModel()
        self.model.on_change = self._on_model_change
        self._last_selected = self.model.selected_id
        self.setFixedSize(CANVAS_W, CANVAS_H)
        self.setAcceptDrops(True)
        self.setMouseTracking(False)

    def sizeHint(self) -> QSize:
        return QSize(CANVAS_W, CANVAS_H)

    def _on_model_change(self):
        if self.model.selected_id != self._last_selected:
            self._last_selected = self.model.selected_id
            self.selectionChanged.emit()
        self.layoutChanged.emit()
        self.update()

    # ----- painting -----
    def paintEvent(self, ev):
        p = QPainter(self)
        draw_layout(p, self.model, self.width(), self.height())
        p.end()

    # ----- pointer -----
    def mousePressEvent(self, ev):
        if ev.button() != Qt.LeftButton:
            return super().mousePressEvent(ev)
        pos = ev.position()
        self.model.pointer_down(pos.x(), pos.y())

    def mouseMoveEvent(self, ev):
        pos = ev.position()
        self.model.pointer_move(pos.x(), pos.y())

    def mouseReleaseEvent(self, ev):
        self.model.pointer_up()
        super().mouseReleaseEvent(ev)

    # ----- palette drops -----
    def dragEnterEvent(self, ev):
        if ev.mimeData().hasFormat(DRAG_MIME) and ev.mimeData().text() in ElementType.ALL:
            ev.acceptProposedAction()
        else:
            ev.ignore()

    def dragMoveEvent(self, ev):
        ev.acceptProposedAction()

    def dropEvent(self, ev):
        kind = ev.mimeData().text()
        if kind not in ElementType.ALL:
            ev.ignore()
            return
        pos = ev.position()
        self.model.drop(kind, pos.x(), pos.y())
        ev.acceptProposedAction()

from __future__ import annotations
import time
from typing import Callable, List, Optional

from .models import (PlacedElement, ElementType, Interaction,
                     DEFAULT_SIZE, MIN_SIZE, ROTATION_STEP)


def _now_ms() -> int:
    return int(time.time() * 1000)


class EditorModel:
    """Client-side layout document plus the pointer interaction state.

    Pointer coordinates are canvas coordinates. The view calls
    pointer_down / pointer_move / pointer_up / drop and repaints whenever
    ``on_change`` fires.
    """

    def __init__(self, on_change: Optional[Callable[[], None]] = None,
                 clock: Callable[[], int] = _now_ms):
        self.elements: List[PlacedElement] = []
        self.selected_id: Optional[int] = None
        self.interaction = Interaction.IDLE
        self.on_change = on_change
        self._clock = clock
        # DRAGGING: pointer offset from element origin
        # RESIZING: pointer start and size at press
        self._start_x = 0.0
        self._start_y = 0.0
        self._initial_w = 0.0
        self._initial_h = 0.0

    # ----- queries -----
    def element_by_id(self, element_id: Optional[int]) -> Optional[PlacedElement]:
        if element_id is None:
            return None
        for el in self.elements:
            if el.id == element_id:
                return el
        return None

    @property
    def selected(self) -> Optional[PlacedElement]:
        return self.element_by_id(self.selected_id)

    @property
    def can_rotate(self) -> bool:
        return self.selected is not None

    def hit_test(self, x: float, y: float) -> Optional[PlacedElement]:
        # first match in insertion order, un-rotated boxes
        for el in self.elements:
            if el.contains(x, y):
                return el
        return None

    # ----- pointer -----
    def pointer_down(self, x: float, y: float):
        sel = self.selected
        if sel is not None and sel.handle_contains(x, y):
            self.interaction = Interaction.RESIZING
            self._start_x, self._start_y = x, y
            self._initial_w, self._initial_h = sel.width, sel.height
            return

        hit = self.hit_test(x, y)
        if hit is not None:
            self.interaction = Interaction.DRAGGING
            self._start_x, self._start_y = x - hit.x, y - hit.y
            self._select(hit.id)
        else:
            self.interaction = Interaction.IDLE
            self._select(None)

    def pointer_move(self, x: float, y: float):
        if self.interaction == Interaction.IDLE:
            return
        sel = self.selected
        if sel is None:
            return
        if self.interaction == Interaction.DRAGGING:
            sel.x = x - self._start_x
            sel.y = y - self._start_y
        elif self.interaction == Interaction.RESIZING:
            sel.width = max(MIN_SIZE, self._initial_w + (x - self._start_x))
            sel.height = max(MIN_SIZE, self._initial_h + (y - self._start_y))
        self._changed()

    def pointer_up(self):
        self.interaction = Interaction.IDLE

    # ----- document mutations -----
    def drop(self, element_type: str, x: float, y: float) -> PlacedElement:
        if element_type not in ElementType.ALL:
            raise ValueError(f"unknown element type: {element_type!r}")
        el = PlacedElement(
            id=self._next_id(),
            type=element_type,
            x=x - DEFAULT_SIZE / 2,
            y=y - DEFAULT_SIZE / 2,
            width=DEFAULT_SIZE,
            height=DEFAULT_SIZE,
            rotation=0,
        )
        self.elements.append(el)
        self._changed()
        return el

    def rotate_selected(self) -> bool:
        sel = self.selected
        if sel is None:
            return False
        sel.rotation = (sel.rotation + ROTATION_STEP) % 360
        self._changed()
        return True

    def replace_elements(self, elements: List[PlacedElement]):
        self.elements = list(elements)
        self.interaction = Interaction.IDLE
        if self.element_by_id(self.selected_id) is None:
            self.selected_id = None
        self._changed()

    # ----- internals -----
    def _next_id(self) -> int:
        candidate = self._clock()
        if self.elements:
            candidate = max(candidate, max(el.id for el in self.elements) + 1)
        return candidate

    def _select(self, element_id: Optional[int]):
        if element_id == self.selected_id:
            return
        self.selected_id = element_id
        self._changed()

    def _changed(self):
        if self.on_change:
            self.on_change()

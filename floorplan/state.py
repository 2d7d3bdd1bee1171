from __future__ import annotations
from typing import Dict, Iterable, List
from .models import PlacedElement, LayoutFormatError


class LayoutState:
    """Converts the editor document to and from the JSON array sent over HTTP."""

    def serialize(self, elements: Iterable[PlacedElement]) -> List[Dict]:
        return [el.to_dict() for el in elements]

    def deserialize(self, data) -> List[PlacedElement]:
        if not isinstance(data, list):
            raise LayoutFormatError(f"layout must be a JSON array, got {type(data).__name__}")
        out: List[PlacedElement] = []
        seen = set()
        for i, raw in enumerate(data):
            try:
                el = PlacedElement.from_dict(raw)
            except LayoutFormatError as e:
                raise LayoutFormatError(f"element {i}: {e}") from e
            if el.id in seen:
                raise LayoutFormatError(f"element {i}: duplicate id {el.id}")
            seen.add(el.id)
            out.append(el)
        return out

from __future__ import annotations
import math
from dataclasses import dataclass, asdict
from numbers import Real
from typing import Dict, Tuple

# ===== Canvas / element geometry =====
CANVAS_W = 800
CANVAS_H = 600
DEFAULT_SIZE = 50.0
MIN_SIZE = 10.0
ROTATION_STEP = 45
HANDLE_SIZE = 8.0


class LayoutFormatError(ValueError):
    """Wire payload does not describe a valid layout."""


class ElementType:
    TABLE = "Table"
    CHAIR = "Chair"
    DOOR = "Door"
    ALL = (TABLE, CHAIR, DOOR)


class Interaction:
    IDLE = "idle"
    DRAGGING = "dragging"
    RESIZING = "resizing"


@dataclass
class PlacedElement:
    id: int
    type: str
    x: float
    y: float
    width: float = DEFAULT_SIZE
    height: float = DEFAULT_SIZE
    rotation: int = 0

    def center(self) -> Tuple[float, float]:
        return self.x + self.width / 2, self.y + self.height / 2

    def contains(self, px: float, py: float) -> bool:
        # rotation is ignored, edges excluded
        return (self.x < px < self.x + self.width and
                self.y < py < self.y + self.height)

    def handle_rect(self) -> Tuple[float, float, float, float]:
        hx = self.x + self.width - HANDLE_SIZE / 2
        hy = self.y + self.height - HANDLE_SIZE / 2
        return hx, hy, HANDLE_SIZE, HANDLE_SIZE

    def handle_contains(self, px: float, py: float) -> bool:
        hx, hy, hw, hh = self.handle_rect()
        return hx <= px <= hx + hw and hy <= py <= hy + hh

    def to_dict(self) -> Dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data) -> "PlacedElement":
        if not isinstance(data, dict):
            raise LayoutFormatError(f"element must be an object, got {type(data).__name__}")
        missing = [k for k in ("id", "type", "x", "y", "width", "height", "rotation") if k not in data]
        if missing:
            raise LayoutFormatError(f"element is missing fields: {', '.join(missing)}")
        for key in ("id", "x", "y", "width", "height", "rotation"):
            v = data[key]
            # bool is a Real subclass
            if isinstance(v, bool) or not isinstance(v, Real):
                raise LayoutFormatError(f"field '{key}' must be numeric, got {v!r}")
            if not math.isfinite(v):
                raise LayoutFormatError(f"field '{key}' must be finite, got {v!r}")
        for key in ("id", "rotation"):
            if data[key] != int(data[key]):
                raise LayoutFormatError(f"field '{key}' must be an integer, got {data[key]!r}")
        if data["type"] not in ElementType.ALL:
            raise LayoutFormatError(f"field 'type' must be one of {', '.join(ElementType.ALL)}, got {data['type']!r}")
        for key in ("width", "height"):
            if data[key] < MIN_SIZE:
                raise LayoutFormatError(f"field '{key}' must be at least {MIN_SIZE:g}, got {data[key]!r}")
        rotation = int(data["rotation"])
        if not 0 <= rotation < 360 or rotation % ROTATION_STEP:
            raise LayoutFormatError(f"field 'rotation' must be a multiple of {ROTATION_STEP} in [0, 360), got {rotation}")
        return cls(
            id=int(data["id"]),
            type=data["type"],
            x=data["x"], y=data["y"],
            width=data["width"], height=data["height"],
            rotation=rotation,
        )

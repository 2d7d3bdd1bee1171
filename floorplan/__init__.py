from .models import (PlacedElement, ElementType, Interaction, LayoutFormatError,
                     CANVAS_W, CANVAS_H, DEFAULT_SIZE, MIN_SIZE, ROTATION_STEP, HANDLE_SIZE)
from .state import LayoutState
from .editor import EditorModel
from .store import LayoutStore, InMemoryLayoutStore
from .client import LayoutClient, LayoutSyncError
from .config import Settings
# Qt widgets: .canvas, .palette, .properties (imported directly)

__all__ = [
    "PlacedElement", "ElementType", "Interaction", "LayoutFormatError",
    "CANVAS_W", "CANVAS_H", "DEFAULT_SIZE", "MIN_SIZE", "ROTATION_STEP", "HANDLE_SIZE",
    "LayoutState", "EditorModel", "LayoutStore", "InMemoryLayoutStore",
    "LayoutClient", "LayoutSyncError", "Settings",
]

from __future__ import annotations
import copy
import threading
from abc import ABC, abstractmethod
from typing import Any, List


class LayoutStore(ABC):
    """Holds the single current layout document."""

    @abstractmethod
    def save(self, layout: List[Any]) -> None:
        ...

    @abstractmethod
    def load(self) -> List[Any]:
        ...


class InMemoryLayoutStore(LayoutStore):
    """Process-memory backend. Starts empty and resets on restart."""

    def __init__(self):
        self._layout: List[Any] = []
        self._lock = threading.Lock()

    def save(self, layout: List[Any]) -> None:
        snapshot = copy.deepcopy(layout)
        with self._lock:
            self._layout = snapshot

    def load(self) -> List[Any]:
        with self._lock:
            current = self._layout
        return copy.deepcopy(current)

from __future__ import annotations
import logging
from typing import Iterable, List, Optional

import requests

from .models import PlacedElement, LayoutFormatError
from .state import LayoutState

logger = logging.getLogger(__name__)

SAVE_PATH = "/api/save-layout"
LOAD_PATH = "/api/get-layout"


class LayoutSyncError(Exception):
    """Save or Load against the layout store failed."""


class LayoutClient:
    """Talks to the layout store. One call per user action, no retry."""

    def __init__(self, base_url: str, session: Optional[requests.Session] = None,
                 timeout: float = 5.0):
        self.base_url = base_url.rstrip("/")
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout
        self.state = LayoutState()

    def save(self, elements: Iterable[PlacedElement]) -> str:
        payload = self.state.serialize(elements)
        data = self._request("POST", SAVE_PATH, json=payload)
        message = data.get("message", "") if isinstance(data, dict) else ""
        logger.info("Layout saved: %d elements (%s)", len(payload), message)
        return message

    def load(self) -> List[PlacedElement]:
        data = self._request("GET", LOAD_PATH)
        try:
            elements = self.state.deserialize(data)
        except LayoutFormatError as e:
            raise LayoutSyncError(f"Server returned a malformed layout: {e}") from e
        logger.info("Layout loaded: %d elements", len(elements))
        return elements

    def _request(self, method: str, path: str, **kwargs):
        url = self.base_url + path
        try:
            r = self.session.request(method, url, timeout=self.timeout, **kwargs)
            r.raise_for_status()
            return r.json()
        except requests.RequestException as e:
            raise LayoutSyncError(f"{method} {url} failed: {e}") from e
        except ValueError as e:
            raise LayoutSyncError(f"{method} {url} returned invalid JSON: {e}") from e

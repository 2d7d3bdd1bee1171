"""
Floor Plan Layout Store – FastAPI backend

Holds the latest layout in memory and exposes save/read endpoints.
"""

import json
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from pydantic import TypeAdapter, ValidationError

from .config import Settings
from .schemas import PlacedElementIn, SaveLayoutResponse, HealthResponse
from .store import LayoutStore, InMemoryLayoutStore

logger = logging.getLogger(__name__)

VERSION = "1.0.0"

_layout_adapter = TypeAdapter(List[PlacedElementIn])

router = APIRouter(prefix="/api", tags=["layout"])


def get_store(request: Request) -> LayoutStore:
    return request.app.state.store


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def validate_layout(body) -> list:
    """Parse a raw body into wire dicts, raising a 422 on a malformed shape."""
    try:
        elements = _layout_adapter.validate_python(body)
    except ValidationError as e:
        raise RequestValidationError(
            [dict(err, loc=("body", *err["loc"])) for err in e.errors(include_url=False)]
        ) from e
    seen = set()
    for i, el in enumerate(elements):
        if el.id in seen:
            raise RequestValidationError([{
                "type": "value_error",
                "loc": ("body", i, "id"),
                "msg": f"Value error, duplicate element id {el.id}",
                "input": el.id,
            }])
        seen.add(el.id)
    return [el.model_dump() for el in elements]


@router.post("/save-layout", response_model=SaveLayoutResponse)
async def save_layout(request: Request,
                      store: LayoutStore = Depends(get_store),
                      settings: Settings = Depends(get_settings)):
    """Replace the stored layout with the request body."""
    try:
        body = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        raise HTTPException(status_code=400, detail="Request body is not valid JSON")

    layout = validate_layout(body) if settings.validate_layout else body
    store.save(layout)
    logger.info("Layout saved successfully.")
    return SaveLayoutResponse()


@router.get("/get-layout")
async def get_layout(store: LayoutStore = Depends(get_store)):
    """Return the stored layout, or [] if nothing was saved yet."""
    return store.load()


def create_app(store: Optional[LayoutStore] = None,
               settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings.from_env()

    app = FastAPI(
        title="Floor Plan Layout Store",
        description="In-memory storage for the floor plan editor layout",
        version=VERSION,
    )
    app.state.store = store if store is not None else InMemoryLayoutStore()
    app.state.settings = settings

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router)

    @app.get("/api/health", response_model=HealthResponse)
    async def health_check():
        """Health check endpoint."""
        return HealthResponse(version=VERSION)

    return app

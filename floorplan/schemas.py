"""Pydantic schemas for API request/response validation."""

from typing import Literal
from pydantic import BaseModel, ConfigDict, Field, field_validator


# ---------- Layout ----------
class PlacedElementIn(BaseModel):
    model_config = ConfigDict(strict=True, extra="forbid", allow_inf_nan=False)

    id: int
    type: Literal["Table", "Chair", "Door"]
    x: float
    y: float
    width: float = Field(..., ge=10)
    height: float = Field(..., ge=10)
    rotation: int = Field(..., ge=0, lt=360)

    @field_validator("rotation")
    @classmethod
    def rotation_step(cls, v: int) -> int:
        if v % 45:
            raise ValueError("rotation must be a multiple of 45")
        return v


class SaveLayoutResponse(BaseModel):
    message: str = "Layout saved successfully."


# ---------- Health ----------
class HealthResponse(BaseModel):
    status: str = "ok"
    version: str

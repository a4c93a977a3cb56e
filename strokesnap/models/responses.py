"""API response models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from strokesnap import __version__
from strokesnap.models.shape import Point, ShapeAnalysis


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = __version__
    shape_kinds: list[str] = Field(default_factory=list)


class ClassifyResponse(BaseModel):
    analysis: ShapeAnalysis
    point_count: int = 0
    processing_time_ms: float = 0.0


class SimplifyResponse(BaseModel):
    points: list[Point] = Field(default_factory=list)
    original_count: int = 0
    simplified_count: int = 0


class SnapResponse(BaseModel):
    analysis: ShapeAnalysis
    replaced: bool = False
    element: dict[str, Any] | None = None
    svg: str | None = None

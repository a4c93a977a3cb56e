"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from strokesnap.models.shape import Point


class StrokeRequest(BaseModel):
    points: list[Point] = Field(..., description="Ordered pointer samples of one stroke")


class SimplifyRequest(StrokeRequest):
    epsilon: float = Field(..., gt=0, description="Maximum allowed deviation")


class Style(BaseModel):
    stroke: str = Field(default="#000000", description="Stroke color")
    stroke_width: float = Field(default=2.0, gt=0, description="Stroke width")


class SnapRequest(StrokeRequest):
    style: Style = Field(default_factory=Style)
    canvas_width: float = Field(default=800.0, gt=0)
    canvas_height: float = Field(default=600.0, gt=0)

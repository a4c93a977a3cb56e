"""Shape analysis data model — the classifier's tagged result type."""

from __future__ import annotations

import enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class ShapeKind(str, enum.Enum):
    LINE = "line"
    RECT = "rect"
    TRIANGLE = "triangle"
    CIRCLE = "circle"
    UNKNOWN = "unknown"


class Point(BaseModel):
    model_config = ConfigDict(frozen=True)

    x: float
    y: float


class LineData(BaseModel):
    model_config = ConfigDict(frozen=True)

    start: Point
    end: Point


class RectData(BaseModel):
    model_config = ConfigDict(frozen=True)

    left: float
    top: float
    width: float
    height: float


class TriangleData(BaseModel):
    """Bounding box of the triangle (center + extent), not its vertices."""

    model_config = ConfigDict(frozen=True)

    center_x: float
    center_y: float
    width: float
    height: float


class CircleData(BaseModel):
    model_config = ConfigDict(frozen=True)

    center_x: float
    center_y: float
    radius: float


class _Analysis(BaseModel):
    model_config = ConfigDict(frozen=True)

    # Kind-local confidence; not comparable across kinds.
    score: float = Field(default=0.0, ge=0.0, le=1.0)


class LineAnalysis(_Analysis):
    type: Literal["line"] = "line"
    data: LineData


class RectAnalysis(_Analysis):
    type: Literal["rect"] = "rect"
    data: RectData


class TriangleAnalysis(_Analysis):
    type: Literal["triangle"] = "triangle"
    data: TriangleData


class CircleAnalysis(_Analysis):
    type: Literal["circle"] = "circle"
    data: CircleData


class UnknownAnalysis(_Analysis):
    type: Literal["unknown"] = "unknown"
    data: None = None


ShapeAnalysis = Annotated[
    Union[LineAnalysis, RectAnalysis, TriangleAnalysis, CircleAnalysis, UnknownAnalysis],
    Field(discriminator="type"),
]

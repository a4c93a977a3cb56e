"""Replacement primitives for classified strokes.

A drawing surface that accepts a classification discards the freehand stroke
and draws one of these instead, carrying over its own stroke style.
"""

from __future__ import annotations

from typing import Any

from strokesnap.models.requests import Style
from strokesnap.models.shape import ShapeAnalysis, ShapeKind

# Two decimals is sub-pixel at any zoom the surface supports.
_PRECISION = 2


def _r(value: float) -> float:
    return round(value, _PRECISION)


def triangle_vertices(
    center_x: float, center_y: float, width: float, height: float
) -> list[tuple[float, float]]:
    """Isosceles triangle inscribed in the box: apex top-center, base along the bottom."""
    half_w = width / 2
    half_h = height / 2
    return [
        (center_x, center_y - half_h),
        (center_x + half_w, center_y + half_h),
        (center_x - half_w, center_y + half_h),
    ]


def analysis_to_element(analysis: ShapeAnalysis, style: Style | None = None) -> dict[str, Any] | None:
    """Build the SVG element that replaces a classified stroke.

    Returns None for ``unknown``: the freehand stroke stays as drawn.
    """
    style = style or Style()
    common = {
        "stroke": style.stroke,
        "stroke-width": style.stroke_width,
        "fill": "none",
    }
    data = analysis.data

    if analysis.type == ShapeKind.CIRCLE:
        return {
            "tag": "circle",
            "cx": _r(data.center_x),
            "cy": _r(data.center_y),
            "r": _r(data.radius),
            **common,
        }

    if analysis.type == ShapeKind.RECT:
        return {
            "tag": "rect",
            "x": _r(data.left),
            "y": _r(data.top),
            "width": _r(data.width),
            "height": _r(data.height),
            **common,
        }

    if analysis.type == ShapeKind.TRIANGLE:
        vertices = triangle_vertices(data.center_x, data.center_y, data.width, data.height)
        return {
            "tag": "polygon",
            "points": " ".join(f"{_r(x)},{_r(y)}" for x, y in vertices),
            **common,
        }

    if analysis.type == ShapeKind.LINE:
        return {
            "tag": "line",
            "x1": _r(data.start.x),
            "y1": _r(data.start.y),
            "x2": _r(data.end.x),
            "y2": _r(data.end.y),
            **common,
        }

    return None

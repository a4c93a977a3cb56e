"""Freehand stroke classifier.

Maps one completed stroke to a single ShapeAnalysis through a fixed,
priority-ordered chain of steps:

  1. fewer than 10 points                         → unknown
  2. linearity (displacement / path) > 0.94       → line
  3. degenerate bounding box                      → unknown
     fill ratio > 0.80                            → rect
  4. RDP with epsilon = max(5, 4% of diagonal), merge closed-loop endpoint
  5. 3 vertices                                   → triangle
     4-6 vertices                                 → rect
  6. radial variance < 0.05 AND fill > 0.6        → circle
  7. 0.35 < fill < 0.65                           → triangle (fuzzy)
  8. otherwise                                    → unknown

Order matters: a thin rectangle is meant to be caught by the line test
before any area test sees it. Thresholds are fixed values, not tunables.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray

from strokesnap.models.shape import (
    CircleAnalysis,
    CircleData,
    LineAnalysis,
    LineData,
    Point,
    RectAnalysis,
    RectData,
    ShapeAnalysis,
    TriangleAnalysis,
    TriangleData,
    UnknownAnalysis,
)
from strokesnap.utils.contour import rdp_simplify
from strokesnap.utils.geometry import (
    BoundingBox,
    as_points,
    bounding_box,
    distance,
    fill_ratio,
    path_length,
    radial_distances,
)

logger = logging.getLogger(__name__)

MIN_POINTS = 10

# Displacement / path length. 1.0 = perfectly straight.
LINEARITY_THRESHOLD = 0.94

# A circle fills at most pi/4 ~= 0.785 of its box, so anything above 0.80
# is taken as a rectangle without vertex analysis.
RECT_FILL_THRESHOLD = 0.80

# Simplification tolerance: max(5, 4% of the bbox diagonal).
MIN_EPSILON = 5.0
EPSILON_DIAGONAL_RATIO = 0.04

# Endpoints within 15% of the diagonal close the loop.
CLOSED_LOOP_RATIO = 0.15
CLOSED_MERGE_EPSILONS = 2.0

TRIANGLE_VERTICES = 3
RECT_MIN_VERTICES = 4
RECT_MAX_VERTICES = 6  # extra corners tolerated for jitter
VERTEX_SCORE = 0.9

CIRCLE_MAX_VARIANCE = 0.05
CIRCLE_MIN_FILL = 0.6

FUZZY_TRIANGLE_MIN_FILL = 0.35
FUZZY_TRIANGLE_MAX_FILL = 0.65
FUZZY_TRIANGLE_SCORE = 0.7


@dataclass
class _Stroke:
    """Working data shared by the steps of one classification."""

    points: NDArray[np.float64]
    box: BoundingBox | None = None
    fill: float = 0.0
    epsilon: float = 0.0
    vertices: NDArray[np.float64] | None = None


Step = Callable[[_Stroke], "ShapeAnalysis | None"]


def _clamp(score: float) -> float:
    return min(max(score, 0.0), 1.0)


def _rect(box: BoundingBox, score: float) -> RectAnalysis:
    return RectAnalysis(
        score=_clamp(score),
        data=RectData(left=box.min_x, top=box.min_y, width=box.width, height=box.height),
    )


def _triangle(box: BoundingBox, score: float) -> TriangleAnalysis:
    cx, cy = box.center
    return TriangleAnalysis(
        score=score,
        data=TriangleData(center_x=cx, center_y=cy, width=box.width, height=box.height),
    )


def _check_length(stroke: _Stroke) -> ShapeAnalysis | None:
    if len(stroke.points) < MIN_POINTS:
        return UnknownAnalysis()
    return None


def _check_line(stroke: _Stroke) -> ShapeAnalysis | None:
    pts = stroke.points
    total = path_length(pts)
    if total == 0:
        return None

    linearity = distance(pts[0], pts[-1]) / total
    if linearity > LINEARITY_THRESHOLD:
        start = Point(x=float(pts[0, 0]), y=float(pts[0, 1]))
        end = Point(x=float(pts[-1, 0]), y=float(pts[-1, 1]))
        return LineAnalysis(score=_clamp(linearity), data=LineData(start=start, end=end))
    return None


def _check_fill(stroke: _Stroke) -> ShapeAnalysis | None:
    stroke.box = bounding_box(stroke.points)
    ratio = fill_ratio(stroke.points, stroke.box)
    if ratio is None:
        return UnknownAnalysis()

    stroke.fill = ratio
    if ratio > RECT_FILL_THRESHOLD:
        return _rect(stroke.box, ratio)
    return None


def _simplify(stroke: _Stroke) -> ShapeAnalysis | None:
    pts = stroke.points
    diag = stroke.box.diagonal
    stroke.epsilon = max(MIN_EPSILON, diag * EPSILON_DIAGONAL_RATIO)
    simplified = rdp_simplify(pts, stroke.epsilon)

    closing = diag * CLOSED_LOOP_RATIO
    is_closed = (
        distance(simplified[0], simplified[-1]) < closing
        or distance(pts[0], pts[-1]) < closing
    )

    vertices = simplified
    if is_closed and len(vertices) > 3:
        if distance(vertices[0], vertices[-1]) < stroke.epsilon * CLOSED_MERGE_EPSILONS:
            vertices = vertices[:-1]

    stroke.vertices = vertices
    return None


def _check_vertices(stroke: _Stroke) -> ShapeAnalysis | None:
    count = len(stroke.vertices)
    if count == TRIANGLE_VERTICES:
        return _triangle(stroke.box, VERTEX_SCORE)
    if RECT_MIN_VERTICES <= count <= RECT_MAX_VERTICES:
        return _rect(stroke.box, VERTEX_SCORE)
    return None


def _check_circle(stroke: _Stroke) -> ShapeAnalysis | None:
    center = stroke.box.center
    radii = radial_distances(stroke.points, center)
    avg_radius = float(np.mean(radii))
    if avg_radius == 0:
        return None

    variance = float(np.mean((radii - avg_radius) ** 2))
    normalized = variance / (avg_radius * avg_radius)

    if normalized < CIRCLE_MAX_VARIANCE and stroke.fill > CIRCLE_MIN_FILL:
        return CircleAnalysis(
            score=_clamp(1 - normalized),
            data=CircleData(center_x=center[0], center_y=center[1], radius=avg_radius),
        )
    return None


def _check_fuzzy_triangle(stroke: _Stroke) -> ShapeAnalysis | None:
    if FUZZY_TRIANGLE_MIN_FILL < stroke.fill < FUZZY_TRIANGLE_MAX_FILL:
        return _triangle(stroke.box, FUZZY_TRIANGLE_SCORE)
    return None


_STEPS: tuple[Step, ...] = (
    _check_length,
    _check_line,
    _check_fill,
    _simplify,
    _check_vertices,
    _check_circle,
    _check_fuzzy_triangle,
)


def analyze_shape(points: Iterable[Any]) -> ShapeAnalysis:
    """Classify one freehand stroke as line, rect, triangle, circle or unknown.

    ``points`` is the ordered sample sequence of the stroke: (x, y) pairs,
    Point models, or an (N, 2) array. It is copied, never modified. The
    function keeps no state between calls.
    """
    stroke = _Stroke(points=as_points(points))

    for step in _STEPS:
        result = step(stroke)
        if result is not None:
            logger.debug(
                "Stroke of %d points -> %s (score %.3f) at %s",
                len(stroke.points),
                result.type,
                result.score,
                step.__name__,
            )
            return result

    logger.debug(
        "Stroke of %d points -> unknown (%s vertices, fill %.3f)",
        len(stroke.points),
        len(stroke.vertices) if stroke.vertices is not None else "no",
        stroke.fill,
    )
    return UnknownAnalysis()

"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray


def as_points(points: Iterable[Any]) -> NDArray[np.float64]:
    """Copy a stroke into an (N, 2) float array.

    Accepts an (N, 2) array, (x, y) pairs, or objects with ``x``/``y``
    attributes. The caller's sequence is never modified.
    """
    if isinstance(points, np.ndarray):
        arr = np.array(points, dtype=np.float64)
    else:
        arr = np.array(
            [(p.x, p.y) if hasattr(p, "x") else tuple(p) for p in points],
            dtype=np.float64,
        )
    if arr.size == 0:
        return np.empty((0, 2))
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"Expected an (N, 2) point sequence, got shape {arr.shape}")
    return arr


def distance(p1: NDArray[np.float64], p2: NDArray[np.float64]) -> float:
    """Euclidean distance between two points."""
    return math.hypot(float(p2[0] - p1[0]), float(p2[1] - p1[1]))


def path_length(points: NDArray[np.float64]) -> float:
    """Sum of consecutive distances along the stroke. 0 for <= 1 point."""
    if len(points) < 2:
        return 0.0
    diffs = np.diff(points, axis=0)
    return float(np.sum(np.hypot(diffs[:, 0], diffs[:, 1])))


@dataclass(frozen=True)
class BoundingBox:
    min_x: float
    max_x: float
    min_y: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def diagonal(self) -> float:
        return math.sqrt(self.width * self.width + self.height * self.height)

    @property
    def center(self) -> tuple[float, float]:
        return (self.min_x + self.width / 2, self.min_y + self.height / 2)

    @property
    def is_degenerate(self) -> bool:
        """Zero width or zero height: no area to compare against."""
        return self.width == 0 or self.height == 0


def bounding_box(points: NDArray[np.float64]) -> BoundingBox:
    """Componentwise min/max of x and y."""
    if len(points) == 0:
        return BoundingBox(0.0, 0.0, 0.0, 0.0)
    return BoundingBox(
        min_x=float(np.min(points[:, 0])),
        max_x=float(np.max(points[:, 0])),
        min_y=float(np.min(points[:, 1])),
        max_y=float(np.max(points[:, 1])),
    )


def signed_area(points: NDArray[np.float64]) -> float:
    """Shoelace formula, wrapping last -> first. Sign follows the winding."""
    if len(points) < 3:
        return 0.0
    x = points[:, 0]
    y = points[:, 1]
    x_next = np.roll(x, -1)
    y_next = np.roll(y, -1)
    return float(0.5 * np.sum(x * y_next - x_next * y))


def polygon_area(points: NDArray[np.float64]) -> float:
    """Unsigned shoelace area of the stroke treated as a closed polygon.

    Open or self-intersecting strokes are closed with a straight edge back to
    the start; the result is an approximate "fill", not a rigorous enclosed area.
    """
    return abs(signed_area(points))


def fill_ratio(points: NDArray[np.float64], box: BoundingBox | None = None) -> float | None:
    """Fraction of the bounding box covered by the stroke's polygon area.

    Returns None for a zero-width or zero-height box.
    """
    if box is None:
        box = bounding_box(points)
    if box.is_degenerate:
        return None
    return polygon_area(points) / (box.width * box.height)


def radial_distances(
    points: NDArray[np.float64], center: tuple[float, float]
) -> NDArray[np.float64]:
    """Distance from ``center`` to each point."""
    cx, cy = center
    return np.hypot(points[:, 0] - cx, points[:, 1] - cy)

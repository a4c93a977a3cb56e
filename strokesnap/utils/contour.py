"""Polyline simplification — Ramer-Douglas-Peucker."""

from __future__ import annotations

import math
from collections.abc import Iterable
from typing import Any

import numpy as np
from numpy.typing import NDArray

from strokesnap.utils.geometry import as_points


def perpendicular_distances(
    points: NDArray[np.float64],
    start: NDArray[np.float64],
    end: NDArray[np.float64],
) -> NDArray[np.float64]:
    """Distance from each point to the infinite line through start and end.

    A zero-length chord degrades to the plain distance from ``start``.
    """
    dx = float(end[0] - start[0])
    dy = float(end[1] - start[1])
    offsets = points - start

    length = math.hypot(dx, dy)
    if length == 0:
        return np.hypot(offsets[:, 0], offsets[:, 1])

    dx /= length
    dy /= length
    return np.abs(offsets[:, 0] * dy - offsets[:, 1] * dx)


def perpendicular_distance(
    point: NDArray[np.float64],
    start: NDArray[np.float64],
    end: NDArray[np.float64],
) -> float:
    return float(perpendicular_distances(np.atleast_2d(point), start, end)[0])


def rdp_simplify(
    points: Iterable[Any],
    epsilon: float,
) -> NDArray[np.float64]:
    """Ramer-Douglas-Peucker line simplification.

    Returns an ordered subsequence of ``points`` that keeps the first and last
    point and every point needed to stay within ``epsilon`` of the input.
    Accepts the same point forms as ``as_points``; the input is copied.
    Fewer than 3 points come back unchanged, as an (N, 2) array.

    Runs over an explicit stack of index ranges instead of recursing, so long
    strokes cannot exhaust the call stack. The kept set is identical to the
    recursive formulation: each range splits at its first point of maximum
    deviation when that deviation exceeds epsilon.
    """
    points = as_points(points)
    if len(points) < 3:
        return points

    keep = np.zeros(len(points), dtype=bool)
    keep[0] = keep[-1] = True

    stack = [(0, len(points) - 1)]
    while stack:
        first, last = stack.pop()
        if last - first < 2:
            continue

        distances = perpendicular_distances(points[first + 1 : last], points[first], points[last])
        max_idx = int(np.argmax(distances))

        if distances[max_idx] > epsilon:
            split = first + 1 + max_idx
            keep[split] = True
            stack.append((split, last))
            stack.append((first, split))

    return points[keep]

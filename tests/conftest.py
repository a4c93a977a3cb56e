"""Shared test data: synthetic strokes as a pointer would sample them."""

from __future__ import annotations

import math


def line_stroke(a, b, n=20):
    """n evenly spaced samples from a to b (inclusive)."""
    return [
        (a[0] + (b[0] - a[0]) * i / (n - 1), a[1] + (b[1] - a[1]) * i / (n - 1))
        for i in range(n)
    ]


def polyline_stroke(vertices, per_edge=20):
    """Trace the edges between consecutive vertices, ending exactly on the last one."""
    pts = []
    for a, b in zip(vertices, vertices[1:]):
        pts.extend(line_stroke(a, b, per_edge + 1)[:-1])
    pts.append(tuple(vertices[-1]))
    return pts


def rect_stroke(left, top, width, height, per_edge=15):
    corners = [
        (left, top),
        (left + width, top),
        (left + width, top + height),
        (left, top + height),
        (left, top),
    ]
    return polyline_stroke(corners, per_edge)


def circle_stroke(cx, cy, r, n=64):
    return [
        (cx + r * math.cos(2 * math.pi * i / n), cy + r * math.sin(2 * math.pi * i / n))
        for i in range(n)
    ]


def star_stroke(cx, cy, outer, inner, tips=5, per_edge=10):
    vertices = []
    for i in range(2 * tips):
        radius = outer if i % 2 == 0 else inner
        angle = -math.pi / 2 + math.pi * i / tips
        vertices.append((cx + radius * math.cos(angle), cy + radius * math.sin(angle)))
    vertices.append(vertices[0])
    return polyline_stroke(vertices, per_edge)


def wave_stroke(x0=0.0, y0=150.0, length=400.0, amplitude=50.0, periods=4, n=161):
    return [
        (
            x0 + length * i / (n - 1),
            y0 + amplitude * math.sin(2 * math.pi * periods * i / (n - 1)),
        )
        for i in range(n)
    ]


# Reference shapes
LINE_START = (10.0, 20.0)
LINE_END = (310.0, 220.0)
LINE_POINTS = line_stroke(LINE_START, LINE_END, 20)

RECT_BOX = (50.0, 40.0, 200.0, 120.0)  # left, top, width, height
RECT_POINTS = rect_stroke(*RECT_BOX)

CIRCLE_CENTER = (200.0, 150.0)
CIRCLE_RADIUS = 80.0
CIRCLE_POINTS = circle_stroke(*CIRCLE_CENTER, CIRCLE_RADIUS)

TRIANGLE_VERTICES = [(100.0, 300.0), (300.0, 300.0), (200.0, 100.0), (100.0, 300.0)]
TRIANGLE_POINTS = polyline_stroke(TRIANGLE_VERTICES)

DIAMOND_VERTICES = [(200.0, 100.0), (300.0, 200.0), (200.0, 300.0), (100.0, 200.0), (200.0, 100.0)]
DIAMOND_POINTS = polyline_stroke(DIAMOND_VERTICES)

STAR_POINTS = star_stroke(200.0, 200.0, 100.0, 50.0)

WAVE_POINTS = wave_stroke()

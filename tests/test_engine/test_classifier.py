"""Tests for the freehand stroke classifier."""

import logging
import math

import numpy as np
import pytest
from pydantic import ValidationError

from strokesnap.engine.classifier import analyze_shape
from strokesnap.models.shape import Point, ShapeKind
from tests.conftest import (
    CIRCLE_CENTER,
    CIRCLE_POINTS,
    CIRCLE_RADIUS,
    DIAMOND_POINTS,
    LINE_END,
    LINE_POINTS,
    LINE_START,
    RECT_BOX,
    RECT_POINTS,
    STAR_POINTS,
    TRIANGLE_POINTS,
    WAVE_POINTS,
    circle_stroke,
    line_stroke,
    rect_stroke,
)


def test_line_recovery():
    result = analyze_shape(LINE_POINTS)
    assert result.type == ShapeKind.LINE
    assert result.score > 0.94
    assert result.data.start == Point(x=LINE_START[0], y=LINE_START[1])
    assert result.data.end == Point(x=LINE_END[0], y=LINE_END[1])


def test_slightly_wobbly_line_is_still_a_line():
    pts = [(x, 100.0 + (1.0 if i % 2 else -1.0)) for i, x in enumerate(range(0, 300, 10))]
    result = analyze_shape(pts)
    assert result.type == ShapeKind.LINE
    assert 0.94 < result.score <= 1.0


def test_rect_recovery():
    result = analyze_shape(RECT_POINTS)
    assert result.type == ShapeKind.RECT
    left, top, width, height = RECT_BOX
    assert result.data.left == pytest.approx(left)
    assert result.data.top == pytest.approx(top)
    assert result.data.width == pytest.approx(width)
    assert result.data.height == pytest.approx(height)
    # Shortcut through fill ratio: score is the ratio itself.
    assert result.score == pytest.approx(1.0)


def test_stroke_traced_twice_keeps_score_in_range():
    pts = rect_stroke(*RECT_BOX) + rect_stroke(*RECT_BOX)[1:]
    result = analyze_shape(pts)
    assert result.type == ShapeKind.RECT
    assert result.score <= 1.0


def test_circle_recovery():
    result = analyze_shape(CIRCLE_POINTS)
    assert result.type == ShapeKind.CIRCLE
    assert result.data.center_x == pytest.approx(CIRCLE_CENTER[0])
    assert result.data.center_y == pytest.approx(CIRCLE_CENTER[1])
    assert result.data.radius == pytest.approx(CIRCLE_RADIUS)
    assert result.score == pytest.approx(1.0, abs=1e-6)


def test_small_circle_uses_minimum_epsilon():
    result = analyze_shape(circle_stroke(50.0, 50.0, 40.0, n=64))
    assert result.type == ShapeKind.CIRCLE
    assert result.data.radius == pytest.approx(40.0)


def test_triangle_recovery():
    result = analyze_shape(TRIANGLE_POINTS)
    assert result.type == ShapeKind.TRIANGLE
    assert result.score == 0.9
    # Bounding box of (100,300) (300,300) (200,100).
    assert result.data.center_x == pytest.approx(200.0)
    assert result.data.center_y == pytest.approx(200.0)
    assert result.data.width == pytest.approx(200.0)
    assert result.data.height == pytest.approx(200.0)


def test_four_corners_become_bounding_rect():
    result = analyze_shape(DIAMOND_POINTS)
    assert result.type == ShapeKind.RECT
    assert result.score == 0.9
    assert result.data.left == pytest.approx(100.0)
    assert result.data.top == pytest.approx(100.0)
    assert result.data.width == pytest.approx(200.0)
    assert result.data.height == pytest.approx(200.0)


def test_many_corners_mid_fill_is_fuzzy_triangle():
    result = analyze_shape(STAR_POINTS)
    assert result.type == ShapeKind.TRIANGLE
    assert result.score == 0.7


def test_wave_is_unknown():
    result = analyze_shape(WAVE_POINTS)
    assert result.type == ShapeKind.UNKNOWN
    assert result.score == 0.0
    assert result.data is None


@pytest.mark.parametrize("n", [0, 1, 2, 5, 9])
def test_short_strokes_are_unknown(n):
    result = analyze_shape(line_stroke((0.0, 0.0), (100.0, 0.0), n) if n > 1 else [(0.0, 0.0)] * n)
    assert result.type == ShapeKind.UNKNOWN
    assert result.score == 0.0


def test_nine_points_of_a_circle_are_unknown():
    assert analyze_shape(CIRCLE_POINTS[:9]).type == ShapeKind.UNKNOWN


def test_single_location_is_unknown():
    result = analyze_shape([(5.0, 5.0)] * 12)
    assert result.type == ShapeKind.UNKNOWN
    assert result.score == 0.0


def test_zero_width_back_and_forth_is_unknown():
    up = line_stroke((50.0, 0.0), (50.0, 100.0), 10)
    down = line_stroke((50.0, 100.0), (50.0, 0.0), 10)[1:]
    result = analyze_shape(up + down)
    assert result.type == ShapeKind.UNKNOWN


def test_idempotent():
    for stroke in (LINE_POINTS, RECT_POINTS, CIRCLE_POINTS, TRIANGLE_POINTS, WAVE_POINTS):
        assert analyze_shape(stroke) == analyze_shape(stroke)


def test_input_not_mutated():
    pts = [tuple(p) for p in CIRCLE_POINTS]
    before = list(pts)
    analyze_shape(pts)
    assert pts == before

    arr = np.array(CIRCLE_POINTS)
    arr_before = arr.copy()
    analyze_shape(arr)
    assert np.array_equal(arr, arr_before)


def test_accepts_point_models():
    models = [Point(x=x, y=y) for x, y in TRIANGLE_POINTS]
    assert analyze_shape(models) == analyze_shape(TRIANGLE_POINTS)


def test_result_is_frozen():
    result = analyze_shape(RECT_POINTS)
    with pytest.raises(ValidationError):
        result.score = 0.5


def test_decision_is_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="strokesnap.engine.classifier"):
        analyze_shape(CIRCLE_POINTS)
    assert any("circle" in rec.getMessage() for rec in caplog.records)


def test_circle_score_drops_with_noise():
    noisy = [
        (200.0 + (80.0 + (4.0 if i % 2 else -4.0)) * math.cos(2 * math.pi * i / 64),
         150.0 + (80.0 + (4.0 if i % 2 else -4.0)) * math.sin(2 * math.pi * i / 64))
        for i in range(64)
    ]
    result = analyze_shape(noisy)
    assert result.type == ShapeKind.CIRCLE
    assert result.score < analyze_shape(CIRCLE_POINTS).score


@pytest.mark.parametrize(
    "start, end",
    [((0.0, 50.0), (300.0, 50.0)), ((40.0, 10.0), (40.0, 250.0))],
)
def test_axis_aligned_line_is_line_despite_flat_box(start, end):
    result = analyze_shape(line_stroke(start, end, 20))
    assert result.type == ShapeKind.LINE
    assert result.data.start == Point(x=start[0], y=start[1])
    assert result.data.end == Point(x=end[0], y=end[1])
    assert result.score == pytest.approx(1.0)

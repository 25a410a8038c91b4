"""Tests for the $1 normalization pipeline."""

import math

import pytest

from gesture_recognizer.errors import DegeneratePathError
from gesture_recognizer.gestures.normalization import (
    normalize,
    resample,
    rotate_to_zero,
    scale_to_square,
    translate_to_origin,
)
from gesture_recognizer.gestures.shapes import generate_circle_points, generate_heart_points
from gesture_recognizer.utils.gesture_utils import GeometryUtils, Point

SQUARE_SIZE = 250.0

SQUIGGLE = [Point(0, 0), Point(40, 10), Point(70, 60), Point(50, 90), Point(10, 70), Point(30, 40)]


def rigid_transform(points, angle, dx, dy):
    pivot = Point(17, -4)
    return [p.rotate(angle, pivot).translate(dx, dy) for p in points]


class TestResample:

    @pytest.mark.parametrize("num_points", [2, 3, 16, 64, 200])
    @pytest.mark.parametrize("path", [
        [Point(0, 0), Point(100, 0)],
        SQUIGGLE,
        generate_heart_points(),
        [Point(0, 0), Point(0, 0), Point(10, 10), Point(10, 10), Point(20, 0)],
    ])
    def test_fixed_length(self, path, num_points):
        assert len(resample(path, num_points)) == num_points

    def test_keeps_endpoints(self):
        points = resample(SQUIGGLE, 64)
        assert points[0] == SQUIGGLE[0]
        assert points[-1].distance_to(SQUIGGLE[-1]) < 1e-6

    def test_even_spacing(self):
        points = resample([Point(0, 0), Point(30, 0), Point(30, 33)], 22)
        gaps = [a.distance_to(b) for a, b in zip(points, points[1:])]
        for gap in gaps:
            assert gap == pytest.approx(63.0 / 21)

    def test_does_not_mutate_input(self):
        path = list(SQUIGGLE)
        resample(path, 64)
        assert path == SQUIGGLE

    def test_single_point(self):
        with pytest.raises(DegeneratePathError):
            resample([Point(1, 1)], 64)

    def test_zero_length(self):
        with pytest.raises(DegeneratePathError):
            resample([Point(1, 1), Point(1, 1), Point(1, 1)], 64)

    def test_too_few_output_points(self):
        with pytest.raises(ValueError):
            resample(SQUIGGLE, 1)


class TestRotateToZero:

    def test_first_point_left_of_centroid(self):
        points = rotate_to_zero(resample(SQUIGGLE, 64))
        centroid = GeometryUtils.calculate_centroid(points)
        assert points[0].y == pytest.approx(centroid.y, abs=1e-9)
        assert points[0].x < centroid.x

    def test_preserves_shape(self):
        original = resample(SQUIGGLE, 64)
        rotated = rotate_to_zero(original)
        assert GeometryUtils.calculate_path_length(rotated) == pytest.approx(
            GeometryUtils.calculate_path_length(original))


class TestScaleToSquare:

    def test_two_dimensional_path_fills_square(self):
        box = GeometryUtils.bounding_box(scale_to_square(SQUIGGLE, SQUARE_SIZE))
        assert box.width == pytest.approx(SQUARE_SIZE)
        assert box.height == pytest.approx(SQUARE_SIZE)

    def test_horizontal_line(self):
        points = scale_to_square([Point(0, 5), Point(40, 5)], SQUARE_SIZE)
        box = GeometryUtils.bounding_box(points)
        assert box.width == pytest.approx(SQUARE_SIZE)
        assert box.height == 0.0

    def test_vertical_line(self):
        points = scale_to_square([Point(5, 0), Point(5, 80)], SQUARE_SIZE)
        box = GeometryUtils.bounding_box(points)
        assert box.width == 0.0
        assert box.height == pytest.approx(SQUARE_SIZE)

    def test_nearly_flat_path_keeps_proportions(self):
        points = scale_to_square([Point(0, 0), Point(50, 2), Point(100, 0)], SQUARE_SIZE)
        box = GeometryUtils.bounding_box(points)
        assert box.width == pytest.approx(SQUARE_SIZE)
        assert box.height == pytest.approx(5.0)

    def test_threshold_is_configurable(self):
        path = [Point(0, 0), Point(50, 2), Point(100, 0)]
        box = GeometryUtils.bounding_box(scale_to_square(path, SQUARE_SIZE, one_d_threshold=0.0))
        assert box.height == pytest.approx(SQUARE_SIZE)

    def test_single_location(self):
        with pytest.raises(DegeneratePathError):
            scale_to_square([Point(3, 3), Point(3, 3)], SQUARE_SIZE)


class TestNormalize:

    def test_canonical_form(self):
        points = normalize(generate_heart_points())
        assert len(points) == 64
        centroid = GeometryUtils.calculate_centroid(points)
        assert centroid.x == pytest.approx(0.0, abs=1e-9)
        assert centroid.y == pytest.approx(0.0, abs=1e-9)

    def test_translate_to_origin(self):
        points = translate_to_origin([Point(10, 10), Point(20, 30)])
        assert points == (Point(-5, -10), Point(5, 10))

    @pytest.mark.parametrize("path", [SQUIGGLE, generate_heart_points(),
                                      [Point(0, 0), Point(50, 1), Point(100, 0)]])
    @pytest.mark.parametrize("angle,dx,dy", [(0.7, 40, -25), (-2.1, -300, 12), (math.pi, 0, 0)])
    def test_rigid_transform_invariance(self, path, angle, dx, dy):
        expected = normalize(path)
        actual = normalize(rigid_transform(path, angle, dx, dy))
        for p, q in zip(expected, actual):
            assert p.distance_to(q) < 1e-6 * SQUARE_SIZE

    def test_circle_start_point_does_not_matter(self):
        # Rotating a circle is the same as starting it elsewhere
        first = normalize(generate_circle_points(50, 64, closed=True))
        shifted = [p.rotate(1.0, Point(0, 0)) for p in generate_circle_points(50, 64, closed=True)]
        second = normalize(shifted)
        assert GeometryUtils.pointwise_distance(first, second) < 1e-6

    def test_accepts_raw_pairs_and_dicts(self):
        points = [Point(0, 0), Point(40, 10), Point(70, 60), Point(10, 70)]
        expected = normalize(points)
        assert normalize([(p.x, p.y) for p in points]) == expected
        assert normalize([{'x': p.x, 'y': p.y} for p in points]) == expected

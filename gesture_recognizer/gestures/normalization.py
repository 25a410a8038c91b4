"""
$1 normalization pipeline.

Turns a raw stroke into a canonical path: resampled to a fixed number of
evenly spaced points, rotated so the indicative angle is zero, scaled to
a reference square and centered on the origin. Templates and candidate
strokes go through exactly the same steps so their points can be
compared index by index.
"""

import math
import logging
from typing import Any, Iterable, Sequence, Tuple

from ..config.settings import RecognizerConfig
from ..errors import DegeneratePathError
from ..utils.gesture_utils import Point, ORIGIN, GeometryUtils, PathUtils

logger = logging.getLogger(__name__)


def resample(points: Sequence[Point], num_points: int = RecognizerConfig.RESAMPLE_SIZE) -> Tuple[Point, ...]:
    """
    Resample a path to num_points points evenly spaced along its length.

    Args:
        points: Ordered stroke points, at least two, with nonzero length
        num_points: Number of points in the result

    Returns:
        Tuple of exactly num_points points, starting at the first input point

    Raises:
        DegeneratePathError: If the path has fewer than 2 points or zero length
    """
    if num_points < 2:
        raise ValueError(f"Cannot resample to {num_points} points")
    if len(points) < 2:
        raise DegeneratePathError(f"Need at least 2 points, got {len(points)}")

    total_length = GeometryUtils.calculate_path_length(points)
    if total_length == 0:
        raise DegeneratePathError("Path has zero length")

    interval = total_length / (num_points - 1)
    D = 0.0
    resampled = [points[0]]

    for prev_point, curr_point in zip(points, points[1:]):
        start = prev_point
        d = start.distance_to(curr_point)
        while d > 0 and D + d >= interval and len(resampled) < num_points:
            q = start.interpolate(curr_point, (interval - D) / d)
            resampled.append(q)
            start = q
            d = start.distance_to(curr_point)
            D = 0.0
        D += d

    # sometimes we fall a rounding-error short of adding the last point
    while len(resampled) < num_points:
        resampled.append(points[-1])

    return tuple(resampled)


def indicative_angle(points: Sequence[Point]) -> float:
    """Rotation that puts the first point on the negative x axis of the centroid."""
    centroid = GeometryUtils.calculate_centroid(points)
    first = points[0]
    return math.pi - math.atan2(first.y - centroid.y, first.x - centroid.x)


def rotate_to_zero(points: Sequence[Point]) -> Tuple[Point, ...]:
    """Rotate points about their centroid by the indicative angle."""
    return GeometryUtils.rotate_points(points, indicative_angle(points))


def scale_to_square(points: Sequence[Point],
                    size: float = RecognizerConfig.SQUARE_SIZE,
                    one_d_threshold: float = RecognizerConfig.ONE_D_THRESHOLD) -> Tuple[Point, ...]:
    """
    Scale points to fit a size x size square.

    Two-dimensional gestures are scaled non-uniformly, as in the original
    $1 algorithm, so drawn proportions do not matter. A gesture whose
    bounding box is flat or nearly flat (aspect ratio at or below
    one_d_threshold) is scaled uniformly by its longest side instead, so a
    straight line keeps a zero extent rather than being divided by it.
    """
    box = GeometryUtils.bounding_box(points)
    if box.longest_side == 0:
        raise DegeneratePathError("Cannot scale a path with no extent")

    if box.aspect_ratio <= one_d_threshold:
        factor = size / box.longest_side
        logger.debug(f"One-dimensional path ({box.width:.2f}x{box.height:.2f}), scaling uniformly")
        return tuple(point.scale(factor, factor) for point in points)

    sx = size / box.width
    sy = size / box.height
    return tuple(point.scale(sx, sy) for point in points)


def translate_to(points: Sequence[Point], target: Point) -> Tuple[Point, ...]:
    """Translate points so their centroid lands on target."""
    centroid = GeometryUtils.calculate_centroid(points)
    dx = target.x - centroid.x
    dy = target.y - centroid.y
    return tuple(point.translate(dx, dy) for point in points)


def translate_to_origin(points: Sequence[Point]) -> Tuple[Point, ...]:
    return translate_to(points, ORIGIN)


def normalize(path: Iterable[Any],
              num_points: int = RecognizerConfig.RESAMPLE_SIZE,
              size: float = RecognizerConfig.SQUARE_SIZE,
              one_d_threshold: float = RecognizerConfig.ONE_D_THRESHOLD) -> Tuple[Point, ...]:
    """
    Run the full pipeline and return the canonical path.

    Args:
        path: Raw stroke as Points, (x, y) pairs or {'x', 'y'} dicts
    """
    canonical = resample(PathUtils.to_points(path), num_points)
    canonical = rotate_to_zero(canonical)
    canonical = scale_to_square(canonical, size, one_d_threshold)
    return translate_to_origin(canonical)

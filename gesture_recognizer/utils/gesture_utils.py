"""
Shared geometry utilities for gesture recognition.

Everything here is a pure function over ordered point sequences: nothing
is mutated in place and every transform returns a new tuple.
"""

import math
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from ..errors import DegeneratePathError, InvalidPathError, LengthMismatchError


@dataclass(frozen=True)
class Point:
    """Represents an immutable 2D point."""
    x: float
    y: float

    def __post_init__(self):
        object.__setattr__(self, 'x', float(self.x))
        object.__setattr__(self, 'y', float(self.y))

    def __repr__(self):
        return f"Point({self.x:.1f}, {self.y:.1f})"

    def __add__(self, other: 'Point') -> 'Point':
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: 'Point') -> 'Point':
        return Point(self.x - other.x, self.y - other.y)

    def distance_to(self, other: 'Point') -> float:
        """Calculate Euclidean distance to another point."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def interpolate(self, other: 'Point', alpha: float) -> 'Point':
        """Point at fraction alpha of the way from self to other."""
        return Point(self.x + alpha * (other.x - self.x),
                     self.y + alpha * (other.y - self.y))

    def rotate(self, angle: float, center: 'Point') -> 'Point':
        """Rotate counter-clockwise by angle (radians) around center."""
        dx = self.x - center.x
        dy = self.y - center.y
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        return Point(dx * cos_a - dy * sin_a + center.x,
                     dx * sin_a + dy * cos_a + center.y)

    def translate(self, dx: float, dy: float) -> 'Point':
        return Point(self.x + dx, self.y + dy)

    def scale(self, sx: float, sy: float) -> 'Point':
        return Point(self.x * sx, self.y * sy)


ORIGIN = Point(0.0, 0.0)


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned bounding box of a path."""
    center: Point
    width: float
    height: float

    @property
    def longest_side(self) -> float:
        return max(self.width, self.height)

    @property
    def aspect_ratio(self) -> float:
        """Short side over long side; 0 for a flat path."""
        longest = self.longest_side
        if longest == 0:
            return 0.0
        return min(self.width, self.height) / longest


class GeometryUtils:
    """Utility class for geometric calculations."""

    @staticmethod
    def calculate_centroid(points: Sequence[Point]) -> Point:
        """Calculate the centroid of a list of points."""
        if not points:
            raise DegeneratePathError("Cannot take the centroid of an empty path")
        sum_x = sum(p.x for p in points)
        sum_y = sum(p.y for p in points)
        return Point(sum_x / len(points), sum_y / len(points))

    @staticmethod
    def bounding_box(points: Sequence[Point]) -> BoundingBox:
        """Bounding box center, width and height of a path."""
        if not points:
            raise DegeneratePathError("Cannot bound an empty path")

        min_x = min(p.x for p in points)
        max_x = max(p.x for p in points)
        min_y = min(p.y for p in points)
        max_y = max(p.y for p in points)

        return BoundingBox(
            center=Point((min_x + max_x) / 2, (min_y + max_y) / 2),
            width=max_x - min_x,
            height=max_y - min_y
        )

    @staticmethod
    def rotate_points(points: Sequence[Point], angle: float,
                      centroid: Optional[Point] = None) -> Tuple[Point, ...]:
        """Rotate points around a centroid."""
        if centroid is None:
            centroid = GeometryUtils.calculate_centroid(points)
        return tuple(point.rotate(angle, centroid) for point in points)

    @staticmethod
    def calculate_path_length(points: Sequence[Point]) -> float:
        """Calculate total path length."""
        if len(points) < 2:
            return 0.0
        return sum(a.distance_to(b) for a, b in zip(points, points[1:]))

    @staticmethod
    def pointwise_distance(points1: Sequence[Point], points2: Sequence[Point]) -> float:
        """Mean distance between index-paired points of two equal-length paths."""
        if len(points1) != len(points2):
            raise LengthMismatchError(len(points1), len(points2))
        if not points1:
            raise DegeneratePathError("Cannot compare empty paths")

        total = sum(p1.distance_to(p2) for p1, p2 in zip(points1, points2))
        return total / len(points1)


class PathUtils:
    """Utility class for converting between path representations."""

    @staticmethod
    def to_point(item: Any) -> Point:
        """Read a Point, an (x, y) pair or an {'x', 'y'} dict."""
        try:
            if isinstance(item, Point):
                point = item
            elif isinstance(item, dict):
                point = Point(item['x'], item['y'])
            else:
                x, y = item
                point = Point(x, y)
        except (KeyError, TypeError, ValueError, OverflowError) as e:
            raise InvalidPathError(f"Not a 2D point: {item!r}") from e
        if not (math.isfinite(point.x) and math.isfinite(point.y)):
            raise InvalidPathError(f"Point coordinates must be finite: {item!r}")
        return point

    @staticmethod
    def to_points(path: Iterable[Any]) -> Tuple[Point, ...]:
        """Convert a path of mixed point representations to Points."""
        if path is None:
            raise InvalidPathError("Path cannot be None")
        return tuple(PathUtils.to_point(item) for item in path)

    @staticmethod
    def to_dicts(points: Iterable[Point]) -> List[Dict[str, float]]:
        """Convert Point objects to dict format."""
        return [{'x': p.x, 'y': p.y} for p in points]

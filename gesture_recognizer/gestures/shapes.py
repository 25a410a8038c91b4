"""
Synthetic gesture shapes.

Used to seed a starter template library and as test fixtures.
"""

import math
from typing import List, Tuple

from ..utils.gesture_utils import Point


def generate_line_points(length: float = 100.0) -> List[Point]:
    return [Point(0, 0), Point(length, 0)]


def generate_circle_points(radius: float = 100.0, num_points: int = 64, closed: bool = False) -> List[Point]:
    """Generate points for a counter-clockwise circle starting at angle 0."""
    count = num_points + 1 if closed else num_points
    points = []
    for i in range(count):
        angle = 2 * math.pi * i / num_points
        x = radius * math.cos(angle)
        y = radius * math.sin(angle)
        points.append(Point(x, y))
    return points


def generate_triangle_points(size: float = 100.0) -> List[Point]:
    return [Point(size / 2, 0), Point(size, size), Point(0, size), Point(size / 2, 0)]


def generate_rectangle_points(width: float = 120.0, height: float = 80.0) -> List[Point]:
    return [Point(0, 0), Point(width, 0), Point(width, height), Point(0, height), Point(0, 0)]


def generate_star_points(points: int = 5, outer_radius: float = 100.0, inner_radius: float = 40.0) -> List[Point]:
    """Generate points for a star."""
    star_points = []
    for i in range(points * 2 + 1):
        angle = math.pi * i / points
        radius = outer_radius if i % 2 == 0 else inner_radius
        x = radius * math.cos(angle - math.pi / 2)
        y = radius * math.sin(angle - math.pi / 2)
        star_points.append(Point(x, y))
    return star_points


def generate_heart_points() -> List[Point]:
    """Generate points for a heart shape."""
    heart_points = []
    for t in [i * 0.1 for i in range(63)]:  # 0 to 2π
        x = 16 * math.sin(t) ** 3
        y = -(13 * math.cos(t) - 5 * math.cos(2 * t) - 2 * math.cos(3 * t) - math.cos(4 * t))
        heart_points.append(Point(x * 2, y * 2))
    return heart_points


def generate_zigzag_points(teeth: int = 4, width: float = 120.0, height: float = 60.0) -> List[Point]:
    step = width / (teeth * 2)
    return [Point(i * step, 0 if i % 2 == 0 else height) for i in range(teeth * 2 + 1)]


def generate_check_points() -> List[Point]:
    return [Point(0, 50), Point(30, 90), Point(100, 0)]


def default_templates() -> List[Tuple[str, List[Point]]]:
    """Starter library of (name, points) pairs."""
    return [
        ("line", generate_line_points()),
        ("circle", generate_circle_points(closed=True)),
        ("triangle", generate_triangle_points()),
        ("rectangle", generate_rectangle_points()),
        ("star", generate_star_points()),
        ("heart", generate_heart_points()),
        ("zigzag", generate_zigzag_points()),
        ("check", generate_check_points()),
    ]

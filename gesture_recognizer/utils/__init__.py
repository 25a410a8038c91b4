"""
Utilities package for gesture recognition.

This package provides the shared geometry helpers used by the
normalization pipeline and the recognizer.
"""

from .gesture_utils import (
    Point,
    BoundingBox,
    GeometryUtils,
    PathUtils
)

__all__ = [
    'Point',
    'BoundingBox',
    'GeometryUtils',
    'PathUtils'
]

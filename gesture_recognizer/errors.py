"""
Exceptions raised by the gesture recognizer.

All errors derive from ValueError so callers validating user input can
catch them the same way they catch bad coordinates.
"""


class GestureError(ValueError):
    """Base class for gesture recognition errors."""


class InvalidPathError(GestureError):
    """A path entry could not be read as a 2D point."""


class DegeneratePathError(GestureError):
    """Path has too few points or zero length to be normalized."""


class LengthMismatchError(GestureError):
    """Pointwise distance requested between paths of different length."""

    def __init__(self, first: int, second: int):
        super().__init__(f"Cannot compare paths of {first} and {second} points")
        self.first = first
        self.second = second


class EmptyTemplateLibraryError(GestureError):
    """Recognition requested before any template was added."""

    def __init__(self):
        super().__init__("No templates to recognize against")


class GestureStoreError(GestureError):
    """Base class for gesture persistence errors."""


class InvalidGestureNameError(GestureStoreError):
    """Gesture name cannot be used as a storage key."""


class GestureNotFoundError(GestureStoreError):
    """No saved gesture exists under the requested name."""


class GestureFileError(GestureStoreError):
    """A saved gesture file is unreadable or malformed."""

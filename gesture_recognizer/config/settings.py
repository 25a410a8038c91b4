"""
Configuration settings for the gesture recognizer and drawing app.
"""

import math


class RecognizerConfig:
    """Configuration constants for $1 template matching."""

    # Normalization
    RESAMPLE_SIZE = 64
    SQUARE_SIZE = 250.0

    # Gestures whose short side is at most this fraction of the long side
    # are scaled uniformly (lines, flat swipes)
    ONE_D_THRESHOLD = 0.25

    # Golden section search window (radians)
    ANGLE_RANGE = math.radians(45.0)
    ANGLE_PRECISION = math.radians(2.0)


class AppConfig:
    """Configuration constants for the drawing window."""

    WINDOW_TITLE = "Gesture Recognizer"
    WINDOW_WIDTH = 600
    WINDOW_HEIGHT = 600
    FPS = 60

    # Colors
    BACKGROUND = (255, 255, 255)
    STROKE_COLOR = (0, 0, 0)
    TEXT_COLOR = (0, 0, 0)
    FIELD_COLOR = (230, 230, 230)
    BUTTON_COLOR = (180, 200, 230)
    STROKE_WIDTH = 2

    # Fonts
    LABEL_FONT_SIZE = 24
    UI_FONT_SIZE = 20

    # Recognition display
    CONFIDENCE_THRESHOLD = 0.8

    # Default names when the name field is blank
    DEFAULT_TEMPLATE_NAME = "no name gesture"
    DEFAULT_GESTURE_NAME = "gesture"

    # Persistence
    GESTURE_DIRECTORY = "res"
    DEBUG_LOG_FILE = "gesture_debug.log"

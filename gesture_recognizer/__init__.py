"""
Gesture Recognizer Package
Single-stroke gesture recognition with the $1 Unistroke Recognizer.
"""

from .gestures.dollar_recognizer import DollarRecognizer, GestureTemplate, RecognitionResult
from .storage.gesture_store import GestureStore
from .utils.gesture_utils import Point

__version__ = "1.0.0"
__all__ = ["DollarRecognizer", "GestureTemplate", "RecognitionResult", "GestureStore", "Point"]

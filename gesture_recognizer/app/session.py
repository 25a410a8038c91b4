"""
Drawing session state, independent of any window toolkit.

The pygame window forwards mouse and keyboard events here; everything
that decides what happens to a stroke lives in this class so it can be
driven directly from tests.
"""

import logging
from typing import List, Optional, Tuple

from ..config.settings import AppConfig
from ..errors import GestureError
from ..gestures.dollar_recognizer import DollarRecognizer, RecognitionResult
from ..storage.gesture_store import GestureStore
from ..utils.gesture_utils import Point
from ..utils.logger import GestureLogger

logger = logging.getLogger(__name__)


class GestureSession:
    """Tracks the stroke being drawn and the last recognition result."""

    def __init__(self, recognizer: Optional[DollarRecognizer] = None,
                 store: Optional[GestureStore] = None,
                 gesture_logger: Optional[GestureLogger] = None,
                 config=AppConfig):
        self.config = config
        self.recognizer = recognizer or DollarRecognizer()
        self.store = store or GestureStore(config.GESTURE_DIRECTORY)
        self.gesture_logger = gesture_logger or GestureLogger()

        self.path: List[Point] = []
        self.is_drawing = False
        self.result: Optional[RecognitionResult] = None
        self.message = ""

    # Stroke capture

    def begin_stroke(self, pos: Tuple[float, float]):
        """Start a new stroke, discarding the previous one."""
        self.path = [Point(*pos)]
        self.is_drawing = True
        self.result = None
        self.message = ""

    def extend_stroke(self, pos: Tuple[float, float]):
        if self.is_drawing:
            self.path.append(Point(*pos))

    def end_stroke(self) -> Optional[RecognitionResult]:
        """Finish the stroke and recognize it if any templates exist."""
        self.is_drawing = False
        if self.recognizer.is_empty():
            return None
        return self.recognize()

    def recognize(self) -> Optional[RecognitionResult]:
        try:
            result = self.recognizer.recognize(self.path)
        except GestureError as e:
            self.result = None
            self.message = str(e)
            self.gesture_logger.log_rejected(str(e), len(self.path))
            return None

        result.record_scores()
        self.result = result
        self.message = ""
        self.gesture_logger.log_recognition(result, len(self.path))
        return result

    def clear(self):
        self.path = []
        self.is_drawing = False
        self.result = None
        self.message = ""

    # Template commands

    def add_template(self, name: str = "") -> bool:
        """Register the current stroke as a template."""
        name = name.strip() or self.config.DEFAULT_TEMPLATE_NAME
        try:
            self.recognizer.add_template(name, self.path)
        except GestureError as e:
            self.message = f"Cannot add '{name}': {e}"
            self.gesture_logger.log_rejected(self.message, len(self.path))
            return False

        self.message = f"Added template '{name}'"
        self.gesture_logger.log_template_added(name, len(self.path))
        return True

    def load_defaults(self) -> int:
        count = self.recognizer.load_defaults()
        self.message = f"Loaded {count} default templates"
        return count

    # Persistence commands

    def save_current(self, name: str = "") -> bool:
        """Save the current raw stroke under name."""
        name = name.strip() or self.config.DEFAULT_GESTURE_NAME
        if not self.path:
            self.message = "Nothing to save"
            return False
        try:
            self.store.save_gesture(name, self.path)
        except (GestureError, OSError) as e:
            self.message = f"Cannot save '{name}': {e}"
            logger.error(self.message)
            return False

        self.message = f"Saved {name}"
        return True

    def load_named(self, name: str = "") -> bool:
        """Load a saved stroke and register it as a template."""
        name = name.strip() or self.config.DEFAULT_GESTURE_NAME
        try:
            points = self.store.load_gesture(name)
            self.recognizer.add_template(name, points)
        except GestureError as e:
            self.message = f"Cannot load '{name}': {e}"
            logger.warning(self.message)
            return False

        self.message = f"Loaded {name}"
        self.gesture_logger.log_template_added(name, len(points))
        return True

    # Display

    @property
    def status_text(self) -> str:
        # Commands after a recognition report over the match line
        if self.message:
            return self.message
        if self.result is None:
            return "Match: "

        name = self.result.name
        if self.result.score < self.config.CONFIDENCE_THRESHOLD:
            name = f"{name} (low confidence)"
        return f"Match: {name} Confidence: {self.result.confidence:.2f}"

    def close(self):
        self.gesture_logger.close()

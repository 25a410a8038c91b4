"""
Logging utilities for template registration and recognition.
"""

import datetime
import logging
from typing import Optional

logger = logging.getLogger(__name__)


class GestureLogger:
    """Handles logging of templates and recognition results."""

    def __init__(self, debug_file: Optional[str] = None):
        self.debug_file = None
        if debug_file:
            try:
                self.debug_file = open(debug_file, 'w', encoding='utf-8')
                self.debug_file.write(f"Debug logging started at {datetime.datetime.now()}\n")
                self.debug_file.flush()
            except OSError as e:
                logger.warning(f"Could not open debug file: {e}")

    def _write_debug(self, message: str):
        if not self.debug_file:
            return
        timestamp = datetime.datetime.now().strftime("%H:%M:%S.%f")[:-3]
        self.debug_file.write(f"[{timestamp}] {message}\n")
        self.debug_file.flush()

    def log_template_added(self, name: str, point_count: int):
        """Log a newly registered template."""
        message = f"TEMPLATE ADDED: '{name}' from {point_count} points"
        logger.info(message)
        self._write_debug(message)

    def log_recognition(self, result, point_count: int):
        """Log a recognition result and every template's score."""
        message = (f"RECOGNIZED: '{result.name}' score {result.score:.3f} "
                   f"from {point_count} points")
        logger.info(message)
        self._write_debug(message)

        for entry in result.scores:
            detail = (f"   {entry.template.name}: score {entry.score:.3f} "
                      f"distance {entry.distance:.2f}")
            logger.debug(detail)
            self._write_debug(detail)

    def log_rejected(self, reason: str, point_count: int):
        """Log a stroke that could not be recognized or registered."""
        message = f"REJECTED: {reason} ({point_count} points)"
        logger.info(message)
        self._write_debug(message)

    def close(self):
        """Close the debug file."""
        if self.debug_file:
            self.debug_file.close()
            self.debug_file = None

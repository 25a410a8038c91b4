"""
Saving and loading raw gesture strokes.

Each gesture lives in its own JSON file named after the gesture:

    {"name": "circle", "points": [{"x": 10.0, "y": 20.0}, ...]}

Strokes are stored exactly as drawn, before normalization, so a saved
gesture can be re-registered as a template or replayed as test input.
"""

import json
import os
import logging
from typing import Any, Iterable, List, Optional, Tuple

from ..errors import (
    GestureError,
    GestureFileError,
    GestureNotFoundError,
    InvalidGestureNameError,
)
from ..utils.gesture_utils import Point, PathUtils

logger = logging.getLogger(__name__)

FILE_EXTENSION = '.json'


class GestureStore:
    """Directory of saved gesture strokes keyed by name."""

    def __init__(self, directory: str):
        self.directory = directory

    def _validate_name(self, name: str) -> str:
        name = str(name).strip() if name is not None else ''
        if not name:
            raise InvalidGestureNameError("Gesture name cannot be empty")
        if os.sep in name or (os.altsep and os.altsep in name) or name in ('.', '..'):
            raise InvalidGestureNameError(f"Invalid gesture name '{name}'")
        return name

    def path_for(self, name: str) -> str:
        """File path a gesture is stored under."""
        return os.path.join(self.directory, self._validate_name(name) + FILE_EXTENSION)

    def save_gesture(self, name: str, path: Iterable[Any]) -> str:
        """
        Save a raw stroke under name, replacing any earlier one.

        Returns:
            The file path written
        """
        filename = self.path_for(name)
        points = PathUtils.to_points(path)
        data = {
            'name': self._validate_name(name),
            'points': PathUtils.to_dicts(points)
        }

        os.makedirs(self.directory, exist_ok=True)
        with open(filename, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2)

        logger.info(f"Saved gesture '{name}' ({len(points)} points) to '{filename}'")
        return filename

    def load_gesture(self, name: str) -> Tuple[Point, ...]:
        """
        Load the raw stroke saved under name.

        Raises:
            GestureNotFoundError: If nothing is saved under name
            GestureFileError: If the file is not a valid gesture file
        """
        filename = self.path_for(name)
        if not os.path.exists(filename):
            raise GestureNotFoundError(f"No gesture named '{name}' in '{self.directory}'")

        try:
            with open(filename, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError, OSError) as e:
            raise GestureFileError(f"Could not read '{filename}': {e}") from e

        if not isinstance(data, dict) or not isinstance(data.get('points'), list):
            raise GestureFileError(f"'{filename}' has no 'points' list")

        try:
            points = PathUtils.to_points(data['points'])
        except GestureError as e:
            raise GestureFileError(f"Invalid point in '{filename}': {e}") from e

        logger.info(f"Loaded gesture '{name}' ({len(points)} points)")
        return points

    def list_gestures(self) -> List[str]:
        """Names of all saved gestures, sorted."""
        if not os.path.isdir(self.directory):
            return []
        return sorted(
            filename[:-len(FILE_EXTENSION)]
            for filename in os.listdir(self.directory)
            if filename.endswith(FILE_EXTENSION)
        )

    def delete_gesture(self, name: str) -> None:
        filename = self.path_for(name)
        if not os.path.exists(filename):
            raise GestureNotFoundError(f"No gesture named '{name}' in '{self.directory}'")
        os.remove(filename)
        logger.info(f"Deleted gesture '{name}'")

    def load_into(self, recognizer, names: Optional[Iterable[str]] = None) -> int:
        """
        Register saved gestures as templates.

        Gestures that cannot be loaded or normalized are logged and skipped.

        Args:
            recognizer: DollarRecognizer to add templates to
            names: Gestures to load, defaults to every saved gesture

        Returns:
            Number of templates added
        """
        if names is None:
            names = self.list_gestures()

        added = 0
        for name in names:
            try:
                recognizer.add_template(name, self.load_gesture(name))
                added += 1
            except GestureError as e:
                logger.warning(f"Skipping gesture '{name}': {e}")

        logger.info(f"Loaded {added} templates from '{self.directory}'")
        return added

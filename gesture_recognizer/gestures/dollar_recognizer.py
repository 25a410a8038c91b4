"""
$1 Unistroke Recognizer Implementation

Matches a single drawn stroke against a library of named templates.
Both the templates and the candidate are normalized by the same
pipeline, then compared point by point after a golden section search
for the rotation that brings them closest. Each template is also tried
in reverse so a gesture drawn end-to-start still matches.

Reference: https://depts.washington.edu/acelab/proj/dollar/index.html
"""

import math
import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterable, List, Optional, Sequence, Tuple

from ..config.settings import RecognizerConfig
from ..errors import EmptyTemplateLibraryError
from ..utils.gesture_utils import Point, GeometryUtils
from .normalization import normalize, resample
from .shapes import default_templates

logger = logging.getLogger(__name__)

# Inverse golden ratio (~0.618)
PHI = 0.5 * (-1.0 + math.sqrt(5.0))


class GestureTemplate:
    """Represents a named gesture template in canonical form."""

    def __init__(self, name: str, points: Sequence[Point]):
        self.name = name
        self.points = tuple(points)
        self.last_score: Optional[float] = None

    @classmethod
    def from_path(cls, name: str, path: Iterable[Any], config=RecognizerConfig) -> 'GestureTemplate':
        """Build a template by normalizing a raw stroke."""
        return cls(name, normalize(path,
                                   config.RESAMPLE_SIZE,
                                   config.SQUARE_SIZE,
                                   config.ONE_D_THRESHOLD))

    def reversed_points(self) -> Tuple[Point, ...]:
        """Template path in reverse drawing order."""
        return self.points[::-1]

    def __len__(self):
        return len(self.points)

    def __str__(self):
        return self.name

    def __repr__(self):
        return f"GestureTemplate({self.name!r}, {len(self.points)} points)"


@dataclass(frozen=True)
class SearchBracket:
    """State of a golden section search over [a, b] with probes x1 < x2."""
    a: float
    b: float
    x1: float
    x2: float
    f1: float
    f2: float
    iterations: int = 0

    @classmethod
    def start(cls, objective: Callable[[float], float], a: float, b: float) -> 'SearchBracket':
        x1 = PHI * a + (1 - PHI) * b
        x2 = (1 - PHI) * a + PHI * b
        return cls(a, b, x1, x2, objective(x1), objective(x2))

    @property
    def width(self) -> float:
        return abs(self.b - self.a)

    @property
    def best(self) -> Tuple[float, float]:
        """(value, argument) of the better probe."""
        if self.f1 < self.f2:
            return self.f1, self.x1
        return self.f2, self.x2

    def step(self, objective: Callable[[float], float]) -> 'SearchBracket':
        """Shrink the bracket, evaluating only the new probe."""
        if self.f1 < self.f2:
            b = self.x2
            x1 = PHI * self.a + (1 - PHI) * b
            return SearchBracket(self.a, b, x1, self.x1, objective(x1), self.f1,
                                 self.iterations + 1)

        a = self.x1
        x2 = (1 - PHI) * a + PHI * self.b
        return SearchBracket(a, self.b, self.x2, x2, self.f2, objective(x2),
                             self.iterations + 1)


def golden_section_search(objective: Callable[[float], float], a: float, b: float,
                          threshold: float) -> Tuple[float, float, int]:
    """
    Minimize a unimodal function on [a, b].

    Returns:
        Tuple of (minimum value, argument, iterations)
    """
    bracket = SearchBracket.start(objective, a, b)
    while bracket.width > threshold:
        bracket = bracket.step(objective)
    value, argument = bracket.best
    return value, argument, bracket.iterations


def distance_at_angle(points: Sequence[Point], template_points: Sequence[Point], angle: float) -> float:
    """Mean point distance after rotating points by angle about their centroid."""
    rotated = GeometryUtils.rotate_points(points, angle)
    if len(rotated) != len(template_points):
        rotated = resample(rotated, len(template_points))
    return GeometryUtils.pointwise_distance(rotated, template_points)


def distance_at_best_angle(points: Sequence[Point], template_points: Sequence[Point],
                           angle_range: float = RecognizerConfig.ANGLE_RANGE,
                           angle_precision: float = RecognizerConfig.ANGLE_PRECISION) -> float:
    """Smallest distance over rotations within +/- angle_range, found by golden section search."""
    def objective(angle: float) -> float:
        return distance_at_angle(points, template_points, angle)

    best, _, _ = golden_section_search(objective, -angle_range, angle_range, angle_precision)
    # The search only probes interior points; never report worse than no rotation
    return min(best, objective(0.0))


@dataclass(frozen=True)
class TemplateScore:
    """Score of one template against a candidate stroke."""
    template: GestureTemplate
    score: float
    distance: float


@dataclass(frozen=True)
class RecognitionResult:
    """Best matching template with the scores of every template tried."""
    template: GestureTemplate
    score: float
    distance: float
    scores: Tuple[TemplateScore, ...]

    @property
    def name(self) -> str:
        return self.template.name

    @property
    def confidence(self) -> float:
        """Score clamped to [0.0, 1.0] for display."""
        return max(0.0, min(1.0, self.score))

    def record_scores(self) -> None:
        """Copy each template's score onto its last_score."""
        for entry in self.scores:
            entry.template.last_score = entry.score


class DollarRecognizer:
    """$1 Unistroke Recognizer for gesture classification."""

    def __init__(self, config=RecognizerConfig):
        self.config = config
        self._templates: List[GestureTemplate] = []

    @property
    def templates(self) -> Tuple[GestureTemplate, ...]:
        return tuple(self._templates)

    def __len__(self):
        return len(self._templates)

    def is_empty(self) -> bool:
        return not self._templates

    def names(self) -> List[str]:
        return [template.name for template in self._templates]

    def normalize(self, path: Iterable[Any]) -> Tuple[Point, ...]:
        """Normalize a raw stroke with this recognizer's settings."""
        return normalize(path,
                         self.config.RESAMPLE_SIZE,
                         self.config.SQUARE_SIZE,
                         self.config.ONE_D_THRESHOLD)

    def add_template(self, name: str, path: Iterable[Any]) -> None:
        """
        Add a new gesture template.

        Args:
            name: Template name, need not be unique
            path: Raw stroke as Points, (x, y) pairs or {'x', 'y'} dicts

        Raises:
            DegeneratePathError: If the stroke has fewer than 2 points or no length
        """
        template = GestureTemplate.from_path(name, path, self.config)
        self._templates.append(template)
        logger.info(f"Added template '{name}' ({len(self._templates)} total)")

    def load_defaults(self) -> int:
        """Add the built-in shape templates, returns how many were added."""
        defaults = default_templates()
        for name, points in defaults:
            self.add_template(name, points)
        return len(defaults)

    def clear(self) -> None:
        """Remove all templates."""
        self._templates = []
        logger.info("Cleared template library")

    def score(self, distance: float) -> float:
        """Convert a mean point distance to a similarity score."""
        size = self.config.SQUARE_SIZE
        half_diagonal = 0.5 * math.sqrt(2 * size ** 2)
        return 1.0 - distance / half_diagonal

    def match(self, points: Sequence[Point], template: GestureTemplate) -> TemplateScore:
        """Score a normalized stroke against one template, in both directions."""
        forward = distance_at_best_angle(points, template.points,
                                         self.config.ANGLE_RANGE, self.config.ANGLE_PRECISION)
        backward = distance_at_best_angle(points, template.reversed_points(),
                                          self.config.ANGLE_RANGE, self.config.ANGLE_PRECISION)
        distance = min(forward, backward)
        return TemplateScore(template, self.score(distance), distance)

    def recognize(self, path: Iterable[Any]) -> RecognitionResult:
        """
        Recognize a stroke against all current templates.

        Args:
            path: Raw stroke as Points, (x, y) pairs or {'x', 'y'} dicts

        Returns:
            RecognitionResult for the best template; ties go to the
            template added first

        Raises:
            EmptyTemplateLibraryError: If no templates have been added
            DegeneratePathError: If the stroke has fewer than 2 points or no length
        """
        points = self.normalize(path)
        if not self._templates:
            raise EmptyTemplateLibraryError()

        scores = []
        best: Optional[TemplateScore] = None
        for template in self._templates:
            entry = self.match(points, template)
            logger.debug(f"Template {template.name}: distance {entry.distance:.4f} score {entry.score:.4f}")
            scores.append(entry)
            if best is None or entry.score > best.score:
                best = entry

        logger.debug(f"Best template: {best.template.name} with score {best.score:.4f}")
        return RecognitionResult(best.template, best.score, best.distance, tuple(scores))

"""
Gesture normalization and template matching.

This module provides the $1 normalization pipeline and the recognizer
that matches normalized strokes against named templates.
"""

from .normalization import normalize, resample
from .dollar_recognizer import (
    DollarRecognizer,
    GestureTemplate,
    RecognitionResult,
    TemplateScore,
    distance_at_angle,
    distance_at_best_angle,
    golden_section_search
)

__all__ = [
    'normalize',
    'resample',
    'DollarRecognizer',
    'GestureTemplate',
    'RecognitionResult',
    'TemplateScore',
    'distance_at_angle',
    'distance_at_best_angle',
    'golden_section_search'
]

"""Core module for complexity quality classification."""

from .models import Classification, ComplexityQuality, QualityStyle
from .quality import classify, complexity_class, explain
from .styles import all_styles, style_for

__all__ = [
    "Classification",
    "ComplexityQuality",
    "QualityStyle",
    "classify",
    "complexity_class",
    "explain",
    "all_styles",
    "style_for",
]

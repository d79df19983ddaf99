"""
Quality-to-style mappers.

Display classes, text classes and labels for each ComplexityQuality tier.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Union

from .models import ComplexityQuality, QualityStyle

Q = ComplexityQuality

# "worst" shares the "bad" chip background; only its text emphasis differs.
QUALITY_CLASS = MappingProxyType({
    Q.BEST: "bg-complexity-best text-gray-900",
    Q.GOOD: "bg-complexity-good text-gray-900",
    Q.FAIR: "bg-complexity-fair text-gray-900",
    Q.BAD: "bg-complexity-bad text-gray-900",
    Q.WORST: "bg-complexity-bad text-gray-900",
    Q.NA: "bg-complexity-na text-gray-600",
})

QUALITY_TEXT_CLASS = MappingProxyType({
    Q.BEST: "text-green-600 dark:text-green-400",
    Q.GOOD: "text-lime-600 dark:text-lime-400",
    Q.FAIR: "text-yellow-600 dark:text-yellow-400",
    Q.BAD: "text-red-500 dark:text-red-400",
    Q.WORST: "text-red-600 dark:text-red-500",
    Q.NA: "text-gray-500 dark:text-gray-400",
})

QUALITY_LABEL = MappingProxyType({
    Q.BEST: "Best",
    Q.GOOD: "Good",
    Q.FAIR: "Fair",
    Q.BAD: "Bad",
    Q.WORST: "Worst",
    Q.NA: "N/A",
})


def _build_styles() -> MappingProxyType:
    for name, table in (
        ("QUALITY_CLASS", QUALITY_CLASS),
        ("QUALITY_TEXT_CLASS", QUALITY_TEXT_CLASS),
        ("QUALITY_LABEL", QUALITY_LABEL),
    ):
        missing = [q.value for q in ComplexityQuality if q not in table]
        if missing:
            raise RuntimeError(f"{name} has no entry for: {', '.join(missing)}")

    return MappingProxyType({
        q: QualityStyle(
            quality=q,
            display_class=QUALITY_CLASS[q],
            text_class=QUALITY_TEXT_CLASS[q],
            label=QUALITY_LABEL[q],
        )
        for q in ComplexityQuality
    })


_STYLES = _build_styles()

LEGEND_ORDER = (*ComplexityQuality.ordered(), ComplexityQuality.NA)


def style_for(quality: Union[ComplexityQuality, str]) -> QualityStyle:
    """
    Get the display style for a quality tier.

    Accepts the enum member or its plain name ("best"). Unknown names raise
    ValueError.
    """
    return _STYLES[ComplexityQuality(quality)]


def all_styles() -> list[QualityStyle]:
    """Styles for every tier, best to worst, then N/A."""
    return [_STYLES[q] for q in LEGEND_ORDER]

"""
Quality classifier for asymptotic notations.

Maps hand-authored notation strings ("O(n log n)", "Θ(1)", "N/A") to a
ComplexityQuality tier. Resolution is an exact-match table first, then an
ordered list of substring heuristics, then a "fair" default, so every string
gets a tier.
"""
from __future__ import annotations

import logging
import re
from types import MappingProxyType

from .models import Classification, ComplexityQuality
from .styles import style_for

logger = logging.getLogger(__name__)

BEST = ComplexityQuality.BEST
GOOD = ComplexityQuality.GOOD
FAIR = ComplexityQuality.FAIR
BAD = ComplexityQuality.BAD
WORST = ComplexityQuality.WORST
NA = ComplexityQuality.NA


NOTATION_QUALITY = MappingProxyType({
    # Constant
    "O(1)": BEST,
    "Θ(1)": BEST,
    "Ω(1)": BEST,

    # Logarithmic
    "O(log n)": GOOD,
    "O(log(n))": GOOD,
    "Θ(log n)": GOOD,
    "Θ(log(n))": GOOD,
    "Ω(log n)": GOOD,
    "Ω(log(n))": GOOD,

    # Linear
    "O(n)": FAIR,
    "Θ(n)": FAIR,
    "Ω(n)": FAIR,
    "O(n + k)": FAIR,
    "Θ(n + k)": FAIR,
    "Ω(n + k)": FAIR,
    "O(k)": FAIR,
    "O(nk)": FAIR,
    "Θ(nk)": FAIR,
    "Ω(nk)": FAIR,

    # Linearithmic
    "O(n log n)": FAIR,
    "O(n log(n))": FAIR,
    "Θ(n log n)": FAIR,
    "Θ(n log(n))": FAIR,
    "Ω(n log n)": FAIR,
    "Ω(n log(n))": FAIR,

    # Quadratic
    "O(n²)": BAD,
    "O(n^2)": BAD,
    "Θ(n²)": BAD,
    "Θ(n^2)": BAD,
    "Ω(n²)": BAD,
    "Ω(n^2)": BAD,

    # Cubic
    "O(n³)": BAD,
    "O(n^3)": BAD,
    "Θ(n³)": BAD,
    "Θ(n^3)": BAD,

    # Shell sort
    "Θ((n log(n))^2)": BAD,
    "O(n(log(n))^2)": BAD,

    # Exponential
    "O(2^n)": WORST,
    "O(2ⁿ)": WORST,
    "Θ(2^n)": WORST,
    "O(b ^ d)": WORST,
    "Θ(b ^ d)": WORST,

    # Factorial
    "O(n!)": WORST,
    "Θ(n!)": WORST,

    # Graphs
    "O(V + E)": FAIR,
    "Θ(V + E)": FAIR,
    "O(v + e)": FAIR,
    "Θ(v + e)": FAIR,
    "O(v * e)": BAD,
    "Θ(v * e)": BAD,
    "O((v + e) log v)": FAIR,
    "Θ((v + e) log v)": FAIR,

    "N/A": NA,
})


# Checked top to bottom; the first rule whose substrings appear wins.
# "n^2" must precede "log" so "O(n^2 log n)" reads as quadratic.
SUBSTRING_RULES: tuple[tuple[tuple[str, ...], ComplexityQuality], ...] = (
    (("n!",), WORST),
    (("2^n", "2ⁿ"), WORST),
    (("n^3", "n³"), BAD),
    (("n^2", "n²"), BAD),
    (("n log", "n*log"), FAIR),
    (("log",), GOOD),
)

NA_MARKERS = frozenset({"N/A", "-"})

DEFAULT_QUALITY = FAIR

# Surrounding whitespace and byte-order marks
_EDGES = re.compile(r"^[\s\ufeff]+|[\s\ufeff]+$")


def _normalize(notation: str) -> str:
    return _EDGES.sub("", notation)


def _resolve(normalized: str) -> tuple[ComplexityQuality, str]:
    quality = NOTATION_QUALITY.get(normalized)
    if quality is not None:
        return quality, "table"

    for needles, rule_quality in SUBSTRING_RULES:
        if any(needle in normalized for needle in needles):
            return rule_quality, "heuristic"

    if normalized in NA_MARKERS:
        return NA, "heuristic"
    if "(1)" in normalized:
        return BEST, "heuristic"
    if "(n)" in normalized or "n + " in normalized:
        return FAIR, "heuristic"

    return DEFAULT_QUALITY, "default"


def classify(notation: str) -> ComplexityQuality:
    """
    Get the quality tier for a complexity notation.

    Args:
        notation: Asymptotic notation such as "O(n log n)"; surrounding
            whitespace and byte-order marks are ignored

    Returns:
        The matching ComplexityQuality, "fair" when nothing matches
    """
    quality, _ = _resolve(_normalize(notation))
    return quality


def explain(notation: str) -> Classification:
    """Classify a notation and report which resolution step decided it."""
    normalized = _normalize(notation)
    quality, source = _resolve(normalized)
    logger.debug("Classified %r as %s via %s", notation, quality.value, source)
    return Classification(
        notation=notation,
        normalized=normalized,
        quality=quality,
        source=source,
    )


def complexity_class(notation: str) -> str:
    """Get the display class for a complexity notation."""
    return style_for(classify(notation)).display_class

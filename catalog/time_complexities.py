"""Common growth rates, ordered from fastest to slowest."""
from __future__ import annotations

from core.models import ComplexityQuality, TimeComplexity

TIME_COMPLEXITIES: tuple[TimeComplexity, ...] = (
    TimeComplexity(
        name="Constant",
        notation="O(1)",
        description="Running time does not depend on the input size.",
        level=ComplexityQuality.BEST,
    ),
    TimeComplexity(
        name="Logarithmic",
        notation="O(log n)",
        description="The problem shrinks by a constant factor on every step, as in binary search.",
        level=ComplexityQuality.GOOD,
    ),
    TimeComplexity(
        name="Linear",
        notation="O(n)",
        description="Every element is touched a constant number of times.",
        level=ComplexityQuality.FAIR,
    ),
    TimeComplexity(
        name="Linearithmic",
        notation="O(n log n)",
        description="Linear work on each of log n levels; the bound for comparison sorts.",
        level=ComplexityQuality.FAIR,
    ),
    TimeComplexity(
        name="Quadratic",
        notation="O(n^2)",
        description="Every pair of elements is considered, typically two nested loops.",
        level=ComplexityQuality.BAD,
    ),
    TimeComplexity(
        name="Cubic",
        notation="O(n^3)",
        description="Every triple of elements is considered, as in naive matrix multiplication.",
        level=ComplexityQuality.BAD,
    ),
    TimeComplexity(
        name="Exponential",
        notation="O(2^n)",
        description="Work doubles with every added element, as in enumerating all subsets.",
        level=ComplexityQuality.WORST,
    ),
    TimeComplexity(
        name="Factorial",
        notation="O(n!)",
        description="Every ordering of the input is considered, as in brute-force permutations.",
        level=ComplexityQuality.WORST,
    ),
)

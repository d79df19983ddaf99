"""Comparison and distribution sorts."""
from __future__ import annotations

from core.models import SortingAlgorithm, SortingTime, SpaceComplexity


def _sort(name: str, description: str, best: str, average: str, worst: str, space: str) -> SortingAlgorithm:
    return SortingAlgorithm(
        name=name,
        description=description,
        time=SortingTime(best=best, average=average, worst=worst),
        space=SpaceComplexity(worst=space),
    )


SORTING_ALGORITHMS: tuple[SortingAlgorithm, ...] = (
    _sort(
        "Quicksort",
        "Partitions around a pivot and recursively sorts both sides.",
        "Ω(n log(n))", "Θ(n log(n))", "O(n^2)", "O(log(n))",
    ),
    _sort(
        "Mergesort",
        "Splits the input in halves, sorts each half and merges the results.",
        "Ω(n log(n))", "Θ(n log(n))", "O(n log(n))", "O(n)",
    ),
    _sort(
        "Timsort",
        "Hybrid of merge and insertion sort that exploits existing runs; Python's default sort.",
        "Ω(n)", "Θ(n log(n))", "O(n log(n))", "O(n)",
    ),
    _sort(
        "Heapsort",
        "Builds a heap and repeatedly extracts the maximum.",
        "Ω(n log(n))", "Θ(n log(n))", "O(n log(n))", "O(1)",
    ),
    _sort(
        "Bubble Sort",
        "Repeatedly swaps adjacent elements that are out of order.",
        "Ω(n)", "Θ(n^2)", "O(n^2)", "O(1)",
    ),
    _sort(
        "Insertion Sort",
        "Grows a sorted prefix by inserting each element into place.",
        "Ω(n)", "Θ(n^2)", "O(n^2)", "O(1)",
    ),
    _sort(
        "Selection Sort",
        "Repeatedly selects the smallest remaining element.",
        "Ω(n^2)", "Θ(n^2)", "O(n^2)", "O(1)",
    ),
    _sort(
        "Tree Sort",
        "Inserts every element into a binary search tree and walks it in order.",
        "Ω(n log(n))", "Θ(n log(n))", "O(n^2)", "O(n)",
    ),
    _sort(
        "Shell Sort",
        "Insertion sort over shrinking gaps so elements move long distances early.",
        "Ω(n log(n))", "Θ((n log(n))^2)", "O(n(log(n))^2)", "O(1)",
    ),
    _sort(
        "Bucket Sort",
        "Scatters elements into buckets, sorts each bucket and concatenates them.",
        "Ω(n + k)", "Θ(n + k)", "O(n^2)", "O(n)",
    ),
    _sort(
        "Radix Sort",
        "Sorts integers digit by digit using a stable sub-sort.",
        "Ω(nk)", "Θ(nk)", "O(nk)", "O(n + k)",
    ),
    _sort(
        "Counting Sort",
        "Counts occurrences of each key and computes positions from the counts.",
        "Ω(n + k)", "Θ(n + k)", "O(n + k)", "O(k)",
    ),
    _sort(
        "Cubesort",
        "Parallel sort that builds a self-balancing multi-dimensional array.",
        "Ω(n)", "Θ(n log(n))", "O(n log(n))", "O(n)",
    ),
)

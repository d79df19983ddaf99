"""Array and graph search algorithms."""
from __future__ import annotations

from core.models import Concept, SearchAlgorithm, SearchAlgorithms

SEARCH_ALGORITHMS = SearchAlgorithms(
    array=(
        SearchAlgorithm(
            name="Linear Search",
            description="Checks every element in turn until the target is found.",
            average="Θ(n)",
            worst="O(n)",
        ),
        SearchAlgorithm(
            name="Binary Search",
            description="Halves a sorted range on every comparison.",
            average="Θ(log(n))",
            worst="O(log(n))",
        ),
        SearchAlgorithm(
            name="Jump Search",
            description="Jumps ahead in fixed blocks of a sorted array, then scans the block linearly.",
            average="Θ(√n)",
            worst="O(√n)",
        ),
        SearchAlgorithm(
            name="Interpolation Search",
            description="Probes where the target should be in uniformly distributed sorted data.",
            average="Θ(log(log(n)))",
            worst="O(n)",
        ),
        SearchAlgorithm(
            name="Exponential Search",
            description="Doubles a bound until it passes the target, then binary searches the range.",
            average="Θ(log(n))",
            worst="O(log(n))",
        ),
    ),
    graph=(
        SearchAlgorithm(
            name="Breadth-First Search",
            description="Visits vertices level by level using a queue.",
            average="Θ(V + E)",
            worst="O(V + E)",
        ),
        SearchAlgorithm(
            name="Depth-First Search",
            description="Follows each branch as deep as possible before backtracking.",
            average="Θ(V + E)",
            worst="O(V + E)",
        ),
        SearchAlgorithm(
            name="Dijkstra's Algorithm",
            description="Shortest paths from a source over non-negative edge weights using a priority queue.",
            average="Θ((v + e) log v)",
            worst="O((v + e) log v)",
        ),
        SearchAlgorithm(
            name="Bellman-Ford",
            description="Shortest paths that tolerate negative edge weights by relaxing every edge v - 1 times.",
            average="Θ(v * e)",
            worst="O(v * e)",
        ),
        SearchAlgorithm(
            name="A* Search",
            description="Best-first search guided by path cost plus a heuristic estimate.",
            average="Θ(b ^ d)",
            worst="O(b ^ d)",
        ),
    ),
)

SEARCH_ALGORITHM_LEGEND: tuple[Concept, ...] = (
    Concept(name="n", description="Number of elements in the array"),
    Concept(name="V / v", description="Number of vertices in the graph"),
    Concept(name="E / e", description="Number of edges in the graph"),
    Concept(name="b", description="Branching factor"),
    Concept(name="d", description="Depth of the shallowest solution"),
)

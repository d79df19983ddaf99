"""Common data structures with their time and space complexities."""
from __future__ import annotations

from core.models import (
    ComplexityOperations,
    DataStructure,
    DataStructureTime,
    SpaceComplexity,
)


def _ops(access: str, search: str, insertion: str, deletion: str) -> ComplexityOperations:
    return ComplexityOperations(access=access, search=search, insertion=insertion, deletion=deletion)


def _structure(name, shape, group, description, average, worst, space) -> DataStructure:
    return DataStructure(
        name=name,
        shape=shape,
        group=group,
        description=description,
        time=DataStructureTime(average=_ops(*average), worst=_ops(*worst)),
        space=SpaceComplexity(worst=space),
    )


_LINEAR_AVG = ("Θ(n)", "Θ(n)", "Θ(1)", "Θ(1)")
_LINEAR_WORST = ("O(n)", "O(n)", "O(1)", "O(1)")
_LOG_AVG = ("Θ(log(n))", "Θ(log(n))", "Θ(log(n))", "Θ(log(n))")
_LOG_WORST = ("O(log(n))", "O(log(n))", "O(log(n))", "O(log(n))")
_N_WORST = ("O(n)", "O(n)", "O(n)", "O(n)")


DATA_STRUCTURES: tuple[DataStructure, ...] = (
    _structure(
        "Array", "[0, 1, 2, 3]", "List",
        "Contiguous block of memory holding elements of one type, addressed by index.",
        ("Θ(1)", "Θ(n)", "Θ(n)", "Θ(n)"),
        ("O(1)", "O(n)", "O(n)", "O(n)"),
        "O(n)",
    ),
    _structure(
        "Stack", "[3] → [2] → [1]", "List",
        "Last-in, first-out collection; push and pop happen at the top.",
        _LINEAR_AVG, _LINEAR_WORST, "O(n)",
    ),
    _structure(
        "Queue", "[1] ← [2] ← [3]", "List",
        "First-in, first-out collection; enqueue at the back, dequeue at the front.",
        _LINEAR_AVG, _LINEAR_WORST, "O(n)",
    ),
    _structure(
        "Singly-Linked List", "1 → 2 → 3 → ∅", "List",
        "Chain of nodes where each node points to the next one.",
        _LINEAR_AVG, _LINEAR_WORST, "O(n)",
    ),
    _structure(
        "Doubly-Linked List", "∅ ⇄ 1 ⇄ 2 ⇄ 3 ⇄ ∅", "List",
        "Chain of nodes where each node points to both its neighbours.",
        _LINEAR_AVG, _LINEAR_WORST, "O(n)",
    ),
    _structure(
        "Skip List", "1 ⇢ 3 ⇢ 7 / 1 → 2 → 3 → 5 → 7", "List",
        "Layered linked lists with express lanes that skip over runs of nodes.",
        _LOG_AVG, _N_WORST, "O(n log(n))",
    ),
    _structure(
        "Hash Table", "{k₁: v₁, k₂: v₂}", "Other",
        "Maps keys to buckets through a hash function for near constant-time lookups.",
        ("N/A", "Θ(1)", "Θ(1)", "Θ(1)"),
        ("N/A", "O(n)", "O(n)", "O(n)"),
        "O(n)",
    ),
    _structure(
        "Binary Search Tree", "2 ↙ 1 ↘ 3", "Tree",
        "Binary tree whose left subtree holds smaller keys and right subtree larger keys.",
        _LOG_AVG, _N_WORST, "O(n)",
    ),
    _structure(
        "Cartesian Tree", "(k, p) heap-ordered BST", "Tree",
        "Binary tree that is heap-ordered by priority and in-order by key.",
        ("N/A", "Θ(log(n))", "Θ(log(n))", "Θ(log(n))"),
        ("N/A", "O(n)", "O(n)", "O(n)"),
        "O(n)",
    ),
    _structure(
        "B-Tree", "[3 | 7] ↙ ↓ ↘", "Tree",
        "Self-balancing search tree whose nodes hold many keys; built for block storage.",
        _LOG_AVG, _LOG_WORST, "O(n)",
    ),
    _structure(
        "Red-Black Tree", "●2 ↙ ○1 ↘ ○3", "Tree",
        "Self-balancing BST that colours nodes to keep paths within a factor of two.",
        _LOG_AVG, _LOG_WORST, "O(n)",
    ),
    _structure(
        "Splay Tree", "x ⟲ root", "Tree",
        "Self-adjusting BST that moves recently accessed nodes to the root.",
        ("N/A", "Θ(log(n))", "Θ(log(n))", "Θ(log(n))"),
        ("N/A", "O(log(n))", "O(log(n))", "O(log(n))"),
        "O(n)",
    ),
    _structure(
        "AVL Tree", "2 ↙ 1 ↘ 3 (|h| ≤ 1)", "Tree",
        "Self-balancing BST whose subtree heights differ by at most one.",
        _LOG_AVG, _LOG_WORST, "O(n)",
    ),
    _structure(
        "KD Tree", "(x, y) split by axis", "Tree",
        "Space-partitioning tree that organises points in k-dimensional space.",
        _LOG_AVG, _N_WORST, "O(n)",
    ),
)

# First-seen order
DATA_STRUCTURE_GROUPS: tuple[str, ...] = tuple(dict.fromkeys(ds.group for ds in DATA_STRUCTURES))

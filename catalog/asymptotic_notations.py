"""Asymptotic notations used throughout the catalog."""
from __future__ import annotations

from core.models import AsymptoticNotation

ASYMPTOTIC_NOTATIONS: tuple[AsymptoticNotation, ...] = (
    AsymptoticNotation(
        name="Big O",
        notation="O",
        description="Upper bound: f(n) = O(g(n)) if f(n) ≤ c·g(n) for some c > 0 and all large n.",
        note="Used for worst-case running time.",
        simplified="At most this fast-growing",
    ),
    AsymptoticNotation(
        name="Big Theta",
        notation="Θ",
        description="Tight bound: f(n) = Θ(g(n)) if f is both O(g(n)) and Ω(g(n)).",
        note="Used for average-case running time in these tables.",
        simplified="Grows exactly like this",
    ),
    AsymptoticNotation(
        name="Big Omega",
        notation="Ω",
        description="Lower bound: f(n) = Ω(g(n)) if f(n) ≥ c·g(n) for some c > 0 and all large n.",
        note="Used for best-case running time.",
        simplified="At least this fast-growing",
    ),
    AsymptoticNotation(
        name="Little o",
        notation="o",
        description="Strict upper bound: f(n)/g(n) → 0 as n → ∞.",
        note="Rarely used in practice.",
        simplified="Strictly slower-growing than this",
    ),
    AsymptoticNotation(
        name="Little omega",
        notation="ω",
        description="Strict lower bound: f(n)/g(n) → ∞ as n → ∞.",
        note="Rarely used in practice.",
        simplified="Strictly faster-growing than this",
    ),
)

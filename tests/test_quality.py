"""Tests for the notation quality classifier."""

import pytest

from core import ComplexityQuality, classify, complexity_class, explain
from core.quality import NOTATION_QUALITY

Q = ComplexityQuality


@pytest.mark.parametrize(
    "notation, expected",
    [
        ("O(1)", Q.BEST),
        ("Θ(log n)", Q.GOOD),
        ("O(n²)", Q.BAD),
        ("N/A", Q.NA),
        ("O(2^n)", Q.WORST),
        ("  O(n)  ", Q.FAIR),
        ("Ω(n log(n))", Q.FAIR),
        ("O(V + E)", Q.FAIR),
        ("O(n!)", Q.WORST),
    ],
)
def test_classify_known_notations(notation, expected):
    assert classify(notation) is expected


@pytest.mark.parametrize("notation", ["", "   ", "\t\n", "some nonsense", "O(?)", "💥", "n/a"])
def test_classify_is_total(notation):
    assert classify(notation) in set(ComplexityQuality)


def test_unknown_notation_defaults_to_fair():
    assert classify("some nonsense") is Q.FAIR
    assert explain("some nonsense").source == "default"


def test_empty_and_blank_default_to_fair():
    assert classify("") is Q.FAIR
    assert classify("   ") is Q.FAIR


@pytest.mark.parametrize("notation, expected", sorted(NOTATION_QUALITY.items()))
def test_table_entries_resolve_from_table(notation, expected):
    result = explain(notation)
    assert result.quality is expected
    assert result.source == "table"


@pytest.mark.parametrize(
    "notation, expected",
    [
        # Heuristics alone would say "good" / "fair" / "fair" / "fair"
        ("O(n(log(n))^2)", Q.BAD),
        ("Θ((n log(n))^2)", Q.BAD),
        ("O(b ^ d)", Q.WORST),
        ("O(v * e)", Q.BAD),
    ],
)
def test_table_wins_over_heuristics(notation, expected):
    assert classify(notation) is expected


def test_quadratic_rule_precedes_log_rule():
    result = explain("O(n^2 log n)")
    assert result.quality is Q.BAD
    assert result.source == "heuristic"


@pytest.mark.parametrize(
    "notation, expected",
    [
        ("O(n! * 2^n)", Q.WORST),
        ("O(2ⁿ · n)", Q.WORST),
        ("Θ(n³ + n)", Q.BAD),
        ("O(n^3 log n)", Q.BAD),
        ("O(n log log n)", Q.FAIR),
        ("O(n*log(n))", Q.FAIR),
        ("O(log log n)", Q.GOOD),
        ("Θ(log(log(n)))", Q.GOOD),
        ("-", Q.NA),
        ("Θ(1) amortized", Q.BEST),
        ("O(n) amortized", Q.FAIR),
        ("O(n + m)", Q.FAIR),
    ],
)
def test_substring_heuristics(notation, expected):
    result = explain(notation)
    assert result.quality is expected
    assert result.source == "heuristic"


def test_exponent_rule_precedes_constant_rule():
    # "(1)" would say best; "n^2" is checked first
    assert classify("O(n^2) + O(1)") is Q.BAD


def test_na_markers_only_match_exactly():
    assert classify(" - ") is Q.NA
    assert classify("-1") is Q.FAIR
    assert classify("N/A ") is Q.NA


def test_classify_is_idempotent():
    for notation in ("O(n log n)", "weird", "O(n^2 log n)", ""):
        assert classify(notation) is classify(notation)
        assert explain(notation) == explain(notation)


def test_byte_order_mark_is_trimmed():
    assert classify("\ufeffN/A") is Q.NA
    assert classify("\ufeff  O(1) \ufeff") is Q.BEST
    assert explain("\ufeffO(n)").normalized == "O(n)"


def test_explain_keeps_original_and_normalized():
    result = explain("  O(log n) ")
    assert result.notation == "  O(log n) "
    assert result.normalized == "O(log n)"
    assert result.quality is Q.GOOD


def test_explain_agrees_with_classify():
    for notation in ("O(1)", "Θ(n^2)", "O(√n)", "-", "O(n log n)", "garbage"):
        assert explain(notation).quality is classify(notation)


def test_complexity_class():
    assert complexity_class("O(1)") == "bg-complexity-best text-gray-900"
    assert complexity_class("O(2^n)") == "bg-complexity-bad text-gray-900"
    assert complexity_class("N/A") == "bg-complexity-na text-gray-600"


def test_quality_rank_orders_tiers():
    ordered = ComplexityQuality.ordered()
    assert ordered == [Q.BEST, Q.GOOD, Q.FAIR, Q.BAD, Q.WORST]
    assert [q.rank for q in ordered] == [0, 1, 2, 3, 4]
    assert Q.NA.rank is None


def test_quality_values_are_plain_names():
    assert [q.value for q in ComplexityQuality] == ["best", "good", "fair", "bad", "worst", "na"]
    assert ComplexityQuality("worst") is Q.WORST

"""Tests for the static reference catalog."""

import pytest
from pydantic import ValidationError

import catalog
from core import classify, explain

# Deliberately outside the exact table and every heuristic
UNTABULATED = {"Θ(√n)", "O(√n)"}


def test_catalog_notations_are_recognized(catalog_notations):
    for notation in catalog_notations:
        source = explain(notation).source
        if notation in UNTABULATED:
            assert source == "default"
        else:
            assert source != "default", notation


def test_time_complexity_levels_match_classifier():
    for entry in catalog.TIME_COMPLEXITIES:
        assert entry.level is classify(entry.notation), entry.name


def test_time_complexities_are_ordered():
    ranks = [entry.level.rank for entry in catalog.TIME_COMPLEXITIES]
    assert ranks == sorted(ranks)


def test_data_structure_groups_in_first_seen_order():
    assert catalog.DATA_STRUCTURE_GROUPS == ("List", "Other", "Tree")
    assert {ds.group for ds in catalog.DATA_STRUCTURES} == set(catalog.DATA_STRUCTURE_GROUPS)


def test_hash_table_has_no_indexed_access():
    hash_table = next(ds for ds in catalog.DATA_STRUCTURES if ds.name == "Hash Table")
    assert hash_table.time.average.access == "N/A"
    assert classify(hash_table.time.worst.access).value == "na"


def test_python_methods_are_flattened_in_module_order():
    expected = [m for methods in catalog.PYTHON_MODULES.values() for m in methods]
    assert list(catalog.ALL_PYTHON_METHODS) == expected
    assert len(catalog.ALL_PYTHON_METHODS) == 39
    assert catalog.PYTHON_MODULE_GROUPS == ("functools", "iterables", "itertools", "collections", "random", "numeric")


def test_python_methods_carry_their_group():
    for group, methods in catalog.PYTHON_MODULES.items():
        assert all(method.group == group for method in methods)


def test_python_zen_has_nineteen_aphorisms():
    assert len(catalog.PYTHON_ZEN) == 19


def test_resources_have_absolute_urls():
    assert all(resource.url.startswith("https://") for resource in catalog.RESOURCES)


def test_records_are_frozen():
    with pytest.raises(ValidationError):
        catalog.SORTING_ALGORITHMS[0].name = "Slowsort"
    with pytest.raises(ValidationError):
        catalog.DATA_STRUCTURES[0].time.worst.access = "O(n)"


def test_module_mapping_is_read_only():
    with pytest.raises(TypeError):
        catalog.PYTHON_MODULES["os"] = ()


def test_get_section():
    assert catalog.get_section("resources") is catalog.RESOURCES
    assert catalog.get_section("search-algorithms") is catalog.SEARCH_ALGORITHMS


def test_get_section_unknown_slug():
    with pytest.raises(KeyError):
        catalog.get_section("routing")

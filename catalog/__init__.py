"""
Static reference catalog.

Immutable records for data structures, algorithms, language notes and links.
``SECTIONS`` maps URL slugs to the exported data.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Any

from .api_notes import GRAPHQL_CONCEPTS, REST_CONSTRAINTS, REST_METHODS
from .asymptotic_notations import ASYMPTOTIC_NOTATIONS
from .concepts import CONCEPTS
from .data_structures import DATA_STRUCTURE_GROUPS, DATA_STRUCTURES
from .python_modules import ALL_PYTHON_METHODS, PYTHON_MODULE_GROUPS, PYTHON_MODULES
from .python_notes import PYTHON_MAGIC_METHODS, PYTHON_USEFUL_NOTES, PYTHON_ZEN
from .resources import RESOURCES
from .search_algorithms import SEARCH_ALGORITHM_LEGEND, SEARCH_ALGORITHMS
from .sorting_algorithms import SORTING_ALGORITHMS
from .sql_notes import SQL_STATEMENTS
from .time_complexities import TIME_COMPLEXITIES

SECTIONS = MappingProxyType({
    "asymptotic-notations": ASYMPTOTIC_NOTATIONS,
    "time-complexities": TIME_COMPLEXITIES,
    "data-structures": DATA_STRUCTURES,
    "data-structure-groups": DATA_STRUCTURE_GROUPS,
    "sorting-algorithms": SORTING_ALGORITHMS,
    "search-algorithms": SEARCH_ALGORITHMS,
    "search-algorithm-legend": SEARCH_ALGORITHM_LEGEND,
    "concepts": CONCEPTS,
    "rest-methods": REST_METHODS,
    "rest-constraints": REST_CONSTRAINTS,
    "graphql-concepts": GRAPHQL_CONCEPTS,
    "sql-statements": SQL_STATEMENTS,
    "python-zen": PYTHON_ZEN,
    "python-magic-methods": PYTHON_MAGIC_METHODS,
    "python-useful-notes": PYTHON_USEFUL_NOTES,
    "python-modules": PYTHON_MODULES,
    "python-module-groups": PYTHON_MODULE_GROUPS,
    "all-python-methods": ALL_PYTHON_METHODS,
    "resources": RESOURCES,
})


def get_section(slug: str) -> Any:
    """
    Look up catalog data by slug.

    Raises:
        KeyError: If no section has that slug
    """
    if slug not in SECTIONS:
        raise KeyError(slug)
    return SECTIONS[slug]


__all__ = [
    "ALL_PYTHON_METHODS",
    "ASYMPTOTIC_NOTATIONS",
    "CONCEPTS",
    "DATA_STRUCTURES",
    "DATA_STRUCTURE_GROUPS",
    "GRAPHQL_CONCEPTS",
    "PYTHON_MAGIC_METHODS",
    "PYTHON_MODULES",
    "PYTHON_MODULE_GROUPS",
    "PYTHON_USEFUL_NOTES",
    "PYTHON_ZEN",
    "RESOURCES",
    "REST_CONSTRAINTS",
    "REST_METHODS",
    "SEARCH_ALGORITHMS",
    "SEARCH_ALGORITHM_LEGEND",
    "SECTIONS",
    "SORTING_ALGORITHMS",
    "SQL_STATEMENTS",
    "TIME_COMPLEXITIES",
    "get_section",
]

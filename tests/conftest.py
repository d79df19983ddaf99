"""Shared fixtures."""

import pytest
from fastapi.testclient import TestClient

import catalog
from app.main import app


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


def _notations():
    for ds in catalog.DATA_STRUCTURES:
        for ops in (ds.time.average, ds.time.worst):
            yield from (ops.access, ops.search, ops.insertion, ops.deletion)
        yield ds.space.worst
    for algo in catalog.SORTING_ALGORITHMS:
        yield from (algo.time.best, algo.time.average, algo.time.worst, algo.space.worst)
    for algo in (*catalog.SEARCH_ALGORITHMS.array, *catalog.SEARCH_ALGORITHMS.graph):
        yield from (algo.average, algo.worst)


@pytest.fixture
def catalog_notations():
    """Every complexity notation that appears in the catalog, deduplicated."""
    return sorted(set(_notations()))

"""
Data models for the complexity catalog.

Frozen Pydantic models: catalog records are built once at import and never mutated.
"""
from __future__ import annotations

from enum import Enum
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class ComplexityQuality(str, Enum):
    """
    Qualitative tier for an asymptotic notation, most to least efficient.

    ``na`` sits outside the order and has no rank.
    """

    BEST = "best"
    GOOD = "good"
    FAIR = "fair"
    BAD = "bad"
    WORST = "worst"
    NA = "na"

    @property
    def rank(self) -> Optional[int]:
        if self is ComplexityQuality.NA:
            return None
        return _ORDERED.index(self)

    @classmethod
    def ordered(cls) -> list[ComplexityQuality]:
        return list(_ORDERED)


_ORDERED = (
    ComplexityQuality.BEST,
    ComplexityQuality.GOOD,
    ComplexityQuality.FAIR,
    ComplexityQuality.BAD,
    ComplexityQuality.WORST,
)


class Record(BaseModel):
    """Base for immutable records."""

    model_config = ConfigDict(frozen=True)


class QualityStyle(Record):
    """Display styling derived from a quality tier."""

    quality: ComplexityQuality
    display_class: str = Field(..., description="Background + foreground classes for a chip")
    text_class: str = Field(..., description="Text-only emphasis classes")
    label: str = Field(..., min_length=1, description="Human-readable tier name")


ResolutionSource = Literal["table", "heuristic", "default"]


class Classification(Record):
    """A classified notation and the resolution step that decided it."""

    notation: str
    normalized: str
    quality: ComplexityQuality
    source: ResolutionSource


# ---------------------------------------------------------------------------
# Catalog records
# ---------------------------------------------------------------------------


class ComplexityOperations(Record):
    access: str
    search: str
    insertion: str
    deletion: str


class DataStructureTime(Record):
    average: ComplexityOperations
    worst: ComplexityOperations


class SpaceComplexity(Record):
    worst: str


DataStructureGroup = Literal["List", "Tree", "Other"]


class DataStructure(Record):
    name: str
    shape: str
    group: DataStructureGroup
    description: str
    time: DataStructureTime
    space: SpaceComplexity


class SortingTime(Record):
    best: str
    average: str
    worst: str


class SortingAlgorithm(Record):
    name: str
    description: str
    time: SortingTime
    space: SpaceComplexity


class SearchAlgorithm(Record):
    name: str
    description: str
    average: str
    worst: str


class SearchAlgorithms(Record):
    array: tuple[SearchAlgorithm, ...]
    graph: tuple[SearchAlgorithm, ...]


class AsymptoticNotation(Record):
    name: str
    notation: str
    description: str
    note: str
    simplified: str


class TimeComplexity(Record):
    name: str
    notation: str
    description: str
    level: ComplexityQuality


class Concept(Record):
    name: str
    description: str


class ConceptGroups(Record):
    oop: tuple[Concept, ...]
    solid: tuple[Concept, ...]
    design: tuple[Concept, ...]
    paradigms: tuple[Concept, ...]
    principles: tuple[Concept, ...]


class PythonMethod(Record):
    method: str
    group: str
    description: str


class PythonDunder(Record):
    name: str
    description: str


class SqlStatement(Record):
    statement: str
    description: str
    example: str


class RestConstraint(Record):
    name: str
    description: str


class RestMethod(Record):
    method: str
    crud: str


class GraphQLOperation(Record):
    operation: str
    description: str


class Resource(Record):
    name: str
    url: str
    description: Optional[str] = None

"""
Pydantic models for the Big-O Catalog API.
"""
from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from app.config import settings
from core.models import ComplexityQuality, QualityStyle, ResolutionSource


def _check_notation_length(notation: str) -> str:
    if len(notation) > settings.MAX_NOTATION_LENGTH:
        raise ValueError(f"Notation exceeds {settings.MAX_NOTATION_LENGTH} characters")
    return notation


class ClassifyRequest(BaseModel):
    """Request payload for a single notation."""
    notation: str = Field(..., description="Asymptotic notation, e.g. O(n log n)")

    @field_validator("notation")
    @classmethod
    def validate_notation(cls, v: str) -> str:
        return _check_notation_length(v)


class BatchClassifyRequest(BaseModel):
    """Request payload for several notations at once."""
    notations: list[str] = Field(..., min_length=1, description="Notations to classify")

    @field_validator("notations")
    @classmethod
    def validate_notations(cls, v: list[str]) -> list[str]:
        if len(v) > settings.MAX_BATCH_SIZE:
            raise ValueError(f"At most {settings.MAX_BATCH_SIZE} notations per request")
        return [_check_notation_length(n) for n in v]


class ClassificationResult(BaseModel):
    notation: str = Field(..., description="Notation as submitted")
    quality: ComplexityQuality
    source: ResolutionSource = Field(..., description="Resolution step that decided the tier")
    style: QualityStyle


class ClassifyResponse(BaseModel):
    success: bool = True
    result: ClassificationResult


class BatchClassifyResponse(BaseModel):
    success: bool = True
    results: list[ClassificationResult]


class StylesResponse(BaseModel):
    success: bool = True
    styles: list[QualityStyle]


class StyleResponse(BaseModel):
    success: bool = True
    style: QualityStyle


class SectionsResponse(BaseModel):
    success: bool = True
    sections: list[str]


class SectionResponse(BaseModel):
    success: bool = True
    section: str
    data: Any


class ErrorResponse(BaseModel):
    success: bool = False
    error: str
    code: Optional[str] = None

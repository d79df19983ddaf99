"""
FastAPI application for the Big-O Catalog.
"""
from __future__ import annotations

from collections.abc import Mapping
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any

from fastapi import APIRouter, FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

import catalog
from app import __version__
from app.config import settings, logger
from app.models import (
    BatchClassifyRequest,
    BatchClassifyResponse,
    ClassificationResult,
    ClassifyRequest,
    ClassifyResponse,
    ErrorResponse,
    SectionResponse,
    SectionsResponse,
    StyleResponse,
    StylesResponse,
)
from core import ComplexityQuality, all_styles, explain, style_for


def _classify(notation: str) -> ClassificationResult:
    classification = explain(notation)
    return ClassificationResult(
        notation=notation,
        quality=classification.quality,
        source=classification.source,
        style=style_for(classification.quality),
    )


def _plain(data: Any) -> Any:
    if isinstance(data, Mapping):
        return {key: _plain(value) for key, value in data.items()}
    return data


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------


classify_router = APIRouter()


@classify_router.post("/classify", response_model=ClassifyResponse, responses={422: {"model": ErrorResponse}})
async def classify_notation(request: ClassifyRequest):
    """Classify one notation and return its tier and display style."""
    result = _classify(request.notation)
    logger.info("Classified notation as %s (%s)", result.quality.value, result.source)
    return ClassifyResponse(result=result)


@classify_router.post("/classify/batch", response_model=BatchClassifyResponse, responses={422: {"model": ErrorResponse}})
async def classify_batch(request: BatchClassifyRequest):
    """Classify several notations, preserving request order."""
    results = [_classify(notation) for notation in request.notations]
    logger.info("Classified batch of %d notations", len(results))
    return BatchClassifyResponse(results=results)


@classify_router.get("/qualities", response_model=StylesResponse)
async def list_qualities():
    return StylesResponse(styles=all_styles())


@classify_router.get("/qualities/{tier}", response_model=StyleResponse, responses={404: {"model": ErrorResponse}})
async def get_quality(tier: str):
    try:
        quality = ComplexityQuality(tier.strip().lower())
    except ValueError:
        raise HTTPException(status_code=404, detail=f"Unknown quality tier: {tier}")
    return StyleResponse(style=style_for(quality))


catalog_router = APIRouter()


@catalog_router.get("/catalog", response_model=SectionsResponse)
async def list_sections():
    return SectionsResponse(sections=list(catalog.SECTIONS))


@catalog_router.get("/catalog/{section}", response_model=SectionResponse, responses={404: {"model": ErrorResponse}})
async def get_section(section: str):
    try:
        data = catalog.get_section(section)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Unknown catalog section: {section}")
    return SectionResponse(section=section, data=_plain(data))


health_router = APIRouter()


@health_router.get("/health")
async def health():
    return {
        "status": "ok",
        "version": __version__,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


# ---------------------------------------------------------------------------
# Middleware
# ---------------------------------------------------------------------------


async def security_headers_middleware(request: Request, call_next):
    response = await call_next(request)
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"
    response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
    return response


# ---------------------------------------------------------------------------
# FastAPI app assembly
# ---------------------------------------------------------------------------


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan management."""
    logger.info("Big-O Catalog v%s starting", __version__)
    logger.info("Catalog sections: %d", len(catalog.SECTIONS))
    logger.info("CORS origins: %s", ", ".join(settings.cors_origins))

    yield

    logger.info("Shutting down")


app = FastAPI(
    title="Big-O Catalog API",
    description="Complexity quality classification and programming reference tables",
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None,
)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(
        "Unhandled exception on %s %s: %s: %s",
        request.method,
        request.url.path,
        type(exc).__name__,
        str(exc)[:200],
    )
    return JSONResponse(status_code=500, content={"success": False, "error": "Internal server error"})


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Log field names and error types only, never submitted values."""
    error_details = [
        {"field": err.get("loc", [])[-1] if err.get("loc") else "unknown", "type": err.get("type")}
        for err in exc.errors()[:5]
    ]
    logger.warning("Validation error on %s %s: %s", request.method, request.url.path, error_details)
    return JSONResponse(status_code=422, content={"success": False, "error": "Invalid request format"})


app.middleware("http")(security_headers_middleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "name": "Big-O Catalog API",
        "version": __version__,
        "status": "ok",
    }


app.include_router(health_router, prefix="/api/v1", tags=["health"])
app.include_router(classify_router, prefix="/api/v1", tags=["classify"])
app.include_router(catalog_router, prefix="/api/v1", tags=["catalog"])

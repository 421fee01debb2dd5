"""
Humanize Numbers: FastAPI Server
================================

RESTful API exposing the number formatters.

Endpoints:
    GET  /humanize/{value}   All human-readable forms of one integer
    POST /humanize           Batch humanization of a list of integers
    GET  /health             Health check / readiness probe

Run:
    uvicorn api:app --reload              # Dev (http://localhost:8000)
    uvicorn api:app --host 0.0.0.0        # Production

Docs:
    http://localhost:8000/docs             # Swagger UI (auto-generated)
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field, StrictInt

from humanize_numbers import __version__
from humanize_numbers.config import Settings
from humanize_numbers.exceptions import HumanizeError
from humanize_numbers.formatter import HumanNumber
from humanize_numbers.models import IntegerWidth, Rendering
from humanize_numbers.number_to_words import MAX_SPELLABLE

logger = logging.getLogger(__name__)

MAX_BATCH = 1000


# ─── Application Lifespan (load settings) ───────────────────────────

_settings: Settings | None = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Read HUMANIZE_* settings once on startup."""
    global _settings  # noqa: PLW0603
    _settings = Settings()
    yield
    _settings = None


# ─── FastAPI App ─────────────────────────────────────────────────────

app = FastAPI(
    title="Humanize Numbers API",
    description=(
        "Render integers as ordinals, English words, comma-grouped digits "
        "and repetition phrases."
    ),
    version=__version__,
    lifespan=lifespan,
)


# ─── Request / Response Schemas ─────────────────────────────────────


class HumanizeRequest(BaseModel):
    """Request body for the batch /humanize endpoint."""

    values: list[StrictInt] = Field(
        ...,
        min_length=1,
        max_length=MAX_BATCH,
        description="Integers to humanize (JSON booleans are rejected).",
        json_schema_extra={"example": [1, 21, 1234567, -2]},
    )
    width: Optional[IntegerWidth] = Field(
        default=None,
        description="Reject values that do not fit this integer width.",
    )


class HumanizeResponse(BaseModel):
    results: list[Rendering]
    error_count: int


class ErrorResponse(BaseModel):
    code: str
    message: str
    details: dict = Field(default_factory=dict)


class HealthResponse(BaseModel):
    status: str
    version: str
    widths: list[str]
    max_spellable: str = Field(description="Largest magnitude to_text accepts, as a string")


# ─── Helpers ─────────────────────────────────────────────────────────


def _get_settings() -> Settings:
    if _settings is None:
        raise HTTPException(status_code=503, detail="Settings not initialised")
    return _settings


def _humanize(value: int, width: IntegerWidth | None, settings: Settings) -> Rendering:
    """Render one value, recording (not raising) any domain failure."""
    resolved = width or settings.default_width
    try:
        number = HumanNumber.of(value, resolved, english_teens=settings.english_teens)
    except HumanizeError as e:
        logger.info("Rejected value: [%s] %s", e.code, e.message)
        return Rendering(value=value, width=resolved, error_code=e.code, error_message=e.message)
    return number.render()


@app.exception_handler(HumanizeError)
async def _humanize_error_handler(request: Request, exc: HumanizeError) -> JSONResponse:
    logger.info("%s %s failed: [%s] %s", request.method, request.url.path, exc.code, exc)
    body = ErrorResponse(code=exc.code, message=exc.message, details=exc.details)
    return JSONResponse(status_code=422, content=body.model_dump())


# ─── Endpoints ───────────────────────────────────────────────────────


@app.get(
    "/humanize/{value}",
    summary="Humanize a single integer",
    tags=["Humanize"],
    responses={
        422: {"model": ErrorResponse, "description": "Value out of range for width or scale"},
        503: {"description": "Settings not yet initialised"},
    },
)
def humanize_one(value: int, width: Optional[IntegerWidth] = None) -> Rendering:
    """Return the ordinal, spelled-out text, grouped digits and repetition phrase.

    Unlike the batch endpoint, any failure (width or scale overflow) is an
    HTTP 422 error.
    """
    settings = _get_settings()
    number = HumanNumber.of(value, width or settings.default_width, english_teens=settings.english_teens)
    return Rendering(
        value=number.value,
        width=number.width,
        ordinal=number.ord(),
        text=number.to_text(),
        intcomma=number.intcomma(),
        times=number.times(),
    )


@app.post(
    "/humanize",
    summary="Humanize a batch of integers",
    tags=["Humanize"],
    responses={503: {"description": "Settings not yet initialised"}},
)
def humanize_batch(request: HumanizeRequest) -> HumanizeResponse:
    """Humanize every value; failures are reported per item, not as an HTTP error."""
    settings = _get_settings()
    results = [_humanize(v, request.width, settings) for v in request.values]
    return HumanizeResponse(
        results=results,
        error_count=sum(1 for r in results if not r.ok),
    )


@app.get(
    "/health",
    summary="Health check",
    tags=["System"],
    responses={503: {"description": "Settings not yet initialised"}},
)
def health_check() -> HealthResponse:
    """Returns service status and the supported integer range."""
    _get_settings()
    return HealthResponse(
        status="healthy",
        version=__version__,
        widths=[w.value for w in IntegerWidth],
        max_spellable=str(MAX_SPELLABLE),
    )

"""FastAPI application with grammar-check API routes and OpenAPI docs.

WHY: The web front end (and curl, scripts, other services) needs an
HTTP API to correct text and to see what the correction changed. The
API key for the correction model must stay on the server, so browsers
never call the model directly.

HOW: A single FastAPI app exposes five endpoints grouped by tags.
POST /correct-grammar forwards text to the Gemini client and returns
the corrected text. POST /diff runs the pure diff core on two texts.
POST /check does both in one round trip. GET /formats and GET /health
are informational.

RULES:
- Error responses use the ErrorResponse schema ({"detail": ...})
- ValidationError → 400, ConfigurationError → 500, UpstreamError → 502
- Unexpected failures are logged with a traceback and answered with 500
- CORS is open to all origins (the API is called from browser pages)
- Python 3.9+ compatible (no match/case, no PEP 604 unions)
"""

from __future__ import annotations

import logging
from typing import List

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from grammar_checker import __version__
from grammar_checker.config import API_HOST, API_PORT
from grammar_checker.core.metrics import changed_words
from grammar_checker.errors import ConfigurationError, UpstreamError, ValidationError
from grammar_checker.formatters import FORMATTERS
from grammar_checker.formatters.base import DiffReport, RenderOptions
from grammar_checker.formatters.html_highlight import HtmlHighlightFormatter
from grammar_checker.server.models import (
    CheckResponse,
    CorrectRequest,
    CorrectResponse,
    DiffRequest,
    DiffResponse,
    ErrorResponse,
    FormatInfo,
    HealthResponse,
    SummaryModel,
    TokenModel,
)
from grammar_checker.validation import validate_size, validate_text

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# App setup
# ---------------------------------------------------------------------------

app = FastAPI(
    title="Grammar Checker API",
    description=(
        "REST API for correcting text with a generative model and "
        "quantifying what the correction changed: word and sentence "
        "change counts, change rate, and per-word highlighting."
    ),
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


async def _fetch_correction(text: str) -> str:
    """Correct ``text`` with a fresh Gemini client.

    Kept as a module-level function so tests can patch it.
    """
    from grammar_checker.api.client import GeminiClient

    async with GeminiClient() as client:
        return await client.correct_text(text)


async def _correct_or_raise(text: str) -> str:
    """Run the correction and translate failures into HTTP errors."""
    try:
        return await _fetch_correction(text)
    except ConfigurationError:
        logger.error("Correction requested but GEMINI_API_KEY is not set")
        raise HTTPException(status_code=500, detail="API key not configured")
    except UpstreamError as exc:
        logger.warning("Correction service failed: %s", exc)
        raise HTTPException(status_code=502, detail="Failed to correct grammar")
    except Exception:
        logger.exception("Unexpected failure while correcting text")
        raise HTTPException(status_code=500, detail="Failed to correct grammar")


def _diff_payload(report: DiffReport, highlight: bool) -> dict:
    """Build the shared DiffResponse fields for a report."""
    options = RenderOptions(highlight=highlight)
    result = report.result
    summary = result.summary
    html = HtmlHighlightFormatter().format(report, options)[0].content
    return {
        "summary": SummaryModel(
            words_total=summary.words_total,
            words_changed=summary.words_changed,
            sentences_changed=summary.sentences_changed,
            rate=summary.rate,
        ),
        "tokens": [TokenModel(token=t.token, matched=t.matched) for t in result.tokens],
        "changed_words": changed_words(result, options.max_changed_words),
        "html": html,
    }


# ---------------------------------------------------------------------------
# Endpoints: Correction
# ---------------------------------------------------------------------------


@app.post(
    "/correct-grammar",
    response_model=CorrectResponse,
    tags=["correction"],
    summary="Correct the grammar of a text",
    description=(
        "Sends the text to the correction model and returns the corrected "
        "version. The model is asked to keep the meaning unchanged."
    ),
    responses={
        400: {"model": ErrorResponse, "description": "Missing, blank, or oversized text"},
        500: {"model": ErrorResponse, "description": "API key not configured"},
        502: {"model": ErrorResponse, "description": "Correction service failed"},
    },
)
async def correct_grammar(body: CorrectRequest) -> CorrectResponse:
    try:
        validate_text(body.text or "")
    except ValidationError as exc:
        raise HTTPException(status_code=400, detail=str(exc))

    corrected = await _correct_or_raise(body.text)
    return CorrectResponse(corrected_text=corrected)


@app.post(
    "/check",
    response_model=CheckResponse,
    tags=["correction"],
    summary="Correct a text and report what changed",
    description=(
        "Corrects the text like POST /correct-grammar, then diffs the "
        "original against the correction and returns both."
    ),
    responses={
        400: {"model": ErrorResponse, "description": "Missing, blank, or oversized text"},
        500: {"model": ErrorResponse, "description": "API key not configured"},
        502: {"model": ErrorResponse, "description": "Correction service failed"},
    },
)
async def check(body: CorrectRequest) -> CheckResponse:
    original = (body.text or "").strip()
    try:
        validate_text(original)
    except ValidationError as exc:
        raise HTTPException(status_code=400, detail=str(exc))

    corrected = await _correct_or_raise(original)
    report = DiffReport.build(original, corrected)
    logger.info(
        "Checked %d words, %d changed (%d%%)",
        report.result.summary.words_total,
        report.result.summary.words_changed,
        report.result.summary.rate,
    )
    return CheckResponse(corrected_text=corrected, **_diff_payload(report, body.highlight))


# ---------------------------------------------------------------------------
# Endpoints: Diff
# ---------------------------------------------------------------------------


@app.post(
    "/diff",
    response_model=DiffResponse,
    tags=["diff"],
    summary="Diff an original text against a corrected version",
    description=(
        "Aligns the two texts word by word and sentence by sentence and "
        "returns change counts, the change rate, and per-word highlighting. "
        "No correction model is called."
    ),
    responses={
        400: {"model": ErrorResponse, "description": "Text exceeds the word limit"},
    },
)
async def diff(body: DiffRequest) -> DiffResponse:
    try:
        validate_size(body.original, "original")
        validate_size(body.corrected, "corrected")
    except ValidationError as exc:
        raise HTTPException(status_code=400, detail=str(exc))

    report = DiffReport.build(body.original, body.corrected)
    return DiffResponse(**_diff_payload(report, body.highlight))


# ---------------------------------------------------------------------------
# Endpoints: Formats
# ---------------------------------------------------------------------------


@app.get(
    "/formats",
    response_model=List[FormatInfo],
    tags=["formats"],
    summary="List available report formats",
    description=(
        "Returns all supported report formats with their identifiers, "
        "human-readable names, and file suffixes."
    ),
)
async def list_formats() -> List[FormatInfo]:
    sample = DiffReport.build("", "")
    result = []
    for key, formatter_cls in sorted(FORMATTERS.items()):
        formatter = formatter_cls()
        outputs = formatter.format(sample)
        result.append(FormatInfo(
            key=key,
            name=formatter.name,
            suffix=outputs[0].suffix if outputs else "",
        ))
    return result


# ---------------------------------------------------------------------------
# Endpoints: Health
# ---------------------------------------------------------------------------


@app.get(
    "/health",
    response_model=HealthResponse,
    tags=["health"],
    summary="Health check",
    description="Liveness check for load balancers and orchestrators.",
)
async def health_check() -> HealthResponse:
    return HealthResponse(status="ok", version=__version__)


def run_api():
    """Entry point for the grammar-check-api console script."""
    import uvicorn

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    uvicorn.run(app, host=API_HOST, port=API_PORT)

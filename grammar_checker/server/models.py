"""Pydantic request/response models for the HTTP API.

WHY: The FastAPI endpoints need typed schemas for request validation,
response serialization, and automatic OpenAPI documentation. Pydantic
models enforce field types at runtime and generate JSON Schema that
appears in the /docs UI.

HOW: Each endpoint pair (request + response) has its own model. Shared
pieces (summary, token classification) are nested models. All models
include Field descriptions for rich OpenAPI docs.

RULES:
- All models use Field(description=...) for OpenAPI documentation
- /correct-grammar keeps the camelCase ``correctedText`` key for
  existing web clients; all other fields are snake_case
- Python 3.9+ compatible (no PEP 604 unions, use Optional from typing)
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------


class CorrectRequest(BaseModel):
    """Body for POST /correct-grammar and POST /check."""

    text: Optional[str] = Field(
        default=None,
        description="The text to correct.",
    )
    highlight: bool = Field(
        default=True,
        description="Wrap corrected words in matched/changed spans (POST /check only).",
    )

    model_config = {"json_schema_extra": {
        "examples": [
            {"text": "i hope it will correct teh mistakes", "highlight": True}
        ]
    }}


class DiffRequest(BaseModel):
    """Body for POST /diff."""

    original: str = Field(description="The text as the user wrote it.")
    corrected: str = Field(description="The revised text to compare against.")
    highlight: bool = Field(
        default=True,
        description="Wrap corrected words in matched/changed spans.",
    )


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------


class CorrectResponse(BaseModel):
    """Response of POST /correct-grammar."""

    corrected_text: str = Field(
        alias="correctedText",
        description="The corrected text returned by the model.",
    )

    model_config = {"populate_by_name": True}


class SummaryModel(BaseModel):
    """Aggregate change counts."""

    words_total: int = Field(description="Word count of the original (or corrected, if the original is empty).")
    words_changed: int = Field(description="Original words not kept in the corrected text.")
    sentences_changed: int = Field(description="Sentences not shared, in order, by both texts.")
    rate: int = Field(description="Changed words as a whole percentage of words_total.")


class TokenModel(BaseModel):
    """One corrected-side word and whether it was kept."""

    token: str = Field(description="The word as it appears in the corrected text.")
    matched: bool = Field(description="True if the word is part of the common subsequence.")


class DiffResponse(BaseModel):
    """Response of POST /diff."""

    summary: SummaryModel = Field(description="Aggregate change counts.")
    tokens: List[TokenModel] = Field(description="Corrected-text words in order, classified.")
    changed_words: List[str] = Field(description="First changed words (capped at 30).")
    html: str = Field(description="Highlighted HTML fragment of the corrected text.")

    model_config = {"json_schema_extra": {
        "examples": [
            {
                "summary": {
                    "words_total": 7,
                    "words_changed": 1,
                    "sentences_changed": 1,
                    "rate": 14,
                },
                "tokens": [
                    {"token": "I", "matched": True},
                    {"token": "the", "matched": False},
                ],
                "changed_words": ["the"],
                "html": '<div class="highlighted">...</div>',
            }
        ]
    }}


class CheckResponse(DiffResponse):
    """Response of POST /check — the correction plus its diff."""

    corrected_text: str = Field(description="The corrected text returned by the model.")


class FormatInfo(BaseModel):
    """Description of an available report format."""

    key: str = Field(description="Format identifier used in CLI and API requests.")
    name: str = Field(description="Human-readable format name.")
    suffix: str = Field(description="File suffix produced (e.g. '-report.json').")


class ErrorResponse(BaseModel):
    """Standard error response body.

    RULES:
    - detail is always a human-readable error message
    """

    detail: str = Field(description="Human-readable error description.")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(description="Service health status.", json_schema_extra={"example": "ok"})
    version: str = Field(description="API version string.", json_schema_extra={"example": "0.1.0"})

"""Configuration constants, correction prompt, and .env loading.

WHY: Centralizes all configurable values so they are easy to find,
update, and override. The Gemini endpoint, model, prompt, and input
limits are plain module-level values — not buried in the client — so
both humans and coding agents can modify them confidently.

HOW: python-dotenv loads the .env file on import. Constants are read
from the environment with sensible defaults. The load_api_key()
function provides a clear error when the key is missing.

RULES:
- API key is loaded from .env via python-dotenv, never hardcoded
- All defaults can be overridden via environment variables
- MAX_INPUT_TOKENS bounds the quadratic alignment cost at the glue
  boundary; the diff core itself never enforces it
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

from grammar_checker.errors import ConfigurationError

# Load .env from the project root (where the script is run from)
load_dotenv()

# ---------------------------------------------------------------------------
# Correction service (Gemini generateContent)
# ---------------------------------------------------------------------------

GEMINI_BASE_URL = os.getenv(
    "GEMINI_BASE_URL", "https://generativelanguage.googleapis.com/v1"
)
GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.5-flash-lite")
GEMINI_TIMEOUT_S = float(os.getenv("GEMINI_TIMEOUT_S", "60"))

CORRECTION_PROMPT = (
    "Correct the grammar, punctuation, and sentence structure of the "
    "following text while keeping its meaning the same. Return only the "
    "corrected version:\n\n{text}"
)
"""Prompt template sent to the model; ``{text}`` is the user's input."""

# ---------------------------------------------------------------------------
# Input limits and display defaults
# ---------------------------------------------------------------------------

MAX_INPUT_TOKENS = int(os.getenv("MAX_INPUT_TOKENS", "5000"))
"""Practical per-side token limit; alignment is O(n*m) in time and memory."""

MAX_CHANGED_WORDS = 30
"""How many changed words reports list before truncating."""

API_HOST = os.getenv("API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("API_PORT", "8000"))

DEMO_TEXT = (
    "this is a demo text where i write bad grammar. i hope it will correct "
    "teh mistakes.  i am looking forward to it!"
)


def load_api_key() -> str:
    """Load the Gemini API key from the environment.

    WHY: The API key is required for every correction call. Loading it
    from the environment (via .env) keeps it out of source code.

    RULES:
    - Raises ConfigurationError if the key is missing or empty
    - Never returns a default/placeholder value
    """
    key = os.getenv("GEMINI_API_KEY", "").strip()
    if not key:
        raise ConfigurationError(
            "API key not configured. "
            "Add GEMINI_API_KEY to the .env file in the app folder."
        )
    return key

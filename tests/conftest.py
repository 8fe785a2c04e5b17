"""Shared test fixtures for the grammar_checker test suite.

WHY: Several test modules exercise the same reference text pairs — the
demo paragraph, the "teh" typo, full replacement. Centralizing them here
keeps the expected numbers in one place.

RULES:
- Expected counts next to each pair were worked out by hand and must
  only change together with the normalization rules
"""

import pytest

from grammar_checker.config import DEMO_TEXT

# (original, corrected) pairs used across modules
TYPO_ORIGINAL = "i hope it will correct teh mistakes"
TYPO_CORRECTED = "I hope it will correct the mistakes"

CASE_ONLY_ORIGINAL = "this is a demo text"
CASE_ONLY_CORRECTED = "This is a demo text."

DEMO_CORRECTED = (
    "This is a demo text where I write bad grammar. I hope it will correct "
    "the mistakes. I am looking forward to it!"
)


@pytest.fixture
def typo_pair():
    """One misspelled word: 7 words, 1 changed, rate 14."""
    return TYPO_ORIGINAL, TYPO_CORRECTED


@pytest.fixture
def case_only_pair():
    """Only casing and trailing punctuation differ: nothing changed."""
    return CASE_ONLY_ORIGINAL, CASE_ONLY_CORRECTED


@pytest.fixture
def demo_pair():
    """The built-in demo paragraph and a plausible correction.

    23 words, 1 changed ("teh" → "the"), 3 sentences of which 1 changed.
    """
    return DEMO_TEXT, DEMO_CORRECTED


@pytest.fixture(autouse=True)
def _no_real_api_key(monkeypatch):
    """Make sure no test can reach the real correction service."""
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)

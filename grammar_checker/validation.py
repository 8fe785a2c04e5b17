"""Boundary checks for text submitted by users.

WHY: The diff core accepts any string, but the alignment is quadratic
and the correction service costs money per call. The CLI and HTTP API
reject blank input and input beyond the practical token limit before
doing any work, with a message that says what was wrong.

RULES:
- Blank (empty or whitespace-only) text raises ValidationError
- More than ``max_tokens`` whitespace-delimited words raises ValidationError
- The check never modifies the text; callers decide whether to strip it
"""

from __future__ import annotations

from typing import Optional

from grammar_checker.config import MAX_INPUT_TOKENS
from grammar_checker.core.tokenizer import tokenize
from grammar_checker.errors import ValidationError


def validate_text(text: str, field: str = "text", max_tokens: Optional[int] = None) -> None:
    """Raise ValidationError if ``text`` is blank or too long.

    Args:
        text: The submitted text.
        field: Name used in the error message (e.g. "original").
        max_tokens: Token limit; defaults to config.MAX_INPUT_TOKENS.
    """
    if not text or not text.strip():
        raise ValidationError("{} is required".format(field.capitalize()))
    validate_size(text, field, max_tokens)


def validate_size(text: str, field: str = "text", max_tokens: Optional[int] = None) -> None:
    """Raise ValidationError if ``text`` has more words than allowed.

    Blank text passes; use validate_text() where blank input is an error.
    """
    limit = MAX_INPUT_TOKENS if max_tokens is None else max_tokens
    count = len(tokenize(text))
    if count > limit:
        raise ValidationError(
            "{} has {:,} words, which exceeds the limit of {:,} words.".format(
                field.capitalize(), count, limit
            )
        )

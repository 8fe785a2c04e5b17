"""Change metrics, token classification, and the ``diff_text`` boundary.

WHY: Users want two answers from a correction: how much changed, and
where. This module runs the aligner over words and over sentences and
turns the two alignments into a ChangeSummary plus a per-word
matched/changed classification of the corrected text.

HOW: Tokenize both texts and align their ``norm`` keys (word level).
Segment both texts into sentences and align their ``norm`` keys
(sentence level). Counts come from token/sentence lengths and the two
LCS lengths; classification marks a corrected token as matched iff its
index is a B-coordinate of a word-level pair.

RULES:
- words_total = len(original tokens) or len(corrected tokens) if 0
- words_changed = max(0, len(original tokens) - word LCS length)
- sentences_changed = max(len(sentences_a), len(sentences_b)) - sentence
  LCS length (uses the larger side, unlike words_changed)
- rate = half-up round of 100 * words_changed / words_total; 0 if no words
- Classification is positional: a moved word counts as changed
"""

from __future__ import annotations

import math
from typing import List, Sequence

from grammar_checker.core.aligner import align
from grammar_checker.core.ir import (
    AlignmentResult,
    ChangeSummary,
    DiffResult,
    Token,
    TokenClassification,
)
from grammar_checker.core.tokenizer import segment_sentences, tokenize


def _round_half_up(value: float) -> int:
    """Round x.5 upward, unlike Python's round-half-to-even."""
    return int(math.floor(value + 0.5))


def change_rate(words_changed: int, words_total: int) -> int:
    """Percentage of changed words, 0 when there are no words."""
    if words_total == 0:
        return 0
    return _round_half_up(words_changed / words_total * 100)


def count_sentence_changes(original_text: str, corrected_text: str) -> int:
    """Number of sentences not shared (in order) by both texts."""
    sentences_a = segment_sentences(original_text)
    sentences_b = segment_sentences(corrected_text)
    alignment = align(
        [s.norm for s in sentences_a],
        [s.norm for s in sentences_b],
    )
    return max(len(sentences_a), len(sentences_b)) - alignment.length


def _summarize(
    original_tokens: Sequence[Token],
    corrected_tokens: Sequence[Token],
    word_alignment: AlignmentResult,
    sentences_changed: int,
) -> ChangeSummary:
    words_total = len(original_tokens) or len(corrected_tokens)
    words_changed = max(0, len(original_tokens) - word_alignment.length)
    return ChangeSummary(
        words_total=words_total,
        words_changed=words_changed,
        sentences_changed=sentences_changed,
        rate=change_rate(words_changed, words_total),
    )


def compute_change_summary(original_text: str, corrected_text: str) -> ChangeSummary:
    """Compute word/sentence change counts and the change rate.

    Args:
        original_text: The text as the user wrote it.
        corrected_text: The revised text returned by the correction service.

    Returns:
        ChangeSummary for the pair.
    """
    original_tokens = tokenize(original_text)
    corrected_tokens = tokenize(corrected_text)
    word_alignment = align(
        [t.norm for t in original_tokens],
        [t.norm for t in corrected_tokens],
    )
    return _summarize(
        original_tokens,
        corrected_tokens,
        word_alignment,
        count_sentence_changes(original_text, corrected_text),
    )


def classify_tokens(
    corrected_tokens: Sequence[Token],
    alignment: AlignmentResult,
) -> List[TokenClassification]:
    """Mark each corrected token as matched (kept) or changed.

    Args:
        corrected_tokens: Tokens of the corrected text, in order.
        alignment: Word-level alignment with the corrected text as side B.

    Returns:
        One TokenClassification per corrected token, in order.
    """
    matched = alignment.matched_b
    return [
        TokenClassification(token=tok.original, matched=idx in matched)
        for idx, tok in enumerate(corrected_tokens)
    ]


def diff_text(original_text: str, corrected_text: str) -> DiffResult:
    """Diff an original text against its corrected version.

    WHY: This is the single entry point the CLI, server, and formatters
    use. It tokenizes and aligns once and derives both the summary and
    the highlighting classification from the same alignment.

    Args:
        original_text: The text as the user wrote it.
        corrected_text: The revised text.

    Returns:
        DiffResult with summary, corrected-side classification, and the
        word-level alignment.
    """
    original_tokens = tokenize(original_text)
    corrected_tokens = tokenize(corrected_text)
    word_alignment = align(
        [t.norm for t in original_tokens],
        [t.norm for t in corrected_tokens],
    )
    summary = _summarize(
        original_tokens,
        corrected_tokens,
        word_alignment,
        count_sentence_changes(original_text, corrected_text),
    )
    return DiffResult(
        summary=summary,
        tokens=tuple(classify_tokens(corrected_tokens, word_alignment)),
        word_alignment=word_alignment,
    )


def changed_words(result: DiffResult, limit: int = 30) -> List[str]:
    """Corrected-side words outside the alignment, first ``limit`` only."""
    words = [c.token for c in result.tokens if not c.matched]
    return words[:limit]

"""Word tokenization and naive sentence segmentation.

WHY: The aligner compares plain string keys. Before two texts can be
aligned, each must be cut into units (words or sentences) and each unit
reduced to a comparison key, so that "This" and "this." count as the
same word while the display layer still shows the verbatim text.

HOW: Words are whitespace-delimited fragments; the key lowercases the
fragment and strips non-word characters from both ends only. Sentences
are fragments between runs of terminal punctuation; the key lowercases,
collapses whitespace, and drops every non-word, non-space character.

RULES:
- Interior punctuation in words is preserved ("don't" stays "don't")
- All-punctuation words normalize to "" and compare equal to each other
- Sentence splitting is naive: "Mr. Smith" yields two sentences, and
  "3.5" splits too. This is accepted behavior, kept for parity.
- Word characters are ASCII letters, digits and underscore only, so
  "café," normalizes to "caf"; whitespace splitting stays Unicode-aware
"""

from __future__ import annotations

import re
from typing import List

from grammar_checker.core.ir import Sentence, Token

_WHITESPACE_RE = re.compile(r"\s+")

# Leading or trailing run of non-word characters on a single fragment.
_EDGE_NON_WORD_RE = re.compile(r"^[^A-Za-z0-9_]+|[^A-Za-z0-9_]+$")

# One or more terminal punctuation marks act as a single delimiter.
_SENTENCE_DELIMITER_RE = re.compile(r"[.?!]+")

_NON_WORD_NON_SPACE_RE = re.compile(r"[^A-Za-z0-9_\s]")


def normalize_token(fragment: str) -> str:
    """Return the comparison key for one whitespace-free fragment."""
    return _EDGE_NON_WORD_RE.sub("", fragment.lower())


def tokenize(text: str) -> List[Token]:
    """Split text into word tokens.

    Args:
        text: Any string; empty and whitespace-only input is valid.

    Returns:
        Tokens in reading order. Empty list when the text has no words.
    """
    return [
        Token(original=fragment, norm=normalize_token(fragment))
        for fragment in _WHITESPACE_RE.split(text)
        if fragment
    ]


def normalize_sentence(sentence: str) -> str:
    """Return the comparison key for one trimmed sentence.

    Order matters: whitespace is collapsed *before* punctuation is
    removed, so "a , b" becomes "a  b" (two spaces), not "a b".
    """
    collapsed = _WHITESPACE_RE.sub(" ", sentence.lower())
    return _NON_WORD_NON_SPACE_RE.sub("", collapsed)


def segment_sentences(text: str) -> List[Sentence]:
    """Split text into sentences on runs of ``.``, ``?`` and ``!``.

    Args:
        text: Any string; empty input yields an empty list.

    Returns:
        Trimmed, non-empty sentences in reading order.
    """
    sentences: List[Sentence] = []
    for fragment in _SENTENCE_DELIMITER_RE.split(text):
        trimmed = fragment.strip()
        if trimmed:
            sentences.append(Sentence(text=trimmed, norm=normalize_sentence(trimmed)))
    return sentences

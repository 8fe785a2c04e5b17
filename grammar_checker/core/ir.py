"""Intermediate representation dataclasses for text diffs.

WHY: The tokenizer, aligner, metrics, formatters, and HTTP layer all
pass the same handful of structures around. Typed, frozen dataclasses
make those structures explicit and guarantee nobody mutates a token or
an alignment after it has been computed.

HOW: Six dataclasses form the model:
  Token               — one whitespace-delimited word with its comparison key
  Sentence            — one punctuation-delimited sentence with its key
  AlignmentResult     — LCS length plus the index-pair witness
  ChangeSummary       — aggregate word/sentence counts and change rate
  TokenClassification — corrected-side word plus matched flag
  DiffResult          — everything a renderer needs for one text pair

RULES:
- All dataclasses are frozen; sequences are stored as tuples
- AlignmentResult.length always equals len(AlignmentResult.pairs)
- TokenClassification order follows the corrected text
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class Token:
    """A whitespace-delimited unit of text.

    RULES:
    - original: the fragment verbatim, punctuation included
    - norm: lowercased, leading/trailing non-word characters stripped;
      empty string for all-punctuation fragments
    """

    original: str
    norm: str


@dataclass(frozen=True)
class Sentence:
    """A trimmed sentence bounded by runs of ``.``, ``?`` or ``!``.

    RULES:
    - text: the trimmed fragment, original casing and spacing
    - norm: lowercased, whitespace runs collapsed to one space, then
      every character that is neither a word character nor whitespace
      removed
    """

    text: str
    norm: str


@dataclass(frozen=True)
class AlignmentResult:
    """Longest common subsequence of two key sequences.

    WHY: Metrics need the LCS length; highlighting needs to know exactly
    which positions took part in it. Returning both from one DP pass
    avoids a second alignment.

    RULES:
    - length >= 0 and length == len(pairs)
    - pairs are (index_a, index_b), strictly increasing in both
    - keys_a[index_a] == keys_b[index_b] for every pair
    """

    length: int = 0
    pairs: Tuple[Tuple[int, int], ...] = ()

    @property
    def matched_b(self) -> frozenset:
        """B-side indices that take part in the alignment."""
        return frozenset(j for _, j in self.pairs)


@dataclass(frozen=True)
class ChangeSummary:
    """Aggregate change counts for one original/corrected pair.

    RULES:
    - words_total: original token count, or corrected count if the
      original is empty
    - words_changed: original tokens left out of the word-level LCS
    - sentences_changed: max of both sentence counts minus sentence LCS
    - rate: integer percentage, half-up rounded; 0 when words_total is 0
    """

    words_total: int
    words_changed: int
    sentences_changed: int
    rate: int


@dataclass(frozen=True)
class TokenClassification:
    """One corrected-side word and whether it survived unchanged."""

    token: str
    matched: bool


@dataclass(frozen=True)
class DiffResult:
    """The complete output of ``diff_text`` for one text pair.

    WHY: Formatters, the HTTP layer, and the CLI all render the same
    facts in different shapes. DiffResult is the stable contract they
    consume.

    RULES:
    - tokens: one entry per corrected-side token, in order
    - word_alignment: the word-level alignment that produced ``tokens``
    """

    summary: ChangeSummary
    tokens: Tuple[TokenClassification, ...] = ()
    word_alignment: AlignmentResult = field(default_factory=AlignmentResult)

"""Abstract base formatter, report input, and output container.

WHY: Every report consumes the same diff but produces different file
content. This base class enforces a consistent interface so the CLI and
API layers can work with any formatter generically.

HOW: BaseFormatter is an ABC with two requirements — a ``name`` property
and a ``format()`` method. DiffReport bundles both texts with their
DiffResult; RenderOptions carries display choices (highlighting, list
length) explicitly instead of as process-wide state. FormatterOutput
bundles a file suffix with its content and MIME type.

RULES:
- Subclasses MUST implement ``name`` (human-readable) and ``format()``
- ``format()`` returns a list of FormatterOutput
- ``suffix`` starts with a hyphen, e.g. ``"-report.json"``
- The caller is responsible for prepending the source filename stem
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from grammar_checker.config import MAX_CHANGED_WORDS
from grammar_checker.core.ir import DiffResult
from grammar_checker.core.metrics import diff_text


@dataclass(frozen=True)
class RenderOptions:
    """Display choices for one rendering call.

    Attributes:
        highlight: Wrap corrected words in matched/changed markup.
        max_changed_words: How many changed words to list.
    """

    highlight: bool = True
    max_changed_words: int = MAX_CHANGED_WORDS


@dataclass(frozen=True)
class DiffReport:
    """Both texts of a correction plus their diff."""

    original_text: str
    corrected_text: str
    result: DiffResult

    @classmethod
    def build(cls, original_text: str, corrected_text: str) -> DiffReport:
        """Diff the two texts and wrap the result."""
        return cls(
            original_text=original_text,
            corrected_text=corrected_text,
            result=diff_text(original_text, corrected_text),
        )


@dataclass
class FormatterOutput:
    """One output file produced by a formatter.

    Attributes:
        suffix: File suffix appended to the source stem,
                e.g. ``"-report.txt"`` → ``"essay-report.txt"``.
        content: The file content as a string or bytes.
        media_type: MIME type for the content, e.g. ``"text/html"``.
    """

    suffix: str
    content: str | bytes
    media_type: str


class BaseFormatter(ABC):
    """Abstract base for all report formatters.

    To add a new report format:
    1. Create a new file in formatters/
    2. Subclass BaseFormatter
    3. Implement format() and name
    4. Register in FORMATTERS dict in formatters/__init__.py
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable format name, e.g. 'Highlighted HTML'."""

    @abstractmethod
    def format(
        self,
        report: DiffReport,
        options: RenderOptions | None = None,
    ) -> list[FormatterOutput]:
        """Render the report into one or more output files.

        Args:
            report: Original text, corrected text, and their DiffResult.
            options: Display choices; defaults to RenderOptions().

        Returns:
            List of FormatterOutput objects.
        """

"""Report formatter registry — pluggable output hub.

WHY: The CLI and API layers need a single lookup to find the right
formatter by name. A central dict makes it trivial to add new reports:
create the formatter class, import it here, add one line.

HOW: FORMATTERS maps string keys to formatter *classes* (not instances).
Callers instantiate as needed: ``formatter = FORMATTERS["json_report"]()``.

RULES:
- Keys are snake_case identifiers (used in CLI flags and API queries)
- Values are BaseFormatter subclasses (not instances)
- Every formatter listed here must be importable without side effects
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from grammar_checker.formatters.corrected_text import CorrectedTextFormatter
from grammar_checker.formatters.html_highlight import HtmlHighlightFormatter
from grammar_checker.formatters.json_report import JsonReportFormatter
from grammar_checker.formatters.plain_text import PlainTextFormatter

if TYPE_CHECKING:
    from grammar_checker.formatters.base import BaseFormatter

FORMATTERS: dict[str, type[BaseFormatter]] = {
    "html_highlight": HtmlHighlightFormatter,
    "plain_text": PlainTextFormatter,
    "json_report": JsonReportFormatter,
    "corrected_text": CorrectedTextFormatter,
}

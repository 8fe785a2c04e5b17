"""Corrected text download.

WHY: After reviewing the changes, users want the corrected text itself
as a file they can paste or attach elsewhere.

RULES:
- Content is the corrected text unchanged, plus a trailing newline if
  it does not already end with one
- Highlighting options are ignored
- Output suffix: "-corrected.txt"
- Media type: "text/plain"
"""

from __future__ import annotations

from typing import List, Optional

from grammar_checker.formatters.base import (
    BaseFormatter,
    DiffReport,
    FormatterOutput,
    RenderOptions,
)


class CorrectedTextFormatter(BaseFormatter):
    """Formatter that writes out the corrected text."""

    @property
    def name(self) -> str:
        return "Corrected Text"

    def format(
        self,
        report: DiffReport,
        options: Optional[RenderOptions] = None,
    ) -> List[FormatterOutput]:
        content = report.corrected_text
        if content and not content.endswith("\n"):
            content += "\n"
        return [
            FormatterOutput(
                suffix="-corrected.txt",
                content=content,
                media_type="text/plain",
            )
        ]

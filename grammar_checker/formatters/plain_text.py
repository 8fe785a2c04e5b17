"""Plain text change report.

WHY: Terminal users and log files need the summary numbers without any
markup: how many words there were, how many changed, how many sentences
changed, and the overall change rate.

HOW: Writes one "Label: value" line per metric, then the change-rate
sentence, then the changed words (or a no-changes note).

RULES:
- Change-rate line format: "Change rate: R% (C of T words changed)"
- Changed words are comma-separated, capped at max_changed_words
- Output ends with a single newline
- Output suffix: "-report.txt"
- Media type: "text/plain"
"""

from __future__ import annotations

from typing import List, Optional

from grammar_checker.core.ir import ChangeSummary
from grammar_checker.core.metrics import changed_words
from grammar_checker.formatters.base import (
    BaseFormatter,
    DiffReport,
    FormatterOutput,
    RenderOptions,
)


def format_change_rate(summary: ChangeSummary) -> str:
    """One-line description of the change rate."""
    return "Change rate: {}% ({} of {} words changed)".format(
        summary.rate, summary.words_changed, summary.words_total
    )


class PlainTextFormatter(BaseFormatter):
    """Formatter that produces a short plain text summary."""

    @property
    def name(self) -> str:
        return "Plain Text Report"

    def format(
        self,
        report: DiffReport,
        options: Optional[RenderOptions] = None,
    ) -> List[FormatterOutput]:
        opts = options or RenderOptions()
        summary = report.result.summary
        words = changed_words(report.result, opts.max_changed_words)

        lines = [
            "Words total: {}".format(summary.words_total),
            "Words changed: {}".format(summary.words_changed),
            "Sentences changed: {}".format(summary.sentences_changed),
            format_change_rate(summary),
        ]
        if words:
            lines.append("Changed words: {}".format(", ".join(words)))
        else:
            lines.append("No major changes detected.")

        return [
            FormatterOutput(
                suffix="-report.txt",
                content="\n".join(lines) + "\n",
                media_type="text/plain",
            )
        ]

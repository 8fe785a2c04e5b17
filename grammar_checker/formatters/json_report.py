"""Machine-readable JSON change report.

WHY: Other tools (dashboards, batch scripts, the web front end) want
the diff as data. A JSON report with a published schema gives them a
stable contract.

HOW: Serializes the summary, the corrected-side token classification,
and the capped changed-words list, together with both texts. The
output is validated with jsonschema against diff_report_schema.json
before returning.

RULES:
- Top-level keys: original_text, corrected_text, summary, tokens,
  changed_words
- summary keys: words_total, words_changed, sentences_changed, rate
- tokens: [{"token": str, "matched": bool}] in corrected-text order
- Validate output against the schema before returning; raise on failure
- Output suffix: "-report.json"
- Media type: "application/json"
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema

from grammar_checker.core.metrics import changed_words
from grammar_checker.formatters.base import (
    BaseFormatter,
    DiffReport,
    FormatterOutput,
    RenderOptions,
)

SCHEMA_PATH = Path(__file__).resolve().parent / "diff_report_schema.json"

_CACHED_SCHEMA: dict[str, Any] | None = None


def get_schema() -> dict[str, Any]:
    """Load the report schema once and cache it at module level."""
    global _CACHED_SCHEMA
    if _CACHED_SCHEMA is None:
        with open(SCHEMA_PATH, encoding="utf-8") as f:
            _CACHED_SCHEMA = json.load(f)
    return _CACHED_SCHEMA


def report_to_dict(report: DiffReport, options: RenderOptions | None = None) -> dict[str, Any]:
    """Build the JSON-ready dict for a report (no validation)."""
    opts = options or RenderOptions()
    summary = report.result.summary
    return {
        "original_text": report.original_text,
        "corrected_text": report.corrected_text,
        "summary": {
            "words_total": summary.words_total,
            "words_changed": summary.words_changed,
            "sentences_changed": summary.sentences_changed,
            "rate": summary.rate,
        },
        "tokens": [
            {"token": tok.token, "matched": tok.matched}
            for tok in report.result.tokens
        ],
        "changed_words": changed_words(report.result, opts.max_changed_words),
    }


class JsonReportFormatter(BaseFormatter):
    """Formatter that produces a schema-validated JSON report."""

    @property
    def name(self) -> str:
        return "JSON Report"

    def format(
        self,
        report: DiffReport,
        options: RenderOptions | None = None,
    ) -> list[FormatterOutput]:
        """Serialize the report to JSON.

        Raises:
            jsonschema.ValidationError: If the generated JSON does not
                conform to diff_report_schema.json.
        """
        output = report_to_dict(report, options)
        jsonschema.validate(instance=output, schema=get_schema())

        return [
            FormatterOutput(
                suffix="-report.json",
                content=json.dumps(output, ensure_ascii=False, indent=2) + "\n",
                media_type="application/json",
            )
        ]

"""Highlighted HTML formatter.

WHY: The quickest way to see what a correction touched is to read the
corrected text with every altered word marked. This formatter produces
that view as an HTML fragment a web page can drop into a container.

HOW: Each corrected token is escaped and, when highlighting is on,
wrapped in ``<span class="word-unchanged">`` or
``<span class="word-changed">`` depending on the word alignment. Tokens
are joined by single spaces. Below a rule, the corrected text is shown
verbatim in a ``<pre class="plain">`` block, followed by a paragraph
listing the changed words.

RULES:
- All text is escaped: & < > " ' and backtick
- Highlighting off → tokens are escaped but not wrapped
- Changed-words list is capped at RenderOptions.max_changed_words
- Empty changed-words list → "No major changes detected."
- Output suffix: "-highlighted.html"
- Media type: "text/html"
"""

from __future__ import annotations

from typing import List, Optional

from grammar_checker.core.ir import TokenClassification
from grammar_checker.core.metrics import changed_words
from grammar_checker.formatters.base import (
    BaseFormatter,
    DiffReport,
    FormatterOutput,
    RenderOptions,
)

_HTML_ESCAPES = str.maketrans({
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#39;",
    "`": "&#96;",
})


def escape_html(text: str = "") -> str:
    """Escape text for safe inclusion in HTML content or attributes."""
    return text.translate(_HTML_ESCAPES)


def render_tokens(tokens: List[TokenClassification], highlight: bool = True) -> str:
    """Render classified tokens as space-joined (optionally wrapped) HTML."""
    parts: List[str] = []
    for tok in tokens:
        safe = escape_html(tok.token)
        if not highlight:
            parts.append(safe)
        elif tok.matched:
            parts.append('<span class="word-unchanged">{}</span>'.format(safe))
        else:
            parts.append('<span class="word-changed">{}</span>'.format(safe))
    return " ".join(parts)


def render_changed_list(words: List[str]) -> str:
    if not words:
        return '<p class="muted">No major changes detected.</p>'
    return "<p><strong>Changed words:</strong> {}</p>".format(
        escape_html(", ".join(words))
    )


class HtmlHighlightFormatter(BaseFormatter):
    """Formatter that produces the highlighted corrected-text HTML view."""

    @property
    def name(self) -> str:
        return "Highlighted HTML"

    def format(
        self,
        report: DiffReport,
        options: Optional[RenderOptions] = None,
    ) -> List[FormatterOutput]:
        opts = options or RenderOptions()
        highlighted = render_tokens(list(report.result.tokens), opts.highlight)
        words = changed_words(report.result, opts.max_changed_words)

        content = (
            '<div class="highlighted">{highlighted}</div>\n'
            "<hr/>\n"
            '<pre class="plain">{plain}</pre>\n'
            "{changed}\n"
        ).format(
            highlighted=highlighted,
            plain=escape_html(report.corrected_text),
            changed=render_changed_list(words),
        )

        return [
            FormatterOutput(
                suffix="-highlighted.html",
                content=content,
                media_type="text/html",
            )
        ]

"""Unit tests for all report formatters.

WHY: Each formatter turns the same diff into a different file. Broken
escaping would let user text inject markup into the web page; a broken
JSON report would break every consumer of the schema.

HOW: Tests run each formatter on the reference typo pair and check
content, suffix, and media type. The JSON report is validated against
the bundled schema.
"""

import json

import jsonschema
import pytest

from grammar_checker.formatters import FORMATTERS
from grammar_checker.formatters.base import DiffReport, RenderOptions
from grammar_checker.formatters.corrected_text import CorrectedTextFormatter
from grammar_checker.formatters.html_highlight import (
    HtmlHighlightFormatter,
    escape_html,
    render_changed_list,
)
from grammar_checker.formatters.json_report import (
    SCHEMA_PATH,
    JsonReportFormatter,
    report_to_dict,
)
from grammar_checker.formatters.plain_text import PlainTextFormatter


def _load_schema():
    with open(SCHEMA_PATH) as f:
        return json.load(f)


@pytest.fixture
def typo_report(typo_pair):
    return DiffReport.build(*typo_pair)


class TestRegistry:
    def test_registered_keys(self):
        assert set(FORMATTERS) == {
            "html_highlight", "plain_text", "json_report", "corrected_text",
        }

    @pytest.mark.parametrize("key", sorted(FORMATTERS))
    def test_each_formatter_has_name_and_suffix(self, key, typo_report):
        formatter = FORMATTERS[key]()
        assert formatter.name
        outputs = formatter.format(typo_report)
        assert len(outputs) == 1
        assert outputs[0].suffix.startswith("-")

    @pytest.mark.parametrize("key", sorted(FORMATTERS))
    def test_handles_empty_report(self, key):
        FORMATTERS[key]().format(DiffReport.build("", ""))


class TestEscapeHtml:
    def test_escapes_all_special_characters(self):
        assert escape_html("<a href=\"x\">'`&") == (
            "&lt;a href=&quot;x&quot;&gt;&#39;&#96;&amp;"
        )

    def test_plain_text_unchanged(self):
        assert escape_html("plain words") == "plain words"

    def test_default_is_empty(self):
        assert escape_html() == ""


class TestHtmlHighlightFormatter:
    def test_marks_changed_and_unchanged_words(self, typo_report):
        html = HtmlHighlightFormatter().format(typo_report)[0].content
        assert '<span class="word-unchanged">I</span>' in html
        assert '<span class="word-changed">the</span>' in html
        assert html.count("word-changed") == 1

    def test_highlight_off_leaves_words_bare(self, typo_report):
        html = HtmlHighlightFormatter().format(
            typo_report, RenderOptions(highlight=False)
        )[0].content
        assert "<span" not in html
        assert '<div class="highlighted">I hope it will correct the mistakes</div>' in html

    def test_includes_plain_corrected_text(self, typo_report):
        html = HtmlHighlightFormatter().format(typo_report)[0].content
        assert '<pre class="plain">I hope it will correct the mistakes</pre>' in html
        assert "<hr/>" in html

    def test_lists_changed_words(self, typo_report):
        html = HtmlHighlightFormatter().format(typo_report)[0].content
        assert "<p><strong>Changed words:</strong> the</p>" in html

    def test_no_changes_message(self, case_only_pair):
        html = HtmlHighlightFormatter().format(DiffReport.build(*case_only_pair))[0].content
        assert "No major changes detected." in html

    def test_user_text_is_escaped(self):
        report = DiffReport.build("see <b>", "see <b> & more")
        html = HtmlHighlightFormatter().format(report)[0].content
        assert "<b>" not in html
        assert '<span class="word-unchanged">&lt;b&gt;</span>' in html
        assert '<span class="word-changed">&amp;</span>' in html

    def test_changed_list_respects_limit(self):
        report = DiffReport.build("a", "x y z")
        html = HtmlHighlightFormatter().format(
            report, RenderOptions(max_changed_words=2)
        )[0].content
        assert "<strong>Changed words:</strong> x, y</p>" in html

    def test_render_changed_list_escapes(self):
        assert render_changed_list(["<i>"]) == (
            "<p><strong>Changed words:</strong> &lt;i&gt;</p>"
        )

    def test_output_metadata(self, typo_report):
        output = HtmlHighlightFormatter().format(typo_report)[0]
        assert output.suffix == "-highlighted.html"
        assert output.media_type == "text/html"


class TestPlainTextFormatter:
    def test_summary_lines(self, typo_report):
        content = PlainTextFormatter().format(typo_report)[0].content
        assert content.splitlines() == [
            "Words total: 7",
            "Words changed: 1",
            "Sentences changed: 1",
            "Change rate: 14% (1 of 7 words changed)",
            "Changed words: the",
        ]

    def test_no_changes(self, case_only_pair):
        content = PlainTextFormatter().format(DiffReport.build(*case_only_pair))[0].content
        assert content.endswith("No major changes detected.\n")

    def test_output_metadata(self, typo_report):
        output = PlainTextFormatter().format(typo_report)[0]
        assert output.suffix == "-report.txt"
        assert output.media_type == "text/plain"


class TestJsonReportFormatter:
    def test_valid_against_schema(self, typo_report):
        content = JsonReportFormatter().format(typo_report)[0].content
        jsonschema.validate(instance=json.loads(content), schema=_load_schema())

    def test_content(self, typo_report, typo_pair):
        data = json.loads(JsonReportFormatter().format(typo_report)[0].content)
        assert data["original_text"] == typo_pair[0]
        assert data["corrected_text"] == typo_pair[1]
        assert data["summary"] == {
            "words_total": 7,
            "words_changed": 1,
            "sentences_changed": 1,
            "rate": 14,
        }
        assert len(data["tokens"]) == 7
        assert data["tokens"][5] == {"token": "the", "matched": False}
        assert data["changed_words"] == ["the"]

    def test_non_ascii_kept_verbatim(self):
        content = JsonReportFormatter().format(DiffReport.build("café", "Café!"))[0].content
        assert "Café!" in content

    def test_invalid_report_rejected(self, typo_report):
        data = report_to_dict(typo_report)
        data["summary"]["rate"] = 150
        with pytest.raises(jsonschema.ValidationError):
            jsonschema.validate(instance=data, schema=_load_schema())

    def test_output_metadata(self, typo_report):
        output = JsonReportFormatter().format(typo_report)[0]
        assert output.suffix == "-report.json"
        assert output.media_type == "application/json"


class TestCorrectedTextFormatter:
    def test_writes_corrected_text(self, typo_report, typo_pair):
        output = CorrectedTextFormatter().format(typo_report)[0]
        assert output.content == typo_pair[1] + "\n"
        assert output.suffix == "-corrected.txt"

    def test_empty_corrected_text(self):
        assert CorrectedTextFormatter().format(DiffReport.build("a", ""))[0].content == ""

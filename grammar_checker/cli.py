"""Command-line interface for the Grammar Checker.

WHY: Users need a simple way to check a text from the terminal. The CLI
wires together the full pipeline — input validation, Gemini correction,
diffing, pluggable report output, and file saving — behind a single
command.

HOW: Uses argparse to accept the input (a file, ``--text``, or
``--demo``), an optional pre-made corrected file, report selection,
highlight toggle, and output directory. Runs the async correction via
asyncio.run(). Status messages go to stderr; the change-rate line goes
to stdout; report files are saved next to the input (or to
--output-dir).

RULES:
- Exactly one input source: positional file, --text, or --demo
- Input is stripped and must not be blank or exceed MAX_INPUT_TOKENS
- A --corrected file is held to the same MAX_INPUT_TOKENS limit
- --corrected PATH skips the correction service entirely
- --formats: comma-separated formatter keys (default: all registered)
- Output naming: {stem}{suffix}, numeric suffix for conflicts (-report-2.txt)
- Status output goes to stderr; the summary line goes to stdout
- Exit codes: 0 success, 1 any error, 130 interrupted
- Python 3.9 compatible — no match/case, no X | Y unions, no slots=True
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path
from typing import List, Optional

from grammar_checker.config import DEMO_TEXT
from grammar_checker.errors import GrammarCheckerError, ValidationError
from grammar_checker.formatters import FORMATTERS
from grammar_checker.formatters.base import DiffReport, FormatterOutput, RenderOptions
from grammar_checker.formatters.plain_text import format_change_rate
from grammar_checker.validation import validate_size, validate_text


def _status(msg: str) -> None:
    """Print a status message to stderr.

    WHY: Status output must not pollute stdout so the CLI can be piped.
    """
    print(msg, file=sys.stderr, flush=True)


def _fail(msg: str) -> None:
    print("Error: {}".format(msg), file=sys.stderr)
    sys.exit(1)


def _resolve_output_path(
    stem: str,
    suffix: str,
    output_dir: Path,
) -> Path:
    """Resolve the output file path, adding numeric suffix on conflict.

    WHY: Users may check the same file several times while editing it.
    Overwriting the previous report would lose the earlier result.

    RULES:
    - First attempt: {stem}{suffix} (e.g. essay-report.txt)
    - Conflict: insert counter before the extension (essay-report-2.txt)
    - Counter starts at 2 and increments

    Returns:
        A Path that does not yet exist.
    """
    base_path = output_dir / "{}{}".format(stem, suffix)
    if not base_path.exists():
        return base_path

    # "-report.txt" → ("-report", ".txt")
    dot_idx = suffix.rfind(".")
    if dot_idx > 0:
        suffix_name = suffix[:dot_idx]
        suffix_ext = suffix[dot_idx:]
    else:
        suffix_name = suffix
        suffix_ext = ""

    counter = 2
    while True:
        candidate = output_dir / "{}{}-{}{}".format(stem, suffix_name, counter, suffix_ext)
        if not candidate.exists():
            return candidate
        counter += 1


def _save_output(
    output: FormatterOutput,
    stem: str,
    output_dir: Path,
) -> Path:
    """Save a single formatter output to disk and return its path."""
    path = _resolve_output_path(stem, output.suffix, output_dir)

    if isinstance(output.content, bytes):
        path.write_bytes(output.content)
    else:
        path.write_text(output.content, encoding="utf-8")

    return path


def _read_text_file(path_str: str, label: str) -> str:
    path = Path(path_str)
    if not path.is_file():
        raise ValidationError("{} file not found: {}".format(label, path))
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise ValidationError("{} file is not valid UTF-8: {}".format(label, path)) from e


def _parse_formats(formats: Optional[str]) -> List[str]:
    """Split and check --formats; all registered keys when omitted."""
    if not formats:
        return list(FORMATTERS.keys())
    keys = [f.strip() for f in formats.split(",") if f.strip()]
    for key in keys:
        if key not in FORMATTERS:
            available = ", ".join(sorted(FORMATTERS.keys()))
            raise ValidationError(
                "Unknown format '{}'. Available formats: {}".format(key, available)
            )
    return keys


async def _correct(text: str) -> str:
    from grammar_checker.api.client import GeminiClient

    async with GeminiClient() as client:
        return await client.correct_text(text, on_status=_status)


async def _run_pipeline(args: argparse.Namespace) -> None:
    """Execute the full check pipeline.

    RULES:
    - Validate input and formats before any API call
    - Status messages to stderr at each step
    - Save each formatter's output files with conflict avoidance
    """
    # Resolve input text and naming
    if args.input_file:
        input_path = Path(args.input_file).resolve()
        original = _read_text_file(str(input_path), "Input")
        stem = input_path.stem
        default_dir = input_path.parent
    else:
        original = DEMO_TEXT if args.demo else args.text
        stem = "demo" if args.demo else "text"
        default_dir = Path.cwd()

    original = original.strip()
    validate_text(original)

    format_keys = _parse_formats(args.formats)

    output_dir = Path(args.output_dir).resolve() if args.output_dir else default_dir
    if not output_dir.is_dir():
        raise ValidationError("Output directory does not exist: {}".format(output_dir))

    # Correct (or load a ready-made correction)
    if args.corrected:
        corrected = _read_text_file(args.corrected, "Corrected").strip()
        validate_size(corrected, "corrected")
        _status("Using corrected text from {}".format(args.corrected))
    else:
        _status("Correcting {} words...".format(len(original.split())))
        corrected = await _correct(original)

    # Diff and format
    _status("Comparing texts...")
    report = DiffReport.build(original, corrected)
    options = RenderOptions(highlight=args.highlight)

    saved_files: List[Path] = []
    for key in format_keys:
        formatter = FORMATTERS[key]()
        _status("  Running {} formatter...".format(formatter.name))
        for output in formatter.format(report, options):
            saved_path = _save_output(output, stem, output_dir)
            saved_files.append(saved_path)
            _status("  Saved: {}".format(saved_path.name))

    summary = report.result.summary
    _status("")
    _status("Done! Saved {} file(s) to {}".format(len(saved_files), output_dir))
    print(format_change_rate(summary))
    print("Sentences changed: {}".format(summary.sentences_changed))


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    WHY: Separating parser construction from main() makes the CLI
    testable — tests can inspect the parser without running the pipeline.
    """
    parser = argparse.ArgumentParser(
        prog="grammar_checker",
        description="Correct a text with a generative model and report which "
                    "words and sentences changed.",
    )

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "input_file",
        nargs="?",
        default=None,
        help="Path to a UTF-8 text file to check.",
    )
    source.add_argument(
        "--text",
        default=None,
        help="Check this text instead of reading a file.",
    )
    source.add_argument(
        "--demo",
        action="store_true",
        help="Check the built-in demo paragraph.",
    )

    parser.add_argument(
        "--corrected",
        default=None,
        help="Path to an already corrected version; skips the correction service.",
    )

    parser.add_argument(
        "--formats",
        default=None,
        help="Comma-separated list of report formats. "
             "Available: {}. Default: all.".format(", ".join(sorted(FORMATTERS.keys()))),
    )

    parser.add_argument(
        "--output-dir",
        default=None,
        help="Directory to save reports (default: next to the input file, or CWD).",
    )

    parser.add_argument(
        "--highlight",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Mark changed words in the HTML report (default: %(default)s).",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        asyncio.run(_run_pipeline(args))
    except KeyboardInterrupt:
        _status("\nCancelled by user.")
        sys.exit(130)
    except GrammarCheckerError as e:
        _fail(str(e))
    except OSError as e:
        _fail(str(e))


if __name__ == "__main__":
    main()

"""Grammar Checker — change quantification for corrected text.

WHY: A grammar-correction service returns a rewritten string, but users
want to know *what* changed and *how much*. This package aligns the
original and corrected texts word by word and sentence by sentence and
reports which words were kept, which were altered, and an overall
change rate.

HOW: Three-stage pipeline — correct (external Gemini client), diff (pure
core: tokenize, align, measure), format (pluggable report renderers).
The core has no I/O and is independently testable.

RULES:
- The core never calls the correction service
- All formatters consume the same DiffReport
- Adding a new report = one new formatter module, no core changes
"""

__version__ = "0.1.0"

"""Pure diff core: tokenization, alignment, and change metrics.

WHY: The core package is the only algorithmically non-trivial part of
the checker. It must stay free of I/O so it can be tested exhaustively
and reused by the CLI, the HTTP server, and any future front end.

HOW: ir.py defines the immutable data structures, tokenizer.py splits
text into tokens and sentences, aligner.py computes the longest common
subsequence, and metrics.py combines them into a DiffResult.

RULES:
- No network, file, or global state anywhere in this package
- Normalization rules are a compatibility contract — change with care
- Every function is deterministic for identical inputs
"""

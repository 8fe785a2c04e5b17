"""Longest-common-subsequence alignment of two key sequences.

WHY: To decide which words of the corrected text were kept from the
original, we need the largest set of positions that appear in the same
relative order in both texts. Metrics need its size; highlighting needs
the exact positions. The same routine also aligns sentence keys.

HOW: Classic dynamic programming over an (n+1) x (m+1) table, then a
backward walk from the bottom-right cell that collects matched index
pairs and reverses them into ascending order.

RULES:
- dp[i][j] = dp[i-1][j-1] + 1 on equal keys, else max(up, left)
- Backtrack tie-break: step up (decrement i) only when the upper cell
  is strictly greater, otherwise step left (decrement j). This fixes
  which optimal alignment is reported and must not change.
- O(n*m) time and memory; the table is local and dropped on return.
  Callers bound input size (see config.MAX_INPUT_TOKENS).
- Empty input on either side yields AlignmentResult(0, ())
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

from grammar_checker.core.ir import AlignmentResult


def align(keys_a: Sequence[str], keys_b: Sequence[str]) -> AlignmentResult:
    """Compute the LCS of two key sequences.

    Args:
        keys_a: Comparison keys of the first sequence (e.g. original words).
        keys_b: Comparison keys of the second sequence (e.g. corrected words).

    Returns:
        AlignmentResult with the LCS length and its (index_a, index_b)
        pairs in ascending order.
    """
    n, m = len(keys_a), len(keys_b)
    if n == 0 or m == 0:
        return AlignmentResult(length=0, pairs=())

    dp = [[0] * (m + 1) for _ in range(n + 1)]
    for i in range(1, n + 1):
        a = keys_a[i - 1]
        row, prev = dp[i], dp[i - 1]
        for j in range(1, m + 1):
            if a == keys_b[j - 1]:
                row[j] = prev[j - 1] + 1
            else:
                row[j] = max(prev[j], row[j - 1])

    pairs: List[Tuple[int, int]] = []
    i, j = n, m
    while i > 0 and j > 0:
        if keys_a[i - 1] == keys_b[j - 1]:
            pairs.append((i - 1, j - 1))
            i -= 1
            j -= 1
        elif dp[i - 1][j] > dp[i][j - 1]:
            i -= 1
        else:
            j -= 1

    pairs.reverse()
    return AlignmentResult(length=dp[n][m], pairs=tuple(pairs))

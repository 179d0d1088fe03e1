"""
Dynamic Programming based word aligner.

Aligns hypothesis words to reference words with a Needleman-Wunsch style
table so that a dropped or inserted word does not shift every following
comparison, as it does in the positional diff_words.
"""

from dataclasses import dataclass
from typing import Sequence

from tasmee.models import DiffEntry
from tasmee.core.matcher import DEFAULT_MAX_EDITS, words_match


MATCH = "match"
SUBSTITUTE = "sub"
DELETE = "del"  # reference word not recited
INSERT = "ins"  # extra word in the recitation


@dataclass
class AlignCell:
    """A cell in the DP matrix."""
    cost: int  # Accumulated cost to reach this cell
    op: str | None  # Move that reached this cell
    parent: tuple[int, int] | None  # Previous cell for backtracking


def align_words(
    ref: Sequence[str],
    hyp: Sequence[str],
    max_edits: int = DEFAULT_MAX_EDITS,
    ratio: float | None = None,
) -> list[DiffEntry]:
    """
    Align two word sequences, re-synchronizing after dropped or extra words.

    Skipping a reference word or an extra hypothesis word costs 1. Pairing
    two words costs 0 when they match within tolerance and 1 otherwise,
    however far apart their spellings are. On equal cost, pairing is
    preferred over skipping.

    Args:
        ref: Reference tokens
        hyp: Hypothesis tokens
        max_edits: Edit distance still counted as correct
        ratio: Optional length-relative tolerance

    Returns:
        One DiffEntry per reference token, in reference order. Extra
        hypothesis words produce no entries.

    Examples:
        >>> [e.ok for e in align_words(["بسم", "الله", "الرحمن"], ["بسم", "الرحمن"])]
        [True, False, True]
    """
    n, m = len(ref), len(hyp)
    if n == 0:
        return []

    # Word comparisons are reused while backtracking
    pair_cache: dict[tuple[int, int], tuple[bool, int]] = {}

    def compare(i: int, j: int) -> tuple[bool, int]:
        if (i, j) not in pair_cache:
            pair_cache[(i, j)] = words_match(ref[i], hyp[j], max_edits, ratio)
        return pair_cache[(i, j)]

    dp: list[list[AlignCell]] = [[AlignCell(0, None, None)] * (m + 1) for _ in range(n + 1)]

    for i in range(1, n + 1):
        dp[i][0] = AlignCell(i, DELETE, (i - 1, 0))
    for j in range(1, m + 1):
        dp[0][j] = AlignCell(j, INSERT, (0, j - 1))

    for i in range(1, n + 1):
        for j in range(1, m + 1):
            ok, _ = compare(i - 1, j - 1)
            candidates = [
                (dp[i - 1][j - 1].cost + (0 if ok else 1), MATCH if ok else SUBSTITUTE, (i - 1, j - 1)),
                (dp[i - 1][j].cost + 1, DELETE, (i - 1, j)),
                (dp[i][j - 1].cost + 1, INSERT, (i, j - 1)),
            ]
            # min() keeps the first of equal costs, so pairing wins ties
            cost, op, parent = min(candidates, key=lambda c: c[0])
            dp[i][j] = AlignCell(cost, op, parent)

    # Backtrack
    entries: list[DiffEntry] = []
    i, j = n, m
    while (i, j) != (0, 0):
        cell = dp[i][j]
        if cell.op in (MATCH, SUBSTITUTE):
            ok, distance = compare(i - 1, j - 1)
            entries.append(DiffEntry(word=ref[i - 1], ok=ok, heard=hyp[j - 1], distance=distance))
        elif cell.op == DELETE:
            entries.append(DiffEntry(word=ref[i - 1], ok=False))
        i, j = cell.parent

    entries.reverse()
    return entries

"""
Word-level scoring between a reference verse and a recited transcript.

Provides the primitives used by match_text:
- edit_distance: character-level Levenshtein distance between two words
- jaccard_similarity: overlap of two word sets
- words_match: whether a heard word is close enough to a reference word
- diff_words: position-by-position comparison of two word sequences
- accuracy_from_diff: percentage of reference words marked correct
"""

import math
from typing import Iterable, Sequence

from rapidfuzz.distance import Levenshtein as _rapidfuzz_levenshtein

from tasmee.models import DiffEntry


DEFAULT_MAX_EDITS = 1


def edit_distance(a: str, b: str) -> int:
    """
    Levenshtein distance between two strings.

    Insertions, deletions and substitutions each cost 1. Uses rapidfuzz
    with no score cutoff, so the exact distance is always returned.

    Args:
        a: First string
        b: Second string

    Returns:
        Minimum number of single-character edits turning a into b

    Examples:
        >>> edit_distance("كتاب", "كتب")
        1
    """
    return _rapidfuzz_levenshtein.distance(a, b)


def jaccard_similarity(words_a: Iterable[str], words_b: Iterable[str]) -> float:
    """
    Jaccard similarity of two word collections, treated as sets.

    Args:
        words_a: First collection of words (duplicates and order ignored)
        words_b: Second collection of words

    Returns:
        |A ∩ B| / |A ∪ B|, or 0.0 when both are empty
    """
    set_a = set(words_a)
    set_b = set(words_b)
    union = set_a | set_b
    if not union:
        return 0.0
    return len(set_a & set_b) / len(union)


def word_tolerance(
    word: str,
    max_edits: int = DEFAULT_MAX_EDITS,
    ratio: float | None = None,
) -> int:
    """
    Number of character edits tolerated for a reference word.

    Without a ratio the tolerance is the fixed max_edits. With a ratio,
    longer words get proportionally more room, never less than max_edits.

    Args:
        word: The reference word
        max_edits: Fixed tolerance (default 1)
        ratio: Optional edits per character of the reference word

    Returns:
        Maximum edit distance still counted as a match
    """
    if ratio is None:
        return max_edits
    return max(max_edits, math.floor(ratio * len(word)))


def words_match(
    ref_word: str,
    hyp_word: str,
    max_edits: int = DEFAULT_MAX_EDITS,
    ratio: float | None = None,
) -> tuple[bool, int]:
    """
    Compare a heard word against a reference word.

    Returns:
        Tuple of (is_match, edit_distance)
    """
    if ref_word == hyp_word:
        return True, 0
    distance = edit_distance(ref_word, hyp_word)
    return distance <= word_tolerance(ref_word, max_edits, ratio), distance


def diff_words(
    ref: Sequence[str],
    hyp: Sequence[str],
    max_edits: int = DEFAULT_MAX_EDITS,
    ratio: float | None = None,
) -> list[DiffEntry]:
    """
    Compare two word sequences position by position.

    Each reference word is compared with the hypothesis word at the same
    index. Words the reciter did not reach are marked wrong; hypothesis
    words past the end of the reference are ignored. There is no
    re-synchronization, so a dropped or inserted word shifts every
    following comparison (see aligner_dp.align_words for that).

    Args:
        ref: Reference tokens
        hyp: Hypothesis tokens
        max_edits: Edit distance still counted as correct
        ratio: Optional length-relative tolerance

    Returns:
        One DiffEntry per reference token, in reference order

    Examples:
        >>> [e.ok for e in diff_words(["بسم", "الله", "الرحمن"], ["بسم", "الله"])]
        [True, True, False]
    """
    entries = []

    for i in range(max(len(ref), len(hyp))):
        if i >= len(ref):
            # Extra hypothesis words carry no penalty
            continue

        ref_word = ref[i]
        if i >= len(hyp):
            entries.append(DiffEntry(word=ref_word, ok=False))
            continue

        hyp_word = hyp[i]
        ok, distance = words_match(ref_word, hyp_word, max_edits, ratio)
        entries.append(DiffEntry(word=ref_word, ok=ok, heard=hyp_word, distance=distance))

    return entries


def accuracy_from_diff(diff: Sequence[DiffEntry]) -> int:
    """
    Percentage of diff entries marked correct.

    Halves round up (12.5 -> 13) rather than to the nearest even number.

    Returns:
        Integer in 0-100; 0 for an empty diff
    """
    if not diff:
        return 0
    ok = sum(1 for entry in diff if entry.ok)
    return math.floor(ok / len(diff) * 100 + 0.5)

"""
Core modules for Tasmee library.

This package contains the core business logic for:
- Arabic text normalization
- Word-level scoring primitives
- Re-synchronizing word alignment
- Reference/transcript matching
"""

from tasmee.core.arabic import normalize_arabic, tokenize_words
from tasmee.core.matcher import (
    edit_distance,
    jaccard_similarity,
    word_tolerance,
    words_match,
    diff_words,
    accuracy_from_diff,
)
from tasmee.core.aligner_dp import align_words
from tasmee.core.match import match_text, match_tokens, project_highlights, LiveMatcher

__all__ = [
    # Arabic
    "normalize_arabic",
    "tokenize_words",
    # Matcher
    "edit_distance",
    "jaccard_similarity",
    "word_tolerance",
    "words_match",
    "diff_words",
    "accuracy_from_diff",
    # Aligner
    "align_words",
    # Match
    "match_text",
    "match_tokens",
    "project_highlights",
    "LiveMatcher",
]

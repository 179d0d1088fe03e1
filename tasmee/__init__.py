"""
تسميع (Tasmee): a Python library to check a Quran recitation against the text.

Usage:
    from tasmee import match_text, project_highlights

    result = match_text("بِسْمِ اللَّهِ الرَّحْمَٰنِ الرَّحِيمِ", "بسم الله الرحمن")

    print(f"Accuracy: {result.accuracy}%  Jaccard: {result.jaccard:.2f}")
    for word in project_highlights(result):
        print("✓" if word.ok else "✗", word.word)
"""

from tasmee.models import (
    Ayah,
    Surah,
    DiffEntry,
    HighlightedWord,
    MatchResult,
)
from tasmee.core import (
    normalize_arabic,
    tokenize_words,
    edit_distance,
    jaccard_similarity,
    diff_words,
    accuracy_from_diff,
    align_words,
    match_text,
    project_highlights,
    LiveMatcher,
)
from tasmee.cache import ExpiringCache
from tasmee.config import TasmeeSettings, get_settings, configure
from tasmee.exceptions import (
    TasmeeError,
    ConfigurationError,
    ReferenceDataError,
)

__version__ = "1.0.0"
__all__ = [
    # Version
    "__version__",
    # Models
    "Ayah",
    "Surah",
    "DiffEntry",
    "HighlightedWord",
    "MatchResult",
    # Core
    "normalize_arabic",
    "tokenize_words",
    "edit_distance",
    "jaccard_similarity",
    "diff_words",
    "accuracy_from_diff",
    "align_words",
    "match_text",
    "project_highlights",
    "LiveMatcher",
    # Cache
    "ExpiringCache",
    # Config
    "TasmeeSettings",
    "get_settings",
    "configure",
    # Exceptions
    "TasmeeError",
    "ConfigurationError",
    "ReferenceDataError",
]

"""
Pydantic data models for Tasmee library.

These models represent the core data structures used throughout the library:
- Ayah: A single reference verse
- Surah: Surah metadata
- DiffEntry: One reference word in a word-by-word comparison
- HighlightedWord: A reference word ready for rendering
- MatchResult: Result of scoring a transcript against a reference
"""

from tasmee.models.ayah import Ayah, Surah, surah_from_api_payload
from tasmee.models.result import DiffEntry, HighlightedWord, MatchResult

__all__ = [
    "Ayah",
    "Surah",
    "surah_from_api_payload",
    "DiffEntry",
    "HighlightedWord",
    "MatchResult",
]

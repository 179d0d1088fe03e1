"""
Arabic text normalization utilities.

Turns printed Quran text and speech-recognition transcripts into the same
canonical form so they can be compared word by word:
- strip harakat, Quranic recitation marks and tatweel
- replace punctuation with spaces
- fold hamza and alif maqsura letter variants to their base letters
- collapse whitespace and split into words
"""

import re


# Harakat (U+064B-U+065F), superscript alef (U+0670), Quranic marks (U+06EA-U+06ED)
DIACRITICS_PATTERN = re.compile(r"[\u064B-\u065F\u0670\u06EA-\u06ED]")

TATWEEL_PATTERN = re.compile(r"\u0640")

# Arabic comma, semicolon, question mark, U+066A-U+066D, and ASCII punctuation
PUNCTUATION_PATTERN = re.compile(r"[\u060C\u061B\u061F\u066A-\u066D.,;!?\"'\-\u2013\u2014()\[\]{}]")

WHITESPACE_PATTERN = re.compile(r"\s+")

LETTER_VARIANTS = {
    "أ": "ا",  # alif with hamza above
    "إ": "ا",  # alif with hamza below
    "ٱ": "ا",  # alif wasla
    "آ": "ا",  # alif with madda
    "ى": "ي",  # alif maqsura
    "ئ": "ي",  # ya with hamza
    "ؤ": "و",  # waw with hamza
}

_LETTER_TABLE = str.maketrans(LETTER_VARIANTS)


def normalize_arabic(text: str | None) -> str:
    """
    Normalize Arabic text for comparison.

    Non-Arabic characters pass through unchanged unless they are punctuation.
    The result is stable: normalizing it again returns it unchanged.

    Args:
        text: Arabic text, possibly with diacritics and punctuation

    Returns:
        Normalized text with single spaces between words

    Examples:
        >>> normalize_arabic("بِسْمِ ٱللَّهِ")
        'بسم الله'
        >>> normalize_arabic("قَالَ أَحْمَدُ، نَعَمْ!")
        'قال احمد نعم'
    """
    if not text:
        return ""

    text = DIACRITICS_PATTERN.sub("", text)
    text = TATWEEL_PATTERN.sub("", text)
    # Spaces, not deletion, so "word,word" stays two words
    text = PUNCTUATION_PATTERN.sub(" ", text)
    text = text.translate(_LETTER_TABLE)
    text = WHITESPACE_PATTERN.sub(" ", text).strip()

    return text


def tokenize_words(text: str | None) -> list[str]:
    """
    Normalize text and split it into words.

    Args:
        text: Arabic text

    Returns:
        List of normalized words; empty for empty or whitespace-only input

    Examples:
        >>> tokenize_words("بِسْمِ اللَّهِ الرَّحْمَٰنِ")
        ['بسم', 'الله', 'الرحمن']
        >>> tokenize_words("   ")
        []
    """
    normalized = normalize_arabic(text)
    if not normalized:
        return []
    return [word for word in normalized.split(" ") if word]

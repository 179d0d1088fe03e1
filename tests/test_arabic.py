"""Tests for Arabic normalization and tokenization."""

import pytest

from tasmee.core.arabic import normalize_arabic, tokenize_words


SAMPLES = [
    "",
    "   ",
    "بِسْمِ ٱللَّهِ ٱلرَّحْمَٰنِ ٱلرَّحِيمِ",
    "قَالَ أَحْمَدُ، نَعَمْ!",
    "الـــرحمن",
    "إيمان  و  أمان؟",
    "hello, world (test)",
    "ذَٰلِكَ ٱلْكِتَٰبُ لَا رَيْبَ ۛ فِيهِ ۛ",
]


class TestNormalizeArabic:
    """normalize_arabic: diacritics, tatweel, punctuation, letter variants."""

    def test_diacritics_removed(self) -> None:
        assert normalize_arabic("قَالَ") == normalize_arabic("قال") == "قال"

    def test_shadda_and_sukun_removed(self) -> None:
        assert normalize_arabic("اللَّهُ") == "الله"
        assert normalize_arabic("بِسْمِ") == "بسم"

    def test_superscript_alef_removed(self) -> None:
        assert normalize_arabic("ٱلرَّحْمَٰنِ") == "الرحمن"

    def test_tatweel_removed(self) -> None:
        assert normalize_arabic("الـــرحمن") == "الرحمن"

    def test_hamza_alif_forms_fold_to_alif(self) -> None:
        assert normalize_arabic("أحمد") == normalize_arabic("احمد") == "احمد"
        assert normalize_arabic("إيمان") == "ايمان"
        assert normalize_arabic("آمن") == "امن"
        assert normalize_arabic("ٱلله") == "الله"

    def test_ya_and_waw_variants_fold(self) -> None:
        assert normalize_arabic("موسى") == "موسي"
        assert normalize_arabic("شئ") == "شي"
        assert normalize_arabic("مؤمن") == "مومن"

    def test_leading_token_matches_after_folding(self) -> None:
        assert normalize_arabic("إيمان").split(" ")[0] == normalize_arabic("ايمان").split(" ")[0]

    def test_arabic_punctuation_becomes_space(self) -> None:
        assert normalize_arabic("نعم،لا؛ماذا؟") == "نعم لا ماذا"

    def test_ascii_punctuation_becomes_space(self) -> None:
        assert normalize_arabic("بسم,الله") == "بسم الله"
        assert normalize_arabic("(بسم)-[الله]") == "بسم الله"

    @pytest.mark.parametrize("mark", ["\u06ea", "\u06eb", "\u06ec", "\u06ed"])
    def test_quranic_recitation_marks_removed(self, mark: str) -> None:
        assert normalize_arabic("فِيهِ" + mark) == "فيه"
        assert normalize_arabic("بِسْمِ" + mark + " ٱللَّهِ") == "بسم الله"

    @pytest.mark.parametrize("separator", ["\u066a", "\u066b", "\u066c", "\u066d"])
    def test_arabic_separators_become_space(self, separator: str) -> None:
        assert normalize_arabic("بسم" + separator + "الله") == "بسم الله"

    def test_dashes_and_braces_become_space(self) -> None:
        assert normalize_arabic("بسم\u2014الله{x}") == "بسم الله x"
        assert normalize_arabic("بسم\u2013الله") == "بسم الله"
        assert tokenize_words("{بسم}\u2014{الله}") == ["بسم", "الله"]

    def test_whitespace_collapsed_and_trimmed(self) -> None:
        assert normalize_arabic("  بسم \t\n الله  ") == "بسم الله"

    def test_non_arabic_passes_through(self) -> None:
        assert normalize_arabic("hello, world") == "hello world"

    def test_empty_and_none(self) -> None:
        assert normalize_arabic("") == ""
        assert normalize_arabic(None) == ""

    @pytest.mark.parametrize("text", SAMPLES)
    def test_idempotent(self, text: str) -> None:
        once = normalize_arabic(text)
        assert normalize_arabic(once) == once


class TestTokenizeWords:
    """tokenize_words: normalize then split."""

    def test_empty_input(self) -> None:
        assert tokenize_words("") == []
        assert tokenize_words("   ") == []
        assert tokenize_words(None) == []

    def test_punctuation_only(self) -> None:
        assert tokenize_words("،؟!...") == []

    def test_verse_tokens(self, fatiha_1: str) -> None:
        assert tokenize_words(fatiha_1) == ["بسم", "الله", "الرحمن", "الرحيم"]

    def test_no_empty_tokens(self) -> None:
        tokens = tokenize_words(" بسم ،  الله ")
        assert tokens == ["بسم", "الله"]
        assert all(tokens)

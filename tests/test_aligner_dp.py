"""Tests for the re-synchronizing DP word aligner."""

from tasmee.core.aligner_dp import align_words
from tasmee.core.matcher import diff_words


REF = ["بسم", "الله", "الرحمن", "الرحيم"]


class TestAlignWords:
    """align_words: one entry per reference word, skips extra words."""

    def test_identical(self) -> None:
        entries = align_words(REF, REF)
        assert [e.word for e in entries] == REF
        assert all(e.ok and e.distance == 0 for e in entries)

    def test_dropped_word_does_not_cascade(self) -> None:
        entries = align_words(REF, ["بسم", "الرحمن", "الرحيم"])
        assert [e.ok for e in entries] == [True, False, True, True]
        assert entries[1].heard is None

    def test_inserted_word_is_skipped(self) -> None:
        entries = align_words(REF, ["بسم", "الله", "الله", "الرحمن", "الرحيم"])
        assert [e.word for e in entries] == REF
        assert all(e.ok for e in entries)

    def test_tolerant_match_pairs_words(self) -> None:
        entries = align_words(REF, ["بسم", "الله", "الرحمان", "الرحيم"])
        assert all(e.ok for e in entries)
        assert entries[2].heard == "الرحمان"
        assert entries[2].distance == 1

    def test_substitution_is_paired_not_skipped(self) -> None:
        entries = align_words(["بسم", "الله"], ["بسم", "كتاب"])
        assert entries[1].ok is False
        assert entries[1].heard == "كتاب"

    def test_truncated_hypothesis(self) -> None:
        entries = align_words(["بسم", "الله", "الرحمن"], ["بسم", "الله"])
        assert [e.ok for e in entries] == [True, True, False]

    def test_extra_trailing_words(self) -> None:
        entries = align_words(["بسم", "الله"], REF)
        assert [(e.word, e.ok) for e in entries] == [("بسم", True), ("الله", True)]

    def test_empty_inputs(self) -> None:
        assert align_words([], []) == []
        assert align_words([], REF) == []
        assert [e.ok for e in align_words(REF, [])] == [False] * 4

    def test_agrees_with_positional_when_lengths_match_without_shift(self) -> None:
        hyp = ["بسم", "الله", "الرحمان", "كتاب"]
        assert align_words(REF, hyp) == diff_words(REF, hyp)

    def test_strict_tolerance(self) -> None:
        entries = align_words(["الرحمن"], ["الرحمان"], max_edits=0)
        assert entries[0].ok is False

"""
Recitation matching: the public entry points.

match_text scores a transcript against a reference verse in one call.
LiveMatcher re-scores a growing interim transcript against a fixed
reference, as speech recognition streams partial results.
"""

from typing import Optional

from tasmee._logging import log_match_complete, log_warning
from tasmee.cache import ExpiringCache
from tasmee.config import TasmeeSettings, get_settings
from tasmee.core.aligner_dp import align_words
from tasmee.core.arabic import tokenize_words
from tasmee.core.matcher import accuracy_from_diff, diff_words, jaccard_similarity
from tasmee.exceptions import ConfigurationError
from tasmee.models import HighlightedWord, MatchResult


STRATEGIES = {
    "positional": diff_words,
    "sequence": align_words,
}


def _resolve_strategy(strategy: Optional[str], settings: TasmeeSettings):
    name = strategy or settings.alignment_strategy
    try:
        return name, STRATEGIES[name]
    except KeyError:
        raise ConfigurationError(
            f"Unknown alignment strategy: {name}",
            setting_name="alignment_strategy",
            context={"choices": "/".join(STRATEGIES)},
        ) from None


def match_tokens(
    ref_tokens: list[str],
    hyp_tokens: list[str],
    *,
    strategy: Optional[str] = None,
    max_edits: Optional[int] = None,
    ratio: Optional[float] = None,
    settings: Optional[TasmeeSettings] = None,
) -> MatchResult:
    """
    Score already-tokenized words. See match_text for the options.
    """
    settings = settings or get_settings()
    name, align = _resolve_strategy(strategy, settings)
    if max_edits is None:
        max_edits = settings.max_word_edits
    if ratio is None:
        ratio = settings.word_tolerance_ratio

    diff = align(ref_tokens, hyp_tokens, max_edits, ratio)
    result = MatchResult(
        jaccard=jaccard_similarity(ref_tokens, hyp_tokens),
        accuracy=accuracy_from_diff(diff),
        diff=diff,
        ref_tokens=list(ref_tokens),
        hyp_tokens=list(hyp_tokens),
    )

    log_match_complete(len(ref_tokens), len(hyp_tokens), result.accuracy, result.jaccard, name)
    return result


def match_text(
    reference_text: str,
    hypothesis_text: str,
    *,
    strategy: Optional[str] = None,
    max_edits: Optional[int] = None,
    ratio: Optional[float] = None,
    settings: Optional[TasmeeSettings] = None,
) -> MatchResult:
    """
    Score a recited transcript against a reference verse.

    Both texts are normalized and tokenized, then compared word by word.
    Empty or non-Arabic input is not an error; it simply scores low.

    Args:
        reference_text: The verse as printed (diacritics allowed)
        hypothesis_text: What the reciter said, as transcribed
        strategy: "positional" or "sequence" (default from settings)
        max_edits: Character edits tolerated per word (default from settings)
        ratio: Length-relative word tolerance (default from settings)
        settings: Settings to use instead of the global ones

    Returns:
        MatchResult with jaccard, accuracy, diff and both token lists

    Raises:
        ConfigurationError: If strategy names an unknown strategy

    Examples:
        >>> result = match_text("بِسْمِ اللَّهِ الرَّحْمَٰنِ", "بسم الله")
        >>> result.accuracy
        67
    """
    return match_tokens(
        tokenize_words(reference_text),
        tokenize_words(hypothesis_text),
        strategy=strategy,
        max_edits=max_edits,
        ratio=ratio,
        settings=settings,
    )


def project_highlights(result: MatchResult) -> list[HighlightedWord]:
    """
    Reduce a result to the words and flags a renderer colours.

    Returns:
        One HighlightedWord per diff entry, in order
    """
    return [HighlightedWord(word=entry.word, ok=entry.ok) for entry in result.diff]


class LiveMatcher:
    """
    Scores successive partial transcripts against one reference verse.

    Speech recognition reports interim results that grow as the reciter
    speaks. Each call to update() scores the latest transcript; the best
    result so far is kept so a late misrecognition does not erase progress.

    Example:
        matcher = LiveMatcher(ayah.text)
        for partial in recognizer_results:
            result = matcher.update(partial)
            render(project_highlights(result))
    """

    def __init__(
        self,
        reference_text: str,
        *,
        cache: Optional[ExpiringCache] = None,
        strategy: Optional[str] = None,
        max_edits: Optional[int] = None,
        ratio: Optional[float] = None,
        settings: Optional[TasmeeSettings] = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._strategy = strategy
        self._max_edits = max_edits
        self._ratio = ratio
        # Fail fast on a bad strategy rather than on the first update
        _resolve_strategy(strategy, self._settings)

        if cache is None:
            cache = ExpiringCache(
                ttl_seconds=self._settings.reference_cache_ttl,
                max_entries=self._settings.reference_cache_size,
            )
        self._cache = cache
        self._last_result: MatchResult | None = None
        self._best_result: MatchResult | None = None
        self._set_reference(reference_text)

    def _set_reference(self, reference_text: str) -> None:
        self._reference_text = reference_text
        if not self.reference_tokens:
            log_warning("Reference verse has no words to match", length=len(reference_text or ""))

    @property
    def reference_text(self) -> str:
        return self._reference_text

    @property
    def reference_tokens(self) -> list[str]:
        """Copy of the tokenized reference, served from the cache while it is fresh."""
        text = self._reference_text
        return list(self._cache.get_or_set(text, lambda: tokenize_words(text)))

    @property
    def last_result(self) -> MatchResult | None:
        return self._last_result

    @property
    def best_result(self) -> MatchResult | None:
        """Highest-accuracy result seen since creation or the last reset()."""
        return self._best_result

    def update(self, partial_transcript: str) -> MatchResult:
        """
        Score the current interim transcript.

        Args:
            partial_transcript: Everything recognized so far for this verse

        Returns:
            MatchResult for this transcript
        """
        result = match_tokens(
            self.reference_tokens,
            tokenize_words(partial_transcript),
            strategy=self._strategy,
            max_edits=self._max_edits,
            ratio=self._ratio,
            settings=self._settings,
        )
        self._last_result = result
        if self._best_result is None or result.accuracy > self._best_result.accuracy:
            self._best_result = result
        return result

    def reset(self, reference_text: Optional[str] = None) -> None:
        """Forget previous results, optionally switching to a new reference verse."""
        if reference_text is not None:
            self._set_reference(reference_text)
        self._last_result = None
        self._best_result = None

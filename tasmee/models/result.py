"""
Match result data models.
"""

from pydantic import BaseModel, Field, computed_field


class DiffEntry(BaseModel):
    """
    One reference word in a word-by-word comparison.

    Attributes:
        word: The reference token at this position
        ok: Whether the heard word at this position counts as correct
        heard: The hypothesis token it was compared with (None if nothing was heard)
        distance: Edit distance between word and heard (None if nothing was heard)
    """

    word: str = Field(
        ...,
        description="The reference token at this position",
    )
    ok: bool = Field(
        ...,
        description="Whether the heard word matches the reference word",
    )
    heard: str | None = Field(
        default=None,
        description="The hypothesis token compared at this position",
    )
    distance: int | None = Field(
        default=None,
        description="Character edit distance between word and heard",
        ge=0,
    )

    model_config = {"frozen": True}

    def __str__(self) -> str:
        mark = "✓" if self.ok else "✗"
        return f"{mark} {self.word}"


class HighlightedWord(BaseModel):
    """A reference word and its correctness, the minimal shape a renderer needs."""

    word: str
    ok: bool

    model_config = {"frozen": True}


class MatchResult(BaseModel):
    """
    Result of scoring a recitation transcript against a reference verse.

    Attributes:
        jaccard: Word-set similarity between reference and hypothesis (0.0-1.0)
        accuracy: Percentage of reference words recited correctly (0-100)
        diff: Per-word comparison, one entry per reference word
        ref_tokens: Normalized reference tokens
        hyp_tokens: Normalized hypothesis tokens
    """

    jaccard: float = Field(
        ...,
        description="Jaccard similarity of the reference and hypothesis word sets",
        ge=0.0,
        le=1.0,
    )
    accuracy: int = Field(
        ...,
        description="Percentage of reference words marked correct",
        ge=0,
        le=100,
    )
    diff: list[DiffEntry] = Field(
        default_factory=list,
        description="Word-by-word comparison in reference order",
    )
    ref_tokens: list[str] = Field(
        default_factory=list,
        description="Normalized reference tokens",
    )
    hyp_tokens: list[str] = Field(
        default_factory=list,
        description="Normalized hypothesis tokens",
    )

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "examples": [
                {
                    "jaccard": 0.5,
                    "accuracy": 67,
                    "diff": [
                        {"word": "بسم", "ok": True, "heard": "بسم", "distance": 0},
                        {"word": "الله", "ok": True, "heard": "الله", "distance": 0},
                        {"word": "الرحمن", "ok": False, "heard": None, "distance": None},
                    ],
                    "ref_tokens": ["بسم", "الله", "الرحمن"],
                    "hyp_tokens": ["بسم", "الله"],
                }
            ]
        },
    }

    @computed_field
    @property
    def matched_count(self) -> int:
        """Number of reference words recited correctly."""
        return sum(1 for entry in self.diff if entry.ok)

    @computed_field
    @property
    def missed_count(self) -> int:
        """Number of reference words missed or recited wrongly."""
        return len(self.diff) - self.matched_count

    @property
    def is_perfect(self) -> bool:
        """Whether every reference word was recited correctly."""
        return self.accuracy == 100

    def __str__(self) -> str:
        return (
            f"MatchResult(accuracy={self.accuracy}%, jaccard={self.jaccard:.2f}, "
            f"words={self.matched_count}/{len(self.diff)})"
        )

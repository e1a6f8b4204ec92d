"""Type definitions for similarity scoring components.

This module holds the comparator configuration and the structured records
returned by the diagnostic helpers.
"""

import string
from dataclasses import dataclass
from typing import Any, Literal, Optional, TypedDict

# Working alphabet read back when computing histogram distance
DEFAULT_ALPHABET = string.ascii_lowercase + string.digits

MatchStrategy = Literal["substring", "histogram", "skipped"]


@dataclass(frozen=True)
class ComparatorConfig:
    """Immutable comparator configuration.

    Attributes:
        minimum_word_len: Words shorter than this are ignored entirely
        delta_word_len_ignore: Max length gap for which a substring counts as a match
        min_word_similarity: Histogram similarity must be strictly above this
        alphabet: Symbols inspected when summing histogram errors

    """

    minimum_word_len: int = 2
    delta_word_len_ignore: int = 3
    min_word_similarity: float = 0.707
    alphabet: str = DEFAULT_ALPHABET

    def __post_init__(self) -> None:
        if self.minimum_word_len < 1:
            raise ValueError(
                f"minimum_word_len must be >= 1, got {self.minimum_word_len}",
            )
        if self.delta_word_len_ignore < 0:
            raise ValueError(
                f"delta_word_len_ignore must be >= 0, got {self.delta_word_len_ignore}",
            )
        if not 0.0 <= self.min_word_similarity <= 1.0:
            raise ValueError(
                f"min_word_similarity must be in [0, 1], got {self.min_word_similarity}",
            )
        if not self.alphabet:
            raise ValueError("alphabet cannot be empty")

    @classmethod
    def from_settings(cls, settings: Optional[dict[str, Any]] = None) -> "ComparatorConfig":
        """Build a config from a settings dict (``similarity.comparator`` section).

        Missing keys fall back to the defaults above.
        """
        similarity = (settings or {}).get("similarity") or {}
        comparator = similarity.get("comparator") or {}
        defaults = cls()
        return cls(
            minimum_word_len=int(
                comparator.get("minimum_word_len", defaults.minimum_word_len),
            ),
            delta_word_len_ignore=int(
                comparator.get("delta_word_len_ignore", defaults.delta_word_len_ignore),
            ),
            min_word_similarity=float(
                comparator.get("min_word_similarity", defaults.min_word_similarity),
            ),
            alphabet=str(comparator.get("alphabet", defaults.alphabet)),
        )


class WordMatch(TypedDict):
    """Outcome of comparing one pair of words."""

    word_a: str
    word_b: str
    delta_len: int
    strategy: MatchStrategy
    local_similarity: Optional[float]
    matched: bool


class ScoreBreakdown(TypedDict):
    """Full trace of a similarity computation."""

    score: float
    equality: int
    filtered_count_a: int
    filtered_count_b: int
    denominator: float
    words_a: list[str]
    words_b: list[str]
    pairs: list[WordMatch]

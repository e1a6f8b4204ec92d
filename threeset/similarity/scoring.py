"""Similarity scoring functionality."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from threeset.normalize import normalize
from threeset.similarity.matching import compare_words, is_comparable
from threeset.similarity.types import ComparatorConfig, ScoreBreakdown, WordMatch

logger = logging.getLogger(__name__)


def _aggregate(
    words_a: Sequence[str],
    words_b: Sequence[str],
    config: ComparatorConfig,
    pairs: list[WordMatch] | None = None,
) -> tuple[float, int, int, int, float]:
    """Run the cross-product match and normalize the match count.

    Returns:
        Tuple of (score, equality, filtered_count_a, filtered_count_b, denominator)

    """
    equality = 0
    for word_a in words_a:
        for word_b in words_b:
            match = compare_words(word_a, word_b, config)
            if match["matched"]:
                equality += 1
            if pairs is not None:
                pairs.append(match)

    filtered_count_a = sum(1 for word in words_a if is_comparable(word, config))
    filtered_count_b = sum(1 for word in words_b if is_comparable(word, config))
    denominator = (filtered_count_a + filtered_count_b) / 2

    # No comparable content on either side is not treated as a match
    if denominator == 0:
        logger.debug("No comparable words on either side, returning 0.0")
        return 0.0, equality, filtered_count_a, filtered_count_b, denominator

    score = min(equality / denominator, 1.0)
    return score, equality, filtered_count_a, filtered_count_b, denominator


def score_words(
    words_a: Sequence[str],
    words_b: Sequence[str],
    config: ComparatorConfig | None = None,
) -> float:
    """Score two word sequences.

    Every pair of the cross product adds one to the match count when the
    words are equal, so a word may match several words on the other side.
    The count is divided by the average number of comparable words and
    clamped to 1.0.

    Args:
        words_a: Words from the first text
        words_b: Words from the second text
        config: Comparator configuration (defaults when None)

    Returns:
        Score in [0, 1]; 0.0 when neither side has comparable words

    """
    return _aggregate(words_a, words_b, config or ComparatorConfig())[0]


def score_breakdown(
    words_a: Sequence[str],
    words_b: Sequence[str],
    config: ComparatorConfig | None = None,
) -> ScoreBreakdown:
    """Score two word sequences and keep every intermediate value."""
    pairs: list[WordMatch] = []
    score, equality, count_a, count_b, denominator = _aggregate(
        words_a,
        words_b,
        config or ComparatorConfig(),
        pairs,
    )
    return {
        "score": score,
        "equality": equality,
        "filtered_count_a": count_a,
        "filtered_count_b": count_b,
        "denominator": denominator,
        "words_a": list(words_a),
        "words_b": list(words_b),
        "pairs": pairs,
    }


class ThreeSetCompare:
    """Comparator for short strings, invariant to word order and script.

    Instances hold only an immutable config and can be shared across threads.
    Intended for inputs up to about 255 characters: cost grows with the
    product of the word counts.
    """

    def __init__(self, config: ComparatorConfig | None = None) -> None:
        self.config = config or ComparatorConfig()

    @classmethod
    def from_settings(cls, settings: dict[str, Any] | None) -> ThreeSetCompare:
        """Create a comparator from a loaded settings dict."""
        return cls(ComparatorConfig.from_settings(settings))

    def similarity(self, first: str, second: str) -> float:
        """Compare two strings.

        Both strings are transliterated before comparison, so any script can
        be used.

        Returns:
            Score in [0, 1], 1 meaning the strings are equal

        """
        return score_words(normalize(first), normalize(second), self.config)

    def explain(self, first: str, second: str) -> ScoreBreakdown:
        """Compare two strings and return the full per-pair trace."""
        return score_breakdown(normalize(first), normalize(second), self.config)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.config!r})"


_default_comparator = ThreeSetCompare()


def similarity(first: str, second: str) -> float:
    """Compare two strings with the default comparator."""
    return _default_comparator.similarity(first, second)

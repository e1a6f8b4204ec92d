"""Similarity module for threeset.

This module provides the word matcher, the aggregating scorer and the
bulk helpers built on top of them.
"""

from .bulk import extract_matches, group_similar, score_pairs_frame, similarity_scorer
from .diagnostics import explain_similarity, format_breakdown
from .histogram import char_histogram, histogram_distance
from .matching import compare_words, words_match
from .scoring import ThreeSetCompare, score_breakdown, score_words, similarity
from .types import DEFAULT_ALPHABET, ComparatorConfig, ScoreBreakdown, WordMatch

__all__ = [
    "DEFAULT_ALPHABET",
    "ComparatorConfig",
    "ScoreBreakdown",
    "ThreeSetCompare",
    "WordMatch",
    "char_histogram",
    "compare_words",
    "explain_similarity",
    "extract_matches",
    "format_breakdown",
    "group_similar",
    "histogram_distance",
    "score_breakdown",
    "score_pairs_frame",
    "score_words",
    "similarity",
    "similarity_scorer",
    "words_match",
]

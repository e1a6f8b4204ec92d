"""threeset: word-order and script invariant similarity for short strings."""

from threeset.normalize import normalize, transliterate
from threeset.similarity import (
    ComparatorConfig,
    ThreeSetCompare,
    explain_similarity,
    extract_matches,
    group_similar,
    score_pairs_frame,
    similarity,
    similarity_scorer,
)

__version__ = "0.1.0"

__all__ = [
    "ComparatorConfig",
    "ThreeSetCompare",
    "explain_similarity",
    "extract_matches",
    "group_similar",
    "normalize",
    "score_pairs_frame",
    "similarity",
    "similarity_scorer",
    "transliterate",
]

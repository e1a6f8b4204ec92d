"""Bulk scoring helpers built on the threeset comparator.

This module provides:
- A rapidfuzz-compatible scorer (0-100 scale)
- Best-candidate extraction via rapidfuzz.process
- DataFrame pair scoring
- Near-duplicate grouping with union-find
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any

import pandas as pd
from rapidfuzz import process

from threeset.normalize import normalize
from threeset.similarity.scoring import ThreeSetCompare, _default_comparator, score_words
from threeset.utils.union_find import DisjointSet

logger = logging.getLogger(__name__)


def similarity_scorer(
    s1: str,
    s2: str,
    *,
    processor: Callable[[str], str] | None = None,
    score_cutoff: float | None = None,
    comparator: ThreeSetCompare | None = None,
    **kwargs: Any,
) -> float:
    """Scorer usable as ``scorer=`` in rapidfuzz.process functions.

    Args:
        s1: First string
        s2: Second string
        processor: Optional callable applied to both strings first
        score_cutoff: Scores below this are reported as 0
        comparator: Comparator to use (default comparator when None)

    Returns:
        Similarity on a 0-100 scale

    """
    if processor is not None:
        s1 = processor(s1)
        s2 = processor(s2)

    score = (comparator or _default_comparator).similarity(s1, s2) * 100
    if score_cutoff is not None and score < score_cutoff:
        return 0.0
    return score


def extract_matches(
    query: str,
    choices: Sequence[str],
    limit: int | None = 5,
    score_cutoff: float | None = None,
    comparator: ThreeSetCompare | None = None,
) -> list[tuple[str, float, Any]]:
    """Find the choices most similar to the query.

    Args:
        query: String to look up
        choices: Candidate strings
        limit: Max results (None for all)
        score_cutoff: Minimum score on the 0-100 scale
        comparator: Comparator to use

    Returns:
        List of (choice, score, index) tuples, best first

    """
    if not choices:
        return []

    results = process.extract(
        query,
        choices,
        scorer=similarity_scorer,
        limit=limit,
        score_cutoff=score_cutoff,
        scorer_kwargs={"comparator": comparator or _default_comparator},
    )
    logger.debug(f"extract_matches: {len(results)}/{len(choices)} candidates kept")
    return list(results)


def score_pairs_frame(
    df: pd.DataFrame,
    column_a: str,
    column_b: str,
    comparator: ThreeSetCompare | None = None,
    output_column: str = "similarity",
) -> pd.DataFrame:
    """Score every row's pair of text columns.

    Args:
        df: Input DataFrame
        column_a: Column with the first strings
        column_b: Column with the second strings
        comparator: Comparator to use
        output_column: Name of the score column to add

    Returns:
        Copy of the DataFrame with the score column added

    """
    missing = [col for col in (column_a, column_b) if col not in df.columns]
    if missing:
        logger.warning(f"Columns {missing} not found in DataFrame")
        return df

    comparator = comparator or _default_comparator

    def _text(val: Any) -> str:
        return str(val) if pd.notna(val) else ""

    scores = [
        comparator.similarity(_text(a), _text(b))
        for a, b in zip(df[column_a], df[column_b])
    ]

    df = df.copy()
    df[output_column] = pd.Series(scores, index=df.index, dtype="float64")
    logger.info(f"Scored {len(df)} pairs into column '{output_column}'")
    return df


def group_similar(
    labels: Sequence[str],
    threshold: float = 0.8,
    comparator: ThreeSetCompare | None = None,
) -> list[list[int]]:
    """Group labels whose pairwise similarity reaches the threshold.

    Grouping is transitive: A~B and B~C put A, B and C together.

    Args:
        labels: Strings to group
        threshold: Minimum similarity in [0, 1] to link two labels
        comparator: Comparator to use

    Returns:
        Groups of label indices, each sorted, ordered by smallest member

    Raises:
        ValueError: If threshold is outside [0, 1]

    """
    if not 0.0 <= threshold <= 1.0:
        raise ValueError(f"threshold must be in [0, 1], got {threshold}")

    comparator = comparator or _default_comparator
    words = [normalize(label) for label in labels]

    ds = DisjointSet()
    for idx in range(len(labels)):
        ds.make_set(idx)

    links = 0
    for i in range(len(words)):
        for j in range(i + 1, len(words)):
            if score_words(words[i], words[j], comparator.config) >= threshold:
                ds.union(i, j)
                links += 1

    groups = ds.groups()
    logger.info(
        f"Grouped {len(labels)} labels into {len(groups)} groups ({links} links >= {threshold})",
    )
    return groups


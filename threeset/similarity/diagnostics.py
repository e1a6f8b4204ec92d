"""Diagnostics for similarity scoring.

Produces per-pair traces that show which words matched, through which
strategy, and how the final score was normalized.
"""

import logging
from typing import Optional

from threeset.normalize import normalize
from threeset.similarity.scoring import score_breakdown
from threeset.similarity.types import ComparatorConfig, ScoreBreakdown

logger = logging.getLogger(__name__)


def explain_similarity(
    first: str,
    second: str,
    config: Optional[ComparatorConfig] = None,
) -> ScoreBreakdown:
    """Compute the similarity of two strings with a full trace.

    Args:
        first: First raw string
        second: Second raw string
        config: Comparator configuration (defaults when None)

    Returns:
        ScoreBreakdown with the normalized words and every evaluated pair

    """
    breakdown = score_breakdown(normalize(first), normalize(second), config)
    logger.debug(
        f"Explained similarity: {breakdown['equality']} matches over "
        f"{breakdown['denominator']} -> {breakdown['score']:.4f}",
    )
    return breakdown


def format_breakdown(breakdown: ScoreBreakdown, show_skipped: bool = False) -> str:
    """Render a breakdown as a human-readable trace.

    Args:
        breakdown: Result of explain_similarity
        show_skipped: Include pairs skipped by the minimum length filter

    Returns:
        Multi-line trace

    """
    lines = [
        "1. NORMALIZED WORDS:",
        f"   A: {breakdown['words_a']}",
        f"   B: {breakdown['words_b']}",
        "",
        "2. WORD PAIRS:",
    ]

    for pair in breakdown["pairs"]:
        if pair["strategy"] == "skipped" and not show_skipped:
            continue
        mark = "MATCH" if pair["matched"] else "-"
        detail = f"delta_len={pair['delta_len']}"
        if pair["local_similarity"] is not None:
            detail += f", local={pair['local_similarity']:.3f}"
        lines.append(
            f"   {pair['word_a']!r} vs {pair['word_b']!r}: "
            f"{pair['strategy']} ({detail}) {mark}",
        )

    lines.extend(
        [
            "",
            "3. SCORE:",
            f"   Comparable words: A={breakdown['filtered_count_a']}, "
            f"B={breakdown['filtered_count_b']}",
            f"   Matches: {breakdown['equality']} / {breakdown['denominator']}",
            f"   Final score: {breakdown['score']:.7f}",
        ],
    )
    return "\n".join(lines)

"""Word-level matching: substring containment first, histogram distance second."""

from threeset.similarity.histogram import char_histogram, histogram_distance
from threeset.similarity.types import ComparatorConfig, WordMatch


def is_comparable(word: str, config: ComparatorConfig) -> bool:
    """Check whether a word is long enough to take part in matching."""
    return len(word) >= config.minimum_word_len


def compare_words(word_a: str, word_b: str, config: ComparatorConfig) -> WordMatch:
    """Decide whether two words are equal and record how the decision was made.

    The substring check runs first and short-circuits the histogram path:
    a substring relation with a large length gap is a non-match even when the
    histograms would be close.

    Args:
        word_a: First lowercase word
        word_b: Second lowercase word
        config: Comparator configuration

    Returns:
        WordMatch record

    """
    delta_len = abs(len(word_a) - len(word_b))

    if not (is_comparable(word_a, config) and is_comparable(word_b, config)):
        return {
            "word_a": word_a,
            "word_b": word_b,
            "delta_len": delta_len,
            "strategy": "skipped",
            "local_similarity": None,
            "matched": False,
        }

    if word_b in word_a or word_a in word_b:
        return {
            "word_a": word_a,
            "word_b": word_b,
            "delta_len": delta_len,
            "strategy": "substring",
            "local_similarity": None,
            "matched": delta_len <= config.delta_word_len_ignore,
        }

    errors_sum, total_length = histogram_distance(
        char_histogram(word_a),
        char_histogram(word_b),
        config.alphabet,
    )
    # Both words empty of characters; unreachable with minimum_word_len >= 1
    if total_length == 0:
        local_similarity = 0.0
        matched = False
    else:
        local_similarity = 1.0 - errors_sum / total_length
        matched = local_similarity > config.min_word_similarity

    return {
        "word_a": word_a,
        "word_b": word_b,
        "delta_len": delta_len,
        "strategy": "histogram",
        "local_similarity": local_similarity,
        "matched": matched,
    }


def words_match(word_a: str, word_b: str, config: ComparatorConfig) -> bool:
    """Return True when the two words count as equal."""
    return compare_words(word_a, word_b, config)["matched"]

"""Character histograms for order-insensitive word comparison."""

from collections import Counter
from collections.abc import Iterable


def char_histogram(word: str) -> Counter:
    """Count occurrences of every character in a word.

    Punctuation and other non-alphabet characters are counted too; they are
    filtered out only when the distance is computed.
    """
    return Counter(word)


def histogram_distance(
    first: Counter,
    second: Counter,
    alphabet: Iterable[str],
) -> tuple[int, int]:
    """Compute the error sum and total length of two histograms.

    Args:
        first: Histogram of the first word
        second: Histogram of the second word
        alphabet: Symbols inspected for the error sum

    Returns:
        Tuple of (errors_sum, total_length). ``total_length`` counts every
        character in both histograms, while ``errors_sum`` only looks at
        alphabet members.

    """
    total_length = sum(first.values()) + sum(second.values())
    errors_sum = sum(abs(first[symbol] - second[symbol]) for symbol in alphabet)
    return errors_sum, total_length

"""Text normalization for threeset comparisons.

This module handles:
- Transliteration of any script to an ASCII approximation (via Unidecode)
- Lower-casing
- Whitespace tokenization into words
"""

import logging
from typing import Optional

from unidecode import unidecode

logger = logging.getLogger(__name__)


def transliterate(text: Optional[str]) -> str:
    """Transliterate text to a lowercase ASCII approximation.

    Args:
        text: Raw input string, any script

    Returns:
        Lowercased transliteration; empty string for None

    """
    if not text:
        return ""
    return unidecode(text).lower()


def normalize(text: Optional[str]) -> list[str]:
    """Normalize text into a sequence of word tokens.

    Splits on any run of whitespace, dropping empty tokens and keeping order.
    No length filtering happens here.

    Args:
        text: Raw input string

    Returns:
        List of lowercase word tokens

    """
    words = transliterate(text).split()
    logger.debug(f"Normalized {text!r} into {len(words)} words")
    return words

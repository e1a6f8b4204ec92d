"""
Tests for text normalization functionality.
"""

import unittest

from threeset.normalize import normalize, transliterate


class TestNormalize(unittest.TestCase):
    """Test cases for text normalization."""

    def test_transliteration_is_lowercase_ascii(self):
        """Test that any script becomes lowercase ASCII."""
        result = transliterate("Сравнение СТРОК")
        self.assertTrue(result.isascii())
        self.assertEqual(result, result.lower())

    def test_accents_are_stripped(self):
        """Test accented Latin is folded to plain letters."""
        self.assertEqual(normalize("Café Crème Brûlée"), ["cafe", "creme", "brulee"])

    def test_whitespace_split(self):
        """Test splitting on runs of mixed whitespace."""
        self.assertEqual(normalize("  one\ttwo \n three  "), ["one", "two", "three"])

    def test_order_preserved(self):
        """Test token order follows the input."""
        self.assertEqual(normalize("b a c"), ["b", "a", "c"])

    def test_no_length_filtering(self):
        """Test short words are kept by the normalizer."""
        self.assertEqual(normalize("a bb c"), ["a", "bb", "c"])

    def test_punctuation_kept_in_words(self):
        """Test punctuation stays attached to its word."""
        self.assertEqual(normalize("Metrics, invariant!"), ["metrics,", "invariant!"])

    def test_empty_inputs(self):
        """Test empty, whitespace-only and None inputs."""
        self.assertEqual(normalize(""), [])
        self.assertEqual(normalize("   \t\n"), [])
        self.assertEqual(normalize(None), [])
        self.assertEqual(transliterate(None), "")

    def test_cyrillic_words_count(self):
        """Test Cyrillic text splits into the same number of words."""
        words = normalize("Сравнение двух строк с помощью инвариантной метрики")
        self.assertEqual(len(words), 7)
        self.assertEqual(words[3], "s")
        self.assertTrue(all(word.isascii() for word in words))


if __name__ == "__main__":
    unittest.main()

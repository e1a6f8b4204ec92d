"""Property-based tests for threeset similarity using Hypothesis."""

import pytest
from hypothesis import assume, given, strategies as st

from threeset.normalize import normalize
from threeset.similarity import ThreeSetCompare

comparator = ThreeSetCompare()

words = st.text(alphabet="abcdeklmnoprstабвгдежзиклмнопрстé!?,", min_size=1, max_size=10)
phrases = st.lists(words, min_size=0, max_size=8)


class TestSimilarityPropertyBased:
    """Property-based tests for similarity invariants."""

    @pytest.mark.hypothesis
    @given(first=st.text(max_size=80), second=st.text(max_size=80))
    def test_bounded_range(self, first: str, second: str):
        """Scores always fall in [0, 1]."""
        assert 0.0 <= comparator.similarity(first, second) <= 1.0

    @pytest.mark.hypothesis
    @given(first=st.text(max_size=80), second=st.text(max_size=80))
    def test_symmetry(self, first: str, second: str):
        """similarity(a, b) == similarity(b, a)."""
        assert comparator.similarity(first, second) == comparator.similarity(second, first)

    @pytest.mark.hypothesis
    @given(text=st.text(max_size=80))
    def test_identity(self, text: str):
        """A text with at least one comparable word is fully similar to itself."""
        assume(any(len(word) >= 2 for word in normalize(text)))
        assert comparator.similarity(text, text) == 1.0

    @pytest.mark.hypothesis
    @given(data=st.data(), tokens=phrases, other=phrases)
    def test_word_order_invariance(self, data, tokens: list[str], other: list[str]):
        """Shuffling the words of one side does not change the score."""
        shuffled = data.draw(st.permutations(tokens))
        second = " ".join(other)
        assert comparator.similarity(" ".join(tokens), second) == comparator.similarity(
            " ".join(shuffled), second,
        )

    @pytest.mark.hypothesis
    @given(tokens=st.lists(words, min_size=1, max_size=8), mark=st.sampled_from("!?.,"))
    def test_trailing_punctuation(self, tokens: list[str], mark: str):
        """Appending one punctuation mark keeps a comparable text fully similar."""
        text = " ".join(tokens)
        # A one-letter last word would become comparable only on the marked side
        normalized = normalize(text)
        assume(normalized and len(normalized[-1]) >= 2)
        assert comparator.similarity(text, text + mark) == 1.0

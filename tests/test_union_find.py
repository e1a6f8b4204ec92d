"""Tests for the DisjointSet used by near-duplicate grouping."""

import pytest

from threeset.utils.union_find import DisjointSet


class TestDisjointSet:

    def test_make_set_is_idempotent(self):
        ds = DisjointSet()
        ds.make_set(1)
        ds.make_set(1)
        assert len(ds) == 1
        assert ds.get_set_count() == 1

    def test_union_and_find(self):
        ds = DisjointSet()
        for x in range(4):
            ds.make_set(x)

        assert ds.union(0, 1) is True
        assert ds.union(1, 0) is False
        assert ds.union(2, 3) is True
        assert ds.find(0) == ds.find(1)
        assert ds.find(0) != ds.find(2)
        assert ds.get_set_count() == 2

    def test_groups_ordered_by_first_member(self):
        ds = DisjointSet()
        for x in range(5):
            ds.make_set(x)
        ds.union(3, 1)
        ds.union(4, 0)
        assert ds.groups() == [[0, 4], [1, 3], [2]]

    def test_long_chain(self):
        ds = DisjointSet()
        for x in range(2000):
            ds.make_set(x)
        for x in range(1999):
            ds.union(x, x + 1)
        assert ds.get_set_count() == 1
        assert ds.find(0) == ds.find(1999)

    def test_unknown_element(self):
        ds = DisjointSet()
        with pytest.raises(ValueError):
            ds.find("missing")
        assert "missing" not in ds

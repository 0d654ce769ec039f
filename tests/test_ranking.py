"""Tests for single-facet ranking."""

from __future__ import annotations

import pytest

from facetpivot.exceptions import MalformedFacetShapeError
from facetpivot.transform.ranking import (
    RankedEntry,
    RankedSeries,
    rank,
    rank_rows,
    ranking_entries,
)


class TestRank:
    def test_descending_by_value(self):
        series = rank([("a", 1), ("b", 3), ("c", 2)])
        assert series.names == ("b", "c", "a")
        assert series.values == (3, 2, 1)

    def test_ties_keep_input_order(self):
        series = rank([("a", 2), ("b", 3), ("c", 2), ("d", 2)])
        assert series.names == ("b", "a", "c", "d")

    def test_reverse_flips_both_sequences(self):
        series = rank([("a", 1), ("b", 3), ("c", 2)], reverse=True)
        assert series.names == ("a", "c", "b")
        assert series.values == (1, 2, 3)

    def test_reverse_preserves_pairing(self):
        entries = [("a", 5), ("b", 9), ("c", 1), ("d", 7)]
        series = rank(entries, reverse=True)
        assert dict(zip(series.names, series.values)) == dict(entries)

    def test_accepts_ranked_entries(self):
        series = rank([RankedEntry("x", 1.5), RankedEntry("y", 2.5)])
        assert series.names == ("y", "x")

    def test_empty(self):
        series = rank([])
        assert len(series) == 0
        assert series.names == ()


class TestRankRows:
    def test_from_single_facet_rows(self, app_rows):
        series = rank_rows(app_rows)
        assert series.names == ("search", "checkout", "cart", "login")
        assert series.values == (300, 120, 120, 45)

    def test_reversed_for_horizontal_bars(self, app_rows):
        series = rank_rows(app_rows, reverse=True)
        assert series.names == ("login", "cart", "checkout", "search")

    def test_extra_facets_are_ignored(self, region_rows):
        entries = ranking_entries(region_rows)
        assert entries == [RankedEntry("Jan", 10), RankedEntry("Jan", 30)]

    def test_null_values_are_left_out(self, make_row):
        series = rank_rows([make_row("a", y=None), make_row("b", y=2), make_row("c", y=5)])
        assert series.names == ("c", "b")

    def test_one_group_is_malformed(self):
        with pytest.raises(MalformedFacetShapeError):
            rank_rows([{"groups": [{"displayName": "Count"}], "series": [{"y": 1}]}])


class TestRankedSeries:
    def test_iterates_entries(self):
        series = RankedSeries(("a", "b"), (2, 1))
        assert list(series) == [RankedEntry("a", 2), RankedEntry("b", 1)]

    def test_length_mismatch(self):
        with pytest.raises(ValueError, match="same length"):
            RankedSeries(("a", "b"), (1,))

    def test_reversed(self):
        series = RankedSeries(("a", "b"), (2, 1)).reversed()
        assert series == RankedSeries(("b", "a"), (1, 2))

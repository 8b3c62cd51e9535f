"""Tests for detector label parsing and pip counting."""

from __future__ import annotations

import numpy as np
import pytest
from hypothesis import given
from hypothesis import strategies as st

from domino_chains.core.detections import (
    all_labels,
    count_pips,
    label_pip_total,
    parse_label,
    pip_histogram,
    tiles_from_labels,
)
from domino_chains.core.errors import InvalidInputError
from domino_chains.core.tiles import Tile, generate_full_set

# ---------------------------------------------------------------------------
# parse_label
# ---------------------------------------------------------------------------


class TestParseLabel:
    """Tests for single-label parsing."""

    def test_simple_label(self) -> None:
        assert parse_label("3x5") == Tile(3, 5)

    def test_reversed_label(self) -> None:
        assert parse_label("5x3") == Tile(3, 5)

    def test_double_twelve(self) -> None:
        assert parse_label("12x12") == Tile(12, 12)

    def test_whitespace_ignored(self) -> None:
        assert parse_label(" 3 x 10 ") == Tile(3, 10)

    @pytest.mark.parametrize("label", ["3", "3x5x7", "", "x"])
    def test_wrong_part_count(self, label: str) -> None:
        with pytest.raises(InvalidInputError):
            parse_label(label)

    @pytest.mark.parametrize("label", ["ax3", "3x", "3.5x1", "threexfive"])
    def test_non_integer_part(self, label: str) -> None:
        with pytest.raises(InvalidInputError, match="Malformed detection label"):
            parse_label(label)

    @pytest.mark.parametrize("label", ["13x1", "-1x3", "0x99"])
    def test_out_of_range(self, label: str) -> None:
        with pytest.raises(InvalidInputError, match="out of range"):
            parse_label(label)

    def test_non_string(self) -> None:
        with pytest.raises(InvalidInputError, match="must be a string"):
            parse_label(35)  # type: ignore[arg-type]

    @given(a=st.integers(0, 12), b=st.integers(0, 12))
    def test_hypothesis_label_round_trip(self, a: int, b: int) -> None:
        tile = Tile.of(a, b)
        assert parse_label(f"{a}x{b}") == tile
        assert parse_label(tile.label()) == tile


# ---------------------------------------------------------------------------
# tiles_from_labels
# ---------------------------------------------------------------------------


class TestTilesFromLabels:
    """Tests for whole-frame parsing."""

    def test_keeps_duplicates_and_order(self) -> None:
        assert tiles_from_labels(["1x2", "2x1", "0x0"]) == [
            Tile(1, 2),
            Tile(1, 2),
            Tile(0, 0),
        ]

    def test_empty(self) -> None:
        assert tiles_from_labels([]) == []

    def test_first_bad_label_raises(self) -> None:
        with pytest.raises(InvalidInputError, match="'7'"):
            tiles_from_labels(["1x2", "7", "bad"])


# ---------------------------------------------------------------------------
# Pip counting
# ---------------------------------------------------------------------------


class TestCounting:
    """Tests for pip totals and histograms."""

    def test_label_total(self) -> None:
        assert label_pip_total("3x5") == 8

    def test_label_total_any_part_count(self) -> None:
        assert label_pip_total("1x2x3") == 6

    def test_count_pips(self) -> None:
        assert count_pips(["3x5", "12x12", "0x0"]) == 32

    def test_count_pips_empty(self) -> None:
        assert count_pips([]) == 0

    def test_count_pips_bad_label(self) -> None:
        with pytest.raises(InvalidInputError):
            count_pips(["3x5", "?x1"])

    def test_histogram(self) -> None:
        hist = pip_histogram([Tile(0, 0), Tile(0, 5), Tile(5, 12)])
        expected = np.zeros(13, dtype=np.int64)
        expected[0] = 3
        expected[5] = 2
        expected[12] = 1
        np.testing.assert_array_equal(hist, expected)

    def test_histogram_empty(self) -> None:
        hist = pip_histogram([])
        assert hist.shape == (13,)
        assert hist.sum() == 0

    def test_histogram_full_set(self) -> None:
        hist = pip_histogram(sorted(generate_full_set()))
        np.testing.assert_array_equal(hist, np.full(13, 14))

    def test_histogram_matches_pip_total(self) -> None:
        tiles = tiles_from_labels(["3x5", "12x12", "1x9"])
        hist = pip_histogram(tiles)
        assert int((hist * np.arange(13)).sum()) == count_pips(["3x5", "12x12", "1x9"])


# ---------------------------------------------------------------------------
# all_labels
# ---------------------------------------------------------------------------


class TestAllLabels:
    """Tests for the detector class list."""

    def test_ninety_one_labels(self) -> None:
        labels = all_labels()
        assert len(labels) == 91
        assert len(set(labels)) == 91

    def test_known_labels_present(self) -> None:
        labels = set(all_labels())
        for label in ("0x0", "3x10", "10x12", "12x12"):
            assert label in labels

    def test_labels_are_canonical(self) -> None:
        for label in all_labels():
            assert parse_label(label).label() == label

"""
Tests for BinarySearch.

Tests cover search functionality on sorted data, edge cases, and comparison counts.
"""

import math
import random

import pytest

from src.algorithms.algorithm import InvalidArgumentError, SearchResult
from src.algorithms.binary_search import BinarySearch
from src.algorithms.linear_search import LinearSearch


class TestBinarySearch:
    """Test suite for BinarySearch algorithm."""

    def setup_method(self):
        """Set up test fixtures."""
        self.binary_search = BinarySearch()
        self.sorted_names = ["alice", "bob", "charlie", "diana", "zebra"]

    def test_search_found_first_element(self, ascending):
        result = self.binary_search.search_index(self.sorted_names, "alice", ascending)

        assert isinstance(result, SearchResult)
        assert result.found is True
        assert result.index == 0
        assert result.comparisons >= 1

    def test_search_found_middle_element(self, ascending):
        result = self.binary_search.search_index(self.sorted_names, "charlie", ascending)

        assert result.found is True
        assert result.index == 2
        assert result.comparisons == 1  # first midpoint

    def test_search_not_found(self, ascending):
        result = self.binary_search.search_index(self.sorted_names, "frank", ascending)

        assert result.found is False
        assert result.index == -1
        assert result.comparisons >= 1

    @pytest.mark.parametrize(
        "target,expected_found,expected_index",
        [
            ("alice", True, 0),
            ("bob", True, 1),
            ("charlie", True, 2),
            ("diana", True, 3),
            ("zebra", True, 4),
            ("aaron", False, -1),  # Before first
            ("zulu", False, -1),  # After last
            ("caroline", False, -1),  # Between existing
        ],
    )
    def test_search_various_targets(self, target, expected_found, expected_index, ascending):
        result = self.binary_search.search_index(self.sorted_names, target, ascending)

        assert result.found == expected_found
        assert result.index == expected_index

    def test_last_of_four_in_two_comparisons(self, ascending):
        result = self.binary_search.search_index([1, 3, 5, 8], 8, ascending)

        assert result.index == 3
        assert result.comparisons <= 2

    def test_search_efficiency_comparison_count(self, ascending):
        """Test that binary search uses logarithmic comparisons."""
        data = list(range(1000))

        for target in (0, 1, 499, 998, 999, -5, 1500):
            result = self.binary_search.search_index(data, target, ascending)
            assert result.comparisons <= math.floor(math.log2(len(data))) + 1

    def test_descending_data_with_descending_comparator(self, descending):
        result = self.binary_search.search_index([9, 7, 5, 3, 1], 3, descending)

        assert result.index == 3

    def test_empty_sequence(self, ascending):
        result = self.binary_search.search_index([], 1, ascending)

        assert result.found is False
        assert result.index == -1
        assert result.comparisons == 0

    def test_single_element(self, ascending):
        assert self.binary_search.search_index([4], 4, ascending).index == 0
        assert self.binary_search.search_index([4], 5, ascending).index == -1

    def test_duplicates_return_some_matching_index(self, ascending):
        data = [2, 7, 7, 7]

        result = self.binary_search.search_index(data, 7, ascending)

        assert result.found is True
        assert data[result.index] == 7

    @pytest.mark.parametrize("seed", range(5))
    def test_agrees_with_linear_search_on_sorted_data(self, seed, ascending):
        rng = random.Random(seed)
        data = sorted(rng.randint(0, 40) for _ in range(30))
        linear = LinearSearch()

        for target in range(-2, 43):
            expected = linear.search_index(data, target, ascending)
            result = self.binary_search.search_index(data, target, ascending)
            assert result.found == expected.found

    def test_labels(self):
        assert self.binary_search.get_algorithm_name() == "Binary Search"
        assert self.binary_search.get_time_complexity() == "O(log n)"
        assert self.binary_search.get_space_complexity() == "O(1) iterative"
        assert self.binary_search.requires_sorted_list() is True

    def test_invalid_arguments(self, ascending):
        with pytest.raises(InvalidArgumentError):
            self.binary_search.search_index(None, 1, ascending)
        with pytest.raises(InvalidArgumentError):
            self.binary_search.search_index([1], None, ascending)
        with pytest.raises(InvalidArgumentError):
            self.binary_search.search_index([1], 1, None)

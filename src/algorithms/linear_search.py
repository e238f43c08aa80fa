import time
from typing import Any, List, Optional, Sequence

from .algorithm import Comparator, SearchAlgorithm, SearchResult


class LinearSearch(SearchAlgorithm):
    """
    Linear Search Algorithm Implementation

    Scans the sequence from index 0 forward and stops at the first element
    that compares equal to the target. Works on unsorted data.

    Time Complexity: O(n) - worst case, best case O(1), average case O(n/2)
    Space Complexity: O(1) - constant extra space
    """

    def search_index(
        self,
        sequence: Optional[Sequence],
        target: Any,
        comparator: Optional[Comparator],
    ) -> SearchResult:
        """
        Search for the target using the SearchAlgorithm interface.

        Args:
            sequence: Sequence to scan
            target: Element to search for
            comparator: Total-order function returning <0, 0 or >0

        Returns:
            A SearchResult object containing the search outcome
        """
        self.validate_inputs(sequence, target, comparator)

        start_time = time.perf_counter()
        comparisons = 0

        for i in range(len(sequence)):
            comparisons += 1
            if comparator(sequence[i], target) == 0:
                end_time = time.perf_counter()
                return SearchResult(
                    found=True,
                    index=i,
                    comparisons=comparisons,
                    time_taken=end_time - start_time,
                )

        # Element not found
        end_time = time.perf_counter()

        return SearchResult(
            found=False,
            index=-1,
            comparisons=comparisons,
            time_taken=end_time - start_time,
        )

    def requires_sorted_list(self) -> bool:
        return False

    def get_algorithm_name(self) -> str:
        """
        Get the name of the algorithm.

        Returns:
            A string representing the algorithm name
        """
        return "Linear Search"

    def get_time_complexity(self) -> str:
        return "O(n)"

    def get_space_complexity(self) -> str:
        return "O(1)"

    def get_characteristics(self) -> List[str]:
        return [
            "+ Simple to understand and implement",
            "+ Works on unsorted lists",
            "+ No preprocessing required",
            "- Slow for large datasets (O(n))",
            "- Checks every element in worst case",
            "Use: Small/unsorted data, one-time searches",
        ]

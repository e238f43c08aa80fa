import time
from typing import Any, List, Optional, Sequence

from .algorithm import Comparator, SearchAlgorithm, SearchResult


class BinarySearch(SearchAlgorithm):
    """Iterative binary search on data sorted by the same comparator."""

    def search_index(
        self,
        sequence: Optional[Sequence],
        target: Any,
        comparator: Optional[Comparator],
    ) -> SearchResult:
        """Search for target using binary search."""
        self.validate_inputs(sequence, target, comparator)

        start_time = time.perf_counter()
        comparisons = 0

        left, right = 0, len(sequence) - 1
        result_index = -1

        while left <= right:
            # Upper midpoint
            mid = left + (right - left + 1) // 2
            comparisons += 1

            order = comparator(sequence[mid], target)

            if order == 0:
                result_index = mid
                break
            elif order < 0:
                left = mid + 1
            else:
                right = mid - 1

        end_time = time.perf_counter()
        time_taken = end_time - start_time

        return SearchResult(
            found=result_index != -1,
            index=result_index,
            comparisons=comparisons,
            time_taken=time_taken,
        )

    def requires_sorted_list(self) -> bool:
        return True

    def get_algorithm_name(self) -> str:
        return "Binary Search"

    def get_time_complexity(self) -> str:
        return "O(log n)"

    def get_space_complexity(self) -> str:
        return "O(1) iterative"

    def get_characteristics(self) -> List[str]:
        return [
            "+ Very fast (O(log n))",
            "+ Efficient for large datasets",
            "+ Eliminates half of data each step",
            "- Requires sorted list",
            "- More complex implementation",
            "Use: Large sorted data, frequent searches",
        ]

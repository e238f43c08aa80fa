import time
from typing import List, MutableSequence, Optional

from .algorithm import Comparator, SortAlgorithm, SortResult


class BubbleSort(SortAlgorithm):
    """
    Bubble Sort Algorithm Implementation

    Repeatedly steps through the sequence comparing adjacent elements and
    swapping them when they are out of order. A pass without any swap means
    the sequence is sorted and the remaining passes are skipped.

    Time Complexity: O(n^2) - average and worst case, best case O(n)
    Space Complexity: O(1) - sorts in place
    """

    def sort(
        self, sequence: Optional[MutableSequence], comparator: Optional[Comparator]
    ) -> SortResult:
        """
        Sort the sequence in place with adjacent swaps.

        Args:
            sequence: Sequence to sort
            comparator: Total-order function returning <0, 0 or >0

        Returns:
            A SortResult; ``additional_info["passes"]`` holds the passes run
        """
        self.validate_inputs(sequence, comparator)

        start_time = time.perf_counter()
        comparisons = 0
        swaps = 0
        passes = 0

        n = len(sequence)
        for i in range(n - 1):
            passes += 1
            swapped = False

            for j in range(n - i - 1):
                comparisons += 1
                if comparator(sequence[j], sequence[j + 1]) > 0:
                    sequence[j], sequence[j + 1] = sequence[j + 1], sequence[j]
                    swaps += 1
                    swapped = True

            if not swapped:
                break

        end_time = time.perf_counter()

        return SortResult(
            comparisons=comparisons,
            moves=swaps,
            time_taken=end_time - start_time,
            additional_info={"passes": passes},
        )

    def is_stable(self) -> bool:
        return True

    def get_algorithm_name(self) -> str:
        return "Bubble Sort"

    def get_time_complexity(self) -> str:
        return "O(n²) avg/worst, O(n) best"

    def get_space_complexity(self) -> str:
        return "O(1)"

    def get_characteristics(self) -> List[str]:
        return [
            "+ Simple to understand and implement",
            "+ Stable (maintains order of equal elements)",
            "+ In-place (O(1) space)",
            "- Slow for large datasets (O(n²))",
            "Use: Educational purposes, small datasets",
        ]

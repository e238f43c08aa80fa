import time
from typing import List, MutableSequence, Optional, Tuple

from .algorithm import Comparator, SortAlgorithm, SortResult


class MergeSort(SortAlgorithm):
    """
    Top-down Merge Sort.

    Splits at the midpoint, sorts both halves recursively and merges them
    through an auxiliary buffer holding the merged range. Ties are taken from
    the left half, which keeps the sort stable. Every element written back
    into the sequence counts as one move.

    Time Complexity: O(n log n) - all cases
    Space Complexity: O(n) - merge buffer
    """

    def sort(
        self, sequence: Optional[MutableSequence], comparator: Optional[Comparator]
    ) -> SortResult:
        """Sort the sequence in place using merge sort."""
        self.validate_inputs(sequence, comparator)

        start_time = time.perf_counter()
        comparisons, moves = 0, 0

        if len(sequence) > 1:
            comparisons, moves = self._merge_sort(
                sequence, 0, len(sequence) - 1, comparator
            )

        end_time = time.perf_counter()

        return SortResult(
            comparisons=comparisons,
            moves=moves,
            time_taken=end_time - start_time,
        )

    def _merge_sort(
        self, sequence: MutableSequence, left: int, right: int, comparator: Comparator
    ) -> Tuple[int, int]:
        if left >= right:
            return 0, 0

        mid = left + (right - left) // 2
        left_comparisons, left_moves = self._merge_sort(sequence, left, mid, comparator)
        right_comparisons, right_moves = self._merge_sort(
            sequence, mid + 1, right, comparator
        )
        comparisons, moves = self._merge(sequence, left, mid, right, comparator)

        return (
            left_comparisons + right_comparisons + comparisons,
            left_moves + right_moves + moves,
        )

    def _merge(
        self,
        sequence: MutableSequence,
        left: int,
        mid: int,
        right: int,
        comparator: Comparator,
    ) -> Tuple[int, int]:
        buffer = list(sequence[left : right + 1])
        left_end = mid - left
        right_end = right - left

        i, j, k = 0, left_end + 1, left
        comparisons = 0
        moves = 0

        while i <= left_end and j <= right_end:
            comparisons += 1
            if comparator(buffer[i], buffer[j]) <= 0:
                sequence[k] = buffer[i]
                i += 1
            else:
                sequence[k] = buffer[j]
                j += 1
            moves += 1
            k += 1

        while i <= left_end:
            sequence[k] = buffer[i]
            moves += 1
            i += 1
            k += 1

        while j <= right_end:
            sequence[k] = buffer[j]
            moves += 1
            j += 1
            k += 1

        return comparisons, moves

    def is_stable(self) -> bool:
        return True

    def get_algorithm_name(self) -> str:
        return "Merge Sort"

    def get_time_complexity(self) -> str:
        return "O(n log n) all cases"

    def get_space_complexity(self) -> str:
        return "O(n)"

    def get_characteristics(self) -> List[str]:
        return [
            "+ Guaranteed O(n log n) all cases",
            "+ Stable (maintains order of equal elements)",
            "+ Predictable performance",
            "- Requires O(n) extra space",
            "Use: When stability required, external sorting",
        ]

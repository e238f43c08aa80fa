import time
from typing import List, MutableSequence, Optional

from .algorithm import Comparator, SortAlgorithm, SortResult


class QuickSort(SortAlgorithm):
    """
    Quick Sort with median-of-three pivot selection and Lomuto partitioning.

    Not stable: partitioning may reorder comparator-equal elements.

    Time Complexity: O(n log n) average, O(n^2) worst case
    Space Complexity: O(log n) - recursion stack
    """

    def sort(
        self, sequence: Optional[MutableSequence], comparator: Optional[Comparator]
    ) -> SortResult:
        """Sort the sequence in place using quick sort."""
        self.validate_inputs(sequence, comparator)

        counters = _Counters()
        start_time = time.perf_counter()

        if len(sequence) > 1:
            self._quick_sort(sequence, 0, len(sequence) - 1, comparator, counters)

        end_time = time.perf_counter()

        return SortResult(
            comparisons=counters.comparisons,
            moves=counters.swaps,
            time_taken=end_time - start_time,
        )

    def _quick_sort(
        self,
        sequence: MutableSequence,
        low: int,
        high: int,
        comparator: Comparator,
        counters: "_Counters",
    ) -> None:
        # Recurse into the smaller side, loop over the larger one
        while low < high:
            pivot_index = self._partition(sequence, low, high, comparator, counters)

            if pivot_index - low < high - pivot_index:
                self._quick_sort(sequence, low, pivot_index - 1, comparator, counters)
                low = pivot_index + 1
            else:
                self._quick_sort(sequence, pivot_index + 1, high, comparator, counters)
                high = pivot_index - 1

    def _partition(
        self,
        sequence: MutableSequence,
        low: int,
        high: int,
        comparator: Comparator,
        counters: "_Counters",
    ) -> int:
        mid = low + (high - low) // 2

        # Median of first, middle and last ends up at the high position
        counters.comparisons += 1
        if comparator(sequence[mid], sequence[low]) < 0:
            counters.swap(sequence, low, mid)

        counters.comparisons += 1
        if comparator(sequence[high], sequence[low]) < 0:
            counters.swap(sequence, low, high)

        counters.comparisons += 1
        if comparator(sequence[mid], sequence[high]) < 0:
            counters.swap(sequence, mid, high)

        pivot = sequence[high]
        boundary = low - 1

        for j in range(low, high):
            counters.comparisons += 1
            if comparator(sequence[j], pivot) <= 0:
                boundary += 1
                counters.swap(sequence, boundary, j)

        counters.swap(sequence, boundary + 1, high)
        return boundary + 1

    def get_algorithm_name(self) -> str:
        return "Quick Sort"

    def get_time_complexity(self) -> str:
        return "O(n log n) avg, O(n²) worst"

    def get_space_complexity(self) -> str:
        return "O(log n)"

    def get_characteristics(self) -> List[str]:
        return [
            "+ Fast average performance (O(n log n))",
            "+ In-place with minimal extra memory",
            "+ Good cache performance",
            "- Not stable",
            "- Worst case O(n²) (rare with good pivot)",
            "Use: General purpose, large datasets",
        ]


class _Counters:
    """Per-call tallies so the strategy itself stays stateless."""

    __slots__ = ("comparisons", "swaps")

    def __init__(self):
        self.comparisons = 0
        self.swaps = 0

    def swap(self, sequence: MutableSequence, i: int, j: int) -> None:
        if i == j:
            return
        sequence[i], sequence[j] = sequence[j], sequence[i]
        self.swaps += 1

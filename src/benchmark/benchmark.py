import logging
import os
import statistics
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional, Sequence, Tuple, TypeVar, Union

import psutil

from ..algorithms.algorithm import (
    Comparator,
    InvalidArgumentError,
    SearchAlgorithm,
    SearchResult,
    SortAlgorithm,
    SortResult,
)

logger = logging.getLogger(__name__)

# Dataset size bands used by the recommendations
SMALL_SORT_DATASET = 50
SMALL_SEARCH_DATASET = 100
LARGE_DATASET = 1000

SORT_HEADERS = [
    "Algorithm",
    "Time (ms)",
    "Comparisons",
    "Swaps/Moves",
    "Time Complexity",
    "Space Complexity",
]
SEARCH_HEADERS = [
    "Algorithm",
    "Found",
    "Index",
    "Time (ms)",
    "Comparisons",
    "Requires Sorted",
    "Time Complexity",
]

R = TypeVar("R", SortResult, SearchResult)


@dataclass
class BenchmarkConfig:
    """Configuration for a comparison run"""

    warmup_runs: int = 0
    measure_runs: int = 1
    measure_memory: bool = False
    plot_name: str = "algorithm-comparison"

    def __post_init__(self):
        if self.warmup_runs < 0:
            raise ValueError("warmup_runs cannot be negative")
        if self.measure_runs < 1:
            raise ValueError("measure_runs must be at least 1")


@dataclass
class BenchmarkResult:
    """
    Outcome of one strategy in one comparison run.

    Counters come from the last measured run (they are deterministic for a
    given input); ``time_taken`` is the mean over the measured runs, in
    seconds. ``moves`` is None for search strategies, ``found``/``index``/
    ``requires_sorted`` are None for sort strategies.
    """

    algorithm_name: str
    time_complexity: str
    space_complexity: str
    comparisons: int
    time_taken: float
    moves: Optional[int] = None
    std_dev: float = 0.0
    measurements: List[float] = field(default_factory=list)
    found: Optional[bool] = None
    index: Optional[int] = None
    requires_sorted: Optional[bool] = None
    memory_usage: Optional[float] = None

    @property
    def time_ms(self) -> float:
        return self.time_taken * 1000

    @property
    def is_search(self) -> bool:
        return self.found is not None


@dataclass
class SummaryTable:
    headers: List[str]
    rows: List[List[Union[str, int, float]]]


@dataclass
class StrategyDetail:
    """Per-strategy breakdown with the highlights it earned."""

    result: BenchmarkResult
    is_fastest: bool = False
    has_fewest_comparisons: bool = False
    has_fewest_moves: bool = False


@dataclass
class Recommendation:
    headline: str
    points: List[str]
    winner: Optional[str] = None


@dataclass
class ComparisonReport:
    """Everything the console layer needs to render one comparison."""

    kind: str
    data_size: int
    results: List[BenchmarkResult]
    summary: SummaryTable
    details: List[StrategyDetail]
    recommendation: Recommendation
    is_sorted: Optional[bool] = None


class BenchmarkRunner:
    """Runs several strategies over the same data and collects their results"""

    def __init__(self, config: Optional[BenchmarkConfig] = None):
        self.config = config or BenchmarkConfig()

    def do_bench(
        self, fn: Callable[[], R]
    ) -> Tuple[R, float, float, List[float]]:
        """
        Run ``fn`` with warmups and measured repetitions.

        Args:
            fn: Zero-argument callable returning a SortResult or SearchResult

        Returns:
            (last result, mean seconds, std dev seconds, all measurements)
        """
        for _ in range(self.config.warmup_runs):
            fn()

        times: List[float] = []
        result = None
        for _ in range(self.config.measure_runs):
            result = fn()
            times.append(result.time_taken)

        mean_time = statistics.mean(times)
        std_dev = statistics.stdev(times) if len(times) > 1 else 0.0

        return result, mean_time, std_dev, times

    def compare_sort_algorithms(
        self,
        data: Sequence[Any],
        comparator: Comparator,
        strategies: Sequence[SortAlgorithm],
    ) -> List[BenchmarkResult]:
        """
        Sort an independent copy of ``data`` with every strategy.

        The caller's data is never mutated; each run (warmups included)
        works on a fresh copy.
        """
        self._validate(data, comparator, strategies)

        results: List[BenchmarkResult] = []
        for strategy in strategies:
            logger.debug(
                "Running %s on %d elements", strategy.get_algorithm_name(), len(data)
            )

            sort_result, mean_time, std_dev, times = self.do_bench(
                lambda: strategy.sort(list(data), comparator)
            )

            result = BenchmarkResult(
                algorithm_name=strategy.get_algorithm_name(),
                time_complexity=strategy.get_time_complexity(),
                space_complexity=strategy.get_space_complexity(),
                comparisons=sort_result.comparisons,
                moves=sort_result.moves,
                time_taken=mean_time,
                std_dev=std_dev,
                measurements=times,
                memory_usage=self._memory_usage(),
            )
            logger.debug(
                "%s: %d comparisons, %d moves, %.4f ms",
                result.algorithm_name,
                result.comparisons,
                result.moves,
                result.time_ms,
            )
            results.append(result)

        return results

    def compare_search_algorithms(
        self,
        data: Sequence[Any],
        target: Any,
        comparator: Comparator,
        strategies: Sequence[SearchAlgorithm],
    ) -> List[BenchmarkResult]:
        """Search an independent copy of ``data`` for ``target`` with every strategy."""
        self._validate(data, comparator, strategies)
        if target is None:
            raise InvalidArgumentError("Target cannot be None")

        results: List[BenchmarkResult] = []
        for strategy in strategies:
            logger.debug(
                "Running %s on %d elements", strategy.get_algorithm_name(), len(data)
            )

            search_result, mean_time, std_dev, times = self.do_bench(
                lambda: strategy.search_index(list(data), target, comparator)
            )

            result = BenchmarkResult(
                algorithm_name=strategy.get_algorithm_name(),
                time_complexity=strategy.get_time_complexity(),
                space_complexity=strategy.get_space_complexity(),
                comparisons=search_result.comparisons,
                time_taken=mean_time,
                std_dev=std_dev,
                measurements=times,
                found=search_result.found,
                index=search_result.index,
                requires_sorted=strategy.requires_sorted_list(),
                memory_usage=self._memory_usage(),
            )
            logger.debug(
                "%s: found=%s index=%d, %d comparisons, %.4f ms",
                result.algorithm_name,
                result.found,
                result.index,
                result.comparisons,
                result.time_ms,
            )
            results.append(result)

        return results

    def run_sort_benchmark(
        self,
        data: Sequence[Any],
        comparator: Comparator,
        strategies: Sequence[SortAlgorithm],
    ) -> ComparisonReport:
        """Compare sort strategies and build the full report."""
        results = self.compare_sort_algorithms(data, comparator, strategies)
        return ComparisonReport(
            kind="sort",
            data_size=len(data),
            results=results,
            summary=build_summary_table(results),
            details=build_detailed_comparison(results),
            recommendation=recommend_sort(results, len(data)),
        )

    def run_search_benchmark(
        self,
        data: Sequence[Any],
        target: Any,
        comparator: Comparator,
        strategies: Sequence[SearchAlgorithm],
        is_sorted: bool = True,
    ) -> ComparisonReport:
        """Compare search strategies and build the full report."""
        results = self.compare_search_algorithms(data, target, comparator, strategies)
        return ComparisonReport(
            kind="search",
            data_size=len(data),
            results=results,
            summary=build_summary_table(results),
            details=build_detailed_comparison(results),
            recommendation=recommend_search(results, len(data), is_sorted),
            is_sorted=is_sorted,
        )

    def _validate(self, data, comparator, strategies) -> None:
        if data is None:
            raise InvalidArgumentError("Data cannot be None")
        if comparator is None or not callable(comparator):
            raise InvalidArgumentError("Comparator must be a callable")
        if not strategies:
            raise InvalidArgumentError("At least one strategy is required")

    def _memory_usage(self) -> Optional[float]:
        """Resident set size of this process in MB, if measuring memory"""
        if not self.config.measure_memory:
            return None
        process = psutil.Process(os.getpid())
        return process.memory_info().rss / 1024 / 1024


def build_summary_table(results: Sequence[BenchmarkResult]) -> SummaryTable:
    """All results side by side, as plain strings and numbers."""
    if results and results[0].is_search:
        rows = [
            [
                r.algorithm_name,
                "Yes" if r.found else "No",
                r.index if r.found else "N/A",
                r.time_ms,
                r.comparisons,
                "Yes" if r.requires_sorted else "No",
                r.time_complexity,
            ]
            for r in results
        ]
        return SummaryTable(headers=list(SEARCH_HEADERS), rows=rows)

    rows = [
        [
            r.algorithm_name,
            r.time_ms,
            r.comparisons,
            r.moves,
            r.time_complexity,
            r.space_complexity,
        ]
        for r in results
    ]
    return SummaryTable(headers=list(SORT_HEADERS), rows=rows)


def build_detailed_comparison(
    results: Sequence[BenchmarkResult],
) -> List[StrategyDetail]:
    """
    Flag the fastest strategy and the one with fewest comparisons.

    Sort results also get a fewest-moves flag. For search only strategies
    that found the target are eligible. Ties go to the first strategy.
    """
    if not results:
        return []

    eligible = [r for r in results if r.found] if results[0].is_search else list(results)

    fastest = min(eligible, key=lambda r: r.time_taken) if eligible else None
    fewest_comparisons = (
        min(eligible, key=lambda r: r.comparisons) if eligible else None
    )
    fewest_moves = None
    if eligible and not results[0].is_search:
        fewest_moves = min(eligible, key=lambda r: r.moves)

    return [
        StrategyDetail(
            result=r,
            is_fastest=r is fastest,
            has_fewest_comparisons=r is fewest_comparisons,
            has_fewest_moves=r is fewest_moves,
        )
        for r in results
    ]


def recommend_sort(
    results: Sequence[BenchmarkResult], data_size: int
) -> Recommendation:
    if data_size < SMALL_SORT_DATASET:
        headline = f"For small datasets (< {SMALL_SORT_DATASET} elements):"
        points = [
            "Bubble Sort is acceptable due to simplicity",
            "Quick Sort and Merge Sort may have overhead",
        ]
    elif data_size < LARGE_DATASET:
        headline = (
            f"For medium datasets ({SMALL_SORT_DATASET}-{LARGE_DATASET - 1} elements):"
        )
        points = [
            "Quick Sort is recommended for best average performance",
            "Merge Sort if stable sorting is required",
        ]
    else:
        headline = f"For large datasets (>= {LARGE_DATASET} elements):"
        points = [
            "Quick Sort for fastest average case",
            "Merge Sort for guaranteed O(n log n) performance",
            "Avoid Bubble Sort - O(n²) is too slow",
        ]

    winner = None
    if results:
        fastest = min(results, key=lambda r: r.time_taken)
        winner = f"Overall Winner: {fastest.algorithm_name} ({fastest.time_ms:.4f} ms)"

    return Recommendation(headline=headline, points=points, winner=winner)


def recommend_search(
    results: Sequence[BenchmarkResult], data_size: int, is_sorted: bool
) -> Recommendation:
    if not is_sorted:
        headline = "Data is NOT sorted:"
        points = [
            "You MUST use Linear Search",
            "Binary Search requires sorted data",
            "Consider sorting if you'll search frequently",
        ]
    elif data_size < SMALL_SEARCH_DATASET:
        headline = f"For small sorted datasets (< {SMALL_SEARCH_DATASET} elements):"
        points = [
            "Linear Search is acceptable due to small size",
            "Binary Search may have overhead for very small data",
        ]
    elif data_size < LARGE_DATASET:
        headline = (
            f"For medium sorted datasets "
            f"({SMALL_SEARCH_DATASET}-{LARGE_DATASET - 1} elements):"
        )
        points = [
            "Binary Search is recommended (much faster)",
            "O(log n) is significantly better than O(n)",
        ]
    else:
        headline = f"For large sorted datasets (>= {LARGE_DATASET} elements):"
        points = [
            "Binary Search is strongly recommended",
            "O(log n) is exponentially faster than O(n)",
            f"Example: {data_size} elements -> Binary needs "
            f"~{data_size.bit_length()} comparisons vs Linear's {data_size // 2}",
        ]

    winner = None
    found = [r for r in results if r.found]
    if found:
        best = min(found, key=lambda r: r.comparisons)
        winner = f"Most Efficient: {best.algorithm_name} ({best.comparisons} comparisons)"

    return Recommendation(headline=headline, points=points, winner=winner)

"""
Benchmarking module for sort and search strategies.

Runs several interchangeable strategies over the same data, each on its own
copy, and builds comparison reports (summary table, detailed breakdown and a
size-based recommendation) as plain data.
"""

from .benchmark import (
    BenchmarkConfig,
    BenchmarkResult,
    BenchmarkRunner,
    ComparisonReport,
    Recommendation,
    StrategyDetail,
    SummaryTable,
    build_detailed_comparison,
    build_summary_table,
    recommend_search,
    recommend_sort,
)

__all__ = [
    "BenchmarkConfig",
    "BenchmarkResult",
    "BenchmarkRunner",
    "ComparisonReport",
    "Recommendation",
    "StrategyDetail",
    "SummaryTable",
    "build_detailed_comparison",
    "build_summary_table",
    "recommend_search",
    "recommend_sort",
]

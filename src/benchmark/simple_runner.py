"""
Simple benchmark runner for the sort and search strategies.

Usage examples:
    python -m src.benchmark.simple_runner
    python simple_runner.py --size 2000 --sort-by name --search-id S042 --no-plots
    python simple_runner.py --show-records --find-name smith --no-plots
"""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent.parent
sys.path.append(str(project_root))

# Import after path setup
from records.comparators import STUDENT_FIELDS  # noqa: E402
from records.generate import load_sample_students, seed_students  # noqa: E402
from records.service import StudentService  # noqa: E402
from records.student import StudentRank  # noqa: E402
from src.algorithms.binary_search import BinarySearch  # noqa: E402
from src.algorithms.bubble_sort import BubbleSort  # noqa: E402
from src.algorithms.linear_search import LinearSearch  # noqa: E402
from src.algorithms.merge_sort import MergeSort  # noqa: E402
from src.algorithms.quick_sort import QuickSort  # noqa: E402
from src.benchmark import BenchmarkConfig, BenchmarkRunner  # noqa: E402
from src.benchmark.console import (  # noqa: E402
    format_ranking_table,
    format_statistics,
    format_students,
    format_students_by_rank,
    print_header,
    print_report,
)

SORT_ALGORITHMS = {
    "bubble_sort": BubbleSort,
    "quick_sort": QuickSort,
    "merge_sort": MergeSort,
}
SEARCH_ALGORITHMS = {
    "linear_search": LinearSearch,
    "binary_search": BinarySearch,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Benchmark sort and search algorithms on student records"
    )
    parser.add_argument(
        "--size",
        type=int,
        default=0,
        help="Number of generated students (0 loads the fixed sample set)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Generator seed")
    parser.add_argument(
        "--sort-algorithms",
        default="bubble_sort,quick_sort,merge_sort",
        help="Comma-separated list of sort algorithms to compare",
    )
    parser.add_argument(
        "--search-algorithms",
        default="linear_search,binary_search",
        help="Comma-separated list of search algorithms to compare",
    )
    parser.add_argument(
        "--sort-by", default="mark", choices=STUDENT_FIELDS, help="Field to sort on"
    )
    parser.add_argument(
        "--descending", action="store_true", help="Sort in descending order"
    )
    parser.add_argument(
        "--search-id", default="S001", help="Student id to search for"
    )
    parser.add_argument(
        "--unsorted",
        action="store_true",
        help="Search the records in insertion order instead of sorted by id",
    )
    parser.add_argument(
        "--show-records",
        action="store_true",
        help="Print the loaded records, their statistics and the rank bands",
    )
    parser.add_argument(
        "--find-name", default=None, help="Print students whose name contains this text"
    )
    parser.add_argument("--warmup-runs", type=int, default=0)
    parser.add_argument("--measure-runs", type=int, default=1)
    parser.add_argument(
        "--measure-memory", action="store_true", help="Record process memory usage"
    )
    parser.add_argument(
        "--output-prefix", default="benchmark", help="Prefix for output plot files"
    )
    parser.add_argument("--no-plots", action="store_true", help="Skip generating plots")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def parse_algorithms(names: str, registry: dict) -> list:
    algorithms = []
    for name in (n.strip() for n in names.split(",")):
        if name not in registry:
            raise ValueError(
                f"Unknown algorithm: {name} (expected one of {', '.join(registry)})"
            )
        algorithms.append(registry[name]())
    return algorithms


def print_records(service: StudentService) -> None:
    """Print all records, the records grouped by rank, statistics and rank bands."""
    students = service.find_all_students()

    print_header("STUDENT RECORDS")
    print(format_students(students))

    print_header("STUDENTS BY RANK")
    groups = {rank: service.find_students_by_rank(rank) for rank in StudentRank}
    print(format_students_by_rank(groups))

    print_header("STATISTICS")
    print(format_statistics(service))

    print_header("RANKING TABLE")
    print(format_ranking_table())


def main(argv=None):
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        config = BenchmarkConfig(
            warmup_runs=args.warmup_runs,
            measure_runs=args.measure_runs,
            measure_memory=args.measure_memory,
            plot_name=args.output_prefix,
        )
        service = StudentService(runner=BenchmarkRunner(config))

        if args.size > 0:
            added = seed_students(service, args.size, seed=args.seed)
            print(f"Generated {added:,} students")
        else:
            added = load_sample_students(service)
            print(f"Sample data loaded: {added} students added")

        if args.show_records:
            print_records(service)
        if args.find_name is not None:
            print_header(f"STUDENTS MATCHING '{args.find_name.strip()}'")
            print(format_students(service.find_students_by_name(args.find_name)))

        sort_strategies = parse_algorithms(args.sort_algorithms, SORT_ALGORITHMS)
        search_strategies = parse_algorithms(args.search_algorithms, SEARCH_ALGORITHMS)

        print("\nRunning sorting algorithms...")
        sort_report = service.compare_sorting(
            args.sort_by, not args.descending, sort_strategies
        )
        print_report(sort_report, sort_strategies)

        print("\nRunning searching algorithms...")
        if service.find_student_by_id(args.search_id) is None:
            print(f"Student {args.search_id} not found, searching anyway")
        search_report = service.compare_searching(
            args.search_id, search_strategies, is_sorted=not args.unsorted
        )
        print_report(search_report, search_strategies)

        if not args.no_plots:
            from src.benchmark.plots import plot_comparison

            plot_comparison(sort_report, f"{config.plot_name}-sort", show_plots=False)
            plot_comparison(
                search_report, f"{config.plot_name}-search", show_plots=False
            )
            print(f"\nBenchmark completed! Plots saved as {config.plot_name}-*.png")

    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)
    except Exception as e:
        print(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()

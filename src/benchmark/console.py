"""
Console rendering of comparison reports and student records.

The benchmark engine returns plain data; everything printed to the terminal
lives here.
"""

from typing import List, Mapping, Sequence, Union

from records.student import Student, StudentRank

from ..algorithms.algorithm import Algorithm
from .benchmark import ComparisonReport, SummaryTable

Cell = Union[str, int, float]

NO_STUDENTS = "No students to display."


def format_cell(value: Cell) -> str:
    if isinstance(value, float):
        return f"{value:.4f}"
    return str(value)


def format_table(table: SummaryTable) -> str:
    """Render a summary table with columns sized to their longest cell."""
    cells = [[format_cell(c) for c in row] for row in table.rows]
    widths = [len(h) for h in table.headers]
    for row in cells:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(cell))

    rule = "+" + "+".join("-" * (w + 2) for w in widths) + "+"
    lines = [rule, _format_row(table.headers, widths), rule]
    lines.extend(_format_row(row, widths) for row in cells)
    lines.append(rule)
    return "\n".join(lines)


def _format_row(row: Sequence[str], widths: List[int]) -> str:
    return "| " + " | ".join(f"{c:<{w}}" for c, w in zip(row, widths)) + " |"


def format_students(students: Sequence[Student]) -> str:
    """One row per student: id, name, mark and rank."""
    if not students:
        return NO_STUDENTS
    rows = [[s.id, s.name, f"{s.mark:.1f}", str(s.rank)] for s in students]
    return format_table(SummaryTable(headers=["ID", "Name", "Mark", "Rank"], rows=rows))


def format_students_by_rank(groups: Mapping[StudentRank, Sequence[Student]]) -> str:
    """A table per rank that has students, Fail first."""
    if not any(groups.values()):
        return NO_STUDENTS

    sections: List[str] = []
    for rank in StudentRank:
        members = groups.get(rank)
        if not members:
            continue
        rows = [[s.id, s.name, f"{s.mark:.1f}"] for s in members]
        sections.append(f"{rank} ({len(members)} students):")
        sections.append(
            format_table(SummaryTable(headers=["ID", "Name", "Mark"], rows=rows))
        )
    return "\n".join(sections)


def format_ranking_table() -> str:
    """The mark band of every rank."""
    rows = [[rank.mark_range, str(rank)] for rank in StudentRank]
    return format_table(SummaryTable(headers=["Mark Range", "Rank"], rows=rows))


def format_statistics(service) -> str:
    """
    Totals, mark extremes and per-rank counts of a StudentService.

    Marks are shown with one decimal.
    """
    if service.is_empty():
        return "No students to display statistics."

    rows: List[List[Cell]] = [
        ["Total Students", service.size()],
        ["Average Mark", f"{service.calculate_average_mark():.1f}"],
        ["Highest Mark", f"{service.get_highest_mark():.1f}"],
        ["Lowest Mark", f"{service.get_lowest_mark():.1f}"],
    ]
    rows.extend(
        [str(rank), count] for rank, count in service.rank_distribution().items()
    )
    return format_table(SummaryTable(headers=["Statistic", "Value"], rows=rows))


def format_details(report: ComparisonReport) -> str:
    lines: List[str] = []
    for detail in report.details:
        r = detail.result
        lines.append(r.algorithm_name)
        lines.append("-" * 50)

        if r.is_search:
            status = f"FOUND at index {r.index}" if r.found else "NOT FOUND"
            lines.append(f"  Status:            {status}")

        time_str = f"{r.time_ms:.4f} ms"
        if detail.is_fastest:
            time_str += " <- FASTEST"
        lines.append(f"  Execution Time:    {time_str}")

        comp_str = str(r.comparisons)
        if detail.has_fewest_comparisons:
            comp_str += " <- FEWEST COMPARISONS"
        lines.append(f"  Comparisons:       {comp_str}")

        if r.is_search:
            lines.append(
                f"  Requires Sorted:   {'Yes' if r.requires_sorted else 'No'}"
            )
        else:
            move_str = str(r.moves)
            if detail.has_fewest_moves:
                move_str += " <- FEWEST SWAPS"
            lines.append(f"  Swaps/Moves:       {move_str}")

        lines.append(f"  Time Complexity:   {r.time_complexity}")
        lines.append(f"  Space Complexity:  {r.space_complexity}")
        if r.memory_usage is not None:
            lines.append(f"  Memory (MB):       {r.memory_usage:.2f}")
        lines.append("")
    return "\n".join(lines)


def format_recommendation(report: ComparisonReport) -> str:
    recommendation = report.recommendation
    lines = [recommendation.headline]
    lines.extend(f"  * {point}" for point in recommendation.points)
    if recommendation.winner:
        lines.append("")
        lines.append(recommendation.winner)
    return "\n".join(lines)


def format_characteristics(strategies: Sequence[Algorithm]) -> str:
    lines: List[str] = []
    for strategy in strategies:
        lines.append(f"{strategy.get_algorithm_name()}:")
        lines.extend(f"  {line}" for line in strategy.get_characteristics())
        lines.append("")
    return "\n".join(lines)


def print_header(title: str) -> None:
    print(f"\n{title}")
    print("=" * 80)


def print_report(report: ComparisonReport, strategies: Sequence[Algorithm] = ()) -> None:
    """Print characteristics, summary, details and recommendation."""
    kind = "SORTING" if report.kind == "sort" else "SEARCHING"

    print_header(f"{kind} ALGORITHM BENCHMARK")
    print(f"Dataset size: {report.data_size} elements")
    if report.is_sorted is not None:
        print(f"Data sorted: {'Yes' if report.is_sorted else 'No'}")

    if strategies:
        print_header("ALGORITHM CHARACTERISTICS")
        print(format_characteristics(strategies))

    print_header(f"{kind} ALGORITHM COMPARISON")
    print(format_table(report.summary))

    print_header("DETAILED COMPARISON")
    print(format_details(report))

    print_header("RECOMMENDATION")
    print(format_recommendation(report))

"""
Tests for the command line benchmark runner.
"""

import matplotlib

matplotlib.use("Agg")

import pytest  # noqa: E402

from src.algorithms.bubble_sort import BubbleSort  # noqa: E402
from src.benchmark.simple_runner import (  # noqa: E402
    SORT_ALGORITHMS,
    build_parser,
    main,
    parse_algorithms,
)


def test_parser_defaults():
    args = build_parser().parse_args([])

    assert args.size == 0
    assert args.sort_by == "mark"
    assert args.descending is False
    assert args.search_id == "S001"
    assert args.unsorted is False
    assert args.no_plots is False


def test_parser_rejects_unknown_field():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["--sort-by", "age"])


def test_parse_algorithms():
    strategies = parse_algorithms("bubble_sort, merge_sort", SORT_ALGORITHMS)

    assert isinstance(strategies[0], BubbleSort)
    assert [s.get_algorithm_name() for s in strategies] == ["Bubble Sort", "Merge Sort"]


def test_parse_algorithms_unknown():
    with pytest.raises(ValueError, match="Unknown algorithm: heap_sort"):
        parse_algorithms("heap_sort", SORT_ALGORITHMS)


def test_main_with_sample_data(capsys):
    main(["--no-plots"])

    out = capsys.readouterr().out
    assert "Sample data loaded: 15 students added" in out
    assert "SORTING ALGORITHM BENCHMARK" in out
    assert "SEARCHING ALGORITHM BENCHMARK" in out
    assert "Overall Winner:" in out
    assert "Most Efficient:" in out


def test_main_with_generated_data(capsys):
    main(["--size", "60", "--seed", "11", "--sort-by", "name", "--no-plots"])

    out = capsys.readouterr().out
    assert "Generated 60 students" in out
    assert "For medium datasets" in out
    assert "Dataset size: 60 elements" in out


def test_main_unsorted_search(capsys):
    main(["--unsorted", "--search-algorithms", "linear_search", "--no-plots"])

    out = capsys.readouterr().out
    assert "Data sorted: No" in out
    assert "You MUST use Linear Search" in out


def test_main_unknown_search_id(capsys):
    main(["--search-id", "S999", "--no-plots"])

    out = capsys.readouterr().out
    assert "Student S999 not found, searching anyway" in out
    assert "NOT FOUND" in out


def test_main_unknown_algorithm_exits(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["--sort-algorithms", "heap_sort", "--no-plots"])

    assert exc_info.value.code == 1
    assert "Error: Unknown algorithm" in capsys.readouterr().out


def test_main_writes_plots(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)

    main(["--output-prefix", "run"])

    assert (tmp_path / "run-sort.png").exists()
    assert (tmp_path / "run-search.png").exists()
    assert "Plots saved as run-*.png" in capsys.readouterr().out


def test_parser_record_flags():
    args = build_parser().parse_args(["--show-records", "--find-name", "smith"])

    assert args.show_records is True
    assert args.find_name == "smith"


def test_main_show_records(capsys):
    main(["--show-records", "--no-plots"])

    out = capsys.readouterr().out
    for section in ("STUDENT RECORDS", "STUDENTS BY RANK", "STATISTICS", "RANKING TABLE"):
        assert section in out
    assert "Ian Malcolm" in out
    assert "Fail (1 students):" in out
    assert "Total Students" in out
    assert "[9.0 - 10.0]" in out
    # Records come before the benchmarks
    assert out.index("STUDENT RECORDS") < out.index("SORTING ALGORITHM BENCHMARK")


def test_main_without_show_records(capsys):
    main(["--no-plots"])

    out = capsys.readouterr().out
    assert "STUDENT RECORDS" not in out
    assert "RANKING TABLE" not in out


def test_main_find_name(capsys):
    main(["--find-name", "smith", "--no-plots"])

    out = capsys.readouterr().out
    assert "STUDENTS MATCHING 'smith'" in out
    assert "Bob Smith" in out


def test_main_find_name_without_match(capsys):
    main(["--find-name", "zzz", "--no-plots"])

    assert "No students to display." in capsys.readouterr().out


def test_main_blank_name_query_exits(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["--find-name", "  ", "--no-plots"])

    assert exc_info.value.code == 1
    assert "Error: Name query cannot be None or empty" in capsys.readouterr().out

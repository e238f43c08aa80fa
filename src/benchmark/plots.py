from typing import Callable, Optional

import matplotlib.pyplot as plt

from .benchmark import BenchmarkResult, ComparisonReport

COLORS = ["blue", "green", "red", "orange", "purple", "brown"]


def plot_comparison(
    report: ComparisonReport,
    plot_name: str = "algorithm-comparison",
    show_plots: bool = True,
    save_plot: bool = True,
) -> Optional[str]:
    """
    Draw time and comparison bars for one comparison report.

    Returns:
        The saved file name, or None when ``save_plot`` is False
    """
    fig, axes = plt.subplots(1, 2, figsize=(12, 6))

    _bar_panel(
        axes[0],
        report,
        "Time (ms)",
        lambda r: r.time_ms,
        lambda r: r.std_dev * 1000,
    )
    _bar_panel(axes[1], report, "Comparisons", lambda r: r.comparisons)

    title = "Sorting" if report.kind == "sort" else "Searching"
    fig.suptitle(f"{plot_name} - {title} (N={report.data_size:,})")
    fig.tight_layout()

    filename = None
    if save_plot:
        filename = f"{plot_name}.png"
        fig.savefig(filename, dpi=300, bbox_inches="tight")

    if show_plots:
        plt.show()
    else:
        plt.close(fig)

    return filename


def _bar_panel(
    ax,
    report: ComparisonReport,
    ylabel: str,
    value_fn: Callable[[BenchmarkResult], float],
    error_fn: Optional[Callable[[BenchmarkResult], float]] = None,
) -> None:
    names = [r.algorithm_name for r in report.results]
    values = [value_fn(r) for r in report.results]
    errors = [error_fn(r) for r in report.results] if error_fn else None
    colors = [COLORS[i % len(COLORS)] for i in range(len(names))]

    ax.bar(names, values, yerr=errors, color=colors, capsize=5)
    ax.set_ylabel(ylabel)
    ax.set_title(ylabel)
    ax.grid(True, axis="y", alpha=0.3)

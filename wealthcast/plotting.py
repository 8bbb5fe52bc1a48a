"""
Plotting utilities for WealthCast projections.

Purpose
-------
Rendering helpers for the presentation side: the engine itself never draws.
Both functions take finished results, so they can be called from the CLI,
a notebook, or a web backend that saves PNGs.

Functions
---------
- plot_trajectory(result): 2 panels
    * Net worth, investments, debt (and real net worth when inflation > 0)
    * Annual income, living expenses and net cash flow
- plot_cases(results): expected trajectory with an optimistic/pessimistic band

matplotlib is imported lazily so that importing ``wealthcast`` stays cheap.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Mapping, Optional

import numpy as np

from .constants import (
    DEFAULT_ALPHA_BANDS,
    DEFAULT_FIGSIZE,
    DEFAULT_FIGSIZE_WIDE,
    DEFAULT_LINEWIDTH,
    DEFAULT_LINEWIDTH_THICK,
)

if TYPE_CHECKING:
    from .projection import ProjectionResult

__all__ = ["plot_trajectory", "plot_cases"]


def plot_trajectory(
    result: ProjectionResult,
    *,
    figsize: Optional[tuple] = None,
    title: Optional[str] = None,
    save_path: Optional[str] = None,
    return_fig_ax: bool = False,
):
    """
    Plot a single projection.

    Parameters
    ----------
    result : ProjectionResult
        Output of ``project`` / ``run_projection``.
    figsize : tuple, optional
        Defaults to ``DEFAULT_FIGSIZE_WIDE``.
    title : str, optional
        Figure title.
    save_path : str, optional
        If given, the figure is saved there (PNG at 150 dpi).
    return_fig_ax : bool, default False
        If True, returns (fig, axes) for customization.

    Returns
    -------
    None or (fig, axes)
    """
    from matplotlib import pyplot as plt
    from matplotlib.ticker import FuncFormatter
    from .utils import millions_formatter

    if not result.snapshots:
        raise ValueError("Cannot plot an empty trajectory (horizon == 0).")

    frame = result.to_frame()
    years = frame.index.to_numpy()

    fig, axes = plt.subplots(2, 1, figsize=figsize or DEFAULT_FIGSIZE_WIDE, sharex=True)
    ax_balance, ax_flow = axes

    # ========== Panel 1: Balances ==========
    ax_balance.plot(years, frame["net_worth"], label="Net worth",
                    linewidth=DEFAULT_LINEWIDTH_THICK, color="#0f766e")
    ax_balance.plot(years, frame["investment_balance"], label="Investments",
                    linewidth=DEFAULT_LINEWIDTH, color="#2563eb")
    if result.profile.current_debt > 0:
        ax_balance.plot(years, -frame["debt_balance"], label="Debt",
                        linewidth=DEFAULT_LINEWIDTH, color="#dc2626")
    if result.profile.inflation_rate > 0:
        ax_balance.plot(years, frame["net_worth_real"], label="Net worth (real)",
                        linewidth=DEFAULT_LINEWIDTH, linestyle="--", color="#0f766e", alpha=0.6)
    ax_balance.plot(years, frame["total_contributed"], label="Contributed",
                    linewidth=1, linestyle=":", color="#94a3b8")
    ax_balance.axhline(0, color="black", linewidth=0.8, alpha=0.5)
    ax_balance.yaxis.set_major_formatter(FuncFormatter(millions_formatter))
    ax_balance.set_ylabel("Balance", fontsize=10)
    ax_balance.set_title("Balances at Year End", fontsize=11, fontweight="bold")
    ax_balance.grid(True, alpha=0.3)
    ax_balance.legend(loc="upper left", fontsize=8, framealpha=0.9)

    # ========== Panel 2: Cash flow ==========
    width = 0.4
    ax_flow.bar(years - width / 2, frame["gross_income"], width=width,
                label="Income", color="#16a34a", alpha=0.8)
    ax_flow.bar(years + width / 2, frame["living_expenses"], width=width,
                label="Living expenses", color="#f97316", alpha=0.8)
    ax_flow.plot(years, frame["net_cash_flow"], label="Net cash flow",
                 linewidth=DEFAULT_LINEWIDTH, color="black", marker="o", markersize=3)
    ax_flow.axhline(0, color="black", linewidth=0.8, alpha=0.5)
    ax_flow.set_xlabel("Year", fontsize=10)
    ax_flow.set_ylabel("Per year", fontsize=10)
    ax_flow.set_title("Annual Cash Flow", fontsize=11, fontweight="bold")
    ax_flow.grid(True, alpha=0.3, axis="y")
    ax_flow.legend(loc="upper left", fontsize=8, framealpha=0.9)

    fig.suptitle(title or f"{len(years)}-Year Wealth Projection", fontsize=14, fontweight="bold")
    fig.tight_layout()

    if save_path:
        fig.savefig(save_path, bbox_inches="tight", dpi=150)

    if return_fig_ax:
        return fig, axes
    plt.close(fig)
    return None


def plot_cases(
    results: Mapping[str, ProjectionResult],
    *,
    metric: str = "net_worth",
    figsize: Optional[tuple] = None,
    title: Optional[str] = None,
    save_path: Optional[str] = None,
    return_fig_ax: bool = False,
):
    """
    Compare named cases on one axis.

    When both "optimistic" and "pessimistic" are present the area between
    them is shaded.

    Parameters
    ----------
    results : Mapping[str, ProjectionResult]
        E.g. the output of ``ProjectionEngine.run_three_cases()``.
    metric : str, default "net_worth"
        Any numeric ``YearSnapshot`` field.
    """
    from matplotlib import pyplot as plt
    from matplotlib.ticker import FuncFormatter
    from .utils import millions_formatter

    if not results:
        raise ValueError("results must contain at least one case")

    fig, ax = plt.subplots(figsize=figsize or DEFAULT_FIGSIZE)

    series = {}
    for label, result in results.items():
        if not result.snapshots:
            continue
        frame = result.to_frame()
        if metric not in frame.columns:
            raise ValueError(
                f"Unsupported metric '{metric}'. "
                f"Valid: {', '.join(c for c in frame.columns if c != 'age')}"
            )
        series[label] = frame[metric]

    if "optimistic" in series and "pessimistic" in series:
        years = series["optimistic"].index.to_numpy()
        ax.fill_between(
            years,
            np.asarray(series["pessimistic"], dtype=float),
            np.asarray(series["optimistic"], dtype=float),
            alpha=DEFAULT_ALPHA_BANDS,
            color="#0f766e",
            label="Optimistic / pessimistic range",
        )

    colors = plt.cm.Dark2(np.linspace(0, 1, max(len(series), 1)))
    for (label, values), color in zip(series.items(), colors):
        linewidth = DEFAULT_LINEWIDTH_THICK if label == "expected" else DEFAULT_LINEWIDTH
        ax.plot(values.index, values, label=label, linewidth=linewidth, color=color)

    ax.yaxis.set_major_formatter(FuncFormatter(millions_formatter))
    ax.set_xlabel("Year", fontsize=11)
    ax.set_ylabel(metric.replace("_", " ").title(), fontsize=11)
    ax.set_title(title or "Return Scenarios", fontsize=12, fontweight="bold")
    ax.grid(True, alpha=0.3)
    ax.legend(loc="best", fontsize=10)
    fig.tight_layout()

    if save_path:
        fig.savefig(save_path, bbox_inches="tight", dpi=150)

    if return_fig_ax:
        return fig, ax
    plt.close(fig)
    return None

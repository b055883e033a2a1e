"""Grouped box plots of estimated cluster counts.

One panel shows one estimator: boxes grouped by concentration level along
the x-axis, one box per sample size inside each group, shaded by sample size.
"""

from __future__ import annotations

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
from matplotlib.patches import Patch

from dpm_cluster_report import config
from dpm_cluster_report.concentration import format_alpha_label, order_alpha_levels
from dpm_cluster_report.scenarios import Scenario


def _sample_size_colors(sizes: list[int]) -> dict[int, tuple]:
    cmap = plt.get_cmap(config.SAMPLE_SIZE_CMAP)
    if len(sizes) == 1:
        return {sizes[0]: cmap(0.6)}
    shades = np.linspace(0.3, 0.9, len(sizes))
    return {size: cmap(shade) for size, shade in zip(sizes, shades)}


def plot_estimator_boxplot(
    results: pd.DataFrame,
    column: str,
    ax: plt.Axes,
    *,
    title: str | None = None,
    adaptive_label: str = "1/log(n)",
    true_k: int | None = None,
    show_legend: bool = True,
) -> plt.Axes:
    """Draw one estimator's cluster counts grouped by alpha and sample size."""
    if column not in results.columns:
        raise ValueError(f"Column {column!r} not found in results.")

    levels = order_alpha_levels(results[config.ALPHA_COLUMN].tolist())
    sizes = sorted(int(v) for v in results[config.SAMPLE_SIZE_COLUMN].unique())
    colors = _sample_size_colors(sizes)

    n_sizes = len(sizes)
    box_width = config.BOX_GROUP_WIDTH / n_sizes
    offsets = (np.arange(n_sizes) - (n_sizes - 1) / 2.0) * box_width

    alpha_str = results[config.ALPHA_COLUMN].astype(str)
    n_values = results[config.SAMPLE_SIZE_COLUMN].astype(int)

    for i, level in enumerate(levels):
        for offset, size in zip(offsets, sizes):
            mask = (alpha_str == str(level)) & (n_values == size)
            values = results.loc[mask, column].to_numpy()
            if values.size == 0:
                continue
            bp = ax.boxplot(
                [values],
                positions=[i + offset],
                widths=box_width * 0.9,
                patch_artist=True,
                manage_ticks=False,
                medianprops={"color": "black", "linewidth": 1.2},
                flierprops={"marker": "o", "markersize": 3, "alpha": 0.6},
            )
            bp["boxes"][0].set_facecolor(colors[size])

    if true_k is not None:
        ax.axhline(true_k, color="r", linestyle="--", linewidth=1, alpha=0.7)

    ax.set_xticks(np.arange(len(levels)))
    ax.set_xticklabels([format_alpha_label(lvl, adaptive_label) for lvl in levels])
    ax.set_xlim(-0.6, len(levels) - 0.4)
    ax.set_xlabel("Concentration parameter (alpha)")
    ax.set_ylabel("Number of clusters")
    ax.set_title(title or config.ESTIMATOR_TITLES.get(column, column))
    ax.grid(True, alpha=0.3, axis="y")

    if show_legend:
        handles = [Patch(facecolor=colors[size], label=f"n = {size}") for size in sizes]
        ax.legend(handles=handles, frameon=False, fontsize=8, loc="upper right")
    return ax


def create_estimator_grid(results: pd.DataFrame, scenario: Scenario) -> plt.Figure:
    """Create the 2x2 comparison grid: mode, MAP, VI, Binder (row-major)."""
    if results.empty:
        raise ValueError(f"No results to plot for scenario {scenario.name!r}.")

    fig, axes = plt.subplots(2, 2, figsize=config.GRID_FIGSIZE, sharey=True)
    axes = axes.ravel()

    for idx, (ax, column) in enumerate(zip(axes, config.ESTIMATOR_COLUMNS)):
        plot_estimator_boxplot(
            results,
            column,
            ax,
            adaptive_label=scenario.adaptive_alpha_label,
            true_k=scenario.true_n_clusters,
            show_legend=idx == 0,
        )
        # sharey hides the tick labels but not the axis label
        if idx % 2 == 1:
            ax.set_ylabel("")

    fig.suptitle(
        f"{scenario.title}\nEstimated number of clusters",
        fontsize=14,
        weight="bold",
    )
    plt.tight_layout(rect=(0.02, 0.02, 0.98, 0.94))
    return fig


__all__ = ["plot_estimator_boxplot", "create_estimator_grid"]

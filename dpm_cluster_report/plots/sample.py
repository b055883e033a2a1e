"""Illustrative plots of a scenario's generated sample."""

from __future__ import annotations

import matplotlib.pyplot as plt
import numpy as np

from dpm_cluster_report import config
from dpm_cluster_report.generators.distributions import (
    bimodal_mixture_pdf,
    standard_normal_pdf,
)
from dpm_cluster_report.scenarios import Scenario

_DENSITIES = {
    "standard_normal": standard_normal_pdf,
    "bimodal_mixture": bimodal_mixture_pdf,
}


def _plot_histogram(ax: plt.Axes, X: np.ndarray, scenario: Scenario) -> None:
    x = X[:, 0]
    ax.hist(
        x,
        bins=config.HISTOGRAM_BINS,
        density=True,
        color="lightblue",
        edgecolor="white",
        label="Sample",
    )
    density = _DENSITIES.get(scenario.generator)
    if density is not None:
        pad = 0.5
        grid = np.linspace(x.min() - pad, x.max() + pad, 400)
        ax.plot(grid, density(grid), "r-", linewidth=2, label="Generating density")
    ax.set_xlabel("x")
    ax.set_ylabel("Density")
    ax.legend(frameon=False)


def _plot_scatter(
    ax: plt.Axes, X: np.ndarray, scenario: Scenario, labels: np.ndarray | None
) -> None:
    colors = labels if labels is not None and len(np.unique(labels)) > 1 else None
    ax.scatter(X[:, 0], X[:, 1], s=10, c=colors, alpha=0.7, edgecolors="none")
    if scenario.generator == "unit_disc":
        theta = np.linspace(0.0, 2.0 * np.pi, 400)
        ax.plot(np.cos(theta), np.sin(theta), "r--", linewidth=1, label="Unit circle")
        ax.legend(frameon=False, loc="upper right")
    ax.set_aspect("equal")
    ax.set_xlabel("x1")
    ax.set_ylabel("x2")


def create_sample_plot(
    X: np.ndarray,
    scenario: Scenario,
    labels: np.ndarray | None = None,
) -> plt.Figure:
    """Histogram (p = 1) or scatter (p = 2) of the illustrative sample."""
    X = np.asarray(X, dtype=float)
    if X.ndim == 1:
        X = X.reshape(-1, 1)

    fig, ax = plt.subplots(figsize=config.SAMPLE_FIGSIZE)
    if X.shape[1] == 1:
        _plot_histogram(ax, X, scenario)
    elif X.shape[1] == 2:
        _plot_scatter(ax, X, scenario, labels)
    else:
        plt.close(fig)
        raise ValueError(f"Cannot plot a sample with {X.shape[1]} dimensions.")

    ax.grid(True, alpha=0.3)
    ax.set_title(f"{scenario.title} (n = {X.shape[0]})", fontsize=13, weight="bold")
    fig.tight_layout()
    return fig


__all__ = ["create_sample_plot"]

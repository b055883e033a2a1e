"""Text pages (cover and per-scenario narrative) for the PDF report.

Pages are laid out directly in figure coordinates: a header band with title
and subtitle, then headed text blocks stacked downwards. The scenario page
adds a table of the base-measure hyperparameters.
"""

from __future__ import annotations

from datetime import datetime, timezone
from textwrap import fill

import matplotlib.pyplot as plt
from matplotlib.lines import Line2D

from dpm_cluster_report import config
from dpm_cluster_report.hyperparameters import NIGHyperparameters
from dpm_cluster_report.plots.pdf import PDF_PAGE_SIZE_INCHES, prepare_pdf_figure
from dpm_cluster_report.scenarios import Scenario

_LEFT = 0.06
_INDENT = 0.08
_WRAP_WIDTH = 100
_LINE_SPACING = 1.4

_ESTIMATOR_NOTES = {
    "kmode": "argmax_k p(K = k | data)",
    "kMAP": "partition with the highest posterior probability (0-1 loss)",
    "kVI": "minimiser of the posterior expected Variation of Information",
    "kBinder": "minimiser of the posterior expected Binder loss",
}

_HYPERPARAMETER_ROLES = {
    "mu_0": "prior mean of the cluster centres",
    "c_x": "between- to within-cluster variance ratio",
    "a_x": "inverse-gamma shape",
    "b_x": "inverse-gamma rate, per dimension",
    "khat": "anticipated number of clusters",
}


def _page(title: str, subtitle: str) -> plt.Figure:
    fig = plt.figure(figsize=PDF_PAGE_SIZE_INCHES)
    fig.text(_LEFT, 0.95, title, fontsize=15, fontweight="bold", va="top")
    fig.text(_LEFT, 0.905, subtitle, fontsize=10, color="0.35", va="top")
    fig.add_artist(
        Line2D([_LEFT, 1 - _LEFT], [0.88, 0.88], color="0.6", linewidth=0.8,
               transform=fig.transFigure)
    )
    prepare_pdf_figure(fig)
    return fig


def _block_height(n_lines: int, fontsize: float) -> float:
    return n_lines * fontsize * _LINE_SPACING / 72.0 / PDF_PAGE_SIZE_INCHES[1]


def _text_block(
    fig: plt.Figure,
    top: float,
    heading: str,
    body: str,
    fontsize: float = 9.5,
    fontfamily: str | None = None,
) -> float:
    """Draw a headed block starting at *top*; return the y where the next one starts."""
    fig.text(_LEFT, top, heading, fontsize=11, fontweight="bold", va="top")
    body_top = top - 0.035
    fig.text(_INDENT, body_top, body, fontsize=fontsize, va="top",
             linespacing=_LINE_SPACING, fontfamily=fontfamily)
    return body_top - _block_height(body.count("\n") + 1, fontsize) - 0.03


def _bullets(sentences: list[str]) -> str:
    return "\n".join(
        fill(s, _WRAP_WIDTH, initial_indent="- ", subsequent_indent="  ")
        for s in sentences
    )


def _format_value(value: object) -> str:
    if value is None:
        return "-"
    if isinstance(value, list):
        return "(" + ", ".join(f"{v:.4g}" for v in value) + ")"
    return f"{value:.4g}"


def generate_overview_page(
    scenarios: list[Scenario],
    timestamp: str | None = None,
) -> plt.Figure:
    """Cover page: what is compared, and which scenarios and files are included."""
    if timestamp is None:
        timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M UTC")

    fig = _page(
        "Posterior point estimates of the number of clusters",
        f"Dirichlet process mixture reproducibility report, generated {timestamp}",
    )
    about = fill(
        "Clustering point estimates from Dirichlet process mixture posteriors are "
        "compared with the marginal posterior mode of the number of clusters. "
        "The MCMC runs and loss minimisation were done beforehand; each scenario "
        "section shows an illustrative sample, the base-measure hyperparameters "
        "derived from it, and box plots of the estimated number of clusters by "
        "concentration parameter and sample size.",
        _WRAP_WIDTH,
    )
    y = _text_block(fig, 0.84, "About", about)

    width = max(len(config.ESTIMATOR_TITLES[c]) for c in config.ESTIMATOR_COLUMNS)
    estimators = "\n".join(
        f"{config.ESTIMATOR_TITLES[c]:<{width}}   {_ESTIMATOR_NOTES[c]}"
        for c in config.ESTIMATOR_COLUMNS
    )
    y = _text_block(
        fig, y, "Estimators (one panel each, row-major)", estimators,
        fontfamily="monospace",
    )

    listing = "\n".join(
        f"{s.title}   [{s.results_file}; adaptive alpha = {s.adaptive_alpha_label}]"
        for s in scenarios
    )
    _text_block(fig, y, f"Scenarios ({len(scenarios)})", listing)
    return fig


def generate_scenario_page(
    scenario: Scenario,
    hyperparameters: NIGHyperparameters,
    findings: list[str],
    *,
    n_runs: int,
) -> plt.Figure:
    """Section opener: description, hyperparameter table and narrative findings."""
    fig = _page(
        scenario.title,
        f"{n_runs} simulation runs from {scenario.results_file}; "
        f"true number of clusters K = {scenario.true_n_clusters}",
    )
    y = _text_block(fig, 0.84, "Data", fill(scenario.description, _WRAP_WIDTH))

    fig.text(_LEFT, y, "Base-measure hyperparameters (from the illustrative sample)",
             fontsize=11, fontweight="bold", va="top")
    rows = [
        [name, _format_value(value), _HYPERPARAMETER_ROLES[name]]
        for name, value in hyperparameters.as_dict().items()
        if not (name == "khat" and value is None)
    ]
    table_height = 0.04 * (len(rows) + 1)
    table_top = y - 0.04
    ax = fig.add_axes([_INDENT, table_top - table_height, 0.7, table_height])
    ax.set_axis_off()
    table = ax.table(
        cellText=rows,
        colLabels=["parameter", "value", "role"],
        colWidths=[0.15, 0.3, 0.55],
        cellLoc="left",
        loc="upper left",
        bbox=[0.0, 0.0, 1.0, 1.0],
    )
    table.auto_set_font_size(False)
    table.set_fontsize(9)
    for (row, _), cell in table.get_celld().items():
        cell.set_edgecolor("0.8")
        if row == 0:
            cell.set_facecolor("0.92")
            cell.get_text().set_fontweight("bold")

    _text_block(fig, table_top - table_height - 0.04, "Findings", _bullets(findings))
    return fig


__all__ = ["generate_overview_page", "generate_scenario_page"]

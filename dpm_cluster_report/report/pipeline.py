"""
Report pipeline: one section per simulation scenario.

For each scenario an illustrative sample is drawn and the base-measure
hyperparameters are derived from it; independently, the precomputed result
table is loaded and plotted as a 2x2 grid of grouped box plots. All pages are
streamed into a single PDF.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
import logging
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

from dpm_cluster_report import config
from dpm_cluster_report.concentration import order_alpha_levels
from dpm_cluster_report.generators import generate_scenario_data
from dpm_cluster_report.hyperparameters import (
    NIGHyperparameters,
    compute_nig_hyperparameters,
    format_hyperparameters,
)
from dpm_cluster_report.logging import (
    log_report_completion as _log_report_completion,
    log_report_start as _log_report_start,
    log_scenario_loaded as _log_scenario_loaded,
    log_scenario_start as _log_scenario_start,
)
from dpm_cluster_report.plots import (
    create_estimator_grid,
    create_sample_plot,
    generate_overview_page,
    generate_scenario_page,
    open_pdf_pages,
    resolve_pdf_output_path,
)
from dpm_cluster_report.report.summary import (
    describe_scenario_findings,
    summarize_cluster_counts,
)
from dpm_cluster_report.results import load_scenario_results, scenario_result_path
from dpm_cluster_report.scenarios import Scenario, resolve_scenarios

# Configure logger (library-friendly: leave handlers/levels to callers)
logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


@dataclass
class ScenarioReport:
    """Everything computed for one scenario section."""

    scenario: Scenario
    sample: np.ndarray
    labels: np.ndarray
    sample_meta: dict
    hyperparameters: NIGHyperparameters
    results: pd.DataFrame
    summary: pd.DataFrame
    findings: list[str] = field(default_factory=list)


def run_scenario(
    scenario: Scenario,
    results_dir: str | Path,
    seed: int | None = config.DEFAULT_SEED,
) -> ScenarioReport:
    """Generate, parameterise and load everything needed for one scenario.

    A missing or malformed result file raises; the report cannot be built
    without it.
    """
    X, labels, meta = generate_scenario_data(scenario, seed=seed)
    hyper = compute_nig_hyperparameters(X, khat=scenario.khat)
    logger.debug("%s hyperparameters: %s", scenario.name, format_hyperparameters(hyper))

    results = load_scenario_results(scenario, results_dir)
    summary = summarize_cluster_counts(results, scenario.true_n_clusters)
    findings = describe_scenario_findings(summary, scenario)

    return ScenarioReport(
        scenario=scenario,
        sample=X,
        labels=labels,
        sample_meta=meta,
        hyperparameters=hyper,
        results=results,
        summary=summary,
        findings=findings,
    )


def scenario_figures(report: ScenarioReport) -> list[tuple[str, plt.Figure]]:
    """Narrative page, sample plot and comparison grid for one scenario, in order."""
    scenario = report.scenario
    page = generate_scenario_page(
        scenario,
        report.hyperparameters,
        report.findings,
        n_runs=len(report.results),
    )
    sample_fig = create_sample_plot(report.sample, scenario, labels=report.labels)
    grid_fig = create_estimator_grid(report.results, scenario)
    return [
        (f"{scenario.name}_summary", page),
        (f"{scenario.name}_sample", sample_fig),
        (f"{scenario.name}_estimators", grid_fig),
    ]


def build_report(
    scenarios: list[str] | None = None,
    results_dir: str | Path = config.DEFAULT_RESULTS_DIR,
    output: str | Path | None = None,
    *,
    output_dir: str | Path = config.DEFAULT_OUTPUT_DIR,
    seed: int | None = config.DEFAULT_SEED,
    save_individual_plots: bool = False,
    export_summary: bool = False,
    verbose: bool = True,
) -> Path:
    """
    Render the full report into a multi-page PDF.

    Parameters
    ----------
    scenarios : list of str, optional
        Scenario names to include, in order. Defaults to all registered
        scenarios.
    results_dir : str or Path
        Directory holding the ``*_results.RData`` files.
    output : str or Path, optional
        PDF path. A ``.pdf`` suffix is added when missing. Defaults to a
        timestamped file under ``output_dir``.
    output_dir : str or Path
        Directory for the default PDF, PNG figures and summary CSVs.
    seed : int, optional
        Seed for the illustrative samples.
    save_individual_plots : bool, default=False
        Also write each figure as a PNG under ``output_dir / "plots"``.
    export_summary : bool, default=False
        Also write ``<scenario>_summary.csv`` under ``output_dir``.
    verbose : bool, default=True
        Log progress at INFO level.

    Returns
    -------
    Path
        The written PDF.
    """
    started_at = datetime.now(timezone.utc)
    selected = resolve_scenarios(scenarios)
    output_dir = Path(output_dir)
    output_pdf = resolve_pdf_output_path(
        output, output_dir=output_dir, started_at=started_at
    )
    plots_dir = output_dir / "plots"

    if verbose:
        _log_report_start([s.name for s in selected], results_dir, output_pdf)

    # All result files are loaded before the PDF is opened.
    reports = []
    for i, scenario in enumerate(selected, 1):
        if verbose:
            _log_scenario_start(
                i, len(selected), scenario.name, scenario_result_path(scenario, results_dir)
            )
        report = run_scenario(scenario, results_dir, seed=seed)
        if verbose:
            _log_scenario_loaded(
                scenario.name,
                len(report.results),
                order_alpha_levels(report.results[config.ALPHA_COLUMN].unique()),
                sorted(report.results[config.SAMPLE_SIZE_COLUMN].unique()),
            )
        reports.append(report)

    extra_files: list[Path] = []
    if save_individual_plots:
        plots_dir.mkdir(parents=True, exist_ok=True)
    if export_summary:
        output_dir.mkdir(parents=True, exist_ok=True)
        for report in reports:
            csv_path = output_dir / f"{report.scenario.name}_summary.csv"
            report.summary.to_csv(csv_path, index=False)
            extra_files.append(csv_path)

    n_pages = 0
    with open_pdf_pages(output_pdf) as pdf:
        cover = generate_overview_page(selected)
        pdf.savefig(cover)
        plt.close(cover)
        n_pages += 1

        for report in reports:
            for name, fig in scenario_figures(report):
                is_text_page = name.endswith("_summary")
                try:
                    if save_individual_plots and not is_text_page:
                        png_path = plots_dir / f"{name}.png"
                        fig.savefig(png_path, dpi=config.PNG_DPI, bbox_inches="tight")
                        extra_files.append(png_path)
                    if is_text_page:
                        pdf.savefig(fig)
                    else:
                        pdf.savefig(fig, bbox_inches="tight")
                    n_pages += 1
                finally:
                    plt.close(fig)

    if verbose:
        _log_report_completion(output_pdf, n_pages, extra_files)
    return output_pdf


__all__ = ["ScenarioReport", "run_scenario", "scenario_figures", "build_report"]

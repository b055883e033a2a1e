"""Progress messages for report builds.

Each helper takes the values the report already has at hand (scenario names,
result paths, run counts, output files) and falls back to the pipeline logger.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Sequence


def _pipeline_logger(logger: logging.Logger | None) -> logging.Logger:
    return logger or logging.getLogger("dpm_cluster_report.report.pipeline")


def log_report_start(
    scenario_names: Sequence[str],
    results_dir: str | Path,
    output_pdf: Path,
    logger: logging.Logger | None = None,
) -> None:
    _pipeline_logger(logger).info(
        "Rendering %s from %s into %s",
        ", ".join(scenario_names),
        results_dir,
        output_pdf,
    )


def log_scenario_start(
    index: int,
    total: int,
    name: str,
    results_path: Path,
    logger: logging.Logger | None = None,
) -> None:
    _pipeline_logger(logger).info(
        "[%d/%d] %s: reading %s", index, total, name, results_path.name
    )


def log_scenario_loaded(
    name: str,
    n_runs: int,
    alpha_levels: Iterable[str],
    sample_sizes: Iterable[int],
    logger: logging.Logger | None = None,
) -> None:
    """One line per scenario with the grouping axes found in its table."""
    _pipeline_logger(logger).info(
        "%s: %d runs, alpha levels [%s], sample sizes [%s]",
        name,
        n_runs,
        ", ".join(alpha_levels),
        ", ".join(str(n) for n in sample_sizes),
    )


def log_report_completion(
    output_pdf: Path,
    n_pages: int,
    extra_files: Sequence[Path] = (),
    logger: logging.Logger | None = None,
) -> None:
    logger = _pipeline_logger(logger)
    logger.info("Wrote %d pages to %s", n_pages, output_pdf)
    if extra_files:
        logger.info(
            "Also wrote %d files: %s",
            len(extra_files),
            ", ".join(p.name for p in extra_files),
        )

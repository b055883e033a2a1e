"""Command-line entry point: render the cluster-count report to PDF."""

from __future__ import annotations

import argparse
import logging
import sys

from dpm_cluster_report import config
from dpm_cluster_report.env import get_env_int, get_env_str
from dpm_cluster_report.report import build_report
from dpm_cluster_report.results import ResultTableError
from dpm_cluster_report.scenarios import DEFAULT_SCENARIO_ORDER, SCENARIOS

logger = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description=(
            "Render box plots of posterior cluster-count estimates (mode, MAP, "
            "VI, Binder) from precomputed simulation results."
        )
    )
    parser.add_argument(
        "--results-dir",
        type=str,
        default=get_env_str(config.ENV_RESULTS_DIR, config.DEFAULT_RESULTS_DIR),
        help=f"Directory holding the *_results.RData files (env: {config.ENV_RESULTS_DIR}).",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Output PDF path. Defaults to a timestamped file in --output-dir.",
    )
    parser.add_argument("--output-dir", type=str, default=config.DEFAULT_OUTPUT_DIR)
    parser.add_argument(
        "--scenarios",
        nargs="+",
        choices=sorted(SCENARIOS),
        default=list(DEFAULT_SCENARIO_ORDER),
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=get_env_int(config.ENV_SEED, config.DEFAULT_SEED),
        help=f"Seed for the illustrative samples (env: {config.ENV_SEED}).",
    )
    parser.add_argument(
        "--save-plots",
        action="store_true",
        help="Also write each figure as a PNG.",
    )
    parser.add_argument(
        "--export-summary",
        action="store_true",
        help="Also write per-scenario summary CSVs.",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        output_pdf = build_report(
            scenarios=args.scenarios,
            results_dir=args.results_dir,
            output=args.output,
            output_dir=args.output_dir,
            seed=args.seed,
            save_individual_plots=args.save_plots,
            export_summary=args.export_summary,
        )
    except (FileNotFoundError, ResultTableError) as exc:
        logger.error("Report not rendered: %s", exc)
        return 1

    print(f"Report written to {output_pdf}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

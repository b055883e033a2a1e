"""
Report assembly: per-scenario computations and the PDF writer.
"""

from .pipeline import ScenarioReport, build_report, run_scenario, scenario_figures
from .summary import describe_scenario_findings, summarize_cluster_counts

__all__ = [
    "ScenarioReport",
    "build_report",
    "run_scenario",
    "scenario_figures",
    "describe_scenario_findings",
    "summarize_cluster_counts",
]

"""Tests for per-scenario summaries and narrative findings."""

import pandas as pd
import pytest

from dpm_cluster_report.report import (
    describe_scenario_findings,
    summarize_cluster_counts,
)
from dpm_cluster_report.report.summary import SUMMARY_COLUMNS
from dpm_cluster_report.scenarios import SCENARIOS


def _frame(rows):
    return pd.DataFrame(rows, columns=["alpha", "n", "kmode", "kMAP", "kVI", "kBinder"])


@pytest.fixture
def small_results():
    return _frame(
        [
            ("adaptive", 50, 1, 2, 1, 3),
            ("adaptive", 50, 1, 3, 1, 2),
            ("adaptive", 200, 1, 4, 1, 5),
            ("adaptive", 200, 2, 5, 1, 6),
            ("1", 50, 2, 3, 1, 3),
            ("1", 50, 3, 3, 2, 4),
            ("1", 200, 3, 6, 1, 7),
            ("1", 200, 4, 7, 1, 8),
        ]
    )


def test_summary_shape_and_order(small_results):
    summary = summarize_cluster_counts(small_results, true_k=1)

    assert list(summary.columns) == SUMMARY_COLUMNS
    assert len(summary) == 2 * 2 * 4
    assert summary["alpha"].iloc[0] == "adaptive"
    assert summary["estimator"].iloc[:4].tolist() == ["kmode", "kMAP", "kVI", "kBinder"]
    assert summary["runs"].unique().tolist() == [2]


def test_summary_statistics(small_results):
    summary = summarize_cluster_counts(small_results, true_k=1).set_index(
        ["alpha", "n", "estimator"]
    )

    row = summary.loc[("adaptive", 200, "kmode")]
    assert row["median"] == pytest.approx(1.5)
    assert row["mean"] == pytest.approx(1.5)
    assert row["share_true_k"] == pytest.approx(0.5)

    assert summary.loc[("1", 50, "kVI"), "share_true_k"] == pytest.approx(0.5)
    assert summary.loc[("1", 200, "kBinder"), "share_true_k"] == pytest.approx(0.0)


def test_findings_name_best_estimator_and_trends(small_results):
    scenario = SCENARIOS["miller"]
    summary = summarize_cluster_counts(small_results, scenario.true_n_clusters)
    findings = describe_scenario_findings(summary, scenario)

    assert findings[0].startswith("Across all runs, the VI estimate recovers K = 1")
    assert "(88% of runs)" in findings[0]
    # One trend sentence per estimator, then the adaptive-vs-fixed comparison.
    assert len(findings) == 1 + 4 + 1
    assert any("MAP clustering" in s and "grows" in s for s in findings)
    assert "alpha = 1/log(n)" in findings[-1]
    assert "75%" in findings[-1]


def test_findings_without_sample_size_variation(small_results):
    single_n = small_results[small_results["n"] == 50]
    summary = summarize_cluster_counts(single_n, true_k=2)
    findings = describe_scenario_findings(summary, SCENARIOS["raj3"])
    assert len(findings) == 2
    assert "2/log(n)" in findings[-1]


def test_findings_for_empty_summary():
    empty = pd.DataFrame(columns=SUMMARY_COLUMNS)
    assert describe_scenario_findings(empty, SCENARIOS["miller"]) == [
        "No simulation runs were available for this scenario."
    ]

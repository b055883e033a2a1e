"""Simulation scenarios covered by the report.

Each scenario pairs a generating law for the illustrative sample with the
precomputed results file produced for it.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Scenario:
    """Static description of one simulation scenario."""

    name: str
    title: str
    results_file: str
    generator: str
    n_features: int
    n_samples: int
    true_n_clusters: int
    adaptive_alpha_label: str = "1/log(n)"
    khat: float | None = None
    description: str = ""


SCENARIOS: dict[str, Scenario] = {
    "miller": Scenario(
        name="miller",
        title="Scenario 1: standard normal data",
        results_file="miller_results.RData",
        generator="standard_normal",
        n_features=1,
        n_samples=200,
        true_n_clusters=1,
        description=(
            "Observations are i.i.d. N(0, 1), so the data come from a single "
            "component. A DP mixture with a fixed concentration parameter is "
            "known to overestimate the number of clusters here."
        ),
    ),
    "raj4": Scenario(
        name="raj4",
        title="Scenario 2: uniform distribution on the unit disc",
        results_file="raj4_results.RData",
        generator="unit_disc",
        n_features=2,
        n_samples=500,
        true_n_clusters=1,
        description=(
            "Observations are uniform on the unit disc, a single non-Gaussian "
            "component in two dimensions."
        ),
    ),
    "raj3": Scenario(
        name="raj3",
        title="Scenario 3: bimodal normal mixture",
        results_file="raj3_results.RData",
        generator="bimodal_mixture",
        n_features=1,
        n_samples=200,
        true_n_clusters=2,
        adaptive_alpha_label="2/log(n)",
        khat=2.0,
        description=(
            "Observations come from an equal-weight mixture of N(-1.01, 1) and "
            "N(1.01, 1). The components overlap strongly, so the mixture is "
            "only just bimodal."
        ),
    ),
}

DEFAULT_SCENARIO_ORDER: tuple[str, ...] = ("miller", "raj4", "raj3")


def get_scenario(name: str) -> Scenario:
    """Look up a registered scenario by name."""
    try:
        return SCENARIOS[name]
    except KeyError:
        available = ", ".join(sorted(SCENARIOS))
        raise ValueError(f"Unknown scenario: {name!r}. Available: {available}") from None


def resolve_scenarios(names: list[str] | None = None) -> list[Scenario]:
    """Return scenarios in report order, optionally restricted to ``names``."""
    if not names:
        return [SCENARIOS[name] for name in DEFAULT_SCENARIO_ORDER]
    return [get_scenario(name) for name in names]


__all__ = [
    "Scenario",
    "SCENARIOS",
    "DEFAULT_SCENARIO_ORDER",
    "get_scenario",
    "resolve_scenarios",
]

"""Create the illustrative sample for a scenario.

Exports:
- generate_scenario_data(scenario, n=None, seed=None) -> tuple[np.ndarray, np.ndarray, dict]
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

import numpy as np

from dpm_cluster_report.generators.distributions import (
    generate_bimodal_mixture,
    generate_standard_normal,
    generate_unit_disc,
)
from dpm_cluster_report.scenarios import Scenario


def _generate_standard_normal_case(
    scenario: Scenario, n: int, rng: np.random.Generator
) -> Tuple[np.ndarray, np.ndarray]:
    X = generate_standard_normal(n, scenario.n_features, rng)
    return X, np.zeros(len(X), dtype=int)


def _generate_unit_disc_case(
    scenario: Scenario, n: int, rng: np.random.Generator
) -> Tuple[np.ndarray, np.ndarray]:
    if scenario.n_features != 2:
        raise ValueError(
            f"Unit disc generator is two-dimensional; scenario {scenario.name!r} "
            f"declares p={scenario.n_features}."
        )
    X = generate_unit_disc(n, rng)
    return X, np.zeros(len(X), dtype=int)


def _generate_bimodal_case(
    scenario: Scenario, n: int, rng: np.random.Generator
) -> Tuple[np.ndarray, np.ndarray]:
    if scenario.n_features != 1:
        raise ValueError(
            f"Bimodal mixture generator is univariate; scenario {scenario.name!r} "
            f"declares p={scenario.n_features}."
        )
    return generate_bimodal_mixture(n, rng)


_GENERATORS = {
    "standard_normal": _generate_standard_normal_case,
    "unit_disc": _generate_unit_disc_case,
    "bimodal_mixture": _generate_bimodal_case,
}


def generate_scenario_data(
    scenario: Scenario,
    n: Optional[int] = None,
    seed: Optional[int] = None,
) -> Tuple[np.ndarray, np.ndarray, Dict[str, Any]]:
    """Draw the illustrative sample, component labels and metadata for a scenario.

    This function dispatches on ``scenario.generator``. ``n`` defaults to the
    scenario's illustrative sample size.
    """
    generator = _GENERATORS.get(scenario.generator)
    if generator is None:
        raise ValueError(f"Unknown generator: {scenario.generator}")

    n_samples = int(scenario.n_samples if n is None else n)
    rng = np.random.default_rng(seed)
    X, labels = generator(scenario, n_samples, rng)

    metadata = {
        "name": scenario.name,
        "generator": scenario.generator,
        "n_samples": n_samples,
        "n_features": X.shape[1],
        "n_clusters": scenario.true_n_clusters,
        "seed": seed,
    }
    return X, labels, metadata

"""Tests for the Normal-Inverse-Gamma hyperparameter derivation."""

import numpy as np
import pytest
from numpy.testing import assert_allclose, assert_array_equal

from dpm_cluster_report.generators import generate_scenario_data
from dpm_cluster_report.hyperparameters import (
    NIGHyperparameters,
    compute_nig_hyperparameters,
    format_hyperparameters,
)
from dpm_cluster_report.scenarios import SCENARIOS


def test_scenario_one_end_to_end_values():
    X, _, _ = generate_scenario_data(SCENARIOS["miller"], n=200, seed=20240117)
    assert X.shape == (200, 1)
    assert abs(X.mean()) < 0.25
    assert abs(X.var(ddof=1) - 1.0) < 0.3

    params = compute_nig_hyperparameters(X)
    assert params.a_x == pytest.approx(1.5)
    assert params.c_x == pytest.approx(0.5)
    assert_array_equal(params.mu_0, np.zeros(1))
    assert params.khat is None


def test_rate_matches_empirical_variance_times_half_p():
    rng = np.random.default_rng(0)
    X = rng.normal(scale=[1.0, 3.0], size=(400, 2))
    params = compute_nig_hyperparameters(X)

    expected = X.var(axis=0, ddof=1) * 2 / 2
    assert_allclose(params.b_x, expected)
    assert params.a_x == pytest.approx(2.0)
    assert params.n_features == 2


def test_prior_mean_of_cluster_variance_equals_empirical_variance():
    # E[sigma^2] = b / (a - 1) for an inverse gamma prior.
    X = np.random.default_rng(1).normal(scale=2.0, size=(300, 1))
    params = compute_nig_hyperparameters(X)
    assert_allclose(params.b_x / (params.a_x - 1), X.var(axis=0, ddof=1))


def test_khat_adjustment():
    X = np.random.default_rng(2).normal(size=(250, 1))
    base = compute_nig_hyperparameters(X)
    adjusted = compute_nig_hyperparameters(X, khat=2)

    assert adjusted.a_x == pytest.approx(base.a_x / 4)
    assert_allclose(adjusted.b_x, base.b_x / 4)
    assert adjusted.c_x == pytest.approx(1.0 / (3 * 4 - 1))
    assert adjusted.khat == 2.0


def test_explicit_scale_factor_overrides_default():
    X = np.random.default_rng(3).normal(size=(50, 1))
    params = compute_nig_hyperparameters(X, c_x=0.1)
    assert params.c_x == pytest.approx(0.1)


def test_deterministic_for_identical_sample():
    X = np.random.default_rng(4).normal(size=(120, 2))
    first = compute_nig_hyperparameters(X, khat=3)
    second = compute_nig_hyperparameters(X.copy(), khat=3)
    assert first == second


def test_equality_detects_differences():
    X = np.random.default_rng(5).normal(size=(80, 1))
    assert compute_nig_hyperparameters(X) != compute_nig_hyperparameters(X * 2)


def test_one_dimensional_input_treated_as_single_feature():
    x = np.random.default_rng(6).normal(size=60)
    params = compute_nig_hyperparameters(x)
    assert params.n_features == 1
    assert params.a_x == pytest.approx(1.5)


@pytest.mark.parametrize("bad", [np.zeros((1, 2)), np.zeros((2, 2, 2))])
def test_rejects_bad_shapes(bad):
    with pytest.raises(ValueError):
        compute_nig_hyperparameters(bad)


def test_rejects_non_positive_khat():
    with pytest.raises(ValueError):
        compute_nig_hyperparameters(np.ones((5, 1)) + np.arange(5)[:, None], khat=0)


def test_bimodal_scenario_uses_khat():
    scenario = SCENARIOS["raj3"]
    X, _, _ = generate_scenario_data(scenario, seed=0)
    params = compute_nig_hyperparameters(X, khat=scenario.khat)
    assert params.a_x == pytest.approx(1.5 / scenario.khat**2)
    assert params.c_x == pytest.approx(1.0 / (3 * scenario.khat**2 - 1))


def test_format_and_dict_views():
    params = NIGHyperparameters(
        mu_0=np.zeros(2), c_x=0.5, a_x=2.0, b_x=np.array([1.0, 2.0])
    )
    text = format_hyperparameters(params)
    assert "a_x = 2" in text
    assert "c_x = 0.5" in text
    assert "khat" not in text

    as_dict = params.as_dict()
    assert as_dict["mu_0"] == [0.0, 0.0]
    assert as_dict["b_x"] == [1.0, 2.0]

"""Generating laws for the illustrative scenario samples.

Every sampler takes a ``numpy.random.Generator`` and returns an ``(n, p)``
float array. Densities are exposed alongside so plots can overlay the truth.
"""

from __future__ import annotations

import numpy as np
from scipy.stats import norm

from dpm_cluster_report import config


def _check_n(n: int) -> int:
    n = int(n)
    if n < 1:
        raise ValueError(f"Sample size must be positive, got {n}.")
    return n


def generate_standard_normal(n: int, p: int, rng: np.random.Generator) -> np.ndarray:
    """Draw ``n`` i.i.d. standard normal vectors of dimension ``p``."""
    n = _check_n(n)
    if int(p) < 1:
        raise ValueError(f"Dimensionality must be positive, got {p}.")
    return rng.standard_normal((n, int(p)))


def generate_unit_disc(n: int, rng: np.random.Generator) -> np.ndarray:
    """Draw ``n`` points uniformly from the interior of the unit disc.

    Uses the polar construction: radius ``sqrt(U1)`` and angle ``2*pi*U2``
    with independent uniforms, which gives a uniform density in area.
    """
    n = _check_n(n)
    radius = np.sqrt(rng.uniform(size=n))
    angle = 2.0 * np.pi * rng.uniform(size=n)
    return np.column_stack([radius * np.cos(angle), radius * np.sin(angle)])


def generate_bimodal_mixture(
    n: int,
    rng: np.random.Generator,
    mean: float = config.BIMODAL_MEAN,
    weight: float = config.BIMODAL_WEIGHT,
) -> tuple[np.ndarray, np.ndarray]:
    """Draw from ``weight*N(mean, 1) + (1-weight)*N(-mean, 1)``.

    Returns
    -------
    X : np.ndarray
        Shape ``(n, 1)``.
    indicators : np.ndarray
        Bernoulli component indicators (1 for the positive component).
    """
    n = _check_n(n)
    if not 0.0 <= weight <= 1.0:
        raise ValueError(f"Mixture weight must lie in [0, 1], got {weight}.")
    indicators = rng.binomial(1, weight, size=n)
    centers = np.where(indicators == 1, mean, -mean)
    X = (centers + rng.standard_normal(n)).reshape(n, 1)
    return X, indicators.astype(int)


def standard_normal_pdf(x: np.ndarray) -> np.ndarray:
    return norm.pdf(x)


def bimodal_mixture_pdf(
    x: np.ndarray,
    mean: float = config.BIMODAL_MEAN,
    weight: float = config.BIMODAL_WEIGHT,
) -> np.ndarray:
    return weight * norm.pdf(x, loc=mean) + (1.0 - weight) * norm.pdf(x, loc=-mean)


__all__ = [
    "generate_standard_normal",
    "generate_unit_disc",
    "generate_bimodal_mixture",
    "standard_normal_pdf",
    "bimodal_mixture_pdf",
]

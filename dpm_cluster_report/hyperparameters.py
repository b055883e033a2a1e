"""Normal-Inverse-Gamma base-measure hyperparameters.

The base measure of the DP mixture is

    sigma_j^2 ~ InvGamma(a_x, b_x[j]),    mu_j | sigma_j^2 ~ N(mu_0[j], sigma_j^2 / c_x)

independently over dimensions j. The shape ``a_x = (p + 2) / 2`` is the
smallest value for which the marginal prior of an observation has finite
variance, and ``b_x = var_j * p / 2`` centres the prior cluster variance on
the empirical one. ``c_x`` sets the between- to within-cluster variance ratio.

When an anticipated number of clusters ``khat`` is supplied, the within-cluster
scale is shrunk by ``khat**2`` and ``c_x`` is chosen so that the marginal
variance still matches the data.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from dpm_cluster_report import config


@dataclass(frozen=True, eq=False)
class NIGHyperparameters:
    """Hyperparameters of the Normal-Inverse-Gamma base measure."""

    mu_0: np.ndarray
    c_x: float
    a_x: float
    b_x: np.ndarray
    khat: float | None = None

    @property
    def n_features(self) -> int:
        return int(self.mu_0.shape[0])

    def as_dict(self) -> dict[str, object]:
        return {
            "mu_0": self.mu_0.tolist(),
            "c_x": self.c_x,
            "a_x": self.a_x,
            "b_x": self.b_x.tolist(),
            "khat": self.khat,
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NIGHyperparameters):
            return NotImplemented
        return (
            np.array_equal(self.mu_0, other.mu_0)
            and self.c_x == other.c_x
            and self.a_x == other.a_x
            and np.array_equal(self.b_x, other.b_x)
            and self.khat == other.khat
        )


def compute_nig_hyperparameters(
    X: np.ndarray,
    khat: float | None = None,
    c_x: float | None = None,
) -> NIGHyperparameters:
    """Derive the base-measure hyperparameters from a sample.

    Parameters
    ----------
    X : np.ndarray
        Sample of shape ``(n, p)``; a 1-D array is treated as ``p = 1``.
    khat : float, optional
        Anticipated number of clusters. Divides the shape and rate by
        ``khat**2`` and sets ``c_x = 1 / ((p + 2) * khat**2 - 1)``.
    c_x : float, optional
        Explicit scale factor, overriding the default.

    Returns
    -------
    NIGHyperparameters
    """
    X = np.asarray(X, dtype=float)
    if X.ndim == 1:
        X = X.reshape(-1, 1)
    if X.ndim != 2 or X.shape[0] < 2:
        raise ValueError(
            f"Expected a 2-D sample with at least two rows, got shape {X.shape}."
        )

    p = X.shape[1]
    variance = X.var(axis=0, ddof=config.VARIANCE_DDOF)

    a_x = (p + 2) / 2
    b_x = variance * p / 2
    scale = config.DEFAULT_SCALE_FACTOR

    if khat is not None:
        khat = float(khat)
        if khat <= 0:
            raise ValueError(f"khat must be positive, got {khat}.")
        k2 = khat**2
        a_x = a_x / k2
        b_x = b_x / k2
        scale = 1.0 / ((p + 2) * k2 - 1.0)

    if c_x is not None:
        scale = float(c_x)

    return NIGHyperparameters(
        mu_0=np.zeros(p),
        c_x=float(scale),
        a_x=float(a_x),
        b_x=b_x,
        khat=khat,
    )


def format_hyperparameters(params: NIGHyperparameters, precision: int = 3) -> str:
    """Human-readable one-line summary used in the report text."""

    def _vec(values: np.ndarray) -> str:
        return "(" + ", ".join(f"{v:.{precision}g}" for v in values) + ")"

    parts = [
        f"mu_0 = {_vec(params.mu_0)}",
        f"c_x = {params.c_x:.{precision}g}",
        f"a_x = {params.a_x:.{precision}g}",
        f"b_x = {_vec(params.b_x)}",
    ]
    if params.khat is not None:
        parts.append(f"khat = {params.khat:g}")
    return ", ".join(parts)


__all__ = [
    "NIGHyperparameters",
    "compute_nig_hyperparameters",
    "format_hyperparameters",
]

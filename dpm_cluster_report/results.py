"""Loading of precomputed simulation result tables.

Each scenario ships one table with a row per completed MCMC run: the
concentration choice (``alpha``), the sample size (``n``) and the number of
clusters under the marginal posterior mode and the MAP, VI and Binder point
estimates. The tables are produced elsewhere; this module only reads and
checks them.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
import math
from pathlib import Path

import numpy as np
import pandas as pd
import pyreadr
from pyreadr.custom_errors import LibrdataError, PyreadrError

from dpm_cluster_report import config
from dpm_cluster_report.concentration import is_adaptive_level
from dpm_cluster_report.scenarios import Scenario

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS: tuple[str, ...] = (
    config.ALPHA_COLUMN,
    config.SAMPLE_SIZE_COLUMN,
    *config.ESTIMATOR_COLUMNS,
)

_RDATA_SUFFIXES = {".rdata", ".rda"}
_RDS_SUFFIXES = {".rds"}
_CSV_SUFFIXES = {".csv"}


class ResultTableError(ValueError):
    """Raised when a result file cannot be read or does not hold a valid table."""


@dataclass(frozen=True)
class ResultSummary:
    """Shape of a loaded result table."""

    n_rows: int
    columns: frozenset[str]


def scenario_result_path(scenario: Scenario, results_dir: str | Path) -> Path:
    """Path of the precomputed results file for ``scenario``."""
    return Path(results_dir) / scenario.results_file


def _has_required_columns(df: pd.DataFrame) -> bool:
    return all(col in df.columns for col in REQUIRED_COLUMNS)


def _select_r_object(objects: dict, path: Path, object_name: str | None) -> pd.DataFrame:
    if not objects:
        raise ResultTableError(f"No data objects found in {path}")

    if object_name is not None:
        if object_name not in objects:
            available = ", ".join(str(k) for k in objects)
            raise ResultTableError(
                f"Object {object_name!r} not found in {path}. Available: {available}"
            )
        return objects[object_name]

    if len(objects) == 1:
        return next(iter(objects.values()))

    for name, df in objects.items():
        if isinstance(df, pd.DataFrame) and _has_required_columns(df):
            logger.debug("Using object %r from %s", name, path)
            return df

    available = ", ".join(str(k) for k in objects)
    raise ResultTableError(
        f"None of the objects in {path} carries the result columns. "
        f"Available: {available}"
    )


def _read_table(path: Path, object_name: str | None) -> pd.DataFrame:
    suffix = path.suffix.lower()
    if suffix in _RDATA_SUFFIXES or suffix in _RDS_SUFFIXES:
        try:
            objects = pyreadr.read_r(str(path))
        except (PyreadrError, LibrdataError) as exc:
            raise ResultTableError(f"Could not read R data file {path}: {exc}") from exc
        if suffix in _RDS_SUFFIXES:
            # RDS files hold a single unnamed object keyed by None.
            return _select_r_object(objects, path, None)
        return _select_r_object(objects, path, object_name)

    if suffix in _CSV_SUFFIXES:
        try:
            return pd.read_csv(path)
        except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as exc:
            raise ResultTableError(f"Could not parse CSV file {path}: {exc}") from exc

    raise ResultTableError(f"Unsupported result file type: {path.suffix or path.name}")


def _coerce_counts(df: pd.DataFrame, path: Path | None) -> pd.DataFrame:
    out = df.copy()
    where = f" in {path}" if path is not None else ""
    for col in (config.SAMPLE_SIZE_COLUMN, *config.ESTIMATOR_COLUMNS):
        values = pd.to_numeric(out[col].astype(str), errors="coerce")
        if values.isna().any():
            raise ResultTableError(f"Column {col!r}{where} has non-numeric entries.")
        if not np.allclose(values, np.round(values), rtol=0.0, atol=1e-8):
            raise ResultTableError(f"Column {col!r}{where} has non-integer entries.")
        out[col] = np.round(values).astype(int)
    out[config.ALPHA_COLUMN] = _check_alpha_levels(out[config.ALPHA_COLUMN], where)
    return out


def _check_alpha_levels(alpha: pd.Series, where: str) -> pd.Series:
    labels = alpha.astype(str).str.strip()
    for level in labels.unique():
        if is_adaptive_level(level):
            continue
        try:
            value = float(level)
        except ValueError:
            raise ResultTableError(
                f"Column {config.ALPHA_COLUMN!r}{where} has unrecognised level {level!r}."
            ) from None
        if not math.isfinite(value) or value <= 0:
            raise ResultTableError(
                f"Column {config.ALPHA_COLUMN!r}{where} has invalid concentration "
                f"{level!r}; expected a positive number or an adaptive label."
            )
    return labels


def validate_result_table(df: pd.DataFrame, path: Path | None = None) -> pd.DataFrame:
    """Check a raw table and return it with integer counts and string alpha levels.

    Raises
    ------
    ResultTableError
        If required columns are missing, the table is empty, an alpha level is
        neither a positive number nor an adaptive label, or a cluster count is
        not a positive integer bounded by the sample size.
    """
    where = f" in {path}" if path is not None else ""
    if not isinstance(df, pd.DataFrame):
        raise ResultTableError(f"Expected a data frame{where}, got {type(df).__name__}.")

    missing = [col for col in REQUIRED_COLUMNS if col not in df.columns]
    if missing:
        raise ResultTableError(f"Missing required columns{where}: {missing}")
    if df.empty:
        raise ResultTableError(f"Result table{where} is empty.")

    out = _coerce_counts(df, path)
    n = out[config.SAMPLE_SIZE_COLUMN]
    for col in config.ESTIMATOR_COLUMNS:
        counts = out[col]
        if (counts < 1).any():
            raise ResultTableError(f"Column {col!r}{where} has non-positive counts.")
        if (counts > n).any():
            raise ResultTableError(
                f"Column {col!r}{where} has counts larger than the sample size."
            )
    return out.reset_index(drop=True)


def load_simulation_results(
    path: str | Path, object_name: str | None = None
) -> pd.DataFrame:
    """Read and validate a precomputed simulation result table.

    Parameters
    ----------
    path
        ``.RData``/``.rda``/``.rds`` file written by R, or a ``.csv`` export.
    object_name
        Name of the data frame inside an ``.RData`` file. When omitted the
        single object, or the first one carrying the result columns, is used.

    Raises
    ------
    FileNotFoundError
        If ``path`` does not exist.
    ResultTableError
        If the file is unreadable or the table is malformed.
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Result file not found: {path}")

    raw = _read_table(path, object_name)
    table = validate_result_table(raw, path)
    logger.info("Loaded %d runs from %s", len(table), path.name)
    return table


def load_scenario_results(scenario: Scenario, results_dir: str | Path) -> pd.DataFrame:
    return load_simulation_results(scenario_result_path(scenario, results_dir))


def describe_results(df: pd.DataFrame) -> ResultSummary:
    """Row count and column set of a result table."""
    return ResultSummary(n_rows=int(len(df)), columns=frozenset(map(str, df.columns)))


__all__ = [
    "REQUIRED_COLUMNS",
    "ResultTableError",
    "ResultSummary",
    "scenario_result_path",
    "validate_result_table",
    "load_simulation_results",
    "load_scenario_results",
    "describe_results",
]

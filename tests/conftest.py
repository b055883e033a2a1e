import os
import sys

import matplotlib

matplotlib.use("Agg")

import numpy as np
import pandas as pd
import pytest

# Ensure the project root is on sys.path so tests can import
# ``dpm_cluster_report`` without installing the package.
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)


ALPHA_LEVELS = ["adaptive", "0.5", "1", "2"]
SAMPLE_SIZES = [50, 200]
N_REPLICATES = 8


def make_results_frame(seed: int = 0, max_k: int = 4) -> pd.DataFrame:
    """Synthetic result table with the columns of the precomputed files."""
    rng = np.random.default_rng(seed)
    rows = []
    for alpha in ALPHA_LEVELS:
        for n in SAMPLE_SIZES:
            for rep in range(N_REPLICATES):
                rows.append(
                    {
                        "rep": rep,
                        "alpha": alpha,
                        "n": n,
                        "kmode": int(rng.integers(1, max_k + 1)),
                        "kMAP": int(rng.integers(1, max_k + 1)),
                        "kVI": int(rng.integers(1, 3)),
                        "kBinder": int(rng.integers(1, max_k + 1)),
                    }
                )
    return pd.DataFrame(rows)


@pytest.fixture
def results_frame() -> pd.DataFrame:
    return make_results_frame()


@pytest.fixture
def results_dir(tmp_path):
    """Directory with one .RData result file per registered scenario."""
    import pyreadr

    from dpm_cluster_report.scenarios import SCENARIOS

    for i, scenario in enumerate(SCENARIOS.values()):
        pyreadr.write_rdata(
            str(tmp_path / scenario.results_file),
            make_results_frame(seed=i),
            df_name="results",
        )
    return tmp_path

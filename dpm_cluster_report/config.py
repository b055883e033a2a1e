"""
Central configuration for the DP mixture cluster-count report.
"""

from __future__ import annotations

# --- Randomness ---

# Default seed for the illustrative samples. Results tables are precomputed,
# so this only affects the sample plots and the derived hyperparameters.
DEFAULT_SEED: int = 20240117

# --- Data generation ---

# Component means of the bimodal scenario are +/- this value.
BIMODAL_MEAN: float = 1.01

# Mixture weight of the positive component in the bimodal scenario.
BIMODAL_WEIGHT: float = 0.5

# --- Hyperparameters ---

# Default ratio of between-cluster to within-cluster variance (c_x).
DEFAULT_SCALE_FACTOR: float = 0.5

# Degrees of freedom used for the empirical variance (1 matches R's var()).
VARIANCE_DDOF: int = 1

# --- Results tables ---

# Columns every simulation result table must carry.
ALPHA_COLUMN: str = "alpha"
SAMPLE_SIZE_COLUMN: str = "n"

# Cluster-count columns in panel order: row-major 2x2 grid.
ESTIMATOR_COLUMNS: tuple[str, ...] = ("kmode", "kMAP", "kVI", "kBinder")

ESTIMATOR_TITLES: dict[str, str] = {
    "kmode": "Marginal posterior mode",
    "kMAP": "MAP clustering",
    "kVI": "VI clustering",
    "kBinder": "Binder clustering",
}

# Names used inside narrative sentences.
ESTIMATOR_SHORT_NAMES: dict[str, str] = {
    "kmode": "posterior mode",
    "kMAP": "MAP estimate",
    "kVI": "VI estimate",
    "kBinder": "Binder estimate",
}

# Labels that mark the sample-size dependent concentration choice.
ADAPTIVE_ALPHA_TOKENS: tuple[str, ...] = ("adaptive", "log")

# Numeric concentration levels are printed with this many decimals.
ALPHA_LABEL_DECIMALS: int = 2

# --- Plotting ---

GRID_FIGSIZE: tuple[float, float] = (14.0, 10.0)
SAMPLE_FIGSIZE: tuple[float, float] = (8.0, 6.0)

# Total width taken by the boxes of one concentration level.
BOX_GROUP_WIDTH: float = 0.8

# Colormap used to shade boxes by sample size.
SAMPLE_SIZE_CMAP: str = "Blues"

HISTOGRAM_BINS: int = 30

# --- Output ---

PDF_PAGE_SIZE_INCHES: tuple[float, float] = (11.0, 8.5)  # Landscape Letter

DEFAULT_RESULTS_DIR: str = "data"
DEFAULT_OUTPUT_DIR: str = "results"
REPORT_FILENAME_PREFIX: str = "dpm_report"

PNG_DPI: int = 150

# Environment overrides read by the CLI.
ENV_RESULTS_DIR: str = "DPM_REPORT_RESULTS_DIR"
ENV_SEED: str = "DPM_REPORT_SEED"

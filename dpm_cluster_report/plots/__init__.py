"""Plotting helpers: comparison grids, sample plots and report pages."""

from .boxplots import create_estimator_grid, plot_estimator_boxplot
from .sample import create_sample_plot
from .pages import generate_overview_page, generate_scenario_page
from .pdf import prepare_pdf_figure, resolve_pdf_output_path, open_pdf_pages

__all__ = [
    "create_estimator_grid",
    "plot_estimator_boxplot",
    "create_sample_plot",
    "generate_overview_page",
    "generate_scenario_page",
    "prepare_pdf_figure",
    "resolve_pdf_output_path",
    "open_pdf_pages",
]

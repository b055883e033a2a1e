"""PDF session helpers for report generation."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING

import matplotlib.pyplot as plt

from dpm_cluster_report import config

if TYPE_CHECKING:
    from matplotlib.backends.backend_pdf import PdfPages

PDF_PAGE_SIZE_INCHES = config.PDF_PAGE_SIZE_INCHES


def prepare_pdf_figure(fig: plt.Figure) -> None:
    """Normalize figure geometry before writing to PDF."""
    fig.set_size_inches(*PDF_PAGE_SIZE_INCHES, forward=True)


def resolve_pdf_output_path(
    output: str | Path | None,
    *,
    output_dir: Path,
    started_at: datetime,
) -> Path:
    """Explicit path with a `.pdf` suffix, or `<prefix>_<UTC stamp>.pdf` under *output_dir*.

    *started_at* must be timezone-aware; it is stamped in UTC.
    """
    if output:
        path = Path(output)
        return path.with_suffix(".pdf") if path.suffix == "" else path

    if started_at.tzinfo is None:
        raise ValueError("started_at must be timezone-aware.")
    stamp = started_at.astimezone(timezone.utc).strftime("%Y%m%d_%H%M%SZ")
    return output_dir / f"{config.REPORT_FILENAME_PREFIX}_{stamp}.pdf"


def open_pdf_pages(output_pdf: Path) -> "PdfPages":
    """Create the output directory and open a `PdfPages` writer."""
    from matplotlib.backends.backend_pdf import PdfPages

    output_pdf.parent.mkdir(parents=True, exist_ok=True)
    return PdfPages(output_pdf)


__all__ = [
    "PDF_PAGE_SIZE_INCHES",
    "prepare_pdf_figure",
    "resolve_pdf_output_path",
    "open_pdf_pages",
]

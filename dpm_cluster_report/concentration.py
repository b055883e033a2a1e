"""Helpers for the concentration-parameter (alpha) grouping axis.

Result tables carry alpha as a categorical column. Fixed choices are numeric
(0.5, 1, 2); the sample-size dependent choice proportional to ``1/log(n)`` is
stored as a label such as ``"adaptive"`` or ``"1/log(n)"``.
"""

from __future__ import annotations

import math
from typing import Iterable

from dpm_cluster_report import config


def is_adaptive_level(level: object) -> bool:
    """True when ``level`` names the sample-size dependent concentration."""
    if isinstance(level, (int, float)) and not isinstance(level, bool):
        return False
    text = str(level).strip().lower()
    if not text:
        return False
    try:
        float(text)
    except ValueError:
        return any(token in text for token in config.ADAPTIVE_ALPHA_TOKENS)
    return False


def _numeric_value(level: object) -> float:
    try:
        return float(str(level).strip())
    except ValueError:
        raise ValueError(f"Unrecognised concentration level: {level!r}") from None


def format_alpha_label(
    level: object,
    adaptive_label: str = "1/log(n)",
    decimals: int = config.ALPHA_LABEL_DECIMALS,
) -> str:
    """Render a concentration level as an x-axis category label.

    Adaptive levels become ``adaptive_label``; numeric levels are rounded to
    ``decimals`` places without trailing zeros (``0.5``, ``1``, ``0.33``).
    """
    if is_adaptive_level(level):
        return adaptive_label
    value = round(_numeric_value(level), decimals)
    if math.isclose(value, round(value)):
        return str(int(round(value)))
    return f"{value:.{decimals}f}".rstrip("0").rstrip(".")


def order_alpha_levels(levels: Iterable[object]) -> list[object]:
    """Unique levels with adaptive ones first, then numeric levels ascending."""
    seen: dict[str, object] = {}
    for level in levels:
        seen.setdefault(str(level), level)

    adaptive = [lvl for lvl in seen.values() if is_adaptive_level(lvl)]
    numeric = [lvl for lvl in seen.values() if not is_adaptive_level(lvl)]
    adaptive.sort(key=str)
    numeric.sort(key=_numeric_value)
    return adaptive + numeric


__all__ = ["is_adaptive_level", "format_alpha_label", "order_alpha_levels"]

"""Tests for concentration-level labels and ordering."""

import numpy as np
import pytest

from dpm_cluster_report.concentration import (
    format_alpha_label,
    is_adaptive_level,
    order_alpha_levels,
)


@pytest.mark.parametrize(
    "level, expected",
    [
        ("adaptive", True),
        ("Adaptive", True),
        ("1/log(n)", True),
        ("2/log(n)", True),
        ("0.5", False),
        (0.5, False),
        (np.float64(2.0), False),
        (1, False),
        ("", False),
    ],
)
def test_is_adaptive_level(level, expected):
    assert is_adaptive_level(level) is expected


@pytest.mark.parametrize(
    "level, expected",
    [
        ("0.5", "0.5"),
        (0.5, "0.5"),
        ("1", "1"),
        (2.0, "2"),
        (1 / 3, "0.33"),
        ("0.666666", "0.67"),
        (0.999, "1"),
    ],
)
def test_numeric_levels_rounded_to_two_decimals(level, expected):
    assert format_alpha_label(level) == expected


def test_adaptive_level_rendered_as_fraction():
    assert format_alpha_label("adaptive") == "1/log(n)"
    assert format_alpha_label("adaptive", adaptive_label="2/log(n)") == "2/log(n)"
    assert format_alpha_label("1/log(n)", adaptive_label="2/log(n)") == "2/log(n)"


def test_unrecognised_level_raises():
    with pytest.raises(ValueError):
        format_alpha_label("banana")


def test_order_puts_adaptive_first_then_numeric_ascending():
    levels = ["2", "0.5", "adaptive", "1", "0.5", "2"]
    assert order_alpha_levels(levels) == ["adaptive", "0.5", "1", "2"]


def test_order_handles_numeric_values():
    assert order_alpha_levels([2.0, 0.5, 1.0]) == [0.5, 1.0, 2.0]

from .distributions import (
    generate_standard_normal,
    generate_unit_disc,
    generate_bimodal_mixture,
)
from .generate_scenario_data import generate_scenario_data

__all__ = [
    "generate_standard_normal",
    "generate_unit_disc",
    "generate_bimodal_mixture",
    "generate_scenario_data",
]

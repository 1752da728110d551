# BB drift module
from .calculator import BBDrift, CalculatorConfiguration, DriftStep, calculate_drift, drift_table, format_drift_table, simulate
from .sight import Sight, pixel_offset, reticle_position

__all__ = [
    "BBDrift", "CalculatorConfiguration", "DriftStep",
    "calculate_drift", "drift_table", "format_drift_table", "simulate",
    "Sight", "pixel_offset", "reticle_position",
]

"""Utility functions for HermiteKit package."""

from .numerics import as_1d_float_array, is_out_of_bounds
from .validate import validate_knots, validate_points

__all__ = [
    "as_1d_float_array",
    "is_out_of_bounds",
    "validate_knots",
    "validate_points",
]

"""Numerical utilities."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

__all__ = [
    "as_1d_float_array",
    "is_out_of_bounds",
]


def as_1d_float_array(x: ArrayLike, *, name: str = "x") -> NDArray[np.float64]:
    """Convert input to a 1D float array.

    Scalars are promoted to arrays of length one.

    Args:
        x: Input array-like.
        name: Name used in error messages.

    Returns:
        1D NumPy array with dtype float64.

    Raises:
        ValueError: If the converted array has more than one dimension.
    """
    arr = np.atleast_1d(np.asarray(x, dtype=float))
    if arr.ndim != 1:
        raise ValueError(f"{name} must be 1D, got shape {arr.shape}")
    return arr.astype(np.float64, copy=False)


def is_out_of_bounds(x: float, lower: float, upper: float) -> bool:
    """Checks whether ``x`` lies strictly outside ``[lower, upper]``.

    The boundary values themselves are in bounds. A ``nan`` abscissa is
    never out of bounds since it compares false against both limits.

    Args:
        x: Point to test.
        lower: Lower bound.
        upper: Upper bound.

    Returns:
        True if ``x < lower`` or ``x > upper``.
    """
    return bool(x < lower or x > upper)

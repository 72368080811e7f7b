"""Configuration for the Newton-Raphson root search.

Normalizes the ``tolerance`` and ``iterations`` settings accepted by
:meth:`HermitePolynomial.find_root`. Unusable settings fall back to the
defaults instead of failing.
"""

from __future__ import annotations

import math
import numbers

DEFAULT_TOLERANCE = 1e-6
DEFAULT_ITERATIONS = 10


class NewtonConfig:
    """Configuration for the Newton-Raphson root search.

    Attributes:
        tolerance: Residual threshold for accepting the seed and step-size
            threshold for accepting an iterate.
        iterations: Maximum number of Newton steps.
    """

    def __init__(
        self,
        tolerance: float | None = DEFAULT_TOLERANCE,
        iterations: int | None = DEFAULT_ITERATIONS,
    ):
        """Initialize configuration.

        Args:
            tolerance:
                Positive threshold. A falsy value (``None`` or ``0``), or one
                that is not a finite number, falls back to ``1e-6``.

            iterations:
                Maximum number of Newton steps. Anything other than an
                integer strictly greater than 1 falls back to ``10``, so
                ``iterations=1`` also runs ten steps. Floats with an
                integral value such as ``5.0`` count as integers; booleans
                do not.
        """
        self.tolerance = self._normalize_tolerance(tolerance)
        self.iterations = self._normalize_iterations(iterations)

    @staticmethod
    def _normalize_tolerance(tolerance) -> float:
        if isinstance(tolerance, bool) or not isinstance(tolerance, numbers.Real):
            return DEFAULT_TOLERANCE
        if not tolerance or not math.isfinite(tolerance):
            return DEFAULT_TOLERANCE
        return float(tolerance)

    @staticmethod
    def _normalize_iterations(iterations) -> int:
        if isinstance(iterations, bool) or not isinstance(iterations, numbers.Real):
            return DEFAULT_ITERATIONS
        # integral floats such as 5.0 count as integers
        if not isinstance(iterations, numbers.Integral):
            if not math.isfinite(iterations) or not float(iterations).is_integer():
                return DEFAULT_ITERATIONS
        if iterations <= 1:
            return DEFAULT_ITERATIONS
        return int(iterations)

    def __repr__(self) -> str:
        return f"NewtonConfig(tolerance={self.tolerance!r}, iterations={self.iterations!r})"

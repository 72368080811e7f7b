"""Hermite interpolating polynomials in Newton form.

A :class:`HermitePolynomial` is built once from ``(x, y)`` samples and is
immutable afterwards. Repeated abscissae carry derivative data: for a group of
samples sharing ``x``, the first is the value, the second the first
derivative, and so on.

Examples:
=========

Linear interpolation through two samples::
>>> from hermitekit import HermitePolynomial
>>> p = HermitePolynomial([(0.0, 0.0), (1.0, 1.0)])
>>> p.evaluate(0.5)
0.5

Value and slope at a single abscissa::
>>> p = HermitePolynomial([(1.0, 5.0), (1.0, 2.0)])
>>> p.derivative(1.0)
(5.0, 2.0)

Newton-Raphson search for the root of ``2 (x - 3)``::
>>> p = HermitePolynomial([(2.0, -2.0), (4.0, 2.0)])
>>> p.find_root(10.0)
3.0
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from hermitekit.errors import InvalidArgument
from hermitekit.logger import hermitekit_logger
from hermitekit.polynomial.divided_differences import (
    divided_differences,
    sort_samples,
)
from hermitekit.polynomial.newton_config import (
    DEFAULT_ITERATIONS,
    DEFAULT_TOLERANCE,
    NewtonConfig,
)
from hermitekit.utils.types import PointsLike
from hermitekit.utils.validate import validate_points

__all__ = ["HermitePolynomial", "hermite_polynomial"]


class HermitePolynomial:
    """Hermite interpolating polynomial built with Newton divided differences.

    Attributes:
        nodes: Read-only array of shape ``(n, 2)``. Column 0 holds the sorted
            abscissae and column 1 the Newton coefficient of each node (not
            the original sample value).
    """

    def __init__(self, points: PointsLike) -> None:
        """Initialises the polynomial from interpolation samples.

        Args:
            points: Non-empty sequence of ``(x, y)`` pairs. Coordinates that
                cannot be read as numbers become ``nan``. Samples sharing an
                abscissa encode successive derivatives in input order.

        Raises:
            InvalidArgument: If ``points`` is not a sequence of pairs or is
                empty. Use :func:`hermite_polynomial` to receive the error as
                a return value instead.
        """
        samples = validate_points(points)
        x, y = sort_samples(samples)
        coeffs = divided_differences(x, y)

        if not np.all(np.isfinite(coeffs)):
            hermitekit_logger.warning(
                "Non-finite Newton coefficients for abscissae %s; "
                "evaluations will propagate inf/nan.",
                x.tolist(),
            )

        nodes = np.column_stack((x, coeffs))
        nodes.setflags(write=False)
        self._nodes = nodes

    @property
    def nodes(self) -> NDArray[np.float64]:
        return self._nodes

    @property
    def abscissae(self) -> NDArray[np.float64]:
        """Sorted node abscissae."""
        return self._nodes[:, 0]

    @property
    def coefficients(self) -> NDArray[np.float64]:
        """Newton coefficients, lowest order first."""
        return self._nodes[:, 1]

    @property
    def degree(self) -> int:
        """Formal degree of the interpolant (number of nodes minus one)."""
        return self._nodes.shape[0] - 1

    def __len__(self) -> int:
        return self._nodes.shape[0]

    def __repr__(self) -> str:
        return f"HermitePolynomial(degree={self.degree}, abscissae={self.abscissae.tolist()})"

    def evaluate(self, x: float) -> float:
        """Evaluates the polynomial at ``x``.

        Horner's scheme is applied to the Newton form starting from the
        highest-order coefficient.

        Args:
            x: Evaluation point.

        Returns:
            The polynomial value as a float.
        """
        return float(self._horner(np.float64(x)))

    def __call__(self, x_new: ArrayLike) -> NDArray[np.floating]:
        """Evaluates the polynomial at every entry of ``x_new``.

        Args:
            x_new: Scalar or array of evaluation points.

        Returns:
            Values with the same shape as ``x_new``.
        """
        return np.asarray(self._horner(np.asarray(x_new, dtype=float)), dtype=float)

    def derivative(self, x: float) -> tuple[float, float]:
        """Evaluates the polynomial and its first derivative at ``x``.

        Both are accumulated in one pass of the recurrence
        ``dP = dP * (x - x_i) + P`` and ``P = P * (x - x_i) + c_i``.

        Args:
            x: Evaluation point.

        Returns:
            Tuple ``(P(x), P'(x))``.
        """
        x = np.float64(x)
        xs = self.abscissae
        cs = self.coefficients
        value = cs[-1]
        slope = np.float64(0.0)
        with np.errstate(all="ignore"):
            for i in range(cs.size - 2, -1, -1):
                slope = slope * (x - xs[i]) + value
                value = value * (x - xs[i]) + cs[i]
        return float(value), float(slope)

    def find_root(
        self,
        seed: float,
        tolerance: float | None = DEFAULT_TOLERANCE,
        iterations: int | None = DEFAULT_ITERATIONS,
    ) -> float | None:
        """Searches a root of the polynomial with Newton-Raphson iteration.

        The residual and slope at each iterate come from :meth:`derivative`.
        If ``|P(seed)| < tolerance`` the seed is returned without iterating.
        Otherwise ``x1 = x0 - P(x0) / P'(x0)`` is repeated until the step
        satisfies ``|x1 - x0| <= tolerance``.

        A vanishing slope is not guarded: the step becomes ``inf`` or ``nan``
        and the search ends without converging.

        Args:
            seed: Starting point.
            tolerance: Residual and step-size threshold. Unusable values fall
                back to ``1e-6`` (see :class:`NewtonConfig`).
            iterations: Maximum number of steps. Anything other than an
                integer greater than 1 falls back to ``10``.

        Returns:
            The converged iterate, or ``None`` if the step-size test never
            passed within ``iterations`` steps.
        """
        config = NewtonConfig(tolerance, iterations)

        residual, _ = self.derivative(seed)
        if abs(residual) < config.tolerance:
            return seed

        x1 = np.float64(seed)
        with np.errstate(all="ignore"):
            for _ in range(config.iterations):
                x0 = x1
                residual, slope = self.derivative(x0)
                x1 = x0 - np.float64(residual) / np.float64(slope)
                if abs(x1 - x0) <= config.tolerance:
                    return float(x1)

        hermitekit_logger.debug(
            "Newton-Raphson did not converge from seed %r in %d iterations (last iterate %r).",
            seed,
            config.iterations,
            float(x1),
        )
        return None

    def _horner(self, x):
        xs = self.abscissae
        cs = self.coefficients
        res = cs[-1] + np.zeros_like(x)
        with np.errstate(all="ignore"):
            for i in range(cs.size - 2, -1, -1):
                res = res * (x - xs[i]) + cs[i]
        return res


def hermite_polynomial(points: PointsLike) -> HermitePolynomial | InvalidArgument:
    """Builds a :class:`HermitePolynomial`, returning errors instead of raising.

    Args:
        points: Non-empty sequence of ``(x, y)`` pairs.

    Returns:
        The polynomial, or the :class:`InvalidArgument` describing why
        ``points`` was rejected.
    """
    try:
        return HermitePolynomial(points)
    except InvalidArgument as err:
        return err

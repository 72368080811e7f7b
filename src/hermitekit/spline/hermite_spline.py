"""Piecewise Hermite splines.

A :class:`HermiteSpline` keeps its knots sorted by abscissa and holds one
:class:`~hermitekit.polynomial.hermite_polynomial.HermitePolynomial` per pair
of neighbouring knots. Each knot ``[x, y, y', ...]`` carries a value and any
number of derivatives; a segment polynomial matches all of them at both of
its ends.

Examples:
=========

Values only, so every segment is linear::
>>> from hermitekit import HermiteSpline
>>> spline = HermiteSpline([[0.0, 0.0], [1.0, 1.0], [2.0, 4.0]])
>>> spline.evaluate(1.5)
2.5
>>> spline.evaluate(3.0) is None
True

Inserting a knot splits the segment that contains it::
>>> spline.add_point([0.5, 2.0])
>>> len(spline.segment_polynomials)
3
>>> spline.evaluate(0.5)
2.0
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from hermitekit.errors import InvalidArgument, OutOfRange, UnsupportedOperation
from hermitekit.logger import hermitekit_logger
from hermitekit.polynomial.hermite_polynomial import HermitePolynomial
from hermitekit.spline.knots import insertion_index, segment_index, segment_samples
from hermitekit.utils.numerics import as_1d_float_array, is_out_of_bounds
from hermitekit.utils.types import Knot
from hermitekit.utils.validate import validate_knot, validate_knots

__all__ = ["HermiteSpline", "hermite_spline"]


class HermiteSpline:
    """Piecewise Hermite interpolant over sorted knots.

    Attributes:
        knots: Knots ``(x, y, y', ...)`` ascending in ``x``.
        segment_polynomials: One polynomial per pair of neighbouring knots;
            ``segment_polynomials[i]`` is built from ``knots[i]`` and
            ``knots[i + 1]`` only.
    """

    def __init__(self, knots: Sequence[Knot]) -> None:
        """Initialises the spline.

        Args:
            knots: At least two knots ``[x, y, y', y'', ...]`` with distinct
                abscissae. Knots given out of order are sorted by ``x``.
                Knots may carry different numbers of derivatives.

        Raises:
            InvalidArgument: If fewer than two knots are given, a knot lacks
                a value, or two knots share an abscissa. Use
                :func:`hermite_spline` to receive the error as a return
                value instead.
        """
        self._knots = validate_knots(knots)
        self._xs = np.array([k[0] for k in self._knots], dtype=float)
        self._segments = [
            self._build_segment(left, right)
            for left, right in zip(self._knots[:-1], self._knots[1:])
        ]

    @property
    def knots(self) -> tuple[tuple[float, ...], ...]:
        return tuple(self._knots)

    @property
    def segment_polynomials(self) -> tuple[HermitePolynomial, ...]:
        return tuple(self._segments)

    @property
    def bounds(self) -> tuple[float, float]:
        """Abscissae of the first and last knot."""
        return float(self._xs[0]), float(self._xs[-1])

    def __repr__(self) -> str:
        lo, hi = self.bounds
        return f"HermiteSpline(n_knots={len(self._knots)}, bounds=({lo!r}, {hi!r}))"

    def out_of_bounds(self, x: float) -> bool:
        """Checks whether ``x`` lies strictly outside the knot range.

        Args:
            x: Query point.

        Returns:
            True if ``x`` is below the first knot or above the last one.
            Both boundary knots are in bounds.
        """
        lo, hi = self.bounds
        return is_out_of_bounds(x, lo, hi)

    def evaluate(self, x: float) -> float | None:
        """Evaluates the spline at ``x``.

        Args:
            x: Query point.

        Returns:
            The value of the segment polynomial containing ``x``, or ``None``
            if ``x`` is out of bounds.
        """
        idx = self._get_index_of_segment(x)
        if idx is None:
            return None
        return self._segments[idx].evaluate(x)

    def derivative(self, x: float) -> tuple[float, float] | None:
        """Evaluates the spline and its first derivative at ``x``.

        Args:
            x: Query point.

        Returns:
            Tuple ``(S(x), S'(x))`` from the segment containing ``x``, or
            ``None`` if ``x`` is out of bounds.
        """
        idx = self._get_index_of_segment(x)
        if idx is None:
            return None
        return self._segments[idx].derivative(x)

    def __call__(self, x_new: ArrayLike, fill_value: float = np.nan) -> NDArray[np.floating]:
        """Evaluates the spline at every entry of ``x_new``.

        Args:
            x_new: Scalar or array of query points.
            fill_value: Value used for points outside the knot range.

        Returns:
            Values with the same shape as ``x_new``.
        """
        x_arr = np.asarray(x_new, dtype=float)
        flat_x = as_1d_float_array(x_arr.ravel(), name="x_new")
        flat_y = np.full(flat_x.shape, fill_value, dtype=float)
        for k, xk in enumerate(flat_x):
            idx = self._get_index_of_segment(xk)
            if idx is not None:
                flat_y[k] = self._segments[idx].evaluate(xk)
        return flat_y.reshape(x_arr.shape)

    def add_point(
        self,
        point: Knot,
        allow_outside_bounds: bool = False,
    ) -> None | InvalidArgument | OutOfRange:
        """Inserts a knot and rebuilds only the segments next to it.

        An interior knot splits the segment that contains it into two fresh
        polynomials. A knot beyond either end, when allowed, adds one new
        boundary segment. All other segments are left untouched.

        Args:
            point: Knot ``[x, y, y', ...]``.
            allow_outside_bounds: Whether a knot outside the current range may
                extend the spline.

        Returns:
            ``None`` on success. Otherwise the spline is unchanged and the
            error is returned: :class:`OutOfRange` for a point outside the
            range without permission, :class:`InvalidArgument` for a
            malformed point or one whose abscissa is already a knot.
        """
        try:
            knot = validate_knot(point)
        except InvalidArgument as err:
            return err

        x = knot[0]
        if np.any(self._xs == x):
            return InvalidArgument(f"Invalid argument. A knot already exists at x={x!r}.")

        if self.out_of_bounds(x):
            if not allow_outside_bounds:
                lo, hi = self.bounds
                return OutOfRange(f"x={x!r} is outside the spline range [{lo!r}, {hi!r}].")
            if x < self._xs[0]:
                self._insert(0, knot, 0, self._build_segment(knot, self._knots[0]))
            else:
                self._insert(
                    len(self._knots),
                    knot,
                    len(self._segments),
                    self._build_segment(self._knots[-1], knot),
                )
            return None

        i = insertion_index(self._xs, x)
        right = self._knots[i + 1]
        self._segments[i] = self._build_segment(self._knots[i], knot)
        self._insert(i + 1, knot, i + 1, self._build_segment(knot, right))
        return None

    def delete_point(self, index_or_point) -> UnsupportedOperation:
        """Knot deletion is not supported.

        Args:
            index_or_point: Knot index or knot to remove.

        Returns:
            An :class:`UnsupportedOperation` error. The spline is unchanged.
        """
        return UnsupportedOperation(
            f"Deleting knots is not supported (requested {index_or_point!r})."
        )

    def _get_index_of_segment(self, x: float) -> int | None:
        return segment_index(self._xs, x)

    def _insert(
        self,
        knot_pos: int,
        knot: tuple[float, ...],
        seg_pos: int,
        poly: HermitePolynomial,
    ) -> None:
        self._knots.insert(knot_pos, knot)
        self._segments.insert(seg_pos, poly)
        self._xs = np.insert(self._xs, knot_pos, knot[0])
        hermitekit_logger.debug(
            "Inserted knot at x=%r (knot %d, segment %d); spline now has %d segments.",
            knot[0],
            knot_pos,
            seg_pos,
            len(self._segments),
        )

    @staticmethod
    def _build_segment(left: Sequence[float], right: Sequence[float]) -> HermitePolynomial:
        return HermitePolynomial(segment_samples(left, right))


def hermite_spline(knots: Sequence[Knot]) -> HermiteSpline | InvalidArgument:
    """Builds a :class:`HermiteSpline`, returning errors instead of raising.

    Args:
        knots: At least two knots ``[x, y, y', ...]`` with distinct abscissae.

    Returns:
        The spline, or the :class:`InvalidArgument` describing why ``knots``
        was rejected.
    """
    try:
        return HermiteSpline(knots)
    except InvalidArgument as err:
        return err

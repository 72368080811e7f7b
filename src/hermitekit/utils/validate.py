"""Validation utilities for HermiteKit."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Any

import numpy as np

from hermitekit.errors import InvalidArgument
from hermitekit.utils.types import Knot, PointsLike

__all__ = [
    "is_sequence",
    "to_float",
    "validate_points",
    "validate_knot",
    "validate_knots",
]


def is_sequence(obj: Any) -> bool:
    """Checks whether ``obj`` is an ordered sequence of items.

    Lists, tuples and NumPy arrays with at least one dimension count as
    sequences. Strings and bytes do not.

    Args:
        obj: Object to test.

    Returns:
        True if ``obj`` can be indexed as a sequence of items.
    """
    if isinstance(obj, np.ndarray):
        return obj.ndim >= 1
    return isinstance(obj, Sequence) and not isinstance(obj, (str, bytes))


def to_float(value: Any) -> float:
    """Converts a coordinate to a float, mapping unparsable input to ``nan``.

    The conversion is deliberately permissive: a coordinate that cannot be
    read as a number does not fail, it becomes ``nan`` and propagates through
    every later computation.

    Args:
        value: Number, numeric string or anything else.

    Returns:
        The value as a Python float, or ``nan``.
    """
    try:
        return float(value)
    except (TypeError, ValueError):
        return float("nan")


def validate_points(points: PointsLike) -> list[tuple[float, float]]:
    """Validates interpolation samples and converts them to ``(x, y)`` floats.

    Args:
        points: Non-empty sequence of ``(x, y)`` pairs. A repeated ``x``
            encodes successive derivatives at that abscissa.

    Returns:
        A new list of ``(x, y)`` float tuples in input order.

    Raises:
        InvalidArgument: If ``points`` is not a sequence, is empty, or
            contains an item that is not a 2-element pair.
    """
    if not is_sequence(points):
        raise InvalidArgument(
            "Invalid argument. Must provide a sequence of (x, y) points; "
            f"got {type(points).__name__}."
        )
    if len(points) < 1:
        raise InvalidArgument("Invalid argument. Must provide at least a point.")

    samples = []
    for k, point in enumerate(points):
        if not is_sequence(point) or len(point) != 2:
            raise InvalidArgument(
                f"Invalid argument. Point {k} must be an (x, y) pair; got {point!r}."
            )
        samples.append((to_float(point[0]), to_float(point[1])))
    return samples


def validate_knot(knot: Knot) -> tuple[float, ...]:
    """Validates a spline knot ``[x, y, y', y'', ...]``.

    Args:
        knot: Abscissa followed by the value and optional derivatives.

    Returns:
        The knot as a tuple of floats.

    Raises:
        InvalidArgument: If ``knot`` is not a sequence with at least an
            abscissa and a value, or its abscissa is not a number.
    """
    if not is_sequence(knot) or len(knot) < 2:
        raise InvalidArgument(
            f"Invalid argument. A knot needs an abscissa and a value; got {knot!r}."
        )
    parsed = tuple(to_float(v) for v in knot)
    # knots are ordered by x, which nan cannot take part in
    if math.isnan(parsed[0]):
        raise InvalidArgument(f"Invalid argument. Knot abscissa must be a number; got {knot[0]!r}.")
    return parsed


def validate_knots(knots: Sequence[Knot]) -> list[tuple[float, ...]]:
    """Validates spline knots and returns them sorted by abscissa.

    Knots supplied out of order are sorted stably by ``x``.

    Args:
        knots: Sequence of knots ``[x, y, y', ...]``.

    Returns:
        A new list of knot tuples, ascending in ``x``.

    Raises:
        InvalidArgument: If fewer than two knots are given, a knot is
            malformed, or two knots share an abscissa.
    """
    if not is_sequence(knots):
        raise InvalidArgument(
            f"Invalid argument. Must provide a sequence of knots; got {type(knots).__name__}."
        )
    if len(knots) < 2:
        raise InvalidArgument(
            f"Invalid argument. A spline needs at least two knots; got {len(knots)}."
        )

    parsed = sorted((validate_knot(k) for k in knots), key=lambda k: k[0])
    xs = np.array([k[0] for k in parsed], dtype=float)
    if np.any(xs[1:] == xs[:-1]):
        raise InvalidArgument(f"Invalid argument. Knot abscissae must be unique; got {xs.tolist()}.")
    return parsed

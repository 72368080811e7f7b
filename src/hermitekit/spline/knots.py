"""Knot expansion and segment lookup for Hermite splines.

A knot ``[x, y, y', y'', ...]`` is expanded into repeated-abscissa samples
``(x, y), (x, y'), (x, y''), ...``. The position of a sample among those
sharing ``x`` is the derivative order it carries, which is the convention
:mod:`hermitekit.polynomial.divided_differences` relies on.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

__all__ = [
    "expand_knot",
    "segment_samples",
    "segment_index",
    "insertion_index",
]


def expand_knot(knot: Sequence[float]) -> list[tuple[float, float]]:
    """Expands a knot into one ``(x, value)`` sample per derivative order.

    Args:
        knot: Abscissa followed by the value and any derivatives.

    Returns:
        Samples in derivative order, all sharing the knot's abscissa.
    """
    x = knot[0]
    return [(x, v) for v in knot[1:]]


def segment_samples(
    left: Sequence[float],
    right: Sequence[float],
) -> list[tuple[float, float]]:
    """Returns the Hermite samples of the segment between two knots."""
    return expand_knot(left) + expand_knot(right)


def segment_index(xs: np.ndarray, x: float) -> int | None:
    """Finds the segment containing ``x``.

    The segment is the one whose left boundary is the greatest knot ``<= x``.
    At the last knot there is no segment to the right, so ``x == xs[-1]``
    resolves to the last segment.

    Args:
        xs: Sorted knot abscissae, at least two of them.
        x: Query point.

    Returns:
        Segment index in ``[0, len(xs) - 2]``, or ``None`` if ``x`` lies
        strictly outside ``[xs[0], xs[-1]]``.
    """
    if x < xs[0] or x > xs[-1]:
        return None
    idx = int(np.searchsorted(xs, x, side="right")) - 1
    return min(max(idx, 0), xs.size - 2)


def insertion_index(xs: np.ndarray, x: float) -> int:
    """Finds the segment a new interior knot at ``x`` splits.

    Args:
        xs: Sorted knot abscissae.
        x: Abscissa of the new knot, with ``xs[0] < x < xs[-1]``.

    Returns:
        The first index ``i`` such that ``x <= xs[i + 1]``.
    """
    return max(int(np.searchsorted(xs, x, side="left")) - 1, 0)

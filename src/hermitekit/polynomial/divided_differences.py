"""Newton divided differences with coincident nodes.

Samples that share an abscissa encode successive derivatives at that point:
the first sample of a coincident group is the value, the second the first
derivative, the third the second derivative, and so on. With this convention
the table below produces the coefficients of the Hermite interpolating
polynomial in Newton form,

.. math::

    P(x) = c_0 + (x - x_0)\\left(c_1 + (x - x_1)\\left(c_2 + \\dots\\right)\\right).

Examples:
=========

Value 5 and slope 2 at ``x = 1``::
>>> import numpy as np
>>> from hermitekit.polynomial.divided_differences import divided_differences
>>> divided_differences(np.array([1.0, 1.0]), np.array([5.0, 2.0])).tolist()
[5.0, 2.0]
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray

from hermitekit.utils.types import FloatArray

__all__ = [
    "sort_samples",
    "group_starts",
    "divided_differences",
]


def sort_samples(
    samples: list[tuple[float, float]],
) -> tuple[FloatArray, FloatArray]:
    """Sorts samples ascending by abscissa.

    The sort is stable so that samples sharing an abscissa keep their input
    order, which is the derivative order they encode.

    Args:
        samples: ``(x, y)`` pairs.

    Returns:
        Tuple ``(x, y)`` of new float64 arrays.
    """
    data = np.array(samples, dtype=np.float64).reshape(-1, 2)
    order = np.argsort(data[:, 0], kind="stable")
    return data[order, 0].copy(), data[order, 1].copy()


def group_starts(x: FloatArray) -> NDArray[np.intp]:
    """Returns, for every node, the index of the first node with the same abscissa.

    Args:
        x: Sorted abscissae.

    Returns:
        Integer array of the same length as ``x``.
    """
    starts = np.zeros(x.size, dtype=np.intp)
    for j in range(1, x.size):
        starts[j] = starts[j - 1] if x[j] == x[j - 1] else j
    return starts


def divided_differences(
    x: FloatArray,
    y: FloatArray,
) -> FloatArray:
    """Builds the Newton coefficients of the Hermite interpolant.

    The coefficient column starts with the value sample of each node's
    coincident group (``y`` itself for distinct nodes) and is overwritten order
    by order. At order ``i`` the rows are visited from the bottom up so that
    row ``j`` only reads row ``j - 1`` of the previous order.

    * If ``x[j] == x[j - i]`` the nodes ``x[j-i..j]`` coincide and the
      coefficient is ``f^(i)(x[j]) / i!``, where the ``i``-th derivative is
      the sample ``i`` places after the start of the coincident group.
    * Otherwise the usual divided difference
      ``(c[j] - c[j-1]) / (x[j] - x[j-i])`` is used.

    Division by zero is not guarded. Abscissae that are distinct but produce
    a zero denominator yield ``inf`` or ``nan`` as in IEEE-754 arithmetic.

    Args:
        x: Sorted abscissae, shape ``(n,)``.
        y: Sample values aligned with ``x``, shape ``(n,)``.

    Returns:
        A new array of ``n`` Newton coefficients.
    """
    n = x.size
    raw = np.array(y, dtype=np.float64)
    starts = group_starts(x)
    # zeroth order: every node of a coincident group carries the group's value
    coeffs = raw[starts]

    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        for i in range(1, n):
            for j in range(n - 1, i - 1, -1):
                if x[j] == x[j - i]:
                    coeffs[j] = raw[starts[j] + i] / math.factorial(i)
                else:
                    coeffs[j] = (coeffs[j] - coeffs[j - 1]) / (x[j] - x[j - i])
    return coeffs

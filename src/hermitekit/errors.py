"""Error kinds reported by HermiteKit.

Structural misuse is reported with one of the classes below. The
value-returning entry points (:func:`hermitekit.hermite_polynomial`,
:func:`hermitekit.hermite_spline`, :meth:`HermiteSpline.add_point` and
:meth:`HermiteSpline.delete_point`) hand these back as return values; class
constructors raise them. Numerical edge cases are never errors: they surface
as ``inf``, ``nan`` or ``None``.
"""

from __future__ import annotations

__all__ = [
    "HermiteKitError",
    "InvalidArgument",
    "OutOfRange",
    "UnsupportedOperation",
    "is_error",
]


class HermiteKitError(Exception):
    """Base class of all HermiteKit errors."""


class InvalidArgument(HermiteKitError, ValueError):
    """Raises when an input is malformed, empty or of the wrong kind."""


class OutOfRange(HermiteKitError, ValueError):
    """Raises when a point lies outside the spline and extension is not allowed."""


class UnsupportedOperation(HermiteKitError, NotImplementedError):
    """Raises for operations that are declared but not supported."""


def is_error(value: object) -> bool:
    """Checks whether a value returned by HermiteKit is an error value.

    Args:
        value: Any value returned by a HermiteKit entry point.

    Returns:
        True if ``value`` is a :class:`HermiteKitError`; otherwise False.
    """
    return isinstance(value, HermiteKitError)

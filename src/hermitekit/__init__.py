"""Provides all hermitekit interpolants."""

from importlib.metadata import PackageNotFoundError, version

from hermitekit.errors import (
    InvalidArgument,
    OutOfRange,
    UnsupportedOperation,
    is_error,
)
from hermitekit.polynomial.hermite_polynomial import (
    HermitePolynomial,
    hermite_polynomial,
)
from hermitekit.polynomial.newton_config import NewtonConfig
from hermitekit.spline.hermite_spline import HermiteSpline, hermite_spline

try:
    __version__ = version("hermitekit")
except PackageNotFoundError:
    pass

__all__ = [
    "HermitePolynomial",
    "HermiteSpline",
    "NewtonConfig",
    "InvalidArgument",
    "OutOfRange",
    "UnsupportedOperation",
    "hermite_polynomial",
    "hermite_spline",
    "is_error",
]

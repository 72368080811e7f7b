"""Hermite interpolating polynomials in Newton form."""

from hermitekit.polynomial.hermite_polynomial import (
    HermitePolynomial,
    hermite_polynomial,
)
from hermitekit.polynomial.newton_config import NewtonConfig

__all__ = ["HermitePolynomial", "NewtonConfig", "hermite_polynomial"]

"""Pytest configuration file with shared polynomial and spline fixtures."""

import logging

import pytest

from hermitekit import HermitePolynomial, HermiteSpline
from hermitekit.logger import hermitekit_logger

__all__ = ["linear_spline", "cubic_spline", "shifted_square"]


@pytest.fixture(autouse=True)
def _propagate_hermitekit_logs():
    """Keep the package logger at DEBUG so caplog sees every record."""
    previous = hermitekit_logger.level
    hermitekit_logger.setLevel(logging.DEBUG)
    yield
    hermitekit_logger.setLevel(previous)


@pytest.fixture
def linear_spline():
    """Value-only spline through (0, 0), (1, 1), (2, 4)."""
    return HermiteSpline([[0.0, 0.0], [1.0, 1.0], [2.0, 4.0]])


@pytest.fixture
def cubic_spline():
    """Spline with values and slopes of x**3 at 0, 1, 2."""
    return HermiteSpline([[0.0, 0.0, 0.0], [1.0, 1.0, 3.0], [2.0, 8.0, 12.0]])


@pytest.fixture
def shifted_square():
    """(x - 3)**2 built from value, slope and curvature at x = 3."""
    return HermitePolynomial([(3.0, 0.0), (3.0, 0.0), (3.0, 2.0)])

"""Piecewise Hermite splines."""

from hermitekit.spline.hermite_spline import HermiteSpline, hermite_spline

__all__ = ["HermiteSpline", "hermite_spline"]

"""Unit tests for hermitekit.spline.hermite_spline.HermiteSpline."""

import logging

import numpy as np
import pytest
from numpy.testing import assert_allclose

from hermitekit.errors import InvalidArgument, OutOfRange, UnsupportedOperation
from hermitekit.spline.hermite_spline import HermiteSpline, hermite_spline


def test_one_segment_per_knot_pair(linear_spline):
    """Tests that three knots give exactly two segment polynomials."""
    assert len(linear_spline.knots) == 3
    assert len(linear_spline.segment_polynomials) == 2


def test_value_only_segments_are_linear(linear_spline):
    """Tests that value-only knots interpolate linearly inside a segment."""
    v = linear_spline.evaluate(0.5)
    assert 0.0 < v < 1.0
    assert v == pytest.approx(0.5)
    assert linear_spline.evaluate(1.5) == pytest.approx(2.5)


def test_continuity_at_interior_knot(linear_spline):
    """Tests that neighbouring segments agree at their shared knot."""
    left, right = linear_spline.segment_polynomials
    assert left.evaluate(1.0) == pytest.approx(1.0)
    assert right.evaluate(1.0) == pytest.approx(1.0)
    assert linear_spline.evaluate(1.0) == pytest.approx(1.0)


def test_evaluate_at_last_knot_uses_last_segment(linear_spline):
    """Tests that the upper boundary resolves to the last segment."""
    assert linear_spline.evaluate(2.0) == pytest.approx(4.0)
    assert linear_spline.derivative(2.0) == pytest.approx((4.0, 3.0))


def test_evaluate_at_first_knot(linear_spline):
    """Tests that the lower boundary resolves to the first segment."""
    assert linear_spline.evaluate(0.0) == 0.0


@pytest.mark.parametrize("x, expected", [(-0.1, True), (2.1, True), (0.0, False), (2.0, False), (1.3, False)])
def test_out_of_bounds(linear_spline, x, expected):
    """Tests that only points strictly outside the knot range are out of bounds."""
    assert linear_spline.out_of_bounds(x) is expected


@pytest.mark.parametrize("x", [-1.0, 2.5])
def test_evaluate_outside_returns_none(linear_spline, x):
    """Tests that evaluation outside the knots gives None."""
    assert linear_spline.evaluate(x) is None
    assert linear_spline.derivative(x) is None


def test_cubic_hermite_reproduces_cubic(cubic_spline):
    """Tests that value and slope knots of x**3 reproduce x**3 exactly."""
    for x in (0.25, 0.5, 1.0, 1.5, 2.0):
        assert cubic_spline.evaluate(x) == pytest.approx(x**3)
    assert cubic_spline.derivative(1.5) == pytest.approx((3.375, 6.75))


def test_knots_may_carry_different_orders():
    """Tests that a segment mixes a second-order knot with a value-only one."""
    spline = HermiteSpline([[0.0, 0.0, 0.0, 0.0], [1.0, 1.0]])
    assert spline.segment_polynomials[0].degree == 3
    assert spline.evaluate(0.5) == pytest.approx(0.125)


def test_unsorted_knots_are_sorted():
    """Tests that knots given out of order are sorted by abscissa."""
    spline = HermiteSpline([[2.0, 4.0], [0.0, 0.0], [1.0, 1.0]])
    assert [k[0] for k in spline.knots] == [0.0, 1.0, 2.0]
    assert spline.bounds == (0.0, 2.0)
    assert spline.evaluate(1.5) == pytest.approx(2.5)


@pytest.mark.parametrize(
    "knots",
    [
        [],
        [[0.0, 1.0]],
        [[0.0, 1.0], [0.0, 2.0]],
        [[0.0], [1.0, 1.0]],
        [[np.nan, 1.0], [1.0, 1.0]],
        [[0.0, 0.0], [np.inf, 1.0], [np.inf, 2.0]],
        None,
        "knots",
    ],
)
def test_invalid_knots(knots):
    """Tests that malformed knots raise from the constructor and are returned by the factory."""
    with pytest.raises(InvalidArgument):
        HermiteSpline(knots)
    assert isinstance(hermite_spline(knots), InvalidArgument)


def test_factory_returns_spline():
    """Tests that hermite_spline builds a spline from valid knots."""
    spline = hermite_spline([[0.0, 0.0], [1.0, 1.0]])
    assert isinstance(spline, HermiteSpline)


def test_add_point_outside_without_permission(linear_spline):
    """Tests that an out-of-range knot is rejected with OutOfRange and nothing changes."""
    before = linear_spline.segment_polynomials
    result = linear_spline.add_point([3.0, 9.0])
    assert isinstance(result, OutOfRange)
    assert len(linear_spline.knots) == 3
    assert linear_spline.segment_polynomials == before


def test_add_point_below_range_prepends_segment(linear_spline):
    """Tests that an allowed knot below the range adds one boundary segment."""
    old = linear_spline.segment_polynomials
    assert linear_spline.add_point([-1.0, 1.0], allow_outside_bounds=True) is None
    assert len(linear_spline.knots) == 4
    assert len(linear_spline.segment_polynomials) == 3
    assert linear_spline.knots[0] == (-1.0, 1.0)
    assert linear_spline.segment_polynomials[1:] == old
    assert linear_spline.evaluate(-0.5) == pytest.approx(0.5)
    assert not linear_spline.out_of_bounds(-1.0)


def test_add_point_above_range_appends_segment(linear_spline):
    """Tests that an allowed knot above the range adds one boundary segment."""
    old = linear_spline.segment_polynomials
    assert linear_spline.add_point([3.0, 9.0], allow_outside_bounds=True) is None
    assert linear_spline.segment_polynomials[:2] == old
    assert linear_spline.bounds == (0.0, 3.0)
    assert linear_spline.evaluate(2.5) == pytest.approx(6.5)
    assert linear_spline.evaluate(3.0) == pytest.approx(9.0)


def test_add_point_inside_splits_one_segment(linear_spline):
    """Tests that an interior knot replaces one segment by two and leaves the rest alone."""
    first = linear_spline.segment_polynomials[0]
    assert linear_spline.add_point([1.5, 0.0]) is None
    assert len(linear_spline.knots) == 4
    assert len(linear_spline.segment_polynomials) == 3
    assert linear_spline.segment_polynomials[0] is first
    assert linear_spline.evaluate(1.5) == pytest.approx(0.0)
    assert linear_spline.evaluate(1.25) == pytest.approx(0.5)
    assert linear_spline.evaluate(1.75) == pytest.approx(2.0)


def test_add_point_inside_with_derivative(cubic_spline):
    """Tests that an interior Hermite knot of x**3 keeps the spline exact."""
    assert cubic_spline.add_point([0.5, 0.125, 0.75]) is None
    assert [k[0] for k in cubic_spline.knots] == [0.0, 0.5, 1.0, 2.0]
    for x in (0.25, 0.75, 1.5):
        assert cubic_spline.evaluate(x) == pytest.approx(x**3)


def test_add_point_on_existing_knot_is_rejected(linear_spline):
    """Tests that a knot at an existing abscissa is refused without mutation."""
    result = linear_spline.add_point([1.0, 7.0])
    assert isinstance(result, InvalidArgument)
    assert linear_spline.knots[1] == (1.0, 1.0)
    assert len(linear_spline.segment_polynomials) == 2


@pytest.mark.parametrize("point", [[1.5], None, 2.0, [np.nan, 1.0]])
def test_add_point_malformed(linear_spline, point):
    """Tests that a malformed knot is returned as InvalidArgument."""
    assert isinstance(linear_spline.add_point(point), InvalidArgument)
    assert len(linear_spline.knots) == 3


def test_add_point_logs_rebuild(linear_spline, caplog):
    """Tests that knot insertion is reported at debug level."""
    with caplog.at_level(logging.DEBUG, logger="hermitekit"):
        linear_spline.add_point([0.5, 0.5])
    assert any("Inserted knot at x=0.5" in r.message for r in caplog.records)


def test_delete_point_is_unsupported(linear_spline):
    """Tests that deletion returns UnsupportedOperation and leaves the spline intact."""
    result = linear_spline.delete_point(1)
    assert isinstance(result, UnsupportedOperation)
    assert isinstance(result, NotImplementedError)
    assert len(linear_spline.knots) == 3


def test_call_fills_out_of_range(linear_spline):
    """Tests vectorized evaluation with nan outside the knots."""
    y = linear_spline(np.array([-1.0, 0.5, 1.5, 3.0]))
    assert np.isnan(y[0]) and np.isnan(y[-1])
    assert_allclose(y[1:3], [0.5, 2.5])


def test_call_custom_fill_value_and_shape(linear_spline):
    """Tests that the output keeps the input shape and uses fill_value."""
    y = linear_spline(np.array([[0.5, 5.0], [1.0, 2.0]]), fill_value=-1.0)
    assert y.shape == (2, 2)
    assert_allclose(y, [[0.5, -1.0], [1.0, 4.0]])


def test_repr(linear_spline):
    """Tests that repr shows the knot count and bounds."""
    assert repr(linear_spline) == "HermiteSpline(n_knots=3, bounds=(0.0, 2.0))"

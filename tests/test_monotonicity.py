import pytest

from bezier_editor.config import INITIAL_POINTS
from bezier_editor.core import BezierCurve, Branch, classify_monotonic


def curve_with_x(x0, x1, x2, x3):
    return BezierCurve([(x0, 0.0), (x1, 0.3), (x2, -0.3), (x3, 0.0)])


def test_initial_configuration():
    curve = BezierCurve(INITIAL_POINTS)
    coeffs = curve.derivative_coefficients()
    # a = 1.5 - 1.8 - 1.8 + 1.5, b = -3 + 2.4 + 1.2, c = 1.5 - 0.6
    assert coeffs.a == pytest.approx(-0.6, rel=1e-5)
    assert coeffs.b == pytest.approx(0.6, rel=1e-5)
    assert coeffs.c == pytest.approx(0.9, rel=1e-5)
    assert coeffs.discriminant == pytest.approx(2.52, rel=1e-5)

    report = curve.classify_monotonic()
    assert report.branch is Branch.TWO_ROOTS_DOWNWARD
    root1, root2 = report.roots
    # both roots lie outside [0, 1]: the arch is a valid function of x
    assert root1 == pytest.approx(-0.8228757, rel=1e-4)
    assert root2 == pytest.approx(1.8228757, rel=1e-4)
    assert root1 <= root2
    assert report.valid is True
    assert curve.is_valid_function() is True


def test_vertical_line_is_degenerate_and_invalid():
    report = curve_with_x(0.5, 0.5, 0.5, 0.5).classify_monotonic()
    assert report.branch is Branch.DEGENERATE
    assert report.valid is False
    assert report.roots is None


def test_linear_increasing_derivative_still_reported_invalid():
    # x'(t) = 3 everywhere, but a == 0 is not handled
    report = curve_with_x(0.0, 1.0, 2.0, 3.0).classify_monotonic()
    assert report.coefficients.c == pytest.approx(3.0)
    assert report.branch is Branch.DEGENERATE
    assert report.valid is False


def test_strictly_increasing_x_is_valid():
    report = curve_with_x(0.0, 0.4, 0.6, 1.0).classify_monotonic()
    assert report.branch is Branch.NO_REAL_ROOTS
    assert report.discriminant < 0
    assert report.valid is True


def test_no_real_roots_downward_is_invalid():
    # x'(t) = -x'(t) of the strictly increasing case
    report = curve_with_x(0.0, -0.4, -0.6, -1.0).classify_monotonic()
    assert report.branch is Branch.NO_REAL_ROOTS
    assert report.valid is False


def test_upward_roots_before_zero_are_valid():
    # x'(t) = 2t^2 + 3t + 1, roots -1 and -0.5
    report = curve_with_x(0.0, 1 / 3, 7 / 6, 19 / 6).classify_monotonic()
    assert report.branch is Branch.TWO_ROOTS_UPWARD
    assert report.roots == pytest.approx((-1.0, -0.5), abs=1e-4)
    assert report.valid is True


def test_upward_roots_inside_unit_interval_are_invalid():
    report = curve_with_x(0.0, 1.0, -0.5, 1.0).classify_monotonic()
    assert report.branch is Branch.TWO_ROOTS_UPWARD
    root1, root2 = report.roots
    assert 0 < root1 < root2 < 1
    assert report.valid is False


def test_downward_roots_enclosing_unit_interval_are_valid():
    # x'(t) = -t^2 + t + 2, roots -1 and 2
    report = curve_with_x(0.0, 2 / 3, 1.5, 6.5 / 3).classify_monotonic()
    assert report.branch is Branch.TWO_ROOTS_DOWNWARD
    assert report.roots == pytest.approx((-1.0, 2.0), abs=1e-4)
    assert report.valid is True


@pytest.mark.parametrize("x3", [1.0, -1.0])
def test_double_root_is_always_valid(x3):
    # a = 3 * x3, b = c = 0: delta is exactly zero whatever the sign of a
    report = curve_with_x(0.0, 0.0, 0.0, x3).classify_monotonic()
    assert report.branch is Branch.DOUBLE_ROOT
    assert report.discriminant == 0.0
    assert report.valid is True


def test_classification_is_recomputed_after_edits():
    curve = BezierCurve(INITIAL_POINTS)
    assert curve.is_valid_function() is True
    # handle past the end anchor: x'(1) = 3 * (0.5 - 0.6) < 0
    curve.set_point(2, (0.6, 0.5))
    assert curve.is_valid_function() is False
    curve.reset()
    assert curve.is_valid_function() is True


def test_classify_rejects_wrong_point_count():
    with pytest.raises(ValueError):
        classify_monotonic([(0.0, 0.0), (1.0, 1.0)])


def test_derivative_value_at_t():
    coeffs = BezierCurve(INITIAL_POINTS).derivative_coefficients()
    assert coeffs.at(0.0) == pytest.approx(0.9, rel=1e-5)
    assert coeffs.at(0.5) == pytest.approx(1.05, rel=1e-5)
    assert coeffs.at(1.0) == pytest.approx(0.9, rel=1e-5)

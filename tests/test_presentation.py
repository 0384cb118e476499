import pytest

from bezier_editor.config import INITIAL_POINTS
from bezier_editor.core import BezierCurve
from bezier_editor.widgets.diagnostics import format_report
from bezier_editor.widgets.utils import ViewTransform


def test_view_transform_maps_origin_to_centre():
    view = ViewTransform(1280, 720)
    assert view.to_screen((0.0, 0.0)) == (640.0, 360.0)
    assert view.to_screen((0.0, 1.0)) == (640.0, 0.0)
    assert view.to_screen((1.0, -1.0)) == (1000.0, 720.0)


def test_view_transform_round_trip():
    view = ViewTransform(800, 600)
    p = (0.3, -0.7)
    assert view.to_model(view.to_screen(p)) == pytest.approx(p)


def test_pixel_delta_flips_y():
    view = ViewTransform(800, 600)
    assert view.delta_to_model((30.0, 30.0)) == pytest.approx((0.1, -0.1))
    assert view.length_to_screen(0.05) == pytest.approx(15.0)


def test_report_text_for_initial_curve():
    lines = format_report(BezierCurve(INITIAL_POINTS).classify_monotonic())
    assert "Positive delta" in lines
    assert "Negative a" in lines
    assert "Root1: -0.823" in lines
    assert "Root2: 1.823" in lines
    assert lines[-1] == "Valid function"


def test_report_text_for_degenerate_curve():
    curve = BezierCurve([(0.5, 0.0), (0.5, 0.2), (0.5, 0.4), (0.5, 0.6)])
    lines = format_report(curve.classify_monotonic())
    assert any("not handled" in line for line in lines)
    assert lines[-1] == "Not a function"


def test_report_text_for_no_roots():
    curve = BezierCurve([(0.0, 0.0), (0.4, 0.0), (0.6, 0.0), (1.0, 0.0)])
    lines = format_report(curve.classify_monotonic())
    assert "Negative delta" in lines
    assert lines[-1] == "Valid function"

import numpy as np
import pytest

from lifeprogress.model.easing import Easing, cubic_bezier, ease_in_out, linear


def test_endpoints_are_exact():
    assert ease_in_out(0.0) == 0.0
    assert ease_in_out(1.0) == 1.0


def test_input_is_clamped():
    assert ease_in_out(-3.0) == 0.0
    assert ease_in_out(7.5) == 1.0
    assert linear(-1.0) == 0.0
    assert linear(2.0) == 1.0


def test_midpoint_and_symmetry():
    assert ease_in_out(0.5) == pytest.approx(0.5, abs=1e-6)
    for t in (0.1, 0.25, 0.4):
        assert ease_in_out(1.0 - t) == pytest.approx(1.0 - ease_in_out(t), abs=1e-6)


def test_slow_start_and_end():
    assert ease_in_out(0.1) < 0.1
    assert ease_in_out(0.9) > 0.9


def test_monotone_on_arrays():
    t = np.linspace(0.0, 1.0, 201)
    eased = ease_in_out(t)
    assert eased.shape == t.shape
    assert np.all(np.diff(eased) >= -1e-12)


def test_scalar_returns_float():
    assert isinstance(ease_in_out(0.3), float)
    assert isinstance(linear(0.3), float)


def test_linear_bezier_is_identity():
    t = np.linspace(0.0, 1.0, 11)
    assert cubic_bezier(t, 1 / 3, 1 / 3, 2 / 3, 2 / 3) == pytest.approx(t, abs=1e-6)


def test_named_curves_are_callable():
    assert Easing.LINEAR(0.25) == pytest.approx(0.25)
    assert Easing.EASE_IN_OUT(0.25) == pytest.approx(ease_in_out(0.25))
    assert Easing("easeInOut") is Easing.EASE_IN_OUT

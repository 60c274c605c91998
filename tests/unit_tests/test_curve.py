import numpy as np
import pytest

from bezierscore.numba.curve import alpha, bezier, control, fill_scores


@pytest.mark.parametrize(
    "start, end, control_value",
    [(100.0, 1.0, 50.0), (1.0, 100.0, 99.0), (5.0, 5.0, 5.0), (-3.0, 7.0, 0.0)],
)
def test_bezier_endpoints(start, end, control_value):
    assert bezier(start, end, control_value, 0.0) == start
    assert bezier(start, end, control_value, 1.0) == end


def test_bezier_midpoint():
    # at alpha = 0.5 the curve weights start, control and end with 1/4, 1/2, 1/4
    assert bezier(100.0, 0.0, 40.0, 0.5) == pytest.approx(25.0 + 20.0)


def test_bezier_bends_towards_control():
    linear = bezier(100.0, 0.0, 50.0, 0.3)
    bent = bezier(100.0, 0.0, 90.0, 0.3)

    assert linear == pytest.approx(70.0)
    assert bent > linear


def test_alpha():
    assert alpha(1, 5) == 0.0
    assert alpha(5, 5) == 1.0
    assert alpha(3, 5) == 0.5
    assert alpha(2, 2) == 1.0


@pytest.mark.parametrize(
    "control_coefficient, expected",
    [(0.0, 50.5), (1.0, 100.0), (0.5, 75.25)],
)
def test_control(control_coefficient, expected):
    assert control(1.0, 100.0, control_coefficient) == pytest.approx(expected)


def test_fill_scores():
    out = np.zeros(5)

    fill_scores(out, 1.0, 100.0, 0.5)

    control_value = control(1.0, 100.0, 0.5)
    expected = [
        bezier(100.0, 1.0, control_value, a) for a in [0.0, 0.25, 0.5, 0.75, 1.0]
    ]
    np.testing.assert_allclose(out, expected, rtol=1e-12)
    assert out[0] == 100.0
    assert out[-1] == 1.0

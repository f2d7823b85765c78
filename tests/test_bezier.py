import pytest

from segbowl.bezier import bezier_point, calc_bez_path
from segbowl.data import LEAD_IN, Point
from segbowl.errors import InvalidControlPointCountError, InvalidDesignError

CPOINTS = [Point(38, 0), Point(50, 0), Point(50, 76), Point(63, 89)]


def test_path_length_and_ends():
    curve = calc_bez_path(CPOINTS, 4)
    assert len(curve) == 4 + 4
    assert curve[2].as_tuple() == pytest.approx((38, 0))
    assert curve[-1].as_tuple() == pytest.approx((63, 89))


def test_path_starts_with_lead_in():
    curve = calc_bez_path(CPOINTS, 4, lead_in=2.5)
    assert curve[0] == Point(0.0, 0.0)
    assert curve[1] == Point(2.5, 0.0)

    default = calc_bez_path(CPOINTS, 4)
    assert default[1] == Point(LEAD_IN, 0.0)
    assert LEAD_IN == pytest.approx(2.54)


def test_path_ends_with_literal_last_control_point():
    cpoints = [Point(1.1, 0.3), Point(7.7, 0.9), Point(3.3, 44.4), Point(61.7, 83.1)]
    curve = calc_bez_path(cpoints, 7)
    assert curve[-1] == cpoints[-1]


def test_midpoint_uses_bernstein_weights():
    curve = calc_bez_path(CPOINTS, 4)
    mid = curve[2 + 2]
    # t = 0.5: weights 1/8, 3/8, 3/8, 1/8
    assert mid.x == pytest.approx((38 + 3 * 50 + 3 * 50 + 63) / 8)
    assert mid.y == pytest.approx((0 + 0 + 3 * 76 + 89) / 8)


def test_two_spans_share_a_point():
    cpoints = CPOINTS + [Point(70, 95), Point(75, 100), Point(80, 110)]
    curve = calc_bez_path(cpoints, 10)
    assert len(curve) == 2 + 2 * 11 + 1
    # end of first span and start of second span coincide
    assert curve[2 + 10].as_tuple() == pytest.approx(curve[2 + 11].as_tuple())
    assert curve[2 + 11].as_tuple() == pytest.approx((63, 89))


def test_bezier_point_endpoints():
    p0, p1, p2, p3 = CPOINTS
    assert bezier_point(p0, p1, p2, p3, 0.0) == p0
    assert bezier_point(p0, p1, p2, p3, 1.0) == p3
    # parameters past 1 do not raise the (1 - t) weight to a negative base
    past = bezier_point(p0, p1, p2, p3, 1.0 + 1e-12)
    assert past.as_tuple() == pytest.approx(p3.as_tuple())


def test_coincident_control_points_repeat():
    same = [Point(10, 10)] * 4
    curve = calc_bez_path(same, 3)
    assert all(p.as_tuple() == pytest.approx((10, 10)) for p in curve[2:])


@pytest.mark.parametrize("count", [0, 1, 3, 5, 6, 8])
def test_invalid_control_point_count(count):
    pts = [Point(i, i) for i in range(count)]
    with pytest.raises(InvalidControlPointCountError):
        calc_bez_path(pts, 4)


def test_invalid_count_is_a_value_error():
    with pytest.raises(ValueError):
        calc_bez_path(CPOINTS[:3], 4)


def test_curvesegs_must_be_positive():
    with pytest.raises(InvalidDesignError):
        calc_bez_path(CPOINTS, 0)

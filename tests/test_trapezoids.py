import math

import pytest

from segbowl.data import Point, Ring, XVals
from segbowl.errors import InvalidSegmentConfigError
from segbowl.trapezoids import calc_ring_trapz


def _ring(segs=12, seglen=None, theta=0.0, xvals=XVals(40, 60)):
    return Ring(30, segs=segs, seglen=seglen, theta=theta, xvals=xvals)


def _close(a, b, tol=1e-9):
    return math.isclose(a.x, b.x, abs_tol=tol) and math.isclose(a.y, b.y, abs_tol=tol)


def test_full_circle():
    result = calc_ring_trapz(_ring())
    assert len(result) == 12
    assert result.total_rotation == pytest.approx(2 * math.pi)
    assert result.start_angles[0] == 0.0
    assert all(b > a for a, b in zip(result.start_angles, result.start_angles[1:]))


def test_unequal_widths_full_circle():
    seglen = [2, 0.5, 0.5, 1, 1.5, 0.5, 1, 1, 1, 1, 1, 1]
    result = calc_ring_trapz(_ring(seglen=seglen))
    assert result.total_rotation == pytest.approx(2 * math.pi)


def test_unrotated_corners():
    theta = math.pi / 12
    trapz = calc_ring_trapz(_ring(), rotate=False).trapezoids[0]
    inner_lead, outer_lead, outer_trail, inner_trail = trapz
    assert outer_lead.x == pytest.approx(60)
    assert outer_lead.y == pytest.approx(60 * math.tan(theta))
    assert inner_lead.x == pytest.approx(40 * math.cos(theta))
    assert inner_lead.y == pytest.approx(40 * math.sin(theta))
    assert _close(outer_trail, Point(outer_lead.x, -outer_lead.y))
    assert _close(inner_trail, Point(inner_lead.x, -inner_lead.y))


def test_unrotated_segments_lie_along_x_axis():
    result = calc_ring_trapz(_ring(seglen=[2, 1, 1, 0.5, 0.5, 1, 1, 1, 1, 1, 1, 1]),
                             rotate=False)
    for trapz in result.trapezoids:
        assert trapz[1].y == pytest.approx(-trapz[2].y)
        assert trapz[0].y == pytest.approx(-trapz[3].y)
        assert trapz[1].x > trapz[0].x


def test_narrow_segments_pushed_out():
    seglen = [2, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 0]
    trapz = calc_ring_trapz(_ring(seglen=seglen), rotate=False).trapezoids
    wide, narrow = trapz[0], trapz[1]
    assert wide[1].x == pytest.approx(60)
    assert narrow[1].x > 60
    # outer corners stay on one circle
    assert math.hypot(*wide[1].as_tuple()) == pytest.approx(math.hypot(*narrow[1].as_tuple()))


@pytest.mark.parametrize("seglen", [
    [1.0] * 12,
    [2, 0.5, 0.5, 1, 1.5, 0.5, 1, 1, 1, 1, 1, 1],
])
def test_neighbouring_corners_meet(seglen):
    trapz = calc_ring_trapz(_ring(seglen=seglen)).trapezoids
    for seg, nxt in zip(trapz, trapz[1:] + trapz[:1]):
        assert _close(seg[1], nxt[2], 1e-7)
        assert _close(seg[0], nxt[3], 1e-7)


def test_ring_twist_rotates_everything():
    twist = 0.3
    flat = calc_ring_trapz(_ring()).trapezoids
    turned = calc_ring_trapz(_ring(theta=twist)).trapezoids
    c, s = math.cos(twist), math.sin(twist)
    for a, b in zip(flat, turned):
        for p, q in zip(a, b):
            assert _close(Point(p.x * c - p.y * s, p.y * c + p.x * s), q)


def test_first_segment_starts_on_x_axis():
    trapz = calc_ring_trapz(_ring()).trapezoids[0]
    assert trapz[2].y == pytest.approx(0.0, abs=1e-9)
    assert trapz[3].y == pytest.approx(0.0, abs=1e-9)


def test_missing_xvals():
    with pytest.raises(InvalidSegmentConfigError, match="xvals"):
        calc_ring_trapz(_ring(xvals=None))


def test_too_few_segments():
    with pytest.raises(InvalidSegmentConfigError):
        calc_ring_trapz(_ring(segs=2))


def test_seglen_mismatch_names_ring():
    with pytest.raises(InvalidSegmentConfigError, match="ring 3"):
        calc_ring_trapz(_ring(seglen=[1.0] * 5), index=3)

import pytest

from segbowl.data import Point, Ring
from segbowl.partition import split_ring_y

def _flat(points):
    return [c for p in points for c in p.as_tuple()]


def _flat_xy(pairs):
    return [c for pair in pairs for c in pair]


CURVE = [
    Point(0, 0),
    Point(2.5, 0),
    Point(38, 0),
    Point(45.6, 8.1),
    Point(50.8, 27),
    Point(56, 48.2),
    Point(63.5, 63.5),
    Point(63.5, 63.5),
]


@pytest.fixture
def rings():
    return [Ring(12.5), Ring(19), Ring(19), Ring(19)]


def test_one_piece_per_ring(rings):
    parts = split_ring_y(CURVE, rings)
    assert len(parts) == 4
    assert all(len(piece) >= 2 for piece in parts)


def test_first_and_last_points_kept(rings):
    parts = split_ring_y(CURVE, rings)
    assert parts[0][0] == CURVE[0]
    assert parts[-1][-1] == CURVE[-1]


def test_base_piece(rings):
    parts = split_ring_y(CURVE, rings)
    base = parts[0]
    assert base[:3] == CURVE[:3]
    # leaving the floor counts as entering the base ring at y=0
    assert base[3].as_tuple() == pytest.approx((38, 0))
    assert base[-1].y == pytest.approx(12.5)
    assert base[-1].x == pytest.approx(45.6 + 4.4 * 5.2 / 18.9)


def test_pieces_meet_at_boundaries(rings):
    parts = split_ring_y(CURVE, rings)
    boundary = 0.0
    for piece, ring in zip(parts, rings):
        boundary += ring.height
        if piece is parts[-1]:
            break
        assert piece[-1].y == pytest.approx(boundary)
    for lower, upper in zip(parts, parts[1:]):
        assert lower[-1].as_tuple() == pytest.approx(upper[0].as_tuple())


def test_ring_thinner_than_step():
    curve = [Point(0, 0), Point(10, 0), Point(20, 100)]
    parts = split_ring_y(curve, [Ring(10), Ring(2), Ring(200)])
    assert len(parts) == 3
    assert parts[0][0] == curve[0]
    assert _flat(parts[1]) == pytest.approx(_flat_xy([(11, 10), (11.2, 12)]))
    assert parts[2][0].as_tuple() == pytest.approx((11.2, 12))
    assert parts[2][-1] == curve[-1]


def test_vertical_wall():
    curve = [Point(0, 0), Point(30, 0), Point(30, 50)]
    parts = split_ring_y(curve, [Ring(20), Ring(10), Ring(40)])
    assert _flat(parts[1]) == pytest.approx(_flat_xy([(30, 20), (30, 30)]))
    assert parts[2][0].as_tuple() == pytest.approx((30, 30))
    assert parts[2][-1] == curve[-1]


def test_short_pieces_dropped():
    curve = [Point(0, 0), Point(10, 0), Point(15, 50), Point(20, 100)]
    parts = split_ring_y(curve, [Ring(10), Ring(200), Ring(50)])
    # the ring above the rim only gets the forced final point
    assert len(parts) == 2
    assert _flat(parts[1]) == pytest.approx(_flat_xy([(11, 10), (20, 100)]))


def test_empty_input():
    assert split_ring_y([], [Ring(10)]) == []
    assert split_ring_y(CURVE, []) == []


def test_step_from_floor_over_thin_base_ring():
    curve = [Point(0, 0), Point(10, 0), Point(20, 100)]
    parts = split_ring_y(curve, [Ring(5), Ring(200)])
    # the base piece still ends on its top boundary
    assert parts[0][-1].as_tuple() == pytest.approx((10.5, 5))
    assert parts[1][0].as_tuple() == pytest.approx((10.5, 5))


def test_rings_start_at_y_start():
    curve = [Point(0, -3), Point(10, -3), Point(20, 97)]
    parts = split_ring_y(curve, [Ring(10), Ring(200)], y_start=-3)
    assert parts[0][0] == curve[0]
    assert parts[0][-1].as_tuple() == pytest.approx((11, 7))
    assert _flat(parts[1]) == pytest.approx(_flat_xy([(11, 7), (20, 97)]))

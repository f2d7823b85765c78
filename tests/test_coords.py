import pytest

from segbowl.coords import screen_to_real, to_real, to_screen
from segbowl.data import Point, ViewParams

CANVAS_MM = 200
WIDTH = 500
HEIGHT = 500
SCALE = WIDTH / CANVAS_MM

VIEW = ViewParams(scale=SCALE, width=WIDTH, height=HEIGHT, baseline=12.5)


def test_to_real_right_edge_middle():
    p = to_real(VIEW, WIDTH, HEIGHT / 2)
    assert p.x == pytest.approx(CANVAS_MM / 2)
    assert p.y == pytest.approx(CANVAS_MM / 2 - 12.5)


def test_to_real_top_center():
    p = to_real(VIEW, WIDTH / 2, 0)
    assert p.x == pytest.approx(0.0)
    assert p.y == pytest.approx(CANVAS_MM - 12.5)


def test_to_screen_uses_baseline_by_default():
    p = to_screen(VIEW, 50, 75)
    assert p.x == pytest.approx(WIDTH / 2 + 50 * SCALE)
    assert p.y == pytest.approx(-(75 + 12.5) * SCALE + HEIGHT)


def test_to_screen_explicit_offset():
    p = to_screen(VIEW, 38, 108, 0)
    assert p.x == pytest.approx(WIDTH / 2 + 38 * SCALE)
    assert p.y == pytest.approx(-108 * SCALE + HEIGHT)


@pytest.mark.parametrize("view", [
    VIEW,
    ViewParams(scale=0.37, width=1024, height=768, baseline=0.0),
    ViewParams(scale=12.0, width=300, height=900, baseline=25.4),
])
def test_screen_real_roundtrip(view):
    for x, y in [(0.0, 0.0), (63.5, 88.9), (-12.25, 4.0), (150.0, -3.0)]:
        s = to_screen(view, x, y)
        back = to_real(view, s.x, s.y)
        assert back.x == pytest.approx(x, abs=1e-9)
        assert back.y == pytest.approx(y, abs=1e-9)


def test_screen_to_real_converts_control_points():
    centerx = WIDTH / 2
    bottom = HEIGHT - 12.5 * SCALE
    pixels = [
        Point(centerx + 38 * SCALE, bottom),
        Point(centerx + 50 * SCALE, bottom),
        Point(centerx + 50 * SCALE, bottom - 76 * SCALE),
        Point(centerx + 63 * SCALE, bottom - 89 * SCALE),
    ]
    real = screen_to_real(VIEW, pixels)
    expected = [(38, 0), (50, 0), (50, 76), (63, 89)]
    for p, (x, y) in zip(real, expected):
        assert p.as_tuple() == pytest.approx((x, y), abs=1e-9)


def test_zero_scale_is_a_caller_error():
    view = ViewParams(scale=0, width=100, height=100)
    with pytest.raises(ZeroDivisionError):
        to_real(view, 10, 10)

"""Conversion between display pixels and bowl coordinates.

Screen y grows downward; bowl y grows upward from the bowl bottom, which sits
``view.baseline`` millimetres above the lower edge of the surface. A zero
``view.scale`` is a caller error and raises ``ZeroDivisionError``.
"""

from typing import Iterable, List, Optional

from segbowl.data import Point, ViewParams


def to_real(view: ViewParams, x: float, y: float) -> Point:
    """Map the pixel position ``(x, y)`` to bowl coordinates."""

    return Point(
        (x - view.width / 2) / view.scale,
        (view.height - y) / view.scale - view.baseline,
    )


def to_screen(view: ViewParams, x: float, y: float, offset: Optional[float] = None) -> Point:
    """Map the bowl point ``(x, y)`` to pixels.

    *offset* defaults to ``-view.baseline``; pass ``0`` to draw relative to the
    lower edge of the surface.
    """

    if offset is None:
        offset = -view.baseline
    return Point(
        x * view.scale + view.width / 2,
        -(y - offset) * view.scale + view.height,
    )


def screen_to_real(view: ViewParams, points: Iterable[Point]) -> List[Point]:
    """Convert a sequence of pixel positions (e.g. dragged control points)."""

    return [to_real(view, p.x, p.y) for p in points]


__all__ = ['to_real', 'to_screen', 'screen_to_real']

"""Slicing of a wall polyline into per-ring pieces."""

from __future__ import annotations

from typing import List, Sequence

from segbowl.data import Point, Ring


def _x_at(a: Point, b: Point, y: float) -> float:
    """x where the rising step ``a -> b`` crosses height ``y``."""
    return a.x + (y - a.y) * (b.x - a.x) / (b.y - a.y)


def split_ring_y(
    curve: Sequence[Point],
    rings: Sequence[Ring],
    y_start: float = 0.0,
) -> List[List[Point]]:
    """Split *curve* at the ring boundaries.

    Ring ``i`` covers heights ``[y_from, y_from + height)`` with ``y_from`` the
    summed height of the rings below it, starting at *y_start*. Boundary
    crossings are linearly interpolated; a step starting at or below a ring
    and ending above it contributes both of that ring's boundary points. The
    first piece always starts with ``curve[0]`` and the last ring's piece
    always ends with ``curve[-1]``. Pieces with fewer than two points are left
    out, so the result can be shorter than *rings*.
    """

    parts: List[List[Point]] = []
    if not curve:
        return parts

    y_from = y_start
    last_ring = len(rings) - 1
    for i, ring in enumerate(rings):
        piece: List[Point] = []
        y_to = y_from + ring.height
        if i == 0:
            piece.append(curve[0])
        for p in range(1, len(curve)):
            a = curve[p - 1]
            b = curve[p]
            if a.y <= y_from and b.y > y_to:
                # ring thinner than the step
                piece.append(Point(_x_at(a, b, y_from), y_from))
                piece.append(Point(_x_at(a, b, y_to), y_to))
            elif a.y <= y_from < b.y:
                piece.append(Point(_x_at(a, b, y_from), y_from))
            elif a.y < y_to <= b.y:
                piece.append(Point(_x_at(a, b, y_to), y_to))
                break
            elif y_from <= b.y < y_to:
                piece.append(b)
        if i == last_ring:
            piece.append(curve[-1])
        if len(piece) > 1:
            parts.append(piece)
        y_from = y_to
    return parts


__all__ = ['split_ring_y']

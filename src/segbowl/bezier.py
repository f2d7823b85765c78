"""Sampling of the chained cubic bezier wall profile.

The control point list holds ``1 + 3k`` points; span ``j`` uses points
``3j .. 3j+3`` and shares its first point with the previous span's last.
"""

from __future__ import annotations

from typing import List, Sequence

from segbowl.data import LEAD_IN, Point, validate_control_points
from segbowl.errors import InvalidDesignError


def bezier_point(p0: Point, p1: Point, p2: Point, p3: Point, t: float) -> Point:
    """Evaluate one cubic bezier span at parameter ``t``."""

    mt = max(0.0, 1.0 - t)
    w0 = mt ** 3
    w1 = 3 * t * mt ** 2
    w2 = 3 * t ** 2 * mt
    w3 = t ** 3
    return Point(
        w0 * p0.x + w1 * p1.x + w2 * p2.x + w3 * p3.x,
        w0 * p0.y + w1 * p1.y + w2 * p2.y + w3 * p3.y,
    )


def calc_bez_path(
    control_points: Sequence[Point],
    curvesegs: int,
    *,
    lead_in: float = LEAD_IN,
) -> List[Point]:
    """Sample the profile curve into a polyline.

    The result starts with the lead-in ``(0, 0), (lead_in, 0)`` along the
    bowl floor, then ``curvesegs + 1`` samples per span, and always ends with
    the literal last control point so the rim closes exactly.

    Raises:
        InvalidControlPointCountError: If the point count is not ``1 + 3k``
        InvalidDesignError: If ``curvesegs < 1``
    """

    validate_control_points(control_points)
    if curvesegs < 1:
        raise InvalidDesignError(f'curvesegs must be >= 1, got {curvesegs}')

    points: List[Point] = [Point(0.0, 0.0), Point(lead_in, 0.0)]
    for j in range(0, len(control_points) - 1, 3):
        p0, p1, p2, p3 = control_points[j:j + 4]
        for step in range(curvesegs + 1):
            points.append(bezier_point(p0, p1, p2, p3, step / curvesegs))
    last = control_points[-1]
    points.append(Point(last.x, last.y))
    return points


__all__ = ['bezier_point', 'calc_bez_path']

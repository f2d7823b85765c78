"""Segment footprints for one ring.

Each segment is built in the ring's local polar frame as a trapezoid
symmetric about the x axis, spanning half-angle ``theta_i = pi / segs *
seglen[i]``; with ``rotate`` it is then turned into place around the ring.
"""

from __future__ import annotations

import math
from typing import List, Optional

from segbowl.data import CalcRingTrapzResult, Point, Ring, Trapezoid
from segbowl.errors import InvalidSegmentConfigError


def _rotated(pt: Point, zx: float, zy: float) -> Point:
    # multiply by the unit complex number zx + i*zy
    return Point(pt.x * zx - pt.y * zy, pt.y * zx + pt.x * zy)


def calc_ring_trapz(
    ring: Ring,
    rotate: bool = True,
    *,
    index: Optional[int] = None,
) -> CalcRingTrapzResult:
    """Compute the trapezoid of every segment in *ring*.

    Corners are ``(x1, y1), (x2, y2), (x2, -y2), (x1, -y1)`` with::

        x2 = xvals.max * cos(theta_i) / cos(max_theta)
        x1 = xvals.min * cos(theta_i)
        y2 = x2 * tan(theta_i)
        y1 = xvals.min * sin(theta_i)

    Dividing by ``cos(max_theta)`` pushes narrower segments out so that the
    outer corners of segments of different widths coincide. With *rotate*,
    segment ``i`` is turned by ``theta_i + start_angles[i] + ring.theta``.

    Args:
        ring: Ring with ``xvals`` computed by :func:`segbowl.rings.calc_rings`
        rotate: Place segments around the ring instead of along the x axis
        index: Ring index, used in error messages only

    Raises:
        InvalidSegmentConfigError: If the ring is misconfigured or has no xvals
    """

    ring.validate(index)
    if ring.xvals is None:
        raise InvalidSegmentConfigError("ring has no computed xvals", index)
    xmin = ring.xvals.min
    xmax = ring.xvals.max

    thetas = [math.pi / ring.segs * seglen for seglen in ring.seglen]
    max_theta = max(thetas)

    trapezoids: List[Trapezoid] = []
    start_angles: List[float] = []
    rotation = 0.0
    for theta in thetas:
        start_angles.append(rotation)
        x2 = xmax * math.cos(theta) / math.cos(max_theta)
        x1 = xmin * math.cos(theta)
        y2 = x2 * math.tan(theta)
        y1 = xmin * math.sin(theta)
        trapz: Trapezoid = (Point(x1, y1), Point(x2, y2), Point(x2, -y2), Point(x1, -y1))
        if rotate:
            phi = theta + rotation + ring.theta
            zx = math.cos(phi)
            zy = math.sin(phi)
            trapz = tuple(_rotated(pt, zx, zy) for pt in trapz)
        trapezoids.append(trapz)
        rotation += theta * 2

    return CalcRingTrapzResult(
        trapezoids=trapezoids,
        start_angles=start_angles,
        total_rotation=rotation,
    )


__all__ = ['calc_ring_trapz']

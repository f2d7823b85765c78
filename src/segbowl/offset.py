"""Constant-distance offsetting of the profile polyline.

Each vertex is moved along the unit normal of the step leaving it, which
approximates the true offset curve well at the sampling densities used for
bowl profiles.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from segbowl.data import Point
from segbowl.errors import DegenerateSegmentError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OffsetCurvePair:
    """Inner and outer wall surfaces around a centerline.

    ``outer`` has one extra trailing point equal to ``inner[-1]`` so that the
    two walls joined end to end close the wall at the rim.
    """
    inner: List[Point]
    outer: List[Point]

    # c1/c2 aliases used by drawing code
    @property
    def c1(self) -> List[Point]:
        return self.inner

    @property
    def c2(self) -> List[Point]:
        return self.outer


def _step_normal(a: Point, b: Point) -> Optional[Tuple[float, float]]:
    dx = b.x - a.x
    dy = b.y - a.y
    dd = math.hypot(dx, dy)
    if dd == 0.0:
        return None
    return (-dy / dd, dx / dd)


def offset_curve(curve: Sequence[Point], offset: float) -> OffsetCurvePair:
    """Offset *curve* by *offset* on both sides.

    The inner point is ``p + offset * n`` and the outer point ``p - offset * n``
    with ``n`` the left-hand unit normal of the step leaving ``p``. The last
    point reuses the previous normal. A zero-length step (repeated point)
    reuses the previous normal too; leading repeats use the first valid one.

    Raises:
        ValueError: If *curve* has fewer than two points
        DegenerateSegmentError: If every point of *curve* coincides
    """

    if len(curve) < 2:
        raise ValueError('offset_curve needs at least two points')

    normals: List[Optional[Tuple[float, float]]] = [
        _step_normal(curve[i], curve[i + 1]) for i in range(len(curve) - 1)
    ]
    first = next((n for n in normals if n is not None), None)
    if first is None:
        raise DegenerateSegmentError(
            f'all {len(curve)} curve points coincide at {curve[0].as_tuple()}')

    inner: List[Point] = []
    outer: List[Point] = []
    kx, ky = first
    for i, normal in enumerate(normals):
        if normal is None:
            logger.debug('zero-length step at curve index %d, reusing previous normal', i)
        else:
            kx, ky = normal
        p = curve[i]
        inner.append(Point(p.x + offset * kx, p.y + offset * ky))
        outer.append(Point(p.x - offset * kx, p.y - offset * ky))

    p = curve[-1]
    inner.append(Point(p.x + offset * kx, p.y + offset * ky))
    outer.append(Point(p.x - offset * kx, p.y - offset * ky))
    outer.append(inner[-1])
    return OffsetCurvePair(inner=inner, outer=outer)


__all__ = ['OffsetCurvePair', 'offset_curve']

"""Radial extent of every ring spanned by the bowl wall.

The wall is the centerline offset by half the thickness to either side. Rings
are stacked from the bottom of the outer wall (``-thickness / 2``) upward;
each ring's bounds are the smallest and largest wall radius found within its
height interval, widened by the clearance padding and clamped at zero.
"""

from __future__ import annotations

import logging
from typing import List, Sequence

from segbowl.bezier import calc_bez_path
from segbowl.data import LEAD_IN, BowlDesign, CalcRingsResult, Point, RingFactory, XVals
from segbowl.offset import offset_curve

logger = logging.getLogger(__name__)


def _wall_xs(wall: Sequence[Point], y: float, top: float) -> List[float]:
    """Wall radii strictly inside ``(y, top)``.

    A step that jumps over the whole interval contributes its crossing of
    ``y`` so that thin rings are never left without a radius.
    """
    xs: List[float] = []
    for p, pt in enumerate(wall):
        if y < pt.y < top:
            xs.append(pt.x)
        if p >= 1:
            prev = wall[p - 1]
            if prev.y < y and pt.y > top:
                xs.append(prev.x + (y - prev.y) * (pt.x - prev.x) / (pt.y - prev.y))
    return xs


def calc_rings(
    design: BowlDesign,
    *,
    ring_factory: RingFactory = RingFactory(),
    lead_in: float = LEAD_IN,
) -> CalcRingsResult:
    """Compute bowl height, radius and per-ring radial bounds.

    *design* is not modified. The returned ring list holds copies of the
    design's rings with ``xvals`` filled in for the rings the wall spans;
    when the wall is taller than the ring list, rings made by *ring_factory*
    are appended. Rings above the rim are kept, with ``xvals`` cleared.

    Raises:
        InvalidControlPointCountError: For a malformed control point list
        InvalidSegmentConfigError: For a ring with invalid configuration
        InvalidDesignError: For a bad sampling density or wall thickness
    """

    design.validate()

    centerline = calc_bez_path(design.control_points, design.curvesegs, lead_in=lead_in)
    half = design.thickness / 2
    pair = offset_curve(centerline, half)
    # outer's closing point duplicates inner[-1]
    walls = (pair.inner, pair.outer[:len(pair.inner)])

    height = max(pt.y for wall in walls for pt in wall)
    radius = max(pt.x for wall in walls for pt in wall)

    rings = [ring.copy() for ring in design.rings]
    pad = design.padding
    y = -half
    i = 0
    while y < height:
        if len(rings) <= i:
            ring = ring_factory()
            ring.validate(i)
            rings.append(ring)
            logger.info("Added ring %d (height %.3f) to reach bowl height %.3f",
                        i, ring.height, height)
        ring = rings[i]
        top = y + ring.height
        xs: List[float] = []
        for wall in walls:
            xs.extend(_wall_xs(wall, y, top))
        if xs:
            ring.xvals = XVals(min=max(0.0, min(xs) - pad), max=max(0.0, max(xs) + pad))
        else:
            logger.debug("No wall points in ring %d (%.3f to %.3f)", i, y, top)
            ring.xvals = XVals(min=0.0, max=0.0)
        y = top
        i += 1

    for ring in rings[i:]:
        ring.xvals = None

    return CalcRingsResult(height=height, radius=radius, usedrings=i, rings=rings)


__all__ = ['calc_rings']

"""DXF export of segment cutting templates and the wall profile.

Drawings are in millimetres; print ring templates at 1:1 to lay out
segments on stock.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional, Union

import ezdxf

from segbowl.bezier import calc_bez_path
from segbowl.data import LEAD_IN, BowlDesign, CalcRingsResult, Point, Ring
from segbowl.offset import offset_curve
from segbowl.partition import split_ring_y
from segbowl.rings import calc_rings
from segbowl.trapezoids import calc_ring_trapz

logger = logging.getLogger(__name__)

# layer name -> ACI color
LAYERS = {
    'SEGMENTS': 7,   # white
    'PROFILE': 2,    # yellow
    'WALL': 7,       # white
    'RINGS': 4,      # aqua
}


def _new_document():
    # setup=False avoids default blocks with entities some CAD programs reject
    doc = ezdxf.new(dxfversion='R2010', setup=False)
    doc.header['$MEASUREMENT'] = 1  # metric
    doc.header['$INSUNITS'] = 4     # millimeters
    for name, color in LAYERS.items():
        doc.layers.add(name, color=color)
    return doc


def _xy(points: Iterable[Point]):
    return [(p.x, p.y) for p in points]


def _normalize_path(path: Union[str, Path]) -> Path:
    path = Path(path)
    if path.suffix.lower() != '.dxf':
        path = path.with_suffix('.dxf')
    return path


def write_ring_dxf(
    ring: Ring,
    output_path: Union[str, Path],
    rotate: bool = True,
    *,
    index: Optional[int] = None,
) -> Path:
    """Write one closed polyline per segment of *ring*.

    *ring* needs computed ``xvals``. Returns the path written (``.dxf`` is
    appended when missing).
    """
    trapz = calc_ring_trapz(ring, rotate, index=index)
    doc = _new_document()
    msp = doc.modelspace()
    for corners in trapz.trapezoids:
        msp.add_lwpolyline(_xy(corners), close=True, dxfattribs={'layer': 'SEGMENTS'})

    path = _normalize_path(output_path)
    doc.saveas(path)
    logger.info("Wrote %d segments to %s", len(trapz), path)
    return path


def write_profile_dxf(
    design: BowlDesign,
    output_path: Union[str, Path],
    result: Optional[CalcRingsResult] = None,
    *,
    lead_in: float = LEAD_IN,
) -> Path:
    """Write the bowl cross-section: centerline, wall and ring boundaries.

    *result* is computed from *design* when not supplied; pass the same
    *lead_in* it was computed with. Rings start at the bottom of the outer
    wall (``-thickness / 2``); each wall piece between two ring boundary
    lines becomes its own polyline on the ``WALL`` layer.
    """
    if result is None:
        result = calc_rings(design, lead_in=lead_in)

    centerline = calc_bez_path(design.control_points, design.curvesegs, lead_in=lead_in)
    half = design.thickness / 2
    walls = offset_curve(centerline, half)

    doc = _new_document()
    msp = doc.modelspace()
    msp.add_lwpolyline(_xy(centerline), dxfattribs={'layer': 'PROFILE'})

    used = result.used
    for wall in (walls.inner, walls.outer):
        for piece in split_ring_y(wall, used, -half):
            msp.add_lwpolyline(_xy(piece), dxfattribs={'layer': 'WALL'})

    y = -half
    for ring in used:
        _boundary(msp, ring, y)
        y += ring.height
    if used:
        _boundary(msp, used[-1], y)

    path = _normalize_path(output_path)
    doc.saveas(path)
    logger.info("Wrote profile with %d rings to %s", len(used), path)
    return path


def _boundary(msp, ring: Ring, y: float) -> None:
    msp.add_line((ring.xvals.min, y), (ring.xvals.max, y), dxfattribs={'layer': 'RINGS'})


__all__ = ['LAYERS', 'write_ring_dxf', 'write_profile_dxf']

# -*- coding: utf-8 -*-
"""Geometry engine for turned, ring-segmented bowls."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("segbowl")
except PackageNotFoundError:  # pragma: no cover - handled when package not installed
    __version__ = "unknown"

from segbowl.data import (
    BowlDesign,
    CalcRingsResult,
    CalcRingTrapzResult,
    Point,
    Ring,
    RingFactory,
    ViewParams,
    XVals,
)
from segbowl.errors import (
    BowlGeometryError,
    DegenerateSegmentError,
    DesignFormatError,
    InvalidControlPointCountError,
    InvalidDesignError,
    InvalidSegmentConfigError,
)
from segbowl.coords import to_real, to_screen, screen_to_real
from segbowl.bezier import calc_bez_path
from segbowl.offset import OffsetCurvePair, offset_curve
from segbowl.partition import split_ring_y
from segbowl.rings import calc_rings
from segbowl.trapezoids import calc_ring_trapz

__all__ = [
    "__version__",
    "BowlDesign",
    "CalcRingsResult",
    "CalcRingTrapzResult",
    "OffsetCurvePair",
    "Point",
    "Ring",
    "RingFactory",
    "ViewParams",
    "XVals",
    "BowlGeometryError",
    "DegenerateSegmentError",
    "DesignFormatError",
    "InvalidControlPointCountError",
    "InvalidSegmentConfigError",
    "InvalidDesignError",
    "to_real",
    "to_screen",
    "screen_to_real",
    "calc_bez_path",
    "offset_curve",
    "split_ring_y",
    "calc_rings",
    "calc_ring_trapz",
]

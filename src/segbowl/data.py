"""Data structures for the bowl geometry engine.

All lengths are millimetres. Rings are listed bottom-up: index 0 is the
base ring.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field, replace
from typing import List, Optional, Sequence, Tuple

from segbowl.errors import (
    InvalidControlPointCountError,
    InvalidDesignError,
    InvalidSegmentConfigError,
)

DEFAULT_SEGS = 12
DEFAULT_COLOR = "#E2CAA0"
DEFAULT_WOOD = "maple"
DEFAULT_RING_HEIGHT = 19.05
# floor run from the axis to the start of the profile curve
LEAD_IN = 2.54


@dataclass(frozen=True)
class Point:
    """Immutable 2D point in the bowl cross-section (x = radius, y = height)."""

    x: float
    y: float

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


Trapezoid = Tuple[Point, Point, Point, Point]


@dataclass(frozen=True)
class ViewParams:
    """Display surface description used by the coordinate mapper.

    Attributes:
        scale: Pixels per millimetre (must be non-zero)
        width: Surface width in pixels
        height: Surface height in pixels
        baseline: Height of the bowl bottom above the surface's lower edge (mm)
    """
    scale: float
    width: float
    height: float
    baseline: float = 12.7


@dataclass(frozen=True)
class XVals:
    """Radial bounds of a ring, clearance padding included."""

    min: float
    max: float


@dataclass
class Ring:
    """A horizontal slice of the bowl wall.

    Attributes:
        height: Ring thickness along the bowl axis
        segs: Number of angular segments (at least 3)
        seglen: Relative angular width per segment; should sum to ``segs``
        clrs: Display color per segment
        wood: Wood species per segment
        theta: Ring twist angle in radians
        xvals: Computed radial bounds, ``None`` until :func:`calc_rings` runs
    """
    height: float
    segs: int = DEFAULT_SEGS
    seglen: Optional[List[float]] = None
    clrs: Optional[List[str]] = None
    wood: Optional[List[str]] = None
    theta: float = 0.0
    xvals: Optional[XVals] = None

    def __post_init__(self):
        if self.seglen is None:
            self.seglen = [1.0] * self.segs
        if self.clrs is None:
            self.clrs = [DEFAULT_COLOR] * self.segs
        if self.wood is None:
            self.wood = [DEFAULT_WOOD] * self.segs

    def validate(self, index: Optional[int] = None) -> None:
        """Raise :class:`InvalidSegmentConfigError` if the ring is unusable."""
        if not self.height > 0:
            raise InvalidSegmentConfigError(
                f"height must be positive, got {self.height}", index)
        if self.segs < 3:
            raise InvalidSegmentConfigError(
                f"segs must be at least 3, got {self.segs}", index)
        if len(self.seglen) != self.segs:
            raise InvalidSegmentConfigError(
                f"seglen has {len(self.seglen)} entries for {self.segs} segments",
                index)

    def copy(self) -> "Ring":
        """Return a deep copy that shares no lists with this ring."""
        return copy.deepcopy(self)

    def with_xvals(self, xvals: XVals) -> "Ring":
        return replace(self.copy(), xvals=xvals)


@dataclass(frozen=True)
class RingFactory:
    """Produces the default ring appended when the profile outgrows the ring list."""

    height: float = DEFAULT_RING_HEIGHT
    segs: int = DEFAULT_SEGS
    color: str = DEFAULT_COLOR
    wood: str = DEFAULT_WOOD

    def __call__(self) -> Ring:
        return Ring(
            height=self.height,
            segs=self.segs,
            seglen=[1.0] * self.segs,
            clrs=[self.color] * self.segs,
            wood=[self.wood] * self.segs,
            theta=0.0,
        )


def validate_control_points(points: Sequence[Point]) -> None:
    """Check that *points* describes one or more chained cubic bezier spans."""
    count = len(points)
    if count < 4 or (count - 1) % 3 != 0:
        raise InvalidControlPointCountError(count)


@dataclass
class BowlDesign:
    """User-editable description of a bowl.

    Attributes:
        control_points: Chained cubic bezier control points of the wall centerline
        thickness: Wall thickness
        padding: Radial clearance added on both sides of each ring
        curvesegs: Samples per bezier span
        rings: Ring list, base ring first
    """
    control_points: List[Point]
    thickness: float
    padding: float
    curvesegs: int
    rings: List[Ring] = field(default_factory=list)

    def validate(self) -> None:
        validate_control_points(self.control_points)
        if self.curvesegs < 1:
            raise InvalidDesignError(f"curvesegs must be >= 1, got {self.curvesegs}")
        if self.thickness < 0:
            raise InvalidDesignError(f"thickness must be >= 0, got {self.thickness}")
        for idx, ring in enumerate(self.rings):
            ring.validate(idx)


@dataclass(frozen=True)
class CalcRingsResult:
    """Bowl-level geometry computed from a :class:`BowlDesign`.

    ``rings`` may be longer than ``usedrings``; rings past ``usedrings`` lie
    above the rim and are kept so the caller's configuration survives.
    """
    height: float
    radius: float
    usedrings: int
    rings: List[Ring]

    @property
    def used(self) -> List[Ring]:
        """Rings spanned by the profile."""
        return self.rings[:self.usedrings]

    def apply_to(self, design: BowlDesign) -> BowlDesign:
        """Return a copy of *design* carrying the computed ring list."""
        return replace(design, rings=[r.copy() for r in self.rings])


@dataclass(frozen=True)
class CalcRingTrapzResult:
    """Segment footprints of one ring.

    Attributes:
        trapezoids: Corners per segment as
            ``(inner-leading, outer-leading, outer-trailing, inner-trailing)``
        start_angles: Cumulative rotation at which each segment starts
        total_rotation: Cumulative rotation after the last segment
    """
    trapezoids: List[Trapezoid]
    start_angles: List[float]
    total_rotation: float

    def __len__(self) -> int:
        return len(self.trapezoids)


__all__ = [
    "DEFAULT_SEGS",
    "DEFAULT_COLOR",
    "DEFAULT_WOOD",
    "DEFAULT_RING_HEIGHT",
    "LEAD_IN",
    "Point",
    "Trapezoid",
    "ViewParams",
    "XVals",
    "Ring",
    "RingFactory",
    "validate_control_points",
    "BowlDesign",
    "CalcRingsResult",
    "CalcRingTrapzResult",
]

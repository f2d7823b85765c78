"""Cut list data for building a bowl.

Numbers only, in millimetres and degrees; turning them into text (inches,
fractions, tables) is left to the presentation layer.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from segbowl.data import DEFAULT_COLOR, CalcRingsResult, Ring
from segbowl.palette import rgb_to_hex, wood_by_color
from segbowl.trapezoids import calc_ring_trapz


@dataclass
class SegmentGroup:
    """Identical segments of one ring (same color and relative width).

    Attributes:
        color: Segment color as ``#RRGGBB``
        wood: Wood species
        seglen: Relative width multiplier
        cut_angle: Miter angle per segment end, degrees (``180 / segs * seglen``)
        outside_length: Length of the outer edge
        inside_length: Length of the inner edge
        width: Radial width of the strip the segments are cut from
        strip_length: Strip length needed, saw kerf excluded
        count: Number of segments in the group
    """
    color: str
    wood: str
    seglen: float
    cut_angle: float
    outside_length: float
    inside_length: float
    width: float
    strip_length: float
    count: int = 1

    def total_strip_length(self, sawkerf: float = 0.0) -> float:
        """Strip length including one saw kerf per cut."""
        return self.strip_length + sawkerf * self.count


@dataclass
class CutListRow:
    """Dimensions of one ring."""
    index: int
    label: str
    diameter: float
    thickness: float
    rotation: float
    groups: List[SegmentGroup] = field(default_factory=list)

    @property
    def segment_count(self) -> int:
        return sum(g.count for g in self.groups)


def segment_groups(ring: Ring, index: Optional[int] = None) -> List[SegmentGroup]:
    """Group the segments of *ring* by color and relative width.

    The ring must carry ``xvals`` (see :func:`segbowl.rings.calc_rings`).
    Groups are listed in order of first appearance around the ring.
    """
    trapz = calc_ring_trapz(ring, rotate=False, index=index)
    groups: Dict[Tuple[str, float], SegmentGroup] = {}
    for seg, seglen in enumerate(ring.seglen):
        color = rgb_to_hex(ring.clrs[seg] if seg < len(ring.clrs) else DEFAULT_COLOR)
        key = (color, seglen)
        if key in groups:
            group = groups[key]
            group.strip_length += group.outside_length
            group.count += 1
            continue
        inner_lead, outer_lead = trapz.trapezoids[seg][0], trapz.trapezoids[seg][1]
        wood = ring.wood[seg] if seg < len(ring.wood) else wood_by_color(color)
        groups[key] = SegmentGroup(
            color=color,
            wood=wood,
            seglen=seglen,
            cut_angle=180.0 / ring.segs * seglen,
            outside_length=2 * outer_lead.y,
            inside_length=2 * inner_lead.y,
            width=outer_lead.x - inner_lead.x,
            strip_length=2 * outer_lead.y,
        )
    return list(groups.values())


def cut_list(result: CalcRingsResult) -> List[CutListRow]:
    """One row per ring spanned by the bowl, base ring first."""
    rows: List[CutListRow] = []
    for idx, ring in enumerate(result.used):
        rows.append(CutListRow(
            index=idx,
            label="Base" if idx == 0 else str(idx),
            diameter=2 * ring.xvals.max,
            thickness=ring.height,
            rotation=math.degrees(ring.theta),
            groups=segment_groups(ring, idx),
        ))
    return rows


__all__ = ['SegmentGroup', 'CutListRow', 'segment_groups', 'cut_list']

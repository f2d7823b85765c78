"""Segment colors and the wood species they stand for.

The tables live in ``segbowl/data/palette.yaml``: one maps upper-case
``#RRGGBB`` keys to wood species, the other to names of bright colors used
for non-wood designs. Lookups accept either hex (any case) or the
``rgb(r, g, b)`` form returned by browsers and GUI toolkits.
"""

from __future__ import annotations

import logging
import re
from typing import Dict, List

from segbowl.config import load_data_file
from segbowl.data import DEFAULT_COLOR, DEFAULT_SEGS, DEFAULT_WOOD

logger = logging.getLogger(__name__)

UNKNOWN = "unknown"

_RGB_RE = re.compile(r'^rgb\((\d+),\s*(\d+),\s*(\d+)\)$')


def wood_colors() -> Dict[str, str]:
    """Hex color -> wood species, in palette order."""
    return dict(load_data_file("palette.yaml")["woods"])


def bright_colors() -> Dict[str, str]:
    """Hex color -> color name, in palette order."""
    return dict(load_data_file("palette.yaml")["bright"])


def rgb_to_hex(color: str) -> str:
    """Normalise *color* to ``#RRGGBB``.

    Hex input is upper-cased; ``rgb(r, g, b)`` is converted; anything else is
    returned unchanged.
    """
    if color.startswith('#'):
        return color.upper()
    match = _RGB_RE.match(color)
    if not match:
        return color
    r, g, b = (int(c) for c in match.groups())
    return f'#{r:02X}{g:02X}{b:02X}'


def wood_by_color(color: str) -> str:
    """Wood species for *color*, or ``"unknown"``."""
    hexcolor = rgb_to_hex(color)
    woods = wood_colors()
    if hexcolor in woods:
        return woods[hexcolor]
    logger.warning("No wood matches color %s (hex: %s)", color, hexcolor)
    return UNKNOWN


def color_name(color: str) -> str:
    """Wood species or bright color name for *color*, or ``"unknown"``."""
    hexcolor = rgb_to_hex(color)
    for table in (wood_colors(), bright_colors()):
        if hexcolor in table:
            return table[hexcolor]
    return UNKNOWN


def is_wood_color(color: str) -> bool:
    return rgb_to_hex(color) in wood_colors()


def wood_color_keys() -> List[str]:
    return list(wood_colors())


def bright_color_keys() -> List[str]:
    return list(bright_colors())


def default_colors(count: int = DEFAULT_SEGS) -> List[str]:
    return [DEFAULT_COLOR] * count


def default_wood(count: int = DEFAULT_SEGS) -> List[str]:
    return [DEFAULT_WOOD] * count


def default_lens(count: int = DEFAULT_SEGS) -> List[float]:
    """Equal relative widths for *count* segments."""
    return [1.0] * count


__all__ = [
    'UNKNOWN',
    'wood_colors',
    'bright_colors',
    'rgb_to_hex',
    'wood_by_color',
    'color_name',
    'is_wood_color',
    'wood_color_keys',
    'bright_color_keys',
    'default_colors',
    'default_wood',
    'default_lens',
]

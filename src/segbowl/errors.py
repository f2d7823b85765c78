"""Exceptions raised by the bowl geometry engine.

All errors derive from :class:`BowlGeometryError`, itself a ``ValueError``,
so callers that guard geometry calls with ``except ValueError`` keep working.
"""

from typing import Optional


class BowlGeometryError(ValueError):
    """Base class for invalid bowl geometry input."""


class InvalidControlPointCountError(BowlGeometryError):
    """Control point list is not ``1 + 3k`` points long with ``k >= 1``."""

    def __init__(self, count: int):
        self.count = count
        super().__init__(
            f"control point count must be 1 + 3k with k >= 1, got {count}"
        )


class InvalidSegmentConfigError(BowlGeometryError):
    """A ring's segment configuration cannot produce closed geometry."""

    def __init__(self, message: str, ring_index: Optional[int] = None):
        self.ring_index = ring_index
        if ring_index is not None:
            message = f"ring {ring_index}: {message}"
        super().__init__(message)


class InvalidDesignError(BowlGeometryError):
    """A design-level parameter (sampling density, wall thickness) is out of range."""


class DegenerateSegmentError(BowlGeometryError):
    """A curve has no step of non-zero length to derive a normal from."""


class DesignFormatError(BowlGeometryError):
    """A stored design document is malformed or of an unknown schema."""


__all__ = [
    "BowlGeometryError",
    "InvalidControlPointCountError",
    "InvalidSegmentConfigError",
    "InvalidDesignError",
    "DegenerateSegmentError",
    "DesignFormatError",
]

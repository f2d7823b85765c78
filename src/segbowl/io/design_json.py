"""Design document serialization.

Current documents (``schemaVersion`` 3) look like::

    {
      "schemaVersion": 3,
      "metadata": {"name": ..., "created": ..., "modified": ..., "appVersion": ...},
      "design": {"thick": ..., "pad": ..., "curvesegs": ...,
                 "cpoint": [{"x": ..., "y": ...}, ...],
                 "rings": [{"height", "segs", "clrs", "wood", "seglen", "theta"}]},
      "settings": {...}
    }

Ring ``xvals`` are derived data and are never written; run
:func:`segbowl.rings.calc_rings` after loading. Older documents, which stored
the whole design state at the root with a ``timestamp``, are migrated.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from segbowl import __version__
from segbowl.coords import screen_to_real
from segbowl.data import BowlDesign, Point, Ring, ViewParams
from segbowl.errors import DesignFormatError

logger = logging.getLogger(__name__)

SCHEMA_VERSION = 3

# defaults applied to legacy documents missing a field
_LEGACY_THICK = 6.0
_LEGACY_PAD = 3.0
_LEGACY_CURVESEGS = 50


@dataclass
class LoadedDesign:
    """Result of reading a design document."""
    design: BowlDesign
    settings: Dict[str, Any] = field(default_factory=dict)
    metadata: Optional[Dict[str, Any]] = None
    schema_version: int = SCHEMA_VERSION


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _ring_to_json(ring: Ring) -> Dict[str, Any]:
    return {
        "height": ring.height,
        "segs": ring.segs,
        "clrs": list(ring.clrs),
        "wood": list(ring.wood),
        "seglen": list(ring.seglen),
        "theta": ring.theta,
    }


def _ring_from_json(entry: Dict[str, Any]) -> Ring:
    try:
        segs = int(entry["segs"])
        return Ring(
            height=float(entry["height"]),
            segs=segs,
            seglen=[float(v) for v in entry["seglen"]] if entry.get("seglen") else None,
            clrs=list(entry["clrs"]) if entry.get("clrs") else None,
            wood=list(entry["wood"]) if entry.get("wood") else None,
            theta=float(entry.get("theta") or 0.0),
        )
    except (KeyError, TypeError, ValueError) as exc:
        raise DesignFormatError(f"invalid ring entry {entry!r}") from exc


def _points_from_json(entries: Optional[List[Dict[str, Any]]]) -> List[Point]:
    if not entries:
        return []
    try:
        return [Point(float(p["x"]), float(p["y"])) for p in entries]
    except (KeyError, TypeError, ValueError) as exc:
        raise DesignFormatError("control points must be objects with x and y") from exc


def serialize_design(
    design: BowlDesign,
    settings: Optional[Dict[str, Any]] = None,
    *,
    name: Optional[str] = None,
    created: Optional[str] = None,
) -> Dict[str, Any]:
    """Build a design document for *design*.

    Args:
        design: The design to store
        settings: Opaque application settings stored alongside
        name: Optional display name
        created: Creation timestamp to preserve when re-saving
    """
    now = _now()
    return {
        "schemaVersion": SCHEMA_VERSION,
        "metadata": {
            "name": name,
            "created": created or now,
            "modified": now,
            "appVersion": __version__,
        },
        "design": {
            "thick": design.thickness,
            "pad": design.padding,
            "cpoint": [{"x": p.x, "y": p.y} for p in design.control_points],
            "curvesegs": design.curvesegs,
            "rings": [_ring_to_json(r) for r in design.rings],
        },
        "settings": dict(settings or {}),
    }


def _migrate_legacy(doc: Dict[str, Any], legacy_view: Optional[ViewParams]) -> LoadedDesign:
    logger.warning("Migrating legacy design document saved %s", doc.get("timestamp"))
    points = _points_from_json(doc.get("cpoint"))
    if legacy_view is not None:
        points = screen_to_real(legacy_view, points)
    try:
        design = BowlDesign(
            control_points=points,
            thickness=float(doc.get("thick", _LEGACY_THICK)),
            padding=float(doc.get("pad", _LEGACY_PAD)),
            curvesegs=int(doc.get("curvesegs", _LEGACY_CURVESEGS)),
            rings=[_ring_from_json(r) for r in doc["rings"]],
        )
    except (TypeError, ValueError) as exc:
        raise DesignFormatError(f"invalid legacy design: {exc}") from exc
    return LoadedDesign(
        design=design,
        settings={},
        metadata={
            "name": None,
            "created": doc["timestamp"],
            "modified": doc["timestamp"],
            "appVersion": "legacy",
        },
        schema_version=1,
    )


def deserialize_design(
    doc: Dict[str, Any],
    *,
    legacy_view: Optional[ViewParams] = None,
) -> LoadedDesign:
    """Rebuild a design from a document produced by :func:`serialize_design`.

    Legacy documents stored control points in screen pixels; pass
    *legacy_view* to convert them, otherwise they are taken as millimetres.

    Raises:
        DesignFormatError: If *doc* is not a recognised design document
    """
    if not isinstance(doc, dict):
        raise DesignFormatError("design document must be a JSON object")

    version = doc.get("schemaVersion")
    if not version or version == 1:
        if doc.get("timestamp") and doc.get("rings") is not None:
            return _migrate_legacy(doc, legacy_view)
        raise DesignFormatError("unrecognised design document")
    if not isinstance(version, int) or version > SCHEMA_VERSION:
        raise DesignFormatError(f"unsupported schemaVersion {version!r}")

    body = doc.get("design")
    if not isinstance(body, dict):
        raise DesignFormatError("design document has no 'design' section")
    try:
        design = BowlDesign(
            control_points=_points_from_json(body.get("cpoint")),
            thickness=float(body["thick"]),
            padding=float(body["pad"]),
            curvesegs=int(body["curvesegs"]),
            rings=[_ring_from_json(r) for r in body.get("rings", [])],
        )
    except (KeyError, TypeError, ValueError) as exc:
        raise DesignFormatError(f"invalid design section: {exc}") from exc

    return LoadedDesign(
        design=design,
        settings=dict(doc.get("settings") or {}),
        metadata=doc.get("metadata"),
        schema_version=version,
    )


def save_design(
    path: Union[str, Path],
    design: BowlDesign,
    settings: Optional[Dict[str, Any]] = None,
    *,
    name: Optional[str] = None,
    created: Optional[str] = None,
) -> Path:
    """Write *design* to *path* as indented JSON and return the path."""
    path = Path(path)
    doc = serialize_design(design, settings, name=name, created=created)
    with path.open("w", encoding="utf-8") as fh:
        json.dump(doc, fh, indent=2)
    logger.info("Saved design to %s", path)
    return path


def load_design(path: Union[str, Path], *, legacy_view: Optional[ViewParams] = None) -> LoadedDesign:
    """Read a design document from *path*."""
    path = Path(path)
    with path.open("r", encoding="utf-8") as fh:
        try:
            doc = json.load(fh)
        except json.JSONDecodeError as exc:
            raise DesignFormatError(f"invalid design file {path}: {exc}") from exc
    return deserialize_design(doc, legacy_view=legacy_view)


__all__ = [
    "SCHEMA_VERSION",
    "LoadedDesign",
    "serialize_design",
    "deserialize_design",
    "save_design",
    "load_design",
]

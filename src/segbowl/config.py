"""Configuration loading with bundled defaults and user overrides.

Defaults ship as ``segbowl/data/defaults.yaml``. Any subset of its keys may
be overridden, highest priority first, by:

    1. An explicit path passed to :func:`load_config`
    2. Files listed in the ``SEGBOWL_CONFIG`` environment variable
       (colon-separated, or semicolon on Windows)
    3. ``~/.config/segbowl/config.yaml``

Example:
    export SEGBOWL_CONFIG="$HOME/bowls/shop.yaml"
"""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml

from segbowl.data import BowlDesign, Point, Ring, RingFactory

logger = logging.getLogger(__name__)

__all__ = [
    "SEGBOWL_CONFIG",
    "BowlConfig",
    "load_config",
    "get_config",
    "use_config_file",
    "load_data_file",
    "clear_cache",
]

# Environment variable name for override files
SEGBOWL_CONFIG = "SEGBOWL_CONFIG"

_BUNDLED_DATA_DIR = Path(__file__).parent / "data"
_DEFAULTS_FILE = "defaults.yaml"

# (section, key) -> (BowlConfig attribute, converter)
_FIELDS = {
    ("design", "thickness"): ("thickness", float),
    ("design", "padding"): ("padding", float),
    ("design", "curvesegs"): ("curvesegs", int),
    ("design", "lead_in"): ("lead_in", float),
    ("design", "control_points"): (
        "control_points", lambda pts: tuple((float(x), float(y)) for x, y in pts)),
    ("rings", "height"): ("ring_height", float),
    ("rings", "base_height"): ("base_ring_height", float),
    ("rings", "segs"): ("ring_segs", int),
    ("rings", "color"): ("ring_color", lambda c: str(c).upper()),
    ("rings", "wood"): ("ring_wood", str),
    ("view", "baseline"): ("baseline", float),
    ("report", "sawkerf"): ("sawkerf", float),
}


@dataclass(frozen=True)
class BowlConfig:
    """Resolved configuration values (millimetres throughout)."""
    thickness: float
    padding: float
    curvesegs: int
    lead_in: float
    control_points: Tuple[Tuple[float, float], ...]
    ring_height: float
    base_ring_height: float
    ring_segs: int
    ring_color: str
    ring_wood: str
    baseline: float
    sawkerf: float
    source_paths: Tuple[str, ...] = ()

    def ring_factory(self) -> RingFactory:
        """Factory for rings appended while the profile outgrows the ring list."""
        return RingFactory(
            height=self.ring_height,
            segs=self.ring_segs,
            color=self.ring_color,
            wood=self.ring_wood,
        )

    def default_design(self) -> BowlDesign:
        """A fresh design with the default profile and a single base ring."""
        base = Ring(
            height=self.base_ring_height,
            segs=self.ring_segs,
            clrs=[self.ring_color] * self.ring_segs,
            wood=[self.ring_wood] * self.ring_segs,
        )
        return BowlDesign(
            control_points=[Point(x, y) for x, y in self.control_points],
            thickness=self.thickness,
            padding=self.padding,
            curvesegs=self.curvesegs,
            rings=[base],
        )


def clear_cache() -> None:
    """Forget cached configuration.

    Call this after editing override files or changing ``SEGBOWL_CONFIG``.
    """
    _override_files.cache_clear()
    _load_config_cached.cache_clear()
    load_data_file.cache_clear()


@lru_cache(maxsize=None)
def _override_files() -> Tuple[Path, ...]:
    """Return override files that exist, in priority order (highest first)."""
    files: List[Path] = []

    env_path = os.environ.get(SEGBOWL_CONFIG)
    if env_path:
        sep = ";" if sys.platform == "win32" else ":"
        for p in env_path.split(sep):
            p = p.strip()
            if p:
                path = Path(p).expanduser().resolve()
                if path.is_file():
                    files.append(path)
                else:
                    logger.warning("Ignoring missing config file %s from $%s", path, SEGBOWL_CONFIG)

    if sys.platform == "win32":
        config_base = Path(os.environ.get("APPDATA", "~")).expanduser()
    else:
        config_base = Path.home() / ".config"
    user_config = config_base / "segbowl" / "config.yaml"
    if user_config.is_file():
        files.append(user_config)

    return tuple(files)


def _load_yaml(path: Path) -> Dict[str, Any]:
    """Load and validate one YAML configuration file."""
    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid config format in {path}: expected dict at root")

    schema_version = str(data.get("schema_version", "1.0"))
    if not schema_version.startswith("1."):
        raise ValueError(
            f"Unsupported schema version '{schema_version}' in {path}. "
            f"Expected version 1.x"
        )
    return data


def _apply(values: Dict[str, Any], data: Dict[str, Any], path: Path) -> None:
    for section, entries in data.items():
        if section == "schema_version":
            continue
        if not isinstance(entries, dict):
            raise ValueError(f"Section '{section}' in {path} must be a mapping")
        for key, raw in entries.items():
            target = _FIELDS.get((section, key))
            if target is None:
                logger.warning("Unknown config key %s.%s in %s", section, key, path)
                continue
            name, convert = target
            try:
                values[name] = convert(raw)
            except (TypeError, ValueError) as exc:
                raise ValueError(f"Bad value for {section}.{key} in {path}: {raw!r}") from exc


@lru_cache(maxsize=8)
def _load_config_cached(custom_path_str: Optional[str]) -> BowlConfig:
    """Cached configuration loading (string path for hashability)."""
    layers: List[Path] = [_BUNDLED_DATA_DIR / _DEFAULTS_FILE]
    layers.extend(reversed(_override_files()))
    if custom_path_str:
        custom_path = Path(custom_path_str)
        if not custom_path.exists():
            raise FileNotFoundError(f"Config file not found: {custom_path}")
        layers.append(custom_path)

    values: Dict[str, Any] = {}
    for path in layers:
        _apply(values, _load_yaml(path), path)
        logger.debug("Loaded config layer %s", path)

    return BowlConfig(source_paths=tuple(str(p) for p in layers), **values)


def load_config(custom_path: Optional[Path] = None) -> BowlConfig:
    """Load configuration, layering overrides on the bundled defaults.

    Args:
        custom_path: Optional YAML file applied on top of every other layer

    Returns:
        Resolved :class:`BowlConfig`

    Raises:
        FileNotFoundError: If *custom_path* does not exist
        ValueError: If a file has an invalid format or value
    """
    custom_str = str(custom_path) if custom_path else None
    return _load_config_cached(custom_str)


_active_path: Optional[str] = None


def use_config_file(path: Optional[Path]) -> BowlConfig:
    """Layer *path* on top of the defaults for every later :func:`get_config` call.

    Pass ``None`` to go back to the defaults and override files only.
    """
    global _active_path
    _active_path = str(path) if path else None
    return get_config()


def get_config() -> BowlConfig:
    """The configuration used when callers do not supply explicit values."""
    return _load_config_cached(_active_path)


@lru_cache(maxsize=None)
def load_data_file(name: str) -> Dict[str, Any]:
    """Load a bundled YAML table (e.g. ``"palette.yaml"``)."""
    return _load_yaml(_BUNDLED_DATA_DIR / name)

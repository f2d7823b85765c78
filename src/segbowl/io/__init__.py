"""Reading and writing bowl designs and drawings."""

from .design_json import LoadedDesign, load_design, save_design, serialize_design, deserialize_design
from .dxf import write_profile_dxf, write_ring_dxf

__all__ = [
    'LoadedDesign',
    'load_design',
    'save_design',
    'serialize_design',
    'deserialize_design',
    'write_profile_dxf',
    'write_ring_dxf',
]

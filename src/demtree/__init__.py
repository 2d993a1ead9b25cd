# demtree
# Parse and query Slovenian national topographic data (DEM 0050).
#
# The DEM 0050 data set splits Slovenia into four regions (NW, NE, SW, SE),
# each a collection of `.xyz` text files with `<x> <y> <height_in_meters>`
# lines in D96/TM (EPSG:3794) coordinates. The files are imported into a
# compact binary form and indexed with a quad tree for region queries.

from .geometry import Point, Area
from .spatial import QuadTree
from .core.config import DemTreeConfig, get_default_config
from .core.exceptions import (
    DemTreeError, OutsideAreaError, BufferCapacityError, TreeInvariantError,
    ImportDataError, PointDecodeError, InvalidDataError
)
from .io import read_points, write_points, load_points, save_points, import_data

__all__ = [
    'Point',
    'Area',
    'QuadTree',
    'DemTreeConfig',
    'get_default_config',
    'DemTreeError',
    'OutsideAreaError',
    'BufferCapacityError',
    'TreeInvariantError',
    'ImportDataError',
    'PointDecodeError',
    'InvalidDataError',
    'read_points',
    'write_points',
    'load_points',
    'save_points',
    'import_data',
]

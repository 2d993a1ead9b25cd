"""
Core Module

Configuration and error types shared by the rest of the package.
"""

from .config import (
    DemTreeConfig, TreeConfig, LoggingConfig,
    get_default_config, create_config_from_file, save_config_to_file
)
from .exceptions import (
    DemTreeError, OutsideAreaError, BufferCapacityError, TreeInvariantError,
    ImportDataError, PointDecodeError, InvalidDataError
)

__all__ = [
    'DemTreeConfig',
    'TreeConfig',
    'LoggingConfig',
    'get_default_config',
    'create_config_from_file',
    'save_config_to_file',
    'DemTreeError',
    'OutsideAreaError',
    'BufferCapacityError',
    'TreeInvariantError',
    'ImportDataError',
    'PointDecodeError',
    'InvalidDataError',
]

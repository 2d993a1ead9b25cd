"""
Point I/O Module

Binary point records and `.xyz` elevation data import.
"""

from .codec import (
    RECORD_DTYPE, RECORD_SIZE,
    encode_points, decode_points, read_points, write_points, load_points, save_points
)
from .importer import import_data, parse_line, parse_file

__all__ = [
    'RECORD_DTYPE',
    'RECORD_SIZE',
    'encode_points',
    'decode_points',
    'read_points',
    'write_points',
    'load_points',
    'save_points',
    'import_data',
    'parse_line',
    'parse_file',
]

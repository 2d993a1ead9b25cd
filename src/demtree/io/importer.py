#!/usr/bin/env python3
"""
XYZ Importer

Converts the `.xyz` text files of the DEM 0050 digital elevation model
into binary point records. Each line of an `.xyz` file reads

    <x> <y> <height_in_meters>

with `(x, y)` in D96/TM (EPSG:3794). Directories are walked recursively and
files with any other extension are ignored.
"""

import logging
import os
from pathlib import Path
from typing import BinaryIO, List, Optional

from ..core.exceptions import InvalidDataError
from ..geometry import Point
from .codec import encode_points

logger = logging.getLogger(__name__)

XYZ_EXTENSION = '.xyz'


def parse_line(line: str, path=None, line_number: Optional[int] = None) -> Point:
    """
    Parse one `x y height` line.

    Tokens that are not numbers are skipped and anything after the third
    number is ignored.

    Raises:
        InvalidDataError: naming the first of the three components missing
    """
    values = []
    for token in line.split():
        try:
            values.append(float(token))
        except ValueError:
            continue
        if len(values) == 3:
            break

    if len(values) < 3:
        raise InvalidDataError(len(values), path, line_number)

    x, y, height = values
    return Point(x, y, height)


def parse_file(path) -> List[Point]:
    """Parse every line of an `.xyz` file. Blank lines are invalid data."""
    points = []
    with open(path, 'r', encoding='utf-8') as f:
        for line_number, line in enumerate(f, start=1):
            points.append(parse_line(line, path, line_number))

    return points


def import_data(input_path, writer: BinaryIO) -> int:
    """
    Import raw `.xyz` data from a directory tree (or a single file).

    Parsed points are written to `writer` as binary records; files are
    visited in sorted order so repeated imports produce identical output.

    Returns:
        Number of points written

    Raises:
        InvalidDataError: on a line with fewer than three numbers
        OSError: on underlying I/O failure
    """
    input_path = Path(input_path)
    if not input_path.exists():
        raise FileNotFoundError(f"Input path not found: {input_path}")

    total = _import_recursive(input_path, writer)

    logger.info(f"Imported {total} points from {input_path}")
    return total


def _import_recursive(path: Path, writer: BinaryIO) -> int:
    if not path.is_dir():
        return _import_file(path, writer)

    total = 0
    with os.scandir(path) as entries:
        names = sorted(entry.name for entry in entries)

    for name in names:
        total += _import_recursive(path / name, writer)

    return total


def _import_file(path: Path, writer: BinaryIO) -> int:
    if path.suffix != XYZ_EXTENSION:
        return 0

    points = parse_file(path)
    if points:
        writer.write(encode_points(points))

    logger.debug(f"Imported {len(points)} points from {path}")
    return len(points)

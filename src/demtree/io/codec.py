#!/usr/bin/env python3
"""
Point Codec

Binary point records: every point is 12 bytes, `x`, `y` and `data`
as little-endian 32-bit floats, with no header and no delimiter.
A stream is a plain concatenation of records.
"""

import logging
from pathlib import Path
from typing import BinaryIO, Iterable, List

import numpy as np

from ..core.exceptions import PointDecodeError
from ..geometry import Point

logger = logging.getLogger(__name__)

RECORD_DTYPE = np.dtype([('x', '<f4'), ('y', '<f4'), ('data', '<f4')])
RECORD_SIZE = RECORD_DTYPE.itemsize  # 12 bytes

# Records encoded per write call
WRITE_CHUNK = 65536


def encode_points(points: Iterable[Point]) -> bytes:
    """
    Encode points into binary records.

    Points without payload are written with NaN as data.
    """
    rows = [(p.x, p.y, np.nan if p.data is None else p.data) for p in points]
    return np.array(rows, dtype=RECORD_DTYPE).tobytes()


def decode_points(buf: bytes) -> List[Point]:
    """
    Decode binary records into points carrying their height as data.

    Raises:
        PointDecodeError: if `buf` does not end on a record boundary
    """
    trailing = len(buf) % RECORD_SIZE
    if trailing:
        raise PointDecodeError(trailing)

    records = np.frombuffer(buf, dtype=RECORD_DTYPE)
    return [Point(x, y, data) for x, y, data in records.tolist()]


def read_points(reader: BinaryIO) -> List[Point]:
    """
    Read points from a binary file-like object until end of stream.

    If reading from a file, open it buffered (the default for `open(..., 'rb')`).
    """
    return decode_points(reader.read())


def write_points(writer: BinaryIO, points: Iterable[Point]) -> int:
    """
    Write points to a binary file-like object.

    Returns:
        Number of points written
    """
    points = list(points)
    for start in range(0, len(points), WRITE_CHUNK):
        writer.write(encode_points(points[start:start + WRITE_CHUNK]))

    return len(points)


def load_points(filepath) -> List[Point]:
    """Load points from a binary point file."""
    path = Path(filepath)
    with open(path, 'rb') as f:
        points = read_points(f)

    logger.debug(f"Loaded {len(points)} points from {path}")
    return points


def save_points(filepath, points: Iterable[Point]) -> int:
    """Save points to a binary point file, creating parent directories."""
    path = Path(filepath)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, 'wb') as f:
        count = write_points(f, points)

    logger.debug(f"Saved {count} points to {path}")
    return count

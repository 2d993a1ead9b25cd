#!/usr/bin/env python3
"""
Exception Types

Errors raised by the quad tree and the point import layer.
Recoverable conditions (a point outside the tree, a malformed data file)
are separated from invariant failures that mean the tree itself is broken.
"""


class DemTreeError(Exception):
    """Base error for the demtree package."""
    pass


class OutsideAreaError(DemTreeError, ValueError):
    """Raised when a point or query area lies outside of the tree area."""

    def __init__(self, message: str = "point is outside of the tree area"):
        super().__init__(message)


class BufferCapacityError(DemTreeError):
    """
    Raised when a query produces more points than the results buffer holds.

    Points written before the buffer filled up stay in the buffer;
    `written` tells how many of them there are.
    """

    def __init__(self, written: int, capacity: int):
        self.written = written
        self.capacity = capacity
        super().__init__(
            f"results buffer too small: {written} points written, capacity is {capacity}"
        )


class TreeInvariantError(DemTreeError, AssertionError):
    """Raised when the tree geometry is inconsistent. Not recoverable."""
    pass


class ImportDataError(DemTreeError):
    """Base error for malformed point data (as opposed to I/O failures)."""
    pass


class PointDecodeError(ImportDataError):
    """Binary point stream does not end on a record boundary."""

    def __init__(self, trailing_bytes: int):
        self.trailing_bytes = trailing_bytes
        super().__init__(
            f"truncated point record ({trailing_bytes} trailing bytes)"
        )


class InvalidDataError(ImportDataError):
    """Text line is missing one of the x, y, height components."""

    def __init__(self, component: int, path=None, line_number=None):
        self.component = component
        self.path = path
        self.line_number = line_number
        location = ""
        if path is not None:
            location = f" in {path}"
            if line_number is not None:
                location += f":{line_number}"
        super().__init__(
            f"invalid data (expected 3 components, found {component}){location}"
        )

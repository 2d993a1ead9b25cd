"""
Geometry Module

Point and square Area primitives the quad tree is built on.
"""

from .point import Point
from .area import Area

__all__ = [
    'Point',
    'Area',
]

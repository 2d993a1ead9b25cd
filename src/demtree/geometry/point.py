#!/usr/bin/env python3
"""
Point Module

A map location in D96/TM (EPSG:3794) coordinates with an optional payload.
Imported elevation points carry their height in meters as `data`.
"""

import math
from dataclasses import dataclass
from typing import Any

from shapely.geometry import Point as ShapelyPoint


@dataclass(frozen=True)
class Point:
    x: float
    y: float
    data: Any = None

    def distance_sq(self, other: "Point") -> float:
        """Squared distance between two points. Payload is ignored."""
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy

    def distance(self, other: "Point") -> float:
        """Distance between two points in meters."""
        return math.sqrt(self.distance_sq(other))

    def to_shapely(self) -> ShapelyPoint:
        return ShapelyPoint(self.x, self.y)

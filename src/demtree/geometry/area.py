#!/usr/bin/env python3
"""
Area Module

Axis-aligned square regions used to bound quad tree nodes and queries.
An Area is a closed square of side `2 * radius` around `center`.
"""

from dataclasses import dataclass
from typing import Sequence, Tuple

from shapely.geometry import box
from shapely.geometry.base import BaseGeometry

from .point import Point


@dataclass(frozen=True)
class Area:
    """Square on the map with `width = height = 2 * radius`."""
    center: Point
    radius: float

    def __post_init__(self):
        if self.radius < 0:
            raise ValueError(f"radius must be non-negative, got {self.radius}")

    @classmethod
    def from_points(cls, points: Sequence[Point]) -> 'Area':
        """
        Create the minimum square that contains all the points.

        The bounding box of the points is centered and its larger side
        becomes the side of the square, so the shorter axis is over-covered.

        Raises:
            ValueError: if `points` is empty
        """
        if not points:
            raise ValueError("cannot build an area from an empty point set")

        min_x = min(p.x for p in points)
        min_y = min(p.y for p in points)
        max_x = max(p.x for p in points)
        max_y = max(p.y for p in points)

        return cls.from_bounds(min_x, min_y, max_x, max_y)

    @classmethod
    def from_bounds(cls, min_x: float, min_y: float, max_x: float, max_y: float) -> 'Area':
        """Smallest square centered on the given bounding box."""
        width = max_x - min_x
        height = max_y - min_y

        return cls(
            center=Point(width / 2.0 + min_x, height / 2.0 + min_y),
            radius=max(width, height) / 2.0
        )

    @classmethod
    def from_geometry(cls, geometry: BaseGeometry) -> 'Area':
        """Smallest square covering the bounds of a shapely geometry."""
        if geometry.is_empty:
            raise ValueError("cannot build an area from an empty geometry")
        return cls.from_bounds(*geometry.bounds)

    @property
    def bounds(self) -> Tuple[float, float, float, float]:
        """(min_x, min_y, max_x, max_y) of the square."""
        return (
            self.center.x - self.radius,
            self.center.y - self.radius,
            self.center.x + self.radius,
            self.center.y + self.radius,
        )

    def to_polygon(self):
        return box(*self.bounds)

    def is_point_inside(self, point: Point) -> bool:
        """Returns whether the point is inside the area (borders included)."""
        x_inside = self.center.x - self.radius <= point.x <= self.center.x + self.radius
        y_inside = self.center.y - self.radius <= point.y <= self.center.y + self.radius

        return x_inside and y_inside

    def intersects(self, other: 'Area') -> bool:
        """Returns whether two areas intersect. Touching borders count."""
        dx = abs(self.center.x - other.center.x)
        dy = abs(self.center.y - other.center.y)

        reach = self.radius + other.radius
        return dx <= reach and dy <= reach

    def distance_sq_to_point(self, point: Point) -> float:
        """Squared distance from the point to the closest part of the area."""
        dx = max(abs(point.x - self.center.x) - self.radius, 0.0)
        dy = max(abs(point.y - self.center.y) - self.radius, 0.0)
        return dx * dx + dy * dy

#!/usr/bin/env python3
"""
Unit tests for Point and Area geometry.
"""

import math
import unittest
import sys
import os
from shapely.geometry import LineString

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from demtree.geometry import Area, Point


class TestPoint(unittest.TestCase):
    """Test cases for Point."""

    def test_distance(self):
        """Test planar distance between points."""
        a = Point(0.0, 0.0)
        b = Point(3.0, 4.0)
        self.assertEqual(a.distance_sq(b), 25.0)
        self.assertEqual(a.distance(b), 5.0)

    def test_distance_ignores_payload(self):
        """Test that payloads of any type do not affect distance."""
        a = Point(1.0, 1.0, data=310.5)
        b = Point(2.0, 2.0, data="label")
        self.assertEqual(a.distance_sq(b), 2.0)
        self.assertAlmostEqual(b.distance(a), math.sqrt(2.0))

    def test_structural_equality(self):
        """Test points compare by value."""
        self.assertEqual(Point(1.0, 2.0, 3.0), Point(1.0, 2.0, 3.0))
        self.assertNotEqual(Point(1.0, 2.0, 3.0), Point(1.0, 2.0, 4.0))
        self.assertEqual(Point(1.0, 2.0), Point(1.0, 2.0, None))

    def test_to_shapely(self):
        """Test conversion to shapely point."""
        p = Point(5.0, 6.0, 100.0).to_shapely()
        self.assertEqual((p.x, p.y), (5.0, 6.0))


class TestArea(unittest.TestCase):
    """Test cases for Area."""

    def test_area_intersects(self):
        """Test square intersection, checked in both directions."""
        cases = [
            (Area(Point(0.0, 0.0), 1.0), Area(Point(0.0, 0.0), 1.0), True),
            (Area(Point(0.0, 0.0), 1.0), Area(Point(2.0, 2.0), 1.0), True),
            (Area(Point(0.0, 0.0), 1.0), Area(Point(2.0, 2.0), 0.9), False),
            (Area(Point(0.0, 0.0), 10.0), Area(Point(100.0, 100.0), 1.0), False),
            (Area(Point(0.0, 0.0), 1.0), Area(Point(0.0, 5.0), 1.0), False),
        ]

        for a1, a2, expected in cases:
            self.assertEqual(a1.intersects(a2), expected)
            self.assertEqual(a2.intersects(a1), expected)

    def test_intersects_is_square_not_circle(self):
        """Test corner overlap counts even beyond the circle radius."""
        a = Area(Point(0.0, 0.0), 1.0)
        b = Area(Point(1.05, 1.05), 0.1)
        self.assertTrue(a.intersects(b))

    def test_is_point_inside_closed_borders(self):
        """Test containment includes all four borders."""
        area = Area(Point(0.0, 0.0), 1.0)
        self.assertTrue(area.is_point_inside(Point(0.0, 0.0)))
        self.assertTrue(area.is_point_inside(Point(1.0, 1.0)))
        self.assertTrue(area.is_point_inside(Point(-1.0, -1.0)))
        self.assertTrue(area.is_point_inside(Point(1.0, -1.0)))
        self.assertFalse(area.is_point_inside(Point(1.01, 0.0)))
        self.assertFalse(area.is_point_inside(Point(0.0, -1.01)))

    def test_from_points(self):
        """Test bounding square of a non-square point cloud."""
        area = Area.from_points([Point(0.0, 0.0), Point(4.0, 2.0)])
        self.assertEqual(area.center, Point(2.0, 1.0))
        self.assertEqual(area.radius, 2.0)

    def test_from_points_contains_all_points(self):
        """Test every input point lies inside the constructed area."""
        points = [
            Point(462000.0, 101000.0),
            Point(462050.5, 101020.0),
            Point(461980.0, 101300.25),
            Point(462400.0, 100990.0),
        ]
        area = Area.from_points(points)
        for p in points:
            self.assertTrue(area.is_point_inside(p))

    def test_from_single_point(self):
        """Test single point gives a zero radius area containing it."""
        area = Area.from_points([Point(3.0, 4.0)])
        self.assertEqual(area.radius, 0.0)
        self.assertTrue(area.is_point_inside(Point(3.0, 4.0)))

    def test_from_points_empty(self):
        """Test empty input is rejected."""
        with self.assertRaises(ValueError):
            Area.from_points([])

    def test_negative_radius(self):
        """Test negative radius is rejected."""
        with self.assertRaises(ValueError):
            Area(Point(0.0, 0.0), -1.0)

    def test_distance_sq_to_point(self):
        """Test squared distance from a point to the square."""
        area = Area(Point(0.0, 0.0), 1.0)
        self.assertEqual(area.distance_sq_to_point(Point(0.5, 0.5)), 0.0)
        self.assertEqual(area.distance_sq_to_point(Point(3.0, 0.0)), 4.0)
        self.assertEqual(area.distance_sq_to_point(Point(4.0, 5.0)), 25.0)

    def test_shapely_interop(self):
        """Test conversion to and from shapely geometries."""
        area = Area(Point(1.0, 1.0), 2.0)
        self.assertEqual(area.bounds, (-1.0, -1.0, 3.0, 3.0))
        self.assertEqual(area.to_polygon().area, 16.0)

        line = LineString([(0, 0), (10, 4)])
        from_line = Area.from_geometry(line)
        self.assertEqual(from_line.center, Point(5.0, 2.0))
        self.assertEqual(from_line.radius, 5.0)


if __name__ == '__main__':
    unittest.main()

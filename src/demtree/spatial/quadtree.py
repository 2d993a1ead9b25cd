#!/usr/bin/env python3
"""
Quad Tree Module

Bounded-region quad tree over elevation points.

The tree covers a fixed square Area chosen at construction. Leaves hold up to
`leaf_capacity` points and split into four quadrants (NW, NE, SW, SE) once
they overflow. Queries can either copy matching points into a caller-provided
buffer or move them out of the tree in the same pass, so large point clouds
can be consumed region by region without extra allocation.
"""

import logging
from typing import Iterator, List, MutableSequence, Optional, Tuple

from ..core.config import DemTreeConfig, TreeConfig
from ..core.exceptions import BufferCapacityError, OutsideAreaError, TreeInvariantError
from ..geometry import Area, Point

logger = logging.getLogger(__name__)

# Quadrant order is also the insertion tie-break: overlapping child borders
# are resolved in favour of the first quadrant that contains the point.
QUADRANTS = ('nw', 'ne', 'sw', 'se')


class _BufferSink:
    """Writes points into a pre-sized buffer at sequential positions."""

    def __init__(self, buffer: MutableSequence[Point]):
        self.buffer = buffer
        self.capacity = len(buffer)
        self.count = 0

    def has_room(self) -> bool:
        return self.count < self.capacity

    def put(self, point: Point):
        self.buffer[self.count] = point
        self.count += 1


class _ListSink:
    """Collects points into a growing list."""

    def __init__(self):
        self.buffer: List[Point] = []
        self.capacity = None
        self.count = 0

    def has_room(self) -> bool:
        return True

    def put(self, point: Point):
        self.buffer.append(point)
        self.count += 1


class Node:
    """
    A single quad tree node.

    A node is either a leaf (`points` is a list, `children` is None) or an
    intermediate node (`points` is None, `children` holds the NW, NE, SW, SE
    nodes in that order). Leaves turn into intermediate nodes when they
    overflow; the opposite never happens.
    """

    __slots__ = ('area', 'depth', 'points', 'children')

    def __init__(self, area: Area, depth: int = 0):
        self.area = area
        self.depth = depth
        self.points: Optional[List[Point]] = []
        self.children: Optional[Tuple['Node', 'Node', 'Node', 'Node']] = None

    @property
    def is_leaf(self) -> bool:
        return self.children is None

    def insert(self, point: Point, settings: TreeConfig):
        if not self.area.is_point_inside(point):
            raise OutsideAreaError()

        if self.children is not None:
            for child in self.children:
                if child.area.is_point_inside(point):
                    child.insert(point, settings)
                    return
            raise TreeInvariantError(
                "Invalid tree! Point is in node area, but in none of the quadrants."
            )

        self.points.append(point)
        if len(self.points) > settings.leaf_capacity:
            if self.depth < settings.max_depth:
                self.subdivide(settings)
            elif len(self.points) == settings.leaf_capacity + 1:
                logger.warning(
                    f"Leaf at max depth {self.depth} exceeds capacity "
                    f"({settings.leaf_capacity}) around ({self.area.center.x}, {self.area.center.y}); "
                    f"not subdividing further"
                )

    def subdivide(self, settings: TreeConfig):
        """Replace this leaf with four empty quadrants and reinsert its points."""
        if self.children is not None:
            raise TreeInvariantError("subdivide called on a non-leaf node")

        center = self.area.center
        # Children sit a quarter side away from the parent center and reach
        # `boundary_epsilon` past it, so neighbouring quadrants overlap along
        # the shared center lines and rounding cannot open a gap between them.
        # Insertion picks the first matching quadrant, so no point is stored
        # twice.
        half = self.area.radius / 2.0
        r = half + settings.boundary_epsilon
        depth = self.depth + 1

        nw = Node(Area(Point(center.x - half, center.y - half), r), depth)
        ne = Node(Area(Point(center.x + half, center.y - half), r), depth)
        sw = Node(Area(Point(center.x - half, center.y + half), r), depth)
        se = Node(Area(Point(center.x + half, center.y + half), r), depth)

        points, self.points = self.points, None
        self.children = (nw, ne, sw, se)

        logger.debug(
            f"Subdivided leaf at depth {self.depth} "
            f"(center=({center.x}, {center.y}), radius={self.area.radius}), "
            f"redistributing {len(points)} points"
        )

        for p in points:
            try:
                self.insert(p, settings)
            except OutsideAreaError as e:
                raise TreeInvariantError("subdivision produced an invalid tree") from e

    def collect(self, area: Area, sink, remove: bool):
        """Copy (or move, with `remove`) points inside `area` into `sink`."""
        if self.children is not None:
            for child in self.children:
                if child.area.intersects(area):
                    child.collect(area, sink, remove)
            return

        points = self.points
        if not remove:
            for p in points:
                if area.is_point_inside(p):
                    if not sink.has_room():
                        raise BufferCapacityError(sink.count, sink.capacity)
                    sink.put(p)
            return

        i = 0
        while i < len(points):
            if not area.is_point_inside(points[i]):
                i += 1
                continue
            if not sink.has_room():
                raise BufferCapacityError(sink.count, sink.capacity)

            # Swap-remove: the last point takes the freed slot and is
            # examined on the next iteration.
            p = points[i]
            last = points.pop()
            if i < len(points):
                points[i] = last
            sink.put(p)

    def nearest(self, point: Point, best: Optional[Tuple[float, Point]]) -> Optional[Tuple[float, Point]]:
        """
        Branch-and-bound nearest search.

        Children containing the query point are searched first, in quadrant
        order, then the remaining children whose region could still hold a
        closer point. Ties keep the point found first.
        """
        if self.children is None:
            for p in self.points:
                d = p.distance_sq(point)
                if best is None or d < best[0]:
                    best = (d, p)
            return best

        containing = [c for c in self.children if c.area.is_point_inside(point)]
        others = [c for c in self.children if not c.area.is_point_inside(point)]

        for child in containing + others:
            if best is not None and child.area.distance_sq_to_point(point) >= best[0]:
                continue
            best = child.nearest(point, best)

        return best

    def size(self) -> int:
        if self.children is None:
            return len(self.points)
        return sum(child.size() for child in self.children)

    def iter_leaves(self) -> Iterator['Node']:
        if self.children is None:
            yield self
            return
        for child in self.children:
            yield from child.iter_leaves()


class QuadTree:
    """
    Quad tree over a fixed square area.

    Only points inside the area given at construction can be inserted, and
    only areas intersecting it can be queried.
    """

    def __init__(self, area: Area, config: Optional[DemTreeConfig] = None):
        """
        Construct a new quad tree to insert points from specific bounds.

        Args:
            area: Square covered by the tree
            config: Tree tunables, defaults to a fresh `DemTreeConfig()`
        """
        self.config = config or DemTreeConfig()
        self.root = Node(area)

    @property
    def area(self) -> Area:
        return self.root.area

    def size(self) -> int:
        """Returns the number of points in the tree. Walks the whole tree."""
        return self.root.size()

    def __len__(self) -> int:
        return self.size()

    def insert(self, point: Point):
        """
        Insert a new point into the tree.

        Raises:
            OutsideAreaError: if the point is outside of the tree area
        """
        self.root.insert(point, self.config.tree)

    def insert_many(self, points) -> int:
        """Insert every point, stopping at the first one outside the tree area."""
        count = 0
        for p in points:
            self.insert(p)
            count += 1
        return count

    def query(self, area: Area, results: MutableSequence[Point]) -> int:
        """
        Queries points inside the given area.

        Matching points are written to `results` starting at index 0 and the
        number of written points is returned; the caller is interested in
        `results[:return_value]`.

        Raises:
            OutsideAreaError: if `area` does not intersect the tree area
            BufferCapacityError: if more points match than `results` holds
        """
        self._check_query_area(area)
        sink = _BufferSink(results)
        self.root.collect(area, sink, remove=False)
        return sink.count

    def query_remove(self, area: Area, results: MutableSequence[Point]) -> int:
        """
        Queries points inside the given area and removes them from the tree.

        Same contract as `query`. On `BufferCapacityError` the points already
        written to `results` are gone from the tree, the rest stay in it.
        """
        self._check_query_area(area)
        sink = _BufferSink(results)
        self.root.collect(area, sink, remove=True)
        return sink.count

    def query_points(self, area: Area) -> List[Point]:
        """Like `query`, but returns the matching points as a new list."""
        self._check_query_area(area)
        sink = _ListSink()
        self.root.collect(area, sink, remove=False)
        return sink.buffer

    def query_remove_points(self, area: Area) -> List[Point]:
        """Like `query_remove`, but returns the removed points as a new list."""
        self._check_query_area(area)
        sink = _ListSink()
        self.root.collect(area, sink, remove=True)
        return sink.buffer

    def nearest(self, point: Point) -> Optional[Point]:
        """
        Finds the point nearest to the given point.

        The query point has to be inside the tree area.
        Returns None only if the tree is empty.
        """
        if not self.root.area.is_point_inside(point):
            raise OutsideAreaError()

        best = self.root.nearest(point, None)
        return best[1] if best is not None else None

    def leaf_areas(self) -> Iterator[Tuple[Area, int]]:
        """Yields (area, point count) for every leaf."""
        for leaf in self.root.iter_leaves():
            yield leaf.area, len(leaf.points)

    def points(self) -> Iterator[Point]:
        for leaf in self.root.iter_leaves():
            yield from leaf.points

    def depth(self) -> int:
        """Depth of the deepest leaf; a tree that never split has depth 0."""
        return max(leaf.depth for leaf in self.root.iter_leaves())

    def _check_query_area(self, area: Area):
        if not self.root.area.intersects(area):
            raise OutsideAreaError("area is outside of the tree area")

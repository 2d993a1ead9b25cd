"""
Spatial Indexing Module

Quad tree indexing of elevation points for region and nearest queries.
"""

from .quadtree import QuadTree, Node, QUADRANTS

__all__ = [
    'QuadTree',
    'Node',
    'QUADRANTS',
]

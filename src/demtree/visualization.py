#!/usr/bin/env python3
"""
Quad Tree Visualization Module

Plots the leaf partition of a quad tree together with the stored points,
coloured by elevation when the points carry one.
"""

import logging
from pathlib import Path
from typing import Optional

import matplotlib.pyplot as plt
import matplotlib.patches as mpatches
from matplotlib.collections import PatchCollection
import numpy as np

from .spatial import QuadTree

logger = logging.getLogger(__name__)


class QuadTreeVisualizer:
    """Renders quad tree partitions to image files."""

    def __init__(self, output_dir: str = "outputs/qtree"):
        """
        Initialize visualizer with output directory.

        Args:
            output_dir: Directory to save visualization outputs
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)

        self.colors = {
            'leaves': '#2E86AB',      # Blue
            'root': '#C73E1D',        # Red
            'points': '#6B6B6B',      # Gray
        }

    def draw_tree(self, ax: plt.Axes, tree: QuadTree, show_points: bool = True):
        """
        Draw leaf squares and points of `tree` onto `ax`.

        Args:
            ax: Matplotlib axes
            tree: Tree to draw
            show_points: Whether to scatter the stored points
        """
        patches = []
        for area, _count in tree.leaf_areas():
            min_x, min_y, _, _ = area.bounds
            side = 2 * area.radius
            patches.append(mpatches.Rectangle((min_x, min_y), side, side))

        leaves = PatchCollection(patches, facecolor='none',
                                 edgecolor=self.colors['leaves'], linewidth=0.5)
        ax.add_collection(leaves)

        root_min_x, root_min_y, _, _ = tree.area.bounds
        root_side = 2 * tree.area.radius
        ax.add_patch(mpatches.Rectangle((root_min_x, root_min_y), root_side, root_side,
                                        fill=False, edgecolor=self.colors['root'], linewidth=1.5))

        if show_points:
            points = list(tree.points())
            if points:
                xs = np.array([p.x for p in points])
                ys = np.array([p.y for p in points])
                heights = [p.data for p in points]

                if all(isinstance(h, (int, float)) for h in heights):
                    scatter = ax.scatter(xs, ys, c=heights, s=2, cmap='terrain')
                    plt.colorbar(scatter, ax=ax, label='Height (m)')
                else:
                    ax.scatter(xs, ys, s=2, color=self.colors['points'])

        margin = tree.area.radius * 0.05
        min_x, min_y, max_x, max_y = tree.area.bounds
        ax.set_xlim(min_x - margin, max_x + margin)
        ax.set_ylim(min_y - margin, max_y + margin)
        ax.set_aspect('equal')

    def plot_tree(self, tree: QuadTree, name: str = "qtree",
                  show_points: bool = True, title: Optional[str] = None) -> str:
        """
        Plot the tree partition and save it as PNG.

        Returns:
            Path to saved plot file
        """
        fig, ax = plt.subplots(figsize=(10, 10))
        self.draw_tree(ax, tree, show_points=show_points)

        leaf_count = sum(1 for _ in tree.leaf_areas())
        ax.set_title(title or f"{name}: {tree.size()} points, {leaf_count} leaves, depth {tree.depth()}")

        output_path = self.output_dir / f"{name}.png"
        fig.savefig(output_path, dpi=150, bbox_inches='tight')
        plt.close(fig)

        logger.debug(f"Saved tree plot to {output_path}")
        return str(output_path)

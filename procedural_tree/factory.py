"""Builds randomized trees and exposes the per-frame entry points to a host."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Optional

from .branch import Branch
from .canvas import Canvas
from .config import StyleRanges, TreeConfig, TreeStyle
from .vector import Vec2

logger = logging.getLogger(__name__)


@dataclass
class TreeStats:
    branches: int
    leaves: int
    max_depth: int
    mature: bool


class TreeFactory:
    def __init__(self, config: TreeConfig, rand: random.Random) -> None:
        self.config = config
        self.rand = rand

    def draw_style(self) -> TreeStyle:
        ranges: StyleRanges = self.config.ranges
        uniform = self.rand.uniform
        base_r, base_g, base_b = ranges.leaf_color_base
        color = (
            base_r + uniform(*ranges.leaf_red_offset),
            base_g + uniform(*ranges.leaf_green_offset),
            base_b + uniform(*ranges.leaf_blue_offset),
        )
        return TreeStyle(
            leaf_color=color,
            max_leaf_size=uniform(*ranges.max_leaf_size),
            max_branch_length=uniform(*ranges.max_branch_length),
            max_thickness=uniform(*ranges.max_thickness),
            max_depth=uniform(*ranges.max_depth),
        )

    def build_root(self, style: TreeStyle, now: float) -> Branch:
        cfg = self.config
        root = Branch(
            0,
            style,
            cfg.growth,
            self.rand,
            now,
            anchor=Vec2(cfg.width / 2.0, float(cfg.height)),
        )
        # Initial size is capped at the root maxima so growth stays bounded.
        root.length = min(self.rand.uniform(1.0, max(1.0, cfg.height / 2.0)), root.max_length)
        root.thickness = min(self.rand.uniform(*cfg.ranges.root_thickness), root.max_thickness)
        return root


class ProceduralTree:
    """Host-facing handle: owns the current style and root branch."""

    def __init__(self, config: TreeConfig, rand: Optional[random.Random] = None) -> None:
        self.config = config
        self.factory = TreeFactory(config, rand if rand is not None else random.Random())
        self.style: Optional[TreeStyle] = None
        self.root: Optional[Branch] = None

    def regenerate(self, now: float) -> Branch:
        """Discard the current tree and start a fresh one at ``now``."""
        self.style = self.factory.draw_style()
        self.root = self.factory.build_root(self.style, now)
        logger.info(
            "new tree: depth<%.2f length=%.1f thickness=%.1f leaf=%.1f",
            self.style.max_depth,
            self.style.max_branch_length,
            self.style.max_thickness,
            self.style.max_leaf_size,
        )
        return self.root

    def render_frame(self, canvas: Canvas, now: float) -> None:
        if self.root is None:
            self.regenerate(now)
        canvas.clear(self.config.background)
        self.root.render(canvas, now)

    def stats(self) -> TreeStats:
        if self.root is None:
            return TreeStats(branches=0, leaves=0, max_depth=0, mature=False)
        branches = list(self.root.walk())
        leaves = [leaf for branch in branches for leaf in branch.leaves]
        return TreeStats(
            branches=len(branches),
            leaves=len(leaves),
            max_depth=max(branch.depth for branch in branches),
            mature=all(b.mature for b in branches) and all(leaf.mature for leaf in leaves),
        )

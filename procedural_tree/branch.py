"""Recursive branch node: growth, spawning and per-frame anchor propagation."""

from __future__ import annotations

import enum
import logging
import random
from typing import Iterator, List, Optional, Tuple

from .canvas import Canvas
from .config import GrowthSettings, TreeStyle
from .geometry import Point, growth_fraction, lerp, quad_vertices
from .leaf import Leaf
from .oscillator import Oscillator
from .vector import Vec2

logger = logging.getLogger(__name__)


class BranchState(enum.Enum):
    GROWING = "growing"
    LEAVES_SPAWNED = "leaves_spawned"
    MATURE = "mature"


# Legal transitions of the one-shot spawn latches.
TRANSITIONS = {
    BranchState.GROWING: (BranchState.LEAVES_SPAWNED,),
    BranchState.LEAVES_SPAWNED: (BranchState.MATURE,),
    BranchState.MATURE: (),
}


class Branch:
    """Segment that grows, sways and spawns two leaves and two child branches."""

    def __init__(
        self,
        depth: int,
        style: TreeStyle,
        settings: GrowthSettings,
        rand: random.Random,
        now: float,
        rotation: float = 0.0,
        length: float = 1.0,
        thickness: float = 2.0,
        anchor: Optional[Vec2] = None,
        color: Optional[Tuple[int, int, int]] = None,
    ) -> None:
        if depth < 0:
            raise ValueError(f"Branch depth must be non-negative, got {depth}")
        self.depth = depth
        self.style = style
        self.settings = settings
        self.rand = rand
        self.anchor = anchor if anchor is not None else Vec2(0.0, 0.0)
        self.max_length = style.max_branch_length / (depth + 1)
        self.max_thickness = style.max_thickness / (depth + 1)
        # Starting sizes never exceed the depth-scaled maxima.
        self.length = min(length, self.max_length)
        self.thickness = min(thickness, self.max_thickness)
        self.taper = settings.taper
        self.rotation = rotation
        self.jittered_rotation = rotation
        self.color = color if color is not None else settings.branch_color
        self.spawn_time = now
        self.state = BranchState.GROWING
        self.branches: List[Branch] = []
        self.leaves: List[Leaf] = []
        self.jitter = Oscillator(
            settings.branch_jitter_speed, settings.branch_jitter_amplitude, rand
        )

    @property
    def mature(self) -> bool:
        return self.state is BranchState.MATURE

    @property
    def leaves_spawned(self) -> bool:
        return self.state is not BranchState.GROWING

    def set_anchor(self, x: float, y: float) -> None:
        self.anchor = Vec2(x, y)

    def _advance(self, target: BranchState) -> None:
        if target not in TRANSITIONS[self.state]:
            raise RuntimeError(f"Illegal branch transition {self.state.name} -> {target.name}")
        self.state = target

    def _spawn_leaves(self, now: float) -> None:
        lo, hi = self.settings.leaf_spawn_size
        self.leaves = [
            Leaf(self.style, self.settings, self.rand, now, self.rotation + offset, self.rand.uniform(lo, hi))
            for offset in (0.0, 180.0)
        ]
        logger.debug("depth %d spawned leaves at %.1f", self.depth, now)

    def _spawn_branches(self, now: float) -> None:
        band = 360.0 / (self.depth + 1)
        angle = self.settings.child_angle
        self.branches = [
            Branch(
                self.depth + 1,
                self.style,
                self.settings,
                self.rand,
                now,
                rotation=side * angle + self.rand.uniform(-band, band),
            )
            for side in (1, -1)
        ]
        logger.debug("depth %d spawned branches at %.1f", self.depth, now)

    def grow(self, now: float) -> None:
        duration = self.settings.growth_duration
        elapsed = now - self.spawn_time
        if self.length < self.max_length:
            t = growth_fraction(elapsed, duration)
            self.length = max(self.length, lerp(1.0, self.max_length, t))
            self.thickness = max(self.thickness, lerp(1.0, self.max_thickness, t))
        if self.state is BranchState.GROWING and elapsed > duration / 2.0:
            self._spawn_leaves(now)
            self._advance(BranchState.LEAVES_SPAWNED)
        if self.state is BranchState.LEAVES_SPAWNED and elapsed > duration:
            if self.depth < self.style.max_depth:
                self._spawn_branches(now)
            self._advance(BranchState.MATURE)

    def update(self, now: float) -> List[Point]:
        """Advance growth and sway, returning this frame's quad."""
        if not self.mature:
            self.grow(now)
        self.jittered_rotation = self.rotation + self.jitter(now)
        return quad_vertices(
            self.anchor, self.length, self.jittered_rotation, self.thickness, self.taper
        )

    def render(self, canvas: Canvas, now: float) -> None:
        quad = self.update(now)
        canvas.quad(quad, self.color)
        tip_right, tip_left = quad[2], quad[3]
        for children in (self.branches, self.leaves):
            if children:
                children[0].set_anchor(*tip_right)
                children[1].set_anchor(*tip_left)
                children[0].render(canvas, now)
                children[1].render(canvas, now)

    def walk(self) -> Iterator["Branch"]:
        """Yield this branch and every descendant branch, pre-order."""
        yield self
        for child in self.branches:
            yield from child.walk()

from __future__ import annotations

import enum
import random
from typing import Optional, Tuple

from .canvas import Canvas
from .config import GrowthSettings, TreeStyle
from .geometry import growth_fraction, lerp, triangle_vertices
from .oscillator import Oscillator
from .vector import Vec2


class LeafState(enum.Enum):
    GROWING = "growing"
    MATURE = "mature"


class Leaf:
    """Triangle that grows from size 1 to ``max_size`` and sways in place.

    ``anchor`` is written by the owning branch every frame before
    :meth:`render` is called.
    """

    def __init__(
        self,
        style: TreeStyle,
        settings: GrowthSettings,
        rand: random.Random,
        now: float,
        rotation: float = 0.0,
        size: Optional[float] = None,
    ) -> None:
        self.settings = settings
        spread = settings.leaf_color_jitter
        r, g, b = style.leaf_color
        self.color: Tuple[float, float, float, int] = (
            r + rand.uniform(-spread, spread),
            g + rand.uniform(-spread, spread),
            b + rand.uniform(-spread, spread),
            settings.leaf_alpha,
        )
        base = style.max_leaf_size if size is None else size
        jitter = settings.leaf_size_jitter
        self.max_size = max(1.0, base + rand.uniform(-jitter, jitter))
        self.rotation = rotation
        self.jittered_rotation = rotation
        self.anchor = Vec2(0.0, 0.0)
        self.size = 1.0
        self.spawn_time = now
        self.state = LeafState.GROWING
        self.jitter = Oscillator(
            settings.leaf_jitter_speed, settings.leaf_jitter_amplitude, rand
        )

    @property
    def mature(self) -> bool:
        return self.state is LeafState.MATURE

    def set_anchor(self, x: float, y: float) -> None:
        self.anchor = Vec2(x, y)

    def grow(self, now: float) -> None:
        duration = self.settings.growth_duration
        elapsed = now - self.spawn_time
        self.size = max(self.size, lerp(1.0, self.max_size, growth_fraction(elapsed, duration)))
        if elapsed > duration:
            self.state = LeafState.MATURE

    def update(self, now: float) -> None:
        if not self.mature:
            self.grow(now)
        self.jittered_rotation = self.rotation + self.jitter(now)

    def render(self, canvas: Canvas, now: float) -> None:
        self.update(now)
        canvas.triangle(triangle_vertices(self.anchor, self.size, self.jittered_rotation), self.color)

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Vec2:
    x: float
    y: float

    def __add__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Vec2":
        return Vec2(self.x * scalar, self.y * scalar)

    def rotated(self, degrees: float) -> "Vec2":
        # y grows downwards on screen, so positive degrees turn clockwise.
        rad = math.radians(degrees)
        c = math.cos(rad)
        s = math.sin(rad)
        return Vec2(self.x * c - self.y * s, self.x * s + self.y * c)

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

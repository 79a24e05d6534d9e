"""Polygon math for leaves (triangles) and branch segments (quads).

Rotations are in degrees, 0 pointing up the screen and positive turning
clockwise. Every function here is pure.
"""

from __future__ import annotations

from typing import List, Tuple

from .vector import Vec2

Point = Tuple[float, float]


def clamp01(value: float) -> float:
    return max(0.0, min(1.0, value))


def lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def growth_fraction(elapsed: float, duration: float) -> float:
    return clamp01(elapsed / duration)


def triangle_vertices(pt: Vec2, size: float, rotation: float) -> List[Point]:
    """Isoceles triangle with hypotenuse ``size`` and height ``size / 3``.

    The first vertex is placed on ``pt`` so the leaf hangs off its anchor
    instead of being centred on it.
    """
    local = [
        Vec2(-size / 2.0, size / 6.0),
        Vec2(size / 2.0, size / 6.0),
        Vec2(0.0, -size / 6.0),
    ]
    rotated = [p.rotated(rotation) for p in local]
    offset = pt - rotated[0]
    return [(p + offset).as_tuple() for p in rotated]


def quad_vertices(
    pt: Vec2, length: float, rotation: float, thickness: float, taper: float
) -> List[Point]:
    """Tapered segment from ``pt`` to its rotated tip.

    Returned order is base left, base right, tip right, tip left. The base
    corners stay horizontal; only the tip follows the rotation.
    """
    tip = Vec2(0.0, -length).rotated(rotation) + pt
    half_tip = thickness * taper
    return [
        (pt.x - thickness, pt.y),
        (pt.x + thickness, pt.y),
        (tip.x + half_tip, tip.y),
        (tip.x - half_tip, tip.y),
    ]

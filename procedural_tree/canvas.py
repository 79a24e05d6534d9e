"""Drawing surfaces the tree renders onto."""

from __future__ import annotations

import math
from typing import Protocol, Sequence, Tuple

Point = Tuple[float, float]
ColorLike = Sequence[float]


def to_rgba(color: ColorLike) -> Tuple[int, int, int, int]:
    channels = [int(round(max(0.0, min(255.0, c)))) for c in color]
    if len(channels) == 3:
        channels.append(255)
    r, g, b, a = channels
    return (r, g, b, a)


class Canvas(Protocol):
    def clear(self, color: ColorLike) -> None:
        ...

    def triangle(self, points: Sequence[Point], color: ColorLike) -> None:
        ...

    def quad(self, points: Sequence[Point], color: ColorLike) -> None:
        ...


class PygameCanvas:
    """Draws onto a pygame surface, blending translucent fills."""

    def __init__(self, surface) -> None:
        import pygame

        self.pygame = pygame
        self.surface = surface

    def clear(self, color: ColorLike) -> None:
        self.surface.fill(to_rgba(color)[:3])

    def _polygon(self, points: Sequence[Point], color: ColorLike) -> None:
        pygame = self.pygame
        rgba = to_rgba(color)
        if rgba[3] == 255:
            pygame.draw.polygon(self.surface, rgba[:3], points)
            return
        xs = [p[0] for p in points]
        ys = [p[1] for p in points]
        x0 = int(math.floor(min(xs)))
        y0 = int(math.floor(min(ys)))
        w = int(math.ceil(max(xs))) - x0 + 1
        h = int(math.ceil(max(ys))) - y0 + 1
        layer = pygame.Surface((w, h), pygame.SRCALPHA)
        pygame.draw.polygon(layer, rgba, [(x - x0, y - y0) for x, y in points])
        self.surface.blit(layer, (x0, y0))

    def triangle(self, points: Sequence[Point], color: ColorLike) -> None:
        self._polygon(points, color)

    def quad(self, points: Sequence[Point], color: ColorLike) -> None:
        self._polygon(points, color)


class PillowCanvas:
    """Headless canvas backed by a Pillow image."""

    def __init__(self, width: int, height: int, background: ColorLike = (0, 0, 0)) -> None:
        from PIL import Image, ImageDraw

        self.image = Image.new("RGB", (width, height), to_rgba(background)[:3])
        self.draw = ImageDraw.Draw(self.image, "RGBA")

    def clear(self, color: ColorLike) -> None:
        self.draw.rectangle([(0, 0), self.image.size], fill=to_rgba(color))

    def triangle(self, points: Sequence[Point], color: ColorLike) -> None:
        self.draw.polygon([tuple(p) for p in points], fill=to_rgba(color))

    def quad(self, points: Sequence[Point], color: ColorLike) -> None:
        self.draw.polygon([tuple(p) for p in points], fill=to_rgba(color))

    def save(self, path: str) -> None:
        self.image.save(path)

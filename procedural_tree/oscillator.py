"""Sine jitter used to sway branches and leaves."""

from __future__ import annotations

import math
import random


class Oscillator:
    """Angular perturbation ``amplitude * sin(speed * (t + phase))`` in degrees.

    The phase is drawn once from ``[1, 360 / speed]`` so that any phase in the
    range covers at most one full period; nodes sharing a speed still sway
    independently of each other.
    """

    def __init__(self, speed: float, amplitude: float, rand: random.Random) -> None:
        if speed <= 0:
            raise ValueError(f"Oscillator speed must be positive, got {speed}")
        self.speed = speed
        self.amplitude = amplitude
        slices = 360.0 / speed
        self.phase = rand.uniform(1.0, slices)

    def __call__(self, now: float) -> float:
        return self.amplitude * math.sin(math.radians(self.speed * (now + self.phase)))

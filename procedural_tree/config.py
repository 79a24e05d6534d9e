"""Tree parameters, growth constants and the JSON config loader."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field, fields
from typing import Any, Dict, Tuple

Color = Tuple[float, float, float]
Range = Tuple[float, float]


class ConfigurationError(ValueError):
    """Raised when a range or constant cannot produce a valid tree."""


def check_range(name: str, value: Range) -> Range:
    try:
        lo, hi = value
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"{name} must be a (min, max) pair, got {value!r}") from exc
    if lo > hi:
        raise ConfigurationError(f"{name} has min {lo} greater than max {hi}")
    return (float(lo), float(hi))


def check_positive(name: str, value: float) -> float:
    if value <= 0:
        raise ConfigurationError(f"{name} must be positive, got {value}")
    return float(value)


@dataclass(frozen=True)
class TreeStyle:
    """Parameters shared by every node of one generated tree."""

    leaf_color: Color
    max_leaf_size: float
    max_branch_length: float
    max_thickness: float
    max_depth: float


@dataclass(frozen=True)
class GrowthSettings:
    growth_duration: float = 250.0
    branch_jitter_speed: float = 0.15
    branch_jitter_amplitude: float = 0.05
    leaf_jitter_speed: float = 0.25
    leaf_jitter_amplitude: float = 0.15
    taper: float = 0.25
    branch_color: Tuple[int, int, int] = (55, 45, 15)
    leaf_alpha: int = 180
    leaf_color_jitter: float = 20.0
    leaf_size_jitter: float = 50.0
    leaf_spawn_size: Range = (20.0, 40.0)
    child_angle: float = 30.0

    def __post_init__(self) -> None:
        check_positive("growth_duration", self.growth_duration)
        check_positive("branch_jitter_speed", self.branch_jitter_speed)
        check_positive("leaf_jitter_speed", self.leaf_jitter_speed)
        if self.leaf_color_jitter < 0 or self.leaf_size_jitter < 0:
            raise ConfigurationError("leaf jitter ranges must not be negative")
        if not 0 <= self.leaf_alpha <= 255:
            raise ConfigurationError(f"leaf_alpha must be within 0..255, got {self.leaf_alpha}")
        object.__setattr__(self, "leaf_spawn_size", check_range("leaf_spawn_size", self.leaf_spawn_size))


@dataclass(frozen=True)
class StyleRanges:
    """Randomized ranges a new :class:`TreeStyle` is drawn from."""

    leaf_color_base: Color = (120.0, 220.0, 35.0)
    leaf_red_offset: Range = (-20.0, 120.0)
    leaf_green_offset: Range = (-60.0, 30.0)
    leaf_blue_offset: Range = (-10.0, 20.0)
    max_leaf_size: Range = (25.0, 250.0)
    max_branch_length: Range = (25.0, 400.0)
    max_thickness: Range = (2.0, 40.0)
    max_depth: Range = (3.0, 9.0)
    root_thickness: Range = (2.0, 40.0)

    def __post_init__(self) -> None:
        for f in fields(self):
            if f.name == "leaf_color_base":
                continue
            object.__setattr__(self, f.name, check_range(f.name, getattr(self, f.name)))
        if self.max_depth[0] < 0:
            raise ConfigurationError("max_depth must not be negative")


@dataclass(frozen=True)
class TreeConfig:
    width: int = 960
    height: int = 960
    background: Tuple[int, int, int] = (209, 209, 190)
    growth: GrowthSettings = field(default_factory=GrowthSettings)
    ranges: StyleRanges = field(default_factory=StyleRanges)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ConfigurationError(f"canvas must be non-empty, got {self.width}x{self.height}")


def _tuples(section: Dict[str, Any]) -> Dict[str, Any]:
    return {k: tuple(v) if isinstance(v, list) else v for k, v in section.items()}


def config_from_dict(data: Dict[str, Any]) -> TreeConfig:
    """Build a :class:`TreeConfig` from the ``tree`` section of a JSON config."""
    try:
        growth = GrowthSettings(**_tuples(data.get("growth", {})))
        ranges = StyleRanges(**_tuples(data.get("ranges", {})))
    except TypeError as exc:
        raise ConfigurationError(str(exc)) from exc
    kwargs: Dict[str, Any] = {"growth": growth, "ranges": ranges}
    for key in ("width", "height"):
        if key in data:
            kwargs[key] = int(data[key])
    if "background" in data:
        kwargs["background"] = tuple(data["background"])
    return TreeConfig(**kwargs)


def load_config(path: str) -> dict:
    if not os.path.exists(path):
        return {}
    with open(path, "r", encoding="utf-8") as handle:
        return json.load(handle)

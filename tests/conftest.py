import random
from typing import List, Sequence, Tuple

import pytest

from procedural_tree.config import GrowthSettings, TreeStyle


class RecordingCanvas:
    """Canvas that remembers every polygon instead of drawing it."""

    def __init__(self) -> None:
        self.calls: List[Tuple[str, list, tuple]] = []
        self.cleared = 0

    def clear(self, color) -> None:
        self.cleared += 1
        self.calls.clear()

    def triangle(self, points: Sequence, color) -> None:
        self.calls.append(("triangle", list(points), tuple(color)))

    def quad(self, points: Sequence, color) -> None:
        self.calls.append(("quad", list(points), tuple(color)))

    def kinds(self) -> List[str]:
        return [kind for kind, _, _ in self.calls]


def make_style(
    max_depth: float = 3, max_branch_length: float = 300.0, max_thickness: float = 20.0
) -> TreeStyle:
    return TreeStyle(
        leaf_color=(150.0, 200.0, 40.0),
        max_leaf_size=100.0,
        max_branch_length=max_branch_length,
        max_thickness=max_thickness,
        max_depth=max_depth,
    )


@pytest.fixture
def canvas():
    return RecordingCanvas()


@pytest.fixture
def rand():
    return random.Random(1234)


@pytest.fixture
def settings():
    return GrowthSettings(growth_duration=250.0)


@pytest.fixture
def style():
    return make_style()

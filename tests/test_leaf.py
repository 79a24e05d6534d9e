import random

import pytest

from procedural_tree.config import GrowthSettings
from procedural_tree.leaf import Leaf, LeafState


def test_grows_monotonically_to_max(style, settings, rand, canvas):
    leaf = Leaf(style, settings, rand, now=0.0, rotation=10.0, size=30.0)
    sizes = []
    for now in range(0, 400, 10):
        leaf.render(canvas, now)
        sizes.append(leaf.size)
    assert sizes == sorted(sizes)
    assert sizes[0] == 1.0
    assert max(sizes) <= leaf.max_size
    assert sizes[-1] == leaf.max_size


def test_matures_only_after_growth_duration(style, settings, rand):
    leaf = Leaf(style, settings, rand, now=100.0)
    leaf.update(350.0)
    assert leaf.state is LeafState.GROWING
    leaf.update(351.0)
    assert leaf.mature


def test_mature_leaf_keeps_size_but_still_sways(style, settings, rand):
    leaf = Leaf(style, settings, rand, now=0.0)
    leaf.update(300.0)
    size = leaf.size
    rotations = set()
    for now in range(300, 3000, 37):
        leaf.update(now)
        rotations.add(leaf.jittered_rotation)
        assert leaf.size == size
    assert len(rotations) > 1
    assert all(abs(r - leaf.rotation) <= settings.leaf_jitter_amplitude for r in rotations)


def test_max_size_is_floored_at_one(style, settings):
    leaf = Leaf(style, settings, random.Random(0), now=0.0, size=-500.0)
    assert leaf.max_size == 1.0


def test_color_is_perturbed_base_with_alpha(style, rand):
    settings = GrowthSettings(leaf_color_jitter=20.0, leaf_alpha=180)
    leaf = Leaf(style, settings, rand, now=0.0)
    r, g, b, a = leaf.color
    base = style.leaf_color
    assert abs(r - base[0]) <= 20 and abs(g - base[1]) <= 20 and abs(b - base[2]) <= 20
    assert a == 180


def test_draws_triangle_from_anchor(style, settings, rand, canvas):
    leaf = Leaf(style, settings, rand, now=0.0)
    leaf.set_anchor(40.0, 60.0)
    leaf.render(canvas, 50.0)
    kind, points, color = canvas.calls[0]
    assert kind == "triangle"
    assert len(points) == 3
    assert points[0] == pytest.approx((40.0, 60.0))
    assert color == leaf.color

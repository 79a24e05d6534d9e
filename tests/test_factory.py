import random

import pytest

from procedural_tree.config import StyleRanges, TreeConfig
from procedural_tree.factory import ProceduralTree, TreeFactory

from conftest import RecordingCanvas


def grown_tree(seed=7, until=600.0):
    config = TreeConfig(width=400, height=300, ranges=StyleRanges(max_depth=(3.0, 5.0)))
    tree = ProceduralTree(config, random.Random(seed))
    tree.regenerate(0.0)
    canvas = RecordingCanvas()
    now = 0.0
    while now < until:
        now += 20.0
        tree.render_frame(canvas, now)
    return tree


def test_style_is_drawn_from_ranges():
    ranges = StyleRanges()
    factory = TreeFactory(TreeConfig(ranges=ranges), random.Random(3))
    for _ in range(20):
        style = factory.draw_style()
        assert ranges.max_leaf_size[0] <= style.max_leaf_size <= ranges.max_leaf_size[1]
        assert ranges.max_branch_length[0] <= style.max_branch_length <= ranges.max_branch_length[1]
        assert ranges.max_thickness[0] <= style.max_thickness <= ranges.max_thickness[1]
        assert ranges.max_depth[0] <= style.max_depth <= ranges.max_depth[1]
        assert 100.0 <= style.leaf_color[0] <= 240.0


def test_root_is_anchored_bottom_center_and_bounded():
    tree = ProceduralTree(TreeConfig(width=400, height=300), random.Random(1))
    root = tree.regenerate(50.0)
    assert root.anchor.as_tuple() == (200.0, 300.0)
    assert root.depth == 0
    assert root.spawn_time == 50.0
    assert 1.0 <= root.length <= root.max_length
    assert root.thickness <= root.max_thickness
    assert root.max_length == tree.style.max_branch_length


def test_regenerate_discards_previous_tree():
    tree = grown_tree()
    old_root = tree.root
    old_nodes = {id(node) for node in old_root.walk()}
    old_leaves = {id(leaf) for node in old_root.walk() for leaf in node.leaves}
    assert len(old_nodes) > 1

    tree.regenerate(600.0)
    tree.regenerate(600.0)
    assert tree.root is not old_root
    new_nodes = list(tree.root.walk())
    assert all(id(node) not in old_nodes for node in new_nodes)
    assert all(id(leaf) not in old_leaves for node in new_nodes for leaf in node.leaves)
    assert tree.root.branches == [] and tree.root.leaves == []


def test_same_seed_same_tree_different_seed_different_tree():
    a = ProceduralTree(TreeConfig(), random.Random(10))
    b = ProceduralTree(TreeConfig(), random.Random(10))
    c = ProceduralTree(TreeConfig(), random.Random(11))
    a.regenerate(0.0)
    b.regenerate(0.0)
    c.regenerate(0.0)
    assert a.style == b.style
    assert a.root.length == b.root.length
    assert a.style != c.style


def test_render_frame_clears_and_builds_lazily():
    tree = ProceduralTree(TreeConfig(), random.Random(2))
    canvas = RecordingCanvas()
    tree.render_frame(canvas, 10.0)
    assert tree.root is not None
    assert canvas.cleared == 1
    assert canvas.kinds() == ["quad"]


def test_stats_count_the_whole_tree():
    tree = grown_tree(until=4000.0)
    stats = tree.stats()
    assert stats.mature
    nodes = list(tree.root.walk())
    assert stats.branches == len(nodes)
    assert stats.leaves == 2 * len(nodes)
    assert stats.max_depth == max(node.depth for node in nodes)


def test_stats_before_first_tree():
    stats = ProceduralTree(TreeConfig()).stats()
    assert stats.branches == 0
    assert not stats.mature


@pytest.mark.parametrize("seed", [1, 2, 3])
def test_grown_trees_respect_depth_budget(seed):
    tree = grown_tree(seed=seed, until=4000.0)
    for node in tree.root.walk():
        assert node.depth <= int(tree.style.max_depth) + 1
        if node.depth >= tree.style.max_depth:
            assert node.branches == []

from .branch import Branch, BranchState
from .config import ConfigurationError, GrowthSettings, StyleRanges, TreeConfig, TreeStyle
from .factory import ProceduralTree, TreeFactory
from .leaf import Leaf, LeafState
from .oscillator import Oscillator

__all__ = [
    "Branch",
    "BranchState",
    "ConfigurationError",
    "GrowthSettings",
    "Leaf",
    "LeafState",
    "Oscillator",
    "ProceduralTree",
    "StyleRanges",
    "TreeConfig",
    "TreeFactory",
    "TreeStyle",
]

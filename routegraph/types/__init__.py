"""Shared typing constructs for routegraph.

Type aliases for weights and heuristics plus the ``SearchAlgorithm`` enum.
Contains no graph logic.
"""

from routegraph.types.base import Cost, HeuristicFunc, SearchAlgorithm, WeightFunc

__all__ = [
    "Cost",
    "HeuristicFunc",
    "SearchAlgorithm",
    "WeightFunc",
]

"""
Queries over a built word graph: bridge words, text augmentation, shortest
paths and random walks.
"""

from .bridge_words import BridgeWordResolver
from .augment import TextAugmenter
from .shortest_path import DistanceMatrix, ShortestPathEngine
from .traversal import RandomWalker, WalkHandle

__all__ = [
    "BridgeWordResolver",
    "TextAugmenter",
    "DistanceMatrix",
    "ShortestPathEngine",
    "RandomWalker",
    "WalkHandle",
]

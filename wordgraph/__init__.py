"""
Word-adjacency graphs built from plain-text corpora.

An edge ``a -> b`` records that word ``b`` immediately followed word ``a``;
its weight counts how often. On top of the graph the package answers
bridge-word queries, augments text with bridge words, computes shortest
paths and performs cancellable random walks.
"""

from .config import AnalysisConfig
from .errors import CorpusIngestionError, RenderError, WordGraphError
from .extractors import GraphBuilder, build_graph, tokenize
from .results import BridgeWordsResult, ShortestPathResult, WalkResult
from .session import GraphSession
from .word_graph import WordGraph

__all__ = [
    "AnalysisConfig",
    "BridgeWordsResult",
    "CorpusIngestionError",
    "GraphBuilder",
    "GraphSession",
    "RenderError",
    "ShortestPathResult",
    "WalkResult",
    "WordGraph",
    "WordGraphError",
    "build_graph",
    "tokenize",
]

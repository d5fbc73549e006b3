"""
Corpus ingestion framework with pluggable components.

This package turns raw text from various sources (files, strings, streams)
into a word-adjacency graph.
"""

from .protocols import LineSource, WordNormalizer
from .normalization import LetterNormalizer, HyphenJoiningNormalizer, tokenize
from .sources import FileLineSource, TextLineSource, IterableLineSource
from .graph_builder import GraphBuilder, build_graph

__all__ = [
    # Protocols
    "LineSource",
    "WordNormalizer",
    # Normalizers
    "LetterNormalizer",
    "HyphenJoiningNormalizer",
    "tokenize",
    # Sources
    "FileLineSource",
    "TextLineSource",
    "IterableLineSource",
    # Core Builder
    "GraphBuilder",
    "build_graph",
]

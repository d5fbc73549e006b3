"""
GraphSession wrapper for clean host access to a built word graph.

Provides a single object that owns the immutable graph, the configuration
and the query components, so that hosts (the CLI, the interactive menu,
notebooks) do not have to wire them together.
"""
import logging
import random
import threading
from pathlib import Path
from typing import Callable, Dict, Iterable, Optional

from .analysis import (
    BridgeWordResolver,
    RandomWalker,
    ShortestPathEngine,
    TextAugmenter,
    WalkHandle,
)
from .config import AnalysisConfig
from .extractors import FileLineSource, GraphBuilder, IterableLineSource
from .extractors.protocols import LineSource
from .results import BridgeWordsResult, ShortestPathResult
from .word_graph import WordGraph

logger = logging.getLogger(__name__)


class GraphSession:
    """
    Host-facing access to a word graph and its queries.

    The graph is built once when the session is created and never changes;
    every query reads it. The only operation that runs concurrently is the
    random walk, started with ``start_random_walk``.

    Examples:
        >>> session = GraphSession.from_lines(["the cat sat on the mat"])
        >>> session.query_bridge_words("the", "sat").bridge_words
        ('cat',)
    """

    def __init__(self, graph: WordGraph, config: Optional[AnalysisConfig] = None):
        """
        Args:
            graph: An already built graph
            config: Query configuration (defaults to ``AnalysisConfig()``)
        """
        self.graph = graph
        self.config = config or AnalysisConfig()

        normalizer = self.config.get_normalizer()
        self.bridge_resolver = BridgeWordResolver(graph, normalizer)
        self.augmenter = TextAugmenter(self.bridge_resolver)
        self.path_engine = ShortestPathEngine(
            graph,
            reconstruction=self.config.reconstruction,
            normalizer=normalizer,
        )
        self.walker = RandomWalker(graph, step_delay=self.config.walk_step_delay)
        self._rng = self._make_rng()

    @classmethod
    def from_source(cls, source: LineSource, config: Optional[AnalysisConfig] = None) -> 'GraphSession':
        """
        Build the graph from any line source.

        Raises:
            CorpusIngestionError: If the source cannot be read
        """
        config = config or AnalysisConfig()
        graph = GraphBuilder(
            source,
            normalizer=config.get_normalizer(),
            show_progress=config.show_progress,
        ).build()
        return cls(graph, config)

    @classmethod
    def from_lines(cls, lines: Iterable[str], config: Optional[AnalysisConfig] = None) -> 'GraphSession':
        """Build the graph from an iterable of text lines."""
        return cls.from_source(IterableLineSource(lines), config)

    @classmethod
    def from_file(cls, path: Path, config: Optional[AnalysisConfig] = None) -> 'GraphSession':
        """
        Build the graph from a corpus file.

        Raises:
            CorpusIngestionError: If the file is missing or unreadable
        """
        config = config or AnalysisConfig()
        return cls.from_source(FileLineSource(path, encoding=config.encoding), config)

    def _make_rng(self) -> random.Random:
        if self.config.seed is None:
            return random.SystemRandom()
        return random.Random(self.config.seed)

    @property
    def word_frequency(self):
        return self.graph.word_frequency

    @property
    def edge_weights(self):
        return self.graph.edge_weights

    def query_bridge_words(self, word1: str, word2: str) -> BridgeWordsResult:
        return self.bridge_resolver.query(word1, word2)

    def augment_text(self, text: str, rng: Optional[random.Random] = None) -> str:
        return self.augmenter.augment(text, rng or self._rng)

    def shortest_path(self, word1: str, word2: str) -> ShortestPathResult:
        return self.path_engine.shortest_path(word1, word2)

    def shortest_paths_from(self, word1: str) -> Dict[str, ShortestPathResult]:
        return self.path_engine.shortest_paths_from(word1)

    def start_random_walk(
        self,
        rng: Optional[random.Random] = None,
        cancel: Optional[threading.Event] = None,
        on_step: Optional[Callable[[str], None]] = None,
    ) -> WalkHandle:
        """
        Start a random walk on a background thread.

        Read the result back with ``handle.join()``; stop it early with
        ``handle.cancel()`` or by setting ``cancel``.
        """
        # The walk thread gets its own generator so it never shares state
        # with queries running on the caller's thread.
        if rng is None:
            rng = self._make_rng() if self.config.seed is None else random.Random(self._rng.getrandbits(64))
        return self.walker.start(rng, cancel=cancel, on_step=on_step)

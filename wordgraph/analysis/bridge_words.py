import logging
from typing import Dict, Optional, Set

from ..extractors.normalization import LetterNormalizer
from ..extractors.protocols import WordNormalizer
from ..results import BridgeWordsResult
from ..word_graph import WordGraph

logger = logging.getLogger(__name__)


class BridgeWordResolver:
    """
    Finds bridge words between two words of a ``WordGraph``.

    A bridge word ``x`` between ``word1`` and ``word2`` is any word with both
    edges ``word1 -> x`` and ``x -> word2``. Queries are answered as
    successors(word1) ∩ predecessors(word2).

    Predecessors come from a reverse index that is built on the first query
    and reused afterwards; the graph is immutable, so the index never goes
    stale.
    """

    def __init__(self, graph: WordGraph, normalizer: Optional[WordNormalizer] = None):
        """
        Args:
            graph: The graph to query.
            normalizer: Applied to query words so that ``"The"`` finds ``the``.
        """
        self.graph = graph
        self.normalizer = normalizer or LetterNormalizer()
        self._predecessors: Optional[Dict[str, Set[str]]] = None

    def _reverse_index(self) -> Dict[str, Set[str]]:
        if self._predecessors is None:
            index: Dict[str, Set[str]] = {}
            for source, target, _ in self.graph.edges():
                index.setdefault(target, set()).add(source)
            self._predecessors = index
        return self._predecessors

    def predecessors(self, word: str) -> Set[str]:
        return self._reverse_index().get(word, set())

    def query(self, word1: str, word2: str) -> BridgeWordsResult:
        """
        Look up the bridge words from ``word1`` to ``word2``.

        Both words must occur somewhere in the graph; otherwise the result is
        ``node_unknown`` and names the missing ones. A word that only ever
        ended a line has no successors but still counts as known, so
        ``("a", "c")`` over ``a b c`` finds ``b``.

        Returns:
            A ``BridgeWordsResult`` with status ``ok``, ``no_bridge_words``
            or ``node_unknown``.
        """
        word1 = self.normalizer.normalize_word(word1)
        word2 = self.normalizer.normalize_word(word2)

        missing = tuple(w for w in dict.fromkeys((word1, word2)) if w not in self.graph.vocabulary)
        if missing:
            logger.debug(f"Bridge query {word1!r} -> {word2!r}: unknown {missing}")
            return BridgeWordsResult(word1, word2, "node_unknown", missing=missing)

        bridges = self.graph.successors(word1) & self.predecessors(word2)
        if not bridges:
            return BridgeWordsResult(word1, word2, "no_bridge_words")

        return BridgeWordsResult(word1, word2, "ok", bridge_words=tuple(sorted(bridges)))

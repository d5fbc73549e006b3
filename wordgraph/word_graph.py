import logging
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, Iterator, List, Mapping, Optional, Set, Tuple

logger = logging.getLogger(__name__)

Edge = Tuple[str, str]


class WordGraph:
    """
    Immutable directed word-adjacency graph with edge weights and word counts.

    The graph is keyed by *source* words: every word observed as the first
    element of an adjacent pair has an entry mapping it to the frozenset of
    words that immediately followed it. A word that was only ever seen as a
    target (for example the last word of a line) has no key; ``successors``
    reports an empty set for it.

    Alongside the adjacency, the graph carries:

    - ``edge_weights``: ``(source, target) -> count`` of adjacent occurrences.
      An entry exists exactly when the corresponding edge exists.
    - ``word_frequency``: ``source -> count`` of times the word appeared as the
      first element of a pair.

    All three mappings are exposed as read-only views. Nothing mutates a
    ``WordGraph`` after construction, so one instance can be shared between
    threads without locking.
    """

    def __init__(
        self,
        adjacency: Mapping[str, Iterable[str]],
        edge_weights: Optional[Mapping[Edge, int]] = None,
        word_frequency: Optional[Mapping[str, int]] = None,
    ):
        """
        Args:
            adjacency: Mapping from each source word to its successors. Key
                order is preserved and defines the stable node ordering.
            edge_weights: Count for every edge. Defaults to 1 for every edge.
            word_frequency: Source-position count per word. Defaults to the
                sum of the word's outgoing edge weights.

        Raises:
            ValueError: If the weights do not match the edges exactly, or a
                weight or frequency is not a positive integer.
        """
        self._successors: Dict[str, FrozenSet[str]] = {
            word: frozenset(targets) for word, targets in adjacency.items()
        }

        if edge_weights is None:
            weights = {edge: 1 for edge in self._iter_edge_keys()}
        else:
            weights = dict(edge_weights)
        self._validate_weights(weights)
        self._weights: Dict[Edge, int] = weights

        if word_frequency is None:
            frequency: Dict[str, int] = {}
            for (source, _), count in self._weights.items():
                frequency[source] = frequency.get(source, 0) + count
        else:
            frequency = dict(word_frequency)
        for word, count in frequency.items():
            if not isinstance(count, int) or count < 1:
                raise ValueError(f"Frequency of {word!r} must be a positive integer, got {count!r}")
        self._frequency: Dict[str, int] = frequency

        words: Set[str] = set(self._successors)
        for targets in self._successors.values():
            words.update(targets)
        self._vocabulary: FrozenSet[str] = frozenset(words)

    def _iter_edge_keys(self) -> Iterator[Edge]:
        for source, targets in self._successors.items():
            for target in targets:
                yield (source, target)

    def _validate_weights(self, weights: Dict[Edge, int]) -> None:
        edges = set(self._iter_edge_keys())
        missing = edges - weights.keys()
        if missing:
            raise ValueError(f"Edges without a weight: {sorted(missing)}")
        extra = weights.keys() - edges
        if extra:
            raise ValueError(f"Weights for edges not in the graph: {sorted(extra)}")
        for edge, weight in weights.items():
            if not isinstance(weight, int) or weight < 1:
                raise ValueError(f"Weight of edge {edge} must be a positive integer, got {weight!r}")

    @property
    def graph(self) -> Mapping[str, FrozenSet[str]]:
        """Read-only ``word -> successors`` mapping."""
        return MappingProxyType(self._successors)

    @property
    def edge_weights(self) -> Mapping[Edge, int]:
        """Read-only ``(source, target) -> count`` mapping."""
        return MappingProxyType(self._weights)

    @property
    def word_frequency(self) -> Mapping[str, int]:
        """Read-only ``word -> count`` mapping."""
        return MappingProxyType(self._frequency)

    @property
    def nodes(self) -> List[str]:
        """Source words in stable (insertion) order."""
        return list(self._successors)

    @property
    def num_nodes(self) -> int:
        return len(self._successors)

    @property
    def num_edges(self) -> int:
        return len(self._weights)

    @property
    def vocabulary(self) -> FrozenSet[str]:
        """Every word seen, whether as an edge source or only as a target."""
        return self._vocabulary

    def successors(self, word: str) -> FrozenSet[str]:
        """Returns the direct successors of ``word`` (empty if it has none)."""
        return self._successors.get(word, frozenset())

    def predecessors(self, word: str) -> Set[str]:
        """
        Returns every source word with an edge into ``word``.

        This scans all adjacency sets and costs O(edges); callers issuing many
        queries should build a reverse index once instead.
        """
        return {source for source, targets in self._successors.items() if word in targets}

    def has_edge(self, source: str, target: str) -> bool:
        return (source, target) in self._weights

    def weight(self, source: str, target: str) -> int:
        """Returns the weight of ``source -> target``, or 0 if there is no such edge."""
        return self._weights.get((source, target), 0)

    def edges(self) -> Iterator[Tuple[str, str, int]]:
        """Yields ``(source, target, weight)`` for every edge, grouped by source."""
        for source, target in self._iter_edge_keys():
            yield source, target, self._weights[(source, target)]

    def index_map(self) -> Dict[str, int]:
        """
        Returns a fresh ``word -> index`` map over the source words.

        The ordering follows key insertion order, which is the order in which
        words were first seen as edge sources during ingestion.
        """
        return {word: idx for idx, word in enumerate(self._successors)}

    def most_frequent(self, n: int = 10) -> List[Tuple[str, int]]:
        """Returns the ``n`` most frequent source words, ties broken alphabetically."""
        ranked = sorted(self._frequency.items(), key=lambda item: (-item[1], item[0]))
        return ranked[:n]

    def __contains__(self, word: object) -> bool:
        return word in self._successors

    def __iter__(self) -> Iterator[str]:
        return iter(self._successors)

    def __len__(self) -> int:
        return len(self._successors)

    def __repr__(self):
        return f"WordGraph(nodes={self.num_nodes}, edges={self.num_edges})"

"""
All-pairs shortest paths over a word graph (Floyd-Warshall).

Edge lengths are the raw co-occurrence counts, so a pair of words that occur
together often is *farther apart* than a pair seen once. This is the metric
the tool has always reported and it is kept as-is.

Two path reconstruction modes are available:

- ``"weighted"`` follows, from the current word, the first direct edge whose
  weight plus the remaining distance equals the current distance. It always
  recovers a path when the distance is finite.
- ``"unit_step"`` reproduces the legacy reconstruction, which only advances
  along cells whose distance is exactly 1. With edge weights above 1 it can
  fail even though the distance is finite; such failures are reported as
  ``no_path`` with reason ``"reconstruction_inconsistency"``.
"""
import logging
from dataclasses import dataclass
from typing import Dict, List, Literal, Optional

import numpy as np

from ..extractors.normalization import LetterNormalizer
from ..extractors.protocols import WordNormalizer
from ..results import ShortestPathResult
from ..word_graph import WordGraph

logger = logging.getLogger(__name__)

ReconstructionMode = Literal["weighted", "unit_step"]


@dataclass
class DistanceMatrix:
    """
    Shortest distances between every ordered pair of graph keys.

    Attributes:
        index: ``word -> row/column`` map, fixed for this computation.
        nodes: Words in index order.
        dist: ``(n, n)`` float array; ``numpy.inf`` marks unreachable pairs.
    """

    index: Dict[str, int]
    nodes: List[str]
    dist: np.ndarray

    def distance(self, word1: str, word2: str) -> float:
        return float(self.dist[self.index[word1], self.index[word2]])

    def __len__(self) -> int:
        return len(self.nodes)


class ShortestPathEngine:
    """
    Computes shortest paths between words of a ``WordGraph``.

    The engine keeps no state between calls: every query builds its own
    distance matrix from the (immutable) graph, so concurrent queries never
    share a buffer.
    """

    def __init__(
        self,
        graph: WordGraph,
        reconstruction: ReconstructionMode = "weighted",
        normalizer: Optional[WordNormalizer] = None,
    ):
        """
        Args:
            graph: The graph to query.
            reconstruction: Path reconstruction mode, ``"weighted"`` or
                ``"unit_step"``.
            normalizer: Applied to query words.
        """
        if reconstruction not in {"weighted", "unit_step"}:
            raise ValueError(
                f"Invalid reconstruction={reconstruction!r}. Must be 'weighted' or 'unit_step'."
            )
        self.graph = graph
        self.reconstruction = reconstruction
        self.normalizer = normalizer or LetterNormalizer()

    def compute_distances(self) -> DistanceMatrix:
        """
        Run Floyd-Warshall over the current graph.

        The matrix starts at 0 on the diagonal and infinity elsewhere, then
        takes each edge weight as the direct distance. Self-loops are skipped
        so that the diagonal stays 0. Words that only appear as edge targets
        have no row: they cannot start a path, so they can never be an
        intermediate step either.
        """
        index = self.graph.index_map()
        n = len(index)

        dist = np.full((n, n), np.inf)
        np.fill_diagonal(dist, 0.0)

        for source, target, weight in self.graph.edges():
            j = index.get(target)
            if source == target or j is None:
                continue
            dist[index[source], j] = weight

        # Relax every pair through each intermediate k; inf + x stays inf.
        for k in range(n):
            np.minimum(dist, dist[:, k, np.newaxis] + dist[np.newaxis, k, :], out=dist)

        logger.debug(f"Computed {n}x{n} distance matrix")
        return DistanceMatrix(index=index, nodes=list(index), dist=dist)

    def shortest_path(self, word1: str, word2: str) -> ShortestPathResult:
        """
        Find the shortest path from ``word1`` to ``word2``.

        Failure cases, checked in order:
            1. Either word is not a graph key -> ``node_unknown``.
            2. The distance is infinite -> ``no_path`` (``unreachable``).
            3. The path cannot be reconstructed -> ``no_path``
               (``reconstruction_inconsistency``).

        A word is always at distance 0 from itself, with a one-word path.
        """
        word1 = self.normalizer.normalize_word(word1)
        word2 = self.normalizer.normalize_word(word2)

        missing = tuple(w for w in dict.fromkeys((word1, word2)) if w not in self.graph)
        if missing:
            return ShortestPathResult(word1, word2, "node_unknown", missing=missing)

        if word1 == word2:
            return ShortestPathResult(word1, word2, "ok", path=(word1,), distance=0)

        return self._resolve(self.compute_distances(), word1, word2)

    def shortest_paths_from(self, word1: str) -> Dict[str, ShortestPathResult]:
        """
        Shortest paths from ``word1`` to every other graph key.

        The distance matrix is computed once and shared by all targets. An
        unknown ``word1`` yields an empty dict.
        """
        word1 = self.normalizer.normalize_word(word1)
        if word1 not in self.graph:
            return {}

        matrix = self.compute_distances()
        return {
            word2: self._resolve(matrix, word1, word2)
            for word2 in matrix.nodes
            if word2 != word1
        }

    def _resolve(self, matrix: DistanceMatrix, word1: str, word2: str) -> ShortestPathResult:
        distance = matrix.distance(word1, word2)
        if np.isinf(distance):
            return ShortestPathResult(word1, word2, "no_path", reason="unreachable")

        if self.reconstruction == "unit_step":
            path = self._reconstruct_unit_step(matrix, word1, word2)
        else:
            path = self._reconstruct_weighted(matrix, word1, word2)

        if len(path) < 2 or path[-1] != word2:
            logger.warning(
                f"Distance {word1!r} -> {word2!r} is {int(distance)} but path reconstruction "
                f"stopped at {path[-1]!r} ({self.reconstruction} mode)"
            )
            return ShortestPathResult(
                word1, word2, "no_path",
                distance=int(distance),
                reason="reconstruction_inconsistency",
            )

        return ShortestPathResult(word1, word2, "ok", path=tuple(path), distance=int(distance))

    def _reconstruct_weighted(self, matrix: DistanceMatrix, word1: str, word2: str) -> List[str]:
        index, dist = matrix.index, matrix.dist
        t = index[word2]

        path = [word1]
        at = word1
        # Remaining distance strictly decreases, so at most n - 1 steps.
        for _ in range(len(matrix)):
            if at == word2:
                break
            remaining = dist[index[at], t]
            candidates = sorted(
                (to for to in self.graph.successors(at) if to in index and to != at),
                key=index.__getitem__,
            )
            nxt = next(
                (
                    to for to in candidates
                    if self.graph.weight(at, to) + dist[index[to], t] == remaining
                ),
                None,
            )
            if nxt is None:
                break
            path.append(nxt)
            at = nxt
        return path

    def _reconstruct_unit_step(self, matrix: DistanceMatrix, word1: str, word2: str) -> List[str]:
        dist = matrix.dist
        t = matrix.index[word2]
        reaches_target = np.isfinite(dist[:, t])

        path = [word1]
        at = matrix.index[word1]
        # The legacy walk can oscillate between unit edges; cap it at n steps.
        for _ in range(len(matrix)):
            if at == t:
                break
            candidates = np.flatnonzero((dist[at] == 1) & reaches_target)
            if candidates.size == 0:
                break
            at = int(candidates[0])
            path.append(matrix.nodes[at])
        return path

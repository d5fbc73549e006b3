"""
Core graph building logic using pluggable components.
"""
import logging
from typing import Dict, Iterable, Optional, Set, Tuple

from tqdm import tqdm

from ..word_graph import WordGraph
from .normalization import LetterNormalizer
from .protocols import LineSource, WordNormalizer
from .sources import IterableLineSource

logger = logging.getLogger(__name__)


class GraphBuilder:
    """
    Word-adjacency graph builder using pluggable components.

    This class implements the core graph construction algorithm:
    1. Read lines from the source, one at a time
    2. Tokenize each line with the normalizer
    3. For every adjacent word pair within the line, count the source word,
       add the edge and bump its weight

    Lines are independent: the last word of one line is never linked to the
    first word of the next.

    The builder is configured with:
    - LineSource: Where to read corpus lines from
    - WordNormalizer: How to turn a line into words
    """

    def __init__(
        self,
        source: LineSource,
        normalizer: Optional[WordNormalizer] = None,
        show_progress: bool = False,
    ):
        """
        Args:
            source: Line source providing the corpus
            normalizer: Tokenizer for each line (default LetterNormalizer)
            show_progress: Show a progress bar via tqdm
        """
        self.source = source
        self.normalizer = normalizer or LetterNormalizer()
        self.show_progress = show_progress

    def build(self) -> WordGraph:
        """
        Build the graph from every line of the source.

        Returns:
            The immutable WordGraph

        Raises:
            CorpusIngestionError: If the source cannot be read
        """
        logger.info(f"Building word graph from {self.source!r}...")

        adjacency: Dict[str, Set[str]] = {}
        frequency: Dict[str, int] = {}
        weights: Dict[Tuple[str, str], int] = {}

        iterator = tqdm(
            self.source.iter_lines(),
            disable=not self.show_progress,
            desc="Reading corpus",
            unit="lines",
            bar_format="{desc}: {n_fmt} lines [{elapsed}, {rate_fmt}]"
        )

        num_lines = 0
        num_words = 0
        for line in iterator:
            num_lines += 1
            words = self.normalizer.tokenize(line)
            num_words += len(words)

            for current, following in zip(words, words[1:]):
                frequency[current] = frequency.get(current, 0) + 1
                adjacency.setdefault(current, set()).add(following)
                weights[(current, following)] = weights.get((current, following), 0) + 1

        graph = WordGraph(adjacency, edge_weights=weights, word_frequency=frequency)

        logger.info(
            f"Graph complete: {num_lines} lines, {num_words} words, "
            f"{graph.num_nodes} nodes, {graph.num_edges} edges"
        )
        if graph.num_nodes == 0:
            logger.warning("Corpus produced an empty graph (no adjacent word pairs)")

        return graph


def build_graph(
    lines: Iterable[str],
    normalizer: Optional[WordNormalizer] = None,
    show_progress: bool = False,
) -> WordGraph:
    """Build a WordGraph from any iterable of text lines."""
    return GraphBuilder(
        IterableLineSource(lines),
        normalizer=normalizer,
        show_progress=show_progress,
    ).build()

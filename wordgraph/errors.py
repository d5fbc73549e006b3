"""
Exceptions raised by the word graph package.

Expected query outcomes (unknown words, missing paths, empty graphs) are
reported through result objects in ``wordgraph.results``; the exceptions here
cover failures of the surrounding I/O, where no sensible result exists.
"""


class WordGraphError(Exception):
    """Base class for all word graph errors."""


class CorpusIngestionError(WordGraphError):
    """The corpus could not be read or decoded."""

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"Failed to ingest corpus from {source}: {reason}")


class RenderError(WordGraphError):
    """Graphviz was unavailable or failed to render a DOT file."""

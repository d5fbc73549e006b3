"""
Core protocols defining the interfaces for corpus ingestion components.
"""
from typing import Iterator, List, Protocol


class LineSource(Protocol):
    """Iterator over raw corpus lines from any source."""

    def iter_lines(self) -> Iterator[str]:
        """Yields raw text lines (trailing newlines may be present)."""
        ...


class WordNormalizer(Protocol):
    """Turn a raw line of text into normalized word tokens."""

    def tokenize(self, line: str) -> List[str]:
        """Returns the normalized words of ``line`` in order."""
        ...

    def normalize_word(self, word: str) -> str:
        """Returns the canonical form of a single query word."""
        ...

"""
Line source implementations for different corpus inputs.

Provides iterators over raw corpus lines:
- FileLineSource: Stream lines from a text file on disk
- TextLineSource: Split an in-memory string into lines
- IterableLineSource: Wrap any iterable of strings (stdin, lists, generators)
"""
import logging
from pathlib import Path
from typing import Iterable, Iterator

from ..errors import CorpusIngestionError
from .protocols import LineSource

logger = logging.getLogger(__name__)


class FileLineSource(LineSource):
    """
    Streams lines from a single corpus file.

    Unlike a best-effort directory crawl, a corpus that cannot be opened or
    decoded is a hard failure: an unreadable file must never turn into an
    empty graph.
    """

    def __init__(self, path: Path, encoding: str = 'utf-8'):
        """
        Args:
            path: Corpus text file
            encoding: Text encoding used to decode the file
        """
        self.path = Path(path)
        self.encoding = encoding

    def iter_lines(self) -> Iterator[str]:
        """
        Yield each line of the file.

        Raises:
            CorpusIngestionError: If the file is missing, unreadable or not
                valid text in ``self.encoding``.
        """
        logger.debug(f"Reading corpus from {self.path} ({self.encoding})")
        try:
            with open(self.path, 'r', encoding=self.encoding) as f:
                for line in f:
                    yield line
        except UnicodeDecodeError as e:
            raise CorpusIngestionError(str(self.path), f"not valid {self.encoding} text ({e.reason})") from e
        except OSError as e:
            raise CorpusIngestionError(str(self.path), e.strerror or str(e)) from e

    def __repr__(self):
        return f"FileLineSource(path={str(self.path)!r}, encoding={self.encoding!r})"


class TextLineSource(LineSource):
    """Splits an in-memory string into lines."""

    def __init__(self, text: str):
        self.text = text

    def iter_lines(self) -> Iterator[str]:
        return iter(self.text.splitlines())


class IterableLineSource(LineSource):
    """
    Wraps an arbitrary iterable of lines.

    Errors raised by the underlying iterable while reading (for example an
    ``OSError`` from a closed stream) are surfaced as ``CorpusIngestionError``.
    """

    def __init__(self, lines: Iterable[str], name: str = '<lines>'):
        self.lines = lines
        self.name = name

    def iter_lines(self) -> Iterator[str]:
        try:
            for line in self.lines:
                yield line
        except (OSError, UnicodeDecodeError) as e:
            raise CorpusIngestionError(self.name, str(e)) from e

"""
Word normalization utilities for turning raw corpus text into graph nodes.

Core Purpose:
    Convert ANY line of text into a sequence of words that are:
    - Lowercase
    - Letters only (a-z)
    - Free of empty tokens
    - Consistent (normalizing an already-normalized line is a no-op)

Design Pattern:
    Template Method - Base class defines algorithm, subclasses customize steps.

The tokenization algorithm:
    1. preprocess() - Domain-specific preprocessing (hyphen joining, etc.)
    2. Canonicalization - Lowercase
    3. _clean() - Every non-letter character becomes a single space
    4. Split on whitespace runs, dropping empty tokens
"""
import re
from typing import List

from .protocols import WordNormalizer

_NON_LETTER = re.compile(r'[^a-z]')


class LetterNormalizer(WordNormalizer):
    """
    Base normalizer using Template Method pattern.

    Digits, punctuation, accented letters and every other non ``a-z``
    character act as word separators, so ``"don't"`` becomes two words.

    Examples:
        >>> normalizer = LetterNormalizer()
        >>> normalizer.tokenize("The cat, the HAT!")
        ['the', 'cat', 'the', 'hat']
        >>> normalizer.tokenize("route66 rocks")
        ['route', 'rocks']
    """

    def tokenize(self, line: str) -> List[str]:
        """
        Template method defining the tokenization algorithm.

        Override preprocess() instead of this method to customize behavior.

        Args:
            line: Raw line of text

        Returns:
            Normalized words in their original order
        """
        # Step 1: Domain-specific preprocessing (HOOK for subclasses)
        line = self.preprocess(line)

        # Step 2: Canonicalize
        canonical = line.lower()

        # Step 3 + 4: Clean and split; str.split() with no argument drops empties
        return self._clean(canonical).split()

    def normalize_word(self, word: str) -> str:
        """
        Normalize a single query word.

        A query that normalizes to several words (``"New-York"``) is joined
        back together so that it can never accidentally match a graph node.

        Args:
            word: Word as typed by a user

        Returns:
            Normalized word, possibly empty
        """
        return ''.join(self.tokenize(word))

    def preprocess(self, line: str) -> str:
        """
        Hook for domain-specific preprocessing.

        Args:
            line: Raw input text

        Returns:
            Preprocessed text (still may contain non-letter characters)
        """
        return line  # Default: no preprocessing

    def _clean(self, text: str) -> str:
        """Replace every character outside a-z with a single space."""
        return _NON_LETTER.sub(' ', text)


class HyphenJoiningNormalizer(LetterNormalizer):
    """
    Normalizer that glues hyphenated and apostrophized words together.

    ``"well-known"`` becomes ``"wellknown"`` and ``"don't"`` becomes
    ``"dont"`` instead of being split into two separate graph nodes.

    Examples:
        >>> HyphenJoiningNormalizer().tokenize("A well-known fact, isn't it")
        ['a', 'wellknown', 'fact', 'isnt', 'it']
    """

    def preprocess(self, line: str) -> str:
        """Drop hyphens and apostrophes that sit between two letters."""
        return re.sub(r"(?<=[A-Za-z])['\-](?=[A-Za-z])", '', line)


NORMALIZER_MAP = {
    'letters': LetterNormalizer,
    'hyphen_joining': HyphenJoiningNormalizer,
}


def tokenize(line: str) -> List[str]:
    """Tokenize ``line`` with the default :class:`LetterNormalizer`."""
    return _DEFAULT.tokenize(line)


_DEFAULT = LetterNormalizer()

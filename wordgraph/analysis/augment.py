import logging
import random
from typing import List

from .bridge_words import BridgeWordResolver

logger = logging.getLogger(__name__)


class TextAugmenter:
    """
    Rewrites a sentence by inserting a bridge word between adjacent words.

    For every adjacent pair ``(w[i], w[i+1])`` of the normalized input that
    has at least one bridge word in the graph, one bridge word is drawn
    uniformly at random and placed between them. Pairs without bridge words
    (including pairs involving unknown words) are left untouched. The
    original words always keep their relative order.
    """

    def __init__(self, resolver: BridgeWordResolver):
        self.resolver = resolver

    def augment(self, text: str, rng: random.Random) -> str:
        """
        Args:
            text: Free-form input text; normalized like the corpus.
            rng: Source of randomness for choosing among several bridge words.

        Returns:
            The space-joined augmented sentence, or ``""`` if the input has no
            words.
        """
        words = self.resolver.normalizer.tokenize(text)
        if not words:
            return ""

        output: List[str] = []
        inserted = 0
        for current, following in zip(words, words[1:]):
            output.append(current)
            result = self.resolver.query(current, following)
            if result.ok:
                output.append(rng.choice(result.bridge_words))
                inserted += 1
        output.append(words[-1])

        logger.debug(f"Augmented {len(words)} words with {inserted} bridge words")
        return " ".join(output)

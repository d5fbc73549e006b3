"""
Tests for word normalization logic.
"""
import unittest
from wordgraph.extractors.normalization import (
    HyphenJoiningNormalizer, LetterNormalizer, tokenize
)


class TestLetterNormalizer(unittest.TestCase):
    def setUp(self):
        self.normalizer = LetterNormalizer()

    def test_lowercases(self):
        """Test that words are case-folded."""
        self.assertEqual(self.normalizer.tokenize("The CAT Sat"), ["the", "cat", "sat"])

    def test_punctuation_splits_words(self):
        """Test that punctuation becomes a separator, not part of a word."""
        result = self.normalizer.tokenize("Hello,world! It's here.")
        self.assertEqual(result, ["hello", "world", "it", "s", "here"])

    def test_digits_are_separators(self):
        """Test that digits are stripped like any other non-letter."""
        self.assertEqual(self.normalizer.tokenize("route66 rocks"), ["route", "rocks"])

    def test_non_ascii_letters_are_separators(self):
        """Test that only a-z survive normalization."""
        self.assertEqual(self.normalizer.tokenize("café naïve"), ["caf", "na", "ve"])

    def test_whitespace_runs_and_empty_tokens(self):
        """Test that leading, trailing and repeated whitespace yields no empty tokens."""
        self.assertEqual(self.normalizer.tokenize("  a\t\tb   c  \n"), ["a", "b", "c"])

    def test_empty_and_symbol_only_lines(self):
        """Test that lines without letters produce no words."""
        self.assertEqual(self.normalizer.tokenize(""), [])
        self.assertEqual(self.normalizer.tokenize("123 !!! ---"), [])

    def test_idempotent_on_normalized_text(self):
        """Test that normalizing already-normalized text is a no-op."""
        words = self.normalizer.tokenize("The quick, brown fox!")
        self.assertEqual(self.normalizer.tokenize(" ".join(words)), words)

    def test_normalize_word(self):
        """Test that a single query word is normalized and joined."""
        self.assertEqual(self.normalizer.normalize_word("The"), "the")
        self.assertEqual(self.normalizer.normalize_word(" cat! "), "cat")
        self.assertEqual(self.normalizer.normalize_word("new-york"), "newyork")
        self.assertEqual(self.normalizer.normalize_word("42"), "")

    def test_module_level_tokenize(self):
        """Test the default tokenize helper."""
        self.assertEqual(tokenize("Say HI."), ["say", "hi"])


class TestHyphenJoiningNormalizer(unittest.TestCase):
    def test_joins_hyphenated_words(self):
        """Test that intra-word hyphens and apostrophes are removed."""
        normalizer = HyphenJoiningNormalizer()
        result = normalizer.tokenize("A well-known fact, isn't it")
        self.assertEqual(result, ["a", "wellknown", "fact", "isnt", "it"])

    def test_free_standing_hyphen_still_splits(self):
        """Test that a dash between spaces is still a separator."""
        normalizer = HyphenJoiningNormalizer()
        self.assertEqual(normalizer.tokenize("cats - dogs"), ["cats", "dogs"])


if __name__ == '__main__':
    unittest.main()

"""
Word Service

Loads the word database and answers word selection and validation queries.
"""

import random
from typing import Dict, FrozenSet, List, Optional, Tuple

from ..config.game_settings import VOWELS


class WordListError(Exception):
    """The word database is missing, unreadable, or has no usable words."""


class WordProvider:
    """
    Read-only word database.

    The file is read once when the provider is built. Words of a given
    length are filtered on first request and memoized, so each length is
    only parsed once per process.
    """

    def __init__(self, path: str, rng: Optional[random.Random] = None):
        self.path = path
        self.rng = rng or random.Random()
        self._lines = self._load_lines(path)
        self._by_length: Dict[int, FrozenSet[str]] = {}
        self._choices: Dict[int, Tuple[str, ...]] = {}

    @staticmethod
    def _load_lines(path: str) -> List[str]:
        """
        Read the newline-delimited word file.

        Raises:
            WordListError: If the file is not found or cannot be decoded
        """
        try:
            with open(path, 'r', encoding='utf-8') as f:
                return [line.strip().lower() for line in f if line.strip()]
        except FileNotFoundError:
            raise WordListError(f"Word list file not found: {path}")
        except (OSError, UnicodeDecodeError) as e:
            raise WordListError(f"Word list file is unreadable: {path} ({e})")

    def words(self, length: int) -> FrozenSet[str]:
        if length not in self._by_length:
            self._by_length[length] = frozenset(word for word in self._lines if len(word) == length)
        return self._by_length[length]

    def _sorted_words(self, length: int) -> Tuple[str, ...]:
        if length not in self._choices:
            self._choices[length] = tuple(sorted(self.words(length)))
        return self._choices[length]

    def random_word(self, length: int) -> str:
        candidates = self._sorted_words(length)
        if not candidates:
            raise WordListError(f"No words of length {length} in {self.path}")
        return self.rng.choice(candidates)

    def is_valid(self, word: str) -> bool:
        return word.lower() in self.words(len(word))

    def validate_integrity(self, length: int) -> bool:
        """
        Validates the words available for a game of the given length.

        Returns:
            bool: True if the word set passes all checks

        Raises:
            WordListError: If there are no words or a word contains non-alphabetic characters
        """
        candidates = self._sorted_words(length)
        if not candidates:
            raise WordListError(f"No words of length {length} in {self.path}")

        for word in candidates:
            if not word.isalpha():
                raise WordListError(f"Word '{word}' contains non-alphabetic characters")

        return True

    def statistics(self, length: int) -> dict:
        """
        Analyzes the words of one length for game balancing.

        Returns:
            dict: total_words, avg_vowel_count, letter_frequency and most_common_letters
        """
        candidates = self._sorted_words(length)
        if not candidates:
            return {"error": f"No words of length {length}"}

        total_vowels = sum(len([char for char in word if char in VOWELS]) for word in candidates)

        letter_frequency = {}
        for word in candidates:
            for char in word:
                letter_frequency[char] = letter_frequency.get(char, 0) + 1

        return {
            "total_words": len(candidates),
            "avg_vowel_count": round(total_vowels / len(candidates), 2),
            "letter_frequency": letter_frequency,
            "most_common_letters": sorted(letter_frequency.items(), key=lambda x: x[1], reverse=True)[:5]
        }


# Global provider instance
_word_provider = None


def get_word_provider() -> Optional[WordProvider]:
    """Get the global word provider instance."""
    return _word_provider


def initialize_word_provider(path: str, rng: Optional[random.Random] = None) -> WordProvider:
    """
    Load the word database once for the whole process.

    Raises:
        WordListError: If the word list cannot be loaded
    """
    global _word_provider
    _word_provider = WordProvider(path, rng)
    return _word_provider

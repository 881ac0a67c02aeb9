"""
Letter Data Models

Per-letter feedback values and the scoring rule that produces them.
"""

from dataclasses import dataclass
from enum import Enum


class LetterPosition(Enum):
    """Feedback classification for a guessed letter."""
    CORRECT = "CORRECT"
    PRESENT = "PRESENT"
    ABSENT = "ABSENT"

    @classmethod
    def from_flags(cls, correct: bool, contained: bool) -> "LetterPosition":
        if correct:
            return cls.CORRECT
        if contained:
            return cls.PRESENT
        return cls.ABSENT


@dataclass(frozen=True)
class Letter:
    """A single grid cell, built fresh from the game state on every query."""
    value: str
    position: LetterPosition
    in_current_attempt: bool

    def to_dict(self) -> dict:
        return {
            'value': self.value,
            'position': self.position.value,
            'in_current_attempt': self.in_current_attempt
        }


def is_correct(letter: str, index: int, target_word: str) -> bool:
    """True when the target word holds ``letter`` at ``index``."""
    return 0 <= index < len(target_word) and target_word[index] == letter


def classify(letter: str, index: int, target_word: str) -> LetterPosition:
    """
    Classifies one guessed letter against the target word.

    Each letter is checked on its own: repeated letters in a guess are all
    compared with the whole target, so a target with a single 'p' can
    report PRESENT for two guessed 'p's.

    Args:
        letter: The guessed letter
        index: Position of the letter in the guess
        target_word: The hidden word

    Returns:
        LetterPosition for this letter
    """
    return LetterPosition.from_flags(
        is_correct(letter, index, target_word),
        letter in target_word
    )

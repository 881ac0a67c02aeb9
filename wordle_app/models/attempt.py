"""
Attempt Data Model

One guess row: the letters typed so far and the word they spell.
"""

from dataclasses import dataclass, field
from typing import List


@dataclass
class Attempt:
    """Ordered letters of a guess row, capped at ``word_length``."""
    word_length: int
    letters: List[str] = field(default_factory=list)

    @property
    def word(self) -> str:
        return "".join(self.letters)

    @property
    def is_full(self) -> bool:
        return len(self.letters) >= self.word_length

    def append_letter(self, letter: str) -> None:
        if not self.is_full:
            self.letters.append(letter)

    def remove_letter(self) -> None:
        if self.letters:
            self.letters.pop()

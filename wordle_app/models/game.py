"""
Game Data Models

Contains the round state machine and the serializable view handed to clients.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from ..config.game_settings import MAX_ATTEMPTS, SCORE_MULTIPLIER, WORD_LENGTH
from .attempt import Attempt
from .letter import Letter, LetterPosition, classify, is_correct


class GameStatus(Enum):
    """Outcome of the current round."""
    IN_PROGRESS = "IN_PROGRESS"
    WON = "WON"
    LOST = "LOST"


class ValidationError(Enum):
    """Reasons a submitted attempt was rejected."""
    INVALID_WORD = "INVALID_WORD"
    MISSING_CHARACTERS = "MISSING_CHARACTERS"


class GameState:
    """
    Single-player round state.

    This class handles:
    - Letter entry and removal on the active attempt
    - Attempt submission with length and dictionary validation
    - Win/loss detection, derived on every read
    - Score and streak bookkeeping across rounds
    - Grid and keyboard queries for the presentation layer
    """

    def __init__(self, words, word_length: int = WORD_LENGTH,
                 total_attempts: int = MAX_ATTEMPTS,
                 target_word: Optional[str] = None):
        """
        Args:
            words: WordProvider used to draw target words and validate guesses
            word_length: Length of the hidden word (ignored when target_word is given)
            total_attempts: Attempt budget per round
            target_word: Fixed target for the first round, drawn at random when omitted
        """
        self.words = words
        self.total_attempts = total_attempts
        self.target_word = target_word.lower() if target_word else words.random_word(word_length)
        self.attempts: List[Attempt] = []
        self.current_attempt = Attempt(self.word_length)
        self.score = 0
        self.streak = 0
        self.validation_error: Optional[ValidationError] = None

    @property
    def word_length(self) -> int:
        return len(self.target_word)

    @property
    def status(self) -> GameStatus:
        if self.attempts and self.attempts[-1].word == self.target_word:
            return GameStatus.WON
        if len(self.attempts) >= self.total_attempts:
            return GameStatus.LOST
        return GameStatus.IN_PROGRESS

    @property
    def attempts_left(self) -> int:
        return self.total_attempts - len(self.attempts)

    def enter_letter(self, letter: str) -> None:
        """Types one character; anything but a single character is ignored."""
        self.validation_error = None
        if not isinstance(letter, str) or len(letter) != 1:
            return
        if self.status == GameStatus.IN_PROGRESS:
            self.current_attempt.append_letter(letter.lower())

    def remove_letter(self) -> None:
        self.validation_error = None
        if self.status == GameStatus.IN_PROGRESS:
            self.current_attempt.remove_letter()

    def submit_attempt(self) -> GameStatus:
        """
        Validates the active attempt and, if accepted, records it.

        A rejected attempt sets validation_error and leaves attempts,
        score and streak untouched.

        Returns:
            GameStatus after the submission
        """
        if self.status != GameStatus.IN_PROGRESS:
            return self.status

        word = self.current_attempt.word
        if len(word) != self.word_length:
            self.validation_error = ValidationError.MISSING_CHARACTERS
            return self.status

        if not self.words.is_valid(word):
            self.validation_error = ValidationError.INVALID_WORD
            return self.status

        self.validation_error = None
        previous_attempts = len(self.attempts)
        self.attempts.append(self.current_attempt)
        self.current_attempt = Attempt(self.word_length)

        status = self.status
        if status == GameStatus.WON:
            self._increase_score(previous_attempts)
            self.streak += 1
        return status

    def next_round(self) -> None:
        """Starts a new round; a lost round resets score and streak."""
        if self.status == GameStatus.LOST:
            self.score = 0
            self.streak = 0

        self.target_word = self.words.random_word(self.word_length)
        self.attempts = []
        self.current_attempt = Attempt(self.word_length)
        self.validation_error = None

    def letter_at(self, attempt_index: int, letter_index: int) -> Optional[Letter]:
        """
        Returns the letter shown in a grid cell.

        Rows are the completed attempts followed by the active attempt.
        Cells that have not been filled yet return None.
        """
        rows = self.attempts + [self.current_attempt]
        if not 0 <= attempt_index < len(rows):
            return None

        letters = rows[attempt_index].letters
        if not 0 <= letter_index < len(letters):
            return None

        value = letters[letter_index]
        return Letter(
            value=value,
            position=classify(value, letter_index, self.target_word),
            in_current_attempt=attempt_index == len(self.attempts)
        )

    def keyboard_position(self, letter: str) -> Optional[LetterPosition]:
        """
        Best feedback seen so far for a keyboard key, or None if the
        letter has not been used in a completed attempt.
        """
        letter = letter.lower()
        if not any(letter in attempt.letters for attempt in self.attempts):
            return None

        correct = any(
            is_correct(value, index, self.target_word)
            for attempt in self.attempts
            for index, value in enumerate(attempt.letters)
            if value == letter
        )
        return LetterPosition.from_flags(correct, letter in self.target_word)

    def _increase_score(self, previous_attempts: int) -> None:
        base_score = SCORE_MULTIPLIER * (self.total_attempts + 1)
        self.score += base_score - previous_attempts * SCORE_MULTIPLIER


@dataclass
class GameView:
    """Client-facing game state representation (answer hidden until the round ends)."""
    game_id: str
    status: str
    score: int
    streak: int
    word_length: int
    total_attempts: int
    attempts_left: int
    validation_error: Optional[str]
    rows: List[List[Optional[Dict]]]
    keyboard: Dict[str, str] = field(default_factory=dict)
    answer: Optional[str] = None

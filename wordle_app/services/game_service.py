"""
Game Service

Holds single-player game sessions and forwards player input to their state.
"""

import uuid
from typing import Dict, List, Optional

from ..config.game_settings import MAX_ACTIVE_GAMES, MAX_ATTEMPTS, WORD_LENGTH
from ..models.game import GameState, GameStatus, GameView
from ..utils.game_logger import game_logger
from ..utils.helpers import ALPHABET
from .word_service import WordProvider


class GameService:
    """
    Session manager for single-player games.

    This class handles:
    - Game session management with unique game IDs
    - Forwarding letter, backspace, submit and next-round input to a GameState
    - Building client views without exposing the answer mid-round
    - Logging round outcomes

    Sessions live in memory until deleted. At most ``max_games`` are kept;
    creating another evicts the oldest, so abandoned games do not pile up.
    """

    def __init__(self, words: WordProvider, word_length: int = WORD_LENGTH,
                 total_attempts: int = MAX_ATTEMPTS, max_games: int = MAX_ACTIVE_GAMES):
        self.words = words
        self.word_length = word_length
        self.total_attempts = total_attempts
        self.max_games = max_games
        self.games: Dict[str, GameState] = {}

    def create_game(self) -> str:
        """
        Creates a new game session with a randomly selected word.

        Returns:
            str: Unique game ID for this session
        """
        while self.games and len(self.games) >= self.max_games:
            self._evict_oldest()

        game_id = str(uuid.uuid4())
        self.games[game_id] = GameState(self.words, self.word_length, self.total_attempts)
        game_logger.log_game_event(game_id, 'round_started', word_length=self.word_length)
        return game_id

    def get_game(self, game_id: str) -> Optional[GameState]:
        return self.games.get(game_id)

    def enter_letter(self, game_id: str, letter: str) -> Optional[GameView]:
        game = self.get_game(game_id)
        if game is None:
            return None
        game.enter_letter(letter)
        return self.get_game_view(game_id)

    def remove_letter(self, game_id: str) -> Optional[GameView]:
        game = self.get_game(game_id)
        if game is None:
            return None
        game.remove_letter()
        return self.get_game_view(game_id)

    def submit_attempt(self, game_id: str) -> Optional[GameView]:
        """
        Submits the active attempt and logs the round outcome if it ended.

        Args:
            game_id: Unique game identifier

        Returns:
            Updated GameView or None if the game does not exist
        """
        game = self.get_game(game_id)
        if game is None:
            return None

        was_in_progress = game.status == GameStatus.IN_PROGRESS
        status = game.submit_attempt()

        if was_in_progress and status == GameStatus.WON:
            game_logger.log_game_event(
                game_id, 'round_won',
                attempts_used=len(game.attempts), target_word=game.target_word,
                score=game.score, streak=game.streak
            )
        elif was_in_progress and status == GameStatus.LOST:
            game_logger.log_game_event(
                game_id, 'round_lost',
                attempts_used=len(game.attempts), target_word=game.target_word,
                final_score=game.score, final_streak=game.streak
            )

        return self.get_game_view(game_id)

    def next_round(self, game_id: str) -> Optional[GameView]:
        game = self.get_game(game_id)
        if game is None:
            return None
        game.next_round()
        game_logger.log_game_event(
            game_id, 'round_started',
            word_length=game.word_length, score=game.score, streak=game.streak
        )
        return self.get_game_view(game_id)

    def get_game_view(self, game_id: str) -> Optional[GameView]:
        """
        Returns the client view of a session (answer only once the round is over).

        Args:
            game_id: Unique game identifier

        Returns:
            GameView object or None if game not found
        """
        game = self.get_game(game_id)
        if game is None:
            return None

        status = game.status
        return GameView(
            game_id=game_id,
            status=status.value,
            score=game.score,
            streak=game.streak,
            word_length=game.word_length,
            total_attempts=game.total_attempts,
            attempts_left=game.attempts_left,
            validation_error=game.validation_error.value if game.validation_error else None,
            rows=self._build_rows(game),
            keyboard=self._build_keyboard(game),
            answer=game.target_word if status != GameStatus.IN_PROGRESS else None
        )

    def _build_rows(self, game: GameState) -> List[List[Optional[Dict]]]:
        rows = []
        for attempt_index in range(game.total_attempts):
            row = []
            for letter_index in range(game.word_length):
                letter = game.letter_at(attempt_index, letter_index)
                row.append(letter.to_dict() if letter else None)
            rows.append(row)
        return rows

    def _build_keyboard(self, game: GameState) -> Dict[str, str]:
        keyboard = {}
        for key in ALPHABET:
            position = game.keyboard_position(key)
            if position is not None:
                keyboard[key] = position.value
        return keyboard

    def _evict_oldest(self) -> None:
        # dicts keep insertion order, so the first key is the oldest session
        game_id = next(iter(self.games))
        del self.games[game_id]
        game_logger.log_game_event(game_id, 'game_evicted', max_games=self.max_games)

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game session from memory.

        Returns:
            bool: True if game was deleted, False if not found
        """
        if game_id in self.games:
            del self.games[game_id]
            return True
        return False


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(words: WordProvider, word_length: int = WORD_LENGTH,
                            total_attempts: int = MAX_ATTEMPTS,
                            max_games: int = MAX_ACTIVE_GAMES) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    _game_service = GameService(words, word_length, total_attempts, max_games)
    return _game_service

"""
Services Package

Contains all business logic and service classes.
"""

from .word_service import WordListError, WordProvider, get_word_provider, initialize_word_provider
from .game_service import GameService, get_game_service, initialize_game_service

__all__ = [
    'WordListError', 'WordProvider', 'get_word_provider', 'initialize_word_provider',
    'GameService', 'get_game_service', 'initialize_game_service'
]

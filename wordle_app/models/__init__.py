"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .attempt import Attempt
from .game import GameState, GameStatus, GameView, ValidationError
from .letter import Letter, LetterPosition, classify

__all__ = [
    'Attempt', 'GameState', 'GameStatus', 'GameView', 'ValidationError',
    'Letter', 'LetterPosition', 'classify'
]

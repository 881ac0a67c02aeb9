"""
Game Configuration Constants Module

This module defines the game rule constants. Environment overrides for
word length and attempt budget are applied in app_config.Config.
"""

import os
from typing import Final

# Core Game Configuration Constants
MAX_ATTEMPTS: Final[int] = 6
"""
Number of guess attempts allowed per round.
Type: Final[int] - Immutable to prevent accidental modification
"""

WORD_LENGTH: Final[int] = 5
"""Length of the hidden word for a default round."""

SCORE_MULTIPLIER: Final[int] = 100
"""
Points per unused attempt. A win is worth
SCORE_MULTIPLIER * (total_attempts + 1) minus SCORE_MULTIPLIER for every
attempt consumed before the winning one.
"""

VOWELS: Final[str] = 'aeiou'

# Bundled newline-delimited word database
DEFAULT_WORD_LIST_PATH: Final[str] = os.path.join(
    os.path.dirname(os.path.dirname(os.path.abspath(__file__))),
    'data',
    'word_database.txt'
)

MAX_ACTIVE_GAMES: Final[int] = 1000
"""Sessions kept in memory; creating one more evicts the oldest."""

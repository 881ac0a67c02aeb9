"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: Flask application configuration (environment-based)
- game_settings.py: Game rules and constants (business logic)
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import MAX_ATTEMPTS, MAX_ACTIVE_GAMES, WORD_LENGTH, SCORE_MULTIPLIER, DEFAULT_WORD_LIST_PATH

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game rules
    'MAX_ATTEMPTS', 'MAX_ACTIVE_GAMES', 'WORD_LENGTH', 'SCORE_MULTIPLIER', 'DEFAULT_WORD_LIST_PATH'
]

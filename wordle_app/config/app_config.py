"""
Application Settings

Server, word list, round and logging settings for the Wordle app. Values
come from the environment, then wordle_app/config/config.env, then the
rule defaults in game_settings.
"""

import os
from dotenv import load_dotenv

from . import game_settings

load_dotenv(os.path.join(os.path.dirname(os.path.abspath(__file__)), 'config.env'))


def _env_int(name: str, default: int) -> int:
    return int(os.getenv(name, default))


class Config:
    """Settings shared by every environment."""

    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')
    DEBUG = os.getenv('DEBUG', 'False').lower() == 'true'

    HOST = os.getenv('HOST', '127.0.0.1')
    PORT = _env_int('PORT', 5000)

    # Newline-delimited word database, read once at startup
    WORD_LIST_PATH = os.getenv('WORD_LIST_PATH', game_settings.DEFAULT_WORD_LIST_PATH)

    # Round shape and session cap
    WORD_LENGTH = _env_int('WORD_LENGTH', game_settings.WORD_LENGTH)
    TOTAL_ATTEMPTS = _env_int('TOTAL_ATTEMPTS', game_settings.MAX_ATTEMPTS)
    MAX_ACTIVE_GAMES = _env_int('MAX_ACTIVE_GAMES', game_settings.MAX_ACTIVE_GAMES)

    # Game log file directory and level
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_DIR = os.getenv('LOG_DIR', 'logs')


class DevelopmentConfig(Config):
    DEBUG = True


class ProductionConfig(Config):
    DEBUG = False


class TestingConfig(Config):
    """Flask testing mode; tests point WORD_LIST_PATH at their own files."""
    TESTING = True
    DEBUG = True


config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}

"""
Wordle Game Application Package

Single-player word-guessing game: the round state engine (models), the word
database and session services, and a Flask JSON API that drives them.
"""

from flask import Flask
from flask_cors import CORS
from .config import Config


def create_app(config_class=Config):
    """
    Application factory pattern for creating Flask app instances.

    The word list is loaded here if main() has not already done so, so no
    endpoint is reachable before it is available.

    Args:
        config_class: Configuration class to use

    Returns:
        Flask application instance with all extensions initialized

    Raises:
        WordListError: If the configured word list cannot be loaded
    """
    from .services.word_service import get_word_provider, initialize_word_provider
    from .services.game_service import get_game_service, initialize_game_service

    app = Flask(__name__)
    app.config.from_object(config_class)

    # Initialize extensions
    CORS(app)

    word_provider = get_word_provider()
    if word_provider is None:
        word_provider = initialize_word_provider(config_class.WORD_LIST_PATH)
    if get_game_service() is None:
        word_provider.validate_integrity(config_class.WORD_LENGTH)
        initialize_game_service(
            word_provider, config_class.WORD_LENGTH, config_class.TOTAL_ATTEMPTS, config_class.MAX_ACTIVE_GAMES
        )

    # Register blueprints
    from .controllers.game_controller import game_bp

    app.register_blueprint(game_bp, url_prefix='/api')

    return app

"""
Wordle Game Server - Main Entry Point

Loads the word database, initializes the game service and starts the
Flask application.
"""

from wordle_app import create_app
from wordle_app.config import Config
from wordle_app.services.word_service import initialize_word_provider, WordListError
from wordle_app.services.game_service import initialize_game_service
from wordle_app.utils.game_logger import game_logger


def main():
    """Main function to initialize services and start the server."""
    try:
        print("Initializing services...")

        # The word list is required; a missing or unreadable file stops startup
        word_provider = initialize_word_provider(Config.WORD_LIST_PATH)
        word_provider.validate_integrity(Config.WORD_LENGTH)
        stats = word_provider.statistics(Config.WORD_LENGTH)
        print(f"✓ Word list loaded: {stats['total_words']} words of length {Config.WORD_LENGTH}")

        initialize_game_service(word_provider, Config.WORD_LENGTH, Config.TOTAL_ATTEMPTS, Config.MAX_ACTIVE_GAMES)
        print("✓ Game service initialized successfully")

        print("Creating Flask application...")
        app = create_app(Config)
        print("✓ Flask application created successfully")

        game_logger.logger.info("Wordle Server Starting")

        print(f"\nStarting Wordle Game Server on {Config.HOST}:{Config.PORT}")
        print(f"Debug mode: {Config.DEBUG}")
        print("=" * 50)

        app.run(host=Config.HOST, port=Config.PORT, debug=Config.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Wordle Server shutting down (KeyboardInterrupt)")
    except WordListError as e:
        print(f"Word list unavailable: {e}")
        game_logger.logger.critical(f"Word list unavailable: {e}")
        raise
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()

"""
Request Decorators

Contains decorators shared by the HTTP endpoints.
"""

from functools import wraps
from flask import jsonify, request


def game_required(f):
    """
    Decorator resolving ``game_id`` to a live game session.

    Answers 500 when the game service is not initialized and 404 when the
    game does not exist; otherwise passes the service as ``game_service``.
    """
    @wraps(f)
    def decorated_function(game_id, *args, **kwargs):
        from ..services.game_service import get_game_service
        from .game_logger import game_logger

        game_service = get_game_service()
        if not game_service:
            return jsonify({
                'success': False,
                'error': 'Game service unavailable'
            }), 500

        if game_service.get_game(game_id) is None:
            error_response = {
                'success': False,
                'error': 'Game not found'
            }
            game_logger.log_server_response(request, f.__name__, False, error_response, game_id)
            return jsonify(error_response), 404

        kwargs['game_service'] = game_service
        return f(game_id, *args, **kwargs)

    return decorated_function

"""
Game Controller

Handles all game-related HTTP endpoints.
"""

from flask import Blueprint, request, jsonify
from dataclasses import asdict
from ..services.game_service import get_game_service
from ..services.word_service import get_word_provider
from ..utils.decorators import game_required
from ..utils.game_logger import game_logger
from ..utils.helpers import parse_letter

game_bp = Blueprint('game', __name__)


def _state_response(action, game_id, view, **log_details):
    """Build and log a successful response carrying the game state."""
    response_data = {
        'success': True,
        'state': asdict(view)
    }
    game_logger.log_server_response(
        request, action, True, response_data, game_id,
        status=view.status, **log_details
    )
    return jsonify(response_data)


def _error_response(action, error, game_id=None):
    """Log an unexpected exception and answer with a 500."""
    game_logger.log_error(request, error, action, game_id)
    error_response = {
        'success': False,
        'error': str(error)
    }
    game_logger.log_server_response(request, action, False, error_response, game_id)
    return jsonify(error_response), 500


@game_bp.route('/new_game', methods=['POST'])
def new_game():
    """Create a new game session."""
    try:
        game_service = get_game_service()
        if not game_service:
            return jsonify({
                'success': False,
                'error': 'Game service unavailable'
            }), 500

        game_logger.log_user_action(request, 'new_game')

        game_id = game_service.create_game()
        view = game_service.get_game_view(game_id)

        response_data = {
            'success': True,
            'game_id': game_id,
            'state': asdict(view)
        }
        game_logger.log_server_response(
            request, 'new_game', True, response_data, game_id,
            word_length=view.word_length, total_attempts=view.total_attempts
        )

        return jsonify(response_data)

    except Exception as e:
        return _error_response('new_game', e)


@game_bp.route('/game/<game_id>/state', methods=['GET'])
@game_required
def get_state(game_id, game_service):
    """Get current game state."""
    try:
        game_logger.log_user_action(request, 'get_state', game_id)
        return _state_response('get_state', game_id, game_service.get_game_view(game_id))
    except Exception as e:
        return _error_response('get_state', e, game_id)


@game_bp.route('/game/<game_id>/letter', methods=['POST'])
@game_required
def enter_letter(game_id, game_service):
    """Type one letter into the active attempt."""
    try:
        letter = parse_letter(request.get_json(silent=True))
        if letter is None:
            error_response = {
                'success': False,
                'error': 'A single letter a-z is required'
            }
            game_logger.log_server_response(request, 'enter_letter', False, error_response, game_id)
            return jsonify(error_response), 400

        game_logger.log_user_action(request, 'enter_letter', game_id, letter=letter)
        view = game_service.enter_letter(game_id, letter)
        return _state_response('enter_letter', game_id, view)

    except Exception as e:
        return _error_response('enter_letter', e, game_id)


@game_bp.route('/game/<game_id>/backspace', methods=['POST'])
@game_required
def remove_letter(game_id, game_service):
    """Remove the last letter of the active attempt."""
    try:
        game_logger.log_user_action(request, 'remove_letter', game_id)
        view = game_service.remove_letter(game_id)
        return _state_response('remove_letter', game_id, view)
    except Exception as e:
        return _error_response('remove_letter', e, game_id)


@game_bp.route('/game/<game_id>/submit', methods=['POST'])
@game_required
def submit_attempt(game_id, game_service):
    """
    Submit the active attempt.

    A rejected attempt is not an HTTP error: the reason is reported in
    ``state.validation_error`` and the player keeps editing.
    """
    try:
        game = game_service.get_game(game_id)
        game_logger.log_user_action(
            request, 'submit_attempt', game_id,
            attempt=game.current_attempt.word
        )
        view = game_service.submit_attempt(game_id)
        return _state_response(
            'submit_attempt', game_id, view,
            validation_error=view.validation_error, attempts_left=view.attempts_left
        )
    except Exception as e:
        return _error_response('submit_attempt', e, game_id)


@game_bp.route('/game/<game_id>/next', methods=['POST'])
@game_required
def next_round(game_id, game_service):
    """Start the next round, keeping score and streak unless the last round was lost."""
    try:
        game_logger.log_user_action(request, 'next_round', game_id)
        view = game_service.next_round(game_id)
        return _state_response('next_round', game_id, view, score=view.score, streak=view.streak)
    except Exception as e:
        return _error_response('next_round', e, game_id)


@game_bp.route('/game/<game_id>', methods=['DELETE'])
@game_required
def delete_game(game_id, game_service):
    """Delete a game session."""
    try:
        game_logger.log_user_action(request, 'delete_game', game_id)

        success = game_service.delete_game(game_id)
        response_data = {
            'success': success
        }
        game_logger.log_server_response(request, 'delete_game', success, response_data, game_id)

        if success:
            game_logger.log_game_event(game_id, 'game_deleted', request.remote_addr)

        return jsonify(response_data)

    except Exception as e:
        return _error_response('delete_game', e, game_id)


@game_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    try:
        game_service = get_game_service()
        word_provider = get_word_provider()

        game_logger.log_user_action(request, 'health_check')

        word_stats = None
        if word_provider and game_service:
            stats = word_provider.statistics(game_service.word_length)
            word_stats = {
                key: value for key, value in stats.items() if key != 'letter_frequency'
            }

        response_data = {
            'status': 'healthy',
            'active_games': len(game_service.games) if game_service else 0,
            'word_list_loaded': word_provider is not None,
            'word_stats': word_stats,
            'log_stats': game_logger.get_log_stats()
        }

        game_logger.log_server_response(request, 'health_check', True, response_data)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'health_check')
        error_response = {
            'status': 'error',
            'error': str(e)
        }
        game_logger.log_server_response(request, 'health_check', False, error_response)
        return jsonify(error_response), 500

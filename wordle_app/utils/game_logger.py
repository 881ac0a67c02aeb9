"""
Game Logger

One JSON document per line, prefixed with time and level, written to a
dated file under Config.LOG_DIR. Warnings and errors are echoed to the
console.

Event types: USER_ACTION, SERVER_RESPONSE_SUCCESS, SERVER_RESPONSE_ERROR,
GAME_EVENT and ERROR.
"""

import logging
import json
from datetime import datetime
from typing import Dict, Any, Optional
from pathlib import Path

from ..config import Config
from .helpers import get_user_identity

# Keys of a GameView kept when a response carrying game state is logged
LOGGED_STATE_KEYS = ('status', 'score', 'streak', 'attempts_left', 'validation_error')


class GameLogger:
    """Structured logger for player input, API responses and round outcomes."""

    def __init__(self, log_dir: str = "logs", level: str = "INFO"):
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.level = logging.getLevelName(level.upper())
        if not isinstance(self.level, int):
            self.level = logging.INFO

        self.logger = self._setup_logger()

    @property
    def log_file(self) -> Path:
        return self.log_dir / f"game_log_{datetime.now().strftime('%Y-%m-%d')}.log"

    def _setup_logger(self) -> logging.Logger:
        logger = logging.getLogger('wordle_game')
        logger.setLevel(self.level)

        # Re-creating the logger must not stack handlers
        if logger.handlers:
            logger.handlers.clear()

        file_handler = logging.FileHandler(self.log_file, encoding='utf-8')
        file_handler.setLevel(self.level)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s | %(levelname)s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))

        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))

        logger.addHandler(file_handler)
        logger.addHandler(console_handler)

        return logger

    def _emit(self,
              level: int,
              event_type: str,
              action: str,
              user_info: Dict[str, Optional[str]],
              details: Dict[str, Any]):
        entry = {
            'timestamp': datetime.now().isoformat(),
            'event_type': event_type,
            'action': action,
            'user': user_info,
            'details': details
        }
        self.logger.log(level, json.dumps(entry, ensure_ascii=False, default=str))

    def log_user_action(self, request, action: str, game_id: Optional[str] = None, **kwargs):
        """Record an incoming request, e.g. 'enter_letter' or 'submit_attempt'."""
        details = {
            'game_id': game_id,
            'endpoint': request.endpoint,
            'method': request.method,
            'url': request.url,
            **kwargs
        }
        self._emit(logging.INFO, 'USER_ACTION', action, get_user_identity(request), details)

    def log_server_response(self,
                            request,
                            action: str,
                            success: bool,
                            response_data: Dict[str, Any],
                            game_id: Optional[str] = None,
                            **kwargs):
        """
        Record the JSON body returned for ``action``.

        Game state in the body is cut down to LOGGED_STATE_KEYS so the
        answer never reaches the log. Failed responses are logged at ERROR.
        """
        details = {
            'game_id': game_id,
            'success': success,
            'response_size': len(str(response_data)),
            'response_data': self._summarize_response(response_data),
            **kwargs
        }
        if success:
            self._emit(logging.INFO, 'SERVER_RESPONSE_SUCCESS', action, get_user_identity(request), details)
        else:
            self._emit(logging.ERROR, 'SERVER_RESPONSE_ERROR', action, get_user_identity(request), details)

    def log_game_event(self, game_id: Optional[str], event: str, user_ip: str = 'system', **kwargs):
        """Record a round event: round_started, round_won, round_lost, game_deleted, game_evicted."""
        user_info = {'user_ip': user_ip, 'session_id': None}
        self._emit(logging.INFO, 'GAME_EVENT', event, user_info, {'game_id': game_id, **kwargs})

    def log_error(self, request, error: Exception, action: str, game_id: Optional[str] = None):
        details = {
            'game_id': game_id,
            'error_type': type(error).__name__,
            'error_message': str(error),
            'action': action
        }
        self._emit(logging.ERROR, 'ERROR', action, get_user_identity(request), details)

    def _summarize_response(self, data: Dict[str, Any]) -> Dict[str, Any]:
        if not isinstance(data, dict):
            return {'data_type': type(data).__name__}

        summary = data.copy()
        state = summary.get('state')
        if isinstance(state, dict):
            summary['state'] = {key: state.get(key) for key in LOGGED_STATE_KEYS}
            summary['state']['answer_revealed'] = state.get('answer') is not None

        return summary

    def get_log_stats(self) -> Dict[str, Any]:
        """Count today's entries per event type for the health endpoint."""
        log_file = self.log_file
        if not log_file.exists():
            return {'error': 'No log file found for today'}

        counters = {
            'USER_ACTION': 'user_actions',
            'SERVER_RESPONSE': 'server_responses',
            'GAME_EVENT': 'game_events',
            'ERROR': 'errors'
        }
        stats = {
            'log_file': str(log_file),
            'file_size_mb': round(log_file.stat().st_size / (1024 * 1024), 2),
            'total_entries': 0,
            **{name: 0 for name in counters.values()}
        }

        try:
            with open(log_file, 'r', encoding='utf-8') as f:
                for line in f:
                    if not line.strip():
                        continue
                    stats['total_entries'] += 1
                    # First match wins: response errors count as responses
                    for marker, name in counters.items():
                        if marker in line:
                            stats[name] += 1
                            break
        except OSError as e:
            return {'error': f'Failed to get stats: {e}'}

        return stats


game_logger = GameLogger(Config.LOG_DIR, Config.LOG_LEVEL)

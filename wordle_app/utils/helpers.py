"""
Helper Functions

Contains utility functions used throughout the application.
"""

from typing import Dict, Optional

from flask import request

ALPHABET = "abcdefghijklmnopqrstuvwxyz"


def get_user_identity(request_obj=None) -> Dict[str, Optional[str]]:
    """Extract user identity information from request."""
    if request_obj is None:
        request_obj = request

    user_ip = request_obj.remote_addr or 'unknown'

    return {
        'user_ip': user_ip,
        'session_id': None
    }


def parse_letter(data) -> Optional[str]:
    """Return the lowercase letter from a JSON body, or None if it is not a single a-z letter."""
    if not isinstance(data, dict):
        return None

    letter = data.get('letter')
    if not isinstance(letter, str):
        return None

    letter = letter.strip().lower()
    if len(letter) != 1 or letter not in ALPHABET:
        return None
    return letter

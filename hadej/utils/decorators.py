"""
Controller Decorators

Contains decorators shared by the HTTP endpoints.
"""

from functools import wraps
from flask import jsonify


def require_game(f):
    """
    Decorator resolving the ``game_id`` URL parameter to a live session.

    The wrapped view receives ``game_service`` and ``session`` keyword
    arguments; unknown games are answered with 404.
    """
    @wraps(f)
    def decorated_function(game_id, *args, **kwargs):
        from ..services.game_service import get_game_service

        game_service = get_game_service()
        if not game_service:
            return jsonify({
                'success': False,
                'error': 'Game service unavailable'
            }), 500

        session = game_service.get_session(game_id)
        if session is None:
            return jsonify({
                'success': False,
                'error': 'Game not found'
            }), 404

        kwargs['game_service'] = game_service
        kwargs['session'] = session
        return f(game_id, *args, **kwargs)

    return decorated_function

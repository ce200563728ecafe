"""
Game Controller

Handles all game-related HTTP endpoints.
"""

from dataclasses import asdict
from flask import Blueprint, request, jsonify
from ..config.game_settings import ENTER_KEY
from ..models.game import GameStatus, SubmitResult
from ..services.game_service import get_game_service
from ..utils.decorators import require_game
from ..utils.game_logger import game_logger

game_bp = Blueprint('game', __name__)


def _error(action, message, status_code, game_id=None, **extra):
    error_response = {
        'success': False,
        'error': message,
        **extra
    }
    game_logger.log_server_response(request, action, False, error_response, game_id)
    return jsonify(error_response), status_code


def _state_response(game_service, game_id, action, extra=None):
    state = game_service.get_game_state(game_id)
    response_data = {
        'success': True,
        **(extra or {}),
        'state': asdict(state)
    }
    game_logger.log_server_response(
        request, action, True, response_data, game_id,
        status=state.status, remaining_guesses=state.remaining_guesses
    )
    return jsonify(response_data)


def _submit_response(game_service, game_id, action, result: SubmitResult):
    """Turns a submit attempt into a response, logging wins and losses."""
    if not result.accepted:
        if result.rejection is None:
            return _error(action, 'Game is already over', 400, game_id)

        state = game_service.get_game_state(game_id)
        return _error(
            action, result.message, 400, game_id,
            rejection=result.rejection.value, state=asdict(state)
        )

    session = game_service.get_session(game_id)
    if result.status == GameStatus.WON:
        game_logger.log_game_event(
            game_id, 'game_won', request.remote_addr,
            guesses_used=len(session.history), target_word=session.solution
        )
    elif result.status == GameStatus.LOST:
        game_logger.log_game_event(
            game_id, 'game_lost', request.remote_addr,
            guesses_used=len(session.history), target_word=session.solution,
            final_guess=result.guess.word
        )

    return _state_response(
        game_service, game_id, action, {'accepted': True, 'guess': result.guess.to_dict()}
    )


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

        game_id = game_service.create_new_game()
        return _state_response(game_service, game_id, 'new_game', {'game_id': game_id})

    except Exception as e:
        game_logger.log_error(request, e, 'new_game')
        return _error('new_game', str(e), 500)


@game_bp.route('/game/<game_id>/state', methods=['GET'])
@require_game
def get_state(game_id, game_service, session):
    """Get current game state."""
    try:
        game_logger.log_user_action(request, 'get_state', game_id)
        return _state_response(game_service, game_id, 'get_state')

    except Exception as e:
        game_logger.log_error(request, e, 'get_state', game_id)
        return _error('get_state', str(e), 500, game_id)


@game_bp.route('/game/<game_id>/letter', methods=['POST'])
@require_game
def type_letter(game_id, game_service, session):
    """Append a letter to the pending guess."""
    try:
        data = request.get_json(silent=True) or {}
        letter = data.get('letter')
        if not isinstance(letter, str) or not letter:
            return _error('type_letter', 'Letter is required', 400, game_id)

        game_logger.log_user_action(request, 'type_letter', game_id, letter=letter)

        accepted = game_service.type_letter(game_id, letter)
        return _state_response(game_service, game_id, 'type_letter', {'accepted': accepted})

    except Exception as e:
        game_logger.log_error(request, e, 'type_letter', game_id)
        return _error('type_letter', str(e), 500, game_id)


@game_bp.route('/game/<game_id>/delete', methods=['POST'])
@require_game
def delete_letter(game_id, game_service, session):
    """Remove the last pending letter."""
    try:
        game_logger.log_user_action(request, 'delete_letter', game_id)

        accepted = game_service.delete_letter(game_id)
        return _state_response(game_service, game_id, 'delete_letter', {'accepted': accepted})

    except Exception as e:
        game_logger.log_error(request, e, 'delete_letter', game_id)
        return _error('delete_letter', str(e), 500, game_id)


@game_bp.route('/game/<game_id>/submit', methods=['POST'])
@require_game
def submit_guess(game_id, game_service, session):
    """Submit the pending guess for evaluation."""
    try:
        game_logger.log_user_action(
            request, 'submit_guess', game_id,
            guess=session.pending, guess_length=len(session.pending)
        )

        result = game_service.submit_guess(game_id)
        return _submit_response(game_service, game_id, 'submit_guess', result)

    except Exception as e:
        game_logger.log_error(request, e, 'submit_guess', game_id)
        return _error('submit_guess', str(e), 500, game_id)


@game_bp.route('/game/<game_id>/key', methods=['POST'])
@require_game
def press_key(game_id, game_service, session):
    """Handle an on-screen keyboard press (a letter, ENTER or BACK)."""
    try:
        data = request.get_json(silent=True) or {}
        key = data.get('key')
        if not isinstance(key, str) or not key:
            return _error('press_key', 'Key is required', 400, game_id)

        game_logger.log_user_action(request, 'press_key', game_id, key=key)

        if key == ENTER_KEY:
            result = game_service.submit_guess(game_id)
            return _submit_response(game_service, game_id, 'press_key', result)

        accepted = game_service.press_key(game_id, key)
        return _state_response(game_service, game_id, 'press_key', {'accepted': accepted})

    except Exception as e:
        game_logger.log_error(request, e, 'press_key', game_id)
        return _error('press_key', str(e), 500, game_id)


@game_bp.route('/game/<game_id>/reset', methods=['POST'])
@require_game
def reset_game(game_id, game_service, session):
    """Start the same session over with a new word."""
    try:
        game_logger.log_user_action(request, 'reset_game', game_id, previous_status=session.status.value)

        game_service.reset_game(game_id)
        return _state_response(game_service, game_id, 'reset_game')

    except Exception as e:
        game_logger.log_error(request, e, 'reset_game', game_id)
        return _error('reset_game', str(e), 500, game_id)


@game_bp.route('/game/<game_id>', methods=['DELETE'])
@require_game
def delete_game(game_id, game_service, session):
    """Close a game session and forget it."""
    try:
        game_logger.log_user_action(request, 'delete_game', game_id)

        game_service.delete_game(game_id)
        response_data = {'success': True}
        game_logger.log_server_response(request, 'delete_game', True, response_data, game_id)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'delete_game', game_id)
        return _error('delete_game', str(e), 500, game_id)


@game_bp.route('/vocabulary/stats', methods=['GET'])
def vocabulary_stats():
    """Statistics about the active word list."""
    try:
        game_service = get_game_service()
        if not game_service:
            return jsonify({
                'success': False,
                'error': 'Game service unavailable'
            }), 500

        game_logger.log_user_action(request, 'vocabulary_stats')

        response_data = {
            'success': True,
            'stats': game_service.vocabulary.word_statistics()
        }
        game_logger.log_server_response(request, 'vocabulary_stats', True, response_data)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'vocabulary_stats')
        return _error('vocabulary_stats', str(e), 500)


@game_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    try:
        game_service = get_game_service()

        game_logger.log_user_action(request, 'health_check')

        response_data = {
            'status': 'healthy',
            'active_games': len(game_service.games) if game_service else 0,
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

"""
Services Package

Contains all business logic and service classes.
"""

from .game_service import GameService, get_game_service, initialize_game_service
from .keyboard import apply_guess, fold_keyboard, merge_letter_status
from .scorer import score
from .session import GameSession
from .vocabulary import Vocabulary, normalize_word

__all__ = [
    'GameService', 'get_game_service', 'initialize_game_service',
    'apply_guess', 'fold_keyboard', 'merge_letter_status',
    'score', 'GameSession', 'Vocabulary', 'normalize_word'
]

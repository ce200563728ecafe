"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import GameState, GameStatus, Guess, LetterStatus, Rejection, SCORED_STATUSES, SubmitResult

__all__ = [
    'GameState', 'GameStatus', 'Guess', 'LetterStatus', 'Rejection',
    'SCORED_STATUSES', 'SubmitResult'
]

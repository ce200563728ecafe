"""
Game Service

Keeps the in-memory game sessions and turns them into presentation state.
"""

import logging
import time
import uuid
from typing import Callable, Dict, List, Optional

from ..config.game_settings import GAME_IDLE_TIMEOUT_SECONDS, INVALID_FEEDBACK_MS, MAX_GUESSES
from ..models.game import GameState, SubmitResult
from .board import build_board, build_keyboard
from .feedback_timer import Scheduler, threading_scheduler
from .session import GameSession
from .vocabulary import Vocabulary

logger = logging.getLogger(__name__)


class GameService:
    """
    Game service managing multiple game sessions.

    This class handles:
    - Session management with unique game IDs
    - Routing player input to the right session
    - Building game state without exposing answers to clients
    - Evicting sessions nobody has touched for ``idle_timeout_seconds``
    """

    def __init__(self,
                 vocabulary: Vocabulary,
                 max_guesses: int = MAX_GUESSES,
                 invalid_feedback_ms: int = INVALID_FEEDBACK_MS,
                 scheduler: Scheduler = threading_scheduler,
                 idle_timeout_seconds: Optional[float] = GAME_IDLE_TIMEOUT_SECONDS,
                 clock: Callable[[], float] = time.monotonic):
        self.vocabulary = vocabulary
        self.max_guesses = max_guesses
        self.invalid_feedback_ms = invalid_feedback_ms
        self.scheduler = scheduler
        self.games: Dict[str, GameSession] = {}  # Store active games by game_id
        self.last_activity: Dict[str, float] = {}
        self.idle_timeout_seconds = idle_timeout_seconds
        self.clock = clock

    def create_new_game(self, solution: Optional[str] = None) -> str:
        """
        Creates a new game session with a randomly selected word.

        Args:
            solution: Fixed solution, mainly for tests

        Returns:
            str: Unique game ID for this session
        """
        self.cleanup_idle_games()

        game_id = str(uuid.uuid4())
        self.games[game_id] = GameSession(
            self.vocabulary,
            max_guesses=self.max_guesses,
            invalid_feedback_ms=self.invalid_feedback_ms,
            scheduler=self.scheduler,
            solution=solution
        )
        self.last_activity[game_id] = self.clock()
        logger.debug("Created game %s", game_id)
        return game_id

    def get_session(self, game_id: str) -> Optional[GameSession]:
        session = self.games.get(game_id)
        if session is not None:
            self.last_activity[game_id] = self.clock()
        return session

    def get_game_state(self, game_id: str) -> Optional[GameState]:
        """
        Returns the current game state for a session (without revealing the answer).

        Args:
            game_id: Unique game identifier

        Returns:
            GameState object or None if game not found
        """
        session = self.get_session(game_id)
        if session is None:
            return None

        history = session.history
        feedback = session.keyboard_feedback

        return GameState(
            game_id=game_id,
            status=session.status.value,
            word_length=session.word_length,
            max_guesses=session.max_guesses,
            remaining_guesses=session.remaining_guesses,
            guesses=[guess.to_dict() for guess in history],
            pending=session.pending,
            keyboard_feedback={letter: status.value for letter, status in feedback.items()},
            message=session.message,
            invalid=session.invalid,
            board=build_board(history, session.pending, session.invalid,
                              session.word_length, session.max_guesses),
            keyboard=build_keyboard(feedback),
            answer=session.solution if session.is_over else None
        )

    def type_letter(self, game_id: str, letter: str) -> Optional[bool]:
        session = self.get_session(game_id)
        if session is None:
            return None
        return session.type_letter(letter)

    def delete_letter(self, game_id: str) -> Optional[bool]:
        session = self.get_session(game_id)
        if session is None:
            return None
        return session.delete_letter()

    def submit_guess(self, game_id: str) -> Optional[SubmitResult]:
        session = self.get_session(game_id)
        if session is None:
            return None
        return session.submit()

    def press_key(self, game_id: str, key: str):
        session = self.get_session(game_id)
        if session is None:
            return None
        return session.press_key(key)

    def reset_game(self, game_id: str) -> bool:
        session = self.get_session(game_id)
        if session is None:
            return False
        session.reset()
        return True

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game session from memory and releases its timer.

        Args:
            game_id: Unique game identifier

        Returns:
            bool: True if game was deleted, False if not found
        """
        session = self.games.pop(game_id, None)
        self.last_activity.pop(game_id, None)
        if session is None:
            return False
        session.close()
        logger.debug("Deleted game %s", game_id)
        return True

    def close(self) -> None:
        for session in self.games.values():
            session.close()
        self.games.clear()
        self.last_activity.clear()

    def cleanup_idle_games(self) -> List[str]:
        """
        Closes and forgets sessions idle for longer than the timeout.

        Finished games are kept until they go idle, since their player may
        still reset them.

        Returns:
            list: IDs of the evicted games
        """
        if self.idle_timeout_seconds is None:
            return []

        cutoff = self.clock() - self.idle_timeout_seconds
        stale = [game_id for game_id, seen in self.last_activity.items() if seen < cutoff]
        for game_id in stale:
            self.delete_game(game_id)
        if stale:
            logger.info("Evicted %d idle games", len(stale))
        return stale


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(vocabulary: Vocabulary, **kwargs) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    if _game_service is not None:
        _game_service.close()
    _game_service = GameService(vocabulary, **kwargs)
    return _game_service

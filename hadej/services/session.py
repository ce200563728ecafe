"""
Game Session

Single-player state machine: pending letters, guess history, status and
keyboard feedback for one hidden word.
"""

from typing import Dict, List, Optional

from ..config.game_settings import (
    BACK_KEY, ENTER_KEY, INVALID_FEEDBACK_MS, MAX_GUESSES, MESSAGE_LOST,
    MESSAGE_NOT_IN_VOCABULARY, MESSAGE_TOO_SHORT, MESSAGE_WON
)
from ..models.game import GameStatus, Guess, LetterStatus, Rejection, SubmitResult
from .feedback_timer import FeedbackTimer, Scheduler, threading_scheduler
from .keyboard import apply_guess
from .scorer import is_solved, score
from .vocabulary import Vocabulary, normalize_word


class GameSession:
    """
    One game against one hidden word.

    Every mutating operation is a no-op once the game is WON or LOST, except
    ``reset`` which always starts over. Rejected submits never touch the
    history or the status; they raise a transient invalid flag that clears
    itself after ``invalid_feedback_ms`` or on the next input.
    """

    def __init__(self,
                 vocabulary: Vocabulary,
                 max_guesses: int = MAX_GUESSES,
                 invalid_feedback_ms: int = INVALID_FEEDBACK_MS,
                 scheduler: Scheduler = threading_scheduler,
                 solution: Optional[str] = None):
        self.vocabulary = vocabulary
        self.word_length = vocabulary.word_length
        self.max_guesses = max_guesses
        self._timer = FeedbackTimer(invalid_feedback_ms / 1000.0, scheduler)

        self._history: List[Guess] = []
        self._pending = ""
        self._keyboard: Dict[str, LetterStatus] = {}
        self._message = ""
        self._invalid = False
        self._status = GameStatus.PLAYING
        self._solution = self._choose_solution(solution)

    # Read access for the presentation layer

    @property
    def solution(self) -> str:
        return self._solution

    @property
    def history(self) -> List[Guess]:
        return list(self._history)

    @property
    def pending(self) -> str:
        return self._pending

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def keyboard_feedback(self) -> Dict[str, LetterStatus]:
        return dict(self._keyboard)

    @property
    def message(self) -> str:
        return self._message

    @property
    def invalid(self) -> bool:
        return self._invalid

    @property
    def is_over(self) -> bool:
        return self._status != GameStatus.PLAYING

    @property
    def remaining_guesses(self) -> int:
        return self.max_guesses - len(self._history)

    # Mutations

    def type_letter(self, letter: str) -> bool:
        """
        Appends a letter to the pending guess.

        Returns:
            bool: True if the letter was accepted
        """
        if self.is_over or len(self._pending) >= self.word_length:
            return False
        if not isinstance(letter, str):
            return False

        normalized = normalize_word(letter)
        if not self.vocabulary.accepts_letter(normalized):
            return False

        self._pending += normalized
        self._clear_feedback()
        return True

    def delete_letter(self) -> bool:
        """Removes the last pending letter. Returns True if one was removed."""
        if self.is_over or not self._pending:
            return False

        self._pending = self._pending[:-1]
        self._clear_feedback()
        return True

    def submit(self) -> SubmitResult:
        """
        Submits the pending guess.

        Returns:
            SubmitResult: accepted guess and new status, or the rejection kind
        """
        if self.is_over:
            return SubmitResult(accepted=False, status=self._status, message=self._message)

        if len(self._pending) < self.word_length:
            return self._reject(Rejection.TOO_SHORT, MESSAGE_TOO_SHORT)

        word = normalize_word(self._pending)
        if word not in self.vocabulary:
            # Pending letters stay so the player can correct them
            return self._reject(Rejection.NOT_IN_VOCABULARY, MESSAGE_NOT_IN_VOCABULARY)

        guess = Guess(word, score(word, self._solution))
        self._history.append(guess)
        self._keyboard = apply_guess(self._keyboard, guess)
        self._pending = ""
        self._drop_invalid()

        if is_solved(guess.outcome):
            self._status = GameStatus.WON
            self._message = MESSAGE_WON
        elif len(self._history) >= self.max_guesses:
            self._status = GameStatus.LOST
            self._message = MESSAGE_LOST.format(solution=self._solution)
        else:
            self._message = ""

        return SubmitResult(accepted=True, status=self._status, guess=guess, message=self._message)

    def press_key(self, key: str):
        """
        Dispatches an on-screen or physical key.

        ENTER submits, BACK deletes, anything else is typed.

        Returns:
            SubmitResult for ENTER, otherwise whether the key changed the guess
        """
        if key == ENTER_KEY:
            return self.submit()
        if key == BACK_KEY:
            return self.delete_letter()
        return self.type_letter(key)

    def reset(self, solution: Optional[str] = None) -> None:
        """Starts over with a new solution, whatever the current status."""
        self._drop_invalid()
        self._history = []
        self._pending = ""
        self._keyboard = {}
        self._message = ""
        self._solution = self._choose_solution(solution)
        self._status = GameStatus.PLAYING

    def close(self) -> None:
        """Releases the pending feedback timer."""
        self._timer.cancel()

    # Internals

    def _choose_solution(self, solution: Optional[str]) -> str:
        if solution is None:
            return self.vocabulary.pick_random_word()

        solution = normalize_word(solution)
        if not self.vocabulary.is_valid_solution(solution):
            raise ValueError(f"Solution '{solution}' is not a {self.word_length}-letter word of the alphabet")
        if solution not in self.vocabulary:
            raise ValueError(f"Solution '{solution}' is not in the vocabulary")
        return solution

    def _reject(self, rejection: Rejection, message: str) -> SubmitResult:
        # Flag and scheduled clear change together under the timer lock
        with self._timer.lock:
            self._message = message
            self._invalid = True
            self._timer.start(self._expire_invalid)
        return SubmitResult(accepted=False, status=self._status, rejection=rejection, message=message)

    def _expire_invalid(self) -> None:
        # Runs on the timer thread, inside the timer lock
        self._invalid = False

    def _drop_invalid(self) -> None:
        with self._timer.lock:
            self._timer.cancel()
            self._invalid = False

    def _clear_feedback(self) -> None:
        self._drop_invalid()
        self._message = ""

"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple


class LetterStatus(Enum):
    """Per-letter state, either produced by scoring or layered by the display."""
    EMPTY = "empty"
    CURRENT = "current"
    CORRECT = "correct"
    PRESENT = "present"
    ABSENT = "absent"
    INVALID = "invalid"


# Only these come out of the scorer; the rest are display-only
SCORED_STATUSES = frozenset({LetterStatus.CORRECT, LetterStatus.PRESENT, LetterStatus.ABSENT})


class GameStatus(Enum):
    """Session lifecycle. WON and LOST are terminal until reset."""
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"


class Rejection(Enum):
    """Why a submit attempt was refused."""
    TOO_SHORT = "too_short"
    NOT_IN_VOCABULARY = "not_in_vocabulary"


@dataclass(frozen=True)
class Guess:
    """A submitted word paired with its per-letter outcome."""
    word: str
    outcome: Tuple[LetterStatus, ...]

    def __post_init__(self):
        if len(self.word) != len(self.outcome):
            raise ValueError(
                f"Guess '{self.word}' has {len(self.word)} letters but {len(self.outcome)} outcomes"
            )

    def letters(self) -> List[Tuple[str, LetterStatus]]:
        return list(zip(self.word, self.outcome))

    def to_dict(self) -> Dict:
        return {
            'word': self.word,
            'states': [status.value for status in self.outcome]
        }


@dataclass
class SubmitResult:
    """Outcome of a single submit attempt."""
    accepted: bool
    status: GameStatus
    guess: Optional[Guess] = None
    rejection: Optional[Rejection] = None
    message: str = ""


@dataclass
class GameState:
    """Presentation-side game state representation."""
    game_id: str
    status: str
    word_length: int
    max_guesses: int
    remaining_guesses: int
    guesses: List[Dict]  # Letter status as string for JSON serialization
    pending: str
    keyboard_feedback: Dict[str, str]
    message: str
    invalid: bool
    board: List[List[Dict]] = field(default_factory=list)
    keyboard: List[List[Dict]] = field(default_factory=list)
    answer: Optional[str] = None  # Only included when game is over

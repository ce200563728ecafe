"""
Board Projection

Builds the grid and keyboard the front-end draws, layering the display-only
EMPTY / CURRENT / INVALID states over the scored guesses.
"""

from typing import Dict, List, Mapping, Optional, Sequence

from ..config.game_settings import BACK_KEY, ENTER_KEY, KEYBOARD_LAYOUT
from ..models.game import Guess, LetterStatus


def _cell(letter: str, status: LetterStatus) -> Dict[str, str]:
    return {'letter': letter, 'status': status.value}


def _active_row_states(pending: str, invalid: bool, word_length: int) -> List[LetterStatus]:
    states = []
    for column in range(word_length):
        if invalid:
            states.append(LetterStatus.INVALID if column < len(pending) else LetterStatus.EMPTY)
        elif len(pending) < word_length and column == len(pending):
            states.append(LetterStatus.CURRENT)
        else:
            states.append(LetterStatus.EMPTY)
    return states


def build_board(history: Sequence[Guess],
                pending: str,
                invalid: bool,
                word_length: int,
                max_guesses: int) -> List[List[Dict[str, str]]]:
    """
    Lays out every row of the guess grid.

    Submitted rows show their outcomes. The first unused row shows the
    pending letters, marked INVALID while a rejection is displayed and
    with the next free cell marked CURRENT otherwise.
    """
    active_row = min(len(history), max_guesses - 1)
    has_remaining_row = len(history) < max_guesses
    rows = []

    for row_index in range(max(max_guesses, len(history))):
        if row_index < len(history):
            guess = history[row_index]
            rows.append([_cell(letter, status) for letter, status in guess.letters()])
            continue

        if row_index == active_row and has_remaining_row:
            states = _active_row_states(pending, invalid, word_length)
            letters = pending.ljust(word_length)
            rows.append([
                _cell(letters[column].strip(), states[column]) for column in range(word_length)
            ])
        else:
            rows.append([_cell("", LetterStatus.EMPTY) for _ in range(word_length)])

    return rows


def build_keyboard(feedback: Mapping[str, LetterStatus],
                   layout: Optional[Sequence[Sequence[str]]] = None) -> List[List[Dict]]:
    """Annotates each key of the layout with its aggregate letter status."""
    keyboard = []
    for row in layout or KEYBOARD_LAYOUT:
        keys = []
        for key in row:
            is_control_key = key in (ENTER_KEY, BACK_KEY)
            status = None if is_control_key else feedback.get(key)
            keys.append({
                'key': key,
                'label': 'DEL' if key == BACK_KEY else key,
                'status': status.value if status else None,
                'wide': is_control_key
            })
        keyboard.append(keys)
    return keyboard

"""
Game Configuration Constants Module

This module defines the game rules and constants. All game parameters are
centralized here so the session, vocabulary and board modules agree on them.
"""

import os
from typing import Final, List

# Core Game Configuration Constants
WORD_LENGTH: Final[int] = 5
"""Number of letters in every guess and in the solution."""

MAX_GUESSES: Final[int] = 6
"""Maximum number of guess attempts allowed per game."""

INVALID_FEEDBACK_MS: Final[int] = 700
"""How long the invalid-guess flag stays visible after a rejection."""

GAME_IDLE_TIMEOUT_SECONDS: Final[int] = 3600
"""Sessions untouched for this long are dropped when a new game starts."""

# Accepted letters: ASCII plus the Czech extended Latin letters
EXTENDED_LETTERS: Final[str] = "ÁČĎÉĚÍŇÓŘŠŤÚŮÝŽ"
ALPHABET: Final[str] = "ABCDEFGHIJKLMNOPQRSTUVWXYZ" + EXTENDED_LETTERS

# Used when the word source yields nothing usable
FALLBACK_WORDS: Final[List[str]] = [
    "APPLE",
    "GRAPE",
    "MANGO",
    "PEACH",
    "LEMON",
    "BERRY",
    "CHILI",
    "OLIVE",
]

WORD_LIST_FILE: Final[str] = os.path.join(
    os.path.dirname(os.path.abspath(__file__)), 'words.txt'
)

# Keyboard keys understood by press_key
ENTER_KEY: Final[str] = "ENTER"
BACK_KEY: Final[str] = "BACK"

KEYBOARD_LAYOUT: Final[List[List[str]]] = [
    ["Q", "W", "E", "R", "T", "Y", "U", "I", "O", "P"],
    ["A", "S", "D", "F", "G", "H", "J", "K", "L"],
    [ENTER_KEY, "Z", "X", "C", "V", "B", "N", "M", BACK_KEY],
    list(EXTENDED_LETTERS),
]

# Player-facing messages
MESSAGE_TOO_SHORT: Final[str] = "Nedostatek písmen"
MESSAGE_NOT_IN_VOCABULARY: Final[str] = "Slovo není v seznamu"
MESSAGE_WON: Final[str] = "Správně!"
MESSAGE_LOST: Final[str] = "Slovo bylo: {solution}"

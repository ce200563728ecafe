"""
Vocabulary Service

Loads and normalizes the accepted word list, which is also the pool
solutions are drawn from.
"""

import logging
import random
import re
import unicodedata
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional

from ..config.game_settings import ALPHABET, FALLBACK_WORDS, WORD_LENGTH

logger = logging.getLogger(__name__)


def normalize_word(text: str) -> str:
    """Uppercases text after composing accents, so 'č' and 'c' + caron both become 'Č'."""
    return unicodedata.normalize('NFC', text).upper()


def normalize_words(raw_words: Iterable[str], word_length: int = WORD_LENGTH,
                    alphabet: str = ALPHABET) -> List[str]:
    """
    Cleans raw word source entries.

    Words are trimmed and uppercased; anything not exactly ``word_length``
    letters of ``alphabet`` is dropped, and duplicates are removed keeping
    first-seen order.
    """
    allowed = set(alphabet)
    seen = set()
    words: List[str] = []
    for raw in raw_words:
        word = normalize_word(raw.strip())
        if len(word) != word_length or word in seen:
            continue
        if not all(char in allowed for char in word):
            continue
        seen.add(word)
        words.append(word)
    return words


class Vocabulary:
    """
    Immutable set of accepted words.

    Falls back to the built-in word list when the source yields nothing
    usable, so a game can always be started.
    """

    def __init__(self,
                 words: Iterable[str],
                 word_length: int = WORD_LENGTH,
                 alphabet: str = ALPHABET,
                 fallback: Iterable[str] = FALLBACK_WORDS,
                 rng: Optional[random.Random] = None):
        self.word_length = word_length
        self.alphabet = alphabet
        self._letter_pattern = re.compile(f"[{re.escape(alphabet)}]")
        self._rng = rng or random.Random()

        normalized = normalize_words(words, word_length, alphabet)
        self.is_fallback = not normalized
        if self.is_fallback:
            normalized = normalize_words(fallback, word_length, alphabet)
            logger.warning("Word source is empty, using %d fallback words", len(normalized))
        if not normalized:
            raise ValueError(f"No usable {word_length}-letter words, not even in the fallback list")

        self._words = tuple(normalized)
        self._word_set = frozenset(normalized)

    @classmethod
    def from_file(cls, path, **kwargs) -> 'Vocabulary':
        """
        Loads a plain-text word list, one word per line.

        A missing file is not fatal: the fallback list is used instead.
        """
        path = Path(path)
        try:
            lines = path.read_text(encoding='utf-8').splitlines()
        except FileNotFoundError:
            logger.warning("Word list file not found: %s", path)
            lines = []
        return cls(lines, **kwargs)

    @property
    def words(self) -> tuple:
        return self._words

    def __contains__(self, word: str) -> bool:
        return normalize_word(word) in self._word_set

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def accepts_letter(self, letter: str) -> bool:
        """True if a single, already normalized character belongs to the alphabet."""
        return bool(self._letter_pattern.fullmatch(letter))

    def pick_random_word(self) -> str:
        """Draws a solution uniformly from the word list."""
        return self._rng.choice(self._words)

    def is_valid_solution(self, word: str) -> bool:
        word = normalize_word(word)
        return len(word) == self.word_length and all(self.accepts_letter(char) for char in word)

    def word_statistics(self) -> Dict:
        """
        Analyzes the word list for game balancing.

        Returns:
            dict: total_words, fallback flag, letter_frequency and the five
            most common letters
        """
        letter_frequency: Dict[str, int] = {}
        for word in self._words:
            for char in word:
                letter_frequency[char] = letter_frequency.get(char, 0) + 1

        return {
            "total_words": len(self._words),
            "word_length": self.word_length,
            "is_fallback": self.is_fallback,
            "letter_frequency": letter_frequency,
            "most_common_letters": sorted(letter_frequency.items(), key=lambda x: x[1], reverse=True)[:5]
        }

"""
Guess Scorer

Implements the Wordle letter evaluation algorithm as a pure function.
"""

from typing import Dict, List, Optional, Tuple

from ..models.game import LetterStatus


def score(guess: str, solution: str) -> Tuple[LetterStatus, ...]:
    """
    Evaluates a guess against the solution letter by letter.

    Exact matches are resolved first so they never consume the budget of a
    repeated letter; the remaining positions are PRESENT only while unmatched
    copies of that letter are left in the solution, otherwise ABSENT.

    Args:
        guess: Normalized guessed word
        solution: Normalized target word of the same length

    Returns:
        Tuple of CORRECT / PRESENT / ABSENT statuses, one per letter

    Raises:
        ValueError: If the two words differ in length
    """
    if len(guess) != len(solution):
        raise ValueError(
            f"Guess length ({len(guess)}) does not match solution length ({len(solution)})"
        )

    result: List[Optional[LetterStatus]] = [None] * len(solution)
    frequency: Dict[str, int] = {}

    # First pass: exact position matches, count what is left of the solution
    for index, solution_char in enumerate(solution):
        if guess[index] == solution_char:
            result[index] = LetterStatus.CORRECT
        else:
            frequency[solution_char] = frequency.get(solution_char, 0) + 1

    # Second pass: misplaced letters consume the remaining budget
    for index, letter in enumerate(guess):
        if result[index] is not None:
            continue

        available = frequency.get(letter, 0)
        if available > 0:
            result[index] = LetterStatus.PRESENT
            frequency[letter] = available - 1
        else:
            result[index] = LetterStatus.ABSENT

    return tuple(result)  # type: ignore[arg-type]


def is_solved(outcome: Tuple[LetterStatus, ...]) -> bool:
    return all(status == LetterStatus.CORRECT for status in outcome)

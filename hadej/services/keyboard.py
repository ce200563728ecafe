"""
Keyboard Feedback

Aggregates per-guess outcomes into the best-known status of every letter.
A letter's status is only ever upgraded, in the order
CORRECT > ABSENT > PRESENT > unset.
"""

from typing import Dict, Iterable, Optional

from ..models.game import Guess, LetterStatus, SCORED_STATUSES

_STATUS_PRIORITY: Dict[LetterStatus, int] = {
    LetterStatus.CORRECT: 3,
    LetterStatus.ABSENT: 2,
    LetterStatus.PRESENT: 1,
}


def status_priority(status: Optional[LetterStatus]) -> int:
    """Rank of a status in the merge order; unset and display-only states rank 0."""
    if status is None:
        return 0
    return _STATUS_PRIORITY.get(status, 0)


def merge_letter_status(existing: Optional[LetterStatus], new: LetterStatus) -> Optional[LetterStatus]:
    """
    Merges a newly observed status into a letter's aggregate.

    Args:
        existing: Current aggregate for the letter, or None if never seen
        new: Status the letter received in the latest guess

    Returns:
        The status to keep; display-only states never replace anything
    """
    if new not in SCORED_STATUSES:
        return existing
    if existing is None or status_priority(new) >= status_priority(existing):
        return new
    return existing


def apply_guess(feedback: Dict[str, LetterStatus], guess: Guess) -> Dict[str, LetterStatus]:
    """Returns a new feedback mapping with one guess folded in."""
    merged = dict(feedback)
    for letter, status in guess.letters():
        result = merge_letter_status(merged.get(letter), status)
        if result is not None:
            merged[letter] = result
    return merged


def fold_keyboard(history: Iterable[Guess]) -> Dict[str, LetterStatus]:
    """Rebuilds keyboard feedback from a full guess history."""
    feedback: Dict[str, LetterStatus] = {}
    for guess in history:
        feedback = apply_guess(feedback, guess)
    return feedback

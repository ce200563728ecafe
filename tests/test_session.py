"""
Testing the game session state machine.
"""

import threading
import time

import pytest

from hadej.config.game_settings import MESSAGE_NOT_IN_VOCABULARY, MESSAGE_TOO_SHORT, MESSAGE_WON
from hadej.models.game import GameStatus, LetterStatus, Rejection
from hadej.services.session import GameSession

from .conftest import type_word

LOSING_GUESSES = ["ALLOY", "LEMON", "ONION", "GRAPE", "MANGO", "PEACH"]


def test_new_session_is_playing(session):
    assert session.status == GameStatus.PLAYING
    assert session.history == []
    assert session.pending == ""
    assert session.keyboard_feedback == {}
    assert session.remaining_guesses == 6
    assert not session.invalid


def test_random_solution_comes_from_vocabulary(vocabulary, scheduler):
    session = GameSession(vocabulary, scheduler=scheduler)
    assert session.solution in vocabulary
    assert len(session.solution) == 5


def test_solution_outside_vocabulary_is_rejected(vocabulary, scheduler):
    with pytest.raises(ValueError):
        GameSession(vocabulary, scheduler=scheduler, solution="ZEBRA")
    with pytest.raises(ValueError):
        GameSession(vocabulary, scheduler=scheduler, solution="APPLES")


def test_type_letter_normalizes_case(session):
    assert session.type_letter("a")
    assert session.type_letter("č")
    assert session.pending == "AČ"


def test_type_letter_rejects_non_letters(session):
    assert not session.type_letter("1")
    assert not session.type_letter("-")
    assert not session.type_letter("AB")
    assert not session.type_letter("ß")
    assert not session.type_letter("")
    assert session.pending == ""


def test_type_letter_stops_at_word_length(session):
    type_word(session, "APPLES")
    assert session.pending == "APPLE"
    assert not session.type_letter("S")


def test_delete_letter(session):
    assert not session.delete_letter()
    type_word(session, "AP")
    assert session.delete_letter()
    assert session.pending == "A"


def test_submit_too_short(session, scheduler):
    type_word(session, "APP")
    result = session.submit()

    assert not result.accepted
    assert result.rejection == Rejection.TOO_SHORT
    assert result.message == MESSAGE_TOO_SHORT
    assert session.invalid
    assert session.message == MESSAGE_TOO_SHORT
    assert session.pending == "APP"
    assert session.history == []
    assert session.status == GameStatus.PLAYING
    assert len(scheduler.active) == 1
    assert scheduler.active[0].delay == pytest.approx(0.7)


def test_submit_not_in_vocabulary_keeps_pending(session):
    type_word(session, "ZZZZZ")
    result = session.submit()

    assert not result.accepted
    assert result.rejection == Rejection.NOT_IN_VOCABULARY
    assert session.message == MESSAGE_NOT_IN_VOCABULARY
    assert session.pending == "ZZZZZ"
    assert session.history == []


def test_accepted_guess(session):
    type_word(session, "alloy")
    result = session.submit()

    assert result.accepted
    assert result.status == GameStatus.PLAYING
    assert result.guess.word == "ALLOY"
    assert result.guess.outcome == (
        LetterStatus.CORRECT, LetterStatus.PRESENT, LetterStatus.ABSENT,
        LetterStatus.ABSENT, LetterStatus.ABSENT,
    )
    assert session.history == [result.guess]
    assert session.pending == ""
    assert session.message == ""
    assert session.keyboard_feedback["A"] == LetterStatus.CORRECT
    assert session.remaining_guesses == 5


def test_win(session):
    type_word(session, "LEMON")
    session.submit()
    type_word(session, "APPLE")
    result = session.submit()

    assert result.accepted
    assert result.status == GameStatus.WON
    assert session.status == GameStatus.WON
    assert session.message == MESSAGE_WON
    assert len(session.history) == 2


def test_win_on_last_guess_is_not_a_loss(session):
    for word in LOSING_GUESSES[:5]:
        type_word(session, word)
        session.submit()
    type_word(session, "APPLE")

    assert session.submit().status == GameStatus.WON


def test_loss_reveals_solution(session):
    for word in LOSING_GUESSES:
        type_word(session, word)
        result = session.submit()

    assert result.status == GameStatus.LOST
    assert session.status == GameStatus.LOST
    assert "APPLE" in session.message
    assert session.remaining_guesses == 0


def test_terminal_state_freezes_input(session):
    type_word(session, "APPLE")
    session.submit()

    assert not session.type_letter("A")
    assert not session.delete_letter()
    result = session.submit()
    assert not result.accepted
    assert result.rejection is None
    assert len(session.history) == 1
    assert session.status == GameStatus.WON


def test_history_never_exceeds_max_guesses(session):
    for word in LOSING_GUESSES + ["BERRY", "CHILI"]:
        type_word(session, word)
        session.submit()
    assert len(session.history) == session.max_guesses
    assert session.status == GameStatus.LOST


def test_custom_max_guesses(make_session):
    session = make_session(max_guesses=2)
    for word in LOSING_GUESSES[:2]:
        type_word(session, word)
        session.submit()
    assert session.status == GameStatus.LOST


def test_reset_from_terminal_state(session):
    type_word(session, "APPLE")
    session.submit()
    session.reset(solution="LEMON")

    assert session.status == GameStatus.PLAYING
    assert session.solution == "LEMON"
    assert session.history == []
    assert session.keyboard_feedback == {}
    assert session.message == ""


def test_reset_while_playing_clears_invalid_flag(session, scheduler):
    type_word(session, "AP")
    session.submit()
    session.reset()

    assert session.pending == ""
    assert not session.invalid
    assert scheduler.active == []
    assert session.solution in session.vocabulary


def test_invalid_flag_expires_but_message_stays(session, scheduler):
    session.submit()
    scheduler.fire_all()

    assert not session.invalid
    assert session.message == MESSAGE_TOO_SHORT


def test_new_rejection_replaces_timer(session, scheduler):
    session.submit()
    first = scheduler.active[0]
    session.submit()

    assert first.cancelled
    assert len(scheduler.active) == 1
    assert session.invalid


def test_keystroke_clears_invalid_flag(session, scheduler):
    type_word(session, "AP")
    session.submit()
    session.type_letter("P")

    assert not session.invalid
    assert session.message == ""
    assert scheduler.active == []


def test_delete_clears_invalid_flag(session, scheduler):
    type_word(session, "AP")
    session.submit()
    session.delete_letter()

    assert not session.invalid
    assert scheduler.active == []


def test_cancelled_timer_cannot_clear_a_newer_flag(session, scheduler):
    session.submit()
    stale = scheduler.active[0]
    session.submit()

    # Firing the stale handle directly must not touch the current flag
    stale.cancelled = False
    stale.fire()
    assert session.invalid


def test_rejection_during_a_running_clear_keeps_the_new_flag(session, scheduler):
    entered = threading.Event()
    proceed = threading.Event()
    expire = session._expire_invalid

    def slow_expire():
        entered.set()
        proceed.wait(2)
        expire()

    session._expire_invalid = slow_expire
    session.submit()
    first = scheduler.active[0]

    clearing = threading.Thread(target=first.fire)
    clearing.start()
    assert entered.wait(2)

    # A second rejection arrives while the first clear is mid-flight
    rejecting = threading.Thread(target=session.submit)
    rejecting.start()
    time.sleep(0.05)
    proceed.set()
    clearing.join(2)
    rejecting.join(2)

    assert session.invalid
    assert len(scheduler.active) == 1


def test_close_cancels_timer(session, scheduler):
    session.submit()
    session.close()
    assert scheduler.active == []


def test_press_key_dispatch(session):
    for key in "APPL":
        assert session.press_key(key)
    assert session.press_key("BACK")
    assert session.pending == "APP"
    type_word(session, "LE")

    result = session.press_key("ENTER")
    assert result.accepted
    assert result.status == GameStatus.WON


def test_extended_letter_guess(make_session):
    session = make_session(solution="HLAVA")
    type_word(session, "kočka")
    result = session.submit()

    assert result.accepted
    assert result.guess.word == "KOČKA"
    assert session.keyboard_feedback["Č"] == LetterStatus.ABSENT

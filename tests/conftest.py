import os
import random
import tempfile

# Keep test runs from writing log files into the working tree
os.environ.setdefault('LOG_DIR', tempfile.mkdtemp(prefix='hadej-logs-'))

import pytest

from hadej import create_app
from hadej.config import TestingConfig
from hadej.services.game_service import get_game_service
from hadej.services.session import GameSession
from hadej.services.vocabulary import Vocabulary

TEST_WORDS = [
    "APPLE", "ALLOY", "LEMON", "ONION", "GRAPE", "MANGO", "PEACH",
    "BERRY", "CHILI", "OLIVE", "HELLO", "LLAMA", "kočka", "hlava",
]


class ManualTimer:
    def __init__(self, delay, callback):
        self.delay = delay
        self.callback = callback
        self.cancelled = False
        self.fired = False

    def cancel(self):
        self.cancelled = True

    def fire(self):
        if not self.cancelled and not self.fired:
            self.fired = True
            self.callback()


class ManualScheduler:
    """Records scheduled callbacks instead of running them on a thread."""

    def __init__(self):
        self.timers = []

    def __call__(self, delay, callback):
        timer = ManualTimer(delay, callback)
        self.timers.append(timer)
        return timer

    @property
    def active(self):
        return [timer for timer in self.timers if not timer.cancelled and not timer.fired]

    def fire_all(self):
        for timer in self.active:
            timer.fire()


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def vocabulary():
    return Vocabulary(TEST_WORDS, rng=random.Random(7))


@pytest.fixture
def make_session(vocabulary, scheduler):
    def factory(solution="APPLE", **kwargs):
        return GameSession(vocabulary, scheduler=scheduler, solution=solution, **kwargs)
    return factory


@pytest.fixture
def session(make_session):
    return make_session()


def type_word(session, word):
    for letter in word:
        session.type_letter(letter)


@pytest.fixture
def app(vocabulary, scheduler):
    app = create_app(TestingConfig, vocabulary=vocabulary, scheduler=scheduler)
    yield app
    get_game_service().close()


@pytest.fixture
def client(app):
    return app.test_client()

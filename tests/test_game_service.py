"""
Testing the session registry.
"""

import pytest

from hadej.services.game_service import GameService


class FakeClock:
    def __init__(self):
        self.now = 1000.0

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def service(vocabulary, scheduler, clock):
    service = GameService(vocabulary, scheduler=scheduler, idle_timeout_seconds=60, clock=clock)
    yield service
    service.close()


def test_idle_games_are_evicted_on_new_game(service, clock, scheduler):
    idle = service.create_new_game(solution="APPLE")
    service.submit_guess(idle)
    assert len(scheduler.active) == 1

    clock.now += 61
    fresh = service.create_new_game()

    assert service.get_session(idle) is None
    assert set(service.games) == {fresh}
    assert idle not in service.last_activity
    assert scheduler.active == []


def test_access_keeps_a_game_alive(service, clock):
    game_id = service.create_new_game()

    clock.now += 50
    assert service.get_game_state(game_id) is not None
    clock.now += 50
    service.create_new_game()

    assert service.get_session(game_id) is not None


def test_finished_games_survive_until_idle(service, clock):
    game_id = service.create_new_game(solution="APPLE")
    for letter in "APPLE":
        service.type_letter(game_id, letter)
    service.submit_guess(game_id)

    clock.now += 30
    service.create_new_game()
    assert service.reset_game(game_id)


def test_cleanup_returns_evicted_ids(service, clock):
    first = service.create_new_game()
    clock.now += 30
    second = service.create_new_game()
    clock.now += 31

    assert service.cleanup_idle_games() == [first]
    assert list(service.games) == [second]


def test_no_timeout_keeps_everything(vocabulary, scheduler, clock):
    service = GameService(vocabulary, scheduler=scheduler, idle_timeout_seconds=None, clock=clock)
    game_id = service.create_new_game()
    clock.now += 10 ** 6

    assert service.cleanup_idle_games() == []
    assert service.get_session(game_id) is not None
    service.close()


def test_delete_forgets_activity(service):
    game_id = service.create_new_game()
    assert service.delete_game(game_id)
    assert not service.delete_game(game_id)
    assert service.last_activity == {}

from unittest import mock

import pytest

from conserva.model import Model, PomodoroConfig, PomodoroState


class FakeClock:
    def __init__(self) -> None:
        self.ns = 10**15

    def __call__(self) -> int:
        return self.ns

    def advance_ms(self, ms: int) -> None:
        self.ns += ms * 1_000_000


@pytest.fixture
def clock():
    fake = FakeClock()
    with mock.patch("time.monotonic_ns", fake):
        yield fake


def test_initial_state(clock):
    model = Model(auto_reload=False)
    assert model.state is PomodoroState.STANDBY
    assert model.name == "pomodoro"
    assert model.config == PomodoroConfig()
    assert model.report is False
    assert model.auto_reload is False
    assert model.terminated is False
    assert model.stopwatch.is_paused()


def test_default_config_values():
    config = PomodoroConfig()
    assert config.work_seconds == 25 * 60
    assert config.relax_seconds == 5 * 60


def test_start_with_defaults(clock):
    model = Model(False)
    assert model.start_pomodoro() is True
    assert model.state is PomodoroState.WORKING
    assert model.stopwatch.is_running()
    assert model.stopwatch.remaining_milliseconds() == model.config.work_seconds * 1000


def test_start_twice_with_same_config_is_no_change(clock):
    model = Model(False)
    assert model.start_pomodoro()
    assert model.start_pomodoro() is False
    assert model.start_pomodoro(name="pomodoro") is False


def test_start_with_new_name_restarts(clock):
    model = Model(False)
    model.start_pomodoro()
    assert model.start_pomodoro(name="write") is True
    assert model.name == "write"


def test_work_time_sets_relax_to_a_fifth(clock):
    model = Model(False)
    model.start_pomodoro(work_seconds=600)
    assert model.config.work_seconds == 600
    assert model.config.relax_seconds == 120


def test_explicit_relax_time_kept(clock):
    model = Model(False)
    model.start_pomodoro(name="read", work_seconds=600, relax_seconds=45)
    assert model.config == PomodoroConfig("read", 600, 45)


def test_stop(clock):
    model = Model(False)
    assert model.stop() is False
    model.start_pomodoro()
    assert model.stop() is True
    assert model.state is PomodoroState.STANDBY
    assert model.stopwatch.is_paused()
    assert model.stop() is False


def test_manage_without_expiry_changes_nothing(clock):
    model = Model(False)
    assert model.manage() is False
    model.start_pomodoro(work_seconds=10, relax_seconds=4)
    clock.advance_ms(5000)
    assert model.manage() is False
    assert model.state is PomodoroState.WORKING


def test_work_then_relax_then_standby(clock):
    model = Model(False)
    model.start_pomodoro(work_seconds=10, relax_seconds=4)
    clock.advance_ms(10_001)
    assert model.manage() is True
    assert model.state is PomodoroState.RELAXING
    assert model.stopwatch.remaining_milliseconds() == 4000
    clock.advance_ms(4001)
    assert model.manage() is True
    assert model.state is PomodoroState.STANDBY
    assert model.stopwatch.is_paused()
    assert model.manage() is False


def test_auto_reload_returns_to_working(clock):
    model = Model(True)
    model.start_pomodoro(work_seconds=10, relax_seconds=4)
    clock.advance_ms(10_001)
    model.manage()
    clock.advance_ms(4001)
    assert model.manage() is True
    assert model.state is PomodoroState.WORKING
    assert model.stopwatch.is_running()
    assert model.stopwatch.remaining_milliseconds() == model.config.relax_seconds * 1000


def test_quit(clock):
    model = Model(False)
    model.quit()
    assert model.terminated is True
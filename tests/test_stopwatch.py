from unittest import mock

import pytest

from conserva.stopwatch import Stopwatch


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


def test_new_stopwatch_is_paused_with_full_period(clock):
    sw = Stopwatch(1000)
    assert sw.is_paused()
    assert not sw.is_running()
    assert sw.elapsed_milliseconds() == 0
    assert sw.remaining_milliseconds() == 1000


def test_paused_stopwatch_does_not_advance(clock):
    sw = Stopwatch(1000)
    clock.advance_ms(5000)
    assert sw.elapsed_milliseconds() == 0
    assert not sw.is_expired()


def test_running_stopwatch_tracks_elapsed(clock):
    sw = Stopwatch(1000)
    sw.resume()
    assert sw.is_running()
    clock.advance_ms(400)
    assert sw.elapsed_milliseconds() == 400
    assert sw.remaining_milliseconds() + sw.elapsed_milliseconds() == 1000


def test_expiry_is_strictly_after_period(clock):
    sw = Stopwatch(1000)
    sw.resume()
    clock.advance_ms(1000)
    assert not sw.is_expired()
    assert sw.remaining_milliseconds() == 0 or sw.remaining_milliseconds() == 1000 - sw.elapsed_milliseconds()
    clock.advance_ms(1)
    assert sw.is_expired()
    assert sw.remaining_milliseconds() == 0


def test_pause_freezes_elapsed(clock):
    sw = Stopwatch(1000)
    sw.resume()
    clock.advance_ms(300)
    sw.pause()
    assert sw.is_paused()
    frozen = sw.elapsed_milliseconds()
    assert frozen == 300
    clock.advance_ms(10_000)
    assert sw.elapsed_milliseconds() == frozen


def test_resume_after_pause_adds_new_run(clock):
    sw = Stopwatch(10_000)
    sw.resume()
    clock.advance_ms(300)
    sw.pause()
    sw.resume()
    clock.advance_ms(200)
    assert sw.elapsed_milliseconds() == 300 + 200


def test_zero_period_expires_after_any_time(clock):
    sw = Stopwatch(0)
    sw.resume()
    assert not sw.is_expired()
    clock.advance_ms(1)
    assert sw.is_expired()
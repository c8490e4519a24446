"""Pomodoro state machine."""

from __future__ import annotations

import dataclasses
import enum
from dataclasses import dataclass

from conserva.stopwatch import Stopwatch


class PomodoroState(enum.Enum):
    STANDBY = "standby"
    WORKING = "working"
    RELAXING = "relaxing"


@dataclass(frozen=True)
class PomodoroConfig:
    """Name and durations of a pomodoro."""

    name: str = "pomodoro"
    work_seconds: int = 25 * 60
    relax_seconds: int = 5 * 60


class Model:
    """Holds the current pomodoro, its timer and the server's flags."""

    def __init__(self, auto_reload: bool) -> None:
        self.report = False
        self.auto_reload = auto_reload
        self._state = PomodoroState.STANDBY
        self._config = PomodoroConfig()
        self._stopwatch = Stopwatch(0)
        self._terminated = False

    @property
    def state(self) -> PomodoroState:
        return self._state

    @property
    def name(self) -> str:
        return self._config.name

    @property
    def config(self) -> PomodoroConfig:
        return self._config

    @property
    def stopwatch(self) -> Stopwatch:
        return self._stopwatch

    @property
    def terminated(self) -> bool:
        return self._terminated

    def _start_timer(self, seconds: int) -> None:
        self._stopwatch = Stopwatch(seconds * 1000)
        self._stopwatch.resume()

    def start_pomodoro(
        self,
        name: str | None = None,
        work_seconds: int | None = None,
        relax_seconds: int | None = None,
    ) -> bool:
        """Start working; returns True if anything changed.

        Without an explicit relax time, a given work time sets the relax
        time to a fifth of it.
        """
        changes: dict[str, object] = {}
        if name is not None:
            changes["name"] = name
        if work_seconds is not None:
            changes["work_seconds"] = work_seconds
        if relax_seconds is not None:
            changes["relax_seconds"] = relax_seconds
        elif work_seconds is not None:
            changes["relax_seconds"] = work_seconds // 5
        config = dataclasses.replace(self._config, **changes)

        if self._state is PomodoroState.WORKING and self._config == config:
            return False

        self._state = PomodoroState.WORKING
        self._config = config
        self._start_timer(config.work_seconds)
        return True

    def stop(self) -> bool:
        """Go to standby; returns True if the state changed."""
        if self._state is PomodoroState.STANDBY:
            return False
        self._state = PomodoroState.STANDBY
        self._stopwatch.pause()
        return True

    def manage(self) -> bool:
        """Advance the state when the running timer expires; True on change."""
        if self._state is PomodoroState.STANDBY:
            return False
        if not (self._stopwatch.is_running() and self._stopwatch.is_expired()):
            return False

        if self._state is PomodoroState.WORKING:
            self._state = PomodoroState.RELAXING
            self._start_timer(self._config.relax_seconds)
        elif self.auto_reload:
            self._state = PomodoroState.WORKING
            self._start_timer(self._config.relax_seconds)
        else:
            self._state = PomodoroState.STANDBY
            self._stopwatch.pause()
        return True

    def quit(self) -> None:
        self._terminated = True
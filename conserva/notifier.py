"""Desktop-style notifications describing the pomodoro state."""

from __future__ import annotations

import sys
from typing import Callable

from conserva.commands import format_remaining
from conserva.model import Model, PomodoroState

NotificationSink = Callable[[str, str, int], None]

TITLE = "Conserva"
UPDATE_TIMEOUT_MS = 8000
REPORT_TIMEOUT_MS = 4000


def _stderr_sink(title: str, body: str, timeout_ms: int) -> None:
    print(f"{title}: {body}", file=sys.stderr)


def update_message(model: Model) -> str:
    """Text announcing the state the model has just entered."""
    state = model.state
    if state is PomodoroState.STANDBY:
        return f"Pomodoro {model.name} done!"
    if state is PomodoroState.RELAXING:
        return f"Work for {model.name} done, relax a bit."
    return f"Started work {model.name}."


def report_message(model: Model) -> str:
    """Text describing the current state and the time left in it."""
    state = model.state
    if state is PomodoroState.STANDBY:
        return f"Standing by. Worked last on {model.name}."
    remaining = format_remaining(model.stopwatch.remaining_milliseconds())
    if state is PomodoroState.RELAXING:
        return f"Relax after {model.name} for {remaining}."
    return f"Work on {model.name} for {remaining}."


class Notifier:
    """Shows notifications through a sink taking (title, body, timeout_ms)."""

    def __init__(self, sink: NotificationSink | None = None) -> None:
        self.sink: NotificationSink = sink if sink is not None else _stderr_sink

    def show_update(self, model: Model) -> None:
        self.sink(TITLE, update_message(model), UPDATE_TIMEOUT_MS)

    def show_report(self, model: Model) -> None:
        self.sink(TITLE, report_message(model), REPORT_TIMEOUT_MS)
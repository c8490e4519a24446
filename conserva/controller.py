"""Server loop glue and client-side helpers for talking to a server."""

from __future__ import annotations

from conserva import commands
from conserva.model import Model
from conserva.notifier import Notifier


class Controller:
    """Runs one server: receives commands, advances timers, notifies."""

    def __init__(self, auto_reload: bool) -> None:
        self.model = Model(auto_reload)
        self.notifier = Notifier()
        self.server = commands.Server()

    def __enter__(self) -> Controller:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def manage_server(self) -> None:
        """Run one iteration of the server loop."""
        update = self.server.receive(self.model)
        update |= self.model.manage()

        if self.model.report:
            self.notifier.show_report(self.model)
            self.model.report = False
        elif update:
            self.notifier.show_update(self.model)

    def should_quit(self) -> bool:
        return self.model.terminated

    def close(self) -> None:
        """Stop listening and remove the server socket."""
        self.server.close()


def send_start_message(
    name: str | None = None,
    work_seconds: int | None = None,
    relax_seconds: int | None = None,
) -> None:
    commands.send(commands.Start(name, work_seconds, relax_seconds))


def send_stop_message() -> None:
    commands.send(commands.Stop())


def send_config_message(auto_reload: bool) -> None:
    commands.send(commands.Config(auto_reload))


def send_report_message() -> str | None:
    """Ask a running server for its state; None if nobody answered."""
    return commands.send(commands.Report())
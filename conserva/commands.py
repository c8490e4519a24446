"""Commands exchanged between clients and the running server."""

from __future__ import annotations

import abc
import json
import os
from dataclasses import dataclass
from pathlib import Path

from conserva.app_config import SOCKET_DIRECTORY, parse_socket_pid, socket_path
from conserva.model import Model, PomodoroState
from conserva.socket_queue import SocketQueueReceiver, SocketQueueSender

_KEY_NAME = "name"
_KEY_WORK_SECONDS = "workSeconds"
_KEY_RELAX_SECONDS = "relaxSeconds"
_KEY_START = "start"
_KEY_STOP = "stop"
_KEY_REPORT = "report"
_KEY_CONFIG = "config"
_KEY_AUTO_RELOAD = "autoReload"

_RECEIVE_TIMEOUT_MS = 10
_RESPONSE_TIMEOUT_MS = 200


class _InvalidCommand(Exception):
    pass


def format_remaining(milliseconds: int) -> str:
    """Format a duration as zero-padded MM:SS, dropping partial seconds."""
    minutes, seconds = divmod(milliseconds // 1000, 60)
    return f"{minutes:02d}:{seconds:02d}"


def _dump(root: dict) -> str:
    return json.dumps(root, sort_keys=True)


class Command(abc.ABC):
    """A message a client sends to the server."""

    @abc.abstractmethod
    def to_json(self) -> str:
        """Serialise the command for the wire."""

    @abc.abstractmethod
    def visit(self, model: Model) -> tuple[bool, str | None]:
        """Apply the command; returns (model changed, response to send)."""

    def requires_response(self) -> bool:
        return False


@dataclass(frozen=True)
class Start(Command):
    name: str | None = None
    work_seconds: int | None = None
    relax_seconds: int | None = None

    def to_json(self) -> str:
        return _dump(
            {
                _KEY_START: {
                    _KEY_NAME: self.name,
                    _KEY_WORK_SECONDS: self.work_seconds,
                    _KEY_RELAX_SECONDS: self.relax_seconds,
                }
            }
        )

    def visit(self, model: Model) -> tuple[bool, str | None]:
        return model.start_pomodoro(self.name, self.work_seconds, self.relax_seconds), None


@dataclass(frozen=True)
class Stop(Command):
    def to_json(self) -> str:
        return _dump({_KEY_STOP: {}})

    def visit(self, model: Model) -> tuple[bool, str | None]:
        return model.stop(), None


@dataclass(frozen=True)
class Report(Command):
    def to_json(self) -> str:
        return _dump({_KEY_REPORT: {}})

    def visit(self, model: Model) -> tuple[bool, str | None]:
        model.report = True
        state = model.state
        if state is PomodoroState.STANDBY:
            return False, "standby"
        label = "relax" if state is PomodoroState.RELAXING else "work"
        remaining = format_remaining(model.stopwatch.remaining_milliseconds())
        return False, f"{label},{model.name},{remaining}"

    def requires_response(self) -> bool:
        return True


@dataclass(frozen=True)
class Config(Command):
    auto_reload: bool

    def to_json(self) -> str:
        return _dump({_KEY_CONFIG: {_KEY_AUTO_RELOAD: self.auto_reload}})

    def visit(self, model: Model) -> tuple[bool, str | None]:
        if model.auto_reload == self.auto_reload:
            return False, None
        model.auto_reload = self.auto_reload
        return True, None


def _as_name(value: object) -> str | None:
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    raise _InvalidCommand(f"invalid name: {value!r}")


def _as_seconds(value: object) -> int | None:
    if value is None:
        return None
    if isinstance(value, (bool, int, float)):
        seconds = int(value)
        if seconds < 0:
            raise _InvalidCommand(f"negative duration: {value!r}")
        return seconds
    raise _InvalidCommand(f"invalid duration: {value!r}")


def _parse(root: object) -> Command | None:
    if not isinstance(root, dict):
        return None

    start = root.get(_KEY_START)
    if isinstance(start, dict):
        return Start(
            _as_name(start.get(_KEY_NAME)),
            _as_seconds(start.get(_KEY_WORK_SECONDS)),
            _as_seconds(start.get(_KEY_RELAX_SECONDS)),
        )
    if isinstance(root.get(_KEY_STOP), dict):
        return Stop()
    config = root.get(_KEY_CONFIG)
    if isinstance(config, dict):
        auto_reload = config.get(_KEY_AUTO_RELOAD)
        return Config(auto_reload) if isinstance(auto_reload, bool) else None
    if isinstance(root.get(_KEY_REPORT), dict):
        return Report()
    return None


def from_json(json_string: str) -> Command | None:
    """Decode a command; None if the text is not a valid command."""
    try:
        return _parse(json.loads(json_string))
    except (ValueError, _InvalidCommand):
        return None


def remove_socket() -> None:
    """Remove this process's server socket file, if present."""
    Path(socket_path(os.getpid())).unlink(missing_ok=True)


class Server:
    """Listens for commands and applies them to a model."""

    def __init__(self, path: str | os.PathLike[str] | None = None) -> None:
        if path is None:
            path = socket_path(os.getpid())
        self._receiver = SocketQueueReceiver(path)

    def receive(self, model: Model) -> bool:
        """Apply at most one pending command; True if the model changed."""
        message = self._receiver.receive(_RECEIVE_TIMEOUT_MS)
        if message is None:
            return False
        command = from_json(message)
        if command is None:
            return False
        changed, response = command.visit(model)
        if response is not None:
            self._receiver.respond(response)
        return changed

    def close(self) -> None:
        self._receiver.close()


def send(command: Command, directory: str | os.PathLike[str] = SOCKET_DIRECTORY) -> str | None:
    """Send a command to every server socket found in directory.

    For a command that requires a response, the first server's answer is
    returned (or None if it did not answer in time).
    """
    with os.scandir(directory) as entries:
        candidates = sorted(
            (entry for entry in entries if parse_socket_pid(entry.name) is not None),
            key=lambda entry: entry.name,
        )
    for entry in candidates:
        with SocketQueueSender(entry.path) as sender:
            sender.send(command.to_json())
            if command.requires_response():
                return sender.receive_response(_RESPONSE_TIMEOUT_MS)
    return None
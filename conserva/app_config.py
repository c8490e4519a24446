"""Names and paths of the server's control socket."""

from __future__ import annotations

import re

PROJECT_NAME = "conserva"
VERSION_MAJOR = 1
VERSION_MINOR = 0

SOCKET_DIRECTORY = "/tmp"

_SOCKET_PREFIX = f"{PROJECT_NAME}_"
_SOCKET_PID = re.compile(re.escape(_SOCKET_PREFIX) + r"([+-]?\d+)")


def socket_name(pid: int) -> str:
    """File name of the control socket for the server with this pid."""
    return f"{PROJECT_NAME}_{pid}_v{VERSION_MAJOR}.{VERSION_MINOR}.sock"


def socket_path(pid: int) -> str:
    """Full path of the control socket for the server with this pid."""
    return f"{SOCKET_DIRECTORY}/{socket_name(pid)}"


def parse_socket_pid(filename: str) -> int | None:
    """Return the pid a socket file name was made for, or None.

    Only the project prefix and the pid that follows it are checked.
    """
    match = _SOCKET_PID.match(filename)
    if match is None:
        return None
    return int(match.group(1))
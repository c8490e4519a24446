"""Datagram message queue over Unix domain sockets."""

from __future__ import annotations

import logging
import os
import select
import socket
from pathlib import Path

_log = logging.getLogger(__name__)

_MAX_DATAGRAM = 65536


def _receive_with_timeout(sock: socket.socket, timeout_ms: int) -> tuple[str, object] | None:
    readable, _, _ = select.select([sock], [], [], timeout_ms / 1000)
    if not readable:
        return None
    data, address = sock.recvfrom(_MAX_DATAGRAM)
    if not data:
        return None
    return data.decode("utf-8", errors="replace"), address


class SocketQueueReceiver:
    """Receives datagrams on a socket file and answers their senders."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)
        self._peer: object | None = None
        self._socket = socket.socket(socket.AF_UNIX, socket.SOCK_DGRAM)
        try:
            self.path.unlink(missing_ok=True)
            self._socket.bind(str(self.path))
        except OSError:
            self._socket.close()
            raise

    def __enter__(self) -> SocketQueueReceiver:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def receive(self, timeout_ms: int) -> str | None:
        """Wait up to timeout_ms for a message; None if none arrived."""
        result = _receive_with_timeout(self._socket, timeout_ms)
        if result is None:
            return None
        message, self._peer = result
        return message

    def respond(self, message: str) -> None:
        """Send a message back to the sender of the last received message."""
        if self._peer is None:
            _log.warning("No peer to respond to")
            return
        data = message.encode("utf-8")
        try:
            sent = self._socket.sendto(data, self._peer)
        except OSError as exc:
            _log.warning("Message send failed: %s", exc)
            return
        if sent != len(data):
            _log.warning("Message send failed: %d of %d bytes sent", sent, len(data))

    def close(self) -> None:
        """Close the socket and remove its file."""
        self._socket.close()
        self.path.unlink(missing_ok=True)


class SocketQueueSender:
    """Sends datagrams to a receiver's socket file and reads its answers."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)
        self._socket = socket.socket(socket.AF_UNIX, socket.SOCK_DGRAM)
        # Abstract address, so the receiver has somewhere to answer.
        client_name = f"conserva_client_socket_{os.getpid()}.sock"
        try:
            self._socket.bind(b"\0" + client_name.encode("ascii"))
        except OSError:
            self._socket.close()
            raise

    def __enter__(self) -> SocketQueueSender:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def send(self, message: str) -> None:
        """Send one message; failures are logged, not raised."""
        data = message.encode("utf-8")
        try:
            sent = self._socket.sendto(data, str(self.path))
        except OSError as exc:
            _log.warning("Message send failed: %s", exc)
            return
        if sent != len(data):
            _log.warning("Message send failed: %d of %d bytes sent", sent, len(data))

    def receive_response(self, timeout_ms: int) -> str | None:
        """Wait up to timeout_ms for an answer; None if none arrived."""
        result = _receive_with_timeout(self._socket, timeout_ms)
        if result is None:
            return None
        return result[0]

    def close(self) -> None:
        self._socket.close()
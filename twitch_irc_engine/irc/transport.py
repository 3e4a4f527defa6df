"""Byte stream abstraction used by the session connector."""

from __future__ import annotations

import socket
from typing import Protocol


class Transport(Protocol):
    """Bidirectional blocking byte stream.

    ``read`` returns ``b""`` once the peer closed the stream and raises
    ``TimeoutError`` when a configured read timeout elapses.
    """

    def read(self, size: int) -> bytes:
        ...

    def write_all(self, data: bytes) -> None:
        ...

    def close(self) -> None:
        ...


class SocketTransport:
    """Transport backed by a connected TCP socket."""

    def __init__(self, sock: socket.socket) -> None:
        self.sock = sock

    def read(self, size: int) -> bytes:
        return self.sock.recv(size)

    def write_all(self, data: bytes) -> None:
        # sendall either writes everything or raises
        self.sock.sendall(data)

    def close(self) -> None:
        try:
            self.sock.shutdown(socket.SHUT_RDWR)
        except OSError:
            pass  # already disconnected
        self.sock.close()


def open_socket_transport(
    host: str,
    port: int,
    connect_timeout: float,
    read_timeout: float | None = None,
) -> SocketTransport:
    """Connect to ``host:port`` and wrap the socket.

    ``read_timeout`` of ``None`` or ``0`` leaves reads fully blocking.
    """
    sock = socket.create_connection((host, port), timeout=connect_timeout)
    sock.settimeout(read_timeout or None)
    return SocketTransport(sock)

"""Centralized internal error hierarchy.

These exceptions give semantic categories to failures of the IRC session.
Raw ``OSError`` instances raised by the transport never reach callers of the
connector; they are wrapped through :func:`classify_os_error` instead.

Classes:
  InternalError          – Base for all internal errors.
  IrcError               – Connection, handshake and write failures.
    ConnectTimeoutError  – The peer did not answer in time.
    HostError            – Reset / refused / unknown host / broken pipe.
    MaxAttemptsError     – Retry budget exhausted during connect.
    PermissionDeniedError – Denied at the OS / network layer.
    AbortedError         – Connection aborted by the peer.
    UnknownIrcError      – Unclassified I/O failure.
    NotReadyError        – Command issued outside the READY state.
  ParsingError           – Per-buffer parse failures (never leave the read loop).
    NoVerbError          – No verb token found in the line.
    DecodeError          – Buffer is not valid UTF-8.
  ConfigError            – Session configuration could not be loaded.
"""

from __future__ import annotations

import socket
from collections.abc import Mapping


class InternalError(Exception):
    """Base class for all internal errors with metadata support.

    Attributes:
        data: Dictionary containing arbitrary structured context data.

    Args:
        message: Descriptive error message.
        data: Optional mapping of additional context data.
    """

    data: dict[str, object]

    def __init__(
        self, message: str, *, data: Mapping[str, object] | None = None
    ) -> None:
        super().__init__(message)
        # Copy into a plain dict to avoid unexpected mutations from caller.
        self.data = dict(data) if data else {}


class IrcError(InternalError):
    """Base for failures surfaced by the session connector."""


class ConnectTimeoutError(IrcError):
    def __init__(self, message: str = "connection timed out", **kwargs) -> None:
        super().__init__(message, **kwargs)


class HostError(IrcError):
    """The remote host reset, refused or could not be resolved.

    Args:
        reason: Human-readable cause, e.g. ``"connection refused by host"``.
    """

    def __init__(
        self, reason: str, *, data: Mapping[str, object] | None = None
    ) -> None:
        super().__init__(f"host error: {reason}", data=data)
        self.reason = reason


class MaxAttemptsError(IrcError):
    """Raised when every connection attempt failed.

    Args:
        attempts: Number of attempts that were made.
    """

    def __init__(self, attempts: int) -> None:
        super().__init__(
            f"connection failed after {attempts} attempts",
            data={"attempts": attempts},
        )
        self.attempts = attempts


class PermissionDeniedError(IrcError):
    def __init__(self, message: str = "permission denied", **kwargs) -> None:
        super().__init__(message, **kwargs)


class AbortedError(IrcError):
    def __init__(self, message: str = "connection aborted", **kwargs) -> None:
        super().__init__(message, **kwargs)


class UnknownIrcError(IrcError):
    def __init__(self, message: str = "unknown I/O error", **kwargs) -> None:
        super().__init__(message, **kwargs)


class NotReadyError(IrcError):
    """Raised when a command is sent on a connector that is not READY."""


class ParsingError(InternalError):
    """Base for failures to turn a raw buffer into an event."""


class NoVerbError(ParsingError):
    def __init__(self, message: str = "no verb token in line", **kwargs) -> None:
        super().__init__(message, **kwargs)


class DecodeError(ParsingError):
    def __init__(self, message: str = "buffer is not valid UTF-8", **kwargs) -> None:
        super().__init__(message, **kwargs)


class ConfigError(InternalError):
    """Raised when the session configuration is missing or invalid."""


# Ordered: subclasses must be checked before their bases.
_HOST_REASONS: tuple[tuple[type[BaseException], str], ...] = (
    (ConnectionResetError, "connection reset by peer"),
    (ConnectionRefusedError, "connection refused by host"),
    (BrokenPipeError, "broken pipe"),
    (socket.gaierror, "unknown host"),
    (FileNotFoundError, "unknown host"),
)


def classify_os_error(error: BaseException) -> IrcError:
    """Map a transport exception onto the IRC error taxonomy.

    Already-classified errors are returned unchanged so the function can be
    applied at several layers without double wrapping.
    """
    if isinstance(error, IrcError):
        return error
    data = {"cause": repr(error)}
    for exc_type, reason in _HOST_REASONS:
        if isinstance(error, exc_type):
            return HostError(reason, data=data)
    if isinstance(error, ConnectionAbortedError):
        return AbortedError(data=data)
    if isinstance(error, PermissionError):
        return PermissionDeniedError(data=data)
    if isinstance(error, TimeoutError):
        return ConnectTimeoutError(data=data)
    return UnknownIrcError(f"unknown I/O error: {error}", data=data)


__all__ = [
    "InternalError",
    "IrcError",
    "ConnectTimeoutError",
    "HostError",
    "MaxAttemptsError",
    "PermissionDeniedError",
    "AbortedError",
    "UnknownIrcError",
    "NotReadyError",
    "ParsingError",
    "NoVerbError",
    "DecodeError",
    "ConfigError",
    "classify_os_error",
]

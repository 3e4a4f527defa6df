"""Error taxonomy for the IRC engine."""

from .internal import (  # noqa: F401
    AbortedError,
    ConfigError,
    ConnectTimeoutError,
    DecodeError,
    HostError,
    InternalError,
    IrcError,
    MaxAttemptsError,
    NotReadyError,
    NoVerbError,
    ParsingError,
    PermissionDeniedError,
    UnknownIrcError,
    classify_os_error,
)

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

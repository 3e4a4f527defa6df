"""Client-side protocol engine for Twitch chat over IRC."""

from .config import SessionConfig, load_session_config  # noqa: F401
from .errors import IrcError, MaxAttemptsError, NotReadyError  # noqa: F401
from .irc import Command, Event, EventKind, SessionConnector  # noqa: F401

__version__ = "0.1.0"

__all__ = [
    "Command",
    "Event",
    "EventKind",
    "IrcError",
    "MaxAttemptsError",
    "NotReadyError",
    "SessionConfig",
    "SessionConnector",
    "load_session_config",
]

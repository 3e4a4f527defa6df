"""IRC subsystem package.

Contains command encoding, verb classification, line parsing, the transport
abstraction and the session connector for Twitch IRC.
"""

from .classifier import classify, extraction_pattern  # noqa: F401
from .commands import CAPABILITIES, Command, build, handshake_lines  # noqa: F401
from .connection import SessionConnector  # noqa: F401
from .models import ConnectionState, Event, EventKind  # noqa: F401
from .parser import LineBuffer, parse, parse_line  # noqa: F401
from .transport import SocketTransport, Transport, open_socket_transport  # noqa: F401

__all__ = [
    "CAPABILITIES",
    "Command",
    "ConnectionState",
    "Event",
    "EventKind",
    "LineBuffer",
    "SessionConnector",
    "SocketTransport",
    "Transport",
    "build",
    "classify",
    "extraction_pattern",
    "handshake_lines",
    "open_socket_transport",
    "parse",
    "parse_line",
]

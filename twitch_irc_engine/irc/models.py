"""Shared IRC data models (packaged)."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum, auto
from types import MappingProxyType


class ConnectionState(Enum):
    DISCONNECTED = auto()
    CONNECTING = auto()
    AUTHENTICATING = auto()
    READY = auto()
    CLOSED = auto()


class EventKind(Enum):
    MESSAGE = auto()
    JOIN = auto()
    PART = auto()
    USERNOTICE = auto()
    CLEARCHAT = auto()
    PONG = auto()
    PING = auto()
    USERSTATE = auto()
    NOTICE = auto()
    UNKNOWN = auto()


@dataclass(frozen=True, slots=True)
class Event:
    """A single parsed chat line.

    ``actor_nickname`` is the user the event is about, not the bot itself.
    ``tags`` is ``None`` when the line carried no ``@`` prefix and a read-only
    mapping otherwise. ``channel`` is empty when the line names no channel.
    """

    kind: EventKind
    actor_nickname: str | None
    tags: Mapping[str, str] | None
    channel: str
    message: str | None
    raw: str = ""

    def __post_init__(self) -> None:
        if self.tags is not None and not isinstance(self.tags, MappingProxyType):
            object.__setattr__(self, "tags", MappingProxyType(dict(self.tags)))

"""Outgoing command encoding."""

from __future__ import annotations

from enum import Enum

from ..config import SessionConfig
from ..constants import IRC_LINE_TERMINATOR, IRC_SERVER_NAME

CAPABILITIES = (
    "twitch.tv/commands",
    "twitch.tv/membership",
    "twitch.tv/tags",
)


class Command(Enum):
    PASS = "PASS"
    NICK = "NICK"
    JOIN = "JOIN"
    PONG = "PONG"
    PING = "PING"
    PRIVMSG = "PRIVMSG"

    def build(self, argument: str, config: SessionConfig) -> str:
        return build(self, argument, config)


def build(command: Command, argument: str, config: SessionConfig) -> str:
    """Encode ``command`` into a CRLF-terminated wire line.

    The argument is not validated; callers must not pass embedded line breaks.
    """
    if command is Command.PASS:
        line = f"PASS oauth:{argument}"
    elif command is Command.NICK:
        line = f"NICK {argument}"
    elif command is Command.JOIN:
        line = f"JOIN #{argument}"
    elif command is Command.PONG:
        line = f"PONG :{IRC_SERVER_NAME}"
    elif command is Command.PING:
        line = f"PING{argument}"
    else:
        line = f"PRIVMSG #{config.channel} :{argument}"
    return line + IRC_LINE_TERMINATOR


def capability_request(capability: str) -> str:
    return f"CAP REQ :{capability}{IRC_LINE_TERMINATOR}"


def handshake_lines(config: SessionConfig) -> list[str]:
    """Authentication and capability lines, in the order the server expects."""
    return [
        build(Command.PASS, config.token, config),
        build(Command.NICK, config.nickname, config),
        build(Command.JOIN, config.channel, config),
        *(capability_request(cap) for cap in CAPABILITIES),
    ]

"""Verb classification and per-kind nickname extraction rules."""

from __future__ import annotations

import re

from .models import EventKind

_VERB_KINDS: dict[str, EventKind] = {
    "PRIVMSG": EventKind.MESSAGE,
    "JOIN": EventKind.JOIN,
    "PART": EventKind.PART,
    "USERNOTICE": EventKind.USERNOTICE,
    "CLEARCHAT": EventKind.CLEARCHAT,
    "PING": EventKind.PING,
    "PONG": EventKind.PONG,
    "NOTICE": EventKind.NOTICE,
}

# nick!user@host prefix
_PREFIX_NICK = re.compile(r"(?<=:)(\w+)(?=!)")
# display-name tag value
_DISPLAY_NAME = re.compile(r"(?<=display-name=)(\w+)")
# trailing target of CLEARCHAT, last thing on the line
_TRAILING_WORD = re.compile(r"(?<=:)(\w+)$")

_EXTRACTION_PATTERNS: dict[EventKind, re.Pattern[str] | None] = {
    EventKind.MESSAGE: _PREFIX_NICK,
    EventKind.JOIN: _PREFIX_NICK,
    EventKind.PART: _PREFIX_NICK,
    EventKind.USERNOTICE: _DISPLAY_NAME,
    EventKind.USERSTATE: _DISPLAY_NAME,
    EventKind.CLEARCHAT: _TRAILING_WORD,
    EventKind.PONG: None,
    EventKind.PING: None,
    EventKind.NOTICE: None,
    EventKind.UNKNOWN: None,
}


def classify(verb: str) -> EventKind:
    """Map a verb token to its EventKind; unrecognised verbs are UNKNOWN."""
    return _VERB_KINDS.get(verb, EventKind.UNKNOWN)


def extraction_pattern(kind: EventKind) -> re.Pattern[str] | None:
    return _EXTRACTION_PATTERNS[kind]


def extract_nickname(kind: EventKind, line: str) -> str | None:
    pattern = extraction_pattern(kind)
    if pattern is None:
        return None
    match = pattern.search(line)
    return match.group(1) if match else None

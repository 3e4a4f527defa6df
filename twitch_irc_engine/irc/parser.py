"""IRC line parsing utilities (packaged).

Turns a raw buffer received from Twitch into an :class:`Event`. Parsing is
tolerant: anything that does not look like a protocol line raises a
:class:`ParsingError` subclass which the read loop treats as "no event".
"""

from __future__ import annotations

import logging
import re

from ..constants import IRC_MAX_LINE_LENGTH
from ..errors import DecodeError, NoVerbError
from ..logs import logger
from .classifier import classify, extract_nickname
from .models import Event

LINE_SEPARATOR = b"\r\n"

# IRC separates tokens with ASCII spaces only; other whitespace is message text.
_SPACES = re.compile(" +")

# IRCv3 tag value escapes
_TAG_ESCAPES = {":": ";", "s": " ", "\\": "\\", "r": "\r", "n": "\n"}


def decode(raw: bytes | str) -> str:
    if isinstance(raw, str):
        return raw
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise DecodeError(data={"length": len(raw)}) from e


def parse(raw: bytes | str) -> Event:
    """Parse the first recognisable line of ``raw`` into an Event.

    Raises:
        DecodeError: ``raw`` is bytes that are not valid UTF-8.
        NoVerbError: No line of ``raw`` contains a verb token.
    """
    text = decode(raw).replace("\x00", "")
    for line in text.split("\n"):
        line = line.rstrip("\r").strip(" \t")
        if not line:
            continue
        try:
            return parse_line(line)
        except NoVerbError:
            continue
    raise NoVerbError()


def parse_line(line: str) -> Event:
    """Parse a single line that has no line terminator."""
    tokens = [token for token in line.split(" ") if token]
    index = 0
    tags = None
    if tokens and tokens[0].startswith("@"):
        tags = _parse_tags(tokens[0][1:])
        index += 1
    if index < len(tokens) and tokens[index].startswith(":"):
        index += 1
    if index >= len(tokens):
        raise NoVerbError(data={"line": line[:100]})

    parts = _SPACES.split(line.lstrip(" "), maxsplit=index + 1)
    verb = parts[index]
    remainder = parts[index + 1] if len(parts) > index + 1 else ""
    kind = classify(verb)
    channel, message = _split_params(remainder)

    return Event(
        kind=kind,
        actor_nickname=extract_nickname(kind, line),
        tags=tags,
        channel=channel,
        message=message,
        raw=line,
    )


def _split_params(remainder: str) -> tuple[str, str | None]:
    """Return ``(channel, trailing)`` from the text following the verb."""
    if remainder.startswith(":"):
        return "", remainder[1:]
    if " :" in remainder:
        params, trailing = remainder.split(" :", 1)
    else:
        params, trailing = remainder, None
    channel = ""
    for token in params.split(" "):
        if token.startswith("#"):
            channel = token[1:]
            break
    return channel, trailing


def _parse_tags(raw_tags: str) -> dict[str, str]:
    tags: dict[str, str] = {}
    for tag in raw_tags.split(";"):
        if not tag:
            continue
        if "=" in tag:
            k, v = tag.split("=", 1)
        else:
            k, v = tag, ""
        tags[k] = _unescape_tag_value(v)
    return tags


def _unescape_tag_value(value: str) -> str:
    if "\\" not in value:
        return value
    out: list[str] = []
    chars = iter(value)
    for ch in chars:
        if ch != "\\":
            out.append(ch)
            continue
        nxt = next(chars, "")
        # Unknown escapes drop the backslash; a trailing one is dropped too.
        out.append(_TAG_ESCAPES.get(nxt, nxt))
    return "".join(out)


class LineBuffer:
    """Accumulate stream reads and hand back complete CRLF-terminated lines.

    Works on bytes so a multi-byte character split across two reads is only
    decoded once the whole line has arrived. A line longer than
    ``max_line_length`` is dropped, so a peer that never sends CRLF cannot
    grow the buffer without bound.
    """

    def __init__(self, max_line_length: int = IRC_MAX_LINE_LENGTH) -> None:
        self.max_line_length = max_line_length
        self._pending = bytearray()
        self._discarding = False

    def feed(self, data: bytes) -> list[bytes]:
        self._pending.extend(data)
        *lines, rest = self._pending.split(LINE_SEPARATOR)
        if self._discarding and lines:
            # Tail of an oversized line whose head was already dropped.
            lines.pop(0)
            self._discarding = False
        if len(rest) > self.max_line_length:
            if not self._discarding:
                logger.log_event(
                    "irc",
                    "line_overflow",
                    level=logging.DEBUG,
                    limit=self.max_line_length,
                )
            self._discarding = True
            # Last byte may be the CR of a terminator split across reads.
            rest = rest[-1:]
        self._pending = bytearray(rest)
        return [
            bytes(line)
            for line in lines
            if line.strip(b" \x00") and len(line) <= self.max_line_length
        ]

    @property
    def pending(self) -> bytes:
        return bytes(self._pending)

    def clear(self) -> None:
        self._pending.clear()
        self._discarding = False

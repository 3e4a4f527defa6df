"""Session establishment, command sending and the event read loop."""

from __future__ import annotations

import functools
import logging
import threading
import time
from collections import deque
from collections.abc import Callable, Iterator

from tenacity import (
    RetryCallState,
    RetryError,
    Retrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from ..config import SessionConfig
from ..constants import (
    IRC_BACKOFF_BASE,
    IRC_CONNECT_MAX_ATTEMPTS,
    IRC_CONNECT_TIMEOUT,
    IRC_READ_BUFFER_SIZE,
    IRC_READ_TIMEOUT,
)
from ..errors import (
    IrcError,
    MaxAttemptsError,
    NotReadyError,
    ParsingError,
    classify_os_error,
)
from ..logs import logger
from .commands import Command, handshake_lines
from .models import ConnectionState, Event, EventKind
from .parser import LineBuffer, parse
from .transport import Transport, open_socket_transport

Opener = Callable[[str, int], Transport]

default_opener: Opener = functools.partial(
    open_socket_transport,
    connect_timeout=IRC_CONNECT_TIMEOUT,
    read_timeout=IRC_READ_TIMEOUT,
)


class SessionConnector:
    """One authenticated chat session over a single byte stream.

    Obtain instances through :meth:`connect`. The connector is not thread
    safe; only :meth:`close` may be called from another thread to stop a
    blocking read loop.
    """

    def __init__(
        self,
        config: SessionConfig,
        transport: Transport | None = None,
        *,
        buffer_size: int = IRC_READ_BUFFER_SIZE,
    ) -> None:
        self.config = config
        self.transport = transport
        self.buffer_size = buffer_size
        self.state = ConnectionState.DISCONNECTED
        self._lines = LineBuffer()
        self._pending: deque[Event] = deque()
        self._shutdown = threading.Event()

    @classmethod
    def connect(
        cls,
        config: SessionConfig,
        *,
        opener: Opener = default_opener,
        sleep: Callable[[float], None] = time.sleep,
        max_attempts: int = IRC_CONNECT_MAX_ATTEMPTS,
        buffer_size: int = IRC_READ_BUFFER_SIZE,
    ) -> SessionConnector:
        """Open the stream (retrying with backoff) and run the handshake.

        Raises:
            MaxAttemptsError: every attempt to open the stream failed.
            IrcError: the handshake could not be written; not retried.
        """
        connector = cls(config, buffer_size=buffer_size)
        connector.state = ConnectionState.CONNECTING
        try:
            transport = connector._open(opener, sleep, max_attempts)
        except MaxAttemptsError:
            connector.state = ConnectionState.CLOSED
            raise
        connector.transport = transport
        connector._handshake()
        return connector

    def _open(
        self,
        opener: Opener,
        sleep: Callable[[float], None],
        max_attempts: int,
    ) -> Transport:
        host, port = self.config.host, self.config.port

        def before(retry_state: RetryCallState) -> None:
            logger.log_event(
                "irc",
                "connect_attempt",
                user=self.config.nickname,
                attempt=retry_state.attempt_number,
                max_attempts=max_attempts,
                host=host,
                port=port,
            )

        def before_sleep(retry_state: RetryCallState) -> None:
            error = retry_state.outcome.exception() if retry_state.outcome else None
            delay = retry_state.next_action.sleep if retry_state.next_action else 0
            logger.log_event(
                "irc",
                "connect_retry",
                level=logging.WARNING,
                user=self.config.nickname,
                attempt=retry_state.attempt_number,
                delay=delay,
                error=classify_os_error(error) if error else None,
            )

        # Delay before retry n is IRC_BACKOFF_BASE ** (n - 1) seconds.
        retrying = Retrying(
            stop=stop_after_attempt(max_attempts),
            wait=wait_exponential(multiplier=1, exp_base=IRC_BACKOFF_BASE),
            retry=retry_if_exception_type(OSError),
            sleep=sleep,
            before=before,
            before_sleep=before_sleep,
        )
        try:
            transport = retrying(opener, host, port)
        except RetryError as e:
            last_error = e.last_attempt.exception()
            logger.log_event(
                "irc",
                "connect_failed",
                level=logging.ERROR,
                user=self.config.nickname,
                attempts=max_attempts,
                error=last_error,
            )
            raise MaxAttemptsError(max_attempts) from last_error
        logger.log_event(
            "irc", "connected", user=self.config.nickname, host=host, port=port
        )
        return transport

    def _handshake(self) -> None:
        self.state = ConnectionState.AUTHENTICATING
        lines = handshake_lines(self.config)
        try:
            self._write_raw("".join(lines))
        except IrcError as e:
            logger.log_event(
                "irc",
                "handshake_failed",
                level=logging.ERROR,
                user=self.config.nickname,
                error=e,
            )
            self._drop_transport()
            raise
        logger.log_event(
            "irc",
            "handshake_sent",
            level=logging.DEBUG,
            user=self.config.nickname,
            lines=len(lines),
        )
        self.state = ConnectionState.READY
        logger.log_event(
            "irc", "ready", user=self.config.nickname, channel=self.config.channel
        )

    @property
    def is_ready(self) -> bool:
        return self.state is ConnectionState.READY and self.transport is not None

    def send_command(self, command: Command, argument: str = "") -> None:
        """Encode and write one command.

        Raises:
            NotReadyError: the session is not READY.
            IrcError: the write failed; the caller decides whether to reconnect.
        """
        if not self.is_ready:
            raise NotReadyError(
                f"cannot send {command.value} while {self.state.name.lower()}"
            )
        try:
            self._write_raw(command.build(argument, self.config))
        except IrcError as e:
            logger.log_event(
                "irc",
                "command_failed",
                level=logging.ERROR,
                user=self.config.nickname,
                channel=self.config.channel,
                command=command.value,
                error=e,
            )
            raise
        logger.log_event(
            "irc",
            "command_sent",
            level=logging.DEBUG,
            user=self.config.nickname,
            channel=self.config.channel,
            command=command.value,
        )

    def _write_raw(self, text: str) -> None:
        transport = self.transport
        if transport is None:
            raise NotReadyError("no open stream")
        try:
            transport.write_all(text.encode("utf-8"))
        except OSError as e:
            raise classify_os_error(e) from e

    def read(self) -> Event | None:
        """Block until the next event is parsed.

        Returns ``None`` once the stream is closed, failed, or shutdown was
        requested. Buffers that cannot be decoded or parsed are skipped.
        """
        while not self._pending:
            transport = self.transport
            if transport is None or self._shutdown.is_set():
                return None
            try:
                data = transport.read(self.buffer_size)
            except TimeoutError:
                continue  # poll the shutdown flag again
            except OSError as e:
                if not self._shutdown.is_set():
                    logger.log_event(
                        "irc",
                        "read_error",
                        level=logging.ERROR,
                        user=self.config.nickname,
                        error=classify_os_error(e),
                    )
                self._drop_transport()
                return None
            if not data:
                if not self._shutdown.is_set():
                    logger.log_event(
                        "irc",
                        "read_closed",
                        level=logging.WARNING,
                        user=self.config.nickname,
                    )
                self._drop_transport()
                return None
            self._consume(data)

        event = self._pending.popleft()
        if event.kind is EventKind.PING and self.config.auto_pong:
            self._answer_ping()
        return event

    def _consume(self, data: bytes) -> None:
        for line in self._lines.feed(data):
            try:
                self._pending.append(parse(line))
            except ParsingError as e:
                logger.log_event(
                    "irc",
                    "parse_skipped",
                    level=logging.DEBUG,
                    user=self.config.nickname,
                    error=e,
                )

    def _answer_ping(self) -> None:
        try:
            self.send_command(Command.PONG)
        except IrcError:
            # Already logged by send_command; the next read reports the loss.
            self._drop_transport()
            return
        logger.log_event(
            "irc", "auto_pong", level=logging.DEBUG, user=self.config.nickname
        )

    def __iter__(self) -> Iterator[Event]:
        return self

    def __next__(self) -> Event:
        event = self.read()
        if event is None:
            raise StopIteration
        return event

    def listen(self, handler: Callable[[Event], object]) -> None:
        """Call ``handler`` for every event until the stream ends or close()."""
        for event in self:
            handler(event)

    def close(self) -> None:
        """Stop the read loop and release the stream. Idempotent."""
        if not self._shutdown.is_set():
            self._shutdown.set()
            logger.log_event(
                "irc",
                "shutdown_requested",
                level=logging.DEBUG,
                user=self.config.nickname,
            )
        self._drop_transport()

    def _drop_transport(self) -> None:
        transport, self.transport = self.transport, None
        self.state = ConnectionState.CLOSED
        self._pending.clear()
        self._lines.clear()
        if transport is None:
            return
        try:
            transport.close()
        except OSError:
            pass  # peer already gone
        logger.log_event("irc", "closed", user=self.config.nickname)

    def __enter__(self) -> SessionConnector:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

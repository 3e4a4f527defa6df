#!/usr/bin/env python3
"""
Main entry point: join a Twitch channel and log every chat event
"""

import logging
import signal
import sys

from twitch_irc_engine.config import load_session_config
from twitch_irc_engine.errors import InternalError
from twitch_irc_engine.irc import Event, SessionConnector
from twitch_irc_engine.logs import logger


def log_chat_event(event: Event) -> None:
    logger.log_event(
        "chat",
        "event",
        level=logging.DEBUG if event.message is None else logging.INFO,
        user=event.actor_nickname,
        channel=event.channel or None,
        kind=event.kind.name.lower(),
        nickname=event.actor_nickname or "-",
        message=event.message or "",
    )


def main() -> int:
    """Main function"""
    config = load_session_config()
    logger.log_event("app", "start", user=config.nickname, channel=config.channel)

    connector = SessionConnector.connect(config)
    # Closing the stream from the signal handler unblocks the read loop.
    signal.signal(signal.SIGTERM, lambda *_: connector.close())
    try:
        with connector:
            connector.listen(log_chat_event)
    except KeyboardInterrupt:
        logger.log_event("app", "interrupted", level=logging.WARNING)
    finally:
        logger.log_event("app", "shutdown")
    return 0


if __name__ == "__main__":
    # Simple health check mode
    if len(sys.argv) > 1 and sys.argv[1] == "--health-check":
        try:
            load_session_config()
        except InternalError as e:
            logger.log_event("app", "health_check_failed", level=logging.ERROR, error=e)
            sys.exit(1)
        logger.log_event("app", "health_check_ok")
        sys.exit(0)

    try:
        sys.exit(main())
    except InternalError as e:
        logger.log_event("app", "fatal", level=logging.CRITICAL, error=e, exc_info=True)
        sys.exit(1)

import pytest

from twitch_irc_engine.config import SessionConfig


@pytest.fixture
def session_config():
    return SessionConfig(token="abc123", nickname="testbot", channel="test")


@pytest.fixture
def no_sleep():
    """Sleep replacement recording requested delays."""
    delays = []

    def sleep(seconds):
        delays.append(seconds)

    sleep.delays = delays
    return sleep

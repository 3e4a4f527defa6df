"""
Configuration constants for the Twitch IRC engine

This module contains all configurable constants used throughout the engine.
Each constant can be overridden by setting an environment variable with the same name.
"""

import os


def _get_env_int(name: str, default: int) -> int:
    """Retrieve an integer value from an environment variable.

    Attempts to parse the environment variable as an integer. If the variable
    is not set or cannot be parsed, prints a warning and returns the default value.

    Args:
        name: The name of the environment variable to read.
        default: The default integer value to return if parsing fails.

    Returns:
        The parsed integer value from the environment, or the default if unavailable.
    """
    value = os.getenv(name)
    if value is not None:
        try:
            return int(value)
        except ValueError:
            print(
                f"Warning: Invalid integer value for {name}='{value}', using default {default}"
            )
    return default


def _get_env_float(name: str, default: float) -> float:
    """Retrieve a float value from an environment variable.

    Args:
        name: The name of the environment variable to read.
        default: The default float value to return if parsing fails.

    Returns:
        The parsed float value from the environment, or the default if unavailable.
    """
    value = os.getenv(name)
    if value is not None:
        try:
            return float(value)
        except ValueError:
            print(
                f"Warning: Invalid float value for {name}='{value}', using default {default}"
            )
    return default


# Twitch IRC endpoint
IRC_HOST = os.getenv("IRC_HOST", "irc.chat.twitch.tv")
IRC_PORT = _get_env_int("IRC_PORT", 6667)

# Connection establishment
IRC_CONNECT_MAX_ATTEMPTS = _get_env_int(
    "IRC_CONNECT_MAX_ATTEMPTS", 3
)  # Attempts before giving up with MaxAttemptsError
IRC_CONNECT_TIMEOUT = _get_env_float(
    "IRC_CONNECT_TIMEOUT", 10.0
)  # Seconds allowed for a single TCP connect
IRC_BACKOFF_BASE = _get_env_int(
    "IRC_BACKOFF_BASE", 2
)  # Delay before retry n is IRC_BACKOFF_BASE ** (n - 1) seconds

# Reading
IRC_READ_BUFFER_SIZE = _get_env_int(
    "IRC_READ_BUFFER_SIZE", 1024
)  # Bytes pulled from the stream per read
IRC_READ_TIMEOUT = _get_env_float(
    "IRC_READ_TIMEOUT", 0.0
)  # 0 disables the socket read timeout (fully blocking reads)
IRC_MAX_LINE_LENGTH = _get_env_int(
    "IRC_MAX_LINE_LENGTH", 16384
)  # Bytes a single unterminated line may reach before it is dropped

# Wire format
IRC_LINE_TERMINATOR = "\r\n"
IRC_SERVER_NAME = "tmi.twitch.tv"

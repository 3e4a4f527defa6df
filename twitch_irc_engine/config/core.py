"""Load the session configuration from environment variables."""

from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import ValidationError

from ..errors import ConfigError
from .model import SessionConfig

ENV_TOKEN = "TWITCH_OAUTH_TOKEN"
ENV_NICKNAME = "TWITCH_NICKNAME"
ENV_CHANNEL = "TWITCH_CHANNEL"
ENV_AUTO_PONG = "TWITCH_AUTO_PONG"

_REQUIRED = (ENV_TOKEN, ENV_NICKNAME, ENV_CHANNEL)


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ("true", "1", "yes", "on")


def load_session_config(environ: Mapping[str, str] | None = None) -> SessionConfig:
    """Build a SessionConfig from ``environ`` (defaults to ``os.environ``).

    Raises:
        ConfigError: When a required variable is missing or a value is invalid.
    """
    env = os.environ if environ is None else environ
    missing = [name for name in _REQUIRED if not env.get(name, "").strip()]
    if missing:
        raise ConfigError(
            f"missing environment variables: {', '.join(missing)}",
            data={"missing": missing},
        )
    data: dict[str, object] = {
        "token": env[ENV_TOKEN],
        "nickname": env[ENV_NICKNAME],
        "channel": env[ENV_CHANNEL],
    }
    if env.get(ENV_AUTO_PONG):
        data["auto_pong"] = _parse_bool(env[ENV_AUTO_PONG])
    try:
        return SessionConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"invalid session configuration: {e}") from e

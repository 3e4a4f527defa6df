from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..constants import IRC_HOST, IRC_PORT


class SessionConfig(BaseModel):
    """Credentials and target of a single chat session.

    Attributes:
        token: OAuth token without the ``oauth:`` prefix.
        nickname: Login name used for ``NICK``.
        channel: Channel to join, lower-cased and without ``#``.
        host: IRC server hostname.
        port: IRC server port.
        auto_pong: Answer server PINGs automatically while reading.
    """

    model_config = ConfigDict(frozen=True)

    token: str = Field(min_length=1)
    nickname: str = Field(min_length=1)
    channel: str = Field(min_length=1)
    host: str = IRC_HOST
    port: int = Field(default=IRC_PORT, gt=0, lt=65536)
    auto_pong: bool = True

    @field_validator("token", mode="before")
    @classmethod
    def strip_oauth_prefix(cls, v: object) -> object:
        """Remove a leading ``oauth:``; the PASS command adds it back."""
        if isinstance(v, str):
            v = v.strip()
            if v.lower().startswith("oauth:"):
                v = v[len("oauth:") :]
        return v

    @field_validator("nickname", mode="before")
    @classmethod
    def strip_nickname(cls, v: object) -> object:
        return v.strip() if isinstance(v, str) else v

    @field_validator("channel", mode="before")
    @classmethod
    def normalize_channel(cls, v: object) -> object:
        """Strip whitespace and leading '#', lower-case the name."""
        if isinstance(v, str):
            return v.strip().lstrip("#").lower()
        return v

    def redacted(self) -> dict[str, object]:
        """Return the config as a dict safe to log (token masked)."""
        data = self.model_dump()
        data["token"] = "***"
        return data

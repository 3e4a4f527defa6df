"""Session configuration package."""

from .core import load_session_config  # noqa: F401
from .model import SessionConfig  # noqa: F401

__all__ = ["SessionConfig", "load_session_config"]

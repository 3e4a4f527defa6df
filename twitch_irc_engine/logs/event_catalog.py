"""Human-readable texts for structured log events.

Texts live in ``event_templates.json`` next to this module, grouped by
domain and then by action::

    {"irc": {"connected": "✅ Connected to {host}:{port}"}}
"""

from __future__ import annotations

import json
from pathlib import Path

TEMPLATES_PATH = Path(__file__).with_name("event_templates.json")

EVENT_TEMPLATES: dict[tuple[str, str], str] = {}


def load_event_templates(path: Path = TEMPLATES_PATH) -> dict[tuple[str, str], str]:
    """Read the catalog at ``path`` into ``(domain, action) -> text`` pairs.

    Actions whose text is not a string are ignored. An unreadable catalog
    yields a single ``app/load_error`` entry so logging keeps working.
    """
    try:
        catalog = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {("app", "load_error"): "Event templates file missing"}
    except (OSError, ValueError) as e:
        return {("app", "load_error"): f"Failed to load event templates: {e}"[:200]}
    if not isinstance(catalog, dict):
        return {}
    return {
        (domain, action): text
        for domain, actions in catalog.items()
        if isinstance(actions, dict)
        for action, text in actions.items()
        if isinstance(text, str)
    }


def reload_event_templates(path: Path | None = None) -> None:
    # Updated in place so modules holding a reference see the new texts.
    EVENT_TEMPLATES.clear()
    EVENT_TEMPLATES.update(load_event_templates(path or TEMPLATES_PATH))


reload_event_templates()

__all__ = [
    "EVENT_TEMPLATES",
    "TEMPLATES_PATH",
    "load_event_templates",
    "reload_event_templates",
]

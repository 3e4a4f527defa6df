"""
Tests for structured event logging
"""

import json
import logging

from twitch_irc_engine.logs import event_catalog
from twitch_irc_engine.logs.logger import BotLogger


def make_logger():
    # Build after capsys is active so the console handler binds the captured stdout.
    return BotLogger(name="test_irc_logger")


def test_template_rendering(capsys, monkeypatch):
    monkeypatch.delenv("DEBUG", raising=False)
    bot_logger = make_logger()
    bot_logger.log_event("irc", "connected", user="testbot", host="h", port=1)
    out = capsys.readouterr().out
    assert "Connected to h:1" in out
    assert "[testbot" in out


def test_channel_in_prefix(capsys, monkeypatch):
    monkeypatch.delenv("DEBUG", raising=False)
    bot_logger = make_logger()
    bot_logger.log_event("irc", "ready", user="bot", channel="room")
    assert "bot#room" in capsys.readouterr().out


def test_unknown_event_derives_text(capsys, monkeypatch):
    monkeypatch.delenv("DEBUG", raising=False)
    bot_logger = make_logger()
    bot_logger.log_event("custom_domain", "some_action")
    assert "custom domain: some action" in capsys.readouterr().out


def test_missing_template_argument_falls_back_to_template(capsys, monkeypatch):
    monkeypatch.delenv("DEBUG", raising=False)
    bot_logger = make_logger()
    bot_logger.log_event("irc", "connected")
    assert "{host}" in capsys.readouterr().out


def test_debug_mode_includes_context(capsys, monkeypatch):
    monkeypatch.setenv("DEBUG", "true")
    bot_logger = make_logger()
    bot_logger.set_level(logging.DEBUG)
    bot_logger.log_event("irc", "command_sent", level=logging.DEBUG, command="PRIVMSG")
    out = capsys.readouterr().out
    assert "irc_command_sent" in out
    assert "command=PRIVMSG" in out


def test_debug_events_hidden_at_info(capsys, monkeypatch):
    monkeypatch.delenv("DEBUG", raising=False)
    bot_logger = make_logger()
    bot_logger.set_level(logging.INFO)
    bot_logger.log_event("irc", "command_sent", level=logging.DEBUG, command="PING")
    assert capsys.readouterr().out == ""


def test_human_override(capsys, monkeypatch):
    monkeypatch.delenv("DEBUG", raising=False)
    bot_logger = make_logger()
    bot_logger.log_event("irc", "connected", human="custom text")
    assert "custom text" in capsys.readouterr().out


def test_log_file(tmp_path, capsys):
    log_file = tmp_path / "irc.log"
    file_logger = BotLogger(name="test_irc_file_logger", log_file=str(log_file))
    file_logger.log_event("irc", "closed")
    for handler in file_logger.logger.handlers:
        handler.flush()
    assert "Session closed" in log_file.read_text(encoding="utf-8")


def test_catalog_loaded():
    assert ("irc", "connect_attempt") in event_catalog.EVENT_TEMPLATES


def test_catalog_missing_file(tmp_path):
    try:
        event_catalog.reload_event_templates(tmp_path / "absent.json")
        assert event_catalog.EVENT_TEMPLATES == {
            ("app", "load_error"): "Event templates file missing"
        }
    finally:
        event_catalog.reload_event_templates()


def test_catalog_ignores_non_string_entries(tmp_path):
    path = tmp_path / "templates.json"
    path.write_text(json.dumps({"irc": {"a": "A", "b": 1}, "x": "y"}), encoding="utf-8")
    try:
        event_catalog.reload_event_templates(path)
        assert event_catalog.EVENT_TEMPLATES == {("irc", "a"): "A"}
    finally:
        event_catalog.reload_event_templates()


def test_catalog_invalid_json(tmp_path):
    path = tmp_path / "templates.json"
    path.write_text("{not json", encoding="utf-8")
    try:
        event_catalog.reload_event_templates(path)
        assert ("app", "load_error") in event_catalog.EVENT_TEMPLATES
    finally:
        event_catalog.reload_event_templates()


def test_catalog_reload_updates_shared_mapping(tmp_path):
    shared = event_catalog.EVENT_TEMPLATES
    path = tmp_path / "templates.json"
    path.write_text(json.dumps({"chat": {"event": "{message}"}}), encoding="utf-8")
    try:
        event_catalog.reload_event_templates(path)
        assert shared == {("chat", "event"): "{message}"}
    finally:
        event_catalog.reload_event_templates()
    assert ("irc", "line_overflow") in shared


def test_load_event_templates_non_object_root(tmp_path):
    path = tmp_path / "templates.json"
    path.write_text("[1, 2]", encoding="utf-8")
    assert event_catalog.load_event_templates(path) == {}

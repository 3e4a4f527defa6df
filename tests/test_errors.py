"""
Tests for the error taxonomy and OS error classification
"""

import socket

import pytest

from twitch_irc_engine.errors import (
    AbortedError,
    ConnectTimeoutError,
    HostError,
    InternalError,
    IrcError,
    MaxAttemptsError,
    PermissionDeniedError,
    UnknownIrcError,
    classify_os_error,
)


@pytest.mark.parametrize(
    "error,reason",
    [
        (ConnectionResetError(), "connection reset by peer"),
        (ConnectionRefusedError(), "connection refused by host"),
        (BrokenPipeError(), "broken pipe"),
        (socket.gaierror(-2, "Name or service not known"), "unknown host"),
        (FileNotFoundError(), "unknown host"),
    ],
)
def test_host_errors(error, reason):
    classified = classify_os_error(error)
    assert isinstance(classified, HostError)
    assert classified.reason == reason
    assert reason in str(classified)


@pytest.mark.parametrize(
    "error,expected",
    [
        (ConnectionAbortedError(), AbortedError),
        (PermissionError(), PermissionDeniedError),
        (TimeoutError(), ConnectTimeoutError),
        (socket.timeout(), ConnectTimeoutError),
        (OSError("weird"), UnknownIrcError),
        (ValueError("not io"), UnknownIrcError),
    ],
)
def test_other_errors(error, expected):
    assert isinstance(classify_os_error(error), expected)


def test_classified_error_passes_through():
    original = MaxAttemptsError(3)
    assert classify_os_error(original) is original


def test_cause_recorded_in_data():
    classified = classify_os_error(ConnectionResetError("boom"))
    assert "boom" in classified.data["cause"]


def test_max_attempts_carries_count():
    error = MaxAttemptsError(5)
    assert error.attempts == 5
    assert error.data == {"attempts": 5}
    assert "5 attempts" in str(error)


def test_hierarchy():
    assert issubclass(IrcError, InternalError)
    for cls in (HostError, MaxAttemptsError, AbortedError, UnknownIrcError):
        assert issubclass(cls, IrcError)


def test_internal_error_copies_data():
    data = {"k": 1}
    error = InternalError("msg", data=data)
    data["k"] = 2
    assert error.data == {"k": 1}

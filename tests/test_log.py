"""Tests for core/log.py."""

import logging
import sys
from pathlib import Path

import pytest

PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from core.log import ChatLogger, Logger


def _messages(caplog: pytest.LogCaptureFixture) -> list[str]:
    return [record.getMessage() for record in caplog.records if record.name == "chat-bridge"]


def test_implements_protocol() -> None:
    assert isinstance(ChatLogger(), Logger)
    assert isinstance(ChatLogger().child("webex"), Logger)
    # Satisfied structurally, like the ThreadCodec implementations
    assert Logger not in ChatLogger.__mro__


def test_prefix_and_args(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="chat-bridge")
    ChatLogger("debug").info("hello", 3, "x")
    assert _messages(caplog) == ["[chat-bridge] hello 3 x"]


def test_child_joins_prefix_with_colon(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="chat-bridge")
    logger = ChatLogger("info", "app").child("webex").child("webhooks")
    assert logger.prefix == "app:webex:webhooks"
    assert logger.level == "info"
    logger.warn("careful")
    assert _messages(caplog) == ["[app:webex:webhooks] careful"]


def test_level_filters_lower_severities(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="chat-bridge")
    logger = ChatLogger("warn")
    logger.debug("d")
    logger.info("i")
    logger.warn("w")
    logger.error("e")
    assert _messages(caplog) == ["[chat-bridge] w", "[chat-bridge] e"]


def test_severity_maps_to_stdlib_levels(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="chat-bridge")
    logger = ChatLogger("debug")
    logger.debug("d")
    logger.info("i")
    logger.warn("w")
    logger.error("e")
    levels = [record.levelno for record in caplog.records if record.name == "chat-bridge"]
    assert levels == [logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR]


def test_silent_suppresses_everything(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="chat-bridge")
    logger = ChatLogger("silent")
    logger.error("nope")
    logger.child("x").error("nope")
    assert _messages(caplog) == []


def test_unknown_level_rejected() -> None:
    with pytest.raises(ValueError):
        ChatLogger("verbose")

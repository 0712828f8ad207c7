"""Hierarchical logger handed down to adapters and the webhook registrar.

A single root ``ChatLogger`` is built by the hosting script and passed
explicitly to every component that logs. ``child(name)`` extends the prefix
(``chat-bridge:webex:webhooks``) while keeping the parent's level.
"""

from __future__ import annotations

import logging
from typing import Any, Protocol, runtime_checkable

LOG_LEVELS = ("debug", "info", "warn", "error", "silent")

_STDLIB_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}

_LOGGER_NAME = "chat-bridge"


@runtime_checkable
class Logger(Protocol):
    """Logging collaborator consumed by the core."""

    def child(self, name: str) -> "Logger":
        ...

    def debug(self, message: str, *args: Any) -> None:
        ...

    def info(self, message: str, *args: Any) -> None:
        ...

    def warn(self, message: str, *args: Any) -> None:
        ...

    def error(self, message: str, *args: Any) -> None:
        ...


class ChatLogger:
    """Prefix-aware logger that emits through the stdlib ``logging`` module."""

    def __init__(self, level: str = "info", prefix: str = _LOGGER_NAME) -> None:
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {level}")
        self._level = level
        self._prefix = prefix
        self._log = logging.getLogger(_LOGGER_NAME)

    @property
    def level(self) -> str:
        return self._level

    @property
    def prefix(self) -> str:
        return self._prefix

    def child(self, name: str) -> ChatLogger:
        return ChatLogger(self._level, f"{self._prefix}:{name}")

    def _should_log(self, level: str) -> bool:
        return LOG_LEVELS.index(level) >= LOG_LEVELS.index(self._level)

    def _emit(self, level: str, message: str, args: tuple[Any, ...]) -> None:
        if not self._should_log(level):
            return
        text = f"[{self._prefix}] {message}"
        if args:
            text += " " + " ".join(repr(arg) if not isinstance(arg, str) else arg for arg in args)
        self._log.log(_STDLIB_LEVELS[level], "%s", text)

    def debug(self, message: str, *args: Any) -> None:
        self._emit("debug", message, args)

    def info(self, message: str, *args: Any) -> None:
        self._emit("info", message, args)

    def warn(self, message: str, *args: Any) -> None:
        self._emit("warn", message, args)

    def error(self, message: str, *args: Any) -> None:
        self._emit("error", message, args)


def setup_logging(level: str = "info") -> None:
    """Configure stdlib logging for command-line entry points."""
    stdlib_level = _STDLIB_LEVELS.get(level, logging.CRITICAL + 1)
    logging.basicConfig(
        level=stdlib_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

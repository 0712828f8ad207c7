"""Telegram thread and message identifiers.

Thread ids: ``telegram:<chat_id>`` or ``telegram:<chat_id>:<topic_id>`` for
forum topics. Message ids are composite ``<chat_id>:<message_id>`` strings.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from core.errors import DecodingError, ValidationError

PREFIX = "telegram"
_MESSAGE_ID_PATTERN = re.compile(r"^(-?\d+):(\d+)$")


@dataclass(frozen=True)
class TelegramThreadId:
    chat_id: str
    message_thread_id: Optional[int] = None


def encode_thread_id(platform_data: TelegramThreadId) -> str:
    if not platform_data.chat_id or ":" in platform_data.chat_id:
        raise ValidationError(PREFIX, f"Invalid Telegram chat ID: {platform_data.chat_id!r}")
    if platform_data.message_thread_id is not None:
        return f"{PREFIX}:{platform_data.chat_id}:{platform_data.message_thread_id}"
    return f"{PREFIX}:{platform_data.chat_id}"


def decode_thread_id(thread_id: str) -> TelegramThreadId:
    parts = thread_id.split(":")
    if parts[0] != PREFIX or len(parts) < 2 or len(parts) > 3 or not parts[1]:
        raise DecodingError(PREFIX, f"Invalid Telegram thread ID: {thread_id}")

    chat_id = parts[1]
    if len(parts) == 2 or not parts[2]:
        return TelegramThreadId(chat_id=chat_id)

    try:
        message_thread_id = int(parts[2])
    except ValueError:
        raise DecodingError(PREFIX, f"Invalid Telegram thread topic ID in thread ID: {thread_id}") from None
    return TelegramThreadId(chat_id=chat_id, message_thread_id=message_thread_id)


def resolve_thread_id(value: str) -> TelegramThreadId:
    """Accept either an encoded thread id or a bare chat id."""
    if value.startswith(f"{PREFIX}:"):
        return decode_thread_id(value)
    return TelegramThreadId(chat_id=value)


def is_dm_thread(thread_id: str) -> bool:
    """Private chats have positive ids; groups and channels are negative."""
    parts = thread_id.split(":")
    if len(parts) < 2 or parts[0] != PREFIX or not parts[1]:
        return False
    return not parts[1].startswith("-")


def channel_id_from_thread_id(thread_id: str) -> str:
    return resolve_thread_id(thread_id).chat_id


def encode_message_id(chat_id: str, message_id: int) -> str:
    return f"{chat_id}:{message_id}"


def decode_message_id(message_id: str, expected_chat_id: Optional[str] = None) -> tuple[str, int]:
    """Split a composite message id into (chat_id, message_id).

    A bare numeric id is accepted when ``expected_chat_id`` supplies the chat.
    """
    match = _MESSAGE_ID_PATTERN.match(message_id)
    if match:
        chat_id, raw_message_id = match.groups()
        if expected_chat_id and chat_id != expected_chat_id:
            raise DecodingError(
                PREFIX,
                f"Message ID chat mismatch: expected {expected_chat_id}, got {chat_id}",
            )
        return chat_id, int(raw_message_id)

    if not expected_chat_id:
        raise DecodingError(
            PREFIX,
            f"Telegram message ID must be in <chatId>:<messageId> format, got: {message_id}",
        )
    if not message_id.isdigit():
        raise DecodingError(PREFIX, f"Invalid Telegram message ID: {message_id}")
    return expected_chat_id, int(message_id)


class TelegramThreadCodec:
    """ThreadCodec adapter over the module functions."""

    def encode_thread_id(self, platform_data: TelegramThreadId) -> str:
        return encode_thread_id(platform_data)

    def decode_thread_id(self, thread_id: str) -> TelegramThreadId:
        return decode_thread_id(thread_id)

    def is_dm(self, thread_id: str) -> bool:
        return is_dm_thread(thread_id)

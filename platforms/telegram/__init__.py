"""Telegram platform implementation."""

from .cards import (
    TELEGRAM_CALLBACK_CODEC,
    build_inline_keyboard,
    card_to_inline_keyboard,
    decode_callback_data,
    empty_inline_keyboard,
    encode_callback_data,
)
from .thread_utils import (
    TelegramThreadCodec,
    TelegramThreadId,
    decode_message_id,
    decode_thread_id,
    encode_message_id,
    encode_thread_id,
    is_dm_thread,
)

__all__ = [
    "TELEGRAM_CALLBACK_CODEC",
    "TelegramThreadCodec",
    "TelegramThreadId",
    "build_inline_keyboard",
    "card_to_inline_keyboard",
    "decode_callback_data",
    "decode_message_id",
    "decode_thread_id",
    "empty_inline_keyboard",
    "encode_callback_data",
    "encode_message_id",
    "encode_thread_id",
    "is_dm_thread",
]

"""Telegram inline keyboards from card documents.

Button payloads go through the Telegram callback codec, which enforces
Telegram's callback_data limit (64 bytes unless overridden in config).
"""

from typing import Optional

from telegram import InlineKeyboardButton, InlineKeyboardMarkup

from config import TELEGRAM_CALLBACK_DATA_LIMIT
from core.callback_data import CallbackAction, CallbackCodec
from core.cards import card_to_button_rows
from core.types import Card
from ..protocol import ButtonRow

TELEGRAM_CALLBACK_CODEC = CallbackCodec(
    platform="telegram",
    max_bytes=TELEGRAM_CALLBACK_DATA_LIMIT,
    fallback_action_id="telegram_callback",
)


def encode_callback_data(action_id: str, value: Optional[str] = None) -> str:
    return TELEGRAM_CALLBACK_CODEC.encode(action_id, value)


def decode_callback_data(data: Optional[str]) -> CallbackAction:
    return TELEGRAM_CALLBACK_CODEC.decode(data)


def build_inline_keyboard(rows: Optional[list[ButtonRow]]) -> Optional[InlineKeyboardMarkup]:
    """Convert ButtonRows to Telegram InlineKeyboardMarkup."""
    if not rows:
        return None

    return InlineKeyboardMarkup([
        [
            InlineKeyboardButton(b.text, url=b.url) if b.is_link
            else InlineKeyboardButton(b.text, callback_data=b.callback_id)
            for b in row.buttons
        ]
        for row in rows
    ])


def card_to_inline_keyboard(card: Card) -> Optional[InlineKeyboardMarkup]:
    """Render a card's actions as an inline keyboard, or None if it has none."""
    return build_inline_keyboard(card_to_button_rows(card, TELEGRAM_CALLBACK_CODEC))


def empty_inline_keyboard() -> InlineKeyboardMarkup:
    """Keyboard with no rows, used by editMessageText to clear old buttons."""
    return InlineKeyboardMarkup([])

"""Discord component views from card documents.

Button payloads become component ``custom_id`` values, capped at
DISCORD_CUSTOM_ID_LIMIT. Discord allows at most 5 action rows with 5
components each.

IMPORTANT: discord.ui.View must be constructed inside a running event loop,
so these builders are only usable from async code (handlers, listeners).
"""

from typing import Optional

import discord

from config import DISCORD_CUSTOM_ID_LIMIT
from core.callback_data import CallbackAction, CallbackCodec
from core.cards import card_to_button_rows
from core.errors import ValidationError
from core.types import Card
from ..protocol import ButtonRow

MAX_ROWS = 5
MAX_BUTTONS_PER_ROW = 5

DISCORD_CALLBACK_CODEC = CallbackCodec(
    platform="discord",
    max_bytes=DISCORD_CUSTOM_ID_LIMIT,
    fallback_action_id="discord_callback",
)

_BUTTON_STYLES = {
    "primary": discord.ButtonStyle.primary,
    "danger": discord.ButtonStyle.danger,
}


def encode_custom_id(action_id: str, value: Optional[str] = None) -> str:
    return DISCORD_CALLBACK_CODEC.encode(action_id, value)


def decode_custom_id(custom_id: Optional[str]) -> CallbackAction:
    return DISCORD_CALLBACK_CODEC.decode(custom_id)


def build_view(rows: Optional[list[ButtonRow]]) -> Optional[discord.ui.View]:
    """Convert ButtonRows to Discord View with buttons."""
    if not rows:
        return None

    if len(rows) > MAX_ROWS:
        raise ValidationError("discord", f"Too many action rows for Discord (max {MAX_ROWS}).")

    view = discord.ui.View(timeout=None)

    for row_idx, row in enumerate(rows):
        if len(row.buttons) > MAX_BUTTONS_PER_ROW:
            raise ValidationError(
                "discord",
                f"Too many buttons in one Discord row (max {MAX_BUTTONS_PER_ROW}).",
            )
        for btn in row.buttons:
            if btn.is_link:
                button = discord.ui.Button(label=btn.text, url=btn.url, row=row_idx)
            else:
                button = discord.ui.Button(
                    label=btn.text,
                    custom_id=btn.callback_id,
                    style=_BUTTON_STYLES.get(btn.style or "", discord.ButtonStyle.secondary),
                    row=row_idx,
                )
            view.add_item(button)

    return view


def card_to_view(card: Card) -> Optional[discord.ui.View]:
    """Render a card's actions as a View, or None if it has none."""
    return build_view(card_to_button_rows(card, DISCORD_CALLBACK_CODEC))


def empty_view() -> discord.ui.View:
    """View with no components, used by message edits to clear old buttons."""
    return discord.ui.View(timeout=None)

"""Discord platform implementation."""

from .cards import (
    DISCORD_CALLBACK_CODEC,
    build_view,
    card_to_view,
    decode_custom_id,
    empty_view,
    encode_custom_id,
)

__all__ = [
    "DISCORD_CALLBACK_CODEC",
    "build_view",
    "card_to_view",
    "decode_custom_id",
    "empty_view",
    "encode_custom_id",
]

"""Google Chat platform implementation."""

from .thread_utils import (
    GChatThreadCodec,
    GChatThreadId,
    decode_thread_id,
    encode_thread_id,
    is_dm_thread,
)

__all__ = [
    "GChatThreadCodec",
    "GChatThreadId",
    "decode_thread_id",
    "encode_thread_id",
    "is_dm_thread",
]

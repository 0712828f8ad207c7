"""Webex platform implementation."""

from .cards import (
    card_to_adaptive_card,
    card_to_attachment,
    card_to_fallback_text,
    decode_submit_action,
)
from .client import WebexApiClient
from .thread_utils import (
    WebexThreadCodec,
    WebexThreadId,
    channel_id_from_thread_id,
    decode_channel_id,
    decode_thread_id,
    dm_thread_id,
    encode_channel_id,
    encode_thread_id,
    is_dm_thread,
)
from .webhooks import (
    WebexWebhook,
    WebhookConfig,
    WebhookRegistrar,
    WebhookSyncResult,
    desired_webhooks,
    list_all_webhooks,
    parse_next_link,
)

__all__ = [
    "WebexApiClient",
    "WebexThreadCodec",
    "WebexThreadId",
    "WebexWebhook",
    "WebhookConfig",
    "WebhookRegistrar",
    "WebhookSyncResult",
    "card_to_adaptive_card",
    "card_to_attachment",
    "card_to_fallback_text",
    "channel_id_from_thread_id",
    "decode_channel_id",
    "decode_submit_action",
    "decode_thread_id",
    "desired_webhooks",
    "dm_thread_id",
    "encode_channel_id",
    "encode_thread_id",
    "is_dm_thread",
    "list_all_webhooks",
    "parse_next_link",
]

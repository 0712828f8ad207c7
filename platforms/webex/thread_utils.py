"""Webex thread and channel identifiers.

Thread ids: ``webex:<base64url(roomId)>:<base64url(rootMessageId)>``
Channel ids: ``webex:<base64url(roomId)>``

Webex room ids are themselves base64 and may contain ``/`` or ``=``, hence
the second layer of url-safe encoding.
"""

from __future__ import annotations

import base64
import binascii
import re
from dataclasses import dataclass

from core.errors import AdapterError, DecodingError, ValidationError

PREFIX = "webex"
DM_ROOM_PREFIX = "dm:"
DM_ROOT_SENTINEL = "root"

_BASE64URL_RE = re.compile(r"^[A-Za-z0-9_-]+$")


@dataclass(frozen=True)
class WebexThreadId:
    room_id: str
    root_message_id: str


def _encode(value: str) -> str:
    try:
        raw = value.encode("utf-8")
    except UnicodeEncodeError:
        raise ValidationError(PREFIX, f"Webex ID is not valid UTF-8 text: {value!r}") from None
    return base64.urlsafe_b64encode(raw).decode("ascii").rstrip("=")


def _decode(segment: str, original: str) -> str:
    if not _BASE64URL_RE.match(segment) or len(segment) % 4 == 1:
        raise DecodingError(PREFIX, f"Invalid base64 payload in Webex ID: {original}")
    try:
        return base64.urlsafe_b64decode(segment + "=" * (-len(segment) % 4)).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError):
        raise DecodingError(PREFIX, f"Invalid base64 payload in Webex ID: {original}") from None


def encode_thread_id(platform_data: WebexThreadId) -> str:
    if not platform_data.room_id or not platform_data.root_message_id:
        raise ValidationError(PREFIX, "Webex thread ID requires room_id and root_message_id")
    return f"{PREFIX}:{_encode(platform_data.room_id)}:{_encode(platform_data.root_message_id)}"


def decode_thread_id(thread_id: str) -> WebexThreadId:
    parts = thread_id.split(":")
    if len(parts) != 3 or parts[0] != PREFIX:
        raise DecodingError(PREFIX, f"Invalid Webex thread ID: {thread_id}")
    return WebexThreadId(room_id=_decode(parts[1], thread_id), root_message_id=_decode(parts[2], thread_id))


def encode_channel_id(room_id: str) -> str:
    return f"{PREFIX}:{_encode(room_id)}"


def decode_channel_id(channel_id: str) -> str:
    parts = channel_id.split(":")
    if len(parts) != 2 or parts[0] != PREFIX:
        raise DecodingError(PREFIX, f"Invalid Webex channel ID: {channel_id}")
    return _decode(parts[1], channel_id)


def channel_id_from_thread_id(thread_id: str) -> str:
    return encode_channel_id(decode_thread_id(thread_id).room_id)


def dm_thread_id(person_id: str) -> str:
    """Thread id for a direct conversation with a person, before any room exists."""
    return encode_thread_id(WebexThreadId(f"{DM_ROOM_PREFIX}{person_id}", DM_ROOT_SENTINEL))


def is_dm_thread(thread_id: str) -> bool:
    """Advisory DM check; never raises.

    Direct conversations opened with ``dm_thread_id`` carry a
    ``dm:<personId>`` room id. Real room ids need an API lookup for their type.
    """
    try:
        room_id = decode_thread_id(thread_id).room_id
    except AdapterError:
        return False
    return room_id.startswith(DM_ROOM_PREFIX)


class WebexThreadCodec:
    """ThreadCodec adapter over the module functions."""

    def encode_thread_id(self, platform_data: WebexThreadId) -> str:
        return encode_thread_id(platform_data)

    def decode_thread_id(self, thread_id: str) -> WebexThreadId:
        return decode_thread_id(thread_id)

    def is_dm(self, thread_id: str) -> bool:
        return is_dm_thread(thread_id)

"""Google Chat thread identifiers.

Format: ``gchat:<spaceName>[:<base64url(threadName)>][:dm]``

Space names look like ``spaces/ABC123`` and never contain a colon. Thread
names (``spaces/ABC123/threads/xyz``) are base64url-encoded without padding
so they survive the colon split. The ``dm`` marker is only meaningful as the
final segment; a canonical 2-character base64url segment always ends in one
of ``AQgw``, so it can never be confused with the marker.
"""

from __future__ import annotations

import base64
import binascii
import re
from dataclasses import dataclass
from typing import Optional

from core.errors import DecodingError, ValidationError

PREFIX = "gchat"
DM_MARKER = "dm"

_BASE64URL_RE = re.compile(r"^[A-Za-z0-9_-]+$")


@dataclass(frozen=True)
class GChatThreadId:
    space_name: str
    thread_name: Optional[str] = None
    is_dm: bool = False


def _b64url_encode(value: str) -> str:
    try:
        raw = value.encode("utf-8")
    except UnicodeEncodeError:
        raise ValidationError(PREFIX, f"Google Chat thread name is not valid UTF-8 text: {value!r}") from None
    return base64.urlsafe_b64encode(raw).decode("ascii").rstrip("=")


def _b64url_decode(segment: str, thread_id: str) -> str:
    if not _BASE64URL_RE.match(segment) or len(segment) % 4 == 1:
        raise DecodingError(PREFIX, f"Invalid Google Chat thread ID: {thread_id}")
    padded = segment + "=" * (-len(segment) % 4)
    try:
        return base64.urlsafe_b64decode(padded).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError):
        raise DecodingError(PREFIX, f"Invalid Google Chat thread ID: {thread_id}") from None


def encode_thread_id(platform_data: GChatThreadId) -> str:
    space_name = platform_data.space_name
    if not space_name or ":" in space_name:
        raise ValidationError(PREFIX, f"Invalid Google Chat space name: {space_name!r}")

    parts = [PREFIX, space_name]
    if platform_data.thread_name:
        parts.append(_b64url_encode(platform_data.thread_name))
    if platform_data.is_dm:
        parts.append(DM_MARKER)
    return ":".join(parts)


def decode_thread_id(thread_id: str) -> GChatThreadId:
    """Decode a Google Chat thread id.

    Raises:
        DecodingError: missing or foreign prefix, bad segment count, or a
            thread segment that is not valid base64url
    """
    parts = thread_id.split(":")
    if len(parts) < 2 or parts[0] != PREFIX:
        raise DecodingError(PREFIX, f"Invalid Google Chat thread ID: {thread_id}")

    is_dm = len(parts) > 2 and parts[-1] == DM_MARKER
    if is_dm:
        parts = parts[:-1]

    if len(parts) > 3 or not parts[1]:
        raise DecodingError(PREFIX, f"Invalid Google Chat thread ID: {thread_id}")

    thread_name = None
    if len(parts) == 3:
        thread_name = _b64url_decode(parts[2], thread_id)

    return GChatThreadId(space_name=parts[1], thread_name=thread_name, is_dm=is_dm)


def is_dm_thread(thread_id: str) -> bool:
    """Advisory DM check; never raises."""
    parts = thread_id.split(":")
    return len(parts) > 2 and parts[0] == PREFIX and parts[-1] == DM_MARKER


class GChatThreadCodec:
    """ThreadCodec adapter over the module functions."""

    def encode_thread_id(self, platform_data: GChatThreadId) -> str:
        return encode_thread_id(platform_data)

    def decode_thread_id(self, thread_id: str) -> GChatThreadId:
        return decode_thread_id(thread_id)

    def is_dm(self, thread_id: str) -> bool:
        return is_dm_thread(thread_id)

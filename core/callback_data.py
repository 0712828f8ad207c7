"""Compact callback payloads for interactive controls.

Tokens look like ``chat:{"a":"approve","v":"42"}``. Each platform caps the
payload differently, so a codec is configured per platform with its byte
limit and the action id used when the platform sends no data at all.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Optional

from core.errors import ValidationError

CALLBACK_DATA_PREFIX = "chat:"


@dataclass(frozen=True)
class CallbackAction:
    action_id: str
    value: Optional[str] = None


@dataclass(frozen=True)
class CallbackCodec:
    platform: str
    max_bytes: int
    fallback_action_id: str
    prefix: str = CALLBACK_DATA_PREFIX

    def encode(self, action_id: str, value: Optional[str] = None) -> str:
        """Encode an action for a control payload.

        Raises:
            ValidationError: empty action id, or encoded form over ``max_bytes``.
        """
        if not action_id:
            raise ValidationError(self.platform, "Callback action id cannot be empty.")

        payload: dict[str, str] = {"a": action_id}
        if value is not None:
            payload["v"] = value

        data = self.prefix + json.dumps(payload, ensure_ascii=False, separators=(",", ":"))
        try:
            size = len(data.encode("utf-8"))
        except UnicodeEncodeError:
            raise ValidationError(self.platform, "Callback payload is not valid UTF-8 text.") from None
        if size > self.max_bytes:
            raise ValidationError(
                self.platform,
                f"Callback payload too large for {self.platform} (max {self.max_bytes} bytes).",
            )
        return data

    def decode(self, data: Optional[str]) -> CallbackAction:
        """Decode a control payload. Never raises.

        Missing data maps to ``fallback_action_id``; anything that is not a
        token from ``encode`` is passed through as both id and value.
        """
        if not data:
            return CallbackAction(self.fallback_action_id, None)

        if not data.startswith(self.prefix):
            return CallbackAction(data, data)

        try:
            decoded = json.loads(data[len(self.prefix):])
        except (ValueError, RecursionError):
            decoded = None

        if isinstance(decoded, dict):
            action_id = decoded.get("a")
            if isinstance(action_id, str) and action_id:
                value = decoded.get("v")
                return CallbackAction(action_id, value if isinstance(value, str) else None)

        return CallbackAction(data, data)

"""Protocol definitions for multi-platform adapters.

Platform renderers share one intermediate shape (rows of ``ButtonSpec``) and
every thread-identity codec exposes the same three operations.
Uses Python's Protocol for structural typing (duck typing with type hints).
"""

from dataclasses import dataclass
from typing import Any, Optional, Protocol, runtime_checkable


@dataclass(frozen=True)
class ButtonSpec:
    """Platform-agnostic button specification.

    Exactly one of ``callback_id`` (interactive button) or ``url`` (link) is set.
    """
    text: str
    callback_id: Optional[str] = None  # Encoded callback token for routing
    url: Optional[str] = None
    style: Optional[str] = None  # "primary" | "danger"; ignored where unsupported

    @property
    def is_link(self) -> bool:
        return self.url is not None


@dataclass(frozen=True)
class ButtonRow:
    """A row of buttons in a keyboard layout."""
    buttons: tuple[ButtonSpec, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "buttons", tuple(self.buttons))


@runtime_checkable
class ThreadCodec(Protocol):
    """Bidirectional mapping between a native thread address and a token.

    - Google Chat: gchat:<space>[:<b64 thread>][:dm]
    - Telegram: telegram:<chat_id>[:<topic_id>]
    - Webex: webex:<b64 room>:<b64 root message>
    """

    def encode_thread_id(self, platform_data: Any) -> str:
        """Encode native addressing into an opaque thread id."""
        ...

    def decode_thread_id(self, thread_id: str) -> Any:
        """Decode a thread id.

        Raises:
            DecodingError: prefix mismatch or malformed structure
        """
        ...

    def is_dm(self, thread_id: str) -> bool:
        """Advisory DM check. Must not raise on malformed input."""
        ...

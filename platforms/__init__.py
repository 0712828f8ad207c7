"""Multi-platform adapter layer: card rendering, callback payloads, thread ids."""

from .protocol import (
    ButtonSpec,
    ButtonRow,
    ThreadCodec,
)

__all__ = [
    "ButtonSpec",
    "ButtonRow",
    "ThreadCodec",
]

"""Render card documents into platform-neutral button rows.

Platform renderers (Telegram inline keyboards, Discord views) build on
``card_to_button_rows`` and only translate ``ButtonRow`` into native types.
"""

from __future__ import annotations

from typing import Iterable, Optional

from core.callback_data import CallbackCodec
from core.types import Actions, Button, Card, CardChild, LinkButton, Section, Text
from platforms.protocol import ButtonRow, ButtonSpec


def _actions_to_row(actions: Actions, codec: CallbackCodec) -> list[ButtonSpec]:
    row: list[ButtonSpec] = []
    for action in actions.children:
        if isinstance(action, Button):
            row.append(ButtonSpec(
                text=action.label,
                callback_id=codec.encode(action.id, action.value),
                style=action.style,
            ))
        elif isinstance(action, LinkButton):
            row.append(ButtonSpec(text=action.label, url=action.url))
        # Selects and other controls have no button form
    return row


def _collect_rows(children: Iterable[CardChild], codec: CallbackCodec, rows: list[ButtonRow]) -> None:
    for child in children:
        if isinstance(child, Actions):
            row = _actions_to_row(child, codec)
            if row:
                rows.append(ButtonRow(buttons=tuple(row)))
        elif isinstance(child, Section):
            _collect_rows(child.children, codec, rows)


def card_to_button_rows(card: Card, codec: CallbackCodec) -> Optional[list[ButtonRow]]:
    """Collect one row per ``actions`` container, depth-first.

    Returns:
        The rows in document order, or None when the card has no renderable
        actions. An empty list is never returned.

    Raises:
        ValidationError: a button's callback payload exceeds the codec limit.
    """
    rows: list[ButtonRow] = []
    _collect_rows(card.children, codec, rows)
    if not rows:
        return None
    return rows


def _fallback_lines(children: Iterable[CardChild], bold: str) -> list[str]:
    lines: list[str] = []
    for child in children:
        if isinstance(child, Text):
            if child.style == "bold":
                lines.append(f"{bold}{child.content}{bold}")
            else:
                lines.append(child.content)
        elif isinstance(child, Section):
            lines.extend(_fallback_lines(child.children, bold))
        elif isinstance(child, Actions):
            for action in child.children:
                if isinstance(action, LinkButton):
                    lines.append(f"{action.label}: {action.url}")
    return lines


def card_to_fallback_text(card: Card, *, bold: str = "**", line_break: str = "\n\n") -> str:
    """Plain-text rendering for clients that cannot show the card itself."""
    lines: list[str] = []
    if card.title:
        lines.append(f"{bold}{card.title}{bold}")
    if card.subtitle:
        lines.append(card.subtitle)
    lines.extend(_fallback_lines(card.children, bold))
    return line_break.join(lines)

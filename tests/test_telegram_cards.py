"""Tests for platforms/telegram/cards.py."""

import sys
from pathlib import Path

import pytest

PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from telegram import InlineKeyboardMarkup

from core.errors import ValidationError
from core.types import Actions, Button, Card, LinkButton, Section, Select, SelectOption, Text
from platforms.protocol import ButtonRow, ButtonSpec
from platforms.telegram.cards import (
    build_inline_keyboard,
    card_to_inline_keyboard,
    empty_inline_keyboard,
    encode_callback_data,
)


def _row_dump(markup: InlineKeyboardMarkup) -> list[list[tuple]]:
    return [
        [(button.text, button.callback_data, button.url) for button in row]
        for row in markup.inline_keyboard
    ]


class TestCardToInlineKeyboard:
    """Tests for card_to_inline_keyboard."""

    def test_returns_none_without_actions(self):
        card = Card(title="No actions", children=[Text("hi")])
        assert card_to_inline_keyboard(card) is None

    def test_multiple_actions_blocks_become_rows(self):
        card = Card(children=[
            Actions([Button("a", "A"), Button("b", "B")]),
            Section([Actions([LinkButton("Docs", "https://chat-sdk.dev")])]),
        ])
        markup = card_to_inline_keyboard(card)
        assert markup is not None
        assert _row_dump(markup) == [
            [("A", encode_callback_data("a"), None), ("B", encode_callback_data("b"), None)],
            [("Docs", None, "https://chat-sdk.dev")],
        ]

    def test_button_value_encoded(self):
        card = Card(children=[Actions([Button("approve", "Approve", value="req-1")])])
        markup = card_to_inline_keyboard(card)
        assert markup is not None
        assert markup.inline_keyboard[0][0].callback_data == 'chat:{"a":"approve","v":"req-1"}'

    def test_select_only_returns_none(self):
        card = Card(children=[Actions([Select("s", "Pick", [SelectOption("One", "1")])])])
        assert card_to_inline_keyboard(card) is None

    def test_oversized_callback_raises(self):
        card = Card(children=[Actions([Button("x" * 200, "Big")])])
        with pytest.raises(ValidationError):
            card_to_inline_keyboard(card)


class TestKeyboardHelpers:
    """Tests for build_inline_keyboard and empty_inline_keyboard."""

    def test_build_none_for_no_rows(self):
        assert build_inline_keyboard(None) is None
        assert build_inline_keyboard([]) is None

    def test_build_from_rows(self):
        markup = build_inline_keyboard([ButtonRow([ButtonSpec("Yes", callback_id="perm:yes")])])
        assert markup is not None
        assert _row_dump(markup) == [[("Yes", "perm:yes", None)]]

    def test_empty_keyboard_has_no_rows(self):
        markup = empty_inline_keyboard()
        assert isinstance(markup, InlineKeyboardMarkup)
        assert len(markup.inline_keyboard) == 0

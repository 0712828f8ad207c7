"""Webex Adaptive Cards from card documents.

Webex has no inline keyboards: buttons become card-level ``Action.Submit``
entries whose ``data`` comes back verbatim in the ``attachmentActions``
webhook, so no callback codec or size limit is involved. Selects render as
``Input.ChoiceSet`` plus a submit action carrying the select id.
"""

from __future__ import annotations

import json
from typing import Any, Iterable, Mapping, Optional

from core.callback_data import CallbackAction
from core.cards import card_to_fallback_text as _card_to_fallback_text
from core.types import Actions, Button, Card, CardChild, Divider, LinkButton, Section, Select, Text

ADAPTIVE_CARD_SCHEMA = "http://adaptivecards.io/schemas/adaptive-card.json"
ADAPTIVE_CARD_VERSION = "1.3"
ADAPTIVE_CARD_CONTENT_TYPE = "application/vnd.microsoft.card.adaptive"

# Webex renders at most 20 card-level actions
MAX_ACTIONS = 20

DEFAULT_SUBMIT_ACTION_ID = "submit"

_BUTTON_STYLES = {"primary": "positive", "danger": "destructive"}

# Keys that identify the action rather than carry its value
_ACTION_KEYS = ("actionId", "_actionId", "id", "action", "source")

Element = dict[str, Any]


def _text_block(child: Text) -> Element:
    element: Element = {"type": "TextBlock", "text": child.content, "wrap": True}
    if child.style == "bold":
        element["weight"] = "Bolder"
    elif child.style == "muted":
        element["isSubtle"] = True
    return element


def _submit_action(button: Button) -> Element:
    data = {"actionId": button.id}
    if button.value:
        data["value"] = button.value
    action: Element = {"type": "Action.Submit", "title": button.label, "data": data}
    style = _BUTTON_STYLES.get(button.style or "")
    if style:
        action["style"] = style
    return action


def _choice_set(select: Select) -> Element:
    element: Element = {
        "type": "Input.ChoiceSet",
        "id": select.id,
        "label": select.label,
        "style": "compact",
        "choices": [{"title": option.label, "value": option.value} for option in select.options],
    }
    if select.placeholder:
        element["placeholder"] = select.placeholder
    return element


def _convert_actions(container: Actions, body: list[Element], actions: list[Element]) -> None:
    for control in container.children:
        if isinstance(control, Button):
            actions.append(_submit_action(control))
        elif isinstance(control, LinkButton):
            actions.append({"type": "Action.OpenUrl", "title": control.label, "url": control.url})
        elif isinstance(control, Select):
            body.append(_choice_set(control))
            actions.append({
                "type": "Action.Submit",
                "title": control.label,
                "data": {"actionId": control.id, "source": "select"},
            })


def _convert_children(children: Iterable[CardChild], body: list[Element], actions: list[Element]) -> None:
    for child in children:
        if isinstance(child, Text):
            body.append(_text_block(child))
        elif isinstance(child, Divider):
            body.append({"type": "Container", "separator": True, "items": []})
        elif isinstance(child, Actions):
            _convert_actions(child, body, actions)
        elif isinstance(child, Section):
            items: list[Element] = []
            _convert_children(child.children, items, actions)
            if items:
                body.append({"type": "Container", "items": items})


def card_to_adaptive_card(card: Card) -> dict[str, Any]:
    """Render a card as an Adaptive Card payload.

    Actions from every ``actions`` container, nested ones included, are
    collected in document order into the card-level ``actions`` list, which
    is omitted when empty and truncated to ``MAX_ACTIONS``.
    """
    body: list[Element] = []
    actions: list[Element] = []

    if card.title:
        body.append({"type": "TextBlock", "text": card.title, "weight": "Bolder", "size": "Medium", "wrap": True})
    if card.subtitle:
        body.append({"type": "TextBlock", "text": card.subtitle, "isSubtle": True, "wrap": True})

    _convert_children(card.children, body, actions)

    adaptive_card: dict[str, Any] = {
        "type": "AdaptiveCard",
        "$schema": ADAPTIVE_CARD_SCHEMA,
        "version": ADAPTIVE_CARD_VERSION,
        "body": body,
    }
    if actions:
        adaptive_card["actions"] = actions[:MAX_ACTIONS]
    return adaptive_card


def card_to_attachment(card: Card) -> dict[str, Any]:
    """Message attachment entry for ``POST /messages``."""
    return {"contentType": ADAPTIVE_CARD_CONTENT_TYPE, "content": card_to_adaptive_card(card)}


def card_to_fallback_text(card: Card) -> str:
    """Markdown shown by clients that cannot render Adaptive Cards."""
    return _card_to_fallback_text(card, bold="**", line_break="\n\n")


def decode_submit_action(inputs: Optional[Mapping[str, Any]], action_type: Optional[str] = None) -> CallbackAction:
    """Recover the action id and value from an ``attachmentActions`` payload.

    The id comes from the submit ``data`` merged into ``inputs``. The value is
    an explicit ``value``, else the input named after the action (a select),
    else the only remaining string input, else all inputs as JSON. With no
    value-carrying inputs the value is None.
    """
    inputs = inputs or {}
    action_id = action_type or DEFAULT_SUBMIT_ACTION_ID
    for key in ("actionId", "_actionId", "id", "action"):
        candidate = inputs.get(key)
        if isinstance(candidate, str) and candidate:
            action_id = candidate
            break

    value = inputs.get("value")
    if isinstance(value, str):
        return CallbackAction(action_id, value)

    value = inputs.get(action_id)
    if isinstance(value, str):
        return CallbackAction(action_id, value)

    remaining = [v for key, v in inputs.items() if key not in _ACTION_KEYS]
    if len(remaining) == 1 and isinstance(remaining[0], str):
        return CallbackAction(action_id, remaining[0])

    if not remaining:
        return CallbackAction(action_id, None)
    return CallbackAction(action_id, json.dumps(dict(inputs), ensure_ascii=False, separators=(",", ":")))

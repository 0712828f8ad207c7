"""Platform-agnostic card document model.

A card is an immutable tree. ``type`` is the discriminant of every node, so a
card can be built from (and compared with) JSON-shaped dicts produced by
callers via ``parse_card``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Union

from core.errors import ValidationError


@dataclass(frozen=True)
class Text:
    content: str
    style: Optional[str] = None  # "bold" | "muted"
    type: str = field(default="text", init=False)


@dataclass(frozen=True)
class Divider:
    type: str = field(default="divider", init=False)


@dataclass(frozen=True)
class Button:
    id: str
    label: str
    value: Optional[str] = None
    style: Optional[str] = None  # "primary" | "danger"
    type: str = field(default="button", init=False)


@dataclass(frozen=True)
class LinkButton:
    label: str
    url: str
    type: str = field(default="link-button", init=False)


@dataclass(frozen=True)
class SelectOption:
    label: str
    value: str


@dataclass(frozen=True)
class Select:
    id: str
    label: str
    options: tuple[SelectOption, ...] = ()
    placeholder: Optional[str] = None
    type: str = field(default="select", init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "options", tuple(self.options))


ActionControl = Union[Button, LinkButton, Select]


@dataclass(frozen=True)
class Actions:
    """Container whose children are candidate action controls."""

    children: tuple[ActionControl, ...] = ()
    type: str = field(default="actions", init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "children", tuple(self.children))


@dataclass(frozen=True)
class Section:
    children: tuple["CardChild", ...] = ()
    type: str = field(default="section", init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "children", tuple(self.children))


CardChild = Union[Text, Divider, Section, Actions, Button, LinkButton, Select]


@dataclass(frozen=True)
class Card:
    children: tuple[CardChild, ...] = ()
    title: Optional[str] = None
    subtitle: Optional[str] = None
    type: str = field(default="card", init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "children", tuple(self.children))


def _require_str(node: Mapping[str, Any], key: str) -> str:
    if not isinstance(node, Mapping):
        raise ValidationError("chat", f"Card node must be a mapping, got {type(node).__name__}")
    value = node.get(key)
    if not isinstance(value, str):
        raise ValidationError("chat", f"Card node '{node.get('type')}' requires string field '{key}'")
    return value


def _optional_str(node: Mapping[str, Any], key: str) -> Optional[str]:
    value = node.get(key)
    return value if isinstance(value, str) else None


def _parse_children(node: Mapping[str, Any]) -> tuple[CardChild, ...]:
    children = node.get("children", [])
    if not isinstance(children, (list, tuple)):
        raise ValidationError("chat", f"Card node '{node.get('type')}' has non-list children")
    return tuple(_parse_node(child) for child in children)


def _parse_node(node: Any) -> CardChild:
    if not isinstance(node, Mapping):
        raise ValidationError("chat", f"Card node must be a mapping, got {type(node).__name__}")

    kind = node.get("type")
    if kind == "text":
        return Text(content=_require_str(node, "content"), style=_optional_str(node, "style"))
    if kind == "divider":
        return Divider()
    if kind == "section":
        return Section(children=_parse_children(node))
    if kind == "actions":
        return Actions(children=_parse_children(node))
    if kind == "button":
        return Button(
            id=_require_str(node, "id"),
            label=_require_str(node, "label"),
            value=_optional_str(node, "value"),
            style=_optional_str(node, "style"),
        )
    if kind == "link-button":
        return LinkButton(label=_require_str(node, "label"), url=_require_str(node, "url"))
    if kind == "select":
        options = tuple(
            SelectOption(label=_require_str(opt, "label"), value=_require_str(opt, "value"))
            for opt in node.get("options", [])
        )
        return Select(
            id=_require_str(node, "id"),
            label=_require_str(node, "label"),
            options=options,
            placeholder=_optional_str(node, "placeholder"),
        )
    raise ValidationError("chat", f"Unknown card node type: {kind!r}")


def parse_card(data: Mapping[str, Any]) -> Card:
    """Build a Card from a JSON-shaped dict (``{"type": "card", "children": [...]}``)."""
    if not isinstance(data, Mapping) or data.get("type") != "card":
        raise ValidationError("chat", "Card document root must have type 'card'")
    return Card(
        children=_parse_children(data),
        title=_optional_str(data, "title"),
        subtitle=_optional_str(data, "subtitle"),
    )

"""Flatten Atlassian Document Format (ADF) trees into plain text."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Mapping, Union

_BLANK_RUN_RE = re.compile(r"\n{3,}")
_LIST_ITEM_PREFIX = "- "


@dataclass(frozen=True)
class Text:
    """A run of literal text."""

    value: str


@dataclass(frozen=True)
class HardBreak:
    """A forced line break inside a block."""


@dataclass(frozen=True)
class Paragraph:
    children: tuple[RichNode, ...] = ()


@dataclass(frozen=True)
class Heading:
    children: tuple[RichNode, ...] = ()


@dataclass(frozen=True)
class ListItem:
    children: tuple[RichNode, ...] = ()


@dataclass(frozen=True)
class BulletList:
    children: tuple[RichNode, ...] = ()


@dataclass(frozen=True)
class OrderedList:
    children: tuple[RichNode, ...] = ()


@dataclass(frozen=True)
class Generic:
    """Any other node that carries nested content (table, panel, blockquote...)."""

    node_type: str | None = None
    children: tuple[RichNode, ...] = ()


@dataclass(frozen=True)
class Unknown:
    """A node with no recognizable shape. Contributes no text."""

    node_type: str | None = None


RichNode = Union[
    Text,
    HardBreak,
    Paragraph,
    Heading,
    ListItem,
    BulletList,
    OrderedList,
    Generic,
    Unknown,
]


@dataclass(frozen=True)
class RichDocument:
    """Root of an ADF document (the ``{"type": "doc", "content": [...]}`` node)."""

    content: tuple[RichNode, ...] = field(default_factory=tuple)


_CONTAINER_TYPES: dict[str, type] = {
    "paragraph": Paragraph,
    "heading": Heading,
    "listItem": ListItem,
    "bulletList": BulletList,
    "orderedList": OrderedList,
}


def parse_document(raw: Any) -> RichDocument | None:
    """Build a RichDocument from decoded JSON.

    Returns None when ``raw`` is not a mapping. A missing or malformed
    ``content`` field yields an empty document rather than an error.
    """
    if isinstance(raw, RichDocument):
        return raw
    if not isinstance(raw, Mapping):
        return None
    return RichDocument(content=_parse_children(raw.get("content")))


def parse_node(raw: Any) -> RichNode:
    """Map one decoded ADF node onto its RichNode variant."""
    if isinstance(raw, list):
        return Generic(node_type=None, children=_parse_children(raw))
    if not isinstance(raw, Mapping):
        return Unknown()

    node_type = raw.get("type")
    if not isinstance(node_type, str):
        node_type = None

    if node_type == "text":
        value = raw.get("text")
        return Text(value=value if isinstance(value, str) else "")
    if node_type == "hardBreak":
        return HardBreak()

    container = _CONTAINER_TYPES.get(node_type or "")
    if container is not None:
        return container(children=_parse_children(raw.get("content")))

    content = raw.get("content")
    if isinstance(content, list):
        return Generic(node_type=node_type, children=_parse_children(content))
    return Unknown(node_type=node_type)


def _parse_children(content: Any) -> tuple[RichNode, ...]:
    if not isinstance(content, list):
        return ()
    return tuple(parse_node(child) for child in content)


def flatten(doc: RichDocument | Mapping[str, Any] | str | None) -> str:
    """Convert a rich-text description into plain text.

    Plain strings pass through untouched since Jira Server (and API v2)
    already return descriptions as text. Paragraphs and headings end with a
    newline, list items are rendered as ``- item`` lines, and runs of blank
    lines are collapsed to a single blank line.
    """
    if doc is None:
        return ""
    if isinstance(doc, str):
        return doc

    document = parse_document(doc)
    if document is None or not document.content:
        return ""

    text = _render_children(document.content)
    text = _BLANK_RUN_RE.sub("\n\n", text)
    return text.strip()


def _render_children(children: tuple[RichNode, ...]) -> str:
    return "".join(_render_node(child) for child in children)


def _render_node(node: RichNode) -> str:
    if isinstance(node, Text):
        return node.value
    if isinstance(node, HardBreak):
        return "\n"
    if isinstance(node, (Paragraph, Heading)):
        text = _render_children(node.children)
        return text + "\n" if text else ""
    if isinstance(node, ListItem):
        text = _render_children(node.children)
        if not text:
            return ""
        return _LIST_ITEM_PREFIX + text.rstrip() + "\n"
    if isinstance(node, (BulletList, OrderedList, Generic)):
        return _render_children(node.children)
    return ""

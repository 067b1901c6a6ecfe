"""Immutable markup tree handed from the parser to the Block Kit transformer.

Node kinds follow CommonMark naming. Only Document, Heading, Paragraph,
TextBlock, Blockquote, List, ListItem, Text, Emphasis and Link have rendering
rules; the remaining kinds exist so unsupported markup can be named precisely
when conversion fails.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from enum import StrEnum


class NodeKind(StrEnum):
    # Renderable
    DOCUMENT = "Document"
    HEADING = "Heading"
    PARAGRAPH = "Paragraph"
    TEXT_BLOCK = "TextBlock"  # paragraph inside a tight list item
    BLOCKQUOTE = "Blockquote"
    LIST = "List"
    LIST_ITEM = "ListItem"
    TEXT = "Text"
    EMPHASIS = "Emphasis"
    LINK = "Link"

    # Recognised, never rendered
    CODE_BLOCK = "CodeBlock"
    FENCED_CODE_BLOCK = "FencedCodeBlock"
    HTML_BLOCK = "HTMLBlock"
    THEMATIC_BREAK = "ThematicBreak"
    TABLE = "Table"
    IMAGE = "Image"
    CODE_SPAN = "CodeSpan"
    RAW_HTML = "RawHTML"


@dataclass(frozen=True)
class Node:
    kind: NodeKind
    children: tuple["Node", ...] = ()
    raw_text: str = ""

    level: int = 0  # Heading
    ordered: bool = False  # List
    start: int | None = None  # List, ordered only
    strength: int = 0  # Emphasis: 1 = italic, 2 = bold
    destination: str = ""  # Link, Image
    title: str | None = None  # Link, Image
    soft_line_break: bool = False  # Text
    hard_line_break: bool = False  # Text

    def walk(self) -> Iterator["Node"]:
        """Yield this node and all descendants in document order."""
        yield self
        for child in self.children:
            yield from child.walk()

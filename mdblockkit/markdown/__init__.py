"""Markdown parsing into the immutable markup tree."""

from mdblockkit.markdown.nodes import Node, NodeKind
from mdblockkit.markdown.parser import (
    build_document,
    parse_document,
    parse_markdown,
)

__all__ = [
    # Parser
    "parse_markdown",
    "parse_document",
    "build_document",
    # Tree
    "Node",
    "NodeKind",
]

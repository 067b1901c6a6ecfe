"""Markdown parsing using markdown-it-py.

Configures markdown-it with:
- CommonMark base
- GFM tables (recognised so they can be rejected, never rendered)

and adapts its SyntaxTreeNode into our immutable Node tree.
"""

from dataclasses import replace
from typing import cast

from loguru import logger
from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode

from mdblockkit.exceptions import UnsupportedNodeError
from mdblockkit.markdown.nodes import Node, NodeKind


def create_parser() -> MarkdownIt:
    """Create configured markdown-it parser."""
    md = MarkdownIt("commonmark")
    md.enable("table")
    return md


# Singleton parser instance
_parser: MarkdownIt | None = None


def get_parser() -> MarkdownIt:
    """Get or create the singleton parser instance."""
    global _parser
    if _parser is None:
        _parser = create_parser()
    return _parser


def parse_markdown(text: str) -> SyntaxTreeNode:
    """Parse markdown text into AST.

    Args:
        text: Markdown text to parse

    Returns:
        Root SyntaxTreeNode of the AST
    """
    parser = get_parser()
    tokens = parser.parse(text)
    return SyntaxTreeNode(tokens)


def parse_document(text: str) -> Node:
    """Parse markdown text straight into a Document node."""
    return build_document(parse_markdown(text))


# Leaf blocks with no rendering rule; content kept for diagnostics only
_OPAQUE_BLOCKS = {
    "fence": NodeKind.FENCED_CODE_BLOCK,
    "code_block": NodeKind.CODE_BLOCK,
    "html_block": NodeKind.HTML_BLOCK,
    "hr": NodeKind.THEMATIC_BREAK,
    "table": NodeKind.TABLE,
}

_OPAQUE_INLINES = {
    "code_inline": NodeKind.CODE_SPAN,
    "html_inline": NodeKind.RAW_HTML,
}


def build_document(tree: SyntaxTreeNode) -> Node:
    """Convert a markdown-it root node into a Document node."""
    children = tuple(_build_block(child) for child in tree.children)
    logger.debug(f"Built document with {len(children)} top-level blocks")
    return Node(kind=NodeKind.DOCUMENT, children=children)


def _build_block(node: SyntaxTreeNode) -> Node:
    if node.type == "heading":
        children = _build_inline_container(node)
        return Node(
            kind=NodeKind.HEADING,
            children=children,
            raw_text=_join_text(children),
            level=int(node.tag[1:]),  # h1 -> 1, h2 -> 2, etc.
        )

    if node.type == "paragraph":
        children = _build_inline_container(node)
        # markdown-it hides paragraphs of tight list items
        kind = NodeKind.TEXT_BLOCK if node.hidden else NodeKind.PARAGRAPH
        return Node(kind=kind, children=children, raw_text=_join_text(children))

    if node.type == "blockquote":
        return Node(kind=NodeKind.BLOCKQUOTE, children=tuple(_build_block(c) for c in node.children))

    if node.type in ("bullet_list", "ordered_list"):
        ordered = node.type == "ordered_list"
        start = cast(int | None, node.attrs.get("start")) if ordered else None
        return Node(
            kind=NodeKind.LIST,
            children=tuple(_build_block(c) for c in node.children),
            ordered=ordered,
            start=start,
        )

    if node.type == "list_item":
        return Node(kind=NodeKind.LIST_ITEM, children=tuple(_build_block(c) for c in node.children))

    if node.type in _OPAQUE_BLOCKS:
        return Node(kind=_OPAQUE_BLOCKS[node.type], raw_text=node.content or "")

    raise UnsupportedNodeError(node.type)


def _build_inline_container(node: SyntaxTreeNode) -> tuple[Node, ...]:
    """Heading and paragraph nodes wrap a single `inline` node holding the content."""
    inline = node.children[0] if node.children else None
    if not inline:
        return ()
    return _build_inlines(inline.children)


def _build_inlines(children: list[SyntaxTreeNode]) -> tuple[Node, ...]:
    nodes: list[Node] = []
    for child in children:
        if child.type in ("softbreak", "hardbreak"):
            nodes = _mark_line_break(nodes, hard=child.type == "hardbreak")
        else:
            nodes.append(_build_inline(child))
    return tuple(nodes)


def _mark_line_break(nodes: list[Node], hard: bool) -> list[Node]:
    """Fold a line break into the last text run of `nodes`.

    Descends into a trailing emphasis. Anything else (link, image, nothing at all)
    gets an empty text node carrying the break.
    """
    last = nodes[-1] if nodes else None

    if last is not None and last.kind is NodeKind.TEXT:
        if hard:
            nodes[-1] = replace(last, hard_line_break=True)
        else:
            nodes[-1] = replace(last, soft_line_break=True)
    elif last is not None and last.kind is NodeKind.EMPHASIS:
        nodes[-1] = replace(last, children=tuple(_mark_line_break(list(last.children), hard)))
    else:
        nodes.append(Node(kind=NodeKind.TEXT, soft_line_break=not hard, hard_line_break=hard))

    return nodes


def _build_inline(node: SyntaxTreeNode) -> Node:
    if node.type == "text":
        return Node(kind=NodeKind.TEXT, raw_text=node.content or "")

    if node.type in ("em", "strong"):
        children = _build_inlines(node.children)
        return Node(
            kind=NodeKind.EMPHASIS,
            children=children,
            raw_text=_join_text(children),
            strength=1 if node.type == "em" else 2,
        )

    if node.type == "link":
        # Autolinks (<https://...>) arrive as regular links
        children = _build_inlines(node.children)
        return Node(
            kind=NodeKind.LINK,
            children=children,
            raw_text=_join_text(children),
            destination=cast(str, node.attrs.get("href", "")),
            title=cast(str | None, node.attrs.get("title")),
        )

    if node.type == "image":
        # Alt text is in node.content, not attrs['alt']
        return Node(
            kind=NodeKind.IMAGE,
            raw_text=node.content or "",
            destination=cast(str, node.attrs.get("src", "")),
            title=cast(str | None, node.attrs.get("title")),
        )

    if node.type in _OPAQUE_INLINES:
        return Node(kind=_OPAQUE_INLINES[node.type], raw_text=node.content or "")

    raise UnsupportedNodeError(node.type)


def _join_text(children: tuple[Node, ...]) -> str:
    return "".join(child.raw_text for child in children)

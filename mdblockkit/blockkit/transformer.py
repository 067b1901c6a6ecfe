"""Transform the markup tree into Slack Block Kit rich text blocks.

Walks a Document node and produces one RichTextBlock per top-level markup
block. Block Kit is shallower than markdown, so two structural rewrites happen
on the way:

- Nested lists become sibling rich_text_list elements that follow the items
  rendered so far, with `indent` recording the nesting depth.
- Blockquotes flatten every quoted paragraph into a single rich_text_quote.
  Quotes cannot nest and cannot hold lists.

Unsupported markup raises instead of being skipped.
"""

from collections.abc import Callable, Sequence

from loguru import logger

from mdblockkit.blockkit.context import BOLD, ITALIC, PLAIN, RenderContext
from mdblockkit.blockkit.models import (
    InlineElement,
    RichTextBlock,
    RichTextLink,
    RichTextList,
    RichTextQuote,
    RichTextSection,
    RichTextText,
)
from mdblockkit.exceptions import (
    NestedQuoteError,
    StructureError,
    UnsupportedElementError,
    UnsupportedNodeError,
)
from mdblockkit.markdown.nodes import Node, NodeKind

# Sections are concatenated without spacing, so paragraphs carry their own
PARAGRAPH_BREAK = "\n\n"

_LINK_TEXT_KINDS = frozenset({NodeKind.TEXT, NodeKind.EMPHASIS})

BlockHandler = Callable[[Node, RenderContext], list[RichTextBlock]]
InlineHandler = Callable[[Node, RenderContext], list[InlineElement]]


class BlockKitTransformer:
    """Transforms a Document node into a list of RichTextBlock.

    Stateless: all rendering state lives in the RenderContext passed along the
    recursion, so one instance can be shared between conversions.
    """

    def __init__(self) -> None:
        self._block_handlers: dict[NodeKind, BlockHandler] = {
            NodeKind.HEADING: self.transform_heading,
            NodeKind.PARAGRAPH: self.transform_paragraph,
            NodeKind.TEXT_BLOCK: self.transform_paragraph,
            NodeKind.BLOCKQUOTE: self.transform_blockquote,
            NodeKind.LIST: self.transform_list,
        }
        self._inline_handlers: dict[NodeKind, InlineHandler] = {
            NodeKind.TEXT: self._transform_text,
            NodeKind.EMPHASIS: self._transform_emphasis,
            NodeKind.LINK: self._transform_link,
        }

    def transform(self, document: Node) -> list[RichTextBlock]:
        """Transform Document root to blocks."""
        _assert_kind(document, NodeKind.DOCUMENT)
        blocks = self.transform_blocks(document, RenderContext())
        logger.debug(f"Transformed {len(document.children)} markup blocks into {len(blocks)} rich_text blocks")
        return blocks

    # === BLOCK RENDERER ===

    def transform_blocks(self, node: Node, ctx: RenderContext) -> list[RichTextBlock]:
        """Transform all block children of a container node, in document order."""
        blocks: list[RichTextBlock] = []
        for child in node.children:
            blocks.extend(self.transform_block(child, ctx))
        return blocks

    def transform_block(self, node: Node, ctx: RenderContext) -> list[RichTextBlock]:
        handler = self._block_handlers.get(node.kind)
        if handler is None:
            raise UnsupportedNodeError(node.kind.value)
        return handler(node, ctx)

    def transform_heading(self, node: Node, ctx: RenderContext) -> list[RichTextBlock]:
        """Headings render as a bold section; Block Kit has no heading element."""
        _assert_kind(node, NodeKind.HEADING)
        elements = self.transform_inline(node.children, ctx.in_heading())
        return [_section_block(elements)]

    def transform_paragraph(self, node: Node, ctx: RenderContext) -> list[RichTextBlock]:
        """Transform Paragraph or TextBlock (tight list item content)."""
        _assert_kind(node, NodeKind.PARAGRAPH, NodeKind.TEXT_BLOCK)
        elements = self.transform_inline(node.children, ctx)
        return [_section_block(elements)]

    # === LIST ASSEMBLER ===

    def transform_list(self, node: Node, ctx: RenderContext) -> list[RichTextBlock]:
        """Transform a list into one block of flat rich_text_list elements.

        Items are buffered as sections until an item turns out to contain a
        nested list. The buffer is then flushed as a list at this depth and
        the nested list follows it as a sibling, so items keep their order
        around the nested list.
        """
        _assert_kind(node, NodeKind.LIST)
        style = "ordered" if node.ordered else "bullet"
        inner = ctx.in_list()
        indent = inner.list_depth - 1

        elements: list[RichTextList] = []
        pending: list[RichTextSection] = []

        def flush() -> None:
            if pending:
                elements.append(RichTextList(style=style, indent=indent, elements=list(pending)))
                pending.clear()

        for item in node.children:
            for block in self.transform_blocks(item, inner):
                for element in block.elements:
                    if isinstance(element, RichTextSection):
                        pending.append(element)
                    elif isinstance(element, RichTextList):
                        flush()
                        elements.append(element)
                    else:
                        raise UnsupportedElementError(element.type, "rich_text_list")

        flush()
        return [RichTextBlock(elements=elements)]

    # === QUOTE ASSEMBLER ===

    def transform_blockquote(self, node: Node, ctx: RenderContext) -> list[RichTextBlock]:
        """Transform a blockquote into a single flat rich_text_quote."""
        _assert_kind(node, NodeKind.BLOCKQUOTE)
        if ctx.blockquote_depth > 0:
            raise NestedQuoteError()

        blocks = self.transform_blocks(node, ctx.in_blockquote())

        items: list[InlineElement] = []
        for block in blocks:
            for element in block.elements:
                if not isinstance(element, RichTextSection):
                    raise UnsupportedElementError(element.type, "rich_text_quote")
                items.extend(element.elements)

        return [RichTextBlock(elements=[RichTextQuote(elements=items)])]

    # === INLINE RENDERER ===

    def transform_inline(self, children: Sequence[Node], ctx: RenderContext) -> list[InlineElement]:
        """Transform inline nodes into styled elements, one per text or link leaf.

        Adjacent elements are never merged, even with identical styles.
        """
        result: list[InlineElement] = []
        for child in children:
            handler = self._inline_handlers.get(child.kind)
            if handler is None:
                raise UnsupportedNodeError(child.kind.value)
            result.extend(handler(child, ctx))
        return result

    def _transform_text(self, node: Node, ctx: RenderContext) -> list[InlineElement]:
        text = node.raw_text
        if node.soft_line_break or node.hard_line_break:
            text += "\n"
        return [RichTextText(text=text, style=ctx.style.to_text_style())]

    def _transform_emphasis(self, node: Node, ctx: RenderContext) -> list[InlineElement]:
        """Compose this emphasis onto the style in force and recurse.

        Recursing (rather than styling the flattened text once) is what keeps
        `_italic **bold** italic_` as three differently styled runs.
        """
        contributed = PLAIN
        if node.strength == 1:
            contributed |= ITALIC
        if node.strength >= 2 or ctx.inside_heading:
            contributed |= BOLD
        return self.transform_inline(node.children, ctx.with_style(contributed))

    def _transform_link(self, node: Node, ctx: RenderContext) -> list[InlineElement]:
        for descendant in node.walk():
            if descendant is not node and descendant.kind not in _LINK_TEXT_KINDS:
                raise UnsupportedNodeError(descendant.kind.value)
        # Link text is flattened and takes the style in force, so a link inside
        # `_..._` is italic like the text around it
        return [RichTextLink(url=node.destination, text=node.raw_text, style=ctx.style.to_text_style())]


def _section_block(elements: list[InlineElement]) -> RichTextBlock:
    elements = [*elements, RichTextText(text=PARAGRAPH_BREAK)]
    return RichTextBlock(elements=[RichTextSection(elements=elements)])


def _assert_kind(node: Node, *kinds: NodeKind) -> None:
    if node.kind not in kinds:
        raise StructureError(" or ".join(kind.value for kind in kinds), node.kind.value)


def transform_to_blocks(document: Node) -> list[RichTextBlock]:
    """Transform Document node to rich_text blocks."""
    return BlockKitTransformer().transform(document)

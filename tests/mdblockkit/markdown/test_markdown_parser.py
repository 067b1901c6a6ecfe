"""Tests for markdown parsing and the markdown-it to Node adapter."""

import pytest

from mdblockkit.exceptions import UnsupportedNodeError
from mdblockkit.markdown import Node, NodeKind, build_document, parse_document, parse_markdown
from mdblockkit.markdown.parser import get_parser


def only_child(node: Node) -> Node:
    assert len(node.children) == 1
    return node.children[0]


class TestParseMarkdown:
    """Test the markdown-it wrapper."""

    def test_parse_simple_text(self):
        ast = parse_markdown("Hello world")
        assert ast.type == "root"
        assert len(ast.children) == 1
        assert ast.children[0].type == "paragraph"

    def test_parser_is_singleton(self):
        assert get_parser() is get_parser()

    def test_tables_enabled(self):
        ast = parse_markdown("| A | B |\n|---|---|\n| 1 | 2 |")
        assert ast.children[0].type == "table"


class TestBlockMapping:
    def test_empty_document(self):
        doc = parse_document("")
        assert doc.kind is NodeKind.DOCUMENT
        assert doc.children == ()

    def test_paragraph(self):
        para = only_child(parse_document("Hello world"))
        assert para.kind is NodeKind.PARAGRAPH
        assert para.raw_text == "Hello world"
        text = only_child(para)
        assert text.kind is NodeKind.TEXT
        assert text.raw_text == "Hello world"

    @pytest.mark.parametrize(("md", "level"), [("# Title", 1), ("### Title", 3), ("Title\n-----", 2)])
    def test_heading_level(self, md, level):
        heading = only_child(parse_document(md))
        assert heading.kind is NodeKind.HEADING
        assert heading.level == level
        assert heading.raw_text == "Title"

    def test_tight_list_items_hold_text_blocks(self):
        lst = only_child(parse_document("- a\n- b"))
        assert lst.kind is NodeKind.LIST
        assert not lst.ordered
        assert [item.kind for item in lst.children] == [NodeKind.LIST_ITEM, NodeKind.LIST_ITEM]
        assert [only_child(item).kind for item in lst.children] == [NodeKind.TEXT_BLOCK, NodeKind.TEXT_BLOCK]

    def test_loose_list_items_hold_paragraphs(self):
        lst = only_child(parse_document("- a\n\n- b"))
        assert [only_child(item).kind for item in lst.children] == [NodeKind.PARAGRAPH, NodeKind.PARAGRAPH]

    def test_ordered_list_start(self):
        lst = only_child(parse_document("3. three\n4. four"))
        assert lst.ordered
        assert lst.start == 3

    def test_ordered_list_default_start(self):
        lst = only_child(parse_document("1. one"))
        assert lst.ordered
        assert lst.start is None

    def test_nested_list(self):
        lst = only_child(parse_document("- a\n  - b"))
        item = only_child(lst)
        assert [c.kind for c in item.children] == [NodeKind.TEXT_BLOCK, NodeKind.LIST]

    def test_blockquote(self):
        quote = only_child(parse_document("> quoted"))
        assert quote.kind is NodeKind.BLOCKQUOTE
        assert only_child(quote).kind is NodeKind.PARAGRAPH

    @pytest.mark.parametrize(
        ("md", "kind"),
        [
            ("```python\nprint('hi')\n```", NodeKind.FENCED_CODE_BLOCK),
            ("    indented code", NodeKind.CODE_BLOCK),
            ("---", NodeKind.THEMATIC_BREAK),
            ("<div>\nhtml\n</div>", NodeKind.HTML_BLOCK),
            ("| A | B |\n|---|---|\n| 1 | 2 |", NodeKind.TABLE),
        ],
    )
    def test_unrenderable_blocks_are_named(self, md, kind):
        assert only_child(parse_document(md)).kind is kind


class TestInlineMapping:
    def test_emphasis_strength(self):
        para = only_child(parse_document("_a_ **b**"))
        em, space, strong = para.children
        assert (em.kind, em.strength, em.raw_text) == (NodeKind.EMPHASIS, 1, "a")
        assert (space.kind, space.raw_text) == (NodeKind.TEXT, " ")
        assert (strong.kind, strong.strength, strong.raw_text) == (NodeKind.EMPHASIS, 2, "b")

    def test_nested_emphasis_keeps_structure(self):
        para = only_child(parse_document("some _italic and **bold** text_ test"))
        assert [c.kind for c in para.children] == [NodeKind.TEXT, NodeKind.EMPHASIS, NodeKind.TEXT]
        em = para.children[1]
        assert [c.raw_text for c in em.children] == ["italic and ", "bold", " text"]
        assert em.children[1].kind is NodeKind.EMPHASIS
        assert em.children[1].strength == 2
        assert em.raw_text == "italic and bold text"

    def test_link(self):
        link = only_child(only_child(parse_document('[the docs](https://example.com "Docs")')))
        assert link.kind is NodeKind.LINK
        assert link.destination == "https://example.com"
        assert link.title == "Docs"
        assert link.raw_text == "the docs"

    def test_link_text_is_flattened(self):
        link = only_child(only_child(parse_document("[**bold** link](https://example.com)")))
        assert link.raw_text == "bold link"

    def test_autolink(self):
        link = only_child(only_child(parse_document("<https://example.com>")))
        assert link.kind is NodeKind.LINK
        assert link.destination == "https://example.com"
        assert link.raw_text == "https://example.com"

    def test_soft_break_marks_preceding_text(self):
        first, second = only_child(parse_document("line one\nline two")).children
        assert first.raw_text == "line one"
        assert first.soft_line_break
        assert not first.hard_line_break
        assert second.raw_text == "line two"
        assert not second.soft_line_break

    def test_hard_break_marks_preceding_text(self):
        first, _ = only_child(parse_document("line one  \nline two")).children
        assert first.raw_text == "line one"
        assert first.hard_line_break

    def test_break_after_emphasis_marks_inner_text(self):
        em, after = only_child(parse_document("*a*\nb")).children
        assert em.kind is NodeKind.EMPHASIS
        assert only_child(em).soft_line_break
        assert after.raw_text == "b"

    def test_break_after_link_inserts_empty_text(self):
        link, brk, after = only_child(parse_document("[l](https://example.com)\nb")).children
        assert link.kind is NodeKind.LINK
        assert (brk.kind, brk.raw_text, brk.soft_line_break) == (NodeKind.TEXT, "", True)
        assert after.raw_text == "b"

    @pytest.mark.parametrize(
        ("md", "kind"),
        [
            ("![alt](image.png)", NodeKind.IMAGE),
            ("`code`", NodeKind.CODE_SPAN),
            ("a <b>tag</b>", NodeKind.RAW_HTML),
        ],
    )
    def test_unrenderable_inlines_are_named(self, md, kind):
        para = only_child(parse_document(md))
        assert kind in [c.kind for c in para.children]

    def test_image_alt_and_source(self):
        image = only_child(only_child(parse_document("![a cat](cat.png)")))
        assert image.raw_text == "a cat"
        assert image.destination == "cat.png"


class TestUnknownTokens:
    def test_strikethrough_stays_literal(self):
        # strikethrough is not enabled
        text = only_child(only_child(parse_document("~~gone~~")))
        assert text.kind is NodeKind.TEXT
        assert text.raw_text == "~~gone~~"

    def test_unmapped_type_raises(self):
        from markdown_it import MarkdownIt
        from markdown_it.tree import SyntaxTreeNode

        md = MarkdownIt("commonmark").enable("strikethrough")
        ast = SyntaxTreeNode(md.parse("~~gone~~"))
        with pytest.raises(UnsupportedNodeError) as exc_info:
            build_document(ast)
        assert exc_info.value.kind == "s"


class TestNode:
    def test_walk_is_document_order(self):
        doc = parse_document("# T\n\nsome _a **b**_")
        texts = [n.raw_text for n in doc.walk() if n.kind is NodeKind.TEXT]
        assert texts == ["T", "some ", "a ", "b"]

    def test_nodes_are_immutable(self):
        doc = parse_document("text")
        with pytest.raises(AttributeError):
            doc.kind = NodeKind.PARAGRAPH  # type: ignore[misc]

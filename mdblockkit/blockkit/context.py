"""Render context threaded through the transformer by argument.

Every scoped change returns a copy, so a caller's context is untouched however
the callee exits.
"""

from dataclasses import dataclass, field, replace

from mdblockkit.blockkit.models import TextStyle


@dataclass(frozen=True)
class Style:
    bold: bool = False
    italic: bool = False

    def __or__(self, other: "Style") -> "Style":
        return Style(bold=self.bold or other.bold, italic=self.italic or other.italic)

    def to_text_style(self) -> TextStyle | None:
        """Schema style, or None when nothing is set (Slack falls back to plain text)."""
        if not (self.bold or self.italic):
            return None
        return TextStyle(bold=self.bold or None, italic=self.italic or None)


PLAIN = Style()
BOLD = Style(bold=True)
ITALIC = Style(italic=True)


@dataclass(frozen=True)
class RenderContext:
    inside_heading: bool = False
    blockquote_depth: int = 0
    list_depth: int = 0
    style: Style = field(default=PLAIN)  # composed from enclosing heading/emphasis

    def in_heading(self) -> "RenderContext":
        return replace(self, inside_heading=True, style=self.style | BOLD)

    def in_blockquote(self) -> "RenderContext":
        return replace(self, blockquote_depth=self.blockquote_depth + 1)

    def in_list(self) -> "RenderContext":
        return replace(self, list_depth=self.list_depth + 1)

    def with_style(self, extra: Style) -> "RenderContext":
        return replace(self, style=self.style | extra)

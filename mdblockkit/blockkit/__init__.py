"""Slack Block Kit rich text models and the markup tree transformer."""

from mdblockkit.blockkit.context import RenderContext, Style
from mdblockkit.blockkit.models import (
    InlineElement,
    MessagePayload,
    RichTextBlock,
    RichTextElement,
    RichTextLink,
    RichTextList,
    RichTextQuote,
    RichTextSection,
    RichTextText,
    TextStyle,
)
from mdblockkit.blockkit.transformer import (
    BlockKitTransformer,
    transform_to_blocks,
)

__all__ = [
    # Transformer
    "BlockKitTransformer",
    "transform_to_blocks",
    "RenderContext",
    "Style",
    # Models
    "MessagePayload",
    "RichTextBlock",
    "RichTextElement",
    "RichTextSection",
    "RichTextList",
    "RichTextQuote",
    "InlineElement",
    "RichTextText",
    "RichTextLink",
    "TextStyle",
]

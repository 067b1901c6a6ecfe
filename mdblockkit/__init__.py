"""Convert markdown into Slack Block Kit rich text blocks."""

from mdblockkit.blockkit import MessagePayload, RichTextBlock, transform_to_blocks
from mdblockkit.converter import convert_markdown
from mdblockkit.exceptions import (
    ConversionError,
    NestedQuoteError,
    StructureError,
    UnsupportedElementError,
    UnsupportedNodeError,
)
from mdblockkit.markdown import parse_document

__version__ = "0.1.0"

__all__ = [
    "convert_markdown",
    "parse_document",
    "transform_to_blocks",
    "MessagePayload",
    "RichTextBlock",
    "ConversionError",
    "StructureError",
    "UnsupportedNodeError",
    "UnsupportedElementError",
    "NestedQuoteError",
]

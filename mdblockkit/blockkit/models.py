"""Data models for Slack Block Kit rich text.

Only the subset produced by the transformer is modelled: rich_text blocks made
of sections, lists and quotes, which in turn hold styled text and links.
Serialize with exclude_none so absent styles and flags disappear from the JSON.
"""

from typing import Literal

from pydantic import BaseModel, Field

# === INLINE ELEMENTS ===


class TextStyle(BaseModel):
    bold: bool | None = None
    italic: bool | None = None


class RichTextText(BaseModel):
    type: Literal["text"] = "text"
    text: str
    style: TextStyle | None = None


class RichTextLink(BaseModel):
    type: Literal["link"] = "link"
    url: str
    text: str
    style: TextStyle | None = None


InlineElement = RichTextText | RichTextLink


# === RICH TEXT ELEMENTS ===


class RichTextSection(BaseModel):
    type: Literal["rich_text_section"] = "rich_text_section"
    elements: list[InlineElement] = Field(default_factory=list)


class RichTextList(BaseModel):
    type: Literal["rich_text_list"] = "rich_text_list"
    style: Literal["bullet", "ordered"]
    indent: int = Field(default=0, ge=0)
    elements: list["RichTextSection | RichTextList"] = Field(default_factory=list)


class RichTextQuote(BaseModel):
    type: Literal["rich_text_quote"] = "rich_text_quote"
    elements: list[InlineElement] = Field(default_factory=list)  # Flat: no nested lists or quotes


RichTextElement = RichTextSection | RichTextList | RichTextQuote

# Update forward references
RichTextList.model_rebuild()


# === BLOCKS ===


class RichTextBlock(BaseModel):
    type: Literal["rich_text"] = "rich_text"
    block_id: str | None = None
    elements: list[RichTextElement] = Field(default_factory=list)


class MessagePayload(BaseModel):
    """The object posted to Slack: `{"blocks": [...]}`."""

    blocks: list[RichTextBlock] = Field(default_factory=list)

    def to_json(self, indent: int | None = 2) -> str:
        return self.model_dump_json(indent=indent, exclude_none=True)

    def to_dict(self) -> dict:
        return self.model_dump(mode="json", exclude_none=True)

from loguru import logger

from mdblockkit.blockkit import MessagePayload, transform_to_blocks
from mdblockkit.markdown import parse_document


def convert_markdown(text: str) -> MessagePayload:
    """Convert markdown text to a Block Kit message payload.

    Raises:
        ConversionError: on the first unsupported or malformed construct. Nothing
            is returned for the parts that did convert.
    """
    document = parse_document(text)
    blocks = transform_to_blocks(document)
    logger.debug(f"Converted {len(text)} chars of markdown into {len(blocks)} blocks")
    return MessagePayload(blocks=blocks)

"""Convert a markdown file to Slack Block Kit JSON.

Usage:
  mdblockkit README.md
  mdblockkit notes.md --indent 4 > payload.json

Prints `{"blocks": [...]}` to stdout. Exits 1 if the file cannot be read or
contains markdown Block Kit cannot represent (tables, images, code, nested quotes).
"""

import sys
from pathlib import Path
from typing import Annotated

import tyro
from loguru import logger

from mdblockkit.config import Settings
from mdblockkit.converter import convert_markdown
from mdblockkit.exceptions import ConversionError
from mdblockkit.logging_config import configure_logging


def main(
    path: Annotated[Path, tyro.conf.Positional],
    indent: int | None = None,
) -> None:
    """Convert a markdown file to Block Kit JSON.

    Args:
        path: Markdown file to convert.
        indent: JSON indentation; defaults to MDBLOCKKIT_JSON_INDENT (2).
    """
    settings = Settings()
    configure_logging(settings.log_level, settings.log_file)

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Could not read {path}: {e}")
        sys.exit(1)

    try:
        payload = convert_markdown(text)
    except ConversionError as e:
        logger.bind(path=str(path), **e.to_dict()).error(f"Could not convert {path}: {e}")
        sys.exit(1)

    print(payload.to_json(indent=settings.json_indent if indent is None else indent))


def entrypoint() -> None:
    tyro.cli(main, description=__doc__)


if __name__ == "__main__":
    entrypoint()

"""Loading layer for reading TSV files from disk."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .parsing import TsvError, TsvTable, parse

_BOM = "\ufeff"


@dataclass
class LoadConfig:
    """Configuration for loading a TSV file."""

    source: Path
    encoding: str = "utf-8"
    errors: str = "strict"
    strip_bom: bool = False


def read_text(config: LoadConfig, logger: logging.Logger) -> str:
    """Read and decode ``config.source``.

    Raises:
        FileNotFoundError: The file does not exist.
        TsvError: The file cannot be decoded with the configured encoding.
    """

    if not config.source.exists():
        raise FileNotFoundError(f"TSV file not found: {config.source}")

    raw = config.source.read_bytes()
    logger.debug("Read %d bytes from %s", len(raw), config.source)
    try:
        text = raw.decode(config.encoding, errors=config.errors)
    except UnicodeDecodeError as exc:
        raise TsvError(f"Unable to decode {config.source} as {config.encoding}: {exc}") from exc
    except LookupError as exc:
        raise TsvError(f"Unknown encoding {config.encoding!r}") from exc

    if config.strip_bom and text.startswith(_BOM):
        text = text[len(_BOM):]
    return text


def load_table(config: LoadConfig, logger: Optional[logging.Logger] = None) -> TsvTable:
    """Read ``config.source`` and parse it into a :class:`TsvTable`."""

    logger = logger or logging.getLogger(__name__)
    logger.info("Loading TSV from %s", config.source)
    table = parse(read_text(config, logger), logger)
    logger.info("Loaded %d rows from %s", table.row_count, config.source)
    return table

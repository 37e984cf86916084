"""Parsing layer that splits TSV text into an immutable table."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import AnyStr, Iterator, Optional, Tuple, Union

_LINE_STR = re.compile(r"[^\r\n]+")
_LINE_BYTES = re.compile(rb"[^\r\n]+")

Span = Tuple[int, int]
Row = Tuple[Span, ...]
Source = Union[str, bytes]

_LOGGER = logging.getLogger(__name__)


class TsvError(ValueError):
    """Base error for TSV parsing and loading."""


class EmptyInputError(TsvError):
    """Raised when ``parse`` receives no text to work with."""


@dataclass(frozen=True)
class TsvTable:
    """Parsed TSV text.

    The source is retained once and every cell is a ``(start, end)`` span
    into it. Rows may have differing column counts. Coordinates outside the
    table are not errors: accessors return ``None`` instead.
    """

    source: Source
    spans: Tuple[Row, ...]

    def __len__(self) -> int:
        return len(self.spans)

    def __str__(self) -> str:
        return self.dump()

    @property
    def row_count(self) -> int:
        return len(self.spans)

    def column_count(self, row: int) -> int:
        """Number of columns in ``row``, or 0 when the row does not exist."""

        if not 0 <= row < len(self.spans):
            return 0
        return len(self.spans[row])

    def get_cell(self, column: int, row: int) -> Optional[Source]:
        """Return the cell at (``column``, ``row``) or ``None`` if out of range."""

        if not 0 <= row < len(self.spans):
            return None
        cells = self.spans[row]
        if not 0 <= column < len(cells):
            return None
        start, end = cells[column]
        return self.source[start:end]

    def find_column(self, row: int, name: Source) -> Optional[int]:
        """Index of the first column in ``row`` whose text equals ``name``."""

        if not 0 <= row < len(self.spans):
            return None
        for index, (start, end) in enumerate(self.spans[row]):
            if self.source[start:end] == name:
                return index
        return None

    def row(self, index: int) -> Optional[Tuple[Source, ...]]:
        """All cells of row ``index``, or ``None`` when the row does not exist."""

        if not 0 <= index < len(self.spans):
            return None
        return tuple(self.source[start:end] for start, end in self.spans[index])

    def rows(self) -> Iterator[Tuple[Source, ...]]:
        """Yield the cells of every row in source order."""

        for cells in self.spans:
            yield tuple(self.source[start:end] for start, end in cells)

    def dump(self) -> str:
        """Render every row as ``| value `` cells closed by ``|``.

        Diagnostic output only; the layout is not a stable format.
        """

        lines = []
        for cells in self.rows():
            rendered = "".join(f"| {_display(value)} " for value in cells)
            lines.append(f"{rendered}|\n")
        return "".join(lines)


def _display(value: Source) -> str:
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return value


def _split_columns(source: AnyStr, start: int, end: int, tab: AnyStr) -> Row:
    cells = []
    cursor = start
    while True:
        found = source.find(tab, cursor, end)
        if found < 0:
            cells.append((cursor, end))
            return tuple(cells)
        cells.append((cursor, found))
        cursor = found + 1


def parse(source: Optional[Source], logger: Optional[logging.Logger] = None) -> TsvTable:
    """Split ``source`` into rows on line breaks and into columns on tabs.

    Args:
        source: TSV text as ``str`` or ``bytes``. Cells keep the same type.
        logger: Optional logger; defaults to the module logger.

    Returns:
        A fully built, immutable :class:`TsvTable`.

    Raises:
        EmptyInputError: ``source`` is ``None`` or empty.
    """

    logger = logger or _LOGGER
    if source is None or len(source) == 0:
        raise EmptyInputError("TSV source is empty")

    if isinstance(source, bytes):
        pattern, tab = _LINE_BYTES, b"\t"
    else:
        pattern, tab = _LINE_STR, "\t"

    logger.info("Parsing TSV source (%d characters)", len(source))
    rows = []
    # Runs of \r and \n in any mix separate lines, so blank lines never match.
    for match in pattern.finditer(source):
        rows.append(_split_columns(source, match.start(), match.end(), tab))

    table = TsvTable(source=source, spans=tuple(rows))
    logger.debug(
        "Parsed %d rows, column counts %s",
        table.row_count,
        sorted({len(cells) for cells in rows}),
    )
    logger.info("Parsing complete: %d rows", table.row_count)
    return table

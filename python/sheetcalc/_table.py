"""Table store: raw cell contents parsed from a whitespace-delimited block."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

# Cells are separated by two or more spaces or a tab; rows by a newline.
# The capturing group keeps separators in the split output so the first
# newline's position can size the rows.
_SEPARATOR_RE = re.compile(r"( {2,}|\t|\n)")
_ASCII_SPACE = " \t\n\r\f\v"
_BLANK_RE = re.compile(r"[ \t\n\r\f\v]*")


def parse_table(text: str) -> list[list[str]]:
    """Split *text* into rows of raw cell strings.

    Row width comes from the first line: every cell on it is followed by a
    separator token, so the index of the first newline token is
    ``2 * width - 1``. The remaining non-blank tokens are chunked at that
    width, which means a short or long line shifts cells between rows
    rather than producing ragged rows.
    """
    tokens = _SEPARATOR_RE.split(text.strip(_ASCII_SPACE))
    if "\n" in tokens:
        width = (tokens.index("\n") + 1) // 2
    else:
        width = len(tokens)

    cells = [t for t in tokens if not _BLANK_RE.fullmatch(t)]
    if not cells:
        return []
    return [cells[i : i + width] for i in range(0, len(cells), width)]


@dataclass
class Table:
    """Ordered rows of raw cell strings, addressed 1-based."""

    rows: list[list[str]] = field(default_factory=list)

    @classmethod
    def from_text(cls, text: str | None) -> Table:
        rows = parse_table(text) if text else []
        logger.debug(
            "Parsed table with %d rows, widest %d",
            len(rows), max((len(r) for r in rows), default=0),
        )
        return cls(rows)

    def get(self, row: int, col: int) -> str | None:
        """Raw content at 1-based (row, col), or None when out of bounds."""
        if row < 1 or row > len(self.rows):
            return None
        cells = self.rows[row - 1]
        if col < 1 or col > len(cells):
            return None
        return cells[col - 1]

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self):
        return iter(self.rows)

"""A1-style cell address helpers."""

from __future__ import annotations

import re

from sheetcalc._errors import InvalidCellIndex

# Column letters followed by a row number without a leading zero.
_COLUMN = r"[A-Z]+"
_ROW = r"[1-9][0-9]*"
CELL_PATTERN = _COLUMN + _ROW

_CELL_RE = re.compile(rf"({_COLUMN})({_ROW})")


def column_index(letters: str) -> int:
    """Convert column letters to a 1-based index (A=1, Z=26, AA=27)."""
    index = 0
    for ch in letters:
        index = index * 26 + (ord(ch) - ord("A") + 1)
    return index


def a1_to_rowcol(address: str) -> tuple[int, int]:
    """Split ``"B12"`` into ``(12, 2)``.

    Raises :class:`InvalidCellIndex` for anything that is not a plain
    uppercase A1 reference.
    """
    m = _CELL_RE.fullmatch(address)
    if m is None:
        raise InvalidCellIndex(address)
    return int(m.group(2)), column_index(m.group(1))

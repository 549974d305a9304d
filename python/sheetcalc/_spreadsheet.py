"""Spreadsheet - read access to a table of raw cells with formula evaluation."""

from __future__ import annotations

from collections.abc import Iterator

from sheetcalc._errors import CellDoesNotExist
from sheetcalc._table import Table
from sheetcalc._utils import a1_to_rowcol
from sheetcalc.calc._evaluator import CellEvaluator
from sheetcalc.calc._validator import validate


class Spreadsheet:
    """A table parsed from text, read through ``sheet['A1']``.

    Usage::

        sheet = Spreadsheet("1  2\\n=ADD(A1,B1)  =DIVIDE(1,3)")
        sheet["A2"]        # '3'
        sheet.cell_at("B2")  # '=DIVIDE(1,3)'
        print(sheet)       # tab/newline separated values
    """

    __slots__ = ("_table", "_evaluator")

    def __init__(self, text: str | None = None) -> None:
        self._table = Table.from_text(text)
        self._evaluator = CellEvaluator(self.cell_at)

    @property
    def empty(self) -> bool:
        return len(self._table) == 0

    # ------------------------------------------------------------------
    # Cell access
    # ------------------------------------------------------------------

    def cell_at(self, address: str) -> str:
        """Raw content of the cell at *address*, without evaluation."""
        row, col = a1_to_rowcol(address)
        raw = self._table.get(row, col)
        if raw is None:
            raise CellDoesNotExist(address)
        return raw

    def __getitem__(self, address: str) -> str:
        """``sheet['A1']`` -> evaluated display string.

        Formula cells are validated first and the first problem found is
        raised before any evaluation happens.
        """
        raw = self.cell_at(address)
        if raw.startswith("="):
            error = validate(raw)
            if error is not None:
                raise error
        return self._evaluator.evaluate(raw)

    # ------------------------------------------------------------------
    # Iteration / serialization
    # ------------------------------------------------------------------

    def iter_rows(self, values_only: bool = False) -> Iterator[tuple[str, ...]]:
        """Yield each row as a tuple of raw strings, or evaluated values.

        Evaluated values skip validation: a malformed formula comes back as
        its raw text instead of raising.
        """
        for row in self._table:
            if values_only:
                yield tuple(self._evaluator.evaluate(cell) for cell in row)
            else:
                yield tuple(row)

    def __str__(self) -> str:
        return "\n".join("\t".join(row) for row in self.iter_rows(values_only=True))

"""sheetcalc - a small text-table spreadsheet with arithmetic formulas.

Usage::

    from sheetcalc import Spreadsheet

    sheet = Spreadsheet("3  =ADD(A1,2)\\n=MULTIPLY(A1,B1)  =DIVIDE(1,3)")
    sheet["B1"]   # '5'
    sheet["B2"]   # '0.33'
    print(sheet)
"""

from sheetcalc._errors import (
    CellDoesNotExist,
    InvalidCellIndex,
    InvalidExpression,
    SpreadsheetError,
    UnknownFunction,
    WrongArgumentCount,
)
from sheetcalc._spreadsheet import Spreadsheet
from sheetcalc._table import Table, parse_table
from sheetcalc._utils import a1_to_rowcol, column_index

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "CellDoesNotExist",
    "InvalidCellIndex",
    "InvalidExpression",
    "Spreadsheet",
    "SpreadsheetError",
    "Table",
    "UnknownFunction",
    "WrongArgumentCount",
    "a1_to_rowcol",
    "column_index",
    "parse_table",
]

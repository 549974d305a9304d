"""Exception hierarchy for table lookup and formula validation failures."""

from __future__ import annotations


class SpreadsheetError(Exception):
    """Base class for every error raised while reading a spreadsheet."""


class InvalidCellIndex(SpreadsheetError):
    """The address does not match the ``[A-Z]+[1-9][0-9]*`` grammar."""

    def __init__(self, address: str) -> None:
        self.address = address
        super().__init__(f"Invalid cell index '{address}'")


class CellDoesNotExist(SpreadsheetError):
    """The address is well formed but outside the table."""

    def __init__(self, address: str) -> None:
        self.address = address
        super().__init__(f"Cell '{address}' does not exist")


class UnknownFunction(SpreadsheetError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown function '{name}'")


class WrongArgumentCount(SpreadsheetError):
    """Operand count does not fit the function's arity class.

    ``expected`` is the human-readable rule, ``"2"`` or ``"at least 2"``.
    """

    def __init__(self, name: str, expected: str, got: int) -> None:
        self.name = name
        self.expected = expected
        self.got = got
        super().__init__(
            f"Wrong number of arguments for '{name}': expected {expected}, got {got}"
        )


class InvalidExpression(SpreadsheetError):
    def __init__(self, expression: str) -> None:
        self.expression = expression
        super().__init__(f"Invalid expression '{expression}'")

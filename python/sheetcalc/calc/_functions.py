"""Function table, operand coercion and display formatting."""

from __future__ import annotations

import math
import operator
import re
from dataclasses import dataclass
from functools import reduce
from typing import Callable

from sheetcalc.calc._parser import FunctionCall

# Digits kept after the decimal point when a result is not whole.
DECIMAL_PLACES = 2


# ---------------------------------------------------------------------------
# Binary operators. Division and modulo by zero follow IEEE 754 instead of
# raising, so a formula always produces a display value.
# ---------------------------------------------------------------------------


def _divide(left: float, right: float) -> float:
    if right == 0:
        if left == 0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)
    return left / right


def _modulo(left: float, right: float) -> float:
    if right == 0:
        return math.nan
    return left % right


@dataclass(frozen=True)
class Function:
    """A supported formula function.

    ``variadic`` functions take two or more operands, the rest exactly two.
    """

    name: str
    operator: Callable[[float, float], float]
    variadic: bool

    @property
    def expected(self) -> str:
        """Arity rule as it reads in error messages."""
        return "at least 2" if self.variadic else "2"

    def accepts(self, count: int) -> bool:
        return count >= 2 if self.variadic else count == 2

    def apply(self, values: list[float]) -> float:
        """Left fold: ``((a op b) op c) op ...``."""
        return reduce(self.operator, values)


FUNCTIONS: dict[str, Function] = {
    "ADD": Function("ADD", operator.add, variadic=True),
    "MULTIPLY": Function("MULTIPLY", operator.mul, variadic=True),
    "SUBTRACT": Function("SUBTRACT", operator.sub, variadic=False),
    "DIVIDE": Function("DIVIDE", _divide, variadic=False),
    "MOD": Function("MOD", _modulo, variadic=False),
}


def is_supported(func_name: str) -> bool:
    """Check if a function name is one of the five known functions.

    Names are case sensitive; ``add`` is not ``ADD``.
    """
    return func_name in FUNCTIONS


def is_formula(node: object) -> bool:
    """True for a call to a known function with a fitting operand count."""
    if not isinstance(node, FunctionCall):
        return False
    func = FUNCTIONS.get(node.name)
    return func is not None and func.accepts(len(node.operands))


# ---------------------------------------------------------------------------
# Coercion and formatting
# ---------------------------------------------------------------------------

# ASCII classes only: other Unicode digits and spaces are plain text here.
_LEADING_NUMBER_RE = re.compile(
    r"[ \t\n\r\f\v]*[+-]?(?:[0-9]+(?:\.[0-9]+)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
)


def to_float(text: str) -> float:
    """Read the leading number of an evaluated cell, ``0.0`` if there is none.

    ``"12abc"`` reads as 12.0 and plain text as 0.0, so a formula over a text
    cell still folds.
    """
    m = _LEADING_NUMBER_RE.match(text)
    if m is None:
        return 0.0
    return float(m.group(0))


def format_number(value: float) -> str:
    """Render a whole value as an integer, anything else with two decimals.

    Non-finite results from division by zero render as ``Inf``, ``-Inf`` and
    ``NaN``.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Inf" if value > 0 else "-Inf"
    if value % 1 == 0:
        return str(int(value))
    return f"{value:.{DECIMAL_PLACES}f}"

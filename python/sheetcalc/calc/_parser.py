"""Lark-based parser for cell contents that start with ``=``.

Recognizes exactly three shapes:

- Numeric literal: ``=5``, ``=-0.25``, ``=3.``
- Cell reference: ``=B12``
- Function call over literals and references: ``=ADD(1, A2, 3)``

Operands never nest; recursion only happens when a referenced cell holds
another formula. Any uppercase function name parses here. Whether the name is
known and the operand count fits is decided by :mod:`sheetcalc.calc._functions`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Union

from lark import Lark, Transformer
from lark.exceptions import LarkError

from sheetcalc._utils import CELL_PATTERN

# Zero, a fraction below one, or a number without a superfluous leading zero.
# Alternatives are ordered longest-first since the lexer does not backtrack.
NUMBER_PATTERN = r"-?0\.[0-9]*|-?[1-9][0-9]*(?:\.[0-9]*)?|0"

NUMBER_RE = re.compile(NUMBER_PATTERN)

# LALR(1) grammar. Whitespace is only allowed around the commas, so there is
# no %ignore. CELL outranks NAME so "A1" never lexes as a bare name.
GRAMMAR = rf"""
start: "=" expr

?expr: number
    | cell
    | call

call: NAME "(" operand (_SEP operand)* ")"

?operand: number
    | cell

number: NUMBER
cell: CELL

_SEP: /[ \t]*,[ \t]*/
NAME: /[A-Z]+/
CELL.2: /{CELL_PATTERN}/
NUMBER: /{NUMBER_PATTERN}/
"""


@dataclass(frozen=True)
class NumberLiteral:
    text: str

    @property
    def value(self) -> float:
        return float(self.text)


@dataclass(frozen=True)
class CellRef:
    address: str


@dataclass(frozen=True)
class FunctionCall:
    name: str
    operands: tuple[Operand, ...]


Operand = Union[NumberLiteral, CellRef]
Expression = Union[NumberLiteral, CellRef, FunctionCall]


class _ToNodes(Transformer):
    """Turn parse trees into the frozen node dataclasses above."""

    def start(self, children):
        return children[0]

    def number(self, children):
        return NumberLiteral(str(children[0]))

    def cell(self, children):
        return CellRef(str(children[0]))

    def call(self, children):
        name, *operands = children
        return FunctionCall(str(name), tuple(operands))


_parser = Lark(GRAMMAR, parser="lalr", start="start", transformer=_ToNodes())


def parse_formula(raw: str) -> Expression | None:
    """Parse a raw cell string into a node, or None if it is not well formed.

    The string must start with ``=`` and contain nothing around the
    expression; ``" =5"`` and ``"=5 "`` are both rejected.
    """
    if not raw.startswith("="):
        return None
    try:
        return _parser.parse(raw)
    except LarkError:
        return None


def is_number(text: str) -> bool:
    """True when *text* is a bare numeric literal such as ``"-2.5"``."""
    return NUMBER_RE.fullmatch(text) is not None

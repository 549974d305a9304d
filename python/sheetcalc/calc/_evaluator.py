"""CellEvaluator: resolves raw cell contents to display strings.

Dispatch order (first match wins):

1. ``=NUMBER``  - formatted number
2. ``=CELL``    - the referenced cell's value, evaluated recursively
3. ``=FUNC(..)`` with a known name and fitting arity - left fold of operands
4. anything else - returned unchanged

The evaluator never validates. Callers that need errors for malformed
formulas run :func:`sheetcalc.calc._validator.validate` first. There is no
cycle detection: a cell that refers back to itself ends in RecursionError.
"""

from __future__ import annotations

import logging
from typing import Callable

from sheetcalc.calc._functions import FUNCTIONS, format_number, is_formula, to_float
from sheetcalc.calc._parser import (
    CellRef,
    FunctionCall,
    NumberLiteral,
    Operand,
    is_number,
    parse_formula,
)

logger = logging.getLogger(__name__)


class CellEvaluator:
    """Evaluates cell contents against a raw-content lookup.

    Usage::

        evaluator = CellEvaluator(sheet.cell_at)
        evaluator.evaluate("=ADD(A1,2)")

    *lookup* maps an address like ``"A1"`` to that cell's raw string and
    raises for invalid or missing cells; those errors propagate unchanged.
    """

    def __init__(self, lookup: Callable[[str], str]) -> None:
        self._lookup = lookup

    def evaluate(self, raw: str) -> str:
        node = parse_formula(raw)
        if isinstance(node, NumberLiteral):
            return self._eval_number(node)
        if isinstance(node, CellRef):
            return self._eval_reference(node)
        if isinstance(node, FunctionCall) and is_formula(node):
            return self._eval_call(node)
        if raw.startswith("="):
            logger.debug("Cannot evaluate formula %r, keeping it as text", raw)
        return raw

    # ------------------------------------------------------------------
    # Shapes
    # ------------------------------------------------------------------

    def _eval_number(self, node: NumberLiteral) -> str:
        return format_number(node.value)

    def _eval_reference(self, node: CellRef) -> str:
        """Evaluate the target cell.

        A bare numeric literal in the target is treated as ``=literal`` so
        ``"2.50"`` reads as ``"2.50"`` through a reference and ``"2.0"`` as
        ``"2"``.
        """
        target = self._lookup(node.address)
        if is_number(target):
            target = "=" + target
        return self.evaluate(target)

    def _eval_call(self, node: FunctionCall) -> str:
        func = FUNCTIONS[node.name]
        # Operands go through their display form first, so literal operands
        # are rounded to two decimals before folding.
        values = [to_float(self._eval_operand(op)) for op in node.operands]
        result = func.apply(values)
        logger.debug("%s%s -> %r", node.name, tuple(values), result)
        return format_number(result)

    def _eval_operand(self, operand: Operand) -> str:
        if isinstance(operand, NumberLiteral):
            return self._eval_number(operand)
        return self._eval_reference(operand)

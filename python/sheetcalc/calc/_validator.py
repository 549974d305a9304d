"""Ordered validation pipeline for formula cells.

Each check takes the raw cell string (starting with ``=``) and returns a
:class:`~sheetcalc._errors.SpreadsheetError` describing the problem, or None.
Checks run in a fixed order and the first error wins, so ``=SUBTRACT(1)x``
reports the operand count rather than the trailing garbage.
"""

from __future__ import annotations

import logging
from typing import Callable

from sheetcalc._errors import (
    InvalidExpression,
    SpreadsheetError,
    UnknownFunction,
    WrongArgumentCount,
)
from sheetcalc.calc._functions import FUNCTIONS, is_supported
from sheetcalc.calc._parser import parse_formula

logger = logging.getLogger(__name__)

Check = Callable[[str], "SpreadsheetError | None"]


def _function_name(formula: str) -> str | None:
    """Text between ``=`` and the first ``(``, or None without a paren."""
    open_idx = formula.find("(")
    if open_idx < 0:
        return None
    return formula[1:open_idx]


def _argument_count(formula: str) -> int:
    """Count comma-separated pieces between the first ``(`` and the last ``)``.

    An empty list, or one that is never closed, counts as zero.
    """
    open_idx = formula.find("(")
    close_idx = formula.rfind(")")
    if close_idx <= open_idx:
        return 0
    params = formula[open_idx + 1 : close_idx]
    if not params:
        return 0
    return len(params.split(","))


def check_unknown_function(formula: str) -> SpreadsheetError | None:
    name = _function_name(formula)
    if name and not is_supported(name):
        return UnknownFunction(name)
    return None


def check_argument_count(formula: str) -> SpreadsheetError | None:
    name = _function_name(formula)
    func = FUNCTIONS.get(name) if name else None
    if func is None:
        return None
    count = _argument_count(formula)
    if not func.accepts(count):
        return WrongArgumentCount(func.name, func.expected, count)
    return None


def check_expression(formula: str) -> SpreadsheetError | None:
    """Reject anything that is not a literal, a reference or a flat call."""
    if parse_formula(formula) is None:
        return InvalidExpression(formula[1:])
    return None


VALIDATORS: tuple[Check, ...] = (
    check_unknown_function,
    check_argument_count,
    check_expression,
)


def validate(formula: str) -> SpreadsheetError | None:
    """Run every check in order and return the first error found."""
    for check in VALIDATORS:
        error = check(formula)
        if error is not None:
            logger.debug("Rejected %r: %s", formula, error)
            return error
    return None

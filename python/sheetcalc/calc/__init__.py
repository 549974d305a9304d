"""sheetcalc.calc - Formula parsing, validation and evaluation."""

from sheetcalc.calc._evaluator import CellEvaluator
from sheetcalc.calc._functions import FUNCTIONS, Function, format_number, is_supported, to_float
from sheetcalc.calc._parser import (
    CellRef,
    FunctionCall,
    NumberLiteral,
    is_number,
    parse_formula,
)
from sheetcalc.calc._validator import VALIDATORS, validate

__all__ = [
    "CellEvaluator",
    "CellRef",
    "FUNCTIONS",
    "Function",
    "FunctionCall",
    "NumberLiteral",
    "VALIDATORS",
    "format_number",
    "is_number",
    "is_supported",
    "parse_formula",
    "to_float",
    "validate",
]

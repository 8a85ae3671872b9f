"""Enumerations and operator groupings for decoded expressions."""

from enum import IntEnum
from typing import Dict, List


class TokenKind(IntEnum):
    """Kind of a decoded token."""

    DIGIT = 0
    OPERATOR = 1


class Operator(IntEnum):
    """Arithmetic operators as their symbolic gene codes."""

    ADD = 10  # +
    SUB = 11  # -
    MUL = 12  # *
    DIV = 13  # /


OPERATORS: List[Operator] = [
    Operator.ADD,
    Operator.SUB,
    Operator.MUL,
    Operator.DIV,
]

OPERATOR_SYMBOLS: Dict[Operator, str] = {
    Operator.ADD: "+",
    Operator.SUB: "-",
    Operator.MUL: "*",
    Operator.DIV: "/",
}

SYMBOL_TO_OPERATOR: Dict[str, Operator] = {
    symbol: op for op, symbol in OPERATOR_SYMBOLS.items()
}


__all__ = [
    "TokenKind",
    "Operator",
    "OPERATORS",
    "OPERATOR_SYMBOLS",
    "SYMBOL_TO_OPERATOR",
]

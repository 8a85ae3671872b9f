"""Decoded token representation and display helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional

from .enums import OPERATOR_SYMBOLS, SYMBOL_TO_OPERATOR, Operator, TokenKind


@dataclass(frozen=True)
class Token:
    """
    A decoded unit of an expression.
    Digit tokens hold 0-9 in `value`; operator tokens hold the operator code.
    """

    kind: TokenKind
    value: int

    def __post_init__(self):
        if self.kind == TokenKind.DIGIT:
            if not 0 <= int(self.value) <= 9:
                raise ValueError(f"Digit token value {self.value} is outside 0-9.")
            object.__setattr__(self, "value", int(self.value))
        elif self.kind == TokenKind.OPERATOR:
            object.__setattr__(self, "value", Operator(self.value))
        else:
            raise ValueError(f"Unknown token kind {self.kind!r}.")

    @classmethod
    def digit(cls, value: int) -> "Token":
        return cls(TokenKind.DIGIT, int(value))

    @classmethod
    def op(cls, operator: Operator) -> "Token":
        return cls(TokenKind.OPERATOR, Operator(operator))

    @property
    def is_digit(self) -> bool:
        return self.kind == TokenKind.DIGIT

    @property
    def is_operator(self) -> bool:
        return self.kind == TokenKind.OPERATOR

    @property
    def operator(self) -> Optional[Operator]:
        if self.is_operator:
            return Operator(self.value)
        return None

    @property
    def code(self) -> int:
        """The symbolic gene code this token decodes from."""
        return int(self.value)

    @property
    def symbol(self) -> str:
        if self.is_digit:
            return str(self.value)
        return OPERATOR_SYMBOLS[Operator(self.value)]

    def __str__(self) -> str:
        return self.symbol

    def __repr__(self) -> str:
        if self.is_digit:
            return f"Digit({self.value})"
        return f"Op({self.symbol})"


def describe_tokens(tokens: Iterable[Token]) -> str:
    """Return a readable infix rendering such as '4 + 2'."""
    return " ".join(token.symbol for token in tokens)


def parse_tokens(text: str) -> List[Token]:
    """Parse a readable rendering back into tokens (single digits only)."""
    parsed: List[Token] = []
    for char in text:
        if char.isspace():
            continue
        if char.isdigit():
            parsed.append(Token.digit(int(char)))
        elif char in SYMBOL_TO_OPERATOR:
            parsed.append(Token.op(SYMBOL_TO_OPERATOR[char]))
        else:
            raise ValueError(f"Unexpected character '{char}' in expression '{text}'.")
    return parsed


__all__ = [
    "Token",
    "describe_tokens",
    "parse_tokens",
]

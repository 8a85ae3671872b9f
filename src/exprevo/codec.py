"""Genotype codec: symbolic gene codes to alternating token sequences."""

from typing import Iterable, List, Tuple

from .codes import is_digit_code, is_operator_code
from .enums import Operator
from .tokens import Token


def decode_with_positions(genotype: Iterable[int]) -> List[Tuple[int, Token]]:
    """Decode and keep the gene position each accepted token came from."""
    codes = genotype.codes if hasattr(genotype, "codes") else genotype
    accepted: List[Tuple[int, Token]] = []

    for position, code in enumerate(codes):
        code = int(code)
        last = accepted[-1][1] if accepted else None
        if is_digit_code(code):
            if last is None or last.is_operator:
                accepted.append((position, Token.digit(code)))
        elif is_operator_code(code):
            if last is not None and last.is_digit:
                accepted.append((position, Token.op(Operator(code))))

    # a trailing operator has no right operand
    if accepted and accepted[-1][1].is_operator:
        accepted.pop()

    return accepted


def decode(genotype: Iterable[int]) -> List[Token]:
    """
    Decode gene codes into a strictly alternating token sequence.

    A digit is kept only at the start or right after an operator, and an
    operator only right after a digit. Invalid codes (14-15) and misplaced
    codes are dropped without error.

    Args:
        genotype: A Genotype or any iterable of integer codes

    Returns:
        Tokens alternating digit, operator, digit, ...; may be empty
    """
    return [token for _, token in decode_with_positions(genotype)]


def encode(tokens: Iterable[Token]) -> Tuple[int, ...]:
    """Map tokens back to their gene codes."""
    return tuple(token.code for token in tokens)


def is_alternating(tokens: List[Token]) -> bool:
    """Check the digit/operator alternation a decoded sequence must satisfy."""
    if not tokens:
        return True
    if not (tokens[0].is_digit and tokens[-1].is_digit):
        return False
    return all(prev.kind != curr.kind for prev, curr in zip(tokens, tokens[1:]))


__all__ = ["decode", "decode_with_positions", "encode", "is_alternating"]

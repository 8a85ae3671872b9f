"""Symbolic gene code constants and 4-bit packing helpers."""

from typing import Iterable, Tuple

import numpy as np

from .enums import Operator, TokenKind


GENE_BITS = 4
GENE_MASK = (1 << GENE_BITS) - 1
CODE_COUNT = 1 << GENE_BITS

DIGIT_MIN = 0
DIGIT_MAX = 9
OPERATOR_MIN = int(Operator.ADD)
OPERATOR_MAX = int(Operator.DIV)


def is_digit_code(code: int) -> bool:
    """Return True when the code denotes a decimal digit."""
    return DIGIT_MIN <= code <= DIGIT_MAX


def is_operator_code(code: int) -> bool:
    """Return True when the code denotes one of the four operators."""
    return OPERATOR_MIN <= code <= OPERATOR_MAX


def code_kind(code: int):
    """Return the TokenKind a code decodes to, or None for invalid codes."""
    if is_digit_code(code):
        return TokenKind.DIGIT
    if is_operator_code(code):
        return TokenKind.OPERATOR
    return None


def check_code(code) -> int:
    """Validate a single gene code and return it as a plain int."""
    if isinstance(code, bool) or not isinstance(code, (int, np.integer)):
        raise TypeError(f"Gene codes must be integers, got {type(code).__name__}.")
    value = int(code)
    if not 0 <= value < CODE_COUNT:
        raise ValueError(f"Gene code {value} is outside [0, {CODE_COUNT - 1}].")
    return value


def pack_codes(codes: Iterable[int]) -> int:
    """Pack gene codes into one integer, gene i in bits 4*i .. 4*i+3."""
    packed = 0
    for position, code in enumerate(codes):
        packed |= (check_code(code) & GENE_MASK) << (position * GENE_BITS)
    return packed


def unpack_codes(packed: int, length: int) -> Tuple[int, ...]:
    """Unpack `length` gene codes from an integer produced by pack_codes."""
    if length < 0:
        raise ValueError("Genotype length must be non-negative.")
    if packed < 0 or packed >> (length * GENE_BITS):
        raise ValueError(f"Packed value does not fit in {length} genes.")
    return tuple(
        (int(packed) >> (position * GENE_BITS)) & GENE_MASK
        for position in range(length)
    )


def codes_to_bitstring(codes: Iterable[int]) -> str:
    """Render codes as a 0/1 string, most significant (last) gene first."""
    codes = [check_code(code) for code in codes]
    return "".join(format(code, f"0{GENE_BITS}b") for code in reversed(codes))


def bitstring_to_codes(bits: str) -> Tuple[int, ...]:
    """Parse a string produced by codes_to_bitstring back into codes."""
    text = bits.strip()
    if len(text) % GENE_BITS:
        raise ValueError(f"Bit string length must be a multiple of {GENE_BITS}.")
    if set(text) - {"0", "1"}:
        raise ValueError(f"Bit string '{bits}' may only contain 0 and 1.")
    chunks = [text[i:i + GENE_BITS] for i in range(0, len(text), GENE_BITS)]
    return tuple(int(chunk, 2) for chunk in reversed(chunks))


__all__ = [
    "GENE_BITS",
    "GENE_MASK",
    "CODE_COUNT",
    "DIGIT_MIN",
    "DIGIT_MAX",
    "OPERATOR_MIN",
    "OPERATOR_MAX",
    "is_digit_code",
    "is_operator_code",
    "code_kind",
    "check_code",
    "pack_codes",
    "unpack_codes",
    "codes_to_bitstring",
    "bitstring_to_codes",
]

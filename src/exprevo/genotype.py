"""Immutable genotype of symbolic gene codes."""

from __future__ import annotations

import hashlib
from typing import Iterable, List, Tuple

import numpy as np

from .codec import decode, decode_with_positions
from .codes import (
    CODE_COUNT,
    bitstring_to_codes,
    check_code,
    code_kind,
    codes_to_bitstring,
    pack_codes,
    unpack_codes,
)
from .config import DEFAULT_GENOTYPE_LENGTH
from .executor import evaluate
from .tokens import Token, describe_tokens


class Genotype:
    """
    Fixed-length sequence of 4-bit gene codes.
    Instances are immutable and hashable; new generations build new instances.
    """

    __slots__ = ("_codes", "_tokens", "_signature")

    def __init__(self, codes: Iterable[int]):
        object.__setattr__(self, "_codes", tuple(check_code(code) for code in codes))
        object.__setattr__(self, "_tokens", None)
        object.__setattr__(self, "_signature", None)

    def __setattr__(self, name, value):
        raise AttributeError("Genotype is immutable.")

    def __reduce__(self):
        return (Genotype, (self._codes,))

    @classmethod
    def random(
        cls,
        rng: np.random.Generator,
        length: int = DEFAULT_GENOTYPE_LENGTH,
    ) -> "Genotype":
        """Draw every gene uniformly from [0, 15]."""
        if length < 0:
            raise ValueError("Genotype length must be non-negative.")
        return cls(int(code) for code in rng.integers(0, CODE_COUNT, size=length))

    @classmethod
    def from_packed(cls, packed: int, length: int) -> "Genotype":
        return cls(unpack_codes(packed, length))

    @classmethod
    def from_bits(cls, bits: str) -> "Genotype":
        return cls(bitstring_to_codes(bits))

    @property
    def codes(self) -> Tuple[int, ...]:
        return self._codes

    def __len__(self) -> int:
        return len(self._codes)

    def __iter__(self):
        return iter(self._codes)

    def __getitem__(self, index):
        return self._codes[index]

    def __eq__(self, other) -> bool:
        if isinstance(other, Genotype):
            return self._codes == other._codes
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._codes)

    def __repr__(self) -> str:
        return f"Genotype({list(self._codes)})"

    def decode(self) -> List[Token]:
        """Decode once and cache the token sequence."""
        if self._tokens is None:
            object.__setattr__(self, "_tokens", tuple(decode(self._codes)))
        return list(self._tokens)

    def evaluate(self) -> float:
        """Objective value of the decoded expression."""
        return evaluate(self.decode())

    def to_expression(self) -> str:
        """Readable infix form, e.g. '4 + 2'."""
        return describe_tokens(self.decode())

    def to_packed(self) -> int:
        return pack_codes(self._codes)

    def to_bits(self) -> str:
        return codes_to_bitstring(self._codes)

    @property
    def signature(self) -> str:
        """Stable short hash of the gene codes."""
        if self._signature is None:
            raw = "|".join(str(code) for code in self._codes)
            object.__setattr__(self, "_signature", hashlib.md5(raw.encode()).hexdigest())
        return self._signature

    def to_human_readable(self) -> List[str]:
        """One line per gene: code, meaning, and whether the codec kept it."""
        readable = []
        kept = {position for position, _ in decode_with_positions(self._codes)}
        for idx, code in enumerate(self._codes):
            prefix = "✓" if idx in kept else "✗"
            readable.append(f"{prefix} [{idx}] {code:2d} {_describe_code(code)}")
        return readable


def _describe_code(code: int) -> str:
    kind = code_kind(code)
    if kind is None:
        return "INVALID"
    return Token(kind, code).symbol


__all__ = ["Genotype"]

"""Strict left-to-right evaluation of decoded token sequences."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional

import numpy as np

from .enums import Operator
from .tokens import Token


def _apply(op: Operator, accumulator: np.float64, operand: np.float64) -> np.float64:
    """Fold one operand into the accumulator with IEEE-754 semantics."""
    if op == Operator.ADD:
        return accumulator + operand
    if op == Operator.SUB:
        return accumulator - operand
    if op == Operator.MUL:
        return accumulator * operand
    if op == Operator.DIV:
        # x/0 -> +-inf, 0/0 -> nan
        return np.divide(accumulator, operand)
    raise ValueError(f"Unsupported operator {op!r}.")


def iter_partial_values(tokens: Iterable[Token]) -> Iterator[float]:
    """Yield the accumulator after the first digit and after every fold."""
    tokens = list(tokens)
    if not tokens:
        return

    accumulator = np.float64(tokens[0].value)
    yield float(accumulator)
    last_op: Optional[Operator] = None

    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        for token in tokens[1:]:
            if token.is_operator:
                last_op = token.operator
            elif last_op is not None:
                accumulator = _apply(last_op, accumulator, np.float64(token.value))
                yield float(accumulator)


def evaluate(tokens: Iterable[Token]) -> float:
    """
    Reduce a token sequence to a number without operator precedence.

    Args:
        tokens: Alternating digit/operator tokens as produced by the codec

    Returns:
        The objective value; 0.0 for an empty sequence. Division by zero
        produces inf or nan rather than raising.
    """
    result = 0.0
    for result in iter_partial_values(tokens):
        pass
    return result


def evaluation_trace(tokens: Iterable[Token]) -> List[float]:
    """All intermediate accumulator values, useful for explaining a result."""
    return list(iter_partial_values(tokens))


__all__ = ["evaluate", "evaluation_trace", "iter_partial_values"]

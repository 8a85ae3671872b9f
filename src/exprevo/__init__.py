"""Evolutionary search for digit/operator expressions that hit a target value."""

from .enums import (
    TokenKind,
    Operator,
    OPERATORS,
    OPERATOR_SYMBOLS,
    SYMBOL_TO_OPERATOR,
)
from .codes import (
    GENE_BITS,
    GENE_MASK,
    CODE_COUNT,
    is_digit_code,
    is_operator_code,
    code_kind,
    check_code,
    pack_codes,
    unpack_codes,
    codes_to_bitstring,
    bitstring_to_codes,
)
from .tokens import Token, describe_tokens, parse_tokens
from .codec import decode, decode_with_positions, encode, is_alternating
from .executor import evaluate, evaluation_trace, iter_partial_values
from .config import SearchConfig
from .genotype import Genotype
from .evaluator import (
    fitness,
    is_solution,
    ScoredEntry,
    ScoredPopulation,
    TargetEvaluator,
)
from .selection import CumulativeDistribution, select
from .evolver import GenerationReport, SearchResult, TargetSearchEvolver
from .demos import example_target_search, main

__all__ = [
    "TokenKind",
    "Operator",
    "OPERATORS",
    "OPERATOR_SYMBOLS",
    "SYMBOL_TO_OPERATOR",
    "GENE_BITS",
    "GENE_MASK",
    "CODE_COUNT",
    "is_digit_code",
    "is_operator_code",
    "code_kind",
    "check_code",
    "pack_codes",
    "unpack_codes",
    "codes_to_bitstring",
    "bitstring_to_codes",
    "Token",
    "describe_tokens",
    "parse_tokens",
    "decode",
    "decode_with_positions",
    "encode",
    "is_alternating",
    "evaluate",
    "evaluation_trace",
    "iter_partial_values",
    "SearchConfig",
    "Genotype",
    "fitness",
    "is_solution",
    "ScoredEntry",
    "ScoredPopulation",
    "TargetEvaluator",
    "CumulativeDistribution",
    "select",
    "GenerationReport",
    "SearchResult",
    "TargetSearchEvolver",
    "example_target_search",
    "main",
]

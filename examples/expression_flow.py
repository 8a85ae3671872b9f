#!/usr/bin/env python3
"""
Walk one genotype through decoding, evaluation, fitness and selection.
"""

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = ROOT / "src"
if SRC_PATH.exists() and str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

import numpy as np

from exprevo import (
    Genotype,
    ScoredPopulation,
    TargetEvaluator,
    decode,
    evaluation_trace,
    fitness,
    select,
)


def show_genotype(genotype: Genotype, target: float) -> None:
    tokens = decode(genotype)
    value = genotype.evaluate()
    print(f"codes={list(genotype)} bits={genotype.to_bits()}")
    for line in genotype.to_human_readable():
        print("  " + line)
    print(f"  tokens={tokens}")
    print(f"  trace={evaluation_trace(tokens)} value={value} fitness={fitness(value, target)}")


def main() -> None:
    target = 6.0
    samples = [
        Genotype([4, 10, 2]),
        Genotype([4, 5, 12, 13, 3, 14, 15, 10, 1, 11]),
        Genotype([7, 13, 0]),
        Genotype([0, 13, 0]),
        Genotype([14, 15, 10]),
    ]

    for genotype in samples:
        show_genotype(genotype, target)

    scored: ScoredPopulation = TargetEvaluator(target).evaluate(samples)
    print("\nScored population (ascending):")
    for score, genotype in scored:
        print(f"  {score:>10.4f}  '{genotype.to_expression()}'")

    viable = ScoredPopulation((score, g) for score, g in scored if np.isfinite(score))
    picks = select(viable, 10, np.random.default_rng(0))
    print("\nTen roulette-wheel draws among the non-solutions:")
    print("  " + ", ".join(f"'{g.to_expression()}'" for g in picks))


if __name__ == "__main__":
    main()

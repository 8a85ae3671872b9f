"""Fitness scoring and scored populations."""

from __future__ import annotations

import math
from bisect import bisect_right
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, List, Optional, Tuple

from .genotype import Genotype


def fitness(value: float, target: float) -> float:
    """
    Score an objective value against the target.

    Zero and nan are non-viable and score 0.0. Otherwise the score is
    1 / |target - value|, which is +inf on an exact match.
    """
    if value == 0.0 or value != value:
        return 0.0
    distance = abs(float(target) - float(value))
    if distance == 0.0:
        return math.inf
    return 1.0 / distance


def is_solution(score: float) -> bool:
    """True only for the +inf score of an exact match."""
    return math.isinf(score) and score > 0


@dataclass(frozen=True)
class ScoredEntry:
    """One genotype with its objective value and fitness."""

    fitness: float
    genotype: Genotype
    value: float


class ScoredPopulation:
    """
    Multi-valued mapping from fitness to genotype.
    Iterates in ascending fitness; equal scores keep insertion order.
    """

    def __init__(self, entries: Optional[Iterable[Tuple[float, Genotype]]] = None):
        self._keys: List[float] = []
        self._entries: List[ScoredEntry] = []
        for score, genotype in entries or ():
            self.insert(score, genotype)

    def insert(self, score: float, genotype: Genotype, value: Optional[float] = None) -> ScoredEntry:
        """Insert after any existing entries with the same score."""
        score = float(score)
        if score != score:
            raise ValueError("Fitness scores must not be nan.")
        if value is None:
            value = genotype.evaluate()
        entry = ScoredEntry(score, genotype, float(value))
        position = bisect_right(self._keys, score)
        self._keys.insert(position, score)
        self._entries.insert(position, entry)
        return entry

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Tuple[float, Genotype]]:
        for entry in self._entries:
            yield entry.fitness, entry.genotype

    def __bool__(self) -> bool:
        return bool(self._entries)

    @property
    def entries(self) -> List[ScoredEntry]:
        return list(self._entries)

    def scores(self) -> List[float]:
        return list(self._keys)

    def genotypes(self) -> List[Genotype]:
        return [entry.genotype for entry in self._entries]

    def total(self) -> float:
        return math.fsum(self._keys)

    def best(self) -> ScoredEntry:
        """Highest score; the latest inserted wins a tie."""
        if not self._entries:
            raise ValueError("Scored population is empty.")
        return self._entries[-1]

    def is_solved(self) -> bool:
        return bool(self._entries) and is_solution(self._entries[-1].fitness)


class TargetEvaluator:
    """
    Scores genotypes against a fixed target value,
    supporting an optional per-genotype callback.
    """

    def __init__(self, target: float = 42.0):
        self.target = float(target)

    def score(self, genotype: Genotype) -> Tuple[float, float]:
        """Return (fitness, objective value) for one genotype."""
        value = genotype.evaluate()
        return fitness(value, self.target), value

    def evaluate(
        self,
        population: Iterable[Genotype],
        callback: Optional[Callable[[int, Genotype, float, float], None]] = None,
    ) -> ScoredPopulation:
        """
        Score every genotype into a ScoredPopulation.

        Args:
            population: Genotypes to score, in insertion order
            callback: Optional callback(index, genotype, value, fitness)

        Returns:
            The scored population
        """
        scored = ScoredPopulation()
        for idx, genotype in enumerate(population):
            score, value = self.score(genotype)
            scored.insert(score, genotype, value)
            if callback:
                callback(idx, genotype, value, score)
        return scored


__all__ = [
    "fitness",
    "is_solution",
    "ScoredEntry",
    "ScoredPopulation",
    "TargetEvaluator",
]

"""Evolution engine searching for expressions that hit a target value."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Union

import numpy as np

from .config import SearchConfig
from .evaluator import ScoredPopulation, TargetEvaluator, is_solution
from .genotype import Genotype
from .selection import select

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenerationReport:
    """Outcome of scoring one generation."""

    generation: int
    best_fitness: float
    best_value: float
    best_genotype: Genotype
    population_size: int
    solved: bool

    @property
    def message(self) -> str:
        if self.solved:
            return "Found solution %f" % self.best_value
        return "Best value: %f" % self.best_value


@dataclass
class SearchResult:
    """All generation reports of one run."""

    reports: List[GenerationReport] = field(default_factory=list)

    @property
    def solved(self) -> bool:
        return bool(self.reports) and self.reports[-1].solved

    @property
    def best(self) -> Optional[GenerationReport]:
        return self.reports[-1] if self.reports else None

    @property
    def generations_run(self) -> int:
        return len(self.reports)


class TargetSearchEvolver:
    """
    Generation loop: score, stop on an exact match, otherwise
    replace the population by roulette-wheel selection.
    """

    def __init__(
        self,
        config: Optional[SearchConfig] = None,
        rng: Optional[Union[np.random.Generator, int]] = None,
    ):
        self.config = config or SearchConfig()
        if isinstance(rng, np.random.Generator):
            self.rng = rng
        else:
            self.rng = np.random.default_rng(self.config.seed if rng is None else rng)
        self.evaluator = TargetEvaluator(self.config.target)
        self.population: List[Genotype] = []
        self.generation = 0
        self.last_scored: Optional[ScoredPopulation] = None

    def initialize_population(self) -> List[Genotype]:
        """Create the initial random population."""
        self.population = [
            Genotype.random(self.rng, self.config.genotype_length)
            for _ in range(self.config.population_size)
        ]
        self.generation = 0
        logger.info(
            "Initialized population: size=%d, genotype_length=%d, target=%s",
            len(self.population),
            self.config.genotype_length,
            self.config.target,
        )
        return self.population

    def step(self) -> GenerationReport:
        """Score the current population and, unless solved, select the next one."""
        if not self.population:
            raise RuntimeError("Population is empty; call initialize_population() first.")

        scored = self.evaluator.evaluate(self.population)
        self.last_scored = scored
        best = scored.best()
        solved = is_solution(best.fitness)

        report = GenerationReport(
            generation=self.generation,
            best_fitness=best.fitness,
            best_value=best.value,
            best_genotype=best.genotype,
            population_size=len(self.population),
            solved=solved,
        )
        logger.debug(
            "Gen %03d: best fitness=%s value=%s expression='%s'",
            self.generation,
            best.fitness,
            best.value,
            best.genotype.to_expression(),
        )

        if solved:
            logger.info(
                "Solution found in generation %d: %s = %s",
                self.generation,
                best.genotype.to_expression(),
                best.value,
            )
        else:
            self.population = select(scored, self.config.effective_selection_count, self.rng)

        self.generation += 1
        return report

    def evolve(
        self,
        progress_callback: Optional[Callable[[GenerationReport], None]] = None,
    ) -> SearchResult:
        """
        Main evolution loop.

        Args:
            progress_callback: Optional callback(report) invoked once per generation

        Returns:
            SearchResult with one report per generation run
        """
        if not self.population:
            self.initialize_population()

        result = SearchResult()
        for _ in range(self.config.generations):
            if not self.population:
                logger.warning("Population collapsed to zero genotypes; stopping.")
                break
            report = self.step()
            result.reports.append(report)
            if progress_callback:
                progress_callback(report)
            if report.solved:
                break

        if not result.solved and result.generations_run == self.config.generations:
            logger.info("Generation budget of %d exhausted without a solution", self.config.generations)
        return result


__all__ = ["GenerationReport", "SearchResult", "TargetSearchEvolver"]

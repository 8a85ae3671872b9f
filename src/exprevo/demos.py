"""Console workflows for running a target search."""

from __future__ import annotations

import logging
import sys
from typing import Optional

from .config import SearchConfig
from .evolver import GenerationReport, SearchResult, TargetSearchEvolver
from .executor import evaluation_trace

logger = logging.getLogger(__name__)


def print_report(report: GenerationReport) -> None:
    """Print the one-line generation summary."""
    print(report.message)


def example_target_search(config: Optional[SearchConfig] = None) -> SearchResult:
    """Example: search for digits and operators that evaluate to the target."""
    evolver = TargetSearchEvolver(config)
    result = evolver.evolve(print_report)

    best = result.best
    if best is not None:
        logger.info("Best expression: %s", best.best_genotype.to_expression() or "<empty>")
        logger.info("Evaluation trace: %s", evaluation_trace(best.best_genotype.decode()))
        for line in best.best_genotype.to_human_readable():
            logger.debug("  %s", line)
    return result


def main(
    config: Optional[SearchConfig] = None,
    pause: bool = False,
    log_level: Optional[int] = None,
) -> int:
    """Run the search with default settings and always return exit status 0."""
    if log_level is not None:
        logging.basicConfig(
            level=log_level,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

    example_target_search(config)

    if pause and sys.stdin.isatty():
        input("Press Enter to continue . . . ")
    return 0


__all__ = ["example_target_search", "main", "print_report"]

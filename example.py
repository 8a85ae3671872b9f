"""Example workflow: target search with the default and the original settings."""

import logging
import sys

from exprevo import SearchConfig, TargetSearchEvolver


def run(config: SearchConfig) -> None:
    evolver = TargetSearchEvolver(config)

    def progress_callback(report):
        print(
            f"Gen {report.generation:03d} | size={report.population_size:3d} | "
            f"{report.message} | expr='{report.best_genotype.to_expression()}'"
        )

    result = evolver.evolve(progress_callback)

    print("\nSolved:", result.solved)
    best = result.best
    if best is not None:
        print("Best genotype:", list(best.best_genotype))
        print("Bits:", best.best_genotype.to_bits())
        print("Gene trace:")
        for line in best.best_genotype.to_human_readable():
            print("  " + line)


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    print("=== Population kept at full size ===")
    run(SearchConfig(seed=42, generations=20))

    print("\n=== Original behaviour: two survivors per generation ===")
    run(SearchConfig.original(seed=42))


if __name__ == "__main__":
    mode = sys.argv[1].lower() if len(sys.argv) > 1 else "both"
    if mode == "default":
        run(SearchConfig(seed=42, generations=20))
    elif mode == "original":
        run(SearchConfig.original(seed=42))
    else:
        main()

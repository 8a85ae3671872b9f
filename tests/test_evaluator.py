import math

import pytest

from exprevo import Genotype, ScoredPopulation, TargetEvaluator, decode, evaluate, fitness, is_solution


def test_fitness_zero_value_is_non_viable():
    assert fitness(0.0, 42) == 0.0


def test_fitness_nan_is_non_viable():
    assert fitness(float("nan"), 42) == 0.0


def test_fitness_exact_match_is_infinite():
    assert fitness(42.0, 42) == math.inf
    assert is_solution(fitness(42.0, 42))


def test_fitness_is_inverse_distance():
    assert fitness(40.0, 42) == 0.5
    assert fitness(44.0, 42) == 0.5
    assert fitness(41.0, 42) > fitness(40.0, 42)


def test_fitness_of_infinite_value_is_zero():
    assert fitness(math.inf, 42) == 0.0
    assert fitness(-math.inf, 42) == 0.0


def test_is_solution_only_for_positive_infinity():
    assert not is_solution(0.0)
    assert not is_solution(1e300)
    assert not is_solution(-math.inf)


def test_end_to_end_four_plus_two_solves_target_six():
    genotype = Genotype([4, 10, 2])
    tokens = decode(genotype)
    assert [repr(t) for t in tokens] == ["Digit(4)", "Op(+)", "Digit(2)"]
    value = evaluate(tokens)
    assert value == 6.0
    assert fitness(value, 6) == math.inf


def test_scored_population_orders_ascending_with_stable_ties():
    a, b, c, d = Genotype([1]), Genotype([2]), Genotype([3]), Genotype([4])
    scored = ScoredPopulation([(0.5, a), (0.1, b), (0.5, c), (0.2, d)])
    assert scored.scores() == [0.1, 0.2, 0.5, 0.5]
    assert scored.genotypes() == [b, d, a, c]


def test_best_prefers_latest_inserted_on_tie():
    a, c = Genotype([1]), Genotype([3])
    scored = ScoredPopulation([(0.5, a), (0.5, c)])
    assert scored.best().genotype == c


def test_best_on_empty_population_raises():
    with pytest.raises(ValueError):
        ScoredPopulation().best()


def test_nan_scores_are_rejected():
    with pytest.raises(ValueError):
        ScoredPopulation([(float("nan"), Genotype([1]))])


def test_target_evaluator_scores_population():
    evaluator = TargetEvaluator(target=6)
    seen = []
    scored = evaluator.evaluate(
        [Genotype([4, 10, 2]), Genotype([5]), Genotype([14])],
        callback=lambda idx, genotype, value, score: seen.append((idx, value, score)),
    )
    assert len(scored) == 3
    assert scored.is_solved()
    best = scored.best()
    assert best.genotype == Genotype([4, 10, 2])
    assert best.value == 6.0
    assert seen == [(0, 6.0, math.inf), (1, 5.0, 1.0), (2, 0.0, 0.0)]


def test_total_sums_scores():
    scored = ScoredPopulation([(0.25, Genotype([1])), (0.5, Genotype([2]))])
    assert scored.total() == 0.75

import logging

import numpy as np
import pytest

from exprevo import CumulativeDistribution, Genotype, ScoredPopulation, select


G = Genotype([4, 10, 2])
A = Genotype([3])
B = Genotype([1])


def test_negative_count_is_rejected_before_sampling():
    class ExplodingRng:
        def random(self):
            raise AssertionError("must not sample")

    with pytest.raises(ValueError):
        select(ScoredPopulation([(1.0, G)]), -1, ExplodingRng())


def test_single_entry_returns_copies():
    result = select(ScoredPopulation([(1.0, G)]), 5, np.random.default_rng(0))
    assert result == [G] * 5


def test_zero_count_returns_empty_list():
    assert select(ScoredPopulation([(1.0, G)]), 0, np.random.default_rng(0)) == []


def test_empty_population_with_positive_count_is_rejected():
    with pytest.raises(ValueError):
        select(ScoredPopulation(), 3, np.random.default_rng(0))


def test_selection_frequency_follows_fitness_ratio():
    scored = ScoredPopulation([(3.0, A), (1.0, B)])
    draws = 20000
    picks = select(scored, draws, np.random.default_rng(1234))
    share_a = sum(1 for g in picks if g == A) / draws
    assert share_a == pytest.approx(0.75, abs=0.02)


def test_same_seed_gives_same_selection():
    scored = ScoredPopulation([(3.0, A), (1.0, B), (2.0, G)])
    first = select(scored, 50, np.random.default_rng(99))
    second = select(scored, 50, np.random.default_rng(99))
    assert first == second


def test_cumulative_distribution_is_ascending_running_sum():
    scored = ScoredPopulation([(3.0, A), (1.0, B)])
    distribution = CumulativeDistribution.from_scored(scored)
    assert list(distribution) == [(0.25, B), (1.0, A)]


def test_sample_picks_first_entry_at_or_above_draw():
    distribution = CumulativeDistribution([0.25, 1.0], [B, A])
    assert distribution.sample(0.0) == B
    assert distribution.sample(0.25) == B
    assert distribution.sample(0.2500001) == A


def test_sample_falls_back_to_last_entry_after_rounding():
    distribution = CumulativeDistribution([0.3, 0.9999999], [B, A])
    assert distribution.sample(0.99999995) == A


def test_zero_total_selects_uniformly(caplog):
    scored = ScoredPopulation([(0.0, A), (0.0, B)])
    with caplog.at_level(logging.WARNING, logger="exprevo.selection"):
        picks = select(scored, 1000, np.random.default_rng(5))
    assert set(picks) == {A, B}
    assert "Zero fitness total" in caplog.text


def test_infinite_total_selects_only_infinite_entries():
    scored = ScoredPopulation([(1.0, B), (float("inf"), A)])
    picks = select(scored, 200, np.random.default_rng(3))
    assert set(picks) == {A}


def test_negative_scores_are_rejected():
    with pytest.raises(ValueError):
        select(ScoredPopulation([(-1.0, A)]), 1, np.random.default_rng(0))

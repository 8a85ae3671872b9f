import pytest

from exprevo import SearchConfig


def test_defaults():
    config = SearchConfig()
    assert config.target == 42.0
    assert config.population_size == 100
    assert config.genotype_length == 10
    assert config.generations == 10
    assert config.selection_count is None
    assert config.effective_selection_count == 100


def test_original_preset_keeps_two_per_generation():
    config = SearchConfig.original()
    assert config.effective_selection_count == 2
    assert SearchConfig.original(selection_count=5).selection_count == 5


def test_from_mapping_and_as_dict():
    config = SearchConfig.from_mapping({"target": 7, "population_size": 10, "seed": 3})
    assert config.target == 7.0
    assert config.as_dict()["population_size"] == 10
    assert config.as_dict()["seed"] == 3


def test_unknown_keys_are_rejected():
    with pytest.raises(ValueError):
        SearchConfig.from_mapping({"mutation_rate": 0.1})


@pytest.mark.parametrize(
    "overrides",
    [
        {"population_size": 0},
        {"genotype_length": -1},
        {"generations": -1},
        {"selection_count": -2},
        {"target": float("nan")},
    ],
)
def test_invalid_values_are_rejected(overrides):
    with pytest.raises(ValueError):
        SearchConfig(**overrides)


def test_with_overrides_returns_new_config():
    base = SearchConfig()
    changed = base.with_overrides(generations=3)
    assert changed.generations == 3
    assert base.generations == 10

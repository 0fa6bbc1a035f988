"""
Unit tests for evoga.operators.selection.

Tests cover the fitness-proportional distribution of RouletteWheelSelection,
its zero-fitness behaviour, reproducibility under a fixed seed, and the
errors raised for unusable populations.
"""

from collections import Counter

import numpy as np
import pytest

from evoga.errors    import EmptyPopulationError, FitnessError
from evoga.operators import RouletteWheelSelection, SelectionMethod, get_selection_method


def _histogram(selection, rng, population, draws):
    """Count how many times each individual (by position) is selected."""
    positions = {id(individual): i for i, individual in enumerate(population)}
    counts    = Counter(positions[id(selection.select(rng, population))] for _ in range(draws))
    return [counts[i] for i in range(len(population))]


class TestRouletteWheelDistribution:
    """Test that selection frequencies follow fitness shares."""

    def test_proportional_to_fitness(self, make_population):
        population = make_population([1.0, 2.0, 3.0, 4.0])
        rng        = np.random.default_rng(1234)
        draws      = 20000

        histogram = _histogram(RouletteWheelSelection(), rng, population, draws)

        for observed, share in zip(histogram, [0.1, 0.2, 0.3, 0.4]):
            assert observed / draws == pytest.approx(share, abs=0.02)

    def test_zero_fitness_never_selected(self, make_population):
        population = make_population([0.0, 3.0, 0.0, 1.0, 0.0])
        rng        = np.random.default_rng(5)

        histogram = _histogram(RouletteWheelSelection(), rng, population, 5000)

        assert histogram[0] == histogram[2] == histogram[4] == 0
        assert histogram[1] > histogram[3] > 0

    def test_trailing_zero_fitness_never_selected(self, make_population):
        population = make_population([1.0, 0.0])
        rng        = np.random.default_rng(6)

        histogram = _histogram(RouletteWheelSelection(), rng, population, 2000)

        assert histogram == [2000, 0]

    def test_single_individual(self, make_population):
        population = make_population([0.7])
        selected   = RouletteWheelSelection().select(np.random.default_rng(0), population)

        assert selected is population[0]

    def test_all_zero_fitness_falls_back_to_uniform(self, make_population):
        population = make_population([0.0, 0.0, 0.0, 0.0])
        rng        = np.random.default_rng(9)
        draws      = 8000

        histogram = _histogram(RouletteWheelSelection(), rng, population, draws)

        for observed in histogram:
            assert observed / draws == pytest.approx(0.25, abs=0.03)

    def test_same_seed_same_histogram(self, make_population):
        population = make_population([2.0, 1.0, 4.0, 3.0])

        first  = _histogram(RouletteWheelSelection(), np.random.default_rng(10), population, 1000)
        second = _histogram(RouletteWheelSelection(), np.random.default_rng(10), population, 1000)

        assert first == second
        assert sum(first) == 1000

    def test_selection_is_with_replacement(self, make_population):
        population = make_population([1.0, 1.0])
        selection  = RouletteWheelSelection()
        rng        = np.random.default_rng(3)

        selected = [selection.select(rng, population) for _ in range(50)]

        assert len(population) == 2
        assert any(a is b for a, b in zip(selected, selected[1:]))

    def test_returns_member_of_population(self, make_population):
        population = make_population([1.0, 5.0, 2.0])
        selected   = RouletteWheelSelection().select(np.random.default_rng(1), population)

        assert any(selected is individual for individual in population)


class TestRouletteWheelErrors:
    """Test errors raised for unusable populations."""

    def test_empty_population(self):
        with pytest.raises(EmptyPopulationError):
            RouletteWheelSelection().select(np.random.default_rng(0), [])

    def test_unevaluated_individual(self, make_population):
        population = make_population([1.0, None])

        with pytest.raises(FitnessError, match="has not been evaluated"):
            RouletteWheelSelection().select(np.random.default_rng(0), population)

    def test_negative_fitness(self, make_population):
        population = make_population([1.0, -0.5])

        with pytest.raises(FitnessError, match="negative fitness"):
            RouletteWheelSelection().select(np.random.default_rng(0), population)


class TestSelectionFactory:
    """Test get_selection_method()."""

    def test_roulette(self):
        method = get_selection_method('roulette')

        assert isinstance(method, RouletteWheelSelection)
        assert isinstance(method, SelectionMethod)

    def test_unknown(self):
        with pytest.raises(ValueError, match="Unknown selection method"):
            get_selection_method('tournament')

    def test_abstract_base_cannot_be_instantiated(self):
        with pytest.raises(TypeError):
            SelectionMethod()

"""Pytest configuration and shared fixtures."""

import pytest
import sys
from pathlib import Path

import numpy as np

# Add the source directory to the Python path
src_dir = Path(__file__).parent.parent / 'src'
sys.path.insert(0, str(src_dir))


@pytest.fixture
def rng():
    """Provide a seeded random generator."""
    return np.random.default_rng(42)


@pytest.fixture
def make_population():
    """Return a factory building evaluated individuals with the given fitness values."""
    from evoga.phenotype import Individual

    def _make(fitness_values, topology=(2, 3, 1), seed=0):
        generator   = np.random.default_rng(seed)
        individuals = []
        for fitness in fitness_values:
            individual = Individual.random(generator, list(topology))
            individual.fitness = fitness
            individuals.append(individual)
        return individuals

    return _make

"""
Shared fixtures for integration tests.
"""

import pytest

from evoga.run.config import Config


@pytest.fixture(autouse=True)
def reset_individual_ids():
    """Reset the Individual ID generator so IDs start from 0 in each test."""
    from itertools import count
    from evoga.phenotype.individual import Individual

    Individual._id_generator = count(0)
    yield
    Individual._id_generator = count(0)


@pytest.fixture
def xor_inputs():
    """XOR inputs."""
    return [[0.0, 0.0], [0.0, 1.0], [1.0, 0.0], [1.0, 1.0]]


@pytest.fixture
def xor_outputs():
    """XOR expected outputs."""
    return [0.0, 1.0, 1.0, 0.0]


@pytest.fixture
def xor_config():
    """Configuration for a 2-4-1 network population."""
    config = Config()
    config.population_size        = 40
    config.topology               = "2, 4, 1"
    config.mutation_probability   = 0.1
    config.mutation_strength      = 0.3
    config.max_number_generations = 15
    config.seed                   = 42
    return config

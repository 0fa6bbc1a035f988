"""
Unit tests for Config class.
"""

import configparser
import os

import pytest

from evoga.errors     import TopologyError
from evoga.run.config import Config


# ============================================================================
# Fixtures
# ============================================================================

@pytest.fixture
def test_config_dir():
    """Return the directory containing test configuration files."""
    return os.path.join(os.path.dirname(__file__), 'test_configs')


@pytest.fixture
def minimal_config(test_config_dir):
    return Config(os.path.join(test_config_dir, 'minimal.ini'))


@pytest.fixture
def full_config(test_config_dir):
    return Config(os.path.join(test_config_dir, 'full.ini'))


# ============================================================================
# Test Config Initialization
# ============================================================================

class TestConfigInit:
    """Test Config initialization."""

    def test_init_without_file_uses_defaults(self):
        """Test that Config() without file creates a usable default config."""
        config = Config()

        assert config.population_size == 50
        assert config.topology == [2, 3, 1]
        assert config.gene_init_min == -1.0
        assert config.gene_init_max == 1.0
        assert config.selection_method == 'roulette'
        assert config.crossover_method == 'uniform'
        assert config.mutation_method == 'uniform'
        assert config.mutation_probability == 0.01
        assert config.mutation_strength == 0.3
        assert config.fitness_termination_check is False
        assert config.max_number_generations == 100
        assert config.seed is None

    def test_init_with_nonexistent_file_raises_error(self):
        """Test that Config with nonexistent file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError, match="Configuration file .* not found"):
            Config('nonexistent_file.ini')

    def test_missing_mandatory_value(self, test_config_dir):
        """Test that a missing parameter without default raises."""
        with pytest.raises(configparser.NoOptionError):
            Config(os.path.join(test_config_dir, 'missing_topology.ini'))


# ============================================================================
# Test Config Sections
# ============================================================================

class TestConfigPopulationInit:
    """Test Config POPULATION_INIT section parsing."""

    def test_population_size(self, minimal_config):
        assert minimal_config.population_size == 100

    def test_topology(self, minimal_config, full_config):
        assert minimal_config.topology == [2, 4, 1]
        assert full_config.topology == [3, 5, 5, 2]

    def test_gene_init_defaults(self, minimal_config):
        assert minimal_config.gene_init_min == -1.0
        assert minimal_config.gene_init_max == 1.0

    def test_gene_init_values(self, full_config):
        assert full_config.gene_init_min == -0.5
        assert full_config.gene_init_max == 0.5

    def test_bad_topology(self, test_config_dir):
        with pytest.raises(ValueError, match="Invalid topology"):
            Config(os.path.join(test_config_dir, 'bad_topology.ini'))

    def test_none_topology(self, test_config_dir):
        with pytest.raises(ValueError, match="got None"):
            Config(os.path.join(test_config_dir, 'none_topology.ini'))


class TestConfigOperators:
    """Test Config SELECTION, CROSSOVER and MUTATION sections."""

    def test_defaults(self, minimal_config):
        assert minimal_config.selection_method == 'roulette'
        assert minimal_config.crossover_method == 'uniform'
        assert minimal_config.mutation_method == 'uniform'

    def test_values(self, full_config):
        assert full_config.selection_method == 'roulette'
        assert full_config.crossover_method == 'single_point'
        assert full_config.mutation_method == 'gaussian'
        assert full_config.mutation_probability == pytest.approx(0.2)
        assert full_config.mutation_strength == pytest.approx(0.1)

    def test_mandatory_mutation_values(self, minimal_config):
        assert minimal_config.mutation_probability == pytest.approx(0.05)
        assert minimal_config.mutation_strength == pytest.approx(0.5)


class TestConfigTermination:
    """Test Config TERMINATION and RANDOM sections."""

    def test_defaults(self, minimal_config):
        assert minimal_config.fitness_termination_check is False
        assert minimal_config.fitness_criterion == 'max'
        assert minimal_config.fitness_threshold is None
        assert minimal_config.max_number_generations == 200
        assert minimal_config.seed is None

    def test_values(self, full_config):
        assert full_config.fitness_termination_check is True
        assert full_config.fitness_criterion == 'mean'
        assert full_config.fitness_threshold == pytest.approx(3.5)
        assert full_config.max_number_generations == 50
        assert full_config.seed == 1234

    def test_explicit_none(self, test_config_dir):
        config = Config(os.path.join(test_config_dir, 'seed_none.ini'))

        assert config.seed is None
        assert config.fitness_threshold is None


# ============================================================================
# Test Topology Assignment
# ============================================================================

class TestConfigTopologyAssignment:
    """Test that assigning 'topology' parses and validates it."""

    def test_string_is_parsed(self):
        config = Config()
        config.topology = "4, 8, 2"
        assert config.topology == [4, 8, 2]

    def test_list_is_normalized(self):
        config = Config()
        config.topology = (3, 1)
        assert config.topology == [3, 1]

    def test_too_short(self):
        config = Config()
        with pytest.raises(TopologyError):
            config.topology = "5"

    def test_non_integer(self):
        config = Config()
        with pytest.raises(ValueError, match="Invalid topology"):
            config.topology = "2, two"

    def test_none_rejected(self):
        config = Config()
        with pytest.raises(ValueError, match="got None"):
            config.topology = None
        assert config.topology == [2, 3, 1]

    def test_other_attributes_untouched(self):
        config = Config()
        config.population_size = 7
        assert config.population_size == 7

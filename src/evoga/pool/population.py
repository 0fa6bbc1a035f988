"""
Evoga Population Module

This module implements the Population class, the top-level container for the
genetic algorithm. The population holds the current generation, creates the
initial one, and asks the GeneticAlgorithm for each following one.

Classes:
    Population: The current generation plus the engine that replaces it
"""

import logging
from typing import Optional, TYPE_CHECKING

import numpy as np

from evoga.operators              import get_crossover_method, get_mutation_method, get_selection_method
from evoga.phenotype              import Individual
from evoga.pool.genetic_algorithm import GeneticAlgorithm
from evoga.pool.statistics        import Statistics

if TYPE_CHECKING:
    from evoga.run.config import Config

logger = logging.getLogger(__name__)


class Population:
    """
    A population of evolving individuals.

    All individuals share the topology given in the configuration, and the
    number of individuals stays equal to 'config.population_size' across
    generations.

    The random generator is owned by whoever drives the evolution (usually a
    Trial) and passed in at construction; the population uses it for the
    initial networks and for every generation it spawns.

    Public Attributes:
        individuals: List of all Individual objects in the current generation
        generation:  Number of generations spawned so far (0 for the initial one)

    Public Methods:
        get_fittest_individual(): Return the individual with highest fitness
        spawn_next_generation():  Replace the current generation with the next
        statistics():             Fitness statistics of the current generation
    """

    def __init__(self, config: 'Config', rng: np.random.Generator):
        """
        Initialize the population with 'config.population_size' random individuals.

        Parameters:
            config: Stores configuration parameters
            rng:    Source of randomness for initialization and evolution
        """
        if config.population_size < 1:
            raise ValueError(f"Population size must be at least 1, got {config.population_size}")

        self._config: 'Config'            = config
        self._rng   : np.random.Generator = rng

        selection = get_selection_method(config.selection_method)
        crossover = get_crossover_method(config.crossover_method)
        mutation  = get_mutation_method(config.mutation_method,
                                        probability=config.mutation_probability,
                                        strength=config.mutation_strength)
        self._algorithm = GeneticAlgorithm(selection, crossover, mutation)

        self.generation : int              = 0
        self.individuals: list[Individual] = [
            Individual.random(rng, config.topology, config.gene_init_min, config.gene_init_max)
            for _ in range(config.population_size)
        ]

        logger.debug("Created %d individuals with topology %s", len(self.individuals), config.topology)

    @property
    def algorithm(self) -> GeneticAlgorithm:
        return self._algorithm

    def get_fittest_individual(self) -> Optional[Individual]:
        """
        Find and return the individual with the highest fitness in the population.

        Returns:
            The individual with the highest fitness value, or None if the fitness
            of the individuals has not been calculated yet
        """
        if any(individual.fitness is None for individual in self.individuals):
            return None
        return max(self.individuals, key=lambda ind: ind.fitness)

    def spawn_next_generation(self) -> None:
        """
        Replace the current generation with the next one.
        The individuals of the new generation have no fitness yet.
        """
        self.individuals  = self._algorithm.evolve(self._rng, self.individuals)
        self.generation  += 1

    def statistics(self) -> Statistics:
        return Statistics.from_population(self.individuals)

    def __len__(self):
        return len(self.individuals)

    def __str__(self):
        return '\n'.join(str(individual) for individual in self.individuals)

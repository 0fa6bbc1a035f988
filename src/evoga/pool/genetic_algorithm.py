"""
Evoga Genetic Algorithm Module

This module implements the GeneticAlgorithm class, which replaces one generation
of individuals with the next by composing a selection, a crossover and a mutation
strategy.

Classes:
    GeneticAlgorithm: Generation-replacement loop over injected strategies
"""

import logging
from typing import Sequence

import numpy as np

from evoga.errors    import ChromosomeLengthError, EmptyPopulationError, TopologyError
from evoga.operators import CrossoverMethod, MutationMethod, SelectionMethod
from evoga.phenotype import Individual

logger = logging.getLogger(__name__)


class GeneticAlgorithm:
    """
    The evolutionary engine.

    For every slot of the next generation the algorithm:
     - selects parent A and parent B (independently, with replacement, possibly the same individual)
     - crosses their chromosomes over into a child chromosome
     - mutates the child chromosome
     - decodes the child chromosome into a new Individual (fitness left unset)

    The strategies are injected at construction; the algorithm only uses their
    abstract interfaces, so any implementation can be substituted.

    All randomness comes from the generator passed to 'evolve', which makes a
    generation fully determined by the generator state and the population.

    Public Attributes:
        selection: Strategy choosing parents
        crossover: Strategy combining parent chromosomes
        mutation:  Strategy perturbing child chromosomes

    Public Methods:
        evolve(rng, population): Create the next generation
    """

    def __init__(self, selection: SelectionMethod, crossover: CrossoverMethod, mutation: MutationMethod):
        """
        Parameters:
            selection: strategy used to choose each parent
            crossover: strategy used to combine the two parents' chromosomes
            mutation:  strategy used to perturb the child chromosome
        """
        self.selection: SelectionMethod = selection
        self.crossover: CrossoverMethod = crossover
        self.mutation : MutationMethod  = mutation

    def evolve(self, rng: np.random.Generator, population: Sequence[Individual]) -> list[Individual]:
        """
        Create the next generation from the current one.

        Parameters:
            rng:        source of randomness, shared by all three strategies
            population: the current generation; every individual must have been
                        evaluated, and all must share one topology

        Returns:
            the new generation, as many individuals as the current one

        Raises:
            EmptyPopulationError:  if the population is empty
            TopologyError:         if the individuals do not share one topology
            ChromosomeLengthError: if the chromosomes do not share one length
        """
        if len(population) == 0:
            raise EmptyPopulationError("Cannot evolve an empty population")

        topology = self._check_uniform(population)

        offspring = []
        for _ in range(len(population)):
            parent_a = self.selection.select(rng, population)
            parent_b = self.selection.select(rng, population)

            child = self.crossover.crossover(rng, parent_a.chromosome, parent_b.chromosome)
            self.mutation.mutate(rng, child)

            offspring.append(Individual(child, topology))

        logger.debug("Evolved %d individuals with topology %s", len(offspring), topology)
        return offspring

    @staticmethod
    def _check_uniform(population: Sequence[Individual]) -> list[int]:
        """
        Verify that all individuals share one topology and one chromosome length.
        Returns the shared topology.
        """
        topology = population[0].topology
        length   = len(population[0].chromosome)

        for individual in population[1:]:
            if len(individual.chromosome) != length:
                raise ChromosomeLengthError(f"Individual {individual.ID} has {len(individual.chromosome)} genes, "
                                            f"expected {length}")
            if individual.topology != topology:
                raise TopologyError(f"Individual {individual.ID} has topology {individual.topology}, "
                                    f"expected {topology}")
        return topology

    def __repr__(self):
        return (f"GeneticAlgorithm(selection={self.selection!r}, "
                f"crossover={self.crossover!r}, mutation={self.mutation!r})")

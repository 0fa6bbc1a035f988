"""
Evoga Crossover Module

Crossover combines the chromosomes of two parents into one child chromosome.
Since all individuals of a population share one topology, gene i of parent A
and gene i of parent B encode the same weight or bias, so the parents can be
combined position by position.

Classes:
    CrossoverMethod:      Abstract interface of a crossover strategy
    UniformCrossover:     Each gene taken from a parent chosen by a fair coin
    SinglePointCrossover: Head of one parent joined to the tail of the other

Functions:
    get_crossover_method: Build a crossover method from its configuration name
"""

from abc import ABC, abstractmethod

import numpy as np

from evoga.errors   import ChromosomeLengthError
from evoga.genotype import Chromosome


class CrossoverMethod(ABC):
    """
    Abstract base class for crossover strategies.

    Public Methods:
        crossover(rng, parent_a, parent_b): Create a child chromosome (must be implemented by subclasses)
    """

    @abstractmethod
    def crossover(self, rng: np.random.Generator, parent_a: Chromosome, parent_b: Chromosome) -> Chromosome:
        """
        Create a child chromosome from two parent chromosomes.
        The parents are not modified.

        Parameters:
            rng:      source of randomness
            parent_a: first parent
            parent_b: second parent, same length as the first

        Returns:
            a new chromosome, same length as the parents

        Raises:
            ChromosomeLengthError: if the parents differ in length
        """
        pass

    @staticmethod
    def _check_compatible(parent_a: Chromosome, parent_b: Chromosome) -> None:
        if len(parent_a) != len(parent_b):
            raise ChromosomeLengthError(f"Parents must have the same number of genes, "
                                        f"got {len(parent_a)} and {len(parent_b)}")


class UniformCrossover(CrossoverMethod):
    """
    Uniform crossover: for every gene position independently, a fair coin
    decides whether the child inherits the gene of parent A or of parent B.
    """

    def crossover(self, rng: np.random.Generator, parent_a: Chromosome, parent_b: Chromosome) -> Chromosome:
        self._check_compatible(parent_a, parent_b)

        from_a = rng.random(len(parent_a)) < 0.5
        return Chromosome(np.where(from_a, parent_a.genes, parent_b.genes))

    def __repr__(self):
        return "UniformCrossover()"


class SinglePointCrossover(CrossoverMethod):
    """
    Single-point crossover: a cut point is drawn uniformly in [0, length];
    genes before the cut come from parent A, genes from the cut on from parent B.
    """

    def crossover(self, rng: np.random.Generator, parent_a: Chromosome, parent_b: Chromosome) -> Chromosome:
        self._check_compatible(parent_a, parent_b)

        cut = int(rng.integers(0, len(parent_a) + 1))
        return Chromosome(np.concatenate([parent_a.genes[:cut], parent_b.genes[cut:]]))

    def __repr__(self):
        return "SinglePointCrossover()"


_CROSSOVER_METHODS = {
    'uniform'     : UniformCrossover,
    'single_point': SinglePointCrossover,
}


def get_crossover_method(name: str, **kwargs) -> CrossoverMethod:
    """
    Factory function for crossover methods.

    Parameters:
        name:     one of 'uniform', 'single_point'
        **kwargs: arguments for the method's constructor

    Returns:
        the crossover method instance
    """
    if name not in _CROSSOVER_METHODS:
        raise ValueError(f"Unknown crossover method: {name}")
    return _CROSSOVER_METHODS[name](**kwargs)

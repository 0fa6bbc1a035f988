"""
Evoga Mutation Module

Mutation perturbs a child chromosome in place, after crossover. Both whether a
gene mutates and the magnitude of the change are stochastic: each gene mutates
independently with a fixed probability, and a mutated gene is shifted by a
bounded random amount.

Classes:
    MutationMethod:   Abstract interface of a mutation strategy
    UniformMutation:  gene += sign * strength * uniform(0, 1)
    GaussianMutation: gene += normal(0, strength)

Functions:
    get_mutation_method: Build a mutation method from its configuration name
"""

from abc import ABC, abstractmethod

import numpy as np

from evoga.genotype import GENE_DTYPE, Chromosome


class MutationMethod(ABC):
    """
    Abstract base class for mutation strategies.

    Genes are float32. A non-zero perturbation too small to change a gene at
    that precision is widened to one float32 step in its direction, so every
    mutated gene changes unless its drawn perturbation is exactly zero.

    Public Attributes:
        probability: Probability that a given gene is perturbed (0 to 1)
        strength:    Scale of the perturbation applied to a mutated gene

    Public Methods:
        mutate(rng, chromosome): Perturb the chromosome in place
    """

    def __init__(self, probability: float, strength: float):
        """
        Parameters:
            probability: probability that a given gene is perturbed, in [0, 1]
            strength:    scale of the perturbation, >= 0
        """
        if not 0.0 <= probability <= 1.0:
            raise ValueError(f"Mutation probability must be in [0, 1], got {probability}")
        if strength < 0.0:
            raise ValueError(f"Mutation strength must be non-negative, got {strength}")

        self.probability: float = probability
        self.strength   : float = strength

    def mutate(self, rng: np.random.Generator, chromosome: Chromosome) -> None:
        """
        Stochastically perturb the chromosome, in place.
        Genes not selected for mutation are left untouched.

        Parameters:
            rng:        source of randomness
            chromosome: the chromosome to mutate
        """
        selected = rng.random(len(chromosome)) < self.probability
        if not selected.any():
            return

        deltas = self._deltas(rng, int(selected.sum()))
        before = chromosome.genes[selected]
        after  = before + deltas.astype(GENE_DTYPE)

        # perturbations lost to float32 rounding move the gene by one step instead
        lost = (after == before) & (deltas != 0.0)
        if lost.any():
            direction   = np.copysign(np.inf, deltas[lost]).astype(GENE_DTYPE)
            after[lost] = np.nextafter(before[lost], direction)

        chromosome.genes[selected] = after

    @abstractmethod
    def _deltas(self, rng: np.random.Generator, size: int) -> np.ndarray:
        """Draw the perturbations for 'size' mutated genes."""
        pass

    def __repr__(self):
        return f"{type(self).__name__}(probability={self.probability}, strength={self.strength})"


class UniformMutation(MutationMethod):
    """
    Each mutated gene moves by strength * uniform(0, 1), up or down with equal
    probability. The change is therefore bounded by 'strength'.
    """

    def _deltas(self, rng: np.random.Generator, size: int) -> np.ndarray:
        signs = np.where(rng.random(size) < 0.5, -1.0, 1.0)
        return signs * self.strength * rng.random(size)


class GaussianMutation(MutationMethod):
    """
    Each mutated gene moves by a value drawn from a zero-centered normal
    distribution whose standard deviation is 'strength'.
    """

    def _deltas(self, rng: np.random.Generator, size: int) -> np.ndarray:
        return rng.normal(0.0, self.strength, size)


_MUTATION_METHODS = {
    'uniform' : UniformMutation,
    'gaussian': GaussianMutation,
}


def get_mutation_method(name: str, **kwargs) -> MutationMethod:
    """
    Factory function for mutation methods.

    Parameters:
        name:     one of 'uniform', 'gaussian'
        **kwargs: arguments for the method's constructor (probability, strength)

    Returns:
        the mutation method instance
    """
    if name not in _MUTATION_METHODS:
        raise ValueError(f"Unknown mutation method: {name}")
    return _MUTATION_METHODS[name](**kwargs)

"""
Evoga Individual Module

This module implements the Individual class, representing one member of the
population evolved by the genetic algorithm.

Classes:
    Individual: A chromosome, the network it decodes into, and a fitness
"""

from itertools import count
from typing    import Optional

import numpy as np

from evoga.genotype          import Chromosome
from evoga.phenotype.network import INIT_MAX, INIT_MIN, Network, Topology, topology_widths


class Individual:
    """
    An individual in the population.

    You can regard an individual as a thin wrapper around its chromosome, to which
    it adds the decoded network, a unique ID and a fitness. The genetic algorithm
    operates on individuals: it selects them by fitness and recombines their
    chromosomes; the external fitness evaluator runs their network.

    The fitness is not computed here. It is None until the caller evaluates the
    individual and assigns a non-negative value.

    Public Attributes:
        ID:      Process-unique identifier for this individual
        fitness: Fitness score (None until evaluated)

    Public Properties:
        chromosome: The genes of this individual
        topology:   The layer widths the chromosome decodes under
        network:    The decoded network

    Public Methods:
        random(rng, topology):   Create an individual with a random network
        from_network(network):   Wrap an existing network
        propagate(inputs):       Shortcut for network.propagate(inputs)
    """

    _id_generator = count(0)

    def __init__(self, chromosome: Chromosome, topology: Topology):
        """
        Initialize the Individual given its genotype.

        Parameters:
            chromosome: the genes encoding the network of this individual
            topology:   layer widths, input width first (at least 2 entries)

        Raises:
            TopologyError:         if the topology is invalid
            ChromosomeLengthError: if the chromosome does not fit the topology
        """
        self.ID     : int             = next(Individual._id_generator)
        self.fitness: Optional[float] = None

        self._topology  : list[int]  = topology_widths(topology)
        self._chromosome: Chromosome = chromosome
        self._network   : Network    = Network.from_weights(self._topology, chromosome)

    @classmethod
    def random(cls, rng: np.random.Generator, topology: Topology,
               low: float = INIT_MIN, high: float = INIT_MAX) -> 'Individual':
        """Create an individual whose network parameters are drawn uniformly from [low, high)."""
        return cls.from_network(Network.random(rng, topology, low, high))

    @classmethod
    def from_network(cls, network: Network) -> 'Individual':
        return cls(network.weights(), network.topology)

    @property
    def chromosome(self) -> Chromosome:
        return self._chromosome

    @property
    def topology(self) -> list[int]:
        return list(self._topology)

    @property
    def network(self) -> Network:
        return self._network

    def propagate(self, inputs) -> np.ndarray:
        return self._network.propagate(inputs)

    def __str__(self):
        fitness = "n/a" if self.fitness is None else f"{self.fitness:.4f}"
        return f"ID={self.ID}, fitness={fitness}\n{self._chromosome}"

    def __repr__(self):
        return f"Individual(ID={self.ID}, topology={self._topology}, fitness={self.fitness})"

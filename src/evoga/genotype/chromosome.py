"""
Evoga Chromosome Module

This module implements the Chromosome class, the genetic representation of a
feedforward neural network. A chromosome is the network's biases and weights
flattened into a single vector of 32-bit floats.

Gene order is part of the format. Genes are laid out layer by layer; within a
layer neuron by neuron; for each neuron its bias comes first, then its weights
in input order. For a topology [n0, n1, ..., nk] the chromosome therefore holds
sum(n_i * (n_(i-1) + 1)) genes, for i = 1..k.

Classes:
    Chromosome: Ordered, fixed-length vector of genes
"""

from typing import Iterable, Iterator

import numpy as np

GENE_DTYPE = np.float32


class Chromosome:
    """
    An ordered, fixed-length sequence of real-valued genes.

    A gene has no identity beyond its position: position i always encodes the
    same bias or weight of the network, for every individual sharing a topology.
    This is what allows crossover to combine two parents gene by gene.

    Chromosomes are mutable (mutation operates in place), but their length
    never changes after construction.

    Public Attributes:
        genes: numpy array (float32) holding the genes

    Public Methods:
        copy(): Return an independent copy of this chromosome
    """

    def __init__(self, genes: Iterable[float]):
        """
        Parameters:
            genes: the gene values, in traversal order
        """
        self.genes: np.ndarray = np.fromiter(genes, dtype=GENE_DTYPE)

    def copy(self) -> 'Chromosome':
        """Return a new Chromosome holding a copy of the genes."""
        return Chromosome(self.genes.copy())

    def __len__(self) -> int:
        return len(self.genes)

    def __iter__(self) -> Iterator[float]:
        return iter(self.genes)

    def __getitem__(self, index):
        return self.genes[index]

    def __setitem__(self, index, value):
        self.genes[index] = value

    def __eq__(self, other):
        if not isinstance(other, Chromosome):
            return NotImplemented
        return len(self) == len(other) and bool(np.array_equal(self.genes, other.genes))

    def __repr__(self):
        return f"Chromosome(length={len(self)}, genes={self.genes!r})"

    def __str__(self):
        return "[" + ",".join(f"{g:+.02f}" for g in self.genes) + "]"

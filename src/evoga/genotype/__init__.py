"""
Evoga Genotype Package

This package implements the genotype representation of the genetic algorithm:
the flat vector of biases and weights that crossover and mutation operate on.

Modules:
    chromosome: Chromosome class and the gene dtype

Exported Classes:
    Chromosome: Ordered, fixed-length vector of float32 genes
"""

from evoga.genotype.chromosome import GENE_DTYPE, Chromosome

__all__ = ['GENE_DTYPE',
           'Chromosome']

"""
Evoga Phenotype Package

This package implements the phenotype representation for the genetic algorithm.
It provides the feedforward neural network that a chromosome decodes into, and
the Individual that ties a chromosome, its network and its fitness together.

Modules:
    network:    LayerTopology, Neuron, Layer, Network and the chromosome codec
    individual: Individual class

Exported Classes:
    LayerTopology: Width of one layer in a topology description
    Neuron:        A neuron computing relu(bias + weights . inputs)
    Layer:         Neurons sharing the same input width
    Network:       Fully connected feedforward neural network
    Individual:    A chromosome, its decoded network, and a fitness
"""

from evoga.phenotype.individual import Individual
from evoga.phenotype.network    import (LayerTopology, Layer, Network, Neuron,
                                        chromosome_length, topology_widths)

__all__ = ['Individual',
           'LayerTopology',
           'Layer',
           'Network',
           'Neuron',
           'chromosome_length',
           'topology_widths']

"""
Evoga - a genetic algorithm evolving the weights of feedforward neural networks.

This package evolves populations of fully connected feedforward networks without
gradients: fitness-proportional selection, crossover and mutation operate on the
flattened vector of each network's biases and weights (its chromosome), and drive
successive generations toward higher fitness. Fitness itself is computed by the
caller (e.g. by scoring a controller in a simulation).

Main components:
- genotype:  Chromosome, the flat gene vector
- phenotype: Neuron / Layer / Network, the chromosome codec, and Individual
- operators: Selection, crossover and mutation strategies
- pool:      GeneticAlgorithm orchestrator, Population, Statistics
- run:       Configuration and the Trial driver
- errors:    Typed precondition failures

Example:
    >>> import numpy as np
    >>> from evoga import GeneticAlgorithm, Individual
    >>> from evoga.operators import RouletteWheelSelection, UniformCrossover, UniformMutation
    >>> rng = np.random.default_rng(42)
    >>> population = [Individual.random(rng, [2, 3, 1]) for _ in range(10)]
    >>> for individual in population:
    ...     individual.fitness = float(individual.propagate([1.0, 0.5])[0])
    >>> ga = GeneticAlgorithm(RouletteWheelSelection(), UniformCrossover(), UniformMutation(0.01, 0.3))
    >>> population = ga.evolve(rng, population)
"""

__version__ = "0.1.0"

# Import main classes for convenient access
from evoga.run.config  import Config
from evoga.run.trial   import Trial
from evoga.genotype    import Chromosome
from evoga.phenotype   import Individual, Layer, LayerTopology, Network, Neuron
from evoga.pool        import GeneticAlgorithm, Population, Statistics

__all__ = [
    "Config",
    "Trial",
    "Chromosome",
    "Individual",
    "Layer",
    "LayerTopology",
    "Network",
    "Neuron",
    "GeneticAlgorithm",
    "Population",
    "Statistics",
]

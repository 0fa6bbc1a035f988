"""
Evoga Operators Package

This package implements the genetic operators driving evolution. Each operator
is an interchangeable strategy with a single entry point; the genetic algorithm
only knows the abstract interfaces.

Modules:
    selection: Choosing parents (fitness-proportional)
    crossover: Combining two parent chromosomes into one child chromosome
    mutation:  Perturbing a chromosome in place

Exported Classes:
    SelectionMethod, RouletteWheelSelection
    CrossoverMethod, UniformCrossover, SinglePointCrossover
    MutationMethod,  UniformMutation,  GaussianMutation

Exported Functions:
    get_selection_method, get_crossover_method, get_mutation_method
"""

from evoga.operators.crossover import (CrossoverMethod, SinglePointCrossover, UniformCrossover,
                                       get_crossover_method)
from evoga.operators.mutation  import (GaussianMutation, MutationMethod, UniformMutation,
                                       get_mutation_method)
from evoga.operators.selection import (RouletteWheelSelection, SelectionMethod,
                                       get_selection_method)

__all__ = ['CrossoverMethod',
           'SinglePointCrossover',
           'UniformCrossover',
           'get_crossover_method',
           'GaussianMutation',
           'MutationMethod',
           'UniformMutation',
           'get_mutation_method',
           'RouletteWheelSelection',
           'SelectionMethod',
           'get_selection_method']

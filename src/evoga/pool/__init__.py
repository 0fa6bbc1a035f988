"""
Evoga Pool Package

This package implements the population-level machinery of the genetic algorithm.

Modules:
    genetic_algorithm: GeneticAlgorithm class, replacing one generation with the next
    population:        Population class, holding the current generation
    statistics:        Statistics class, summarizing a generation's fitness

Exported Classes:
    GeneticAlgorithm: Orchestrator composing selection, crossover and mutation
    Population:       The current generation of individuals
    Statistics:       Fitness statistics of one generation
"""

from evoga.pool.genetic_algorithm import GeneticAlgorithm
from evoga.pool.population        import Population
from evoga.pool.statistics        import Statistics

__all__ = ['GeneticAlgorithm',
           'Population',
           'Statistics']

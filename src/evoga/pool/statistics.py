"""
Evoga Statistics Module

Summary of a generation's fitness, used for progress reporting.

Classes:
    Statistics: min / max / mean / median fitness of a population
"""

from dataclasses import dataclass
from statistics  import mean, median
from typing      import Sequence

from evoga.errors    import EmptyPopulationError, FitnessError
from evoga.phenotype import Individual


@dataclass(frozen=True)
class Statistics:
    """Fitness statistics of one generation."""
    size          : int
    min_fitness   : float
    max_fitness   : float
    mean_fitness  : float
    median_fitness: float

    @classmethod
    def from_population(cls, population: Sequence[Individual]) -> 'Statistics':
        """
        Summarize the fitness of an evaluated population.

        Raises:
            EmptyPopulationError: if the population is empty
            FitnessError:         if an individual has not been evaluated
        """
        if len(population) == 0:
            raise EmptyPopulationError("Cannot compute statistics of an empty population")

        fitness = [individual.fitness for individual in population]
        if any(f is None for f in fitness):
            raise FitnessError("Cannot compute statistics before every individual has been evaluated")

        return cls(size           = len(fitness),
                   min_fitness    = min(fitness),
                   max_fitness    = max(fitness),
                   mean_fitness   = mean(fitness),
                   median_fitness = median(fitness))

    def __str__(self):
        return (f"size={self.size}, min={self.min_fitness:.4f}, max={self.max_fitness:.4f}, "
                f"mean={self.mean_fitness:.4f}, median={self.median_fitness:.4f}")

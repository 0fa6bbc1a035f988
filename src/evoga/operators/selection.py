"""
Evoga Selection Module

Selection decides which individuals become parents of the next generation.
Every selection method draws a single individual per call, with replacement,
so the genetic algorithm calls it twice per child.

Classes:
    SelectionMethod:        Abstract interface of a selection strategy
    RouletteWheelSelection: Fitness-proportional selection

Functions:
    get_selection_method: Build a selection method from its configuration name
"""

import logging
from abc    import ABC, abstractmethod
from typing import Sequence

import numpy as np

from evoga.errors    import EmptyPopulationError, FitnessError
from evoga.phenotype import Individual

logger = logging.getLogger(__name__)


class SelectionMethod(ABC):
    """
    Abstract base class for selection strategies.

    Public Methods (must be implemented by subclasses):
        select(rng, population): Choose one individual from the population
    """

    @abstractmethod
    def select(self, rng: np.random.Generator, population: Sequence[Individual]) -> Individual:
        """
        Choose one individual from the population.
        The population is not modified; the chosen individual stays available.

        Parameters:
            rng:        source of randomness
            population: the individuals to choose from (at least one)

        Returns:
            a reference to the chosen individual
        """
        pass


class RouletteWheelSelection(SelectionMethod):
    """
    Fitness-proportional ("roulette wheel") selection.

    The probability of choosing an individual is its fitness divided by the
    total fitness of the population. Individuals with zero fitness are never
    chosen as long as at least one individual has positive fitness.

    When every individual has zero fitness the wheel has no area, and the method
    falls back to choosing uniformly among all individuals.

    Fitness must be assigned (not None) and non-negative for every individual.
    """

    def select(self, rng: np.random.Generator, population: Sequence[Individual]) -> Individual:
        if len(population) == 0:
            raise EmptyPopulationError("Cannot select from an empty population")

        fitness = self._fitness_values(population)
        total   = float(fitness.sum())

        if total == 0.0:
            logger.debug("All %d individuals have zero fitness, selecting uniformly", len(population))
            return population[int(rng.integers(len(population)))]

        # first individual whose cumulative fitness exceeds the draw
        cumulative = np.cumsum(fitness)
        draw       = rng.uniform(0.0, total)
        index      = int(np.searchsorted(cumulative, draw, side='right'))

        # guard against 'draw' landing on the float-rounded total
        index = min(index, len(population) - 1)
        while fitness[index] == 0.0:
            index -= 1

        return population[index]

    @staticmethod
    def _fitness_values(population: Sequence[Individual]) -> np.ndarray:
        values = []
        for individual in population:
            if individual.fitness is None:
                raise FitnessError(f"Individual {individual.ID} has not been evaluated (fitness is None)")
            if individual.fitness < 0:
                raise FitnessError(f"Individual {individual.ID} has negative fitness {individual.fitness}; "
                                   f"fitness-proportional selection requires fitness >= 0")
            values.append(individual.fitness)
        return np.asarray(values, dtype=np.float64)

    def __repr__(self):
        return "RouletteWheelSelection()"


_SELECTION_METHODS = {
    'roulette': RouletteWheelSelection,
}


def get_selection_method(name: str, **kwargs) -> SelectionMethod:
    """
    Factory function for selection methods.

    Parameters:
        name:     one of 'roulette'
        **kwargs: arguments for the method's constructor

    Returns:
        the selection method instance
    """
    if name not in _SELECTION_METHODS:
        raise ValueError(f"Unknown selection method: {name}")
    return _SELECTION_METHODS[name](**kwargs)

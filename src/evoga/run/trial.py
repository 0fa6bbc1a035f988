"""
Evoga Trial Module

This module defines the abstract base class for genetic algorithm trials with
built-in support for CPU-based parallelization of fitness evaluation using joblib.

A trial represents one independent run of the genetic algorithm, evolving a
population through generations until a solution is found or the maximum
number of generations is reached.
"""

import logging
from abc        import ABC, abstractmethod
from joblib     import Parallel, delayed
from numbers    import Real
from statistics import mean
from typing     import Optional, TYPE_CHECKING

import numpy as np

from evoga.errors     import FitnessError
from evoga.pool       import Population
from evoga.run.config import Config

if TYPE_CHECKING:
    from evoga.phenotype import Individual

logger = logging.getLogger(__name__)


class Trial(ABC):
    """
    Abstract base class for implementing a genetic algorithm trial.

    A trial represents one independent run of the genetic algorithm, evolving a
    population through generations until a solution is found or the maximum
    number of generations is reached.

    The trial owns the random generator of the run. It is created from
    'config.seed' at the start of every run and threaded through population
    initialization and every generation, so a seeded run is reproducible.

    Subclasses must implement:
    - _reset(): Reset trial-specific state and call super()._reset()
    - _evaluate_fitness(individual): Evaluate fitness for a single individual
    - _report_progress(): Display progress after each generation
    - _final_report(): Display final results

    Subclasses can override:
    - _terminate(): Custom termination logic (default: max generations + fitness threshold)

    Public Methods:
        run(): Execute a complete trial

    Parallelization of fitness evaluation for individuals:
        num_jobs=1:  Serial evaluation (no parallelization)
        num_jobs>1:  Use specified number of parallel processes
        num_jobs=-1: Use all available CPU cores
    """

    def __init__(self, config: Config, suppress_output: bool = False):
        """
        Initialize the trial.

        Parameters:
            config:          Configuration parameters
            suppress_output: If True, suppress progress and final reports
        """
        self._config            : Config                        = config
        self._generation_counter: int                           = 0
        self._population        : Optional[Population]          = None
        self._rng               : Optional[np.random.Generator] = None
        self._suppress_output   : bool                          = suppress_output
        self.failed             : bool                          = True

    @property
    def population(self) -> Optional[Population]:
        return self._population

    def __getstate__(self):
        """
        Pickled copies of a trial (the ones joblib ships to worker processes)
        carry neither the random generator nor the population.
        """
        state = self.__dict__.copy()
        state['_rng']        = None
        state['_population'] = None
        return state

    def run(self, num_jobs: int = 1):
        """
        Run the trial.

        Resets the trial state and runs the genetic algorithm
        until the terminate condition is met.

        Parameters:
            num_jobs: Number of parallel processes for fitness evaluation of individuals
                      1 = serial (no parallelization)
                     -1 = use all available CPU cores
                     >1 = use specified number of processes
        """
        # Reset the trial state before starting a new run
        self._reset()

        # Create the random generator and the initial population
        self._rng        = np.random.default_rng(self._config.seed)
        self._population = Population(self._config, self._rng)

        # Evaluate the fitness of the initial population
        self._evaluate_fitness_all(num_jobs)
        logger.info("Generation %d: %s", self._generation_counter, self._population.statistics())

        if not self._suppress_output:
            self._report_progress()

        # Evolution loop
        while not self._terminate():
            self._generation_counter += 1

            # Select, cross over and mutate into a new generation
            self._population.spawn_next_generation()

            # Evaluate the fitness of each individual in the new generation
            self._evaluate_fitness_all(num_jobs)
            logger.info("Generation %d: %s", self._generation_counter, self._population.statistics())

            if not self._suppress_output:
                self._report_progress()

        logger.info("Trial finished after %d generations (%s)",
                    self._generation_counter, "failed" if self.failed else "succeeded")

        if not self._suppress_output:
            self._final_report()

    @abstractmethod
    def _reset(self):
        """
        Reset the trial state before starting a new run.

        Subclasses should call super()._reset() and then
        initialize their problem-specific data.
        """
        self._generation_counter = 0
        self._population = None
        self._rng = None
        self.failed = True

    @abstractmethod
    def _evaluate_fitness(self, individual: 'Individual') -> float:
        """
        Evaluate and return the fitness of an individual.

        This method should test the individual's neural network on the
        problem domain and compute a fitness score. Higher fitness values
        indicate better performance and higher probability of being
        selected as a parent.

        IMPORTANT: The fitness must be a positive number (or zero).

        With num_jobs != 1 this method runs in worker processes, on a copy of
        the trial whose '_rng' and '_population' are None; it must depend
        only on the individual and on the problem data of the trial.

        Parameters:
            individual: The Individual (neural network) to evaluate

        Returns:
            float: Fitness score for the individual
        """
        pass

    def _evaluate_fitness_all(self, num_jobs: int):
        """
        Evaluate fitness for all individuals in the population.

        Uses serial or parallel evaluation based on num_jobs:
        - num_jobs=1: Sequential evaluation in single process
        - num_jobs>1 or -1: Parallel evaluation using joblib

        Parameters:
            num_jobs: Number of parallel processes for fitness evaluation

        Raises:
            FitnessError: if an evaluation returns a negative or non-numeric fitness
        """
        individuals = self._population.individuals
        serialize   = num_jobs == 1

        if serialize:
            fitness_all = [self._evaluate_fitness(individual) for individual in individuals]
        else:
            fitness_all = Parallel(num_jobs)(delayed(self._evaluate_fitness)(i) for i in individuals)

        for individual, fitness in zip(individuals, fitness_all):
            if not isinstance(fitness, Real) or fitness < 0:
                raise FitnessError(f"Fitness of individual {individual.ID} must be a non-negative number, "
                                   f"got {fitness!r}")
            individual.fitness = float(fitness)

    @abstractmethod
    def _report_progress(self):
        """
        Report trial progress after each generation.

        This method is suppressed by setting 'self._suppress_output' to 'True'.
        """
        pass

    @abstractmethod
    def _final_report(self):
        """
        Produce final report at the end of the trial.

        This method is suppressed by setting 'self._suppress_output' to 'True'.
        """
        pass

    def _terminate(self) -> bool:
        """
        Determine whether the trial should terminate.

        This default implementation stops the trial after a maximum number
        of generations and (optionally) also stops it if a given measure of
        population fitness has reached a given threshold.

        Returns:
            bool: True if the trial should stop, False otherwise
        """
        # Has this trial run for too long?
        terminate = self._generation_counter >= self._config.max_number_generations

        # Check whether the fitness has reached a target threshold
        if self._config.fitness_termination_check:
            individual_fitness = [indv.fitness for indv in self._population.individuals]

            if self._config.fitness_criterion == "max":
                overall_fitness = max(individual_fitness)
            elif self._config.fitness_criterion == "mean":
                overall_fitness = mean(individual_fitness)
            else:
                raise RuntimeError("bad 'fitness_criterion' in configuration file")

            success = overall_fitness >= self._config.fitness_threshold
            terminate = terminate or success

            if terminate:
                self.failed = not success

        return terminate

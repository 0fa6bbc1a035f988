"""
XOR Problem Implementation for evoga

This module implements the classic XOR (exclusive OR) problem as a benchmark
for the genetic algorithm. XOR is not linearly separable, so the evolved
networks need a hidden layer to solve it.

The XOR Problem:
    Input (0, 0) → Output 0
    Input (0, 1) → Output 1
    Input (1, 0) → Output 1
    Input (1, 1) → Output 0

Fitness Function:
    Fitness = max(0, 4.0 - Σ(output - target)²)

    Roulette wheel selection needs non-negative fitness, so the score is
    floored at zero. A perfect network scores 4.0.

Classes:
    Trial_XOR: Genetic algorithm trial for solving XOR

Usage:
    config = Config("examples/config_xor.ini")
    trial  = Trial_XOR(config)
    trial.run(num_jobs=1)
"""

import logging
from pathlib import Path

import numpy as np

from evoga.run.config import Config
from evoga.phenotype  import Individual
from evoga.run        import Trial


class Trial_XOR(Trial):
    """
    Genetic algorithm trial for solving the XOR (exclusive OR) problem.

    Every individual carries a fixed-topology ReLU network (set by 'topology'
    in the configuration file, e.g. "2, 4, 1"); only its weights and biases
    evolve.

    Implemented Methods:
        _evaluate_fitness(individual): Test network on all 4 XOR cases
        _report_progress(): Display generation statistics and XOR truth table
        _final_report(): Display the chromosome of the fittest network
    """

    def __init__(self, config: Config, suppress_output: bool = False):
        """
        Initialize the XOR trial.

        Parameters:
            config:          Configuration parameters (population size, mutation rates, etc.)
            suppress_output: If True, suppress progress and final reports
        """
        super().__init__(config, suppress_output)

        self.xor_inputs  = np.array([[0.0, 0.0],
                                     [0.0, 1.0],
                                     [1.0, 0.0],
                                     [1.0, 1.0]])
        self.xor_outputs = np.array([0.0, 1.0, 1.0, 0.0])

    def _reset(self):
        """Reset trial state."""
        return super()._reset()

    def _evaluate_fitness(self, individual: Individual) -> float:
        """
        Evaluate individual fitness by testing on XOR inputs.

        Parameters:
            individual: The individual to evaluate

        Returns:
            Fitness score (maximum 4.0 for perfect XOR solution)
        """
        fitness = 4.0  # max possible fitness
        for inputs, expected_output in zip(self.xor_inputs, self.xor_outputs):
            output   = individual.propagate(inputs)[0]
            fitness -= (output - expected_output) ** 2

        return max(0.0, float(fitness))

    def _report_progress(self):
        """
        Print a report describing the current generation.

        This method is suppressed by setting 'self._suppress_output' to 'True'.
        """
        fittest = self._population.get_fittest_individual()

        s  = f"===============\n"
        s += f"GENERATION {self._generation_counter:04d}\n"
        s += f"{self._population.statistics()}\n"
        s += '\n'

        s += "input         output   target  error\n"
        s += "------------------------------------\n"
        for inputs, target in zip(self.xor_inputs, self.xor_outputs):
            output = fittest.propagate(inputs)[0]
            s += f"{inputs.tolist()} -> {output:.4f}    {target}   {abs(output - target):.4f}\n"

        print(s)

    def _final_report(self):
        """
        Display results at the end of the trial.

        This method is suppressed by setting 'self._suppress_output' to 'True'.
        """
        fittest = self._population.get_fittest_individual()

        s  = "\nSUMMARY:\n"
        s += f"Generations      = {self._generation_counter}\n"
        s += f"Result           = {'FAILED' if self.failed else 'SUCCESS'}\n"
        s += f"Fittest network  = {fittest}\n"
        print(s)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    config = Config(str(Path(__file__).parent / "config_xor.ini"))
    trial  = Trial_XOR(config)
    trial.run(num_jobs=1)

"""
Evoga Errors Module

Typed failures raised when a caller breaks one of the library's preconditions.
All of them derive from ValueError, so code that already guards against bad
arguments with 'except ValueError' keeps working.

Classes:
    EvolutionError:        Base class for all the errors below
    EmptyPopulationError:  An operation received a population with no individuals
    TopologyError:         A topology is too short, holds a non-positive width, or does not match
    InputSizeError:        A network received the wrong number of inputs
    ChromosomeLengthError: A chromosome does not have the length an operation requires
    FitnessError:          An individual's fitness is missing or negative
"""


class EvolutionError(ValueError):
    """Base class for precondition violations detected by evoga."""


class EmptyPopulationError(EvolutionError):
    """Raised when an operation requires at least one individual."""


class TopologyError(EvolutionError):
    """Raised when a network topology is invalid or inconsistent."""


class InputSizeError(EvolutionError):
    """Raised when the number of network inputs does not match the input layer width."""


class ChromosomeLengthError(EvolutionError):
    """Raised when chromosome lengths disagree with each other or with a topology."""


class FitnessError(EvolutionError):
    """Raised when fitness-proportional selection meets an unusable fitness value."""

"""
Evoga Run Package

This package provides the infrastructure for running the genetic algorithm.

Modules:
    config: Config class, parsing INI configuration files
    trial:  Trial abstract base class, driving one run generation by generation

Exported Classes:
    Config: Configuration parameters
    Trial:  Abstract base class for one run of the genetic algorithm
"""

from evoga.run.config import Config
from evoga.run.trial  import Trial

__all__ = ['Config',
           'Trial']

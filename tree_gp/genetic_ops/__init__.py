"""
Genetic Operations Module

Recombination operators that act on Individuals in place.
"""

from .crossover_operations import Crossover, CrossoverMode

__all__ = [
    'Crossover',
    'CrossoverMode'
]

"""Differential evolution operator implementations."""

from .crossover import Binomial, Exponential, NoCrossover
from .mutation import de_mutation, draw_distinct
from .pool import MatingPool
from .selection import Best, CurrentToBest, CurrentToRandom, Random, best_individual

__all__ = [
    "Best",
    "Binomial",
    "CurrentToBest",
    "CurrentToRandom",
    "Exponential",
    "MatingPool",
    "NoCrossover",
    "Random",
    "best_individual",
    "de_mutation",
    "draw_distinct",
]

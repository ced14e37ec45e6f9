"""Trajectory strategy implementations."""

from .iterative_improvement import (
    II,
    BestImproving,
    FirstImproving,
    IterativeImprovement,
    Stochastic,
)
from .random_search import RS, RandomSearch
from .simulated_annealing import SA, SimulatedAnnealing
from .tabu_search import TS, TabuSearch

__all__ = [
    "BestImproving",
    "FirstImproving",
    "II",
    "IterativeImprovement",
    "RS",
    "RandomSearch",
    "SA",
    "SimulatedAnnealing",
    "Stochastic",
    "TS",
    "TabuSearch",
]

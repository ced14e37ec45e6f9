"""Base-vector selection policies for differential evolution.

Each policy appends what it picked to the mating pool and returns the base
vector the mutation offset is added to.
"""

import numpy as np

from .mutation import draw_distinct


def best_individual(population):
    """Live best individual; ties resolve to the lowest index."""
    scores = np.fromiter((s.score for s in population), dtype=np.float64, count=len(population))
    return population[int(np.argmin(scores))]


class Random:
    name = "random"

    def select_base(self, pool, target, population, de, rng):
        return pool.push(draw_distinct(pool, population, rng, de.max_retries)).copy()


class Best:
    name = "best"

    def select_base(self, pool, target, population, de, rng):
        return pool.push(best_individual(population).encoding).copy()


class CurrentToRandom:
    name = "current_to_random"

    def select_base(self, pool, target, population, de, rng):
        other = pool.push(draw_distinct(pool, population, rng, de.max_retries))
        return target + de.current_factor * (other - target)


class CurrentToBest:
    name = "current_to_best"

    def select_base(self, pool, target, population, de, rng):
        best = pool.push(best_individual(population).encoding)
        return target + de.current_factor * (best - target)

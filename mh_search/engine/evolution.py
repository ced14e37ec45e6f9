"""Differential evolution: population set-up and generation step."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from ..config.enums import ST_EVOLVE
from ..operators.evolution import Best, MatingPool, NoCrossover, best_individual, de_mutation
from .numeric import EvaluateAdapter, evaluate_buffer, from_buffer, to_buffers
from .problem import PopulationProblem
from .solution import Solution


@dataclass
class DifferentialEvolution:
    """DE configuration; nothing in here changes during a run.

    ``discard_trial`` makes :func:`de_mate` hand back the unmodified target
    vector (so offspring never differ from their parent), matching runs made
    before mate construction returned the trial vector.
    """

    crossover_rate: float
    current_factor: float
    scaling_factor: float
    num_of_diff_vectors: int = 1
    selection_strategy: object = field(default_factory=Best)
    crossover_strategy: object = field(default_factory=NoCrossover)
    max_retries: int = 1000
    discard_trial: bool = False
    name = "Differential Evolution"

    def __post_init__(self) -> None:
        if int(self.num_of_diff_vectors) < 0:
            raise ValueError("num_of_diff_vectors must be >= 0")
        if int(self.max_retries) < 1:
            raise ValueError("max_retries must be >= 1")
        self.num_of_diff_vectors = int(self.num_of_diff_vectors)
        self.max_retries = int(self.max_retries)


DE = DifferentialEvolution


def initialize_population(problem, encodings):
    """Evaluate every encoding once, keeping input order."""

    return [Solution(e, problem.evaluate(e)) for e in encodings]


def de_mate(target, population, de, rng):
    """Build the trial vector for ``target``."""

    # target, base, a random base and the difference pairs
    pool = MatingPool(3 + 2 * de.num_of_diff_vectors, target.shape[0])
    pool.push(target)
    mutant = de.selection_strategy.select_base(pool, target, population, de, rng)
    mutant = mutant + de_mutation(
        pool,
        population,
        de.scaling_factor,
        de.num_of_diff_vectors,
        rng,
        max_retries=de.max_retries,
    )
    trial = de.crossover_strategy.cross(target, mutant, de.crossover_rate, rng)
    if de.discard_trial:
        return target.copy()
    return trial


def generate(problem, population, de, rng):
    """One DE generation over ``population``, in place.

    Individuals are processed by index and a better trial replaces its parent
    immediately, so later individuals already see the updated slots.
    Returns the number of replacements.
    """

    replaced = 0
    for i in range(len(population)):
        target = population[i].encoding
        trial = de_mate(target, population, de, rng)
        trial_score = problem.evaluate(trial)
        if trial_score < population[i].score:
            population[i] = Solution(trial, trial_score)
            replaced += 1
    return replaced


def _evolve_buffers(problem, de, buffers, rng, metrics, log_period):
    population = initialize_population(problem, buffers)
    log_period = max(1, int(log_period))

    for it in range(1, problem.generation_limit + 1):
        replaced = generate(problem, population, de, rng)
        if metrics is not None and ((it % log_period) == 0 or it == 1):
            scores = np.array([s.score for s in population], dtype=np.float64)
            metrics.append(
                it,
                float(scores.mean()),
                float(scores.min()),
                float("nan"),
                strategy=de.name,
                status=f"{ST_EVOLVE}:{replaced}",
            )

    return best_individual(population)


def evolution(problem, de, initial_population, *, rng=None, metrics=None, log_period=1):
    """Run differential evolution and return the best individual.

    ``initial_population`` may hold numpy vectors, which are used as they are
    (cast to float64), or any other real sequences (lists, tuples), which go
    through the buffer conversion and come back in their original type.
    """

    if len(initial_population) == 0:
        raise ValueError("initial population must not be empty")

    rng = np.random.default_rng(rng)
    if metrics is not None:
        metrics.start(de.name)

    if all(isinstance(e, np.ndarray) for e in initial_population):
        buffers = to_buffers(initial_population)
        best = _evolve_buffers(problem, de, buffers, rng, metrics, log_period)
    else:
        seq_type = type(initial_population[0])
        adapter = EvaluateAdapter(problem.evaluate_fn, problem.context, seq_type)
        inner = PopulationProblem(problem.generation_limit, evaluate_buffer, adapter)
        buffers = to_buffers(initial_population)
        result = _evolve_buffers(inner, de, buffers, rng, metrics, log_period)
        best = Solution(from_buffer(result.encoding, seq_type), result.score)

    if metrics is not None:
        metrics.finish(best.score)
    return best


__all__ = [
    "DE",
    "DifferentialEvolution",
    "de_mate",
    "evolution",
    "generate",
    "initialize_population",
]

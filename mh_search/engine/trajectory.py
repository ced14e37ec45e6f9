"""Generate / evaluate / select loop shared by all trajectory strategies."""

from __future__ import annotations

import numpy as np

from ..config.enums import ST_ACCEPT, ST_BEST, ST_IMPROVE, ST_STAY
from .solution import Solution


def _evaluate_all(problem, encodings):
    # order matters for the deterministic strategies
    return [Solution(e, problem.evaluate(e)) for e in encodings]


def _status(prev, current, best_before):
    if current is prev:
        return ST_STAY
    if current < best_before:
        return ST_BEST
    if current < prev:
        return ST_IMPROVE
    return ST_ACCEPT


def search(problem, strategy, initial_encoding, *, rng=None, metrics=None, log_period=1):
    """Run ``strategy`` on ``problem`` from ``initial_encoding``.

    Parameters
    ----------
    problem : TrajectoryProblem
        Generation budget, neighbor function and objective.
    strategy
        Any trajectory strategy (``IterativeImprovement``, ``SimulatedAnnealing``,
        ``TabuSearch``, ``RandomSearch``). Its run state is reset here and
        mutated while the search runs.
    initial_encoding
        Start point of the trajectory.
    rng : None, int or numpy.random.Generator
        Source of randomness for the run.
    metrics : Metrics, optional
        Progress sink, fed every ``log_period`` generations.

    Returns
    -------
    Solution
        The best solution seen; ties keep the earliest one.
    """

    rng = np.random.default_rng(rng)
    log_period = max(1, int(log_period))

    strategy.initialize(problem, initial_encoding)
    if metrics is not None:
        metrics.start(strategy.name)

    current = Solution(initial_encoding, problem.evaluate(initial_encoding))
    best = current

    for it in range(1, problem.generation_limit + 1):
        neighbors = _evaluate_all(problem, problem.neighbor_fn(current.encoding))
        prev, best_before = current, best

        current = strategy.select(problem, current, neighbors, rng)
        if current < best:
            best = current

        if metrics is not None and ((it % log_period) == 0 or it == 1):
            metrics.append(
                it,
                current.score,
                best.score,
                getattr(strategy, "temperature", float("nan")),
                strategy=strategy.name,
                status=_status(prev, current, best_before),
            )

    if metrics is not None:
        metrics.finish(best.score)
    return best


__all__ = ["search"]

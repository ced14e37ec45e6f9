"""Caller-supplied problem definitions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Sequence


def _check_limit(limit) -> int:
    try:
        val = int(limit)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"generation_limit must be an integer, got {limit!r}") from exc
    if val < 0:
        raise ValueError("generation_limit must be >= 0")
    return val


@dataclass(frozen=True)
class TrajectoryProblem:
    """Budget, neighborhood and objective for a trajectory search.

    ``neighbor_fn(encoding)`` returns the candidate encodings reachable in one
    step, ``evaluate_fn(encoding, context)`` returns the score to minimise.
    ``context`` is handed to ``evaluate_fn`` (and to tabu trait functions)
    without being inspected.
    """

    generation_limit: int
    neighbor_fn: Callable[[Any], Sequence[Any]]
    evaluate_fn: Callable[[Any, Any], float]
    context: Any = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "generation_limit", _check_limit(self.generation_limit))

    def evaluate(self, encoding) -> float:
        return float(self.evaluate_fn(encoding, self.context))


@dataclass(frozen=True)
class PopulationProblem:
    """Budget and objective for a population search (no neighbor function)."""

    generation_limit: int
    evaluate_fn: Callable[[Any, Any], float]
    context: Any = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "generation_limit", _check_limit(self.generation_limit))

    def evaluate(self, encoding) -> float:
        return float(self.evaluate_fn(encoding, self.context))


__all__ = ["PopulationProblem", "TrajectoryProblem"]

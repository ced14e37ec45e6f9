"""Iterative improvement and its neighbor acceptance policies."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional


class BestImproving:
    """Move to the best neighbor, but only if it beats the current solution."""

    name = "best"

    def choose(self, current, neighbors, rng):
        if not neighbors:
            return current
        best = min(neighbors)
        return best if best < current else current


class FirstImproving:
    """Move to the first neighbor (generation order) that beats the current one."""

    name = "first"

    def choose(self, current, neighbors, rng):
        for neighbor in neighbors:
            if neighbor < current:
                return neighbor
        return current


@dataclass
class Stochastic:
    """Placeholder for a stochastic acceptance rule.

    Without ``rule`` the current solution is kept on every step. A caller can
    plug in ``rule(current, neighbors, rng) -> Solution``.
    """

    rule: Optional[Callable] = None
    name = "stochastic"

    def choose(self, current, neighbors, rng):
        if self.rule is None:
            return current
        return self.rule(current, neighbors, rng)


@dataclass
class IterativeImprovement:
    policy: object = field(default_factory=BestImproving)

    @property
    def name(self) -> str:
        return f"Iterative Improvement ({self.policy.name})"

    def initialize(self, problem, initial_encoding):
        pass

    def select(self, problem, current, neighbors, rng):
        return self.policy.choose(current, neighbors, rng)


II = IterativeImprovement

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Any, Callable

import numpy as np

from ...config.enums import TABU_CURRENT, TABU_RAISE, TABU_RELAX
from ...engine.errors import EmptyNeighborhood, TabuExhaustion

_FALLBACKS = (TABU_RAISE, TABU_CURRENT, TABU_RELAX)


def _same_trait(a, b):
    if isinstance(a, np.ndarray) or isinstance(b, np.ndarray):
        return np.array_equal(a, b)
    return bool(a == b)


@dataclass
class TabuSearch:
    """Tabu search over caller-defined traits.

    ``trait_fn(encoding, context)`` maps an encoding to the value stored in the
    tabu list; traits are compared with ``==``, or ``np.array_equal`` when
    either side is an array. The list is a FIFO of exactly ``length`` entries
    for the whole run, seeded with the start point's trait.
    The best admissible neighbor is taken even when it is worse than the
    current solution. ``on_exhaustion`` decides what happens when every
    neighbor is tabu: ``"raise"`` reports :class:`TabuExhaustion`,
    ``"current"`` stays put without touching the list and ``"relax"`` picks
    the best neighbor as if the list were empty.
    """

    length: int
    trait_fn: Callable[[Any, Any], Any]
    on_exhaustion: str = TABU_RAISE
    queue: deque = field(default_factory=deque, init=False)
    name = "Tabu Search"

    def __post_init__(self) -> None:
        if int(self.length) < 0:
            raise ValueError("tabu length must be >= 0")
        self.length = int(self.length)
        if self.on_exhaustion not in _FALLBACKS:
            raise ValueError(
                f"unknown tabu exhaustion policy {self.on_exhaustion!r}; expected one of {_FALLBACKS}"
            )

    def initialize(self, problem, initial_encoding):
        seed = self.trait_fn(initial_encoding, problem.context)
        self.queue = deque([seed] * self.length, maxlen=self.length)

    def is_tabu(self, trait) -> bool:
        return any(_same_trait(trait, t) for t in self.queue)

    def select(self, problem, current, neighbors, rng):
        if not neighbors:
            raise EmptyNeighborhood("tabu search needs at least one neighbor")

        best = None
        best_trait = None
        for neighbor in neighbors:
            trait = self.trait_fn(neighbor.encoding, problem.context)
            if self.is_tabu(trait):
                continue
            if best is None or neighbor < best:
                best, best_trait = neighbor, trait

        if best is None:
            if self.on_exhaustion == TABU_CURRENT:
                return current
            if self.on_exhaustion == TABU_RAISE:
                raise TabuExhaustion(
                    f"all {len(neighbors)} neighbors are tabu (list length {self.length})"
                )
            best = min(neighbors)
            best_trait = self.trait_fn(best.encoding, problem.context)

        # maxlen drops the oldest entry
        self.queue.append(best_trait)
        return best


TS = TabuSearch

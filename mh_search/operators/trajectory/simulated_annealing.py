from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from ...engine.acceptance import metropolis_accept


@dataclass
class SimulatedAnnealing:
    """Epoch-based simulated annealing.

    ``temperature`` and ``epoch_count`` are run state: ``initialize`` resets
    them and ``select`` advances them. Cooling happens only when
    ``epoch_count`` reaches ``epoch_length``.
    """

    init_temperature: float
    epoch_length: int
    cooling: Callable[[float], float]
    temperature: float = field(default=0.0, init=False)
    epoch_count: int = field(default=0, init=False)
    name = "Simulated Annealing"

    def __post_init__(self) -> None:
        if int(self.epoch_length) < 1:
            raise ValueError("epoch_length must be >= 1")
        self.epoch_length = int(self.epoch_length)
        self.temperature = float(self.init_temperature)

    def initialize(self, problem, initial_encoding):
        self.temperature = float(self.init_temperature)
        self.epoch_count = 0

    def select(self, problem, current, neighbors, rng):
        result = current
        for neighbor in neighbors:
            if neighbor < current or metropolis_accept(
                current.score, neighbor.score, self.temperature, rng
            ):
                result = neighbor
                break

        self.epoch_count += 1
        if self.epoch_count == self.epoch_length:
            self.temperature = float(self.cooling(self.temperature))
            self.epoch_count = 0
        return result


SA = SimulatedAnnealing

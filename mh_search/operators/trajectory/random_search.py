from ...engine.errors import EmptyNeighborhood


class RandomSearch:
    """Baseline that jumps to a uniformly random neighbor every step."""

    name = "Random Search"

    def initialize(self, problem, initial_encoding):
        pass

    def select(self, problem, current, neighbors, rng):
        if not neighbors:
            raise EmptyNeighborhood("random search needs at least one neighbor")
        return neighbors[int(rng.integers(len(neighbors)))]

    def __repr__(self) -> str:
        return "RandomSearch()"


RS = RandomSearch

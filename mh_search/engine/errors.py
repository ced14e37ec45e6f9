"""Failures a search run can report instead of a solution."""


class SearchError(RuntimeError):
    """Base class for conditions that abort a search run."""


class EmptyNeighborhood(SearchError):
    """A strategy that needs at least one neighbor received none."""


class InsufficientPopulationDiversity(SearchError):
    """DE mutation could not draw enough distinct individuals."""


class TabuExhaustion(SearchError):
    """Every neighbor was forbidden by the tabu list."""


__all__ = [
    "EmptyNeighborhood",
    "InsufficientPopulationDiversity",
    "SearchError",
    "TabuExhaustion",
]

"""Small benchmark problems used by the CLI and the tests."""

import numpy as np

from ..engine.problem import PopulationProblem, TrajectoryProblem


# integer line ---------------------------------------------------------------

def parabola(x, inf=None):
    return float(x * x)


def line_neighbors(x):
    return [x - 1, x + 1]


def parabola_problem(generation_limit):
    """Minimise ``x**2`` over the integers, moving one unit at a time."""
    return TrajectoryProblem(generation_limit, line_neighbors, parabola)


# bit strings ----------------------------------------------------------------

def hamming_to_target(bits, target):
    return float(sum(b != t for b, t in zip(bits, target)))


def flip_neighbors(bits):
    out = []
    for i in range(len(bits)):
        flipped = list(bits)
        flipped[i] = 1 - flipped[i]
        out.append(tuple(flipped))
    return out


def identity_trait(bits, inf=None):
    return tuple(bits)


def bitstring_problem(generation_limit, target):
    """Recover ``target`` (a 0/1 tuple) by single bit flips."""
    return TrajectoryProblem(generation_limit, flip_neighbors, hamming_to_target, tuple(target))


# continuous -----------------------------------------------------------------

def sphere(x, inf=None):
    x = np.asarray(x, dtype=np.float64)
    shift = 0.0 if inf is None else np.asarray(inf, dtype=np.float64)
    return float(np.sum((x - shift) ** 2))


def rastrigin(x, inf=None):
    x = np.asarray(x, dtype=np.float64)
    return float(10.0 * x.size + np.sum(x * x - 10.0 * np.cos(2.0 * np.pi * x)))


OBJECTIVES = {
    "sphere": sphere,
    "rastrigin": rastrigin,
}


def gaussian_neighbors(rng, sigma=0.5, k=8):
    """Neighbor function drawing ``k`` Gaussian perturbations per call."""
    def neighbors(x):
        x = np.asarray(x, dtype=np.float64)
        steps = rng.normal(0.0, sigma, size=(int(k), x.shape[0]))
        return [x + s for s in steps]

    return neighbors


def continuous_problem(name, generation_limit, rng=None, sigma=0.5, k=8, context=None):
    """Trajectory problem when ``rng`` is given, population problem otherwise."""
    if name not in OBJECTIVES:
        raise ValueError(f"unknown objective {name!r}; expected one of {sorted(OBJECTIVES)}")
    if rng is None:
        return PopulationProblem(generation_limit, OBJECTIVES[name], context)
    return TrajectoryProblem(generation_limit, gaussian_neighbors(rng, sigma, k), OBJECTIVES[name], context)


def random_population(n, dim, low=-5.0, high=5.0, seed=0):
    rng = np.random.default_rng(seed)
    return rng.uniform(low, high, size=(int(n), int(dim))).tolist()

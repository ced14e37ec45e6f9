import numpy as np


class NoCrossover:
    """Trial vector is the mutant itself; ``crossover_rate`` is ignored."""

    name = "none"

    def cross(self, target, mutant, rate, rng):
        return mutant


class Binomial:
    """Take each dimension from the mutant with probability ``rate``.

    One random dimension always comes from the mutant so the trial differs
    from the target.
    """

    name = "binomial"

    def cross(self, target, mutant, rate, rng):
        dim = target.shape[0]
        mask = rng.random(dim) < rate
        mask[int(rng.integers(dim))] = True
        return np.where(mask, mutant, target)


class Exponential:
    """Copy one contiguous (wrapping) run of mutant dimensions into the target."""

    name = "exponential"

    def cross(self, target, mutant, rate, rng):
        dim = target.shape[0]
        trial = target.copy()
        start = int(rng.integers(dim))
        L = 1
        while L < dim and rng.random() < rate:
            L += 1
        idx = (start + np.arange(L)) % dim
        trial[idx] = mutant[idx]
        return trial

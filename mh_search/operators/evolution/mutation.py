import numpy as np

from ...engine.errors import InsufficientPopulationDiversity


def draw_distinct(pool, population, rng, max_retries):
    """Sample a uniformly random individual whose encoding is not in ``pool``.

    Gives up with :class:`InsufficientPopulationDiversity` after
    ``max_retries`` rejected draws.
    """
    n = len(population)
    for _ in range(max(1, int(max_retries))):
        enc = population[int(rng.integers(n))].encoding
        if not pool.contains(enc):
            return enc
    raise InsufficientPopulationDiversity(
        f"no individual outside the mating pool ({len(pool)} entries) after "
        f"{max_retries} draws from a population of {n}"
    )


def de_mutation(pool, population, scaling_factor, diff_vecs, rng, max_retries=1000):
    """Scaled sum of ``diff_vecs`` difference vectors (v2 - v1).

    Every drawn vector joins the pool, so no encoding is reused within one
    mate construction. The scaling is applied once to the total.
    """
    offset = np.zeros(pool.rows.shape[1], dtype=np.float64)
    for _ in range(int(diff_vecs)):
        v1 = pool.push(draw_distinct(pool, population, rng, max_retries))
        v2 = pool.push(draw_distinct(pool, population, rng, max_retries))
        offset += v2 - v1
    return scaling_factor * offset

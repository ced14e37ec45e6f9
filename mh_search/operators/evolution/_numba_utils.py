"""Shared Numba-accelerated utilities for DE operators."""

from __future__ import annotations

import numpy as np
from numba import njit


@njit(cache=True)
def find_row(pool, count, vec):
    """Return the index of the first of ``count`` rows equal to ``vec``.

    Parameters
    ----------
    pool : ndarray
        Buffer of shape ``(capacity, dim)``.
    count : int
        Number of populated rows.
    vec : ndarray
        Candidate of shape ``(dim,)``.

    Returns
    -------
    int
        Row index, or ``-1`` when no populated row matches elementwise.
    """

    dim = vec.shape[0]
    for r in range(count):
        same = True
        for j in range(dim):
            if pool[r, j] != vec[j]:
                same = False
                break
        if same:
            return r
    return -1

import numpy as np

from ._numba_utils import find_row


class MatingPool:
    """Encodings gathered while building one trial vector.

    Rows live in a preallocated ``(capacity, dim)`` float64 buffer; membership
    is exact elementwise equality.
    """

    def __init__(self, capacity, dim):
        self.rows = np.empty((int(capacity), int(dim)), dtype=np.float64)
        self.count = 0

    def push(self, vec):
        if self.count >= self.rows.shape[0]:
            raise ValueError("mating pool is full")
        self.rows[self.count] = vec
        self.count += 1
        return self.rows[self.count - 1]

    def contains(self, vec):
        vec = np.ascontiguousarray(vec, dtype=np.float64)
        return find_row(self.rows, self.count, vec) >= 0

    def __len__(self):
        return self.count

    def __getitem__(self, idx):
        if idx < 0:
            idx += self.count
        if not 0 <= idx < self.count:
            raise IndexError(idx)
        return self.rows[idx]

"""Conversion between caller sequences and the float buffers DE works on."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Sequence

import numpy as np


def to_buffer(seq: Sequence[float]) -> np.ndarray:
    """Copy a real-valued sequence into a contiguous float64 buffer."""

    buf = np.array(seq, dtype=np.float64, copy=True)
    if buf.ndim != 1:
        raise ValueError(f"expected a flat sequence of reals, got shape {buf.shape}")
    if buf.shape[0] == 0:
        raise ValueError("encodings must have at least one dimension")
    return buf


def from_buffer(buf: np.ndarray, seq_type: type = list):
    """Rebuild a caller sequence (``list`` by default) from a buffer."""

    values = np.asarray(buf, dtype=np.float64).tolist()
    if seq_type is list:
        return values
    return seq_type(values)


def to_buffers(population: Sequence[Sequence[float]]) -> list:
    buffers = [to_buffer(seq) for seq in population]
    dims = {b.shape[0] for b in buffers}
    if len(dims) > 1:
        raise ValueError(f"population members differ in dimension: {sorted(dims)}")
    return buffers


@dataclass(frozen=True)
class EvaluateAdapter:
    """Caller's objective and context, re-exposed for buffer encodings."""

    evaluate_fn: Callable[[Any, Any], float]
    context: Any = None
    seq_type: type = list

    def __call__(self, buf: np.ndarray) -> float:
        return self.evaluate_fn(from_buffer(buf, self.seq_type), self.context)


def evaluate_buffer(buf: np.ndarray, adapter: EvaluateAdapter) -> float:
    """Objective of a buffer-typed problem whose context is an adapter."""

    return adapter(buf)


__all__ = [
    "EvaluateAdapter",
    "evaluate_buffer",
    "from_buffer",
    "to_buffer",
    "to_buffers",
]

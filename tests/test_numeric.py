import numpy as np
import pytest

from mh_search.engine.numeric import (
    EvaluateAdapter,
    evaluate_buffer,
    from_buffer,
    to_buffer,
    to_buffers,
)
from mh_search.operators.evolution._numba_utils import find_row


def test_buffer_round_trip_is_lossless():
    values = [0.1, -3.5, 1e-300, 123456789.123456789, 0.0, -0.0, 2.0 ** 60]
    buf = to_buffer(values)
    assert buf.dtype == np.float64
    assert from_buffer(buf) == values
    assert from_buffer(to_buffer(tuple(values)), tuple) == tuple(values)


def test_to_buffer_copies_input():
    src = np.array([1.0, 2.0])
    buf = to_buffer(src)
    buf[0] = 9.0
    assert src[0] == 1.0


def test_to_buffer_rejects_nested_input():
    with pytest.raises(ValueError):
        to_buffer([[1.0, 2.0], [3.0, 4.0]])


def test_adapter_restores_caller_objective_and_context():
    calls = []

    def evaluate(x, inf):
        calls.append((x, inf))
        return sum(x) + inf

    adapter = EvaluateAdapter(evaluate, 10.0)
    assert evaluate_buffer(np.array([1.0, 2.0]), adapter) == 13.0
    assert calls == [([1.0, 2.0], 10.0)]


def test_find_row_exact_match():
    pool = np.array([[1.0, 2.0], [3.0, 4.0], [5.0, 6.0]])
    assert find_row(pool, 3, np.array([3.0, 4.0])) == 1
    assert find_row(pool, 1, np.array([3.0, 4.0])) == -1
    assert find_row(pool, 3, np.array([3.0, 4.0000001])) == -1


def test_zero_length_encodings_rejected():
    with pytest.raises(ValueError):
        to_buffer([])
    with pytest.raises(ValueError):
        to_buffers([[], []])

import numpy as np

from mh_search.engine.acceptance import geometric_cooling, metropolis_accept
from mh_search.engine.solution import Solution


class _FixedRng:
    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value


def test_metropolis_uses_raw_score_difference_over_temperature():
    # exp((1 - 2) / 1) ~ 0.368, exp((1 - 2) / 10) ~ 0.905
    assert not metropolis_accept(1.0, 2.0, 1.0, _FixedRng(0.5))
    assert metropolis_accept(1.0, 2.0, 10.0, _FixedRng(0.5))


def test_metropolis_rejects_at_zero_temperature():
    assert not metropolis_accept(1.0, 1.0, 0.0, _FixedRng(0.0))
    assert not metropolis_accept(1.0, 5.0, 1e-15, _FixedRng(0.0))


def test_metropolis_accepts_equal_scores_while_warm():
    rng = np.random.default_rng(0)
    assert all(metropolis_accept(3.0, 3.0, 0.1, rng) for _ in range(50))


def test_geometric_cooling():
    assert np.isclose(geometric_cooling(8.0, 0.5), 4.0)


def test_solution_orders_by_score_only():
    a = Solution([9, 9, 9], 1.0)
    b = Solution([0], 2.0)
    assert a < b
    assert not b < a
    assert min([b, a]) is a
    tie = Solution([1], 1.0)
    assert min([a, tie]) is a

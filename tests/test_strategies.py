import numpy as np
import pytest

from mh_search.data.benchmarks import identity_trait, parabola_problem
from mh_search.engine.errors import EmptyNeighborhood, TabuExhaustion
from mh_search.engine.problem import TrajectoryProblem
from mh_search.engine.solution import Solution
from mh_search.engine.trajectory import search
from mh_search.operators.trajectory import SimulatedAnnealing, TabuSearch


def _halve(t):
    return 0.5 * t


def _two_point_problem(limit):
    # encodings 0 and 1, each one's only neighbor is the other
    return TrajectoryProblem(limit, lambda x: [1 - x], lambda x, inf: float(x))


def _trait(x, inf):
    return x


def test_sa_temperature_only_changes_at_epoch_boundaries():
    sa = SimulatedAnnealing(8.0, 3, _halve)
    search(parabola_problem(6), sa, 10, rng=0)
    assert np.isclose(sa.temperature, 2.0)
    assert sa.epoch_count == 0

    search(parabola_problem(7), sa, 10, rng=0)
    assert np.isclose(sa.temperature, 2.0)
    assert sa.epoch_count == 1


def test_sa_temperature_independent_of_accepted_moves():
    for start, seed in ((0, 1), (50, 2), (-7, 3)):
        sa = SimulatedAnnealing(100.0, 4, _halve)
        search(parabola_problem(12), sa, start, rng=seed)
        assert np.isclose(sa.temperature, 100.0 * 0.5 ** 3)


def test_sa_initialize_resets_state():
    sa = SimulatedAnnealing(3.0, 2, _halve)
    sa.temperature, sa.epoch_count = 0.1, 1
    sa.initialize(parabola_problem(0), 0)
    assert sa.temperature == 3.0
    assert sa.epoch_count == 0


def test_sa_hot_accepts_worse_neighbor():
    sa = SimulatedAnnealing(1e9, 10, _halve)
    sa.initialize(parabola_problem(1), 0)
    current = Solution(0, 0.0)
    neighbors = [Solution(-1, 1.0), Solution(1, 1.0)]
    picked = sa.select(None, current, neighbors, np.random.default_rng(0))
    assert picked is neighbors[0]


def test_sa_rejects_invalid_epoch_length():
    with pytest.raises(ValueError):
        SimulatedAnnealing(1.0, 0, _halve)


def test_tabu_starts_full_of_initial_trait():
    ts = TabuSearch(4, _trait)
    ts.initialize(parabola_problem(0), 9)
    assert list(ts.queue) == [9, 9, 9, 9]


def test_tabu_alternates_between_two_states():
    problem = _two_point_problem(6)
    ts = TabuSearch(1, _trait)
    ts.initialize(problem, 0)
    current = Solution(0, 0.0)

    visited = []
    for _ in range(6):
        neighbors = [Solution(e, problem.evaluate(e)) for e in problem.neighbor_fn(current.encoding)]
        current = ts.select(problem, current, neighbors, None)
        visited.append(current.encoding)
        assert list(ts.queue) == [current.encoding]

    assert visited == [1, 0, 1, 0, 1, 0]


def test_tabu_queue_length_is_constant_and_fifo():
    problem = parabola_problem(15)
    ts = TabuSearch(3, _trait)
    ts.initialize(problem, 10)
    current = Solution(10, 100.0)

    pushed = []
    for _ in range(15):
        neighbors = [Solution(e, problem.evaluate(e)) for e in problem.neighbor_fn(current.encoding)]
        current = ts.select(problem, current, neighbors, None)
        pushed.append(current.encoding)
        assert len(ts.queue) == 3
        assert ts.queue[-1] == current.encoding
        # a trait stays for exactly `length` pushes
        assert list(ts.queue) == ([10, 10, 10] + pushed)[-3:]


def test_tabu_search_moves_past_minimum_but_remembers_it():
    best = search(parabola_problem(15), TabuSearch(2, _trait), 10)
    assert best.encoding == 0
    assert best.score == 0.0


def test_tabu_exhaustion_raises_by_default():
    with pytest.raises(TabuExhaustion):
        search(_two_point_problem(3), TabuSearch(2, _trait), 0)


def test_tabu_exhaustion_can_stay_on_current():
    ts = TabuSearch(2, _trait, on_exhaustion="current")
    best = search(_two_point_problem(4), ts, 0)
    assert best.encoding == 0
    assert list(ts.queue) == [0, 1]


def test_tabu_exhaustion_can_relax_the_list():
    ts = TabuSearch(2, _trait, on_exhaustion="relax")
    search(_two_point_problem(2), ts, 0)
    assert list(ts.queue) == [1, 0]


def test_tabu_rejects_unknown_fallback():
    with pytest.raises(ValueError):
        TabuSearch(2, _trait, on_exhaustion="shrug")


def test_tabu_reports_empty_neighborhood():
    problem = TrajectoryProblem(2, lambda x: [], lambda x, inf: 0.0)
    with pytest.raises(EmptyNeighborhood):
        search(problem, TabuSearch(2, _trait), 0)


def test_tabu_trait_receives_context():
    seen = []

    def trait(bits, inf):
        seen.append(inf)
        return identity_trait(bits)

    problem = TrajectoryProblem(
        1, lambda b: [(1,)], lambda b, inf: float(b[0] != inf[0]), context=(1,)
    )
    best = search(problem, TabuSearch(1, trait), (0,))
    assert best.encoding == (1,)
    assert seen and all(inf == (1,) for inf in seen)


def test_tabu_accepts_array_traits():
    step = np.array([1.0, 0.0])
    problem = TrajectoryProblem(
        3, lambda x: [x + step, x - step], lambda x, inf: float(np.sum(x * x))
    )
    ts = TabuSearch(2, lambda x, inf: np.round(x))

    best = search(problem, ts, np.array([3.0, 1.0]))

    np.testing.assert_array_equal(best.encoding, [0.0, 1.0])
    assert best.score == 1.0
    assert ts.is_tabu(np.array([0.0, 1.0]))
    assert not ts.is_tabu(np.array([3.0, 1.0]))

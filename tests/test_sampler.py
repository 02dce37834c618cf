import numpy as np
import pytest

from marksix.sampler import combination_key, combination_mask, sample, sample_uniform_compact
from marksix.weights import uniform


def test_sample_honours_mandatory_and_size(rng):
    for _ in range(200):
        numbers = sample(uniform(), {7, 42}, 6, rng)

        assert len(numbers) == 6
        assert len(set(numbers)) == 6
        assert list(numbers) == sorted(numbers)
        assert {7, 42} <= set(numbers)
        assert all(1 <= n <= 49 for n in numbers)


def test_sample_only_draws_weighted_numbers(rng):
    weights = np.zeros(49)
    weights[[9, 19, 29, 39]] = 1.0

    for _ in range(50):
        numbers = sample(weights, {1, 2}, 6, rng)
        assert set(numbers) == {1, 2, 10, 20, 30, 40}


class _EdgeRng:
    """Spins that always land on the far end of the wheel."""

    def random(self):
        return 1.0


def test_sample_wheel_edge_never_picks_zero_weight():
    weights = np.zeros(49)
    weights[[2, 20]] = [0.1, 0.2]

    assert sample(weights, set(), 1, _EdgeRng()) == (21,)
    assert sample(weights, set(), 2, _EdgeRng()) == (3, 21)


def test_sample_falls_back_to_uniform_when_weight_runs_out(rng):
    weights = np.zeros(49)
    weights[4] = 5.0

    numbers = sample(weights, {1}, 7, rng)

    assert 5 in numbers
    assert 1 in numbers
    assert len(set(numbers)) == 7


def test_sample_all_zero_weights_still_completes(rng):
    numbers = sample(np.zeros(49), set(), 6, rng)

    assert len(set(numbers)) == 6


def test_sample_follows_weight_proportions(rng):
    weights = np.zeros(49)
    weights[0], weights[1] = 3.0, 1.0

    firsts = [sample(weights, set(), 1, rng)[0] for _ in range(4000)]

    assert firsts.count(1) / len(firsts) == pytest.approx(0.75, abs=0.04)


def test_sample_mandatory_fills_everything(rng):
    assert sample(uniform(), {1, 2, 3, 4, 5, 6}, 6, rng) == (1, 2, 3, 4, 5, 6)


@pytest.mark.parametrize(
    "mandatory,size,error",
    [
        ({1, 2, 3}, 2, "size"),
        (set(), 50, "size"),
        ({0}, 6, "out of range"),
    ],
)
def test_sample_argument_errors(rng, mandatory, size, error):
    with pytest.raises(ValueError, match=error):
        sample(uniform(), mandatory, size, rng)


def test_compact_sampler_honours_constraints(rng):
    for _ in range(200):
        numbers = sample_uniform_compact({3, 49}, 7, rng)

        assert len(set(numbers)) == 7
        assert {3, 49} <= set(numbers)
        assert list(numbers) == sorted(numbers)


def test_keys_are_order_independent():
    assert combination_key([5, 1, 3]) == (1, 3, 5)
    assert combination_mask([5, 1, 3]) == combination_mask((3, 5, 1)) == 0b101010
    assert combination_mask([1, 2]) != combination_mask([1, 3])

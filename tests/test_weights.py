import numpy as np
import pytest

from marksix.weights import blend, normalize, posterior, uniform, validate_weights


def _peaked(number: int) -> np.ndarray:
    w = np.zeros(49)
    w[number - 1] = 4.0
    return w


def test_normalize_sums_to_one():
    w = np.arange(49, dtype=float)

    result = normalize(w)

    assert np.isclose(result.sum(), 1.0)
    assert np.isclose(result[48] / result[1], 48.0)


def test_normalize_all_zero_is_uniform():
    assert np.allclose(normalize(np.zeros(49)), np.full(49, 1 / 49))


@pytest.mark.parametrize(
    "bad,error",
    [
        (np.ones(48), "shape"),
        (np.r_[np.ones(48), -1.0], "negative"),
        (np.r_[np.ones(48), np.nan], "non-finite"),
    ],
)
def test_validate_weights_rejects_bad_vectors(bad, error):
    with pytest.raises(ValueError, match=error):
        validate_weights(bad)


def test_blend_is_convex_combination_of_normalized_inputs():
    result = blend([_peaked(1), uniform() * 10], [0.5, 0.5])

    assert np.isclose(result.sum(), 1.0)
    assert np.isclose(result[0], 0.5 + 0.5 / 49)
    assert np.isclose(result[1], 0.5 / 49)


@pytest.mark.parametrize(
    "mix,error",
    [
        ([0.5, 0.4], "sum to 1"),
        ([1.5, -0.5], "non-negative"),
        ([1.0], "mix weights"),
    ],
)
def test_blend_rejects_bad_mix(mix, error):
    with pytest.raises(ValueError, match=error):
        blend([uniform(), uniform()], mix)


def test_posterior_multiplies_and_normalizes():
    prior = np.ones(49)
    likelihood = np.zeros(49)
    likelihood[[2, 3]] = [1.0, 3.0]

    result = posterior(prior, likelihood)

    assert np.isclose(result[2], 0.25)
    assert np.isclose(result[3], 0.75)
    assert result[0] == 0


def test_posterior_zero_likelihood_falls_back_to_prior():
    prior = np.arange(1, 50, dtype=float)

    result = posterior(prior, np.zeros(49))

    assert np.allclose(result, normalize(prior))


def test_posterior_disjoint_support_falls_back_to_prior():
    assert np.allclose(posterior(_peaked(1), _peaked(2)), normalize(_peaked(1)))

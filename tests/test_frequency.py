import logging

import numpy as np
import pytest

from marksix.draw import DrawRecord
from marksix.errors import InsufficientHistory
from marksix.frequency import appearance_probability, compute_frequency, frequency_vector, split_numbers


def _draws():
    return [
        DrawRecord([1, 2, 3, 4, 5, 6], 7),
        DrawRecord([1, 2, 3, 10, 11, 12], 13),
        DrawRecord([1, 20, 21, 22, 23, 24], 2),
    ]


def test_empty_history_yields_all_zero_ascending(caplog):
    with caplog.at_level(logging.WARNING, logger="marksix.frequency"):
        table = compute_frequency([], "hot")

    assert table == [(n, 0) for n in range(1, 50)]
    assert "empty draw window" in caplog.text


def test_empty_history_strict_raises():
    with pytest.raises(InsufficientHistory):
        compute_frequency([], "cold", strict=True)


def test_hot_ordering_breaks_ties_by_number():
    table = compute_frequency(_draws(), "hot")

    assert table[:3] == [(1, 3), (2, 3), (3, 2)]
    # every other observed number appears once, lowest first
    assert table[3] == (4, 1)
    assert table[-1] == (49, 0)


def test_cold_ordering_breaks_ties_by_number():
    table = compute_frequency(_draws(), "cold")

    assert table[0] == (8, 0)
    assert table[-3:] == [(3, 2), (1, 3), (2, 3)]


def test_special_number_counts():
    counts = frequency_vector(_draws())

    assert counts.shape == (49,)
    assert counts[7 - 1] == 1
    assert counts.sum() == 21


def test_unknown_mode_rejected():
    with pytest.raises(ValueError, match="Unsupported mode"):
        compute_frequency(_draws(), "warm")


def test_appearance_probability_is_per_draw_fraction():
    probs = appearance_probability(_draws())

    assert np.isclose(probs[0], 1.0)
    assert np.isclose(probs[1], 1.0)
    assert np.isclose(probs[3 - 1], 2 / 3)
    assert np.isclose(probs[48], 0.0)
    assert not appearance_probability([]).any()


def test_split_numbers_picks_least_likely_members():
    combination = (1, 2, 3, 4, 30, 31, 40)

    # 30, 31 and 40 never appeared; ties resolve to the lowest numbers
    assert split_numbers(combination, _draws()) == (30, 31)
    assert split_numbers((1, 2, 3, 4, 5, 6, 10), _draws()) == (4, 5)

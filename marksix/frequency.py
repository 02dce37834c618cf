from __future__ import annotations

import logging
from typing import Iterable, List, Sequence, Tuple

import numpy as np

from .config import NUMBER_MAX, SPLIT_COUNT
from .draw import DrawRecord
from .errors import InsufficientHistory

logger = logging.getLogger(__name__)

FREQUENCY_MODES = ("hot", "cold")


def _draw_values(draws: Sequence[DrawRecord]) -> np.ndarray:
    values = [n for draw in draws for n in draw.winning_numbers + (draw.special_number,)]
    return np.asarray(values, dtype=int)


def frequency_vector(draws: Sequence[DrawRecord]) -> np.ndarray:
    """Occurrence count per number (index 0 -> number 1), winning and special combined."""

    counts = np.bincount(_draw_values(draws), minlength=NUMBER_MAX + 1)[1:]
    return counts.astype(float)


def compute_frequency(
    draws: Sequence[DrawRecord], mode: str = "hot", *, strict: bool = False
) -> List[Tuple[int, int]]:
    """
    Rank all 49 numbers by how often they appeared in ``draws``.

    ``hot`` sorts by count descending, ``cold`` ascending; ties always resolve
    to the lower number first. An empty window yields 49 zero counts.
    """

    if mode not in FREQUENCY_MODES:
        raise ValueError(f"Unsupported mode {mode!r}; choose from {FREQUENCY_MODES}.")
    if not draws:
        if strict:
            raise InsufficientHistory("No historical draws to count")
        logger.warning("Frequency analysis on an empty draw window; all counts are zero")

    counts = frequency_vector(draws).astype(int)
    sign = -1 if mode == "hot" else 1
    pairs = [(number, int(count)) for number, count in enumerate(counts, start=1)]
    pairs.sort(key=lambda pair: (sign * pair[1], pair[0]))
    return pairs


def appearance_probability(draws: Sequence[DrawRecord]) -> np.ndarray:
    """Fraction of draws in which each number appeared."""

    if not draws:
        return np.zeros(NUMBER_MAX)
    hits = np.zeros(NUMBER_MAX)
    for draw in draws:
        hits[[n - 1 for n in draw.numbers]] += 1
    return hits / len(draws)


def split_numbers(
    combination: Iterable[int], draws: Sequence[DrawRecord], count: int = SPLIT_COUNT
) -> Tuple[int, ...]:
    """Pick the ``count`` members of a combination least likely to win historically."""

    probs = appearance_probability(draws)
    ranked = sorted(combination, key=lambda n: (probs[n - 1], n))
    return tuple(sorted(ranked[:count]))

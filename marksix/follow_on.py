"""
Follow-on (draw-to-next-draw) statistics.

``T[n, m]`` counts how often number ``m`` appeared in the draw right after a
draw containing ``n``, winning and special numbers combined. The weight of
``m`` for a reference draw ``R`` is ``sum(T[n, m] for n in R)``.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence, Tuple, Union

import numpy as np

from .config import NUMBER_MAX, NUMBER_MIN
from .draw import DrawRecord
from .errors import InsufficientHistory

logger = logging.getLogger(__name__)

Reference = Union[DrawRecord, Iterable[int]]


def _occupancy(draws: Sequence[DrawRecord]) -> np.ndarray:
    """0/1 matrix of shape (len(draws), 49), row i marks the numbers of draws[i]."""

    rows = np.zeros((len(draws), NUMBER_MAX))
    for i, draw in enumerate(draws):
        rows[i, [n - 1 for n in draw.numbers]] = 1.0
    return rows


def _transition_scale(n_transitions: int, decay: Optional[float]) -> np.ndarray:
    if decay is None:
        return np.ones(n_transitions)
    if not 0 < decay <= 1:
        raise ValueError(f"decay must be in (0, 1], got {decay}")
    # most recent transition has age 0
    ages = np.arange(n_transitions - 1, -1, -1)
    return decay**ages


def transition_matrix(
    draws: Sequence[DrawRecord], *, decay: Optional[float] = None
) -> np.ndarray:
    """49x49 follow-on counts over consecutive draw pairs."""

    if len(draws) < 2:
        return np.zeros((NUMBER_MAX, NUMBER_MAX))
    occ = _occupancy(draws)
    scale = _transition_scale(len(draws) - 1, decay)
    return (occ[:-1] * scale[:, None]).T @ occ[1:]


def _reference_numbers(reference: Reference) -> List[int]:
    numbers = sorted(reference.numbers if isinstance(reference, DrawRecord) else set(reference))
    bad = [n for n in numbers if not NUMBER_MIN <= int(n) <= NUMBER_MAX]
    if bad:
        raise ValueError(f"Reference numbers out of range: {bad}")
    return [int(n) for n in numbers]


def compute_follow_on_weights(
    draws: Sequence[DrawRecord],
    reference: Optional[Reference] = None,
    *,
    decay: Optional[float] = None,
    strict: bool = False,
) -> np.ndarray:
    """
    Weight vector of numbers that historically followed the reference draw's numbers.

    Args:
        draws: chronologically ascending history.
        reference: draw (or numbers) to anchor on; defaults to the last draw.
        decay: optional per-transition recency factor; ``None`` counts every
            transition equally.
        strict: raise InsufficientHistory instead of returning zeros when
            fewer than two draws are supplied.
    """

    if len(draws) < 2:
        if strict:
            raise InsufficientHistory(
                f"Follow-on analysis needs at least 2 draws, got {len(draws)}"
            )
        logger.warning("Follow-on analysis on %d draw(s); returning zero weights", len(draws))
        return np.zeros(NUMBER_MAX)

    anchor = draws[-1] if reference is None else reference
    rows = [n - 1 for n in _reference_numbers(anchor)]
    matrix = transition_matrix(draws, decay=decay)
    return matrix[rows].sum(axis=0)


def follow_on_numbers(draws: Sequence[DrawRecord]) -> List[Tuple[int, float]]:
    """Numbers that followed the latest draw's numbers, heaviest first."""

    weights = compute_follow_on_weights(draws)
    pairs = [(n, float(w)) for n, w in enumerate(weights, start=1) if w > 0]
    pairs.sort(key=lambda pair: (-pair[1], pair[0]))
    return pairs

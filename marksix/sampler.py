"""
Sampling of distinct numbers under mandatory inclusion.

``sample`` is roulette-wheel selection without replacement: a chosen number's
weight leaves the pool rather than being zeroed, so no draw is wasted.
``sample_uniform_compact`` is the uniform special case with O(1) removal.
"""

from __future__ import annotations

from typing import Iterable, Tuple

import numpy as np

from .config import NUMBER_MAX, NUMBER_MIN, POOL_SIZE
from .weights import validate_weights


def _check_mandatory(mandatory: Iterable[int], size: int) -> frozenset:
    chosen = frozenset(int(n) for n in mandatory)
    bad = sorted(n for n in chosen if not NUMBER_MIN <= n <= NUMBER_MAX)
    if bad:
        raise ValueError(f"Mandatory numbers out of range: {bad}")
    if not len(chosen) <= size <= POOL_SIZE:
        raise ValueError(
            f"size must be between {len(chosen)} and {POOL_SIZE}, got {size}"
        )
    return chosen


def sample(
    weights, mandatory: Iterable[int], size: int, rng: np.random.Generator
) -> Tuple[int, ...]:
    """Draw ``size`` distinct numbers containing ``mandatory``, weighted by ``weights``."""

    weights = validate_weights(weights)
    chosen = _check_mandatory(mandatory, size)
    result = list(chosen)

    pool = np.array(
        [n for n in range(NUMBER_MIN, NUMBER_MAX + 1) if n not in chosen], dtype=int
    )
    pool_weights = weights[pool - 1]
    assert len(pool) >= size - len(result), "candidate pool exhausted"

    use_uniform = False
    while len(result) < size:
        total = pool_weights.sum()
        if not use_uniform and total <= 0:
            use_uniform = True

        if use_uniform:
            idx = int(rng.integers(len(pool)))
        else:
            cumulative = np.cumsum(pool_weights)
            draw = rng.random() * cumulative[-1]
            idx = int(np.searchsorted(cumulative, draw, side="right"))
            # a draw at the very end of the wheel belongs to the last weighted slot
            idx = min(idx, int(np.flatnonzero(pool_weights)[-1]))

        result.append(int(pool[idx]))
        pool = np.delete(pool, idx)
        pool_weights = np.delete(pool_weights, idx)

    return tuple(sorted(result))


def sample_uniform_compact(
    mandatory: Iterable[int], size: int, rng: np.random.Generator
) -> Tuple[int, ...]:
    """Uniform variant of ``sample`` using swap-with-last pool compaction."""

    chosen = _check_mandatory(mandatory, size)
    result = list(chosen)
    pool = [n for n in range(NUMBER_MIN, NUMBER_MAX + 1) if n not in chosen]
    live = len(pool)
    assert live >= size - len(result), "candidate pool exhausted"

    while len(result) < size:
        idx = int(rng.integers(live))
        result.append(pool[idx])
        live -= 1
        pool[idx], pool[live] = pool[live], pool[idx]

    return tuple(sorted(result))


def combination_key(numbers: Iterable[int]) -> Tuple[int, ...]:
    return tuple(sorted(int(n) for n in numbers))


def combination_mask(numbers: Iterable[int]) -> int:
    """Bitmask with bit ``n`` set for every number ``n``."""

    mask = 0
    for n in numbers:
        mask |= 1 << int(n)
    return mask

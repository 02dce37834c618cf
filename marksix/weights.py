"""
Helpers for 49-length weight vectors.

Index ``i`` of every vector holds the weight of number ``i + 1``. An all-zero
vector is the degenerate case and normalizes to uniform.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from .config import POOL_SIZE

_MIX_TOLERANCE = 1e-9


def uniform() -> np.ndarray:
    return np.full(POOL_SIZE, 1.0 / POOL_SIZE)


def validate_weights(weights) -> np.ndarray:
    """Return ``weights`` as a float array, raising ValueError if it is not a valid vector."""

    arr = np.asarray(weights, dtype=float)
    if arr.shape != (POOL_SIZE,):
        raise ValueError(f"Weight vector must have shape ({POOL_SIZE},), got {arr.shape}")
    if not np.isfinite(arr).all():
        raise ValueError("Weight vector contains non-finite values")
    if (arr < 0).any():
        raise ValueError("Weight vector contains negative values")
    return arr


def normalize(weights) -> np.ndarray:
    arr = validate_weights(weights)
    total = arr.sum()
    if total <= 0:
        return uniform()
    return arr / total


def blend(vectors: Sequence, mix_weights: Sequence[float]) -> np.ndarray:
    """Convex combination of the normalized ``vectors``."""

    if len(vectors) != len(mix_weights):
        raise ValueError(
            f"Got {len(vectors)} vectors but {len(mix_weights)} mix weights"
        )
    if not vectors:
        raise ValueError("blend() needs at least one vector")
    mix = np.asarray(mix_weights, dtype=float)
    if (mix < 0).any():
        raise ValueError("Mix weights must be non-negative")
    if abs(mix.sum() - 1.0) > _MIX_TOLERANCE:
        raise ValueError(f"Mix weights must sum to 1, got {mix.sum():.12f}")

    stacked = np.vstack([normalize(v) for v in vectors])
    return mix @ stacked


def posterior(prior, likelihood) -> np.ndarray:
    """Elementwise prior x likelihood, normalized; falls back to the prior when the product vanishes."""

    p = normalize(prior)
    product = p * validate_weights(likelihood)
    if product.sum() <= 0:
        return p
    return product / product.sum()

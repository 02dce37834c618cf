from __future__ import annotations

import os

# Number space
NUMBER_MIN, NUMBER_MAX = 1, 49
POOL_SIZE = NUMBER_MAX - NUMBER_MIN + 1
WINNING_COUNT = 6

# Combination sizes
SINGLE_SIZE = 6
DOUBLE_SIZE = 7
SPLIT_COUNT = 2

# Generation
MAX_DUPLICATE_RETRIES = 20
DEFAULT_HISTORY_DAYS = 1095

# Suggestion bands for balanced picks
BALANCED_RANGES = ((1, 10), (11, 20), (21, 30), (31, 40), (41, 49))


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc


def history_days() -> int:
    """Default analysis window in days; ``MARKSIX_HISTORY_DAYS`` overrides."""

    return _env_int("MARKSIX_HISTORY_DAYS", DEFAULT_HISTORY_DAYS)


def max_retries() -> int:
    """Duplicate resample bound; ``MARKSIX_MAX_RETRIES`` overrides."""

    return _env_int("MARKSIX_MAX_RETRIES", MAX_DUPLICATE_RETRIES)

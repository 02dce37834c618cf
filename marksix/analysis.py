"""
Number suggestions shown next to the generator: hot, cold, follow-on,
random and balanced picks.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

import numpy as np

from . import config
from .draw import DrawRecord
from .follow_on import follow_on_numbers
from .frequency import compute_frequency
from .schema import load_draws

logger = logging.getLogger(__name__)

ANALYSIS_TYPES = ("hot", "cold", "follow_on", "random", "balanced")


def random_numbers(rng: np.random.Generator) -> List[Tuple[int, float]]:
    """All 49 numbers in shuffled order, each paired with a uniform score."""

    order = rng.permutation(np.arange(config.NUMBER_MIN, config.NUMBER_MAX + 1))
    scores = rng.random(len(order))
    return [(int(n), float(s)) for n, s in zip(order, scores)]


def balanced_numbers(rng: np.random.Generator, per_band: int = 2) -> List[Tuple[int, str]]:
    """
    Pick ``per_band`` numbers from every decade band, sorted by number.

    The default of two per band gives a ten-number spread. Passing
    ``per_band=10`` takes whole bands, which returns every number.
    """

    picks = []
    for lo, hi in config.BALANCED_RANGES:
        band = np.arange(lo, hi + 1)
        take = min(per_band, len(band))
        for n in rng.choice(band, size=take, replace=False):
            picks.append((int(n), f"{lo}-{hi}"))
    return sorted(picks)


def analyze(
    kind: str,
    draws: Sequence[DrawRecord] = (),
    *,
    rng: Optional[np.random.Generator] = None,
    seed: int | None = None,
) -> list:
    if kind not in ANALYSIS_TYPES:
        raise ValueError(f"Unsupported analysis type {kind!r}; choose from {ANALYSIS_TYPES}.")
    rng = rng if rng is not None else np.random.default_rng(seed)

    if kind in ("hot", "cold"):
        return compute_frequency(draws, kind)
    if kind == "follow_on":
        return follow_on_numbers(draws)
    if kind == "random":
        return random_numbers(rng)
    return balanced_numbers(rng)


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Show Mark Six number suggestions.")
    parser.add_argument("--history", type=Path, default=None, help="Path to history CSV")
    parser.add_argument("--type", dest="kind", choices=ANALYSIS_TYPES, default="hot")
    parser.add_argument("--days", type=int, default=None, help="History window in days")
    parser.add_argument("--top", type=int, default=None, help="Only print the first N rows")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument("--verbose", action="store_true", help="Log progress to stderr")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    draws: List[DrawRecord] = []
    if args.kind in ("hot", "cold", "follow_on"):
        if args.history is None:
            parser.error(f"--history is required for --type {args.kind}")
        days = config.history_days() if args.days is None else args.days
        draws = load_draws(args.history, days=days)
        logger.info("Loaded %d draw(s) from %s", len(draws), args.history)

    rows = analyze(args.kind, draws, seed=args.seed)
    for number, value in rows[: args.top]:
        print(f"{number:>2}  {value}")


if __name__ == "__main__":
    main()

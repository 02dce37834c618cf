from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Callable, Dict, Optional, Sequence

import numpy as np

from . import config
from .constraints import validate
from .draw import DrawRecord
from .errors import InsufficientHistory, InvalidConstraint, MissingReferenceDraw
from .follow_on import compute_follow_on_weights
from .frequency import frequency_vector, split_numbers
from .request import Combination, GenerationBatch, GenerationRequest, Method
from .sampler import combination_key, combination_mask, sample, sample_uniform_compact
from .schema import load_draws
from .weights import blend, normalize, posterior, uniform

logger = logging.getLogger(__name__)

WeightBuilder = Callable[..., np.ndarray]


def _classic_weights(history, last_draw, **_) -> np.ndarray:
    return uniform()


def _follow_on_weights(
    history: Sequence[DrawRecord],
    last_draw: Optional[DrawRecord],
    *,
    strict: bool = False,
    decay: Optional[float] = None,
) -> np.ndarray:
    if last_draw is None:
        return uniform()
    raw = compute_follow_on_weights(history, last_draw, decay=decay, strict=strict)
    if not raw.any():
        logger.info("No follow-on transitions for reference draw; using uniform weights")
    return normalize(raw)


def _bayesian_weights(
    history: Sequence[DrawRecord],
    last_draw: Optional[DrawRecord],
    *,
    strict: bool = False,
    decay: Optional[float] = None,
    likelihood: Optional[np.ndarray] = None,
) -> np.ndarray:
    if not history:
        if strict:
            raise InsufficientHistory("Bayesian prior needs at least one historical draw")
        logger.warning("Bayesian prior on an empty draw window; prior is uniform")
    if likelihood is None:
        likelihood = _follow_on_weights(history, last_draw, strict=strict, decay=decay)
    return posterior(normalize(frequency_vector(history)), likelihood)


def _ensemble_weights(
    history: Sequence[DrawRecord],
    last_draw: Optional[DrawRecord],
    *,
    strict: bool = False,
    decay: Optional[float] = None,
) -> np.ndarray:
    if last_draw is None:
        bayes = _bayesian_weights(history, None, strict=strict)
        return blend([uniform(), bayes], [0.5, 0.5])
    follow = _follow_on_weights(history, last_draw, strict=strict, decay=decay)
    bayes = _bayesian_weights(history, last_draw, strict=strict, likelihood=follow)
    return blend([uniform(), follow, bayes], [1 / 3, 1 / 3, 1 / 3])


STRATEGIES: Dict[Method, WeightBuilder] = {
    Method.CLASSIC: _classic_weights,
    Method.CLASSIC_OPTIMIZED: _classic_weights,
    Method.FOLLOW_ON: _follow_on_weights,
    Method.BAYESIAN: _bayesian_weights,
    Method.ENSEMBLE: _ensemble_weights,
}


def build_weights(
    method: Method | str,
    history: Sequence[DrawRecord],
    last_draw: Optional[DrawRecord] = None,
    *,
    strict: bool = False,
    decay: Optional[float] = None,
) -> np.ndarray:
    """Weight vector a strategy samples from, before mandatory numbers are removed."""

    return STRATEGIES[Method.parse(method)](history, last_draw, strict=strict, decay=decay)


def generate(
    request: GenerationRequest,
    history: Sequence[DrawRecord],
    last_draw: Optional[DrawRecord] = None,
    *,
    rng: Optional[np.random.Generator] = None,
    seed: int | None = None,
    max_retries: int | None = None,
    strict: bool = False,
    follow_on_decay: Optional[float] = None,
) -> GenerationBatch:
    """
    Generate a deduplicated batch of combinations for ``request``.

    Args:
        request: what to generate; validated before any sampling.
        history: chronologically ascending draws feeding the statistics.
        last_draw: reference draw for follow-on weighting; required by
            ``follow-on``, optional for ``bayesian`` and ``ensemble``.
        rng: random source; built from ``seed`` when omitted.
        max_retries: resamples per colliding combination before the
            duplicate is accepted (``MARKSIX_MAX_RETRIES``, default 20).
        strict: raise InsufficientHistory instead of degrading to uniform.
        follow_on_decay: optional recency factor for follow-on counts.
    """

    validate(request)
    method = request.method
    if method is Method.FOLLOW_ON and last_draw is None:
        raise MissingReferenceDraw("follow-on generation requires the last draw")

    history = list(history)
    rng = rng if rng is not None else np.random.default_rng(seed)
    retries = config.max_retries() if max_retries is None else max_retries
    weights = build_weights(method, history, last_draw, strict=strict, decay=follow_on_decay)

    mandatory = request.mandatory
    size = request.required_size
    if method is Method.CLASSIC_OPTIMIZED:
        draw = lambda: sample_uniform_compact(mandatory, size, rng)  # noqa: E731
        key = combination_mask
    else:
        draw = lambda: sample(weights, mandatory, size, rng)  # noqa: E731
        key = combination_key

    batch = GenerationBatch(request=request, weights=weights)
    seen = set()
    for sequence_number in range(1, request.combination_count + 1):
        numbers = draw()
        attempts = 0
        while key(numbers) in seen and attempts < retries:
            numbers = draw()
            attempts += 1
        if key(numbers) in seen:
            batch.duplicates += 1
            logger.debug("Accepting duplicate %s after %d retries", numbers, retries)
        seen.add(key(numbers))

        splits = split_numbers(numbers, history) if request.is_double else ()
        batch.combinations.append(Combination(sequence_number, numbers, splits))

    logger.info(
        "Generated %d %s combination(s) from %d draw(s), %d duplicate(s)",
        len(batch),
        method.value,
        len(history),
        batch.duplicates,
    )
    return batch


def _parse_numbers(raw: str | None) -> list[int]:
    if not raw:
        return []
    return [int(tok) for tok in raw.replace(",", " ").split() if tok]


def save_batch(batch: GenerationBatch, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    batch.to_frame().to_csv(path, index=False)


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Generate Mark Six combinations from historical draws."
    )
    parser.add_argument("--history", type=Path, required=True, help="Path to history CSV")
    parser.add_argument("--count", type=int, default=5, help="Number of combinations")
    parser.add_argument("--lucky", type=int, required=True, help="Lucky number (1-49)")
    parser.add_argument("--selected", default="", help="Comma-separated mandatory numbers")
    parser.add_argument("--double", action="store_true", help="Generate 7-number combinations")
    parser.add_argument(
        "--method",
        choices=[m.value for m in Method],
        default=Method.FOLLOW_ON.value,
        help="Generation strategy",
    )
    parser.add_argument(
        "--last-draw",
        default=None,
        help='Reference draw, e.g. "3 11 19 27 35 43 + 8" (defaults to the latest history draw)',
    )
    parser.add_argument(
        "--days",
        type=int,
        default=None,
        help="History window in days (MARKSIX_HISTORY_DAYS, default 1095)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument("--strict", action="store_true", help="Fail on insufficient history")
    parser.add_argument("--out", type=Path, default=None, help="Optional output CSV path")
    parser.add_argument("--verbose", action="store_true", help="Log progress to stderr")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    days = config.history_days() if args.days is None else args.days
    try:
        history = load_draws(args.history, days=days)
        if args.last_draw:
            last_draw = DrawRecord.from_string(args.last_draw)
        else:
            last_draw = history[-1] if history else None
        request = GenerationRequest(
            combination_count=args.count,
            selected_numbers=_parse_numbers(args.selected),
            lucky_number=args.lucky,
            is_double=args.double,
            method=args.method,
        )
        batch = generate(
            request, history, last_draw, seed=args.seed, strict=args.strict
        )
    except (InvalidConstraint, MissingReferenceDraw, InsufficientHistory, ValueError) as exc:
        parser.error(str(exc))

    if args.out:
        save_batch(batch, args.out)
        print(f"Wrote {len(batch)} combinations -> {args.out}")
    else:
        print(batch.to_frame().to_csv(index=False))


__all__ = [
    "STRATEGIES",
    "build_weights",
    "generate",
    "save_batch",
    "main",
]


if __name__ == "__main__":
    main()

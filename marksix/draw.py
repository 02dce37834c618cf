from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from typing import FrozenSet, Iterable, Optional, Sequence, Tuple

from .config import NUMBER_MAX, NUMBER_MIN, WINNING_COUNT


def _ensure_unique(values: Sequence[int], expected_len: int) -> Tuple[int, ...]:
    numeric = tuple(int(v) for v in values)
    if len(numeric) != expected_len:
        raise ValueError(
            f"Mark Six expects {expected_len} winning numbers, got {len(numeric)}"
        )
    if len(set(numeric)) != expected_len:
        raise ValueError("Winning numbers must be unique")
    return numeric


def _coerce_date(value) -> Optional[dt.date]:
    if value is None:
        return None
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    return dt.date.fromisoformat(str(value).strip())


@dataclass(frozen=True)
class DrawRecord:
    """Immutable historical draw: six winning numbers plus one special number."""

    date: Optional[dt.date]
    winning_numbers: Tuple[int, ...]
    special_number: int

    def __init__(
        self,
        winning_numbers: Sequence[int],
        special_number: int,
        date: dt.date | dt.datetime | str | None = None,
    ):
        winning = _ensure_unique(winning_numbers, expected_len=WINNING_COUNT)
        special = int(special_number)
        DrawRecord._validate_ranges(winning, special)
        if special in winning:
            raise ValueError(f"Special number {special} repeats a winning number")
        object.__setattr__(self, "date", _coerce_date(date))
        object.__setattr__(self, "winning_numbers", winning)
        object.__setattr__(self, "special_number", special)

    @classmethod
    def from_string(cls, raw: str, date=None) -> "DrawRecord":
        """Parse a human-readable draw like ``\"3 11 19 27 35 43 + 8\"``."""

        sanitized = raw.replace("+", " ")
        tokens = [t for t in sanitized.replace(",", " ").split() if t]
        if len(tokens) != WINNING_COUNT + 1:
            raise ValueError(
                f"Expected {WINNING_COUNT + 1} numbers (6 winning + 1 special), "
                f"received {len(tokens)}"
            )

        numbers = [int(tok) for tok in tokens]
        return cls(numbers[:WINNING_COUNT], numbers[WINNING_COUNT], date=date)

    @staticmethod
    def _validate_ranges(winning: Tuple[int, ...], special: int) -> None:
        if not all(NUMBER_MIN <= n <= NUMBER_MAX for n in winning + (special,)):
            raise ValueError(f"Draw numbers must be between {NUMBER_MIN} and {NUMBER_MAX}")

    @property
    def numbers(self) -> FrozenSet[int]:
        """Winning numbers together with the special number."""
        return frozenset(self.winning_numbers + (self.special_number,))

    def as_dict(self) -> dict:
        return {
            "draw_date": self.date.isoformat() if self.date else None,
            "winning_numbers": self.winning_numbers,
            "special_number": self.special_number,
        }


def count_hits(draw: DrawRecord, numbers: Iterable[int]) -> tuple[int, bool]:
    """Return (winning_hits, special_hit) for a combination against a draw."""

    picked = {int(n) for n in numbers}
    winning_hits = len(picked.intersection(draw.winning_numbers))
    return winning_hits, draw.special_number in picked

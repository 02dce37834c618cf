from __future__ import annotations

import datetime as dt
from pathlib import Path
from typing import List, Optional

import pandas as pd

from .config import NUMBER_MAX, NUMBER_MIN
from .draw import DrawRecord

WINNING_COLUMNS: List[str] = ["n1", "n2", "n3", "n4", "n5", "n6"]
EXPECTED_COLUMNS: List[str] = ["draw_date", *WINNING_COLUMNS, "special"]

_ALIASES = {
    "date": "draw_date",
    "draw_date": "draw_date",
    "drawdate": "draw_date",
    "special": "special",
    "special_no": "special",
    "special_number": "special",
    "extra": "special",
}
for _i in range(1, 7):
    for _alias in (f"n{_i}", f"no{_i}", f"no_{_i}", f"ball{_i}", f"ball_{_i}", f"winning_number_{_i}"):
        _ALIASES[_alias] = f"n{_i}"


def _validate_numbers(df: pd.DataFrame, columns: List[str]) -> None:
    numbers = df[columns].apply(pd.to_numeric, errors="coerce")
    non_numeric = [c for c in columns if (numbers[c].isna() | (numbers[c] % 1 != 0)).any()]
    if non_numeric:
        raise ValueError(f"Columns {non_numeric} must contain whole numbers")

    outside = (numbers < NUMBER_MIN) | (numbers > NUMBER_MAX)
    if outside.to_numpy().any():
        rows = [int(i) for i in outside.any(axis=1).to_numpy().nonzero()[0]]
        raise ValueError(
            f"Rows {rows} hold out-of-range numbers; draws use {NUMBER_MIN}-{NUMBER_MAX}"
        )


def _validate_distinct(df: pd.DataFrame) -> None:
    numbers = df[EXPECTED_COLUMNS[1:]].to_numpy()
    for row_idx, row in enumerate(numbers):
        if len(set(row)) != len(row):
            raise ValueError(f"Row {row_idx} repeats a number: {list(row)}")


def normalize_columns(df: pd.DataFrame) -> pd.DataFrame:
    """Map common header spellings (``Date``, ``No1``, ``Special No``...) onto the schema."""

    rename = {column: column.lower().strip().replace(" ", "_") for column in df.columns}
    df = df.rename(columns=rename)
    return df.rename(columns={key: value for key, value in _ALIASES.items() if key in df.columns})


def validate_df(df: pd.DataFrame) -> pd.DataFrame:
    """
    Check a normalized history frame and return it cleaned.

    Dates become naive timestamps, number columns become ints, rows are sorted
    oldest first and a repeated draw date keeps its first row.
    """

    missing = [name for name in EXPECTED_COLUMNS if name not in df.columns]
    if missing:
        raise ValueError(f"Missing expected columns: {missing}")

    coerced = df[EXPECTED_COLUMNS].copy()
    coerced["draw_date"] = pd.to_datetime(coerced["draw_date"], utc=True).dt.tz_convert(None)

    number_columns = EXPECTED_COLUMNS[1:]
    _validate_numbers(coerced, number_columns)
    coerced[number_columns] = coerced[number_columns].astype(int)
    _validate_distinct(coerced)

    return (
        coerced.sort_values("draw_date")
        .drop_duplicates(subset=["draw_date"])
        .reset_index(drop=True)
    )


def within_days(
    df: pd.DataFrame, days: Optional[int], today: Optional[dt.date] = None
) -> pd.DataFrame:
    """Keep draws from the last ``days`` days (inclusive); ``None`` keeps everything."""

    if days is None:
        return df.reset_index(drop=True)
    if days < 0:
        raise ValueError(f"days must be non-negative, got {days}")
    end = pd.Timestamp(today or dt.date.today())
    cutoff = end - pd.Timedelta(days=days)
    return df[df["draw_date"] >= cutoff].reset_index(drop=True)


def to_draws(df: pd.DataFrame) -> List[DrawRecord]:
    """Convert a validated frame into chronologically ordered DrawRecords."""

    return [
        DrawRecord(
            [row[c] for c in WINNING_COLUMNS],
            row["special"],
            date=pd.Timestamp(row["draw_date"]).date(),
        )
        for _, row in df.sort_values("draw_date").iterrows()
    ]


def load_history(path: str | Path) -> pd.DataFrame:
    """Read a history CSV into a validated, date-sorted frame."""

    df = pd.read_csv(path)
    return validate_df(normalize_columns(df))


def load_draws(
    path: str | Path, *, days: Optional[int] = None, today: Optional[dt.date] = None
) -> List[DrawRecord]:
    """Read a history CSV and return the draws of the last ``days`` days, oldest first."""

    return to_draws(within_days(load_history(path), days, today=today))

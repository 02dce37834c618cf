import datetime as dt
import sys
from pathlib import Path

import numpy as np
import pytest

# Ensure the repository root is importable when running tests directly from the repo.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from marksix.draw import DrawRecord  # noqa: E402


def _rolling_draw(i: int, start: dt.date) -> DrawRecord:
    base = (i * 7) % 49
    numbers = [(base + k) % 49 + 1 for k in range(7)]
    return DrawRecord(numbers[:6], numbers[6], date=start + dt.timedelta(days=3 * i))


@pytest.fixture
def history():
    """Ten draws; the first seven partition 1..49 between them."""
    start = dt.date(2024, 1, 2)
    return [_rolling_draw(i, start) for i in range(10)]


@pytest.fixture
def rng():
    return np.random.default_rng(20240102)


@pytest.fixture
def history_csv(tmp_path, history):
    lines = ["Date,No1,No2,No3,No4,No5,No6,Special No"]
    for draw in history:
        lines.append(
            ",".join([draw.date.isoformat(), *map(str, draw.winning_numbers), str(draw.special_number)])
        )
    path = tmp_path / "draws.csv"
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path

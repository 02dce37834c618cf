from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Sequence, Tuple

import numpy as np
import pandas as pd

from .config import DOUBLE_SIZE, SINGLE_SIZE


class Method(str, Enum):
    CLASSIC = "classic"
    CLASSIC_OPTIMIZED = "classic-optimized"
    FOLLOW_ON = "follow-on"
    BAYESIAN = "bayesian"
    ENSEMBLE = "ensemble"

    @classmethod
    def parse(cls, value: "Method | str") -> "Method":
        if isinstance(value, cls):
            return value
        normalized = str(value).strip().lower().replace("_", "-")
        try:
            return cls(normalized)
        except ValueError:
            choices = tuple(m.value for m in cls)
            raise ValueError(f"Unsupported method {value!r}; choose from {choices}.") from None


@dataclass(frozen=True)
class GenerationRequest:
    """What the caller asked for. Structural checks live in ``constraints.validate``."""

    combination_count: int
    selected_numbers: Tuple[int, ...]
    lucky_number: int
    is_double: bool = False
    method: Method = Method.CLASSIC

    def __init__(
        self,
        combination_count: int,
        selected_numbers: Sequence[int] = (),
        lucky_number: int = 0,
        is_double: bool = False,
        method: Method | str = Method.CLASSIC,
    ):
        object.__setattr__(self, "combination_count", int(combination_count))
        # keep duplicates so the validator can report them
        object.__setattr__(self, "selected_numbers", tuple(int(n) for n in selected_numbers))
        object.__setattr__(self, "lucky_number", int(lucky_number))
        object.__setattr__(self, "is_double", bool(is_double))
        object.__setattr__(self, "method", Method.parse(method))

    @property
    def required_size(self) -> int:
        return DOUBLE_SIZE if self.is_double else SINGLE_SIZE

    @property
    def mandatory(self) -> frozenset:
        return frozenset(self.selected_numbers) | {self.lucky_number}


@dataclass(frozen=True)
class Combination:
    sequence_number: int
    numbers: Tuple[int, ...]
    split_numbers: Tuple[int, ...] = ()

    def as_dict(self) -> dict:
        return {
            "sequence_number": self.sequence_number,
            "numbers": self.numbers,
            "split_numbers": self.split_numbers,
        }


@dataclass(eq=False)
class GenerationBatch:
    """Ordered combinations produced for one request."""

    request: GenerationRequest
    weights: np.ndarray
    combinations: List[Combination] = field(default_factory=list)
    duplicates: int = 0

    @property
    def method(self) -> Method:
        return self.request.method

    def __len__(self) -> int:
        return len(self.combinations)

    def __iter__(self) -> Iterator[Combination]:
        return iter(self.combinations)

    def to_frame(self) -> pd.DataFrame:
        size = self.request.required_size
        rows = []
        for combo in self.combinations:
            row = {"sequence_number": combo.sequence_number}
            for i, number in enumerate(combo.numbers, start=1):
                row[f"n{i}"] = number
            row["split_numbers"] = " ".join(str(n) for n in combo.split_numbers)
            rows.append(row)
        columns = ["sequence_number"] + [f"n{i}" for i in range(1, size + 1)] + ["split_numbers"]
        return pd.DataFrame(rows, columns=columns)

from __future__ import annotations

from .config import NUMBER_MAX, NUMBER_MIN
from .errors import ConstraintReason, InvalidConstraint
from .request import GenerationRequest


def _in_range(value: int) -> bool:
    return NUMBER_MIN <= value <= NUMBER_MAX


def validate(request: GenerationRequest) -> None:
    """Raise InvalidConstraint on the first structural problem with ``request``.

    Checks run in a fixed order: batch size, lucky number range, selected
    numbers (range, then uniqueness, then clash with the lucky number), and
    finally whether the mandatory numbers fit in one combination.
    """

    if request.combination_count < 1:
        raise InvalidConstraint(
            ConstraintReason.RANGE,
            f"combination_count must be at least 1, got {request.combination_count}",
        )

    if not _in_range(request.lucky_number):
        raise InvalidConstraint(
            ConstraintReason.RANGE,
            f"Lucky number must be between {NUMBER_MIN} and {NUMBER_MAX}, "
            f"got {request.lucky_number}",
        )

    bad = [n for n in request.selected_numbers if not _in_range(n)]
    if bad:
        raise InvalidConstraint(
            ConstraintReason.RANGE,
            f"Selected numbers must be between {NUMBER_MIN} and {NUMBER_MAX}: {bad}",
        )
    if len(set(request.selected_numbers)) != len(request.selected_numbers):
        raise InvalidConstraint(ConstraintReason.DUPLICATE, "Selected numbers must be unique")
    if request.lucky_number in request.selected_numbers:
        raise InvalidConstraint(
            ConstraintReason.DUPLICATE,
            f"Lucky number {request.lucky_number} is already a selected number",
        )

    if len(request.selected_numbers) + 1 > request.required_size:
        raise InvalidConstraint(
            ConstraintReason.OVERFLOW,
            f"{len(request.selected_numbers)} selected numbers plus the lucky number "
            f"exceed the combination size of {request.required_size}",
        )

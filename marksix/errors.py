from __future__ import annotations

from enum import Enum


class ConstraintReason(str, Enum):
    RANGE = "range"
    DUPLICATE = "duplicate"
    OVERFLOW = "overflow"


class InvalidConstraint(ValueError):
    """Raised when a generation request is structurally invalid."""

    def __init__(self, reason: ConstraintReason, message: str):
        super().__init__(message)
        self.reason = reason


class MissingReferenceDraw(ValueError):
    """Raised when follow-on generation has no last draw to anchor on."""


class InsufficientHistory(RuntimeError):
    """Raised in strict mode when a draw window is too small to analyse."""

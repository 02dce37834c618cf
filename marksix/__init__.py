"""
Public Mark Six API.

Stable surface:
- DrawRecord: immutable 6 + special historical draw; count_hits scores a pick.
- GenerationRequest / Method: what to generate and with which strategy.
- generate: validated, deduplicated batch of combinations.
- compute_frequency / compute_follow_on_weights: history analysers.
- normalize / blend / posterior: 49-length weight vector helpers.
- load_history / load_draws: CSV readers with schema validation (wrap pandas).

Everything else in this package should be treated as internal.
"""

from __future__ import annotations

from .constraints import validate
from .draw import DrawRecord, count_hits
from .errors import ConstraintReason, InsufficientHistory, InvalidConstraint, MissingReferenceDraw
from .follow_on import compute_follow_on_weights, follow_on_numbers
from .frequency import compute_frequency, frequency_vector
from .generate import generate
from .request import Combination, GenerationBatch, GenerationRequest, Method
from .sampler import sample
from .schema import load_draws, load_history
from .weights import blend, normalize, posterior

__all__ = [
    "Combination",
    "ConstraintReason",
    "DrawRecord",
    "GenerationBatch",
    "GenerationRequest",
    "InsufficientHistory",
    "InvalidConstraint",
    "Method",
    "MissingReferenceDraw",
    "blend",
    "compute_follow_on_weights",
    "compute_frequency",
    "count_hits",
    "follow_on_numbers",
    "frequency_vector",
    "generate",
    "load_draws",
    "load_history",
    "normalize",
    "posterior",
    "sample",
    "validate",
]

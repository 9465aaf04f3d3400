"""Validation system: ValidationResult and per-channel data schemas."""

from __future__ import annotations

from .result import ValidationResult
from .schema import schema_for, validate_template

__all__ = [
    "ValidationResult",
    "schema_for",
    "validate_template",
]

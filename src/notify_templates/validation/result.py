"""ValidationResult — structured, field-keyed validation errors."""

from __future__ import annotations

from dataclasses import dataclass, field


def default_errors_factory() -> dict[str, str]:
    """Factory for the mutable ``errors`` default."""
    return {}


@dataclass
class ValidationResult:
    """Collects one user-facing message per invalid field.

    Usage::

        result = ValidationResult.success()
        result = ValidationResult.failure({"html": "The `html` field ..."})
        ok, errors = result.as_tuple()
    """

    errors: dict[str, str] = field(default_factory=default_errors_factory)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    # ── Factory methods ──────────────────────────────────────────

    @classmethod
    def success(cls) -> ValidationResult:
        return cls()

    @classmethod
    def failure(cls, errors: dict[str, str]) -> ValidationResult:
        return cls(errors=errors)

    # ── Merging ──────────────────────────────────────────────────

    def merge(self, other: ValidationResult) -> ValidationResult:
        """Merge another result into this one; the first message per field wins."""
        merged = dict(self.errors)
        for field_name, message in other.errors.items():
            merged.setdefault(field_name, message)
        return ValidationResult(errors=merged)

    def add_error(self, field_name: str, message: str) -> None:
        """Record *message* for *field_name* unless one is already present."""
        self.errors.setdefault(field_name, message)

    def as_tuple(self) -> tuple[bool, dict[str, str] | None]:
        """``(ok, errors)`` with ``errors`` set to ``None`` when valid."""
        if self.is_valid:
            return True, None
        return False, dict(self.errors)

    def __bool__(self) -> bool:
        return self.is_valid

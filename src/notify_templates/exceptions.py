"""Exception hierarchy for notify-templates."""

from __future__ import annotations

from typing import Any


class NotifyTemplatesError(Exception):
    """Root exception for the template engine."""


class TemplateError(NotifyTemplatesError):
    """Base class for problems with a stored template definition."""


class UnknownChannelTypeError(TemplateError):
    """Raised when a template carries a channel type outside the closed set.

    Deliberately not a ``ValueError`` so pydantic validators let it propagate
    unwrapped.
    """

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(f"Unknown channel type {value!r}")


class TemplateDataError(TemplateError):
    """Raised when the stored ``data`` blob is structurally corrupted.

    Distinct from validation failures: this means storage holds something no
    authoring flow should have produced.
    """

    def __init__(self, template_id: object, field: str, reason: str) -> None:
        self.template_id = template_id
        self.field = field
        self.reason = reason
        super().__init__(
            f"Malformed data for template id={template_id!r}: `{field}` {reason}"
        )


class TemplateRenderError(TemplateError):
    """Raised when a renderer cannot parse template text."""


class TemplateValidationError(NotifyTemplatesError):
    """Raised when a template fails validation on create or update.

    Carries structured errors: ``{field: message}``.
    """

    def __init__(self, errors: dict[str, str]) -> None:
        self.errors = errors
        super().__init__(str(self.errors))


class InvariantViolationError(NotifyTemplatesError):
    """Raised when a template lifecycle invariant is violated."""


class ImmutableFieldError(InvariantViolationError):
    """Raised when an update tries to change a field fixed at creation."""

    def __init__(self, field: str, current: object, requested: object) -> None:
        self.field = field
        self.current = current
        self.requested = requested
        super().__init__(
            f"`{field}` is immutable (current={current!r}, requested={requested!r})"
        )


class TemplateNotFoundError(NotifyTemplatesError):
    """Raised when no live template matches a lookup (soft-deleted rows count
    as missing)."""

    def __init__(self, lookup: str) -> None:
        self.lookup = lookup
        super().__init__(f"No template found for {lookup}")

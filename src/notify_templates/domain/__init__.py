"""Domain records: the stored template and its lifecycle mixins."""

from __future__ import annotations

from .mixins import AuditableMixin, SoftDeleteMixin
from .template import Template, TemplateParams, TemplateUpdateParams, pick_locale

__all__: list[str] = [
    "AuditableMixin",
    "SoftDeleteMixin",
    "Template",
    "TemplateParams",
    "TemplateUpdateParams",
    "pick_locale",
]

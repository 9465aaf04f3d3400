"""Channel-typed notification templates — variant model, validation, compilation."""

from __future__ import annotations

from .channel import ChannelType, WebhookMethod
from .compiled import (
    CompiledEmail,
    CompiledPayload,
    CompiledPush,
    CompiledText,
    CompiledWebhookRequest,
)
from .compiler import TemplateCompiler
from .domain import Template, TemplateParams, TemplateUpdateParams, pick_locale
from .exceptions import (
    ImmutableFieldError,
    InvariantViolationError,
    NotifyTemplatesError,
    TemplateDataError,
    TemplateError,
    TemplateNotFoundError,
    TemplateRenderError,
    TemplateValidationError,
    UnknownChannelTypeError,
)

# In-memory adapters for testing
from .memory import InMemoryTemplateRepository
from .ports import IRenderer, ITemplateRepository
from .rendering import JinjaRenderer, SubstitutionRenderer, render_tree
from .service import TemplateService
from .validation import ValidationResult, validate_template
from .variants import (
    EmailTemplate,
    PushTemplate,
    TemplateVariant,
    TextTemplate,
    WebhookTemplate,
    map_template,
    required_errors,
)

__all__ = [
    "ChannelType",
    "WebhookMethod",
    "Template",
    "TemplateParams",
    "TemplateUpdateParams",
    "pick_locale",
    "EmailTemplate",
    "TextTemplate",
    "PushTemplate",
    "WebhookTemplate",
    "TemplateVariant",
    "map_template",
    "required_errors",
    "ValidationResult",
    "validate_template",
    "IRenderer",
    "ITemplateRepository",
    "SubstitutionRenderer",
    "JinjaRenderer",
    "render_tree",
    "TemplateCompiler",
    "CompiledEmail",
    "CompiledText",
    "CompiledPush",
    "CompiledWebhookRequest",
    "CompiledPayload",
    "TemplateService",
    "InMemoryTemplateRepository",
    "NotifyTemplatesError",
    "TemplateError",
    "UnknownChannelTypeError",
    "TemplateDataError",
    "TemplateRenderError",
    "TemplateValidationError",
    "InvariantViolationError",
    "ImmutableFieldError",
    "TemplateNotFoundError",
]

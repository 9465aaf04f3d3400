"""Typed channel views over a template's opaque ``data`` blob.

A stored :class:`~notify_templates.domain.template.Template` is decoded once,
through :func:`map_template`, into exactly one of :class:`EmailTemplate`,
:class:`TextTemplate`, :class:`PushTemplate` or :class:`WebhookTemplate`.
Absent or ``null`` fields default to ``""`` / ``{}`` so nothing downstream
ever dereferences a missing value; structurally wrong data raises
:class:`~notify_templates.exceptions.TemplateDataError`.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from .channel import ChannelType, WebhookMethod
from .domain.template import Template
from .exceptions import TemplateDataError, UnknownChannelTypeError

logger = logging.getLogger(__name__)

V = TypeVar("V", bound="TemplateView")

_META_FIELDS = frozenset({"id", "locale"})


def required_errors(locale: str, *fields: str) -> dict[str, str]:
    """Build the user-facing message for each missing required field."""
    return {
        field: (
            f"The `{field}` field on the `{locale}` template is missing "
            "and is required."
        )
        for field in fields
    }


class TemplateView(BaseModel):
    """Base class for the immutable channel views.

    Carries the owning template's ``id`` and ``locale``; every other field
    comes from ``data``. Unknown ``data`` keys are ignored.
    """

    # Fields are populated by their storage key only (``from``, not ``from_``).
    model_config = ConfigDict(frozen=True, extra="ignore")

    channel: ClassVar[ChannelType]

    id: int | None = None
    locale: str = ""

    @classmethod
    def from_template(cls: type[V], template: Template) -> V:
        """Decode *template* ``data`` into this view."""
        payload = {
            key: value
            for key, value in template.data.items()
            if value is not None and key not in _META_FIELDS
        }
        payload["id"] = template.id
        payload["locale"] = template.locale
        try:
            return cls.model_validate(payload)
        except PydanticValidationError as exc:
            error = exc.errors()[0]
            loc = error.get("loc", ("data",))
            field = str(loc[0]) if loc else "data"
            raise TemplateDataError(template.id, field, error.get("msg", "")) from exc

    def to_data(self) -> dict[str, Any]:
        """Map this view back to the storage ``data`` shape."""
        return self.model_dump(by_alias=True, exclude=set(_META_FIELDS), mode="json")

    def required_errors(self, *fields: str) -> dict[str, str]:
        """Messages for *fields* qualified by this template's locale."""
        return required_errors(self.locale, *fields)


class EmailTemplate(TemplateView):
    channel: ClassVar[ChannelType] = ChannelType.EMAIL

    from_: str = Field(default="", alias="from")
    cc: str = ""
    bcc: str = ""
    reply_to: str = ""
    subject: str = ""
    text: str = ""
    html: str = ""


class TextTemplate(TemplateView):
    channel: ClassVar[ChannelType] = ChannelType.TEXT

    text: str = ""


class PushTemplate(TemplateView):
    channel: ClassVar[ChannelType] = ChannelType.PUSH

    title: str = ""
    topic: str = ""
    body: str = ""
    custom: dict[str, Any] = Field(default_factory=dict)


class WebhookTemplate(TemplateView):
    channel: ClassVar[ChannelType] = ChannelType.WEBHOOK

    method: WebhookMethod = WebhookMethod.POST
    endpoint: str = ""
    body: dict[str, Any] = Field(default_factory=dict)
    headers: dict[str, str] = Field(default_factory=dict)


TemplateVariant = Union[EmailTemplate, TextTemplate, PushTemplate, WebhookTemplate]


def map_template(template: Template) -> TemplateVariant:
    """Select and build the channel view for *template* by its ``type``."""
    match template.type:
        case ChannelType.EMAIL:
            return EmailTemplate.from_template(template)
        case ChannelType.TEXT:
            return TextTemplate.from_template(template)
        case ChannelType.PUSH:
            return PushTemplate.from_template(template)
        case ChannelType.WEBHOOK:
            return WebhookTemplate.from_template(template)
        case _:
            logger.error(f"Template id={template.id!r} has type {template.type!r}")
            raise UnknownChannelTypeError(template.type)

"""Per-channel schemas for a template's ``data`` blob."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field, StrictStr
from pydantic import ValidationError as PydanticValidationError

from ..channel import ChannelType, WebhookMethod
from ..exceptions import UnknownChannelTypeError
from ..variants import required_errors
from .result import ValidationResult

if TYPE_CHECKING:
    from ..domain.template import Template

logger = logging.getLogger(__name__)


class _DataSchema(BaseModel):
    # Open schemas: undeclared keys are allowed. Every field the channel view
    # reads is declared here so anything accepted also maps cleanly.
    model_config = ConfigDict(extra="allow")


class EmailDataSchema(_DataSchema):
    from_: StrictStr = Field(alias="from")
    cc: StrictStr | None = None
    bcc: StrictStr | None = None
    reply_to: StrictStr | None = None
    subject: StrictStr
    text: StrictStr
    html: StrictStr


class TextDataSchema(_DataSchema):
    text: StrictStr


class PushDataSchema(_DataSchema):
    title: StrictStr
    topic: StrictStr
    body: StrictStr
    custom: dict[str, Any] | None = None


class WebhookDataSchema(_DataSchema):
    method: WebhookMethod
    endpoint: StrictStr
    headers: dict[str, StrictStr] | None = None
    body: dict[str, Any] | None = None


_EXPECTATIONS: dict[str, str] = {
    "string_type": "must be a string",
    "dict_type": "must be an object",
    "enum": "must be one of " + ", ".join(m.value for m in WebhookMethod),
}


def schema_for(channel: ChannelType) -> type[_DataSchema]:
    """Return the ``data`` schema for *channel*."""
    match channel:
        case ChannelType.EMAIL:
            return EmailDataSchema
        case ChannelType.TEXT:
            return TextDataSchema
        case ChannelType.PUSH:
            return PushDataSchema
        case ChannelType.WEBHOOK:
            return WebhookDataSchema
        case _:
            raise UnknownChannelTypeError(channel)


def _to_result(exc: PydanticValidationError, locale: str) -> ValidationResult:
    result = ValidationResult.success()
    for error in exc.errors():
        loc = error.get("loc") or ("data",)
        field = str(loc[0])
        if error["type"] == "missing":
            result.add_error(field, required_errors(locale, field)[field])
            continue
        path = ".".join(str(part) for part in loc)
        expectation = _EXPECTATIONS.get(error["type"], f"is invalid ({error['msg']})")
        result.add_error(
            field, f"The `{path}` field on the `{locale}` template {expectation}."
        )
    return result


def validate_template(template: Template) -> ValidationResult:
    """Check *template* ``data`` against its channel schema.

    Returns every failing field at once, keyed by field name.
    """
    schema = schema_for(template.type)
    try:
        schema.model_validate(template.data)
    except PydanticValidationError as exc:
        result = _to_result(exc, template.locale)
        logger.debug(
            f"{template.type.value} template id={template.id!r} "
            f"failed validation on {sorted(result.errors)}"
        )
        return result
    return ValidationResult.success()

"""Stored template record and its authoring parameters."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from ..channel import ChannelType
from ..exceptions import ImmutableFieldError, TemplateDataError
from .mixins import AuditableMixin, SoftDeleteMixin


def _parse_data(value: Any, template_id: object) -> dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise TemplateDataError(
            template_id, "data", f"must be an object, got {type(value).__name__}"
        )
    return dict(value)


class Template(AuditableMixin, SoftDeleteMixin):
    """A channel-typed template row.

    ``data`` is opaque storage for the channel fields and is only ever read
    through a variant view (see :func:`notify_templates.variants.map_template`).
    ``type`` is fixed at creation; several rows may share a campaign with
    distinct ``locale`` values.
    """

    id: int | None = None
    project_id: int
    campaign_id: int
    type: ChannelType
    locale: str
    data: dict[str, Any] = Field(default_factory=dict)

    @field_validator("type", mode="before")
    @classmethod
    def _check_type(cls, value: Any) -> ChannelType:
        return ChannelType.parse(value)

    @field_validator("data", mode="before")
    @classmethod
    def _check_data(cls, value: Any, info: ValidationInfo) -> dict[str, Any]:
        return _parse_data(value, info.data.get("id"))

    def update(self, params: TemplateUpdateParams) -> None:
        """Replace ``data`` wholesale. Raises if ``type`` would change."""
        if params.type is not self.type:
            raise ImmutableFieldError("type", self.type.value, params.type.value)
        object.__setattr__(self, "data", dict(params.data))
        self.touch()


class TemplateParams(BaseModel):
    """Fields supplied by an authoring flow to create a template."""

    project_id: int
    campaign_id: int
    type: ChannelType
    locale: str
    data: dict[str, Any] = Field(default_factory=dict)

    @field_validator("type", mode="before")
    @classmethod
    def _check_type(cls, value: Any) -> ChannelType:
        return ChannelType.parse(value)

    @field_validator("data", mode="before")
    @classmethod
    def _check_data(cls, value: Any) -> dict[str, Any]:
        return _parse_data(value, None)


class TemplateUpdateParams(BaseModel):
    """Full replacement of a template's ``data``.

    ``type`` is echoed back by editors and must match the stored type.
    """

    type: ChannelType
    data: dict[str, Any] = Field(default_factory=dict)

    @field_validator("type", mode="before")
    @classmethod
    def _check_type(cls, value: Any) -> ChannelType:
        return ChannelType.parse(value)

    @field_validator("data", mode="before")
    @classmethod
    def _check_data(cls, value: Any) -> dict[str, Any]:
        return _parse_data(value, None)


def _normalize_locale(locale: str) -> str:
    return locale.replace("_", "-").lower()


def pick_locale(
    templates: Iterable[Template],
    locale: str | None,
    default_locale: str | None = None,
) -> Template | None:
    """Choose the translation of a campaign template for a recipient.

    For the requested locale and then for ``default_locale`` it tries, in
    order:

    1. the exact locale (``pt-BR``);
    2. its base language (``pt-BR`` -> ``pt``);
    3. a regional row of that language (``pt`` -> ``pt-BR``), the
       alphabetically first when there are several.

    When nothing matches, the row with the lowest ``id`` wins, so the result
    never depends on the order *templates* arrives in.
    """
    candidates = sorted(
        (t for t in templates if not t.is_deleted),
        key=lambda t: (t.id is None, t.id or 0, _normalize_locale(t.locale)),
    )
    if not candidates:
        return None
    by_locale: dict[str, Template] = {}
    for template in candidates:
        by_locale.setdefault(_normalize_locale(template.locale), template)

    for requested in (locale, default_locale):
        if not requested:
            continue
        normalized = _normalize_locale(requested)
        language = normalized.split("-")[0]
        for key in (normalized, language):
            if key in by_locale:
                return by_locale[key]
        regional = sorted(key for key in by_locale if key.startswith(language + "-"))
        if regional:
            return by_locale[regional[0]]
    return candidates[0]

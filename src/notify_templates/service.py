"""TemplateService — authoring lifecycle and send-time compilation."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from .compiler import TemplateCompiler
from .domain.template import Template, pick_locale
from .exceptions import TemplateNotFoundError, TemplateValidationError
from .validation.schema import validate_template

if TYPE_CHECKING:
    from .compiled import CompiledPayload
    from .domain.template import TemplateParams, TemplateUpdateParams
    from .ports.repository import ITemplateRepository

logger = logging.getLogger(__name__)


class TemplateService:
    """
    Coordinates the repository, the validator and the compiler.

    Validation happens on every write and blocks persistence of an invalid
    template; compilation trusts what was stored.
    """

    def __init__(
        self,
        repository: ITemplateRepository,
        compiler: TemplateCompiler | None = None,
        default_locale: str = "en",
    ):
        self.repository = repository
        self.compiler = compiler or TemplateCompiler()
        self.default_locale = default_locale

    async def create(self, params: TemplateParams) -> Template:
        """Validate and insert a new template."""
        template = Template(**params.model_dump())
        self._ensure_valid(template)
        stored = await self.repository.add(template)
        logger.info(
            f"Created {stored.type.value} template id={stored.id} "
            f"for campaign {stored.campaign_id} ({stored.locale})"
        )
        return stored

    async def get(self, template_id: int) -> Template:
        """Load a live template or raise ``TemplateNotFoundError``."""
        template = await self.repository.get(template_id)
        if template is None:
            raise TemplateNotFoundError(f"id={template_id}")
        return template

    async def update(self, template_id: int, params: TemplateUpdateParams) -> Template:
        """Replace a template's ``data``; its ``type`` cannot change."""
        template = await self.get(template_id)
        template.update(params)
        self._ensure_valid(template)
        await self.repository.save(template)
        logger.info(f"Updated template id={template_id}")
        return template

    async def delete(self, template_id: int) -> Template:
        """Soft-delete a template."""
        template = await self.get(template_id)
        template.delete()
        await self.repository.save(template)
        logger.info(f"Deleted template id={template_id}")
        return template

    async def resolve(
        self, project_id: int, campaign_id: int, locale: str | None = None
    ) -> Template:
        """Pick the campaign template best matching a recipient *locale*."""
        templates = await self.repository.list_for_campaign(project_id, campaign_id)
        template = pick_locale(templates, locale, self.default_locale)
        if template is None:
            raise TemplateNotFoundError(
                f"project={project_id} campaign={campaign_id} locale={locale}"
            )
        return template

    async def compile(
        self, template_id: int, context: Mapping[str, Any]
    ) -> CompiledPayload:
        """Compile a stored template for one recipient."""
        template = await self.get(template_id)
        return self.compiler.compile_template(template, context)

    async def compile_for(
        self,
        project_id: int,
        campaign_id: int,
        context: Mapping[str, Any],
        locale: str | None = None,
    ) -> CompiledPayload:
        """Resolve a campaign's template by *locale* and compile it."""
        template = await self.resolve(project_id, campaign_id, locale)
        return self.compiler.compile_template(template, context)

    def _ensure_valid(self, template: Template) -> None:
        ok, errors = validate_template(template).as_tuple()
        if not ok:
            assert errors is not None
            logger.warning(
                f"Rejected {template.type.value} template ({template.locale}): "
                f"{sorted(errors)}"
            )
            raise TemplateValidationError(errors)

"""Template compiler — renders a channel view into its transport payload."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from functools import partial
from typing import TYPE_CHECKING, Any

from .compiled import (
    CompiledEmail,
    CompiledPayload,
    CompiledPush,
    CompiledText,
    CompiledWebhookRequest,
)
from .rendering.substitution import SubstitutionRenderer
from .rendering.tree import render_tree
from .variants import (
    EmailTemplate,
    PushTemplate,
    TemplateVariant,
    TextTemplate,
    WebhookTemplate,
    map_template,
)

if TYPE_CHECKING:
    from .domain.template import Template
    from .ports.renderer import IRenderer

logger = logging.getLogger(__name__)


class TemplateCompiler:
    """
    Renders every templated field of a channel view against a variable context.

    The compiler assumes the view already passed validation and does not
    check it again: a missing field renders from the view's default (``""``).
    It keeps no state besides the injected renderer, so a single instance can
    compile for any number of recipients concurrently. Inputs are never
    mutated.
    """

    def __init__(self, renderer: IRenderer | None = None) -> None:
        self.renderer: IRenderer = renderer or SubstitutionRenderer()

    def compile(
        self, template: TemplateVariant, context: Mapping[str, Any]
    ) -> CompiledPayload:
        """Render *template* for one recipient's *context*."""
        logger.debug(
            f"Compiling {template.channel.value} template "
            f"id={template.id!r} (locale={template.locale})"
        )
        match template:
            case EmailTemplate():
                return self._compile_email(template, context)
            case TextTemplate():
                return CompiledText(text=self._render(template.text, context))
            case PushTemplate():
                return self._compile_push(template, context)
            case WebhookTemplate():
                return self._compile_webhook(template, context)
            case _:
                raise TypeError(f"Unsupported template view {type(template).__name__}")

    def compile_template(
        self, template: Template, context: Mapping[str, Any]
    ) -> CompiledPayload:
        """Map a stored record to its view, then compile it."""
        return self.compile(map_template(template), context)

    def compile_many(
        self,
        template: TemplateVariant,
        contexts: Iterable[Mapping[str, Any]],
    ) -> Iterator[CompiledPayload]:
        """Lazily compile *template* once per context, in order."""
        for context in contexts:
            yield self.compile(template, context)

    # ── Channels ─────────────────────────────────────────────────

    def _render(self, text: str, context: Mapping[str, Any]) -> str:
        return self.renderer.render(text, context)

    def _tree(self, value: Any, context: Mapping[str, Any]) -> Any:
        return render_tree(value, partial(self._render, context=context))

    def _compile_email(
        self, template: EmailTemplate, context: Mapping[str, Any]
    ) -> CompiledEmail:
        optional = {
            name: self._render(value, context)
            for name, value in (
                ("reply_to", template.reply_to),
                ("cc", template.cc),
                ("bcc", template.bcc),
            )
            if value
        }
        return CompiledEmail(
            subject=self._render(template.subject, context),
            from_=self._render(template.from_, context),
            html=self._render(template.html, context),
            text=self._render(template.text, context),
            **optional,
        )

    def _compile_push(
        self, template: PushTemplate, context: Mapping[str, Any]
    ) -> CompiledPush:
        # topic is a routing key, not content
        return CompiledPush(
            topic=template.topic,
            title=self._render(template.title, context),
            body=self._render(template.body, context),
            custom=self._tree(template.custom, context),
        )

    def _compile_webhook(
        self, template: WebhookTemplate, context: Mapping[str, Any]
    ) -> CompiledWebhookRequest:
        headers = {
            key: self._render(value, context) for key, value in template.headers.items()
        }
        return CompiledWebhookRequest(
            method=template.method,
            endpoint=self._render(template.endpoint, context),
            headers=headers,
            body=self._tree(template.body, context),
        )

"""Jinja2 renderer."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from jinja2 import ChainableUndefined, TemplateError
from jinja2.sandbox import SandboxedEnvironment

from ..exceptions import TemplateRenderError
from ..ports.renderer import IRenderer
from .values import format_value

logger = logging.getLogger(__name__)


class _ContextEnvironment(SandboxedEnvironment):
    """Sandbox that resolves ``a.b`` on mappings by key before attribute.

    Without this ``{{ order.items }}`` would yield the bound ``dict.items``.
    """

    def getattr(self, obj: Any, attribute: str) -> Any:
        if isinstance(obj, Mapping):
            try:
                return obj[attribute]
            except (KeyError, TypeError):
                return self.undefined(obj=obj, name=attribute)
        return super().getattr(obj, attribute)


class JinjaRenderer(IRenderer):
    """
    Renders template text with a sandboxed Jinja2 environment.

    Follows the same policy as :class:`SubstitutionRenderer`: undefined
    variables (at any depth) render as ``""`` and values are formatted the
    same way. Unlike the substitution renderer it also understands Jinja
    filters and control blocks, so authors can opt into them by injecting
    this renderer.
    """

    def __init__(self) -> None:
        self._env = _ContextEnvironment(
            undefined=ChainableUndefined,
            autoescape=False,
            keep_trailing_newline=True,
            finalize=format_value,
        )

    def render(self, text: str, context: Mapping[str, Any]) -> str:
        """Render template text using Jinja2."""
        try:
            return self._env.from_string(text).render(dict(context))
        except TemplateError as e:
            logger.error(f"Jinja2 rendering failed: {e}")
            raise TemplateRenderError(str(e)) from e

"""Zero-dependency ``{{path}}`` substitution renderer."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import Any

from ..ports.renderer import IRenderer
from .values import format_value, resolve_path

logger = logging.getLogger(__name__)

_PATH = r"[\w\-]+(?:\.[\w\-]+)*"

_TOKEN_RE = re.compile(
    r"\\\{\{"
    r"|\{\{\{\s*(?P<triple>" + _PATH + r")\s*\}\}\}"
    r"|\{\{\s*(?P<double>" + _PATH + r")\s*\}\}"
)


class SubstitutionRenderer(IRenderer):
    """
    Replaces ``{{ path.to.value }}`` references with values from the context.

    Grammar:

    * ``{{ path }}`` or ``{{{ path }}}``; whitespace inside the braces is
      optional and neither form HTML-escapes.
    * ``path`` is dot-separated; numeric segments index into sequences
      (``{{ items.0.name }}``).
    * ``\\{{`` emits a literal ``{{``.
    * Braces around anything that is not a path (``{{#if x}}``) are left as
      written.
    * Unresolved paths and ``None`` render as an empty string.

    The renderer holds no state, so one instance can serve any number of
    concurrent renders.
    """

    def render(self, text: str, context: Mapping[str, Any]) -> str:
        """Render *text* against *context*."""
        if "{{" not in text:
            return text

        def _replace(match: re.Match[str]) -> str:
            path = match.group("triple") or match.group("double")
            if path is None:
                return "{{"
            value = resolve_path(context, path)
            if value is None:
                logger.debug(f"Unresolved template variable {path!r}")
            return str(format_value(value))

        return _TOKEN_RE.sub(_replace, text)

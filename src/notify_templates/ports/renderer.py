"""Renderer port."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class IRenderer(Protocol):
    """
    Protocol for substituting variables into a single piece of template text.

    Implementations must be pure: no I/O, no state carried between calls,
    and unresolved references render as an empty string rather than raising.

    Implementations: SubstitutionRenderer, JinjaRenderer.
    """

    def render(self, text: str, context: Mapping[str, Any]) -> str:
        """Render *text* against *context*."""
        ...

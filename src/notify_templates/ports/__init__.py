"""Port definitions for the template engine."""

from __future__ import annotations

from .renderer import IRenderer
from .repository import ITemplateRepository

__all__ = [
    "IRenderer",
    "ITemplateRepository",
]

"""In-memory adapters for testing."""

from __future__ import annotations

from .repository import InMemoryTemplateRepository

__all__ = ["InMemoryTemplateRepository"]

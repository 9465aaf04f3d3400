"""Template repository port."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..domain.template import Template


@runtime_checkable
class ITemplateRepository(Protocol):
    """
    Persistence collaborator for template records.

    Reads must never return soft-deleted rows; ``save`` persists them so the
    deletion stamp is kept.

    Implementations: InMemoryTemplateRepository.
    """

    async def add(self, template: Template) -> Template:
        """Insert *template*, returning it with its assigned ``id``."""
        ...

    async def get(self, template_id: int) -> Template | None:
        """Load a live template by id."""
        ...

    async def save(self, template: Template) -> None:
        """Persist changes to an existing template."""
        ...

    async def list_for_campaign(
        self, project_id: int, campaign_id: int
    ) -> list[Template]:
        """All live locale rows of a campaign's template."""
        ...

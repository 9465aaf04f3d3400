"""InMemoryTemplateRepository — dict-backed fake for unit tests."""

from __future__ import annotations

from itertools import count

from ..domain.template import Template
from ..ports.repository import ITemplateRepository


class InMemoryTemplateRepository(ITemplateRepository):
    """In-memory implementation of ``ITemplateRepository``.

    Stores copies of the records keyed by ``id`` and assigns ids on insert
    the way an autoincrement column would.
    """

    def __init__(self) -> None:
        self._store: dict[int, Template] = {}
        self._ids = count(1)

    async def add(self, template: Template) -> Template:
        stored = template.model_copy(update={"id": next(self._ids)}, deep=True)
        assert stored.id is not None
        self._store[stored.id] = stored
        return stored.model_copy(deep=True)

    async def get(self, template_id: int) -> Template | None:
        stored = self._store.get(template_id)
        if stored is None or stored.is_deleted:
            return None
        return stored.model_copy(deep=True)

    async def save(self, template: Template) -> None:
        if template.id is None or template.id not in self._store:
            raise KeyError(f"Template id={template.id!r} was never added")
        self._store[template.id] = template.model_copy(deep=True)

    async def list_for_campaign(
        self, project_id: int, campaign_id: int
    ) -> list[Template]:
        return [
            template.model_copy(deep=True)
            for template in self._store.values()
            if template.project_id == project_id
            and template.campaign_id == campaign_id
            and not template.is_deleted
        ]

    def __len__(self) -> int:
        return len(self._store)

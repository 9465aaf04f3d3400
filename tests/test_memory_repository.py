"""Tests for the in-memory template repository."""

import pytest

from notify_templates.memory.repository import InMemoryTemplateRepository
from notify_templates.ports.repository import ITemplateRepository


@pytest.mark.asyncio
async def test_add_assigns_sequential_ids(make_template) -> None:
    repo = InMemoryTemplateRepository()

    first = await repo.add(make_template(id=None))
    second = await repo.add(make_template(id=None, locale="fr"))

    assert (first.id, second.id) == (1, 2)
    assert len(repo) == 2


@pytest.mark.asyncio
async def test_get_returns_isolated_copy(make_template) -> None:
    repo = InMemoryTemplateRepository()
    stored = await repo.add(make_template(type="text", data={"text": "a"}))

    loaded = await repo.get(stored.id)
    loaded.data["text"] = "mutated"

    assert (await repo.get(stored.id)).data == {"text": "a"}


@pytest.mark.asyncio
async def test_save_requires_existing_row(make_template) -> None:
    repo = InMemoryTemplateRepository()

    with pytest.raises(KeyError):
        await repo.save(make_template(id=123))


@pytest.mark.asyncio
async def test_reads_exclude_soft_deleted(make_template) -> None:
    repo = InMemoryTemplateRepository()
    en = await repo.add(make_template(locale="en"))
    fr = await repo.add(make_template(locale="fr"))
    await repo.add(make_template(locale="en", campaign_id=11))

    fr.delete()
    await repo.save(fr)

    assert await repo.get(fr.id) is None
    campaign = await repo.list_for_campaign(1, 10)
    assert [t.id for t in campaign] == [en.id]


def test_repository_satisfies_port() -> None:
    assert isinstance(InMemoryTemplateRepository(), ITemplateRepository)

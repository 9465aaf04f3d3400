"""Test configuration for notify-templates."""

from __future__ import annotations

from typing import Any

import pytest

from notify_templates.domain.template import Template


@pytest.fixture
def make_template():
    """Factory for stored template records."""

    def _make(
        type: str = "email",
        data: dict[str, Any] | None = None,
        locale: str = "en",
        id: int | None = 1,
        project_id: int = 1,
        campaign_id: int = 10,
    ) -> Template:
        return Template(
            id=id,
            project_id=project_id,
            campaign_id=campaign_id,
            type=type,
            locale=locale,
            data=data or {},
        )

    return _make


@pytest.fixture
def email_data() -> dict[str, Any]:
    """A fully populated email ``data`` blob."""
    return {
        "from": "{{ project.sender }}",
        "reply_to": "support@example.com",
        "subject": "Welcome, {{ user.first_name }}!",
        "text": "Hi {{ user.first_name }}, your code is {{ event.code }}.",
        "html": "<p>Hi {{ user.first_name }}</p>",
    }


@pytest.fixture
def context() -> dict[str, Any]:
    """Sample variable context for one recipient."""
    return {
        "user": {"first_name": "Ada", "last_name": "Lovelace", "id": 42},
        "project": {"sender": "news@example.com"},
        "event": {"code": "X-1", "items": [{"sku": "A1"}, {"sku": "B2"}]},
        "name": "Ada",
    }

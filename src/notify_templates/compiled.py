"""Compiled, transport-ready payload types."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union

from .channel import WebhookMethod


@dataclass(frozen=True)
class CompiledEmail:
    """Immutable rendered email. Optional addresses are ``None`` when absent."""

    from_: str
    subject: str
    text: str
    html: str
    cc: str | None = None
    bcc: str | None = None
    reply_to: str | None = None

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "from": self.from_,
            "subject": self.subject,
            "text": self.text,
            "html": self.html,
        }
        for name in ("cc", "bcc", "reply_to"):
            value = getattr(self, name)
            if value is not None:
                payload[name] = value
        return payload


@dataclass(frozen=True)
class CompiledText:
    """Immutable rendered text message."""

    text: str

    def to_dict(self) -> dict[str, Any]:
        return {"text": self.text}


@dataclass(frozen=True)
class CompiledPush:
    """Immutable rendered push notification."""

    topic: str
    title: str
    body: str
    custom: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "topic": self.topic,
            "title": self.title,
            "body": self.body,
            "custom": self.custom,
        }


@dataclass(frozen=True)
class CompiledWebhookRequest:
    """Immutable webhook request ready for an HTTP client."""

    method: WebhookMethod
    endpoint: str
    headers: dict[str, str] = field(default_factory=dict)
    body: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "method": self.method.value,
            "endpoint": self.endpoint,
            "headers": self.headers,
            "body": self.body,
        }


CompiledPayload = Union[CompiledEmail, CompiledText, CompiledPush, CompiledWebhookRequest]

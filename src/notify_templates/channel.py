"""Channel type and webhook method enums."""

from __future__ import annotations

from enum import Enum

from .exceptions import UnknownChannelTypeError


class ChannelType(str, Enum):
    """Delivery medium a template targets."""

    EMAIL = "email"
    TEXT = "text"
    PUSH = "push"
    WEBHOOK = "webhook"

    @classmethod
    def parse(cls, value: object) -> ChannelType:
        """Coerce a stored discriminator, raising on anything outside the set."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise UnknownChannelTypeError(value) from None


class WebhookMethod(str, Enum):
    """HTTP verbs a webhook template may use."""

    DELETE = "DELETE"
    GET = "GET"
    PATCH = "PATCH"
    POST = "POST"
    PUT = "PUT"

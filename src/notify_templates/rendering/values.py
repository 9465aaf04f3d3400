"""Shared value lookup and formatting for renderers."""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from typing import Any


def _json_default(value: Any) -> Any:
    if isinstance(value, Mapping):
        return dict(value)
    return str(value)


def format_value(value: Any) -> Any:
    """Turn a resolved context value into output text.

    ``None`` becomes ``""``, booleans become ``true``/``false`` and
    containers are emitted as compact JSON. Anything else is returned as is
    for the caller to ``str()``.
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (Mapping, list, tuple)):
        return json.dumps(
            value, ensure_ascii=False, separators=(",", ":"), default=_json_default
        )
    return value


def resolve_path(context: Mapping[str, Any], path: str) -> Any:
    """Walk a dot-separated *path* through nested mappings and sequences.

    Returns ``None`` as soon as a segment cannot be resolved.
    """
    value: Any = context
    for segment in path.split("."):
        if isinstance(value, Mapping):
            if segment not in value:
                return None
            value = value[segment]
        elif (
            isinstance(value, Sequence)
            and not isinstance(value, (str, bytes))
            and segment.isdecimal()
        ):
            index = int(segment)
            if index >= len(value):
                return None
            value = value[index]
        else:
            return None
    return value

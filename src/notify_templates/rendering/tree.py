"""Generic tree walk applying a scalar renderer to nested structures."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any


def render_tree(value: Any, render_scalar: Callable[[str], str]) -> Any:
    """Return a rendered copy of *value*.

    Mappings keep their keys and have every value walked, lists and tuples
    are walked item by item (and come back as lists), string leaves go through
    *render_scalar* and any other scalar is returned unchanged. The input is
    never mutated.
    """
    if isinstance(value, str):
        return render_scalar(value)
    if isinstance(value, Mapping):
        return {key: render_tree(item, render_scalar) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [render_tree(item, render_scalar) for item in value]
    return value

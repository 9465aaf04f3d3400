"""Template text renderers and the nested-structure tree walk."""

from __future__ import annotations

from .jinja import JinjaRenderer
from .substitution import SubstitutionRenderer
from .tree import render_tree
from .values import format_value, resolve_path

__all__ = [
    "JinjaRenderer",
    "SubstitutionRenderer",
    "format_value",
    "render_tree",
    "resolve_path",
]

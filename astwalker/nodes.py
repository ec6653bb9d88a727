"""Uniform field access over ESTree nodes.

Nodes may be plain mappings (ESTree JSON, as produced by the frontends) or
attribute objects exposing a ``type`` tag.  Everything else is treated as a
leaf value and never visited.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def is_structured(value: Any) -> bool:
    """True for anything that can carry fields: mappings and non-scalar objects."""
    if isinstance(value, Mapping):
        return True
    return value is not None and not isinstance(
        value, (str, bytes, int, float, list, tuple)
    )


def is_node(value: Any) -> bool:
    if isinstance(value, Mapping):
        return True
    return is_structured(value) and hasattr(value, "type")


def is_node_list(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def get_field(node: Any, name: str, default: Any = None) -> Any:
    if isinstance(node, Mapping):
        return node.get(name, default)
    return getattr(node, name, default)


def node_type(node: Any) -> str | None:
    tag = get_field(node, "type")
    return tag if isinstance(tag, str) else None


def param_count(node: Any) -> int:
    params = get_field(node, "params")
    return len(params) if is_node_list(params) else 0

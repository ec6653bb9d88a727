"""Display names for scope-introducing nodes."""

from __future__ import annotations

from typing import Any

from .nodes import get_field, is_structured
from . import constants


def _non_empty(value: Any) -> bool:
    return isinstance(value, str) and value != ""


def safe_name(id_node: Any, default_name: Any = "") -> str:
    """Return the name a scope should be reported under.

    An explicit identifier always wins; otherwise *default_name* (the hint
    assigned by a binding parent) is used, and failing that the anonymous
    placeholder.  Never raises.
    """
    if is_structured(id_node):
        name = get_field(id_node, "name")
        if _non_empty(name):
            return name
    if _non_empty(default_name):
        return default_name
    return constants.ANONYMOUS_NAME

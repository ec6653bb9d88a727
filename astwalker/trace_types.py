"""Visit trace data types (pure data, no traversal logic)."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class EventKind(str, Enum):
    PROCESS_NODE = "PROCESS_NODE"
    CREATE_SCOPE = "CREATE_SCOPE"
    POP_SCOPE = "POP_SCOPE"


class VisitEvent(BaseModel):
    """One observer notification emitted during a walk."""

    kind: EventKind
    node_type: str = ""
    scope_name: str = ""
    param_count: int = 0
    line: int = 0
    column: int = 0
    depth: int = 0  # enclosing scope depth at the time of the event

    def __str__(self) -> str:
        indent = "  " * self.depth
        if self.kind == EventKind.PROCESS_NODE:
            where = f"  # {self.line}:{self.column}" if self.line else ""
            return f"{indent}{self.node_type}{where}"
        if self.kind == EventKind.CREATE_SCOPE:
            return f"{indent}scope {self.scope_name} ({self.param_count} params) {{"
        return f"{indent}}}"

"""Observer interface notified by the walker, plus a trace-recording implementation."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from .nodes import get_field, node_type
from .syntax_types import SyntaxDescriptor
from .trace_types import EventKind, VisitEvent


class WalkerCallbacks(ABC):
    """Receives every visited node and every scope enter/exit, in traversal order."""

    @abstractmethod
    def process_node(self, node: Any, syntax: SyntaxDescriptor) -> None: ...

    @abstractmethod
    def create_scope(self, name: str, loc: Any, param_count: int) -> None: ...

    @abstractmethod
    def pop_scope(self) -> None: ...


def _position(loc: Any) -> tuple[int, int]:
    start = get_field(loc, "start") if loc is not None else None
    if start is None:
        return 0, 0
    return get_field(start, "line", 0) or 0, get_field(start, "column", 0) or 0


class TraceRecorder(WalkerCallbacks):
    """Records walker notifications as ``VisitEvent``s and keeps its own scope stack."""

    def __init__(self):
        self.events: list[VisitEvent] = []
        self.nodes: list[Any] = []
        self.scopes: list[str] = []

    def process_node(self, node: Any, syntax: SyntaxDescriptor) -> None:
        line, column = _position(get_field(node, "loc"))
        self.nodes.append(node)
        self.events.append(
            VisitEvent(
                kind=EventKind.PROCESS_NODE,
                node_type=node_type(node) or "",
                line=line,
                column=column,
                depth=len(self.scopes),
            )
        )

    def create_scope(self, name: str, loc: Any, param_count: int) -> None:
        line, column = _position(loc)
        self.events.append(
            VisitEvent(
                kind=EventKind.CREATE_SCOPE,
                scope_name=name,
                param_count=param_count,
                line=line,
                column=column,
                depth=len(self.scopes),
            )
        )
        self.scopes.append(name)

    def pop_scope(self) -> None:
        self.scopes.pop()
        self.events.append(VisitEvent(kind=EventKind.POP_SCOPE, depth=len(self.scopes)))

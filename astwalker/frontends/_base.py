"""BaseFrontend — tree-sitter CST → ESTree dict conversion infrastructure."""

from __future__ import annotations

import logging
from typing import Any, Callable

from .. import constants

logger = logging.getLogger(__name__)

EstreeNode = dict[str, Any]


class BaseFrontend:
    """Base class for tree-sitter → ESTree frontends.

    Subclasses populate ``_DISPATCH`` with one converter per tree-sitter node
    type.  Node types without a converter become ``Unsupported`` ESTree nodes,
    which no syntax registry recognises.
    """

    COMMENT_TYPES: frozenset[str] = frozenset({"comment"})

    def __init__(self):
        self._source: bytes = b""
        self._DISPATCH: dict[str, Callable[[Any], EstreeNode]] = {}

    # ── entry point ──────────────────────────────────────────────

    def build(self, tree, source: bytes) -> EstreeNode:
        self._source = source
        return self._build_program(tree.root_node)

    def _build_program(self, root) -> EstreeNode:
        return self._make(
            "Program",
            root,
            body=self._convert_all(self._named_children(root)),
        )

    # ── helpers ──────────────────────────────────────────────────

    def _node_text(self, node) -> str:
        return self._source[node.start_byte : node.end_byte].decode("utf-8")

    def _loc(self, node) -> dict[str, dict[str, int]]:
        s, e = node.start_point, node.end_point
        return {
            "start": {"line": s[0] + 1, "column": s[1]},
            "end": {"line": e[0] + 1, "column": e[1]},
        }

    def _point(self, offset: int) -> dict[str, int]:
        line_start = self._source.rfind(b"\n", 0, offset) + 1
        return {
            "line": self._source.count(b"\n", 0, offset) + 1,
            "column": offset - line_start,
        }

    def _make(self, estree_type: str, node, **fields: Any) -> EstreeNode:
        result: EstreeNode = {"type": estree_type}
        result.update(fields)
        result["loc"] = self._loc(node)
        result["range"] = [node.start_byte, node.end_byte]
        return result

    def _make_span(
        self, estree_type: str, start: int, end: int, **fields: Any
    ) -> EstreeNode:
        """Build a node covering source bytes that no single tree-sitter node spans."""
        result: EstreeNode = {"type": estree_type}
        result.update(fields)
        result["loc"] = {"start": self._point(start), "end": self._point(end)}
        result["range"] = [start, end]
        return result

    def _named_children(self, node) -> list:
        return [
            c for c in node.children if c.is_named and c.type not in self.COMMENT_TYPES
        ]

    def _first_named(self, node):
        children = self._named_children(node)
        return children[0] if children else None

    def _has_token(self, node, token: str) -> bool:
        return any(not c.is_named and c.type == token for c in node.children)

    # ── dispatchers ──────────────────────────────────────────────

    def _convert(self, node) -> EstreeNode | None:
        if node is None:
            return None
        handler = self._DISPATCH.get(node.type)
        if handler:
            return handler(node)
        logger.debug("No ESTree conversion for tree-sitter node %r", node.type)
        return self._make(constants.UNSUPPORTED_NODE_TYPE, node, kind=node.type)

    def _convert_all(self, nodes) -> list[EstreeNode]:
        return [self._convert(n) for n in nodes]

    def _convert_field(self, node, field: str) -> EstreeNode | None:
        return self._convert(node.child_by_field_name(field))

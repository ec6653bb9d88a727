"""Walker — descriptor-driven, pre-order traversal of ESTree-shaped trees."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from .nodes import get_field, is_node, is_node_list, node_type, param_count
from .safe_name import safe_name
from .syntax import get_syntaxes
from .syntax_types import SyntaxDescriptor, WalkerSettings

logger = logging.getLogger(__name__)

_CALLBACK_NAMES: tuple[str, ...] = ("process_node", "create_scope", "pop_scope")


class WalkerContractError(TypeError):
    """Raised before traversal when walk() is given malformed arguments."""


def _coerce_settings(settings: Any) -> WalkerSettings:
    if isinstance(settings, WalkerSettings):
        return settings
    if not isinstance(settings, Mapping):
        raise WalkerContractError("Invalid settings")
    try:
        return WalkerSettings.model_validate(dict(settings))
    except ValidationError as exc:
        raise WalkerContractError(f"Invalid settings: {exc}") from exc


def _check_arguments(tree: Any, settings: Any, callbacks: Any) -> WalkerSettings:
    if not is_node(tree) and get_field(tree, "body") is None:
        raise WalkerContractError("Invalid syntax tree")
    if not is_node_list(get_field(tree, "body")):
        raise WalkerContractError("Invalid syntax tree body")
    checked = _coerce_settings(settings)
    if callbacks is None:
        raise WalkerContractError("Invalid callbacks")
    for name in _CALLBACK_NAMES:
        if not callable(getattr(callbacks, name, None)):
            raise WalkerContractError(f"Invalid {name} callback")
    return checked


class _Traversal:
    """State for a single walk: the registry and the observer, nothing else."""

    def __init__(self, syntaxes: Mapping[str, SyntaxDescriptor], callbacks: Any):
        self._syntaxes = syntaxes
        self._callbacks = callbacks

    def visit_nodes(self, nodes, assigned_name: str = "") -> None:
        for node in nodes:
            self.visit_node(node, assigned_name)

    def visit_node(self, node, assigned_name: str = "") -> None:
        if not is_node(node):
            return
        syntax = self._syntaxes.get(node_type(node))
        if syntax is None:
            logger.debug("Skipping unrecognised node type %r", node_type(node))
            return

        self._callbacks.process_node(node, syntax)

        if syntax.new_scope:
            self._callbacks.create_scope(
                safe_name(get_field(node, "id"), assigned_name),
                get_field(node, "loc"),
                param_count(node),
            )

        self._visit_children(node, syntax)

        if syntax.new_scope:
            self._callbacks.pop_scope()

    def _visit_children(self, node, syntax: SyntaxDescriptor) -> None:
        child_name = syntax.assignable_name(node) if syntax.assignable_name else ""
        for field in syntax.children:
            child = get_field(node, field)
            if is_node_list(child):
                self.visit_nodes(child, child_name)
            else:
                self.visit_node(child, child_name)


def walk(tree: Any, settings: Any, callbacks: Any) -> None:
    """Walk *tree*, notifying *callbacks* of every node the registry recognises.

    Args:
        tree: A program node whose ``body`` is a list of statement nodes.
        settings: A ``WalkerSettings`` or a mapping validated into one; it
            selects the edition and trait options of the syntax registry.
        callbacks: An object with ``process_node(node, syntax)``,
            ``create_scope(name, loc, param_count)`` and ``pop_scope()``,
            normally a ``WalkerCallbacks`` subclass.

    Raises:
        WalkerContractError: if any argument is malformed.  No callback has
            been invoked when this is raised.
    """
    checked = _check_arguments(tree, settings, callbacks)
    syntaxes = get_syntaxes(checked)
    logger.debug("Walking %d top-level statements", len(get_field(tree, "body")))
    _Traversal(syntaxes, callbacks).visit_nodes(get_field(tree, "body"))

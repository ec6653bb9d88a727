"""Shorthand constructors for syntax descriptors."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Optional

from .syntax_types import NodeCallable, SyntaxDescriptor, Trait, TraitValue


def _trait(value: Any) -> Trait:
    if isinstance(value, Trait):
        return value
    if isinstance(value, Mapping):
        return Trait(identifier=value.get("identifier"), filter=value.get("filter"))
    return Trait(identifier=value)


def _traits(values: Any) -> tuple[Trait, ...]:
    """Normalise ``None``, a single value or a sequence of values."""
    if values is None:
        return ()
    if isinstance(values, Sequence) and not isinstance(values, str):
        return tuple(_trait(s) for s in values)
    return (_trait(values),)


def actualise(
    lloc: TraitValue,
    cyclomatic: TraitValue,
    operators: Any = None,
    operands: Any = None,
    children: Optional[Sequence[str]] = None,
    assignable_name: Optional[NodeCallable] = None,
    new_scope: bool = False,
    dependencies: Optional[NodeCallable] = None,
) -> SyntaxDescriptor:
    """Build a descriptor from positional shorthand.

    *operators* and *operands* accept a bare identifier (string or callable),
    a ``Trait``, a ``{"identifier": ..., "filter": ...}`` mapping, or a list of
    any of those.
    """
    return SyntaxDescriptor(
        new_scope=bool(new_scope),
        children=tuple(children or ()),
        assignable_name=assignable_name,
        lloc=lloc,
        cyclomatic=cyclomatic,
        operators=_traits(operators),
        operands=_traits(operands),
        dependencies=dependencies,
    )


def evaluate(value: TraitValue, node: Any) -> Any:
    """Resolve a fixed-or-computed trait value for *node*."""
    if callable(value):
        return value(node)
    return value

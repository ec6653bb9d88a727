"""Syntax descriptor contract and walker settings (pure data, no traversal logic)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Union

from pydantic import BaseModel, ConfigDict, field_validator

from . import constants

NodeCallable = Callable[[Any], Any]

# lloc / cyclomatic may be fixed or computed per node
TraitValue = Union[int, NodeCallable]


@dataclass(frozen=True)
class Trait:
    """An operator or operand a node contributes, with an optional filter."""

    identifier: Union[str, NodeCallable, None]
    filter: NodeCallable | None = None

    def applies_to(self, node: Any) -> bool:
        return self.filter is None or bool(self.filter(node))

    def resolve(self, node: Any) -> Any:
        if callable(self.identifier):
            return self.identifier(node)
        return self.identifier


@dataclass(frozen=True)
class SyntaxDescriptor:
    """Per-node-type metadata consumed by the walker.

    Only ``new_scope``, ``children`` and ``assignable_name`` drive traversal;
    the remaining fields are carried through to ``process_node`` untouched.
    """

    new_scope: bool = False
    children: tuple[str, ...] = ()
    assignable_name: NodeCallable | None = None
    lloc: TraitValue = 0
    cyclomatic: TraitValue = 0
    operators: tuple[Trait, ...] = ()
    operands: tuple[Trait, ...] = ()
    dependencies: NodeCallable | None = None


class WalkerSettings(BaseModel):
    """Configuration selecting which syntax is recognised and how it is scored.

    Unknown keys are kept so observers can read their own options from the
    same settings object.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    edition: str = constants.EDITION_ES2015
    logicalor: bool = True
    switchcase: bool = True
    forin: bool = False
    trycatch: bool = False

    @field_validator("edition")
    @classmethod
    def _known_edition(cls, value: str) -> str:
        if value not in constants.SUPPORTED_EDITIONS:
            raise ValueError(
                f"Unsupported edition {value!r}; expected one of "
                f"{', '.join(constants.SUPPORTED_EDITIONS)}"
            )
        return value

"""Declarations, declarators and function forms."""

from __future__ import annotations

from ..nodes import get_field
from ..safe_name import safe_name
from ..syntax_types import SyntaxDescriptor, WalkerSettings
from ..traits import actualise


def _declarator_name(node) -> str:
    return safe_name(get_field(node, "id"))


def get(settings: WalkerSettings) -> dict[str, SyntaxDescriptor]:
    return {
        "FunctionDeclaration": actualise(
            1, 0, "function", None, ["params", "body"], None, True
        ),
        "FunctionExpression": actualise(
            0, 0, "function", None, ["params", "body"], None, True
        ),
        "VariableDeclarator": actualise(
            1,
            0,
            {
                "identifier": "=",
                "filter": lambda node: get_field(node, "init") is not None,
            },
            None,
            ["id", "init"],
            _declarator_name,
        ),
    }

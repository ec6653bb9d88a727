"""Descriptors for syntax introduced by ES2015."""

from __future__ import annotations

from ..nodes import get_field
from ..syntax_types import SyntaxDescriptor, WalkerSettings
from ..traits import actualise
from .expressions import key_name


def _test_branch(node) -> int:
    return 1 if get_field(node, "test") is not None else 0


def _cooked_text(node) -> str:
    return get_field(get_field(node, "value") or {}, "cooked") or ""


def get(settings: WalkerSettings) -> dict[str, SyntaxDescriptor]:
    return {
        "ArrowFunctionExpression": actualise(
            0, 0, "=>", None, ["params", "body"], None, True
        ),
        "ForOfStatement": actualise(
            2, _test_branch, "forof", None, ["left", "right", "body"]
        ),
        "ClassDeclaration": actualise(
            1, 0, "class", None, ["superClass", "body"]
        ),
        "ClassExpression": actualise(0, 0, "class", None, ["superClass", "body"]),
        "ClassBody": actualise(0, 0, None, None, ["body"]),
        "MethodDefinition": actualise(
            0,
            0,
            lambda node: "static" if get_field(node, "static") else None,
            None,
            ["value"],
            key_name,
        ),
        "TemplateLiteral": actualise(0, 0, None, None, ["quasis", "expressions"]),
        "TemplateElement": actualise(0, 0, None, _cooked_text),
        "TaggedTemplateExpression": actualise(0, 0, None, None, ["tag", "quasi"]),
        "SpreadElement": actualise(0, 0, "...", None, ["argument"]),
        "RestElement": actualise(0, 0, "...", None, ["argument"]),
        "YieldExpression": actualise(1, 0, "yield", None, ["argument"]),
        "AssignmentPattern": actualise(0, 0, "=", None, ["left", "right"]),
        "ArrayPattern": actualise(0, 0, "[]", None, ["elements"]),
        "ObjectPattern": actualise(0, 0, "{}", None, ["properties"]),
        "ImportDeclaration": actualise(0, 0, "import", None, ["specifiers", "source"]),
        "ExportNamedDeclaration": actualise(
            0, 0, "export", None, ["declaration", "specifiers", "source"]
        ),
        "ExportDefaultDeclaration": actualise(
            0, 0, "export default", None, ["declaration"]
        ),
        "ImportSpecifier": actualise(0, 0, None, None, ["imported", "local"]),
        "ImportDefaultSpecifier": actualise(0, 0, None, None, ["local"]),
        "ImportNamespaceSpecifier": actualise(0, 0, "*", None, ["local"]),
        "ExportSpecifier": actualise(0, 0, None, None, ["local", "exported"]),
        "Super": actualise(0, 0, None, "super"),
    }

"""Statement and clause descriptors."""

from __future__ import annotations

from ..nodes import get_field
from ..syntax_types import SyntaxDescriptor, WalkerSettings
from ..traits import actualise


def _has(field: str):
    return lambda node: get_field(node, field) is not None


def _test_branch(node) -> int:
    return 1 if get_field(node, "test") is not None else 0


def get(settings: WalkerSettings) -> dict[str, SyntaxDescriptor]:
    return {
        "BlockStatement": actualise(0, 0, None, None, ["body"]),
        "BreakStatement": actualise(1, 0, "break", None, ["label"]),
        "ContinueStatement": actualise(1, 0, "continue", None, ["label"]),
        "DebuggerStatement": actualise(1, 0, "debugger"),
        "DoWhileStatement": actualise(
            2, _test_branch, "dowhile", None, ["test", "body"]
        ),
        "ExpressionStatement": actualise(1, 0, None, None, ["expression"]),
        "ForInStatement": actualise(
            1,
            1 if settings.forin else 0,
            "forin",
            None,
            ["left", "right", "body"],
        ),
        "ForStatement": actualise(
            1, _test_branch, "for", None, ["init", "test", "update", "body"]
        ),
        "IfStatement": actualise(
            lambda node: 2 if get_field(node, "alternate") is not None else 1,
            1,
            [
                {"identifier": "if"},
                {"identifier": "else", "filter": _has("alternate")},
            ],
            None,
            ["test", "consequent", "alternate"],
        ),
        "ReturnStatement": actualise(1, 0, "return", None, ["argument"]),
        "SwitchCase": actualise(
            1,
            lambda node: 1 if settings.switchcase and get_field(node, "test") is not None else 0,
            lambda node: "case" if get_field(node, "test") is not None else "default",
            None,
            ["test", "consequent"],
        ),
        "SwitchStatement": actualise(
            1, 0, "switch", None, ["discriminant", "cases"]
        ),
        "ThrowStatement": actualise(1, 0, "throw", None, ["argument"]),
        "TryStatement": actualise(
            1,
            0,
            [
                {"identifier": "try"},
                {"identifier": "finally", "filter": _has("finalizer")},
            ],
            None,
            ["block", "handler", "finalizer"],
        ),
        "CatchClause": actualise(
            1, 1 if settings.trycatch else 0, "catch", None, ["param", "body"]
        ),
        "VariableDeclaration": actualise(
            0, 0, lambda node: get_field(node, "kind"), None, ["declarations"]
        ),
        "WhileStatement": actualise(1, _test_branch, "while", None, ["test", "body"]),
        "WithStatement": actualise(1, 0, "with", None, ["object", "body"]),
    }

"""Expression descriptors."""

from __future__ import annotations

from ..nodes import get_field, node_type
from ..safe_name import safe_name
from ..syntax_types import SyntaxDescriptor, WalkerSettings
from ..traits import actualise
from .. import constants


def _operator(node):
    return get_field(node, "operator")


def _callee_is_function(node) -> int:
    return 1 if node_type(get_field(node, "callee")) == "FunctionExpression" else 0


def _assignment_target_name(node) -> str:
    """Name an assignment target: ``foo`` or ``object.property``."""
    left = get_field(node, "left")
    if node_type(left) == "MemberExpression":
        target = get_field(left, "object")
        prop = get_field(left, "property")
        owner = "this" if node_type(target) == "ThisExpression" else safe_name(target)
        return f"{owner}.{safe_name(prop)}"
    return safe_name(left)


def key_name(node) -> str:
    key = get_field(node, "key")
    if node_type(key) == "Literal":
        return safe_name(None, str(get_field(key, "value", "")))
    return safe_name(key)


def _literal_operand(node):
    value = get_field(node, "value")
    if isinstance(value, str):
        return f'"{value}"'
    return value


def _update_operator(node) -> str:
    position = "prefix" if get_field(node, "prefix") else "postfix"
    return f"{get_field(node, 'operator')} ({position})"


def _logical_branch(settings: WalkerSettings):
    def cyclomatic(node) -> int:
        operator = get_field(node, "operator")
        is_and = operator == "&&"
        is_or = settings.logicalor and operator == "||"
        return 1 if is_and or is_or else 0

    return cyclomatic


def require_dependencies(node):
    """Report a CommonJS ``require('path')`` call, or ``None``."""
    callee = get_field(node, "callee")
    if node_type(callee) != "Identifier" or get_field(callee, "name") != "require":
        return None
    arguments = get_field(node, "arguments") or []
    if len(arguments) != 1:
        return None
    argument = arguments[0]
    path = get_field(argument, "value") if node_type(argument) == "Literal" else None
    loc = get_field(node, "loc")
    line = get_field(get_field(loc, "start"), "line") if loc is not None else None
    return {
        "line": line,
        "path": path if isinstance(path, str) else "* dynamic dependency *",
        "type": constants.DEPENDENCY_COMMONJS,
    }


def get(settings: WalkerSettings) -> dict[str, SyntaxDescriptor]:
    return {
        "ArrayExpression": actualise(0, 0, "[]", None, ["elements"]),
        "AssignmentExpression": actualise(
            0, 0, _operator, None, ["left", "right"], _assignment_target_name
        ),
        "BinaryExpression": actualise(0, 0, _operator, None, ["left", "right"]),
        "CallExpression": actualise(
            _callee_is_function,
            0,
            "()",
            None,
            ["arguments", "callee"],
            None,
            False,
            require_dependencies,
        ),
        "ConditionalExpression": actualise(
            0, 1, ":?", None, ["test", "consequent", "alternate"]
        ),
        "Identifier": actualise(0, 0, None, lambda node: get_field(node, "name")),
        "Literal": actualise(0, 0, None, _literal_operand),
        "LogicalExpression": actualise(
            0, _logical_branch(settings), _operator, None, ["left", "right"]
        ),
        "MemberExpression": actualise(
            0,
            0,
            lambda node: "[]" if get_field(node, "computed") else ".",
            None,
            ["object", "property"],
        ),
        "NewExpression": actualise(
            _callee_is_function, 0, "new", None, ["arguments", "callee"]
        ),
        "ObjectExpression": actualise(0, 0, "{}", None, ["properties"]),
        "Property": actualise(1, 0, ":", None, ["key", "value"], key_name),
        "SequenceExpression": actualise(0, 0, None, None, ["expressions"]),
        "ThisExpression": actualise(0, 0, None, "this"),
        "UnaryExpression": actualise(
            0, 0, lambda node: f"{get_field(node, 'operator')} (unary)", None, ["argument"]
        ),
        "UpdateExpression": actualise(0, 0, _update_operator, None, ["argument"]),
    }

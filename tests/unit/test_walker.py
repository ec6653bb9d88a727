"""Tests for walk() — traversal order, scope bracketing, name hints, contract checks."""

from __future__ import annotations

from types import SimpleNamespace

import pytest

from astwalker.callbacks import WalkerCallbacks
from astwalker.syntax_types import SyntaxDescriptor, WalkerSettings
from astwalker.walker import WalkerContractError, walk


class FakeCallbacks(WalkerCallbacks):
    """Records every notification as a tuple, in call order."""

    def __init__(self):
        self.calls: list[tuple] = []

    def process_node(self, node, syntax):
        self.calls.append(("process", node, syntax))

    def create_scope(self, name, loc, param_count):
        self.calls.append(("create", name, loc, param_count))

    def pop_scope(self):
        self.calls.append(("pop",))

    def processed(self) -> list:
        return [c[1] for c in self.calls if c[0] == "process"]

    def processed_types(self) -> list[str]:
        return [n["type"] for n in self.processed()]

    def kinds(self) -> list[str]:
        return [c[0] for c in self.calls]


def _walk(body, settings=None) -> FakeCallbacks:
    callbacks = FakeCallbacks()
    walk({"type": "Program", "body": body}, settings or {}, callbacks)
    return callbacks


def _ident(name: str) -> dict:
    return {"type": "Identifier", "name": name}


def _literal(value) -> dict:
    return {"type": "Literal", "value": value}


def _block(*body) -> dict:
    return {"type": "BlockStatement", "body": list(body)}


def _stmt(expression) -> dict:
    return {"type": "ExpressionStatement", "expression": expression}


LOC = {"start": {"line": 1, "column": 0}, "end": {"line": 1, "column": 17}}


class TestBasicTraversal:
    def test_expression_statement_with_identifier(self):
        identifier = _ident("a")
        statement = _stmt(identifier)
        callbacks = _walk([statement])
        assert callbacks.processed() == [statement, identifier]
        assert "create" not in callbacks.kinds()
        assert "pop" not in callbacks.kinds()

    def test_empty_body_produces_no_calls(self):
        assert _walk([]).calls == []

    def test_process_node_receives_descriptor(self):
        callbacks = _walk([_stmt(_ident("a"))])
        syntax = callbacks.calls[0][2]
        assert isinstance(syntax, SyntaxDescriptor)
        assert syntax.children == ("expression",)

    def test_every_reachable_node_processed_once(self):
        tree = [
            _stmt(
                {
                    "type": "BinaryExpression",
                    "operator": "+",
                    "left": _ident("a"),
                    "right": {
                        "type": "BinaryExpression",
                        "operator": "*",
                        "left": _literal(2),
                        "right": _ident("b"),
                    },
                }
            )
        ]
        callbacks = _walk(tree)
        assert len(callbacks.processed()) == 6

    def test_left_subtree_fully_before_right(self):
        left = {
            "type": "BinaryExpression",
            "operator": "-",
            "left": _ident("l1"),
            "right": _ident("l2"),
        }
        right = _ident("r")
        binary = {"type": "BinaryExpression", "operator": "+", "left": left, "right": right}
        callbacks = _walk([_stmt(binary)])
        names = [n.get("name") for n in callbacks.processed() if n["type"] == "Identifier"]
        assert names == ["l1", "l2", "r"]

    def test_children_visited_in_declared_order_not_dict_order(self):
        # IfStatement declares test, consequent, alternate
        node = {
            "type": "IfStatement",
            "alternate": _block(_stmt(_literal(False))),
            "consequent": _block(_stmt(_literal(True))),
            "test": _ident("x"),
        }
        callbacks = _walk([node])
        literals = [n["value"] for n in callbacks.processed() if n["type"] == "Literal"]
        assert callbacks.processed_types()[1] == "Identifier"
        assert literals == [True, False]

    def test_null_child_is_skipped(self):
        statement = {
            "type": "ForStatement",
            "init": None,
            "test": None,
            "update": None,
            "body": _stmt(_literal(True)),
        }
        callbacks = _walk([statement])
        assert callbacks.processed_types() == [
            "ForStatement",
            "ExpressionStatement",
            "Literal",
        ]

    def test_missing_child_field_is_skipped(self):
        callbacks = _walk([{"type": "ReturnStatement"}])
        assert callbacks.processed_types() == ["ReturnStatement"]

    def test_empty_child_sequence_yields_no_visits(self):
        callbacks = _walk([_block()])
        assert callbacks.processed_types() == ["BlockStatement"]

    def test_non_node_list_elements_are_ignored(self):
        array = {"type": "ArrayExpression", "elements": [None, _literal(1), "junk"]}
        callbacks = _walk([_stmt(array)])
        assert callbacks.processed_types() == [
            "ExpressionStatement",
            "ArrayExpression",
            "Literal",
        ]

    def test_attribute_style_nodes_are_walked(self):
        identifier = SimpleNamespace(type="Identifier", name="a")
        statement = SimpleNamespace(type="ExpressionStatement", expression=identifier)
        callbacks = FakeCallbacks()
        walk(SimpleNamespace(type="Program", body=[statement]), {}, callbacks)
        assert callbacks.processed() == [statement, identifier]


class TestUnrecognisedNodes:
    def test_unknown_top_level_node_not_processed(self):
        assert _walk([{"type": "EmptyStatement"}]).calls == []

    def test_unknown_node_subtree_is_not_descended(self):
        labeled = {
            "type": "LabeledStatement",
            "label": _ident("foo"),
            "body": _stmt(_ident("a")),
        }
        assert _walk([labeled]).calls == []

    def test_siblings_of_unknown_node_still_visited(self):
        callbacks = _walk([{"type": "EmptyStatement"}, _stmt(_ident("a"))])
        assert callbacks.processed_types() == ["ExpressionStatement", "Identifier"]

    def test_node_without_type_is_skipped(self):
        callbacks = _walk([{"expression": _ident("a")}])
        assert callbacks.calls == []

    def test_es2015_syntax_skipped_under_es5(self):
        arrow = {
            "type": "ArrowFunctionExpression",
            "params": [],
            "body": _ident("x"),
        }
        callbacks = _walk([_stmt(arrow)], {"edition": "es5"})
        assert callbacks.processed_types() == ["ExpressionStatement"]
        assert "create" not in callbacks.kinds()


class TestScopes:
    def _function_declaration(self, name="foo", params=None, body=None):
        return {
            "type": "FunctionDeclaration",
            "id": _ident(name) if name else None,
            "params": params or [],
            "body": body or _block(),
            "loc": LOC,
        }

    def test_function_declaration_sequence(self):
        declaration = self._function_declaration()
        callbacks = _walk([declaration])
        assert callbacks.calls[0][:2] == ("process", declaration)
        assert callbacks.calls[1] == ("create", "foo", LOC, 0)
        assert callbacks.calls[2][1] is declaration["body"]
        assert callbacks.calls[3] == ("pop",)
        assert len(callbacks.calls) == 4

    def test_param_count_reported(self):
        declaration = self._function_declaration(params=[_ident("a"), _ident("b")])
        callbacks = _walk([declaration])
        assert callbacks.calls[1] == ("create", "foo", LOC, 2)

    def test_params_visited_inside_scope(self):
        declaration = self._function_declaration(params=[_ident("a")])
        callbacks = _walk([declaration])
        assert callbacks.kinds() == ["process", "create", "process", "process", "pop"]
        assert callbacks.calls[2][1]["name"] == "a"

    def test_anonymous_function_without_hint(self):
        expression = {
            "type": "FunctionExpression",
            "id": None,
            "params": [],
            "body": _block(),
        }
        callbacks = _walk([_stmt(expression)])
        assert callbacks.calls[2] == ("create", "<anonymous>", None, 0)

    def test_nested_scopes_are_bracketed(self):
        inner = self._function_declaration(name="inner")
        outer = self._function_declaration(name="outer", body=_block(inner))
        callbacks = _walk([outer])
        events = [
            c[1] if c[0] == "create" else c[0]
            for c in callbacks.calls
            if c[0] in ("create", "pop")
        ]
        assert events == ["outer", "inner", "pop", "pop"]

    def test_scope_brackets_all_descendants(self):
        body = _block(_stmt(_ident("a")), _stmt(_ident("b")))
        declaration = self._function_declaration(body=body)
        callbacks = _walk([declaration, _stmt(_ident("after"))])
        kinds = callbacks.kinds()
        create_at = kinds.index("create")
        pop_at = kinds.index("pop")
        inside = callbacks.calls[create_at + 1 : pop_at]
        assert [c[1]["type"] for c in inside] == [
            "BlockStatement",
            "ExpressionStatement",
            "Identifier",
            "ExpressionStatement",
            "Identifier",
        ]
        assert callbacks.calls[pop_at + 1][1]["type"] == "ExpressionStatement"

    def test_create_and_pop_counts_match(self):
        tree = [
            self._function_declaration(
                name="a", body=_block(self._function_declaration(name="b"))
            ),
            self._function_declaration(name="c"),
        ]
        kinds = _walk(tree).kinds()
        assert kinds.count("create") == kinds.count("pop") == 3


class TestAssignedNames:
    def _declaration(self, declarator_id, init) -> dict:
        return {
            "type": "VariableDeclaration",
            "kind": "const",
            "declarations": [
                {"type": "VariableDeclarator", "id": declarator_id, "init": init}
            ],
        }

    def _anonymous_function(self) -> dict:
        return {"type": "FunctionExpression", "id": None, "params": [], "body": _block()}

    def test_declarator_names_anonymous_function(self):
        callbacks = _walk([self._declaration(_ident("f"), self._anonymous_function())])
        creates = [c for c in callbacks.calls if c[0] == "create"]
        assert creates == [("create", "f", None, 0)]

    def test_explicit_id_wins_over_hint(self):
        function = self._anonymous_function()
        function["id"] = _ident("g")
        callbacks = _walk([self._declaration(_ident("f"), function)])
        creates = [c for c in callbacks.calls if c[0] == "create"]
        assert creates[0][1] == "g"

    def test_hint_reaches_only_immediate_children(self):
        # const f = [function () {}]: the array receives the hint, its element does not
        array = {"type": "ArrayExpression", "elements": [self._anonymous_function()]}
        callbacks = _walk([self._declaration(_ident("f"), array)])
        creates = [c for c in callbacks.calls if c[0] == "create"]
        assert creates[0][1] == "<anonymous>"

    def test_assignment_to_member_names_function(self):
        assignment = {
            "type": "AssignmentExpression",
            "operator": "=",
            "left": {
                "type": "MemberExpression",
                "object": _ident("module"),
                "property": _ident("exports"),
                "computed": False,
            },
            "right": self._anonymous_function(),
        }
        callbacks = _walk([_stmt(assignment)])
        creates = [c for c in callbacks.calls if c[0] == "create"]
        assert creates[0][1] == "module.exports"

    def test_object_property_names_function(self):
        obj = {
            "type": "ObjectExpression",
            "properties": [
                {
                    "type": "Property",
                    "key": _ident("handler"),
                    "value": self._anonymous_function(),
                }
            ],
        }
        callbacks = _walk([_stmt(obj)])
        creates = [c for c in callbacks.calls if c[0] == "create"]
        assert creates[0][1] == "handler"


class TestIdempotence:
    def test_two_walks_produce_identical_sequences(self):
        tree = {
            "type": "Program",
            "body": [
                {
                    "type": "FunctionDeclaration",
                    "id": _ident("foo"),
                    "params": [_ident("x")],
                    "body": _block({"type": "ReturnStatement", "argument": _ident("x")}),
                }
            ],
        }
        first, second = FakeCallbacks(), FakeCallbacks()
        walk(tree, {}, first)
        walk(tree, {}, second)
        assert first.kinds() == second.kinds()
        assert first.processed() == second.processed()


class TestContract:
    @pytest.mark.parametrize("tree", [None, "program", 42, []])
    def test_tree_must_be_structured(self, tree):
        with pytest.raises(WalkerContractError):
            walk(tree, {}, FakeCallbacks())

    @pytest.mark.parametrize("body", [None, "x", {"type": "Identifier"}])
    def test_tree_body_must_be_sequence(self, body):
        with pytest.raises(WalkerContractError):
            walk({"type": "Program", "body": body}, {}, FakeCallbacks())

    @pytest.mark.parametrize("settings", [None, "es5", 3, []])
    def test_settings_must_be_structured(self, settings):
        with pytest.raises(WalkerContractError):
            walk({"body": []}, settings, FakeCallbacks())

    def test_unknown_edition_rejected(self):
        with pytest.raises(WalkerContractError):
            walk({"body": []}, {"edition": "es3"}, FakeCallbacks())

    def test_settings_model_accepted(self):
        callbacks = FakeCallbacks()
        walk({"body": [_stmt(_ident("a"))]}, WalkerSettings(), callbacks)
        assert len(callbacks.processed()) == 2

    def test_callbacks_must_not_be_none(self):
        with pytest.raises(WalkerContractError):
            walk({"body": []}, {}, None)

    @pytest.mark.parametrize("missing", ["process_node", "create_scope", "pop_scope"])
    def test_each_callback_required(self, missing):
        callbacks = {
            "process_node": lambda node, syntax: None,
            "create_scope": lambda name, loc, count: None,
            "pop_scope": lambda: None,
        }
        callbacks[missing] = "not callable"
        with pytest.raises(WalkerContractError, match=missing):
            walk({"body": []}, {}, SimpleNamespace(**callbacks))

    def test_contract_failure_happens_before_any_callback(self):
        processed = []
        callbacks = SimpleNamespace(
            process_node=lambda node, syntax: processed.append(node),
            create_scope=lambda name, loc, count: None,
            pop_scope=None,
        )
        with pytest.raises(WalkerContractError):
            walk({"body": [_stmt(_ident("a"))]}, {}, callbacks)
        assert processed == []

    def test_contract_error_is_a_type_error(self):
        assert issubclass(WalkerContractError, TypeError)

    def test_duck_typed_callbacks_accepted(self):
        seen = []
        callbacks = SimpleNamespace(
            process_node=lambda node, syntax: seen.append(node["type"]),
            create_scope=lambda name, loc, count: None,
            pop_scope=lambda: None,
        )
        walk({"body": [_stmt(_ident("a"))]}, {}, callbacks)
        assert seen == ["ExpressionStatement", "Identifier"]

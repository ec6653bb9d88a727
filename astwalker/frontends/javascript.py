"""JavaScriptFrontend — tree-sitter JavaScript CST → ESTree."""

from __future__ import annotations

import re
from typing import Any, Callable

from ._base import BaseFrontend, EstreeNode

_LOGICAL_OPERATORS: frozenset[str] = frozenset({"&&", "||", "??"})

_MODULE_STATEMENTS: frozenset[str] = frozenset({"import_statement", "export_statement"})


def _number_value(text: str) -> int | float | str:
    cleaned = text.replace("_", "")
    try:
        return int(cleaned, 0)
    except ValueError:
        pass
    try:
        return float(cleaned)
    except ValueError:
        return text


_ESCAPE = re.compile(
    r"\\(u\{[0-9a-fA-F]+\}|u[0-9a-fA-F]{4}|x[0-9a-fA-F]{2}|\r\n|[\s\S])"
)

_SINGLE_ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "b": "\b",
    "f": "\f",
    "v": "\v",
    "0": "\0",
}

_LINE_CONTINUATIONS: frozenset[str] = frozenset({"\n", "\r", "\r\n", "\u2028", "\u2029"})


def _decode_escape(match: re.Match) -> str:
    body = match.group(1)
    if body.startswith("u{"):
        code = int(body[2:-1], 16)
        return chr(code) if code <= 0x10FFFF else match.group(0)
    if len(body) > 1 and body[0] in "ux":
        return chr(int(body[1:], 16))
    if body in _LINE_CONTINUATIONS:
        return ""
    return _SINGLE_ESCAPES.get(body, body)


def _cook(raw: str) -> str:
    """Decode JavaScript escape sequences in string or template text."""
    return _ESCAPE.sub(_decode_escape, raw)



class JavaScriptFrontend(BaseFrontend):
    """Converts a JavaScript tree-sitter tree into ESTree dicts."""

    def __init__(self):
        super().__init__()
        self._DISPATCH: dict[str, Callable[[Any], EstreeNode]] = {
            # statements
            "expression_statement": self._expression_statement,
            "statement_block": self._block,
            "empty_statement": lambda n: self._make("EmptyStatement", n),
            "debugger_statement": lambda n: self._make("DebuggerStatement", n),
            "variable_declaration": self._var_declaration,
            "lexical_declaration": self._var_declaration,
            "variable_declarator": self._declarator,
            "function_declaration": self._function_declaration,
            "generator_function_declaration": self._function_declaration,
            "if_statement": self._if,
            "for_statement": self._for,
            "for_in_statement": self._for_in,
            "while_statement": self._while,
            "do_statement": self._do_while,
            "return_statement": lambda n: self._with_argument("ReturnStatement", n),
            "throw_statement": lambda n: self._with_argument("ThrowStatement", n),
            "break_statement": lambda n: self._jump("BreakStatement", n),
            "continue_statement": lambda n: self._jump("ContinueStatement", n),
            "labeled_statement": self._labeled,
            "try_statement": self._try,
            "switch_statement": self._switch,
            "with_statement": self._with,
            "class_declaration": lambda n: self._class("ClassDeclaration", n),
            "import_statement": self._import,
            "export_statement": self._export,
            # expressions
            "identifier": self._identifier,
            "property_identifier": self._identifier,
            "shorthand_property_identifier": self._identifier,
            "shorthand_property_identifier_pattern": self._identifier,
            "statement_identifier": self._identifier,
            "private_property_identifier": self._identifier,
            "undefined": self._identifier,
            "this": lambda n: self._make("ThisExpression", n),
            "super": lambda n: self._make("Super", n),
            "number": self._number,
            "string": self._string,
            "true": lambda n: self._literal(n, True),
            "false": lambda n: self._literal(n, False),
            "null": lambda n: self._literal(n, None),
            "regex": self._regex,
            "template_string": self._template,
            "parenthesized_expression": self._unwrap,
            "binary_expression": self._binary,
            "assignment_expression": self._assignment,
            "augmented_assignment_expression": self._assignment,
            "unary_expression": self._unary,
            "update_expression": self._update,
            "call_expression": self._call,
            "new_expression": self._new,
            "member_expression": self._member,
            "subscript_expression": self._subscript,
            "array": self._array,
            "object": self._object,
            "ternary_expression": self._conditional,
            "sequence_expression": self._sequence,
            "spread_element": lambda n: self._with_argument("SpreadElement", n),
            "yield_expression": self._yield,
            "await_expression": lambda n: self._with_argument("AwaitExpression", n),
            "function": self._function_expression,
            "function_expression": self._function_expression,
            "generator_function": self._function_expression,
            "arrow_function": self._arrow,
            "class": lambda n: self._class("ClassExpression", n),
            # patterns
            "assignment_pattern": self._assignment_pattern,
            "object_assignment_pattern": self._assignment_pattern,
            "rest_pattern": lambda n: self._with_argument("RestElement", n),
            "array_pattern": self._array_pattern,
            "object_pattern": self._object_pattern,
        }

    def _build_program(self, root) -> EstreeNode:
        program = super()._build_program(root)
        is_module = any(c.type in _MODULE_STATEMENTS for c in root.children)
        program["sourceType"] = "module" if is_module else "script"
        return program

    # ── statements ───────────────────────────────────────────────

    def _expression_statement(self, node) -> EstreeNode:
        return self._make(
            "ExpressionStatement", node, expression=self._convert(self._first_named(node))
        )

    def _block(self, node) -> EstreeNode:
        return self._make(
            "BlockStatement", node, body=self._convert_all(self._named_children(node))
        )

    def _var_declaration(self, node) -> EstreeNode:
        if node.type == "variable_declaration":
            kind = "var"
        else:
            kind_node = node.child_by_field_name("kind")
            if kind_node is None:
                kind_node = node.children[0]
            kind = self._node_text(kind_node)
        declarations = [
            self._declarator(c) for c in node.children if c.type == "variable_declarator"
        ]
        return self._make("VariableDeclaration", node, kind=kind, declarations=declarations)

    def _declarator(self, node) -> EstreeNode:
        return self._make(
            "VariableDeclarator",
            node,
            id=self._convert_field(node, "name"),
            init=self._convert_field(node, "value"),
        )

    def _if(self, node) -> EstreeNode:
        alternative = node.child_by_field_name("alternative")
        if alternative is not None and alternative.type == "else_clause":
            alternative = self._first_named(alternative)
        return self._make(
            "IfStatement",
            node,
            test=self._convert_field(node, "condition"),
            consequent=self._convert_field(node, "consequence"),
            alternate=self._convert(alternative),
        )

    def _for_clause(self, node) -> EstreeNode | None:
        """Unwrap a for-header clause, which older grammars wrap in statements."""
        if node is None or node.type == "empty_statement":
            return None
        if node.type == "expression_statement":
            return self._convert(self._first_named(node))
        return self._convert(node)

    def _for(self, node) -> EstreeNode:
        return self._make(
            "ForStatement",
            node,
            init=self._for_clause(node.child_by_field_name("initializer")),
            test=self._for_clause(node.child_by_field_name("condition")),
            update=self._for_clause(node.child_by_field_name("increment")),
            body=self._convert_field(node, "body"),
        )

    def _for_in(self, node) -> EstreeNode:
        operator_node = node.child_by_field_name("operator")
        if operator_node is not None:
            is_for_of = self._node_text(operator_node) == "of"
        else:
            is_for_of = self._has_token(node, "of")

        left_node = node.child_by_field_name("left")
        kind_node = node.child_by_field_name("kind")
        if kind_node is not None:
            declarator = self._make(
                "VariableDeclarator", left_node, id=self._pattern(left_node), init=None
            )
            left = self._make(
                "VariableDeclaration",
                node,
                kind=self._node_text(kind_node),
                declarations=[declarator],
            )
        else:
            left = self._pattern(left_node)

        return self._make(
            "ForOfStatement" if is_for_of else "ForInStatement",
            node,
            left=left,
            right=self._convert_field(node, "right"),
            body=self._convert_field(node, "body"),
        )

    def _while(self, node) -> EstreeNode:
        return self._make(
            "WhileStatement",
            node,
            test=self._convert_field(node, "condition"),
            body=self._convert_field(node, "body"),
        )

    def _do_while(self, node) -> EstreeNode:
        return self._make(
            "DoWhileStatement",
            node,
            body=self._convert_field(node, "body"),
            test=self._convert_field(node, "condition"),
        )

    def _with_argument(self, estree_type: str, node) -> EstreeNode:
        return self._make(estree_type, node, argument=self._convert(self._first_named(node)))

    def _jump(self, estree_type: str, node) -> EstreeNode:
        return self._make(estree_type, node, label=self._convert_field(node, "label"))

    def _labeled(self, node) -> EstreeNode:
        return self._make(
            "LabeledStatement",
            node,
            label=self._convert_field(node, "label"),
            body=self._convert_field(node, "body"),
        )

    def _try(self, node) -> EstreeNode:
        handler = node.child_by_field_name("handler")
        finalizer = node.child_by_field_name("finalizer")
        catch_clause = None
        if handler is not None:
            param = handler.child_by_field_name("parameter")
            catch_clause = self._make(
                "CatchClause",
                handler,
                param=self._pattern(param) if param is not None else None,
                body=self._convert_field(handler, "body"),
            )
        return self._make(
            "TryStatement",
            node,
            block=self._convert_field(node, "body"),
            handler=catch_clause,
            finalizer=(
                self._convert_field(finalizer, "body") if finalizer is not None else None
            ),
        )

    def _switch(self, node) -> EstreeNode:
        body = node.child_by_field_name("body")
        cases = []
        if body is not None:
            for case_node in body.children:
                if case_node.type not in ("switch_case", "switch_default"):
                    continue
                cases.append(
                    self._make(
                        "SwitchCase",
                        case_node,
                        test=self._convert_field(case_node, "value"),
                        consequent=self._convert_all(
                            case_node.children_by_field_name("body")
                        ),
                    )
                )
        return self._make(
            "SwitchStatement",
            node,
            discriminant=self._convert_field(node, "value"),
            cases=cases,
        )

    def _with(self, node) -> EstreeNode:
        return self._make(
            "WithStatement",
            node,
            object=self._convert_field(node, "object"),
            body=self._convert_field(node, "body"),
        )

    # ── functions & classes ──────────────────────────────────────

    def _params(self, node) -> list[EstreeNode]:
        if node is None:
            return []
        return [self._pattern(c) for c in self._named_children(node)]

    def _function_fields(self, node) -> dict[str, Any]:
        return {
            "id": self._convert_field(node, "name"),
            "params": self._params(node.child_by_field_name("parameters")),
            "body": self._convert_field(node, "body"),
            "generator": node.type.startswith("generator") or self._has_token(node, "*"),
            "async": self._has_token(node, "async"),
            "expression": False,
        }

    def _function_declaration(self, node) -> EstreeNode:
        return self._make("FunctionDeclaration", node, **self._function_fields(node))

    def _function_expression(self, node) -> EstreeNode:
        return self._make("FunctionExpression", node, **self._function_fields(node))

    def _arrow(self, node) -> EstreeNode:
        single = node.child_by_field_name("parameter")
        if single is not None:
            params = [self._pattern(single)]
        else:
            params = self._params(node.child_by_field_name("parameters"))
        body = node.child_by_field_name("body")
        return self._make(
            "ArrowFunctionExpression",
            node,
            id=None,
            params=params,
            body=self._convert(body),
            generator=False,
            **{"async": self._has_token(node, "async")},
            expression=body is not None and body.type != "statement_block",
        )

    def _class(self, estree_type: str, node) -> EstreeNode:
        heritage = next((c for c in node.children if c.type == "class_heritage"), None)
        body = node.child_by_field_name("body")
        members = []
        if body is not None:
            for member in self._named_children(body):
                if member.type == "method_definition":
                    members.append(self._method(member, "MethodDefinition"))
                else:
                    members.append(self._convert(member))
        super_class = self._first_named(heritage) if heritage is not None else None
        return self._make(
            estree_type,
            node,
            id=self._convert_field(node, "name"),
            superClass=self._convert(super_class),
            body=self._make(
                "ClassBody", body if body is not None else node, body=members
            ),
        )

    def _method(self, node, estree_type: str) -> EstreeNode:
        name_node = node.child_by_field_name("name")
        key = self._property_key(name_node)
        if self._has_token(node, "get"):
            kind = "get"
        elif self._has_token(node, "set"):
            kind = "set"
        elif estree_type == "MethodDefinition" and self._node_text(name_node) == "constructor":
            kind = "constructor"
        else:
            kind = "method" if estree_type == "MethodDefinition" else "init"
        value = self._make(
            "FunctionExpression",
            node,
            id=None,
            params=self._params(node.child_by_field_name("parameters")),
            body=self._convert_field(node, "body"),
            generator=self._has_token(node, "*"),
            **{"async": self._has_token(node, "async")},
            expression=False,
        )
        fields: dict[str, Any] = {
            "key": key,
            "value": value,
            "kind": kind,
            "computed": name_node is not None and name_node.type == "computed_property_name",
        }
        if estree_type == "MethodDefinition":
            fields["static"] = self._has_token(node, "static")
        else:
            fields["method"] = kind == "init"
            fields["shorthand"] = False
        return self._make(estree_type, node, **fields)

    # ── modules ──────────────────────────────────────────────────

    def _specifier(self, estree_type: str, node, remote_field: str, local_key: str):
        name = self._convert_field(node, "name")
        alias = self._convert_field(node, "alias")
        return self._make(
            estree_type, node, **{remote_field: name, local_key: alias or name}
        )

    def _import(self, node) -> EstreeNode:
        specifiers: list[EstreeNode] = []
        clause = next((c for c in node.children if c.type == "import_clause"), None)
        if clause is not None:
            for part in self._named_children(clause):
                if part.type == "identifier":
                    specifiers.append(
                        self._make("ImportDefaultSpecifier", part, local=self._identifier(part))
                    )
                elif part.type == "namespace_import":
                    specifiers.append(
                        self._make(
                            "ImportNamespaceSpecifier",
                            part,
                            local=self._convert(self._first_named(part)),
                        )
                    )
                elif part.type == "named_imports":
                    specifiers.extend(
                        self._specifier("ImportSpecifier", s, "imported", "local")
                        for s in self._named_children(part)
                        if s.type == "import_specifier"
                    )
        return self._make(
            "ImportDeclaration",
            node,
            specifiers=specifiers,
            source=self._convert_field(node, "source"),
        )

    def _export(self, node) -> EstreeNode:
        if self._has_token(node, "default"):
            target = node.child_by_field_name("declaration") or node.child_by_field_name(
                "value"
            )
            return self._make(
                "ExportDefaultDeclaration", node, declaration=self._convert(target)
            )
        clause = next((c for c in node.children if c.type == "export_clause"), None)
        specifiers = []
        if clause is not None:
            specifiers = [
                self._specifier("ExportSpecifier", s, "local", "exported")
                for s in self._named_children(clause)
                if s.type == "export_specifier"
            ]
        return self._make(
            "ExportNamedDeclaration",
            node,
            declaration=self._convert_field(node, "declaration"),
            specifiers=specifiers,
            source=self._convert_field(node, "source"),
        )

    # ── patterns ─────────────────────────────────────────────────

    def _pattern(self, node) -> EstreeNode | None:
        if node is not None and node.type == "shorthand_property_identifier_pattern":
            return self._identifier(node)
        return self._convert(node)

    def _assignment_pattern(self, node) -> EstreeNode:
        return self._make(
            "AssignmentPattern",
            node,
            left=self._pattern(node.child_by_field_name("left")),
            right=self._convert_field(node, "right"),
        )

    def _array_pattern(self, node) -> EstreeNode:
        return self._make(
            "ArrayPattern",
            node,
            elements=[self._pattern(c) for c in self._named_children(node)],
        )

    def _object_pattern(self, node) -> EstreeNode:
        properties = []
        for child in self._named_children(node):
            if child.type == "pair_pattern":
                properties.append(
                    self._make(
                        "Property",
                        child,
                        key=self._property_key(child.child_by_field_name("key")),
                        value=self._pattern(child.child_by_field_name("value")),
                        kind="init",
                        shorthand=False,
                    )
                )
            elif child.type == "rest_pattern":
                properties.append(self._with_argument("RestElement", child))
            else:
                value = self._pattern(child)
                key = value["left"] if value["type"] == "AssignmentPattern" else value
                properties.append(
                    self._make(
                        "Property", child, key=key, value=value, kind="init", shorthand=True
                    )
                )
        return self._make("ObjectPattern", node, properties=properties)

    # ── expressions ──────────────────────────────────────────────

    def _identifier(self, node) -> EstreeNode:
        return self._make("Identifier", node, name=self._node_text(node))

    def _literal(self, node, value: Any) -> EstreeNode:
        return self._make("Literal", node, value=value, raw=self._node_text(node))

    def _number(self, node) -> EstreeNode:
        return self._literal(node, _number_value(self._node_text(node)))

    def _string(self, node) -> EstreeNode:
        return self._literal(node, _cook(self._node_text(node)[1:-1]))

    def _regex(self, node) -> EstreeNode:
        pattern = node.child_by_field_name("pattern")
        flags = node.child_by_field_name("flags")
        literal = self._literal(node, None)
        literal["regex"] = {
            "pattern": self._node_text(pattern) if pattern is not None else "",
            "flags": self._node_text(flags) if flags is not None else "",
        }
        return literal

    def _template_element(self, start: int, end: int, tail: bool) -> EstreeNode:
        raw = self._source[start:end].decode("utf-8")
        return self._make_span(
            "TemplateElement",
            start,
            end,
            value={"raw": raw, "cooked": _cook(raw)},
            tail=tail,
        )

    def _template(self, node) -> EstreeNode:
        # Quasis are the gaps around each substitution, so there is always
        # one more quasi than expression, possibly empty.
        quasis = []
        expressions = []
        start = node.start_byte + 1
        for child in self._named_children(node):
            if child.type != "template_substitution":
                continue
            quasis.append(self._template_element(start, child.start_byte, tail=False))
            expressions.append(self._convert(self._first_named(child)))
            start = child.end_byte
        quasis.append(self._template_element(start, node.end_byte - 1, tail=True))
        return self._make("TemplateLiteral", node, quasis=quasis, expressions=expressions)

    def _unwrap(self, node) -> EstreeNode | None:
        return self._convert(self._first_named(node))

    def _binary(self, node) -> EstreeNode:
        operator = self._node_text(node.child_by_field_name("operator"))
        return self._make(
            "LogicalExpression" if operator in _LOGICAL_OPERATORS else "BinaryExpression",
            node,
            operator=operator,
            left=self._convert_field(node, "left"),
            right=self._convert_field(node, "right"),
        )

    def _assignment(self, node) -> EstreeNode:
        operator_node = node.child_by_field_name("operator")
        return self._make(
            "AssignmentExpression",
            node,
            operator=self._node_text(operator_node) if operator_node is not None else "=",
            left=self._pattern(node.child_by_field_name("left")),
            right=self._convert_field(node, "right"),
        )

    def _unary(self, node) -> EstreeNode:
        return self._make(
            "UnaryExpression",
            node,
            operator=self._node_text(node.child_by_field_name("operator")),
            prefix=True,
            argument=self._convert_field(node, "argument"),
        )

    def _update(self, node) -> EstreeNode:
        return self._make(
            "UpdateExpression",
            node,
            operator=self._node_text(node.child_by_field_name("operator")),
            prefix=node.children[0].type in ("++", "--"),
            argument=self._convert_field(node, "argument"),
        )

    def _arguments(self, node) -> list[EstreeNode]:
        if node is None:
            return []
        return self._convert_all(self._named_children(node))

    def _call(self, node) -> EstreeNode:
        args = node.child_by_field_name("arguments")
        if args is not None and args.type == "template_string":
            return self._make(
                "TaggedTemplateExpression",
                node,
                tag=self._convert_field(node, "function"),
                quasi=self._template(args),
            )
        return self._make(
            "CallExpression",
            node,
            callee=self._convert_field(node, "function"),
            arguments=self._arguments(args),
        )

    def _new(self, node) -> EstreeNode:
        return self._make(
            "NewExpression",
            node,
            callee=self._convert_field(node, "constructor"),
            arguments=self._arguments(node.child_by_field_name("arguments")),
        )

    def _member(self, node) -> EstreeNode:
        return self._make(
            "MemberExpression",
            node,
            object=self._convert_field(node, "object"),
            property=self._convert_field(node, "property"),
            computed=False,
        )

    def _subscript(self, node) -> EstreeNode:
        return self._make(
            "MemberExpression",
            node,
            object=self._convert_field(node, "object"),
            property=self._convert_field(node, "index"),
            computed=True,
        )

    def _array(self, node) -> EstreeNode:
        return self._make(
            "ArrayExpression", node, elements=self._convert_all(self._named_children(node))
        )

    def _property_key(self, node) -> EstreeNode | None:
        if node is not None and node.type == "computed_property_name":
            return self._convert(self._first_named(node))
        return self._convert(node)

    def _object(self, node) -> EstreeNode:
        properties = []
        for child in self._named_children(node):
            if child.type == "pair":
                key_node = child.child_by_field_name("key")
                properties.append(
                    self._make(
                        "Property",
                        child,
                        key=self._property_key(key_node),
                        value=self._convert_field(child, "value"),
                        kind="init",
                        method=False,
                        shorthand=False,
                        computed=key_node is not None
                        and key_node.type == "computed_property_name",
                    )
                )
            elif child.type == "shorthand_property_identifier":
                ident = self._identifier(child)
                properties.append(
                    self._make(
                        "Property",
                        child,
                        key=ident,
                        value=self._identifier(child),
                        kind="init",
                        method=False,
                        shorthand=True,
                        computed=False,
                    )
                )
            elif child.type == "method_definition":
                properties.append(self._method(child, "Property"))
            else:
                properties.append(self._convert(child))
        return self._make("ObjectExpression", node, properties=properties)

    def _conditional(self, node) -> EstreeNode:
        return self._make(
            "ConditionalExpression",
            node,
            test=self._convert_field(node, "condition"),
            consequent=self._convert_field(node, "consequence"),
            alternate=self._convert_field(node, "alternative"),
        )

    def _flatten_sequence(self, node) -> list[EstreeNode]:
        expressions: list[EstreeNode] = []
        for child in self._named_children(node):
            if child.type == "sequence_expression":
                expressions.extend(self._flatten_sequence(child))
            else:
                expressions.append(self._convert(child))
        return expressions

    def _sequence(self, node) -> EstreeNode:
        return self._make(
            "SequenceExpression", node, expressions=self._flatten_sequence(node)
        )

    def _yield(self, node) -> EstreeNode:
        return self._make(
            "YieldExpression",
            node,
            argument=self._convert(self._first_named(node)),
            delegate=self._has_token(node, "*"),
        )

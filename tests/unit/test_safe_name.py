"""Tests for safe_name — scope display names."""

from types import SimpleNamespace

from astwalker.constants import ANONYMOUS_NAME
from astwalker.safe_name import safe_name


class TestSafeName:
    def test_identifier_name_wins_over_hint(self):
        assert safe_name({"name": "x"}, "y") == "x"

    def test_hint_used_without_identifier(self):
        assert safe_name(None, "y") == "y"

    def test_anonymous_without_identifier_or_hint(self):
        assert safe_name(None) == ANONYMOUS_NAME
        assert safe_name(None, None) == ANONYMOUS_NAME

    def test_placeholder_value(self):
        assert ANONYMOUS_NAME == "<anonymous>"

    def test_empty_identifier_name_falls_back_to_hint(self):
        assert safe_name({"type": "Identifier", "name": ""}, "y") == "y"

    def test_identifier_without_name_falls_back(self):
        assert safe_name({"type": "ObjectPattern", "properties": []}, "") == ANONYMOUS_NAME

    def test_empty_hint_is_anonymous(self):
        assert safe_name(None, "") == ANONYMOUS_NAME

    def test_non_string_inputs_never_raise(self):
        assert safe_name({"name": 42}, 7) == ANONYMOUS_NAME
        assert safe_name("foo", ["bar"]) == ANONYMOUS_NAME

    def test_attribute_style_identifier(self):
        assert safe_name(SimpleNamespace(type="Identifier", name="foo")) == "foo"

    def test_untyped_object_with_name(self):
        assert safe_name(SimpleNamespace(name="x"), "y") == "x"

    def test_scalar_identifier_ignored(self):
        assert safe_name(3, "y") == "y"

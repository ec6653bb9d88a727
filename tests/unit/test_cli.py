"""Tests for the astwalker command-line entry point."""

import json

from astwalker.cli import main


class TestCli:
    def test_demo_without_file(self, capsys):
        assert main([]) == 0
        out = capsys.readouterr().out
        assert "No file provided" in out
        assert "scope outer (2 params) {" in out
        assert "scope inner (0 params) {" in out
        assert "scope area (1 params) {" in out

    def test_walks_file(self, tmp_path, capsys):
        source = tmp_path / "sample.js"
        source.write_text("function greet(name) { return name; }\n")
        assert main([str(source)]) == 0
        out = capsys.readouterr().out
        assert "FunctionDeclaration" in out
        assert "scope greet (1 params) {" in out

    def test_json_output(self, tmp_path, capsys):
        source = tmp_path / "sample.js"
        source.write_text("a;\n")
        assert main([str(source), "--json"]) == 0
        events = json.loads(capsys.readouterr().out)
        assert [e["node_type"] for e in events] == ["ExpressionStatement", "Identifier"]

    def test_es5_edition(self, tmp_path, capsys):
        source = tmp_path / "sample.js"
        source.write_text("const f = () => 1;\n")
        assert main([str(source), "--edition", "es5"]) == 0
        assert "scope" not in capsys.readouterr().out

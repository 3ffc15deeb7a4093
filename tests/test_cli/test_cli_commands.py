"""Tests for the stylecascade CLI commands."""
from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from stylecascade import __version__
from stylecascade.cli.main import cli


TREE = {
    "base": {"typography": {"color": "red"}},
    "pseudoStates": {"hover": {"typography": {"color": "blue"}}},
    "breakpoints": {"mobile": {"layout": {"display": "none"}}},
}


@pytest.fixture
def tree_file(tmp_path):
    path = tmp_path / "hero.json"
    path.write_text(json.dumps(TREE), encoding="utf-8")
    return path


@pytest.fixture
def element_file(tmp_path):
    path = tmp_path / "element.json"
    document = {"styleTree": TREE, "metadata": {"elementId": "el-1", "customCSS": "%root% a { color: red }"}}
    path.write_text(json.dumps(document), encoding="utf-8")
    return path


def _invoke(*args):
    return CliRunner().invoke(cli, [str(a) for a in args])


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_help_lists_commands(self) -> None:
        result = _invoke("--help")
        assert result.exit_code == 0
        for name in ("compile", "page", "resolve", "source", "set", "serve"):
            assert name in result.output

    def test_version(self) -> None:
        result = _invoke("--version")
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_log_level_option(self, tree_file) -> None:
        result = _invoke("--log-level", "debug", "compile", tree_file)
        assert result.exit_code == 0

    def test_serve_help_shows_options(self) -> None:
        result = _invoke("serve", "--help")
        assert result.exit_code == 0
        assert "--host" in result.output
        assert "--port" in result.output
        assert "--debug" in result.output


# ---------------------------------------------------------------------------
# compile / page
# ---------------------------------------------------------------------------


class TestCompileCommand:
    def test_bare_tree_uses_file_name_id(self, tree_file) -> None:
        result = _invoke("compile", tree_file)
        assert result.exit_code == 0
        assert result.output.startswith("#pp-hero {\n  color: red;\n}")
        assert "#pp-hero:hover" in result.output
        assert "@media (max-width: 768px)" in result.output

    def test_element_document(self, element_file) -> None:
        result = _invoke("compile", element_file)
        assert result.exit_code == 0
        assert result.output.rstrip().endswith("#el-1 a { color: red }")

    def test_element_id_override(self, element_file) -> None:
        result = _invoke("compile", element_file, "--element-id", "other")
        assert "#other {" in result.output
        assert "#el-1" not in result.output

    def test_custom_css_file(self, tree_file, tmp_path) -> None:
        css_file = tmp_path / "custom.css"
        css_file.write_text("%root%::after { content: '' }", encoding="utf-8")
        result = _invoke("compile", tree_file, "--custom-css", css_file)
        assert result.output.rstrip().endswith("#pp-hero::after { content: '' }")

    def test_editor_output(self, element_file) -> None:
        result = _invoke("compile", element_file, "--editor")
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["inlineStyle"] == {"color": "red"}
        assert len(data["ruleBlocks"]) == 3

    def test_invalid_tree_exits_1(self, tmp_path) -> None:
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"breakpoints": {"desktop": {}}}), encoding="utf-8")
        result = _invoke("compile", path)
        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_malformed_json_exits_1(self, tmp_path) -> None:
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        result = _invoke("compile", path)
        assert result.exit_code == 1
        assert "invalid JSON" in result.output

    def test_missing_file(self) -> None:
        result = _invoke("compile", "does-not-exist.json")
        assert result.exit_code == 2


class TestPageCommand:
    def test_page(self, tmp_path) -> None:
        nodes = {
            "ROOT": {
                "type": {"resolvedName": "Container"},
                "props": {"advancedStyling": {"layout": {"display": "grid"}}},
                "nodes": ["t"],
            },
            "t": {"type": {"resolvedName": "Text"}, "props": {"fontSize": 14}},
        }
        path = tmp_path / "page.json"
        path.write_text(json.dumps(nodes), encoding="utf-8")
        result = _invoke("page", path)
        assert result.exit_code == 0
        assert result.output == "#pp-ROOT {\n  display: grid;\n}\n\n#pp-t {\n  font-size: 14px;\n}\n"


# ---------------------------------------------------------------------------
# resolve / source
# ---------------------------------------------------------------------------


class TestResolveCommand:
    def test_resolve_json(self, tree_file) -> None:
        result = _invoke("resolve", tree_file, "--breakpoint", "mobile")
        assert result.exit_code == 0
        assert json.loads(result.output) == {
            "typography": {"color": "red"},
            "layout": {"display": "none"},
        }

    def test_resolve_css(self, tree_file) -> None:
        result = _invoke("resolve", tree_file, "-s", "hover", "--css")
        assert result.output == "color: blue;\n"

    def test_unknown_state(self, tree_file) -> None:
        result = _invoke("resolve", tree_file, "--state", "pressed")
        assert result.exit_code == 2


class TestSourceCommand:
    def test_source(self, tree_file) -> None:
        result = _invoke("source", tree_file, "layout.display")
        assert result.exit_code == 0
        assert json.loads(result.output) == {"source": "default", "isOverriddenElsewhere": True}


# ---------------------------------------------------------------------------
# set
# ---------------------------------------------------------------------------


class TestSetCommand:
    def test_set_prints_tree(self, tree_file) -> None:
        result = _invoke("set", tree_file, "filter", '{"blur": 4}', "-b", "tablet", "-s", "hover")
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["breakpoints"]["tablet"] == {"pseudoStates": {"hover": {"filter": {"blur": 4}}}}
        assert data["base"] == TREE["base"]

    def test_set_keeps_element_document_shape(self, element_file, tmp_path) -> None:
        out = tmp_path / "out.json"
        result = _invoke("set", element_file, "typography", '{"color": "black"}', "-o", out)
        assert result.exit_code == 0
        assert "desktop/default" in result.output
        document = json.loads(out.read_text(encoding="utf-8"))
        assert document["metadata"]["elementId"] == "el-1"
        assert document["styleTree"]["base"] == {"typography": {"color": "black"}}

    def test_reset(self, tree_file) -> None:
        result = _invoke("set", tree_file, "layout", "--reset", "-b", "mobile")
        assert result.exit_code == 0
        assert json.loads(result.output)["breakpoints"] == {}

    def test_reset_whole_layer(self, tree_file) -> None:
        result = _invoke("set", tree_file, "--reset", "-s", "hover")
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["pseudoStates"] == {}
        assert data["base"] == TREE["base"]

    def test_value_and_reset_are_exclusive(self, tree_file) -> None:
        result = _invoke("set", tree_file, "layout", "{}", "--reset")
        assert result.exit_code == 2
        result = _invoke("set", tree_file, "layout")
        assert result.exit_code == 2

    def test_invalid_value_json(self, tree_file) -> None:
        result = _invoke("set", tree_file, "layout", "{oops")
        assert result.exit_code == 2

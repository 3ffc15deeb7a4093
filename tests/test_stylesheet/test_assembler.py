"""Tests for the rule assembler."""

from stylecascade.model.enums import Breakpoint
from stylecascade.model.tree import StyleTree
from stylecascade.stylesheet import assemble_rules, build_rule, render_element_css, scope_custom_css


def _tree(**wire):
    return StyleTree.from_dict(wire)


# ---------------------------------------------------------------------------
# build_rule
# ---------------------------------------------------------------------------


class TestBuildRule:
    def test_plain_rule(self):
        assert build_rule("#el-1", {"color": "red", "gap": "4px"}) == "#el-1 {\n  color: red;\n  gap: 4px;\n}"

    def test_media_rule(self):
        assert build_rule("#el-1:hover", {"color": "red"}, Breakpoint.MOBILE) == (
            "@media (max-width: 768px) {\n  #el-1:hover {\n  color: red;\n  }\n}"
        )

    def test_empty_properties(self):
        assert build_rule("#el-1", {}) is None
        assert build_rule("#el-1", {}, Breakpoint.TABLET) is None


# ---------------------------------------------------------------------------
# assemble_rules
# ---------------------------------------------------------------------------


class TestAssembleRules:
    def test_empty_tree(self):
        assert assemble_rules(StyleTree(), "el-1") == []
        assert render_element_css(StyleTree(), "el-1") == ""

    def test_breakpoint_order(self):
        tree = _tree(
            base={"typography": {"color": "red"}},
            breakpoints={
                "mobile": {"typography": {"color": "blue"}},
                "tablet": {"typography": {"color": "green"}},
            },
        )
        css = render_element_css(tree, "el-1")
        assert css == (
            "#el-1 {\n  color: red;\n}\n\n"
            "@media (max-width: 992px) {\n  #el-1 {\n  color: green;\n  }\n}\n\n"
            "@media (max-width: 768px) {\n  #el-1 {\n  color: blue;\n  }\n}"
        )

    def test_full_source_order(self):
        tree = _tree(
            base={"layout": {"display": "block"}},
            pseudoStates={
                "before": {"layout": {"display": "inline"}},
                "hover": {"filter": {"blur": 1}},
            },
            breakpoints={
                "mobilePortrait": {"layout": {"display": "none"}},
                "tablet": {
                    "layout": {"display": "flex"},
                    "pseudoStates": {"hover": {"filter": {"blur": 2}}},
                },
            },
        )
        rules = assemble_rules(tree, "hero", "%root% > p { margin: 0; }")
        heads = [rule.split("{")[0].strip() for rule in rules]
        assert heads == [
            "#hero",
            "#hero:hover",
            "#hero::before",
            "@media (max-width: 992px)",
            "@media (max-width: 992px)",
            "@media (max-width: 479px)",
            "#hero > p",
        ]
        assert "#hero:hover {" in rules[4]

    def test_empty_layers_emit_nothing(self):
        tree = _tree(
            base={"filter": {"blur": 0}},
            pseudoStates={"hover": {"transition": {"enabled": False}}},
            breakpoints={"tablet": {"layout": {"overflow": "visible"}}},
        )
        assert assemble_rules(tree, "el-1") == []

    def test_exclude_base(self):
        tree = _tree(base={"typography": {"color": "red"}}, pseudoStates={"hover": {"typography": {"color": "blue"}}})
        assert assemble_rules(tree, "el-1", include_base=False) == ["#el-1:hover {\n  color: blue;\n}"]

    def test_custom_css_appended_last(self):
        tree = _tree(base={"typography": {"color": "red"}})
        rules = assemble_rules(tree, "el-1", "%root%:hover{opacity:.5}")
        assert rules[-1] == "#el-1:hover{opacity:.5}"

    def test_custom_css_only(self):
        assert render_element_css(StyleTree(), "el-1", "%root% { color: red }") == "#el-1 { color: red }"


class TestScopeCustomCss:
    def test_substitution(self):
        assert scope_custom_css("%root%:hover{opacity:.5}", "el-1") == "#el-1:hover{opacity:.5}"

    def test_every_occurrence(self):
        assert scope_custom_css("%root% a, %root% b {}", "x") == "#x a, #x b {}"

    def test_not_recursive(self):
        assert scope_custom_css("%root% {}", "%root%") == "#%root% {}"

    def test_text_untouched_otherwise(self):
        css = "@media print { .a { color: red } }  /* %ROOT% */"
        assert scope_custom_css(css, "el-1") == css

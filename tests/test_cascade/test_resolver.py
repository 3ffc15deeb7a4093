"""Tests for the cascade resolver."""

from stylecascade.cascade import resolve_styling
from stylecascade.model.enums import Breakpoint, PseudoClass
from stylecascade.model.tree import StyleTree
from stylecascade.model.view import View


def _color(tree, breakpoint, state="default"):
    styling = resolve_styling(tree, View.parse(breakpoint, state))
    return (styling.get("typography") or {}).get("color")


class TestPrecedence:
    def test_tablet_default_uses_tablet(self, precedence_tree):
        assert _color(precedence_tree, "tablet") == "green"

    def test_tablet_hover_ignores_desktop_hover(self, precedence_tree):
        assert _color(precedence_tree, "tablet", "hover") == "green"

    def test_desktop_hover(self, precedence_tree):
        assert _color(precedence_tree, "desktop", "hover") == "blue"

    def test_desktop_default(self, precedence_tree):
        assert _color(precedence_tree, "desktop") == "red"

    def test_narrower_breakpoints_inherit_wider(self, precedence_tree):
        assert _color(precedence_tree, "mobile") == "green"
        assert _color(precedence_tree, "mobilePortrait") == "green"


class TestMerging:
    def test_categories_replace_whole(self):
        tree = StyleTree.from_dict(
            {
                "base": {"typography": {"color": "red", "fontSize": "20px"}},
                "breakpoints": {"mobile": {"typography": {"color": "blue"}}},
            }
        )
        styling = resolve_styling(tree, View(Breakpoint.MOBILE))
        assert styling["typography"] == {"color": "blue"}

    def test_other_categories_kept(self, layered_tree):
        styling = resolve_styling(layered_tree, View(Breakpoint.MOBILE, PseudoClass.HOVER))
        assert styling == {
            "layout": {"display": "flex"},
            "typography": {"color": "orange"},
        }

    def test_wider_pseudo_not_merged(self, layered_tree):
        styling = resolve_styling(layered_tree, View(Breakpoint.MOBILE_PORTRAIT, PseudoClass.HOVER))
        assert styling["typography"] == {"color": "gray"}

    def test_narrower_layers_not_merged(self, layered_tree):
        styling = resolve_styling(layered_tree, View(Breakpoint.TABLET))
        assert styling["typography"] == {"color": "black"}

    def test_empty_tree(self):
        for bp in Breakpoint:
            for state in PseudoClass:
                assert resolve_styling(StyleTree(), View(bp, state)) == {}

    def test_result_is_a_new_mapping(self, precedence_tree):
        styling = resolve_styling(precedence_tree, View())
        styling["layout"] = {"display": "none"}
        assert "layout" not in precedence_tree.base

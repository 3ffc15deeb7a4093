"""Tests for property provenance reporting."""

from stylecascade.cascade import PropertySource, StyleSource, has_value, style_source
from stylecascade.model.enums import Breakpoint, PseudoClass
from stylecascade.model.tree import StyleTree
from stylecascade.model.view import View


MOBILE_ONLY = StyleTree.from_dict({"breakpoints": {"mobile": {"layout": {"display": "none"}}}})


class TestStyleSource:
    def test_value_set_elsewhere(self):
        result = style_source(MOBILE_ONLY, "layout.display", View())
        assert result == StyleSource(PropertySource.DEFAULT, True)

    def test_value_set_here_only(self):
        result = style_source(MOBILE_ONLY, "layout.display", View(Breakpoint.MOBILE))
        assert result == StyleSource(PropertySource.USER, False)

    def test_set_here_and_elsewhere(self, layered_tree):
        result = style_source(layered_tree, "typography.color", View(Breakpoint.MOBILE))
        assert result.source is PropertySource.USER
        assert result.is_overridden_elsewhere is True

    def test_nested_pseudo_layers_count(self):
        tree = StyleTree.from_dict(
            {"breakpoints": {"tablet": {"pseudoStates": {"hover": {"filter": {"blur": 3}}}}}}
        )
        assert style_source(tree, "filter.blur", View()).is_overridden_elsewhere is True
        result = style_source(tree, "filter.blur", View(Breakpoint.TABLET, PseudoClass.HOVER))
        assert result == StyleSource(PropertySource.USER, False)

    def test_empty_tree(self):
        for view in (View(), View(Breakpoint.MOBILE_PORTRAIT, PseudoClass.BEFORE)):
            assert style_source(StyleTree(), "layout.display", view) == StyleSource()

    def test_to_dict(self):
        assert style_source(MOBILE_ONLY, "layout.display", View()).to_dict() == {
            "source": "default",
            "isOverriddenElsewhere": True,
        }


class TestHasValue:
    def test_present(self):
        assert has_value({"layout": {"display": "none"}}, "layout.display")

    def test_category_path(self):
        assert has_value({"layout": {"display": "none"}}, "layout")

    def test_missing_segment(self):
        assert not has_value({"layout": {}}, "layout.display")
        assert not has_value({"layout": "flex"}, "layout.display")
        assert not has_value(None, "layout")

    def test_none_counts_as_missing(self):
        assert not has_value({"layout": {"display": None}}, "layout.display")

    def test_falsy_values_count(self):
        assert has_value({"filter": {"blur": 0}}, "filter.blur")
        assert has_value({"typography": {"color": ""}}, "typography.color")

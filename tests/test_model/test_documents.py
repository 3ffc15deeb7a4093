"""Tests for loading element documents."""

import json

import pytest

from stylecascade.documents import load_element, read_element, read_json
from stylecascade.errors import StyleTreeError


class TestLoadElement:
    def test_bare_tree(self):
        tree, metadata = load_element({"base": {"layout": {"display": "flex"}}}, "fallback")
        assert tree.base == {"layout": {"display": "flex"}}
        assert metadata.element_id == "fallback"

    def test_element_document(self):
        tree, metadata = load_element({"styleTree": {"base": {}}, "metadata": {"elementId": "el-1"}})
        assert tree.is_empty
        assert metadata.element_id == "el-1"

    def test_tree_alias(self):
        tree, metadata = load_element({"tree": {"pseudoStates": {"hover": {"a": {}}}}})
        assert not tree.is_empty
        assert metadata.element_id == "element"

    def test_rejects_non_object(self):
        with pytest.raises(StyleTreeError):
            load_element(["base"])


class TestReadJson:
    def test_read_element(self, tmp_path):
        path = tmp_path / "el.json"
        path.write_text(json.dumps({"styleTree": {}, "metadata": {"elementId": "x"}}), encoding="utf-8")
        _, metadata = read_element(path)
        assert metadata.element_id == "x"

    def test_malformed(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("[1,", encoding="utf-8")
        with pytest.raises(StyleTreeError, match="invalid JSON"):
            read_json(path)

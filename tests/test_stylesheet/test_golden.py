"""Golden fixtures shared by the editor and publish paths.

Each fixture under tests/fixtures/golden holds an element document plus the
exact inline style and rules it must produce.
"""

import json
from pathlib import Path

import pytest

from stylecascade.documents import load_element
from stylecascade.stylesheet import assemble_rules, generate_output, render_element_css

GOLDEN_DIR = Path(__file__).resolve().parent.parent / "fixtures" / "golden"
FIXTURES = sorted(GOLDEN_DIR.glob("*.json"))


def _load(path):
    document = json.loads(path.read_text(encoding="utf-8"))
    tree, metadata = load_element(document)
    return tree, metadata, document["expected"]


def test_fixtures_present():
    assert len(FIXTURES) >= 3


@pytest.mark.parametrize("path", FIXTURES, ids=lambda p: p.stem)
class TestGolden:
    def test_published_rules(self, path):
        tree, metadata, expected = _load(path)
        assert assemble_rules(tree, metadata.element_id, metadata.custom_css) == expected["rules"]

    def test_published_text(self, path):
        tree, metadata, expected = _load(path)
        assert render_element_css(tree, metadata.element_id, metadata.custom_css) == "\n\n".join(expected["rules"])

    def test_inline_style(self, path):
        tree, metadata, expected = _load(path)
        output = generate_output(tree, metadata)
        assert output.inline_style == expected["inlineStyle"]
        assert list(output.inline_style) == list(expected["inlineStyle"])

    def test_editor_blocks_match_published_rules(self, path):
        tree, metadata, expected = _load(path)
        output = generate_output(tree, metadata)
        published = expected["rules"][1:] if expected["inlineStyle"] else expected["rules"]
        assert list(output.rule_blocks) == published

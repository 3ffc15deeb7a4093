from __future__ import annotations

import pytest

from stylecascade.model.tree import StyleTree


@pytest.fixture
def precedence_tree() -> StyleTree:
    """Base red, desktop hover blue, tablet green."""
    return StyleTree.from_dict(
        {
            "base": {"typography": {"color": "red"}},
            "pseudoStates": {"hover": {"typography": {"color": "blue"}}},
            "breakpoints": {"tablet": {"typography": {"color": "green"}}},
        }
    )


@pytest.fixture
def layered_tree() -> StyleTree:
    """A tree with a value in every kind of slot."""
    return StyleTree.from_dict(
        {
            "base": {"layout": {"display": "block"}, "typography": {"color": "black"}},
            "pseudoStates": {"focus": {"typography": {"color": "navy"}}},
            "breakpoints": {
                "tablet": {"layout": {"display": "flex"}},
                "mobile": {
                    "typography": {"color": "gray"},
                    "pseudoStates": {"hover": {"typography": {"color": "orange"}}},
                },
            },
        }
    )

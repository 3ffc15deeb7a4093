from __future__ import annotations

import pytest

from stylecascade.config import CascadeConfig
from stylecascade.web.app import create_app


@pytest.fixture
def app():
    """Create a Flask app for testing."""
    application = create_app(CascadeConfig(element_id_prefix="pp-"))
    application.config["TESTING"] = True
    return application


@pytest.fixture
def client(app):
    """Create a Flask test client."""
    return app.test_client()


@pytest.fixture
def tree():
    return {
        "base": {"typography": {"color": "red"}},
        "pseudoStates": {"hover": {"typography": {"color": "blue"}}},
        "breakpoints": {"tablet": {"typography": {"color": "green"}}},
    }

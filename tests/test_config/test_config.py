"""Tests for CascadeConfig and the error types."""

import dataclasses

import pytest

from stylecascade.config import CascadeConfig
from stylecascade.errors import StyleCascadeError, StyleTreeError, UnknownViewError


class TestCascadeConfig:
    def test_defaults(self):
        config = CascadeConfig()
        assert config.host == "127.0.0.1"
        assert config.port == 5000
        assert config.debug is False
        assert config.element_id_prefix == "pp-"
        assert config.log_level == "WARNING"

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            CascadeConfig().port = 80

    def test_from_empty_env(self):
        assert CascadeConfig.from_env({}) == CascadeConfig()

    def test_from_env(self):
        config = CascadeConfig.from_env(
            {
                "STYLECASCADE_HOST": "0.0.0.0",
                "STYLECASCADE_PORT": "8080",
                "STYLECASCADE_DEBUG": "true",
                "STYLECASCADE_ID_PREFIX": "node-",
                "STYLECASCADE_LOG_LEVEL": "debug",
            }
        )
        assert config == CascadeConfig("0.0.0.0", 8080, True, "node-", "DEBUG")

    def test_reads_process_env(self, monkeypatch):
        monkeypatch.setenv("STYLECASCADE_PORT", "9000")
        assert CascadeConfig.from_env().port == 9000


class TestErrors:
    def test_tree_error_path(self):
        exc = StyleTreeError("bad layer", "breakpoints.tablet")
        assert exc.path == "breakpoints.tablet"
        assert str(exc) == "bad layer (at breakpoints.tablet)"
        assert isinstance(exc, StyleCascadeError)

    def test_tree_error_without_path(self):
        assert str(StyleTreeError("bad")) == "bad"

    def test_unknown_view_error(self):
        assert issubclass(UnknownViewError, StyleCascadeError)
        assert issubclass(UnknownViewError, ValueError)

"""Tests for configuration loading."""

import logging

import pytest

from java_analyzer.config import (
    Config,
    get_config,
    parse_log_level,
    reset_config,
    set_config,
)
from java_analyzer.errors import ConfigurationError


class TestConfig:
    """Test environment-backed configuration."""

    def test_defaults(self, monkeypatch):
        """Test defaults with no environment set."""
        for name in (
            "JAVA_ANALYZER_SUFFIXES",
            "JAVA_ANALYZER_ENCODING",
            "JAVA_ANALYZER_STRICT_PARSE",
            "JAVA_ANALYZER_LOG_LEVEL",
            "JAVA_ANALYZER_PROMPT",
        ):
            monkeypatch.delenv(name, raising=False)
        config = Config()
        assert config.source_suffixes == (".java",)
        assert config.encoding == "utf-8"
        assert config.strict_parse is True
        assert config.log_level == logging.WARNING
        assert config.prompt == "> "

    def test_environment(self, monkeypatch):
        """Test values read from the environment."""
        monkeypatch.setenv("JAVA_ANALYZER_SUFFIXES", "java, jav,")
        monkeypatch.setenv("JAVA_ANALYZER_STRICT_PARSE", "off")
        monkeypatch.setenv("JAVA_ANALYZER_LOG_LEVEL", "debug")
        monkeypatch.setenv("JAVA_ANALYZER_PROMPT", "java> ")
        config = Config()
        assert config.source_suffixes == (".java", ".jav")
        assert config.strict_parse is False
        assert config.log_level == logging.DEBUG
        assert config.prompt == "java> "

    def test_invalid_log_level(self, monkeypatch):
        """Test an unknown level name is a configuration error."""
        monkeypatch.setenv("JAVA_ANALYZER_LOG_LEVEL", "chatty")
        with pytest.raises(ConfigurationError):
            Config()

    def test_parse_log_level(self):
        """Test names, numbers and the default."""
        assert parse_log_level("INFO") == logging.INFO
        assert parse_log_level("15") == 15
        assert parse_log_level(None, logging.ERROR) == logging.ERROR

    def test_global_instance(self):
        """Test get/set/reset of the global config."""
        first = get_config()
        assert get_config() is first
        custom = Config(strict_parse=False)
        set_config(custom)
        assert get_config() is custom
        reset_config()
        assert get_config() is not custom

"""
Configuration management for Java Analyzer.

Configuration via environment variables:

Source loading:
- JAVA_ANALYZER_SUFFIXES: Comma-separated file suffixes to load (default: .java)
- JAVA_ANALYZER_ENCODING: Source file encoding (default: utf-8)
- JAVA_ANALYZER_STRICT_PARSE: Drop files whose syntax tree has errors (default: true)

Runtime:
- JAVA_ANALYZER_LOG_LEVEL: Log level for the CLI and MCP server (default: WARNING)
- JAVA_ANALYZER_PROMPT: Interactive prompt (default: "> ")
"""

import logging
import os
from dataclasses import dataclass, field

from .errors import ConfigurationError

DEFAULT_SUFFIXES = (".java",)
DEFAULT_PROMPT = "> "


def _parse_bool(value: str | None, default: bool = True) -> bool:
    """Parse boolean from environment variable."""
    if value is None:
        return default
    return value.lower() in ("true", "1", "yes", "on")


def _parse_suffixes(value: str | None) -> tuple[str, ...]:
    """Parse a comma-separated suffix list, adding the leading dot if missing."""
    if not value:
        return DEFAULT_SUFFIXES
    suffixes = []
    for raw in value.split(","):
        raw = raw.strip()
        if not raw:
            continue
        suffixes.append(raw if raw.startswith(".") else f".{raw}")
    return tuple(suffixes) or DEFAULT_SUFFIXES


def parse_log_level(value: str | int | None, default: int = logging.WARNING) -> int:
    """Resolve a log level name or number.

    Raises:
        ConfigurationError: If the name is not a known logging level.
    """
    if value is None or value == "":
        return default
    if isinstance(value, int):
        return value
    if value.isdigit():
        return int(value)
    level = logging.getLevelName(value.upper())
    if not isinstance(level, int):
        raise ConfigurationError(f"Unknown log level: {value}")
    return level


@dataclass
class Config:
    """Analyzer configuration loaded from environment variables."""

    source_suffixes: tuple[str, ...] = field(
        default_factory=lambda: _parse_suffixes(os.getenv("JAVA_ANALYZER_SUFFIXES"))
    )
    encoding: str = field(default_factory=lambda: os.getenv("JAVA_ANALYZER_ENCODING", "utf-8"))
    strict_parse: bool = field(
        default_factory=lambda: _parse_bool(os.getenv("JAVA_ANALYZER_STRICT_PARSE"), True)
    )
    log_level: int = field(
        default_factory=lambda: parse_log_level(os.getenv("JAVA_ANALYZER_LOG_LEVEL"))
    )
    prompt: str = field(default_factory=lambda: os.getenv("JAVA_ANALYZER_PROMPT", DEFAULT_PROMPT))


# Global config instance
_config: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = Config()
    return _config


def set_config(config: Config) -> None:
    """Set the global configuration instance."""
    global _config
    _config = config


def reset_config() -> None:
    """Reset configuration (useful for testing)."""
    global _config
    _config = None

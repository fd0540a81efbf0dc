"""
Configuration for termtext

Settings come from environment variables with the TERMTEXT_ prefix, and can
be overridden by a YAML config file.

Environment Variables:
    TERMTEXT_LOCALE: Sort locale ("" disabled, "*" from environment, or a tag)
    TERMTEXT_HOME: Home directory used for "~" substitution
    TERMTEXT_LOG_LEVEL: Logging level (default: INFO)
    TERMTEXT_LOG_FORMAT: "json" (default) or "text"

Config file (all keys optional):
    locale: "en-US"
    home_dir: "${HOME}"
    log_level: DEBUG
    log_format: text

Usage:
    from termtext.config import get_config
    config = get_config()
    print(config.locale)
"""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass, field, fields, replace
from pathlib import Path

import yaml

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
VALID_LOG_FORMATS = ("json", "text")

_ENV_VAR_PATTERN = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)\}")


@dataclass
class TermTextConfig:
    """Runtime configuration, validated at creation time."""

    # "" disables locale ordering, "*" reads it from the environment
    locale: str = ""

    home_dir: Path = field(default_factory=Path.home)

    log_level: str = "INFO"
    log_format: str = "json"

    def __post_init__(self):
        if not isinstance(self.locale, str):
            raise ConfigurationError(
                f"Invalid locale {self.locale!r}, expected a string such as \"en-US\" or \"*\""
            )
        self.home_dir = Path(self.home_dir)
        self.log_level = str(self.log_level).upper()
        if self.log_level not in VALID_LOG_LEVELS:
            raise ConfigurationError(
                f"Invalid log level {self.log_level!r}, expected one of {', '.join(VALID_LOG_LEVELS)}"
            )
        self.log_format = str(self.log_format).lower()
        if self.log_format not in VALID_LOG_FORMATS:
            raise ConfigurationError(
                f"Invalid log format {self.log_format!r}, expected one of {', '.join(VALID_LOG_FORMATS)}"
            )

    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level)

    @classmethod
    def from_env(cls) -> TermTextConfig:
        kwargs = {}
        if "TERMTEXT_LOCALE" in os.environ:
            kwargs["locale"] = os.environ["TERMTEXT_LOCALE"]
        home = os.environ.get("TERMTEXT_HOME")
        if home:
            kwargs["home_dir"] = Path(home)
        level = os.environ.get("TERMTEXT_LOG_LEVEL")
        if level:
            kwargs["log_level"] = level
        log_format = os.environ.get("TERMTEXT_LOG_FORMAT")
        if log_format:
            kwargs["log_format"] = log_format
        return cls(**kwargs)


def _interpolate_env(value: str) -> str:
    """Replace ${VAR} patterns with environment variable values.

    Unset variables are replaced with an empty string.
    """

    def _replace(match: re.Match) -> str:
        return os.environ.get(match.group(1), "")

    return _ENV_VAR_PATTERN.sub(_replace, value)


def load_config(path: str | Path) -> TermTextConfig:
    """Load a YAML config file on top of the environment settings.

    Raises:
        FileNotFoundError: If the config file does not exist.
        yaml.YAMLError: If the file is not valid YAML.
        ConfigurationError: If the file is not a mapping, has unknown keys
            or invalid values.
    """
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    try:
        with open(config_path, encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        logger.error("Invalid YAML in config file %s: %s", path, e)
        raise

    base = TermTextConfig.from_env()
    if raw is None:
        return base

    if not isinstance(raw, dict):
        raise ConfigurationError(
            f"Config file must contain a YAML mapping, got {type(raw).__name__}: {path}"
        )

    known = {f.name for f in fields(TermTextConfig)}
    unknown = sorted(set(raw) - known)
    if unknown:
        raise ConfigurationError(f"Unknown config keys in {path}: {', '.join(unknown)}")

    values = {
        key: _interpolate_env(value) if isinstance(value, str) else value
        for key, value in raw.items()
    }
    # locale: "" must survive YAML as an explicit empty string
    if values.get("locale") is None and "locale" in values:
        values["locale"] = ""
    return replace(base, **values)


def get_config() -> TermTextConfig:
    return TermTextConfig.from_env()

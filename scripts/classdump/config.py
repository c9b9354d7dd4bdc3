"""Configuration loading and validation for the class-dump formatter."""

from __future__ import annotations

import codecs
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml

from scripts.classdump.errors import ConfigError


DEFAULT_HEADER_FILE_NAME = "class-dump-version.h"
DEFAULT_DECLARATION_SUFFIX = ".h"


@dataclass
class FormatterConfig:
    """Complete formatter configuration."""

    comment_prefix: str = "//"
    # class-dump annotates the header with a "... properties" line we don't want
    header_exclude_suffix: str = "properties"
    start_markers: list[str] = field(default_factory=lambda: ["@protocol", "@interface"])
    end_marker: str = "@end"
    header_file_name: str = DEFAULT_HEADER_FILE_NAME
    declaration_suffix: str = DEFAULT_DECLARATION_SUFFIX
    encoding: str = "utf-8"


def get_default_config() -> FormatterConfig:
    """Return the default formatter configuration."""
    return FormatterConfig()


def _require_string(value: Any, key: str, config_file: Optional[str]) -> None:
    if not isinstance(value, str) or not value:
        raise ConfigError(f"'{key}' must be a non-empty string", path=config_file)


def validate_config(config: FormatterConfig, config_file: Optional[str] = None) -> None:
    """Validate configuration values.

    Raises:
        ConfigError: If configuration is invalid.
    """
    _require_string(config.comment_prefix, "comment_prefix", config_file)
    _require_string(config.end_marker, "end_marker", config_file)
    _require_string(config.header_file_name, "header_file_name", config_file)

    if not isinstance(config.header_exclude_suffix, str):
        raise ConfigError("'header_exclude_suffix' must be a string", path=config_file)
    if not isinstance(config.declaration_suffix, str):
        raise ConfigError("'declaration_suffix' must be a string", path=config_file)

    if not isinstance(config.start_markers, list) or not config.start_markers:
        raise ConfigError("'start_markers' must be a non-empty list", path=config_file)
    for marker in config.start_markers:
        _require_string(marker, "start_markers", config_file)

    # Header file must land directly inside the output directory
    name = config.header_file_name
    if Path(name).name != name or name in (".", ".."):
        raise ConfigError(
            f"'header_file_name' must be a bare file name, got '{config.header_file_name}'",
            path=config_file,
        )

    try:
        codecs.lookup(config.encoding)
    except (LookupError, TypeError):
        raise ConfigError(f"Unknown encoding: {config.encoding}", path=config_file)


def load_config(config_path: Path | str) -> FormatterConfig:
    """Load configuration from a YAML file.

    Args:
        config_path: Path to the formatter YAML file.

    Returns:
        FormatterConfig with loaded values merged with defaults.

    Raises:
        ConfigError: If the file exists but contains invalid configuration.
    """
    config_path = Path(config_path)
    config_file = str(config_path)

    defaults = get_default_config()

    if not config_path.exists():
        return defaults

    try:
        content = config_path.read_text()
        if not content.strip():
            return defaults

        data = yaml.safe_load(content)
        if not data:
            return defaults
        if not isinstance(data, dict):
            raise ConfigError("Top-level formatter config must be a mapping", path=config_file)

    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML: {e}", path=config_file)

    config = FormatterConfig(
        comment_prefix=data.get("comment_prefix", defaults.comment_prefix),
        header_exclude_suffix=data.get("header_exclude_suffix", defaults.header_exclude_suffix),
        start_markers=data.get("start_markers", defaults.start_markers),
        end_marker=data.get("end_marker", defaults.end_marker),
        header_file_name=data.get("header_file_name", defaults.header_file_name),
        declaration_suffix=data.get("declaration_suffix", defaults.declaration_suffix),
        encoding=data.get("encoding", defaults.encoding),
    )

    validate_config(config, config_file)

    return config

# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Config loader: YAML on disk in, frozen LvlCodesConfig out.

Read the file, parse it with yaml.safe_load, validate with pydantic. Any
failure stops the command with a ConfigError. A broken file never falls
back to defaults; only running without --config does.
"""

from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import ValidationError

from lvlcodes.config.exceptions import ConfigLoadError, ConfigValidationError
from lvlcodes.config.schema import GlobalConfig, LvlCodesConfig

DEFAULT_CONFIG_VERSION = "1.0.0"


def _read_yaml_mapping(config_path: Path) -> dict[str, Any]:
    """
    Parse a YAML file that must contain a mapping at the top level.

    Raises:
        ConfigLoadError: Missing file, unreadable file, bad YAML, or a
            top-level value that isn't a mapping.
    """
    if not config_path.is_file():
        raise ConfigLoadError(f"Config file not found: {config_path}")

    try:
        raw_text = config_path.read_text(encoding="utf-8")
    except OSError as err:
        raise ConfigLoadError(f"Cannot read config file {config_path}: {err}") from err

    try:
        parsed = yaml.safe_load(raw_text)
    except yaml.YAMLError as err:
        raise ConfigLoadError(f"Invalid YAML in {config_path}: {err}") from err

    if not isinstance(parsed, dict):
        raise ConfigLoadError(
            f"Config file must contain a YAML mapping, got {type(parsed).__name__}"
        )
    return parsed


def load_config(config_path: Path) -> LvlCodesConfig:
    """
    Load and validate a config file.

    Raises:
        ConfigLoadError: File I/O or YAML parse failures.
        ConfigValidationError: Schema violations.
    """
    raw_data = _read_yaml_mapping(config_path)

    try:
        return LvlCodesConfig.model_validate(raw_data)
    except ValidationError as err:
        raise ConfigValidationError(
            f"Config validation failed for {config_path}:\n{err}"
        ) from err


def default_config() -> LvlCodesConfig:
    """The config used when no file is given."""
    return LvlCodesConfig.model_validate(
        {"global": GlobalConfig(config_version=DEFAULT_CONFIG_VERSION)}
    )


def resolve_config(config_path: Optional[Path]) -> LvlCodesConfig:
    """Load config_path if given, otherwise return the defaults."""
    if config_path is None:
        return default_config()
    return load_config(config_path)

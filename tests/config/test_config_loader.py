# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Tests for the config loader.

  1. Valid YAML loads into a frozen, correct config object
  2. Missing required fields and unknown keys raise ConfigValidationError
  3. Missing files and broken YAML raise ConfigLoadError
  4. No path means defaults
"""

import textwrap
from pathlib import Path

import pytest
from pydantic import ValidationError

from lvlcodes.config.exceptions import ConfigError, ConfigLoadError, ConfigValidationError
from lvlcodes.config.loader import default_config, load_config, resolve_config


class TestLoadValidConfig:
    def test_loads_minimal_valid_config(self, tmp_config_file: Path) -> None:
        config = load_config(tmp_config_file)
        assert config.global_config.project_name == "lvlcodes-test"
        assert config.global_config.config_version == "1.0.0"
        assert config.global_config.log_level == "DEBUG"

    def test_output_defaults_to_text(self, tmp_config_file: Path) -> None:
        config = load_config(tmp_config_file)
        assert config.output.format == "text"

    def test_output_format_json(self, json_config_file: Path) -> None:
        config = load_config(json_config_file)
        assert config.output.format == "json"

    def test_lowercase_log_level_is_normalized(self, tmp_path: Path) -> None:
        config_file = tmp_path / "lower.yaml"
        config_file.write_text(
            textwrap.dedent("""\
                global:
                  config_version: "1.0.0"
                  log_level: "warning"
            """),
            encoding="utf-8",
        )
        assert load_config(config_file).global_config.log_level == "WARNING"


class TestInvalidConfig:
    def test_missing_required_field(self, invalid_config_file: Path) -> None:
        with pytest.raises(ConfigValidationError):
            load_config(invalid_config_file)

    def test_unknown_top_level_key(self, tmp_path: Path) -> None:
        config_file = tmp_path / "extra.yaml"
        config_file.write_text(
            textwrap.dedent("""\
                global:
                  config_version: "1.0.0"
                retry:
                  attempts: 3
            """),
            encoding="utf-8",
        )
        with pytest.raises(ConfigValidationError):
            load_config(config_file)

    def test_unsupported_output_format(self, tmp_path: Path) -> None:
        config_file = tmp_path / "format.yaml"
        config_file.write_text(
            textwrap.dedent("""\
                global:
                  config_version: "1.0.0"
                output:
                  format: "xml"
            """),
            encoding="utf-8",
        )
        with pytest.raises(ConfigValidationError):
            load_config(config_file)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigLoadError, match="not found"):
            load_config(tmp_path / "nope.yaml")

    def test_broken_yaml(self, broken_yaml_file: Path) -> None:
        with pytest.raises(ConfigLoadError, match="Invalid YAML"):
            load_config(broken_yaml_file)

    def test_non_mapping_yaml(self, tmp_path: Path) -> None:
        config_file = tmp_path / "list.yaml"
        config_file.write_text("- just\n- a list\n", encoding="utf-8")
        with pytest.raises(ConfigLoadError, match="mapping"):
            load_config(config_file)

    def test_all_failures_share_a_base_class(self, broken_yaml_file: Path) -> None:
        with pytest.raises(ConfigError):
            load_config(broken_yaml_file)


class TestImmutability:
    def test_loaded_config_cannot_be_mutated(self, tmp_config_file: Path) -> None:
        config = load_config(tmp_config_file)
        with pytest.raises(ValidationError):
            config.global_config.log_level = "ERROR"  # type: ignore[misc]


class TestDefaults:
    def test_default_config(self) -> None:
        config = default_config()
        assert config.global_config.project_name == "lvlcodes"
        assert config.global_config.log_level == "INFO"
        assert config.output.format == "text"

    def test_resolve_without_path_uses_defaults(self) -> None:
        assert resolve_config(None) == default_config()

    def test_resolve_with_path_loads_file(self, json_config_file: Path) -> None:
        assert resolve_config(json_config_file).output.format == "json"

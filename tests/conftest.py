# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Shared pytest fixtures for lvlcodes tests.
"""

import textwrap
from pathlib import Path

import pytest


@pytest.fixture()
def tmp_config_file(tmp_path: Path) -> Path:
    """The smallest config that passes schema validation."""
    config_file = tmp_path / "lvlcodes.yaml"
    config_file.write_text(
        textwrap.dedent("""\
            global:
              config_version: "1.0.0"
              project_name: "lvlcodes-test"
              log_level: "DEBUG"
        """),
        encoding="utf-8",
    )
    return config_file


@pytest.fixture()
def json_config_file(tmp_path: Path) -> Path:
    """A valid config that switches CLI output to JSON lines."""
    config_file = tmp_path / "lvlcodes-json.yaml"
    config_file.write_text(
        textwrap.dedent("""\
            global:
              config_version: "1.0.0"
            output:
              format: "json"
        """),
        encoding="utf-8",
    )
    return config_file


@pytest.fixture()
def invalid_config_file(tmp_path: Path) -> Path:
    """Valid YAML that fails schema validation (missing config_version)."""
    config_file = tmp_path / "invalid.yaml"
    config_file.write_text(
        textwrap.dedent("""\
            global:
              project_name: "lvlcodes-test"
        """),
        encoding="utf-8",
    )
    return config_file


@pytest.fixture()
def broken_yaml_file(tmp_path: Path) -> Path:
    """A file that isn't valid YAML at all."""
    config_file = tmp_path / "broken.yaml"
    config_file.write_text("{{not: yaml: at: all:::", encoding="utf-8")
    return config_file

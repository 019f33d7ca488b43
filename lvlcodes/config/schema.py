# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Type-safe configuration schemas for lvlcodes.

All models are frozen pydantic v2 models:
  - frozen=True: immutable after construction
  - extra="forbid": unknown fields cause immediate failure
  - validate_default=True: defaults get type-checked too
"""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

_VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class GlobalConfig(BaseModel):
    """Settings for the whole tool: identity and observability."""

    model_config = ConfigDict(frozen=True, extra="forbid", validate_default=True)

    config_version: str = Field(
        description="Schema version for compatibility tracking, e.g. '1.0.0'"
    )
    project_name: str = Field(
        default="lvlcodes", description="Human-readable project identifier"
    )
    log_level: str = Field(
        default="INFO",
        description="One of DEBUG, INFO, WARNING, ERROR, CRITICAL",
    )
    log_file: Optional[str] = Field(
        default=None,
        description="Optional path for file-based log output",
    )

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        upper = value.upper()
        if upper not in _VALID_LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {', '.join(_VALID_LOG_LEVELS)}, got '{value}'"
            )
        return upper


class OutputConfig(BaseModel):
    """How the CLI renders result codes on stdout."""

    model_config = ConfigDict(frozen=True, extra="forbid", validate_default=True)

    format: Literal["text", "json"] = Field(
        default="text",
        description="'text' for tab-separated lines, 'json' for one object per line",
    )


class LvlCodesConfig(BaseModel):
    """
    Top-level config container.

    `global:` is required. `output:` may be left out and falls back to
    text output.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", validate_default=True)

    global_config: GlobalConfig = Field(alias="global")
    output: OutputConfig = Field(default_factory=OutputConfig)

"""
Configuration schema definition using Pydantic.

This module defines the declarative configuration schema that serves as
the single source of truth for all configuration in the application.
"""

from typing import Optional, Any
from pydantic import BaseModel, Field, field_validator

from ..constants import (
    DEFAULT_INPUT_FILE,
    DEFAULT_MIN_TIMES,
    DEFAULT_MAX_ARTISTS_PER_RECORD,
)


class ConfigSchema(BaseModel):
    """
    Declarative configuration schema.

    Each field can be set via environment variables or CLI arguments.
    """

    input_path: str = Field(
        DEFAULT_INPUT_FILE,
        description=f"Text file with one comma-separated artist list per line (default: {DEFAULT_INPUT_FILE})",
        json_schema_extra={
            "env_var": "ARTIST_PAIRS_INPUT_PATH",
            "cli_arg": "input_file",
        }
    )

    min_times: int = Field(
        DEFAULT_MIN_TIMES,
        ge=0,
        description=f"Report pairs seen in more than this many lists (default: {DEFAULT_MIN_TIMES})",
        json_schema_extra={
            "env_var": "ARTIST_PAIRS_MIN_TIMES",
            "cli_arg": "min_times",
        }
    )

    output_path: Optional[str] = Field(
        None,
        description="Write the report to this file instead of stdout",
        json_schema_extra={
            "env_var": "ARTIST_PAIRS_OUTPUT_PATH",
            "cli_arg": "output",
        }
    )

    strip_names: bool = Field(
        False,
        description="Strip whitespace around artist names",
        json_schema_extra={
            "env_var": "ARTIST_PAIRS_STRIP_NAMES",
            "cli_arg": "strip_names",
            "cli_choices": ["true", "false"],
        }
    )

    max_artists_per_record: int = Field(
        DEFAULT_MAX_ARTISTS_PER_RECORD,
        gt=0,
        description="Warn about customer lists longer than this (they are still counted)",
        json_schema_extra={
            "env_var": "ARTIST_PAIRS_MAX_ARTISTS",
            "cli_arg": "max_artists",
        }
    )

    @field_validator('strip_names', mode='before')
    @classmethod
    def parse_bool(cls, v: Any) -> bool:
        """Parse boolean from string values."""
        if isinstance(v, bool):
            return v
        if isinstance(v, str):
            v_lower = v.strip().lower()
            if v_lower in ('1', 'true', 'yes', 'on'):
                return True
            elif v_lower in ('0', 'false', 'no', 'off'):
                return False
            else:
                raise ValueError(f"Invalid boolean value: {v}")
        return bool(v)

    model_config = {
        "validate_assignment": True,
        "extra": "forbid"
    }

"""
Schema-driven configuration loader.

This module provides a ConfigLoader that uses the configuration schema
to automatically load, validate, and merge configuration from multiple sources.
"""

import logging
import os
import typing
from typing import Dict, Any, Optional
from argparse import ArgumentParser, Namespace

from dotenv import load_dotenv
from pydantic import ValidationError

from .schema import ConfigSchema


logger = logging.getLogger(__name__)

DOTENV_FILE = ".env.local"


class ConfigError(Exception):
    """Raised when configuration validation fails."""
    pass


def _env_var_for(field_info) -> Optional[str]:
    return field_info.json_schema_extra.get("env_var") if field_info.json_schema_extra else None


def _cli_arg_for(field_info) -> Optional[str]:
    return field_info.json_schema_extra.get("cli_arg") if field_info.json_schema_extra else None


class ConfigLoader:
    """Loads and validates configuration using a schema-driven approach."""

    @staticmethod
    def load(
        schema: type[ConfigSchema] = ConfigSchema,
        cli_args: Optional[Namespace] = None,
        dotenv_path: str = DOTENV_FILE,
    ) -> ConfigSchema:
        """
        Load configuration from all sources with precedence handling.

        Loading order (lowest to highest priority):
        1. Schema defaults
        2. .env.local file (if it exists)
        3. OS environment variables
        4. CLI arguments (highest priority)

        Args:
            schema: The configuration schema class to use
            cli_args: Parsed CLI arguments (if available)
            dotenv_path: Dotenv file loaded into the environment before reading it

        Returns:
            Validated configuration instance

        Raises:
            ConfigError: If configuration validation fails
        """
        config_dict: Dict[str, Any] = {}

        _load_from_dotenv_file(dotenv_path)

        for field_name, field_info in schema.model_fields.items():
            env_var = _env_var_for(field_info)
            if env_var:
                env_value = os.getenv(env_var)
                if env_value is not None:
                    # Empty strings fall back to the schema default
                    stripped = env_value.strip()
                    if stripped:
                        config_dict[field_name] = stripped

        if cli_args:
            for field_name, field_info in schema.model_fields.items():
                cli_arg = _cli_arg_for(field_info)
                if cli_arg and hasattr(cli_args, cli_arg):
                    cli_value = getattr(cli_args, cli_arg)
                    if cli_value is None:
                        continue
                    if isinstance(cli_value, str):
                        stripped = cli_value.strip()
                        if stripped:
                            config_dict[field_name] = stripped
                        else:
                            # Treat explicit empty string as an override to clear the value
                            config_dict[field_name] = None
                    else:
                        config_dict[field_name] = cli_value

        try:
            config = schema(**config_dict)
            logger.debug("Configuration loaded and validated successfully")
            return config
        except ValidationError as e:
            errors = []
            for error in e.errors():
                field = error["loc"][0] if error["loc"] else "config"
                msg = error["msg"]
                field_info = schema.model_fields.get(field)
                env_var = _env_var_for(field_info) if field_info else None
                errors.append(f"{env_var or str(field).upper()}: {msg}")

            error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {err}" for err in errors)
            raise ConfigError(error_msg) from e

    @staticmethod
    def generate_cli_parser(
        schema: type[ConfigSchema] = ConfigSchema,
        description: str = "Report artist pairs that appear together in many customers' favorite lists",
    ) -> ArgumentParser:
        """
        Generate an ArgumentParser from the configuration schema.

        Args:
            schema: The configuration schema class
            description: Parser description

        Returns:
            Configured ArgumentParser
        """
        parser = ArgumentParser(
            description=description,
            epilog="""
Examples:
  python run_pairs.py --input-file Artist_lists_small.txt
  python run_pairs.py --input-file favorites.txt --min-times 10
  python run_pairs.py --input-file favorites.txt --output pairs.txt --verbose
            """,
        )

        # CLI-only arguments that don't map to config
        parser.add_argument(
            "--verbose",
            action="store_true",
            help="Enable verbose logging (DEBUG level)",
        )

        for field_name, field_info in schema.model_fields.items():
            cli_arg = _cli_arg_for(field_info)
            if not cli_arg:
                continue

            arg_name = f"--{cli_arg.replace('_', '-')}"

            kwargs = {
                "help": field_info.description or f"Override {_env_var_for(field_info) or field_name.upper()} env var",
                "default": None,  # Don't set schema defaults here - let the loader handle it
            }

            field_type = field_info.annotation

            # Unwrap Optional[X] to X
            if typing.get_origin(field_type) is typing.Union:
                non_none_args = [arg for arg in typing.get_args(field_type) if arg is not type(None)]
                if len(non_none_args) == 1:
                    field_type = non_none_args[0]

            if field_type == int:
                kwargs["type"] = int
            elif field_type == float:
                kwargs["type"] = float
            elif field_type == bool:
                choices = field_info.json_schema_extra.get("cli_choices")
                if choices:
                    kwargs["choices"] = choices
                else:
                    kwargs["action"] = "store_true"

            parser.add_argument(arg_name, **kwargs)

        return parser


def _load_from_dotenv_file(dotenv_path: str = DOTENV_FILE) -> None:
    """Load values from a dotenv file without overriding the real environment."""
    if os.path.exists(dotenv_path):
        load_dotenv(dotenv_path, override=False)
        logger.debug(f"Loaded configuration from {dotenv_path} file")
    else:
        logger.debug(f"{dotenv_path} file not found, skipping")

"""Shared types and utilities for CLI commands.

This module provides common enums and helper functions used across
multiple CLI command modules to avoid code duplication.
"""

from enum import Enum

import typer

from cachedecimate.core.config import ConfigError, DecimateConfig, load_config
from cachedecimate.utils.formatting import print_error


class OutputFormat(str, Enum):
    """Output format options."""

    TABLE = "table"
    JSON = "json"


def resolve_config(ctx: typer.Context, **overrides: object) -> DecimateConfig:
    """Load the config file and apply command line overrides.

    An explicit ``--config`` path must exist; the default path may be
    missing, in which case built-in defaults are used.

    Args:
        ctx: Typer context carrying the global options.
        **overrides: Option values; None means "not given".

    Returns:
        Effective DecimateConfig.

    Raises:
        typer.Exit: With code 1 if the configuration is invalid.
    """
    obj = ctx.obj or {}
    config_path = obj.get("config_path")
    try:
        config = load_config(config_path, required=config_path is not None)
        return config.with_overrides(**overrides)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


def is_quiet(ctx: typer.Context) -> bool:
    """Return whether --quiet was given on the main command."""
    obj = ctx.obj or {}
    return bool(obj.get("quiet", False))

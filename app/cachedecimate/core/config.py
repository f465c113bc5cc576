"""Guard configuration and settings.

This module provides the configuration model and I/O functions for
cache-decimate. Configuration is stored in
~/.config/cache-decimate/config.toml; every key is optional and command
line options take precedence over file values.
"""

import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from cachedecimate.cache.models import DEFAULT_EVICT_PERCENT
from cachedecimate.core.paths import get_config_path

DEFAULT_CACHE_PATH = Path("/data/shm_cache/")
DEFAULT_FREE_THRESHOLD = 10.0


class DecimateConfig(BaseModel):
    """Configuration for guarding a cache directory.

    Attributes:
        cache_path: Directory holding the cached files.
        free_threshold_percent: Evict when free space is at or below this.
        evict_percent: Share of files evicted under pressure.
        commit: Delete files for real instead of reporting them.
    """

    model_config = ConfigDict(extra="forbid")

    cache_path: Annotated[
        Path,
        Field(description="Directory holding the cached files"),
    ] = DEFAULT_CACHE_PATH
    free_threshold_percent: Annotated[
        float,
        Field(ge=0.0, le=100.0, description="Free-space threshold percentage (0-100)"),
    ] = DEFAULT_FREE_THRESHOLD
    evict_percent: Annotated[
        int,
        Field(ge=1, le=100, description="Share of files evicted under pressure (1-100)"),
    ] = DEFAULT_EVICT_PERCENT
    commit: Annotated[
        bool,
        Field(description="Delete files for real (otherwise dry-run)"),
    ] = False

    def with_overrides(self, **overrides: object) -> "DecimateConfig":
        """Return a copy with non-None overrides applied and validated.

        Args:
            **overrides: Field values from the command line; None means unset.

        Returns:
            New validated DecimateConfig.

        Raises:
            ConfigError: If an override is out of range.
        """
        data = self.model_dump()
        data.update({k: v for k, v in overrides.items() if v is not None})
        try:
            return DecimateConfig.model_validate(data)
        except ValidationError as e:
            raise ConfigError(f"Invalid option: {e}") from e


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigNotFoundError(ConfigError):
    """Raised when an explicitly requested config file is not found."""


class ConfigParseError(ConfigError):
    """Raised when a config file cannot be parsed."""


def load_config(path: Path | None = None, *, required: bool = False) -> DecimateConfig:
    """Load configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.
        required: If True, a missing file is an error. Otherwise defaults
            are returned.

    Returns:
        Validated DecimateConfig object.

    Raises:
        ConfigNotFoundError: If the file is missing and ``required`` is set.
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the content doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        if required:
            raise ConfigNotFoundError(f"Config file not found: {config_path}")
        return DecimateConfig()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config: {e}") from e

    try:
        return DecimateConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config content: {e}") from e


def save_config(config: DecimateConfig, path: Path | None = None) -> Path:
    """Save configuration to a TOML file.

    The file is written to a temporary file first and moved into place
    with os.replace().

    Args:
        config: The DecimateConfig object to save.
        path: Path to save the config. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()

    tmp_path: Path | None = None
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(config_to_dict(config), f)
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config: {e}") from e

    return config_path


def config_to_dict(config: DecimateConfig) -> dict[str, object]:
    """Convert DecimateConfig to a TOML-serializable dictionary."""
    return {
        "cache_path": str(config.cache_path),
        "free_threshold_percent": config.free_threshold_percent,
        "evict_percent": config.evict_percent,
        "commit": config.commit,
    }

"""
Configuration models for reckon.

Configuration is loaded from the [format] and [cli] sections of reckon.toml.
Command-line options and the RECKON_PRECISION environment variable take
precedence over the file; see ``reckon.cli``.
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from reckon.core.errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "reckon.toml"


class FormatConfig(BaseModel):
    """How results are rendered. Immutable per invocation."""

    precision: int = Field(default=10, ge=0, description="Digits after the decimal point")

    model_config = ConfigDict(frozen=True)


class CliConfig(BaseModel):
    """Presentation settings for the command-line front end."""

    show_position: bool = True
    prompt: str = "> "
    history_file: Path | None = None

    model_config = ConfigDict(frozen=True)


class ReckonConfig(BaseModel):
    """Complete reckon configuration."""

    format: FormatConfig = Field(default_factory=FormatConfig)
    cli: CliConfig = Field(default_factory=CliConfig)

    model_config = ConfigDict(frozen=True)

    def with_precision(self, precision: int) -> ReckonConfig:
        """Copy of this config with a different output precision."""
        return self.model_copy(update={"format": FormatConfig(precision=precision)})


# =============================================================================
# Configuration Loading
# =============================================================================


def load_config(toml_path: Path) -> ReckonConfig:
    """
    Load configuration from reckon.toml.

    Args:
        toml_path: Path to reckon.toml file

    Returns:
        ReckonConfig with values from file or defaults

    Raises:
        ConfigError: If the file exists but is not valid TOML or has bad values
    """
    if not toml_path.exists():
        logger.debug("No config file at %s, using defaults", toml_path)
        return ReckonConfig()

    try:
        with open(toml_path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"Cannot read {toml_path}: {e}") from e

    config = _parse_config(data, toml_path)
    logger.debug("Loaded config from %s: %s", toml_path, config)
    return config


def _parse_config(data: dict[str, Any], source: Path) -> ReckonConfig:
    """Parse config dict into ReckonConfig."""
    config_data: dict[str, Any] = {}
    for section in ["format", "cli"]:
        if section in data:
            config_data[section] = data[section]

    try:
        return ReckonConfig.model_validate(config_data)
    except PydanticValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise ConfigError(f"Invalid configuration in {source}: {problems}") from e

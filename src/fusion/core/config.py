"""
FUSION configuration models.

Parses fusion.toml and provides typed settings for evaluation and
logging.

Example fusion.toml:

    [evaluation]
    overflow = "wrap"        # or "unbounded"

    [logging]
    level = "DEBUG"
"""

from __future__ import annotations

import logging
import tomllib
from enum import StrEnum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from fusion.core.errors import ConfigError

CONFIG_FILENAME = "fusion.toml"

DEFAULT_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class OverflowMode(StrEnum):
    """How integer results outside the signed 64-bit range are handled."""

    WRAP = "wrap"
    UNBOUNDED = "unbounded"


class EvaluationConfig(BaseModel):
    """Evaluation settings."""

    model_config = ConfigDict(extra="forbid")

    overflow: OverflowMode = OverflowMode.WRAP


class LoggingConfig(BaseModel):
    """Logging settings."""

    model_config = ConfigDict(extra="forbid")

    level: str = "WARNING"
    format: str = DEFAULT_LOG_FORMAT

    def resolved_level(self) -> int:
        level = logging.getLevelName(self.level.upper())
        if not isinstance(level, int):
            raise ConfigError(f"Unknown log level: {self.level}")
        return level


class FusionConfig(BaseModel):
    """Complete configuration."""

    model_config = ConfigDict(extra="forbid")

    evaluation: EvaluationConfig = Field(default_factory=EvaluationConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def load_config(toml_path: Path) -> FusionConfig:
    """
    Load configuration from fusion.toml.

    Args:
        toml_path: Path to fusion.toml file

    Returns:
        FusionConfig with parsed values, or defaults when the file is absent

    Raises:
        ConfigError: If the file is not valid TOML or has invalid settings
    """
    if not toml_path.exists():
        return FusionConfig()

    try:
        with open(toml_path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"Cannot read {toml_path}: {e}") from e

    try:
        return FusionConfig.model_validate(data)
    except PydanticValidationError as e:
        raise ConfigError(f"Invalid configuration in {toml_path}:\n{e}") from e


def configure_logging(config: FusionConfig, verbose: bool = False) -> None:
    """Install a root handler at the configured level (DEBUG when verbose)."""
    level = logging.DEBUG if verbose else config.logging.resolved_level()
    logging.basicConfig(level=level, format=config.logging.format)

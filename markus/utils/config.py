"""Configuration management for the markus CLI."""

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "MARKUS_CONFIG"


class MarkusConfig(BaseModel):
    """markus CLI configuration."""

    model_config = ConfigDict(extra="ignore")

    verbose: bool = Field(default=False, description="Trace intermediate results by default")
    extensions: list[str] = Field(
        default_factory=list,
        description="Extension references (package.module:attribute) registered on startup",
    )
    parameters: dict[str, Any] = Field(
        default_factory=dict, description="Default transform parameters"
    )


def get_config_path() -> Path:
    """Get the path to the markus config file.

    Returns:
        $MARKUS_CONFIG if set, otherwise ~/.markus/config.yaml
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".markus" / "config.yaml"


def load_config() -> MarkusConfig:
    """Load configuration from file.

    Returns:
        MarkusConfig instance with loaded or default values
    """
    config_path = get_config_path()

    if not config_path.exists():
        return MarkusConfig()

    try:
        with open(config_path, "r") as f:
            data = yaml.safe_load(f) or {}
        return MarkusConfig(**data)
    except (OSError, TypeError, yaml.YAMLError, ValidationError) as e:
        # If config file is malformed, return default config
        logger.warning(f"Ignoring malformed config file {config_path}: {e}")
        return MarkusConfig()

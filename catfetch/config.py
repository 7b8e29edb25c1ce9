# catfetch/config.py

import json
import logging
import os
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)

APP_NAME = "catfetch"
CONFIG_FILE = "config.json"
LOGO_FILE = "logo.txt"
DEFAULT_LOGO_TYPE = 1


def config_dir() -> Path:
    """Per-user configuration directory, ~/.config/catfetch."""
    return Path.home() / ".config" / APP_NAME


class Config(BaseModel):
    logo_type: int = DEFAULT_LOGO_TYPE
    logo_file: Optional[Path] = None  # None means config_dir() / LOGO_FILE
    disk_limit: int = 5
    excluded_interfaces: List[str] = Field(default_factory=lambda: ["VMware"])
    gap: int = 1
    log_level: str = "WARNING"
    log_file: Optional[Path] = None

    @field_validator("disk_limit", "gap")
    @classmethod
    def _non_negative(cls, value: int) -> int:
        if value < 0:
            raise ValueError("must be zero or greater")
        return value

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value}")
        return level

    def resolve_logo_file(self) -> Optional[Path]:
        """Path of the user logo file, or None when no home directory can be resolved."""
        if self.logo_file is not None:
            return self.logo_file.expanduser()
        try:
            return config_dir() / LOGO_FILE
        except (RuntimeError, KeyError) as e:
            logger.debug(f"Could not resolve home directory: {e}")
            return None


def _default_config_path() -> Optional[Path]:
    override = os.getenv("CATFETCH_CONFIG")
    if override:
        return Path(override).expanduser()
    try:
        return config_dir() / CONFIG_FILE
    except (RuntimeError, KeyError) as e:
        logger.debug(f"Could not resolve home directory: {e}")
        return None


def _apply_env_overrides(data: dict) -> dict:
    env_map = {
        "CATFETCH_LOG_LEVEL": "log_level",
        "CATFETCH_LOG_FILE": "log_file",
        "CATFETCH_LOGO_FILE": "logo_file",
    }
    for env_name, field_name in env_map.items():
        value = os.getenv(env_name)
        if value:
            data[field_name] = value
    return data


def load_config(config_path: Optional[Path] = None) -> Config:
    """Load settings from the JSON config file, then apply environment overrides.

    A missing, unreadable or invalid file is never fatal: defaults are used instead.
    """
    if config_path is None:
        config_path = _default_config_path()

    data = {}
    if config_path is not None:
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = json.load(f)
            if not isinstance(data, dict):
                raise ValueError("top-level JSON value must be an object")
            logger.debug(f"Loaded configuration from {config_path}")
        except FileNotFoundError:
            logger.debug(f"No configuration file at {config_path}, using defaults")
            data = {}
        except (OSError, json.JSONDecodeError, ValueError) as e:
            logger.warning(f"Failed to read {config_path} ({e}). Using default settings.")
            data = {}

    data = _apply_env_overrides(data)
    try:
        return Config(**data)
    except ValidationError as e:
        logger.warning(f"Invalid configuration ({e.error_count()} errors). Using default settings.")
        return Config()

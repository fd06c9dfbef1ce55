"""Configuration loading for Post-Trade Therapy.

Settings live in ``~/.config/tradetherapy/config.toml``; every key is
optional and falls back to the defaults below.

Example config.toml:

    [storage]
    db_path = "~/journals/therapy.db"

    [buddy]
    base_delay = 1.0
    jitter = 1.0
"""

import logging
import os
from pathlib import Path
from typing import Optional

import toml
from pydantic import BaseModel, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".config" / "tradetherapy"
CONFIG_ENV_VAR = "TRADETHERAPY_CONFIG"


class StorageSettings(BaseModel):
    """Where the journal is stored."""

    db_path: Path = Field(default=CONFIG_DIR / "tradetherapy.db", description="SQLite file")

    @field_validator("db_path")
    @classmethod
    def _expand_user(cls, value: Path) -> Path:
        return value.expanduser()


class BuddySettings(BaseModel):
    """Typing delay used by the chat buddy."""

    base_delay: float = Field(default=1.0, ge=0, description="Fixed delay in seconds")
    jitter: float = Field(default=1.0, ge=0, description="Maximum random extra delay")


class Settings(BaseModel):
    """Application settings."""

    storage: StorageSettings = Field(default_factory=StorageSettings)
    buddy: BuddySettings = Field(default_factory=BuddySettings)


def get_config_path() -> Path:
    """Get the config file path, honoring the environment override."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return CONFIG_DIR / "config.toml"


def load_settings(config_path: Optional[Path] = None) -> Settings:
    """Load settings from a TOML file.

    Args:
        config_path: Optional explicit path. Defaults to get_config_path().

    Returns:
        Parsed settings; defaults when the file is missing or invalid.
    """
    path = config_path or get_config_path()

    if not path.exists():
        return Settings()

    try:
        return Settings.model_validate(toml.load(path))
    except (OSError, toml.TomlDecodeError, ValidationError) as e:
        logger.warning("Ignoring invalid config %s: %s", path, e)
        return Settings()

"""Configuration management."""

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, field_validator

from spider_rules.game.deck import DEFAULT_ASSET_DIR, DEFAULT_ASSET_EXTENSION
from spider_rules.models.variant import DEFAULT_VARIANT, GameVariant


class GameConfig(BaseModel):
    """Game configuration."""

    variant: GameVariant = DEFAULT_VARIANT

    @field_validator("variant", mode="before")
    @classmethod
    def _parse_variant(cls, value: object) -> GameVariant:
        return GameVariant.parse(value)


class AssetsConfig(BaseModel):
    """Card face asset configuration."""

    card_dir: str = DEFAULT_ASSET_DIR
    extension: str = DEFAULT_ASSET_EXTENSION


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"

    @field_validator("level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown logging level: {value!r}")
        return level


class Config(BaseModel):
    """Root configuration."""

    game: GameConfig = GameConfig()
    assets: AssetsConfig = AssetsConfig()
    logging: LoggingConfig = LoggingConfig()


def load_config(path: Path | str | None = None) -> Config:
    """Load configuration from a YAML file.

    Args:
        path: Path to config file. If None or missing, defaults are used.

    Returns:
        Config object.

    Raises:
        yaml.YAMLError: If the file is not valid YAML.
        ValueError: If the file holds something other than a mapping, or a
            section fails validation (pydantic's ValidationError).
    """
    if path is None or not Path(path).exists():
        return Config()

    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        return Config()
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping")

    return Config(**data)

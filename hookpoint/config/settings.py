import os
import tomllib
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from hookpoint.core.logging import get_logger

from .hooks import HookSettings
from .logging import LoggingSettings
from .utils import find_toml_config_file


__all__ = ["Settings", "ConfigurationError", "get_settings"]

ENV_PREFIX = "HOOKPOINT_"


class ConfigurationError(Exception):
    """Raised when configuration loading or validation fails."""

    pass


class Settings(BaseSettings):
    """
    Configuration settings for hookpoint.

    Settings are loaded from environment variables, .env files, and TOML configuration files.
    Environment variables take precedence over both .env and TOML values.
    TOML configuration files are looked up in the following order:
    1. The explicit ``config_path`` argument
    2. The HOOKPOINT_CONFIG_FILE environment variable
    3. .hookpoint.toml or hookpoint.toml in the current directory
    """

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_nested_delimiter="__",
    )

    logging: LoggingSettings = Field(
        default_factory=LoggingSettings,
        description="Logging configuration",
    )

    hooks: HookSettings = Field(
        default_factory=HookSettings,
        description="Hook system configuration",
    )

    @classmethod
    def load_toml_config(cls, toml_path: Path) -> dict[str, Any]:
        """Load configuration from a TOML file."""
        try:
            with toml_path.open("rb") as f:
                return tomllib.load(f)
        except OSError as e:
            raise ConfigurationError(
                f"Cannot read TOML config file {toml_path}: {e}"
            ) from e
        except tomllib.TOMLDecodeError as e:
            raise ConfigurationError(f"Invalid TOML syntax in {toml_path}: {e}") from e

    @classmethod
    def load_config_file(cls, config_path: Path) -> dict[str, Any]:
        """Load configuration from a file based on its extension."""
        suffix = config_path.suffix.lower()

        if suffix in [".toml"]:
            return cls.load_toml_config(config_path)
        else:
            raise ConfigurationError(
                f"Unsupported config file format: {suffix}. "
                "Only TOML (.toml) files are supported."
            )

    @classmethod
    def from_config(
        cls,
        config_path: Path | str | None = None,
        **kwargs: Any,
    ) -> "Settings":
        """Create Settings from a configuration file plus keyword overrides.

        Values set through environment variables are never overwritten by the
        file. Keyword overrides are applied last and win over both; an override
        for a nested section is merged into it and validated.
        """
        if config_path is None:
            config_path_env = os.environ.get(f"{ENV_PREFIX}CONFIG_FILE")
            if config_path_env:
                config_path = Path(config_path_env)

        if isinstance(config_path, str):
            config_path = Path(config_path)

        if config_path is None:
            config_path = find_toml_config_file()

        config_data: dict[str, Any] = {}
        if config_path and config_path.exists():
            config_data = cls.load_config_file(config_path)
            logger = get_logger(__name__)

            logger.info(
                "config_file_loaded",
                path=str(config_path),
                category="config",
            )

        settings = cls()

        for key, value in config_data.items():
            if not hasattr(settings, key):
                continue
            if isinstance(value, dict) and isinstance(
                getattr(settings, key), BaseModel
            ):
                nested_obj = getattr(settings, key)
                file_values = {
                    nested_key: nested_value
                    for nested_key, nested_value in value.items()
                    if os.getenv(f"{ENV_PREFIX}{key.upper()}__{nested_key.upper()}")
                    is None
                }
                try:
                    section = nested_obj.model_validate(
                        {**nested_obj.model_dump(), **file_values}
                    )
                except ValidationError as e:
                    raise ConfigurationError(
                        f"Invalid [{key}] section in {config_path}: {e}"
                    ) from e
                setattr(settings, key, section)

        # Nested sections are rebuilt through validation, never assigned raw
        for key, value in kwargs.items():
            current = getattr(settings, key, None)
            if isinstance(value, dict) and isinstance(current, BaseModel):
                try:
                    value = current.model_validate({**current.model_dump(), **value})
                except ValidationError as e:
                    raise ConfigurationError(
                        f"Invalid {key} override: {e}"
                    ) from e
            setattr(settings, key, value)

        return settings


@lru_cache
def get_settings(config_path: Path | str | None = None) -> Settings:
    """Get the process-wide settings, loaded once per config path."""
    return Settings.from_config(config_path=config_path)

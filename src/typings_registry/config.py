"""Configuration loading.

Settings are loaded in priority order (highest first):
  1. Constructor arguments
  2. Environment variables   (TYPINGS_REGISTRY__LOGGING__LEVEL=DEBUG)
  3. typings-registry.yaml   (searched in cwd, then the platform config dir)
  4. Hardcoded defaults

The config file is optional, every field has a default.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import platformdirs
from pydantic import BaseModel, ConfigDict
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

_APP_NAME = "typings-registry"
_CONFIG_FILE_NAME = f"{_APP_NAME}.yaml"
_DEFAULT_DATA_DIR = platformdirs.user_data_dir(_APP_NAME)


def _find_config_file() -> str | None:
    """Return the path of the first typings-registry.yaml found, or None."""
    candidates = [
        Path(_CONFIG_FILE_NAME),
        Path(platformdirs.user_config_dir(_APP_NAME)) / _CONFIG_FILE_NAME,
    ]
    for path in candidates:
        if path.exists():
            return str(path)
    return None


class DataSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    # Output directory of the definitions parser.
    data_dir: str = _DEFAULT_DATA_DIR
    types_data_file: str = "definitions.json"
    # Root of the DefinitelyTyped checkout.
    definitely_typed_path: str = "."
    not_needed_file: str = "notNeededPackages.json"

    @property
    def types_data_path(self) -> Path:
        return Path(self.data_dir).expanduser() / self.types_data_file

    @property
    def not_needed_path(self) -> Path:
        return Path(self.definitely_typed_path).expanduser() / self.not_needed_file


class LoggingSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    format: Literal["json", "text"] = "json"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        # Double-underscore separates nesting: TYPINGS_REGISTRY__DATA__DATA_DIR=/tmp/data
        env_prefix="TYPINGS_REGISTRY__",
        env_nested_delimiter="__",
        yaml_file=_find_config_file(),
        yaml_file_encoding="utf-8",
        extra="forbid",
    )

    data: DataSettings = DataSettings()
    logging: LoggingSettings = LoggingSettings()

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
        **kwargs: Any,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            YamlConfigSettingsSource(settings_cls),
        )

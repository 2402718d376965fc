"""Application settings

Settings are loaded in order of precedence (highest to lowest):
1. Environment variables (AWSREGION_*)
2. Config file (~/.awsregion/config.toml)
3. Default values
"""

import logging
import sys
from pathlib import Path
from typing import Any, Literal, Type

from pydantic import ConfigDict, field_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from awsregion.models.region import Region, parse_region

# Import tomllib (Python 3.11+) or tomli (Python 3.9-3.10)
if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

logger = logging.getLogger("awsregion")


def get_config_path() -> Path:
    """Get the path to the config file."""
    return Path.home() / ".awsregion" / "config.toml"


class TomlConfigSettingsSource(PydanticBaseSettingsSource):
    """Settings source that reads a settings class's own fields from a TOML file.

    Keys the settings class does not declare are left out, so a narrower
    settings class can share the config file with a wider one.
    """

    def __init__(self, settings_cls: Type[BaseSettings], config_path: Path | None = None):
        super().__init__(settings_cls)
        self.config_path = config_path or get_config_path()
        self._config = self._read_config()

    def _read_config(self) -> dict[str, Any]:
        if not self.config_path.exists():
            return {}
        try:
            with open(self.config_path, "rb") as f:
                data = tomllib.load(f)
        except (OSError, ValueError) as e:
            # TOMLDecodeError and UnicodeDecodeError are both ValueErrors
            logger.warning(f"Ignoring config file {self.config_path}: {e}")
            return {}
        fields = self.settings_cls.model_fields
        return {key: value for key, value in data.items() if key in fields}

    def get_field_value(
        self, field: Any, field_name: str
    ) -> tuple[Any, str, bool]:
        return self._config.get(field_name), field_name, False

    def __call__(self) -> dict[str, Any]:
        return dict(self._config)


class OutputSettings(BaseSettings):
    """Output settings, loadable without validating the rest of the config

    Settings are read from (highest to lowest priority) constructor
    arguments, AWSREGION_* environment variables, then the TOML config file.
    """

    model_config = ConfigDict(
        env_prefix="AWSREGION_",
        case_sensitive=False
    )

    output_format: Literal["table", "json", "csv"] = "table"

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            TomlConfigSettingsSource(settings_cls),
        )


class Settings(OutputSettings):
    """Application settings

    Settings can be configured via:
    - Environment variables: AWSREGION_<SETTING_NAME>
    - Config file: ~/.awsregion/config.toml

    Example config.toml:
        default_region = "eu-west-1"
        output_format = "json"
    """

    default_region: Region = Region.US_EAST_1

    @field_validator("default_region", mode="before")
    @classmethod
    def _parse_default_region(cls, value: Any) -> Any:
        # Identifiers must match exactly; RegionParseError is a ValueError
        if isinstance(value, str):
            return parse_region(value)
        return value


def create_default_config() -> str:
    """Generate default config file content."""
    return '''# awsregion Configuration
# Place this file at ~/.awsregion/config.toml

# Region used when none is given (must be an exact identifier)
# default_region = "us-east-1"

# Output format for CLI commands: table, json or csv
# output_format = "table"
'''

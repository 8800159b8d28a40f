"""Configuration settings for send-no-evil using pydantic-settings."""

import os
from pathlib import Path
from typing import Any

import platformdirs
import yaml
from pydantic import Field, field_validator
from pydantic_core import ValidationError
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from send_no_evil.defaults import APP_NAME, DEFAULT_DIALOG_TITLE, DEFAULT_FORBIDDEN_WORDS
from send_no_evil.exceptions import ConfigError


class YamlConfigSettingsSource(PydanticBaseSettingsSource):
    """Settings source that loads configuration from a YAML file.

    Looks for config file in the following order:
    1. SNOE_CONFIG_FILE environment variable
    2. ./snoe.yaml (current directory)
    3. $XDG_CONFIG_HOME/send-no-evil/config.yaml (defaults to ~/.config)
    """

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Get field value from YAML config."""
        yaml_data = self._load_yaml_config()
        field_value = yaml_data.get(field_name)
        return field_value, field_name, False

    def __call__(self) -> dict[str, Any]:
        """Return all settings from YAML config."""
        return self._load_yaml_config()

    def _load_yaml_config(self) -> dict[str, Any]:
        """Load and cache YAML config file."""
        if not hasattr(self, "_yaml_data"):
            self._yaml_data = self._read_yaml_file()
        return self._yaml_data

    def _read_yaml_file(self) -> dict[str, Any]:
        """Read YAML config from file with improved error messages."""
        xdg_config = os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")
        config_paths = [
            os.environ.get("SNOE_CONFIG_FILE"),
            Path.cwd() / "snoe.yaml",
            Path(xdg_config) / APP_NAME / "config.yaml",
        ]

        for path in config_paths:
            if path:
                path_obj = Path(path)
                if path_obj.exists():
                    try:
                        with open(path_obj) as f:
                            data = yaml.safe_load(f)
                    except yaml.YAMLError as e:
                        mark = getattr(e, "problem_mark", None)
                        raise ConfigError(
                            f"Invalid YAML syntax: {getattr(e, 'problem', None) or e}",
                            file_path=str(path_obj),
                            line=mark.line if mark else None,
                            col=mark.column if mark else None,
                        ) from e
                    except PermissionError as e:
                        raise ConfigError(
                            "Cannot read config file: permission denied",
                            file_path=str(path_obj),
                        ) from e
                    except OSError as e:
                        raise ConfigError(
                            f"Cannot read config file: {e}",
                            file_path=str(path_obj),
                        ) from e

                    if data is None:
                        return {}
                    if not isinstance(data, dict):
                        raise ConfigError(
                            "Top level of the config file must be a mapping",
                            file_path=str(path_obj),
                        )
                    return data

        return {}


def _parse_validation_error(error: ValidationError) -> str:
    """Convert Pydantic ValidationError to user-friendly message."""
    errors = error.errors()
    if not errors:
        return "Unknown validation error"

    for err in errors:
        loc = err.get("loc", ())
        msg = err.get("msg", "")
        if err.get("type") == "missing" and loc:
            return f"Missing required field '{loc[-1]}'"
        if loc:
            field_name = ".".join(str(part) for part in loc)
            return f"Invalid value for '{field_name}': {msg}"

    return str(error)


class Settings(BaseSettings):
    """Application settings loaded from environment variables with SNOE_ prefix.

    Example YAML config:
        store_file: "~/.config/send-no-evil/settings.yaml"
        default_forbidden_words:
          - confidential
          - secret
        dialog_title: "Security check"

    The forbidden word list and the check flags themselves live in the
    configuration store at ``store_file``, not here.
    """

    model_config = SettingsConfigDict(env_prefix="SNOE_")

    store_file: Path | None = None
    default_forbidden_words: list[str] = Field(
        default_factory=lambda: list(DEFAULT_FORBIDDEN_WORDS),
        description="Words used when the store holds no forbidden words",
    )
    dialog_title: str = DEFAULT_DIALOG_TITLE

    @field_validator("default_forbidden_words")
    @classmethod
    def _strip_default_words(cls, v: list[str]) -> list[str]:
        return [word.strip() for word in v if word.strip()]

    @field_validator("store_file")
    @classmethod
    def _expand_store_file(cls, v: Path | None) -> Path | None:
        return v.expanduser() if v is not None else None

    def get_store_path(self) -> Path:
        """Return the configuration store location, defaulting to the user config dir."""
        if self.store_file is not None:
            return self.store_file
        return Path(platformdirs.user_config_dir(APP_NAME)) / "settings.yaml"

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customize settings sources to include YAML config."""
        return (
            init_settings,
            env_settings,
            YamlConfigSettingsSource(settings_cls),
            dotenv_settings,
            file_secret_settings,
        )


def get_settings_eager() -> Settings:
    """Load settings with eager validation at startup.

    Raises:
        ConfigError: If configuration is invalid, with a user-friendly message.
    """
    try:
        return Settings()
    except ValidationError as e:
        raise ConfigError(_parse_validation_error(e)) from e

"""Configuration file loading and validation."""

import logging
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)

from .consts import LOG_FILE_DEFAULT, LONG_TEXTAREA_ROWS, MAX_IMAGE_THUMBNAILS, TEXTAREA_ROWS
from .enums import Language
from .errors import ConfigException

logger = logging.getLogger(__name__)


class FormConfig(BaseModel):
    """Form engine presentation settings."""

    textarea_rows: int = Field(default=TEXTAREA_ROWS, ge=1)
    long_textarea_rows: int = Field(default=LONG_TEXTAREA_ROWS, ge=1)
    max_image_thumbnails: int = Field(default=MAX_IMAGE_THUMBNAILS, ge=0)
    submit_button_text: str = "Submit"


class EditorConfig(BaseModel):
    """Post editor settings."""

    require_both_languages: bool = True


class WebConfig(BaseModel):
    """Web service configuration."""

    host: str = Field(default="127.0.0.1")
    port: int = Field(default=8000, ge=1, le=65535)
    debug: bool = Field(default=False)


class Config(BaseSettings):
    """Application configuration."""

    language: Language = Field(default=Language.EN)
    log_file: str = Field(default=LOG_FILE_DEFAULT)

    forms: FormConfig = Field(default_factory=FormConfig)
    editor: EditorConfig = Field(default_factory=EditorConfig)
    web: WebConfig = Field(default_factory=WebConfig)

    model_config = SettingsConfigDict(
        env_prefix="MEDCMS_",
        env_nested_delimiter="__",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
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

    @classmethod
    def load_from_file(cls, config_path: str) -> "Config":
        """Load configuration from specified path."""
        path = Path(config_path)
        if not path.exists():
            raise ConfigException(f"Configuration file not found: {config_path}")

        class _Config(cls):
            model_config = SettingsConfigDict(
                toml_file=str(path),
                env_prefix="MEDCMS_",
                env_nested_delimiter="__",
            )

        try:
            return _Config()
        except ValidationError as e:
            error_lines = ["Configuration validation failed:"]
            for error in e.errors():
                loc = " -> ".join(str(item) for item in error["loc"])
                error_lines.append(f"  - {loc}: {error['msg']}")
            raise ConfigException("\n".join(error_lines)) from e
        except ValueError as e:
            # tomllib.TOMLDecodeError subclasses ValueError
            raise ConfigException(f"Invalid TOML syntax: {e}") from e

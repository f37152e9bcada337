"""Configuration file loading and validation."""

import logging
from pathlib import Path
from typing import Dict, List, Optional, Union

import tomlkit
from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)

from .consts import (
    DATABASE_PATH,
    DEFAULT_TAB_LABEL_FORMAT,
    ENV_NESTED_DELIMITER,
    ENV_PREFIX,
    LOG_FILE_DEFAULT,
)
from .errors import ConfigException

logger = logging.getLogger(__name__)


class LocaleConfig(BaseModel):
    """Detailed locale entry, e.g. ``{name = "Uk", native = "українська"}``."""

    name: Optional[str] = None
    native: Optional[str] = None


LocaleEntries = Union[Dict[str, Union[LocaleConfig, str]], List[str]]


def _validate_locale_codes(v):
    if v is None:
        return v

    codes = list(v.keys()) if isinstance(v, dict) else list(v)
    for code in codes:
        if not isinstance(code, str) or not code.strip():
            raise ValueError("Locale code cannot be empty")
    if len(set(codes)) != len(codes):
        raise ValueError(f"Duplicate locale codes: {codes}")
    return v


class SharedTranslatableConfig(BaseModel):
    """Locales shared with the translation storage layer.

    Used only when the package-level ``locales`` list is empty.
    """

    supported_locales: Optional[LocaleEntries] = None

    @field_validator("supported_locales")
    @classmethod
    def validate_supported_locales(cls, v):
        return _validate_locale_codes(v)


class Config(BaseSettings):
    """Package configuration."""

    locale: str = Field(default="en")
    locales: Optional[LocaleEntries] = None
    badge_style: Optional[str] = None
    tab_label_format: str = Field(default=DEFAULT_TAB_LABEL_FORMAT)
    database_path: str = Field(default=DATABASE_PATH)
    log_file: str = Field(default=LOG_FILE_DEFAULT)

    translatable: SharedTranslatableConfig = Field(default_factory=SharedTranslatableConfig)

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_nested_delimiter=ENV_NESTED_DELIMITER,
    )

    @field_validator("locale")
    @classmethod
    def validate_locale(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Application locale cannot be empty")
        return v.strip()

    @field_validator("locales")
    @classmethod
    def validate_locales(cls, v):
        return _validate_locale_codes(v)

    @field_validator("tab_label_format")
    @classmethod
    def validate_tab_label_format(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("tab_label_format cannot be empty")
        return v

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
                env_prefix=ENV_PREFIX,
                env_nested_delimiter=ENV_NESTED_DELIMITER,
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
            # tomllib.TOMLDecodeError is a ValueError
            raise ConfigException(f"Invalid TOML syntax in {config_path}: {e}") from e


def default_config_document() -> tomlkit.TOMLDocument:
    """Build the commented default configuration file."""
    doc = tomlkit.document()
    doc.add(tomlkit.comment("Application locale, used when no locales are configured below."))
    doc.add("locale", "en")
    doc.add(tomlkit.nl())

    doc.add(tomlkit.comment("Locales available in forms. Either a simple list of codes:"))
    doc.add(tomlkit.comment('  locales = ["en", "uk", "de"]'))
    doc.add(tomlkit.comment("or detailed tables:"))
    doc.add(tomlkit.comment("  [locales.uk]"))
    doc.add(tomlkit.comment('  name = "Uk"'))
    doc.add(tomlkit.comment('  native = "українська"'))
    doc.add(tomlkit.comment("Leave unset to fall back to [translatable] supported_locales."))
    doc.add(tomlkit.nl())

    doc.add(tomlkit.comment("Inline CSS for the locale badge next to translatable field labels."))
    doc.add(tomlkit.comment("Unset uses a pill-shaped badge in the primary color."))
    doc.add(tomlkit.comment('badge_style = "color: white; background-color: #2563eb;"'))
    doc.add(tomlkit.nl())

    doc.add(tomlkit.comment("Locale tab labels. Placeholders: {CODE} (EN), {code} (en), {name} (English)."))
    doc.add("tab_label_format", DEFAULT_TAB_LABEL_FORMAT)
    doc.add(tomlkit.nl())

    doc.add(tomlkit.comment("SQLite file used by `init-db` and translation storage."))
    doc.add("database_path", DATABASE_PATH)
    doc.add(tomlkit.comment("Log file, overridden by --log-file."))
    doc.add("log_file", LOG_FILE_DEFAULT)
    doc.add(tomlkit.nl())

    translatable = tomlkit.table()
    translatable.add(tomlkit.comment("Locales shared with translation storage, same formats as `locales`."))
    translatable.add("supported_locales", tomlkit.array())
    doc.add("translatable", translatable)

    return doc


def publish_default_config(config_path: str, force: bool = False) -> Path:
    """Write the default configuration file, refusing to overwrite unless forced."""
    path = Path(config_path)
    if path.exists() and not force:
        raise ConfigException(f"Configuration file already exists: {config_path}")

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(tomlkit.dumps(default_config_document()), encoding="utf-8")
    logger.info(f"Default configuration written to {path}")
    return path

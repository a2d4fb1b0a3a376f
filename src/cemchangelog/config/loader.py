"""Configuration loading with pydantic-settings.

Supports loading configuration from multiple sources with precedence:
1. Direct kwargs (highest priority)
2. Environment variables (CEM_CHANGELOG__SECTION__KEY)
3. YAML config file (.cem-changelog.yaml in the working directory, or an explicit path)
4. Built-in defaults (lowest priority)
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from cemchangelog.config.models import CemChangelogConfig, ChangelogConfig, LoggingConfig
from cemchangelog.core.errors import ConfigError

DEFAULT_CONFIG_FILENAME = ".cem-changelog.yaml"


def _load_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    try:
        with path.open() as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError.parse_error(str(path), str(e)) from e
    if not isinstance(data, dict):
        raise ConfigError.parse_error(str(path), "top-level value must be a mapping")
    return data


class _YamlSource(PydanticBaseSettingsSource):
    """Settings source that reads from pre-loaded YAML config."""

    def __init__(self, settings_cls: type[BaseSettings], yaml_config: dict[str, Any]) -> None:
        super().__init__(settings_cls)
        self._yaml_config = yaml_config

    def get_field_value(
        self,
        field: Any,  # noqa: ARG002
        field_name: str,
    ) -> tuple[Any, str, bool]:
        val = self._yaml_config.get(field_name)
        return val, field_name, val is not None

    def __call__(self) -> dict[str, Any]:
        return self._yaml_config


def _make_settings_class(yaml_config: dict[str, Any]) -> type[BaseSettings]:
    """Create a Settings class with instance-based YAML source (thread-safe)."""

    class CemChangelogSettings(BaseSettings):
        """Root config. Env vars: CEM_CHANGELOG__LOGGING__LEVEL, etc."""

        model_config = SettingsConfigDict(
            env_prefix="CEM_CHANGELOG__",
            env_nested_delimiter="__",
            case_sensitive=False,
        )

        logging: LoggingConfig = LoggingConfig()
        changelog: ChangelogConfig = ChangelogConfig()

        @classmethod
        def settings_customise_sources(
            cls,
            settings_cls: type[BaseSettings],
            init_settings: PydanticBaseSettingsSource,
            env_settings: PydanticBaseSettingsSource,
            dotenv_settings: PydanticBaseSettingsSource,  # noqa: ARG003
            file_secret_settings: PydanticBaseSettingsSource,  # noqa: ARG003
        ) -> tuple[PydanticBaseSettingsSource, ...]:
            # Precedence (first wins): init kwargs > env vars > yaml file
            return (init_settings, env_settings, _YamlSource(settings_cls, yaml_config))

    return CemChangelogSettings


def load_config(config_path: Path | None = None, **kwargs: Any) -> CemChangelogConfig:
    """Load config: defaults < YAML file < env vars < kwargs.

    Args:
        config_path: Explicit YAML file. When omitted, ``.cem-changelog.yaml`` in the
                     current working directory is used if it exists.
        **kwargs: Override values per section (highest precedence),
                  e.g. ``changelog={"type_src": "type"}``.

    Returns:
        Fully resolved configuration object.

    Raises:
        ConfigError: On a missing explicit file, invalid YAML, or validation errors.
    """
    if config_path is not None:
        if not config_path.exists():
            raise ConfigError.file_not_found(str(config_path))
        yaml_config = _load_yaml(config_path)
    else:
        yaml_config = _load_yaml(Path.cwd() / DEFAULT_CONFIG_FILENAME)

    settings_cls = _make_settings_class(yaml_config)
    try:
        settings = settings_cls(**kwargs)
    except ValidationError as e:
        err = e.errors()[0]
        field = ".".join(str(loc) for loc in err["loc"])
        raise ConfigError.invalid_value(field, err.get("input"), err["msg"]) from e
    return CemChangelogConfig(
        logging=settings.logging,  # type: ignore[attr-defined]
        changelog=settings.changelog,  # type: ignore[attr-defined]
    )


def merge_overrides(config: ChangelogConfig, **overrides: Any) -> ChangelogConfig:
    """Return a copy of ``config`` with the non-None ``overrides`` applied."""
    updates = {key: value for key, value in overrides.items() if value is not None}
    if not updates:
        return config
    return config.model_copy(update=updates)

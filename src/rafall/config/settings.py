"""Unified settings — CLI flags, env vars, and the JSON site config.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``RAFALL_*`` prefix, ``__`` for nested fields
  3. JSON file    — ``etc/rafall.conf`` under the project root, or ``--conf``
  4. Code defaults — baked into the section models

The JSON file is a flat string map, so it only ever fills the ``site``
field; generator options come from env vars or code defaults.
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from rafall.config.loader import DEFAULT_CONFIG_PATH, load_config
from rafall.config.models import GeneratorConfig
from rafall.domain.errors import ConfigError


class JsonConfigSource(PydanticBaseSettingsSource):
    """Expose the site config file as the ``site`` settings field."""

    def __init__(self, settings_cls: type[BaseSettings], config_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if config_path is not None:
            self._data = {"site": load_config(config_path)}

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# Thread-local storage for the config path during construction.
_tls = threading.local()


class RafallSettings(BaseSettings):
    """Unified, frozen settings for one rafall run.

    Attributes:
        project_root: Directory the source dir and default config resolve
            against (CWD unless given).
        config_path: The site config file actually loaded, if any.
        site: String map from the site config file.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "RAFALL_",
        "env_nested_delimiter": "__",
    }

    project_root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    site: dict[str, str] = Field(default_factory=dict)
    generator: GeneratorConfig = Field(default_factory=GeneratorConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert the JSON config source between env vars and defaults."""
        config_path = getattr(_tls, "config_path", None)
        return (
            init_settings,
            env_settings,
            JsonConfigSource(settings_cls, config_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        project_root: Path | None = None,
        **cli_flags: Any,
    ) -> RafallSettings:
        """Construct settings from a CLI invocation.

        An explicit *config_path* must exist. Without one, the default
        ``etc/rafall.conf`` under *project_root* is used when present.

        Raises:
            ConfigError: The explicit config file is missing or invalid.
        """
        resolved_root = project_root if project_root is not None else Path.cwd()

        path: Path | None
        if config_path:
            path = Path(config_path)
            if not path.is_file():
                msg = f"Config file not found: {path}"
                raise ConfigError(msg)
        else:
            default = resolved_root / DEFAULT_CONFIG_PATH
            path = default if default.is_file() else None

        _tls.config_path = path
        try:
            return cls(
                project_root=resolved_root,
                config_path=path,
                **cli_flags,
            )
        finally:
            _tls.config_path = None

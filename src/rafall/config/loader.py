"""Site config file loading.

The config file is a JSON object mapping string keys to string values::

    {"siteName": "Rafall", "subtitle": "Random stuff"}
"""

from __future__ import annotations

from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from rafall.domain.errors import ConfigError

DEFAULT_CONFIG_PATH = Path("etc") / "rafall.conf"

_SITE_MAP = TypeAdapter(dict[str, str])


def _config_error(exc: ValidationError) -> ConfigError:
    errors = exc.errors()
    first = errors[0]
    if first["type"] == "json_invalid":
        return ConfigError(f"Invalid JSON in config: {first['msg']}")
    if not first["loc"]:
        return ConfigError(f"Config must be a JSON object, got {type(first['input']).__name__}")
    bad = sorted({str(error["loc"][0]) for error in errors})
    return ConfigError(f"Config values must be strings: {', '.join(bad)}")


def read_config(content: bytes | str) -> dict[str, str]:
    """Decode *content* as a JSON object of strings.

    Raises:
        ConfigError: Invalid JSON, a non-object document, or a non-string value.
    """
    try:
        return _SITE_MAP.validate_json(content)
    except ValidationError as exc:
        raise _config_error(exc) from exc


def load_config(path: Path) -> dict[str, str]:
    """Read and decode the config file at *path*."""
    try:
        raw = path.read_bytes()
    except OSError as exc:
        msg = f"Cannot read config file {path}: {exc.strerror or exc}"
        raise ConfigError(msg) from exc
    try:
        return read_config(raw)
    except ConfigError as exc:
        msg = f"{path}: {exc}"
        raise ConfigError(msg) from exc

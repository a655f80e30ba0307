"""Service configuration from defaults, a YAML file and environment variables."""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

DEFAULT_SEARCH_PATHS = (".", "./config", "/etc/wallet_service/")
_FILE_NAMES = ("config.yaml", "config.yml", "config")
_ENV_PREFIX = "WALLET"

_FIELD_TYPES: dict[str, type] = {
    "server.port": int,
    "repository.type": str,
    "repository.segment_count": int,
    "database.host": str,
    "database.port": int,
    "database.user": str,
    "database.password": str,
    "database.dbname": str,
}

_EXTRA_ENV_NAMES = {"server.port": ("PORT",)}


class ConfigError(Exception):
    """Raised when the configuration cannot be read or interpreted."""


@dataclass
class ServerConfig:
    port: int = 8080


@dataclass
class DatabaseConfig:
    host: str = "localhost"
    port: int = 3306
    user: str = "root"
    password: str = ""
    dbname: str = "wallet"


@dataclass
class RepositoryConfig:
    type: str = "memory"
    segment_count: int = 64


@dataclass
class Config:
    server: ServerConfig = field(default_factory=ServerConfig)
    database: DatabaseConfig = field(default_factory=DatabaseConfig)
    repository: RepositoryConfig = field(default_factory=RepositoryConfig)


def _find_config_file(search_paths: Iterable[str | os.PathLike[str]]) -> Path | None:
    for directory in search_paths:
        for name in _FILE_NAMES:
            candidate = Path(directory) / name
            if candidate.is_file():
                return candidate
    return None


def _read_file(search_paths: Iterable[str | os.PathLike[str]]) -> dict[str, Any]:
    path = _find_config_file(search_paths)
    if path is None:
        return {}
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as exc:
        raise ConfigError(f"failed to read config: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise ConfigError(f"failed to read config: {path} does not hold a mapping")

    values: dict[str, Any] = {}
    for section, entries in data.items():
        if not isinstance(entries, Mapping):
            continue
        for name, value in entries.items():
            key = f"{section}.{name}".lower()
            if key in _FIELD_TYPES and value is not None:
                values[key] = value
    return values


def _env_names(key: str) -> tuple[str, ...]:
    upper = key.upper()
    return (
        *_EXTRA_ENV_NAMES.get(key, ()),
        f"{_ENV_PREFIX}_{upper.replace('.', '_')}",
        f"{_ENV_PREFIX}_{upper}",
    )


def _convert(key: str, value: Any) -> Any:
    if _FIELD_TYPES[key] is int:
        candidate = value.strip() if isinstance(value, str) else value
        try:
            return int(candidate)
        except (TypeError, ValueError):
            raise ValueError(f"{key}: cannot parse {value!r} as an integer") from None
    return str(value)


def _build(values: Mapping[str, Any]) -> Config:
    sections: dict[str, dict[str, Any]] = {"server": {}, "database": {}, "repository": {}}
    for key, value in values.items():
        section, name = key.split(".", 1)
        sections[section][name] = _convert(key, value)
    return Config(
        server=ServerConfig(**sections["server"]),
        database=DatabaseConfig(**sections["database"]),
        repository=RepositoryConfig(**sections["repository"]),
    )


def load(
    search_paths: Iterable[str | os.PathLike[str]] | None = None,
    environ: Mapping[str, str] | None = None,
) -> Config:
    """Load configuration: defaults, then the first config file found, then environment."""
    paths = DEFAULT_SEARCH_PATHS if search_paths is None else search_paths
    env = os.environ if environ is None else environ

    values = _read_file(paths)
    for key in _FIELD_TYPES:
        for name in _env_names(key):
            if env.get(name):
                values[key] = env[name]
                break

    try:
        return _build(values)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"failed to unmarshal config: {exc}") from exc
"""Configuration loading utilities for the SimpleDB console and viewer."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Mapping, MutableMapping

import yaml

from . import paths
from .exceptions import ConfigurationError

DEFAULT_REGION = "eu-west-1"
DEFAULT_WEB_HOST = "127.0.0.1"
DEFAULT_WEB_PORT = 8080


@dataclass(frozen=True, slots=True)
class SimpleDBSettings:
    """Remote store connection settings (credentials are supplied separately)."""

    region: str
    endpoint_url: str | None


@dataclass(frozen=True, slots=True)
class WebSettings:
    """Bind address for the read-only web viewer."""

    host: str
    port: int


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Top-level application configuration."""

    source_path: Path
    simpledb: SimpleDBSettings
    web: WebSettings

    def with_simpledb(self, *, region: str | None = None, endpoint_url: str | None = None) -> AppConfig:
        """Return a copy with command-line overrides for the store connection applied."""
        updated = self.simpledb
        if region:
            updated = replace(updated, region=region)
        if endpoint_url:
            updated = replace(updated, endpoint_url=endpoint_url)
        return replace(self, simpledb=updated)


def _default_config() -> dict[str, Any]:
    return {
        "simpledb": {
            "region": DEFAULT_REGION,
            "endpoint_url": None,
        },
        "web": {
            "host": DEFAULT_WEB_HOST,
            "port": DEFAULT_WEB_PORT,
        },
    }


ENV_OVERRIDE_SPEC: dict[str, tuple[str, type]] = {
    "simpledb.region": ("SDBCLI_REGION", str),
    "simpledb.endpoint_url": ("SDBCLI_ENDPOINT_URL", str),
    "web.host": ("SDBCLI_WEB_HOST", str),
    "web.port": ("SDBCLI_WEB_PORT", int),
}


def load_config(
    config_path: str | Path | None = None,
    env: Mapping[str, str] | None = None,
) -> AppConfig:
    """Load configuration from defaults, YAML file, and env overrides."""
    env = dict(env or os.environ)
    resolved_config_path = _resolve_config_path(config_path, env)
    file_data = _load_yaml(resolved_config_path)
    merged: dict[str, Any] = _deep_merge(_default_config(), file_data)
    merged = _apply_env_overrides(merged, env)
    return _build_config(merged, resolved_config_path)


def _resolve_config_path(config_path: str | Path | None, env: Mapping[str, str]) -> Path:
    if config_path:
        return paths.resolve_path(config_path)
    return paths.default_config_path(env=env)


def _load_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    with path.open("r", encoding="utf-8") as handle:
        try:
            data = yaml.safe_load(handle) or {}
        except yaml.YAMLError as exc:
            raise ConfigurationError(f"Config file at {path} is not valid YAML: {exc}") from exc
        if not isinstance(data, MutableMapping):
            raise ConfigurationError(f"Config file at {path} must define a mapping root object.")
        return dict(data)


def _deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    result = dict(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], Mapping) and isinstance(value, Mapping):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _apply_env_overrides(config: dict[str, Any], env: Mapping[str, str]) -> dict[str, Any]:
    config_copy = _deep_merge(config, {})
    for dotted_key, (env_key, expected_type) in ENV_OVERRIDE_SPEC.items():
        if env_key not in env:
            continue
        raw_value = env[env_key]
        try:
            value = _coerce_env_value(raw_value, expected_type)
        except ValueError as exc:
            raise ConfigurationError(
                f"Environment override {env_key} has invalid value '{raw_value}': {exc}"
            ) from exc
        _assign_nested(config_copy, dotted_key.split("."), value)
    return config_copy


def _coerce_env_value(raw: str, expected_type: type) -> Any:
    cleaned = raw.strip()
    if expected_type is int:
        return int(cleaned)
    return cleaned


def _assign_nested(target: MutableMapping[str, Any], keys: list[str], value: Any) -> None:
    current = target
    for key in keys[:-1]:
        if key not in current or not isinstance(current[key], MutableMapping):
            current[key] = {}
        current = current[key]  # type: ignore[assignment]
    current[keys[-1]] = value


def _build_config(data: Mapping[str, Any], source_path: Path) -> AppConfig:
    try:
        sdb_cfg = data["simpledb"]
        endpoint_url = sdb_cfg.get("endpoint_url")
        simpledb = SimpleDBSettings(
            region=str(sdb_cfg["region"]),
            endpoint_url=str(endpoint_url) if endpoint_url else None,
        )
        web_cfg = data["web"]
        web = WebSettings(host=str(web_cfg["host"]), port=int(web_cfg["port"]))
    except (AttributeError, KeyError, TypeError, ValueError) as exc:
        raise ConfigurationError(f"Invalid configuration structure: {exc}") from exc

    if not simpledb.region:
        raise ConfigurationError("simpledb.region must not be empty.")
    if not 0 < web.port < 65536:
        raise ConfigurationError(f"web.port must be between 1 and 65535, got {web.port}.")

    return AppConfig(source_path=source_path, simpledb=simpledb, web=web)

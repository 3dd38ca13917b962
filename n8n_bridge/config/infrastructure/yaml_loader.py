"""YAML config loader — parses, interpolates env vars, applies overrides, validates."""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from n8n_bridge.config.domain.config import BotConfig
from n8n_bridge.config.domain.observer import ConfigObserver
from n8n_bridge.config.infrastructure.env_interpolation import (
    collect_missing_vars,
    interpolate,
)
from n8n_bridge.config.infrastructure.errors import (
    ConfigLoadError,
    ConfigValidationError,
    MissingEnvVarsError,
)

# Environment variable -> (section, field). A non-empty variable wins over the file.
ENV_OVERRIDES: dict[str, tuple[str, str]] = {
    "N8N_AGENT_URL": ("agent", "agent_url"),
    "N8N_API_KEY": ("agent", "api_key"),
    "OPENWEATHERMAP_API_URL": ("weather", "api_url"),
    "OPENWEATHERMAP_API_KEY": ("weather", "api_key"),
}


class YamlConfigLoader:
    """Loads, interpolates, overrides, validates, and returns a BotConfig."""

    def __init__(self, observer: ConfigObserver) -> None:
        self._observer = observer

    def load(self, path: Path | None) -> BotConfig:
        """
        Load a BotConfig from a YAML file, or from the environment alone when
        path is None.

        Raises:
            ConfigLoadError: if the file does not exist or is not valid YAML.
            MissingEnvVarsError: if any ${ENV_VAR} references are unset (all collected first).
            ConfigValidationError: if the data does not match the BotConfig schema.
        """
        raw = _parse_yaml(path=path) if path is not None else {}
        _check_missing_env_vars(raw=raw)
        interpolated = interpolate(raw)
        overridden = _apply_env_overrides(data=interpolated, observer=self._observer)
        cfg = _build_config(data=overridden)
        self._observer.config_loaded(
            source=str(path) if path is not None else "environment",
            agent_configured=cfg.agent.is_complete,
        )
        return cfg


def _parse_yaml(path: Path) -> dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
    except FileNotFoundError as exc:
        raise ConfigLoadError(path) from exc
    except yaml.YAMLError as exc:
        raise ConfigLoadError(path, reason="invalid YAML") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigValidationError("top level of the config file must be a mapping")
    return data


def _check_missing_env_vars(raw: Any) -> None:
    """Raise MissingEnvVarsError if any ${ENV_VAR} references in raw are unset."""
    missing = collect_missing_vars(raw)
    if missing:
        raise MissingEnvVarsError(missing)


def _apply_env_overrides(data: Any, observer: ConfigObserver) -> dict[str, Any]:
    result: dict[str, Any] = dict(data)
    for variable, (section, key) in ENV_OVERRIDES.items():
        value = os.environ.get(variable)
        if not value:
            continue
        current = result.get(section)
        merged = dict(current) if isinstance(current, dict) else {}
        merged[key] = value
        result[section] = merged
        observer.config_env_override_applied(variable=variable)

    # An empty section ("agent:" with nothing under it) means "use the defaults".
    return {name: section for name, section in result.items() if section is not None}


def _build_config(data: dict[str, Any]) -> BotConfig:
    try:
        return BotConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigValidationError(str(exc)) from exc

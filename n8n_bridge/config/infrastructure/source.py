"""ConfigSource — hands out a fresh BotConfig snapshot on every call."""

from pathlib import Path

from n8n_bridge.config.domain.config import BotConfig
from n8n_bridge.config.infrastructure.yaml_loader import YamlConfigLoader


class ConfigSource:
    """Re-reads the configuration each time current() is called.

    Nothing is cached, so edits to the file or the environment take effect on
    the next call without a restart. Callers take one snapshot per request.
    """

    def __init__(self, path: Path | None, loader: YamlConfigLoader) -> None:
        self._path = path
        self._loader = loader

    def current(self) -> BotConfig:
        return self._loader.load(self._path)

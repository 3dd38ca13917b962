"""Observer port for the config domain — defines events in domain language."""

from typing import Protocol


class ConfigObserver(Protocol):
    def config_loaded(self, source: str, agent_configured: bool) -> None: ...

    def config_env_override_applied(self, variable: str) -> None: ...

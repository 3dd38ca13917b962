"""Structlog implementation of the ConfigObserver port."""

import structlog


class StructlogConfigObserver:
    """Delegates config domain events to structlog.

    Satisfies the ConfigObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def config_loaded(self, source: str, agent_configured: bool) -> None:
        self._log.debug(
            "config.loaded", source=source, agent_configured=agent_configured
        )

    def config_env_override_applied(self, variable: str) -> None:
        self._log.debug("config.env_override_applied", variable=variable)

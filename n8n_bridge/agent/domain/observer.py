"""AgentObserver port — domain events emitted while bridging to the agent."""

from typing import Protocol


class AgentObserver(Protocol):
    """Observer port for agent bridge domain events.

    Implementations may log to structlog or record for tests.
    """

    def agent_config_missing(self, user_id: str) -> None: ...

    def agent_request_failed(self, user_id: str, reason: str) -> None: ...

    def agent_reply_malformed(self, user_id: str, reason: str) -> None: ...

    def agent_reply_empty(self, user_id: str) -> None: ...

    def agent_reply_received(self, user_id: str, structured: bool) -> None: ...

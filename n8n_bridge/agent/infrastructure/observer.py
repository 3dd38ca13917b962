"""Structlog implementation of the AgentObserver port."""

import structlog


class StructlogAgentObserver:
    """Delegates agent bridge domain events to structlog.

    Satisfies the AgentObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def agent_config_missing(self, user_id: str) -> None:
        self._log.error(
            "agent.config_missing",
            user_id=user_id,
            message="n8n agent URL or API key is not configured",
        )

    def agent_request_failed(self, user_id: str, reason: str) -> None:
        self._log.error("agent.request_failed", user_id=user_id, reason=reason)

    def agent_reply_malformed(self, user_id: str, reason: str) -> None:
        self._log.warning(
            "agent.reply_malformed",
            user_id=user_id,
            reason=reason,
            message="JSON parse error, using raw content",
        )

    def agent_reply_empty(self, user_id: str) -> None:
        self._log.error("agent.reply_empty", user_id=user_id)

    def agent_reply_received(self, user_id: str, structured: bool) -> None:
        self._log.info("agent.reply_received", user_id=user_id, structured=structured)

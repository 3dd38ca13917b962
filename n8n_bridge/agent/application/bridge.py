"""AgentBridge — forwards a user prompt to the n8n AI workflow and normalizes the reply."""

from n8n_bridge.agent.domain.observer import AgentObserver
from n8n_bridge.agent.domain.reply import (
    decode,
    extract_message,
    is_structured,
    strip_leading_newlines,
    unreadable_reason,
)
from n8n_bridge.agent.domain.request import AgentRequest
from n8n_bridge.agent.domain.result import AgentResult
from n8n_bridge.config.domain.agent import AgentConfig
from n8n_bridge.transport.domain.transport import Transport

MISSING_CONFIG_MESSAGE = (
    "No n8n URL or API key provided. Please contact the developer to add valid"
    " configuration!"
)
EMPTY_RESPONSE_MESSAGE = "Empty response from API."
UNREADABLE_REPLY_MESSAGE = "Could not deserialize response from n8n AI Workflow!"
_TRANSPORT_ERROR_MESSAGE = "ask: Unknown HTTP error occurred"


class AgentBridge:
    """Translates a prompt into one agent call and its reply into an AgentResult.

    Holds no per-call state. The configuration snapshot is supplied by the
    caller on every ask(), so the latest configuration always applies.
    """

    def __init__(self, transport: Transport, observer: AgentObserver) -> None:
        self._transport = transport
        self._observer = observer

    async def ask(self, prompt: str, user_id: str, config: AgentConfig) -> AgentResult:
        """Send the prompt to the agent and return (success, message).

        Never raises; every failure is reported as an unsuccessful result with
        a readable message.
        """
        if not config.is_complete:
            self._observer.agent_config_missing(user_id=user_id)
            return AgentResult(success=False, message=MISSING_CONFIG_MESSAGE)

        request = AgentRequest(prompt=prompt, user_id=user_id)
        response = await self._transport.send(
            config.agent_url,
            method="POST",
            headers=[("Content-Type", "application/json"), ("ApiKey", config.api_key)],
            json_body=request.to_wire(),
            error_message=_TRANSPORT_ERROR_MESSAGE,
        )

        if not response.success:
            message = response.content or EMPTY_RESPONSE_MESSAGE
            self._observer.agent_request_failed(user_id=user_id, reason=message)
            return AgentResult(success=False, message=strip_leading_newlines(message))

        body = (response.content or "").strip()
        message = self._read_body(body=body, user_id=user_id)

        if not message.strip():
            self._observer.agent_reply_empty(user_id=user_id)
            return AgentResult(
                success=False, message=strip_leading_newlines(UNREADABLE_REPLY_MESSAGE)
            )

        return AgentResult(success=True, message=strip_leading_newlines(message))

    def _read_body(self, body: str, user_id: str) -> str:
        """Extract the reply text from a trimmed body, plain or structured."""
        structured = is_structured(body)
        self._observer.agent_reply_received(user_id=user_id, structured=structured)
        if not structured:
            return body

        outcome = decode(body)
        reason = unreadable_reason(outcome)
        if reason is not None:
            self._observer.agent_reply_malformed(user_id=user_id, reason=reason)
        return extract_message(body=body, outcome=outcome)

"""Agent configuration model — where the n8n AI workflow lives and how to authenticate."""

from pydantic import BaseModel


class AgentConfig(BaseModel, frozen=True):
    """Snapshot of the agent settings.

    Empty values are allowed here; the bridge turns them into a user-visible
    configuration failure instead of a load error.
    """

    agent_url: str = ""
    api_key: str = ""

    @property
    def is_complete(self) -> bool:
        return bool(self.agent_url.strip()) and bool(self.api_key.strip())

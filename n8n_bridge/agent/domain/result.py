"""AgentResult value object — the caller-visible outcome of one ask() call."""

from pydantic import BaseModel, ConfigDict


class AgentResult(BaseModel):
    """Immutable (success, message) pair. The message is always readable text."""

    model_config = ConfigDict(frozen=True)

    success: bool
    message: str

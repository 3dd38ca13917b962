"""AgentRequest value object — the payload posted to the n8n AI workflow."""

from pydantic import BaseModel, ConfigDict, Field


class AgentRequest(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    prompt: str
    user_id: str = Field(alias="userId")

    def to_wire(self) -> dict[str, str]:
        """Return the JSON body the workflow expects: {"prompt", "userId"}."""
        return self.model_dump(by_alias=True)

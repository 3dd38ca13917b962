"""TransportResult value object — the outcome of a single HTTP exchange."""

from pydantic import BaseModel, ConfigDict, model_validator


class TransportResult(BaseModel):
    """Immutable outcome of one Transport.send() call.

    On success, content is the response body (possibly empty). On failure,
    content is a synthesized diagnostic and is never empty.
    """

    model_config = ConfigDict(frozen=True)

    success: bool
    content: str | None = None

    @model_validator(mode="after")
    def _failure_carries_diagnostic(self) -> "TransportResult":
        if not self.success and not self.content:
            raise ValueError("a failed TransportResult must carry a diagnostic")
        return self

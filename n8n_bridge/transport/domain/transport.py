"""Transport Protocol — structural interface for executing one HTTP exchange."""

from collections.abc import Sequence
from typing import Any, Literal, Protocol

from n8n_bridge.transport.domain.result import TransportResult

type HttpMethod = Literal["GET", "POST", "PUT", "PATCH", "DELETE"]
type Header = tuple[str, str]


class Transport(Protocol):
    """Executes one HTTP request and reduces every outcome to a TransportResult.

    Implementations must never raise to the caller.
    """

    async def send(
        self,
        resource: str,
        method: HttpMethod = "GET",
        headers: Sequence[Header] | None = None,
        json_body: Any = None,
        error_message: str | None = None,
    ) -> TransportResult: ...

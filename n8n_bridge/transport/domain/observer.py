"""TransportObserver port — domain events emitted during HTTP exchanges."""

from typing import Protocol


class TransportObserver(Protocol):
    """Observer port for transport domain events."""

    def transport_request_raised(
        self, resource: str, method: str, reason: str
    ) -> None: ...

    def transport_status_failed(
        self, resource: str, method: str, status_code: int, diagnostic: str
    ) -> None: ...

    def transport_request_completed(
        self, resource: str, method: str, status_code: int
    ) -> None: ...

"""Structlog implementation of the TransportObserver port."""

import structlog


class StructlogTransportObserver:
    """Delegates transport domain events to structlog.

    Satisfies the TransportObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def transport_request_raised(
        self, resource: str, method: str, reason: str
    ) -> None:
        self._log.error(
            "transport.request_raised",
            resource=resource,
            method=method,
            reason=reason,
        )

    def transport_status_failed(
        self, resource: str, method: str, status_code: int, diagnostic: str
    ) -> None:
        self._log.error(
            "transport.status_failed",
            resource=resource,
            method=method,
            status_code=status_code,
            diagnostic=diagnostic,
        )

    def transport_request_completed(
        self, resource: str, method: str, status_code: int
    ) -> None:
        self._log.debug(
            "transport.request_completed",
            resource=resource,
            method=method,
            status_code=status_code,
        )

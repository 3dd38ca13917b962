"""HttpxTransport — Transport implementation on top of a shared httpx.AsyncClient."""

from collections.abc import Sequence
from typing import Any

import httpx

from n8n_bridge.transport.domain.observer import TransportObserver
from n8n_bridge.transport.domain.result import TransportResult
from n8n_bridge.transport.domain.transport import Header, HttpMethod

_UNKNOWN_HTTP_ERROR = "Unknown HTTP error"


class HttpxTransport:
    """Transport implementation that executes requests on an injected AsyncClient.

    The client is owned by the caller and shared across calls; this class holds
    no per-call state, so concurrent send() calls are independent.
    """

    def __init__(self, client: httpx.AsyncClient, observer: TransportObserver) -> None:
        self._client = client
        self._observer = observer

    async def send(
        self,
        resource: str,
        method: HttpMethod = "GET",
        headers: Sequence[Header] | None = None,
        json_body: Any = None,
        error_message: str | None = None,
    ) -> TransportResult:
        """Execute one request and reduce its outcome to a TransportResult.

        Never raises: network faults and non-2xx statuses both come back as a
        failed result whose content is a readable diagnostic.
        """
        loggable = _strip_query(resource)

        try:
            response = await self._client.request(
                method,
                resource,
                headers=_merge_headers(headers),
                json=json_body,
            )
        except Exception as exc:
            # httpx raises outside its HTTPError tree too (InvalidURL, and
            # TypeError for unserializable bodies); all of them are call faults.
            reason = str(exc) or type(exc).__name__
            self._observer.transport_request_raised(
                resource=loggable, method=method, reason=reason
            )
            return TransportResult(
                success=False,
                content=error_message or f"[send] HTTP error: {reason}",
            )

        if response.is_success:
            self._observer.transport_request_completed(
                resource=loggable, method=method, status_code=response.status_code
            )
            return TransportResult(success=True, content=response.text)

        detail = error_message or response.text.strip() or _UNKNOWN_HTTP_ERROR
        diagnostic = (
            f"StatusCode: {response.status_code} ({status_name(response)}) | {detail}"
        )
        self._observer.transport_status_failed(
            resource=loggable,
            method=method,
            status_code=response.status_code,
            diagnostic=diagnostic,
        )
        return TransportResult(success=False, content=diagnostic)


def status_name(response: httpx.Response) -> str:
    """Return the PascalCase name of the response status, e.g. 400 -> BadRequest.

    Unregistered codes fall back to the reason phrase, then to the number.
    """
    try:
        name = httpx.codes(response.status_code).name
    except ValueError:
        return response.reason_phrase or str(response.status_code)
    return "".join(word.capitalize() for word in name.split("_"))


def _merge_headers(headers: Sequence[Header] | None) -> httpx.Headers:
    """Apply headers in order; a repeated name overwrites the earlier value."""
    merged = httpx.Headers()
    for name, value in headers or ():
        merged[name] = value
    return merged


def _strip_query(resource: str) -> str:
    # Query strings may carry credentials (appid=...), keep them out of logs.
    return resource.split("?", 1)[0]

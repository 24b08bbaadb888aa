"""Shared httpx plumbing for the backend clients."""

import time
from typing import Any, ClassVar

import httpx

from domain_agent.client.errors import TransportError
from domain_agent.observability.logging import get_logger
from domain_agent.observability.metrics import BACKEND_REQUEST_LATENCY

logger = get_logger(__name__)


class BackendClient:
    """Async JSON-over-HTTP client for one backend.

    Subclasses set `error_class` to the TransportError subclass raised
    for their backend. Pass `http_client` to share or mock the
    underlying httpx client; otherwise one is built from `base_url` and
    `timeout` and owned (closed) by this instance. Requests always go to
    `base_url` with this instance's `timeout`, whether or not the
    injected client carries its own.
    """

    error_class: ClassVar[type[TransportError]] = TransportError

    def __init__(
        self,
        base_url: str = "http://localhost:8080/api",
        timeout: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            headers={"Content-Type": "application/json"},
        )

    async def __aenter__(self):
        return self

    async def __aexit__(self, *args) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_client:
            await self._client.aclose()

    async def _request(
        self,
        method: str,
        path: str,
        *,
        endpoint: str,
        json: dict | None = None,
    ) -> dict[str, Any]:
        """Make an API request and return the decoded JSON object.

        Raises:
            TransportError: (as `error_class`) on network failure,
                status >= 400, or a body that is not a JSON object
        """
        start = time.perf_counter()
        status = "error"
        try:
            response = await self._client.request(
                method=method,
                url=f"{self.base_url}{path}",
                json=json,
                timeout=self.timeout,
            )
            status = str(response.status_code)
        except httpx.HTTPError as exc:
            logger.warning(
                "backend_request_failed",
                endpoint=endpoint,
                error=str(exc),
                error_type=type(exc).__name__,
            )
            raise self.error_class(f"{endpoint} request failed: {exc}") from exc
        finally:
            BACKEND_REQUEST_LATENCY.labels(endpoint=endpoint, status=status).observe(
                time.perf_counter() - start
            )

        if response.status_code >= 400:
            details = _error_details(response)
            logger.warning(
                "backend_request_rejected",
                endpoint=endpoint,
                status_code=response.status_code,
            )
            raise self.error_class(
                _error_message(details, response),
                status_code=response.status_code,
                details=details,
            )

        try:
            data = response.json()
        except ValueError as exc:
            raise self.error_class(
                f"{endpoint} returned a non-JSON body",
                status_code=response.status_code,
            ) from exc

        if not isinstance(data, dict):
            raise self.error_class(
                f"{endpoint} returned {type(data).__name__}, expected an object",
                status_code=response.status_code,
                details=data,
            )
        return data


def _error_details(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return None


def _error_message(details: Any, response: httpx.Response) -> str:
    # gin handlers answer {"error": "..."}; some proxies nest a message
    if isinstance(details, dict):
        error = details.get("error")
        if isinstance(error, dict):
            error = error.get("message")
        if error:
            return str(error)
    return response.text or f"HTTP {response.status_code}"

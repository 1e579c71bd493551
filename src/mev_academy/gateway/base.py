"""
Shared async HTTP plumbing for the external data gateways.

Provides:
- A single lazily created aiohttp session per gateway
- Fast JSON parsing with orjson
- Explicit total timeout on every request
- One retry with exponential backoff on any failure
"""

import asyncio
import logging
from typing import Any

import aiohttp
import orjson


logger = logging.getLogger(__name__)


class GatewayError(Exception):
    """Base exception for gateway errors."""

    def __init__(self, message: str, status: int | None = None) -> None:
        super().__init__(message)
        self.status = status


class GatewayHTTPError(GatewayError):
    """Upstream answered with an error status."""

    pass


class GatewayPayloadError(GatewayError):
    """Upstream answered with a body that cannot be used."""

    pass


class JsonGateway:
    """
    Base class for read-only JSON/GraphQL upstreams.

    Subclasses call ``_request_json`` and convert ``GatewayError`` into an
    empty or absent result at their public method boundary.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        retry_attempts: int = 1,
        retry_backoff: float = 0.5,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        """
        Initialize the gateway.

        Args:
            base_url: Upstream endpoint.
            timeout: Total timeout per attempt in seconds.
            retry_attempts: Retries after the first failed attempt.
            retry_backoff: Delay before the first retry, doubled each time.
            session: Optional externally managed session.
        """
        self._base_url = base_url
        self._timeout = aiohttp.ClientTimeout(total=timeout)
        self._retry_attempts = retry_attempts
        self._retry_backoff = retry_backoff
        self._session = session
        self._owns_session = session is None

    @property
    def base_url(self) -> str:
        return self._base_url

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create the aiohttp session."""
        if self._session is None or self._session.closed:
            connector = aiohttp.TCPConnector(
                limit=20,
                keepalive_timeout=30,
            )
            self._session = aiohttp.ClientSession(
                connector=connector,
                timeout=self._timeout,
                json_serialize=lambda x: orjson.dumps(x).decode(),
            )
            self._owns_session = True
        return self._session

    async def close(self) -> None:
        """Close the session if this gateway created it."""
        if self._owns_session and self._session and not self._session.closed:
            await self._session.close()
        self._session = None

    async def _request_json(
        self,
        method: str,
        params: dict[str, Any] | None = None,
        payload: dict[str, Any] | None = None,
    ) -> Any:
        """
        Make a request with timeout and retry.

        Args:
            method: HTTP method (GET or POST).
            params: Query string parameters.
            payload: JSON body for POST requests.

        Returns:
            Parsed JSON body.

        Raises:
            GatewayError: When every attempt failed.
        """
        attempts = self._retry_attempts + 1
        for attempt in range(attempts):
            try:
                return await self._send(method, params, payload)
            except GatewayError as e:
                if attempt + 1 >= attempts:
                    raise
                delay = self._retry_backoff * (2**attempt)
                logger.debug(
                    f"{method} {self._base_url} failed ({e}), retrying in {delay:.2f}s"
                )
                await asyncio.sleep(delay)

        raise GatewayError("No request attempts configured")

    async def _send(
        self,
        method: str,
        params: dict[str, Any] | None,
        payload: dict[str, Any] | None,
    ) -> Any:
        """Perform a single attempt."""
        session = await self._get_session()
        try:
            async with session.request(
                method,
                self._base_url,
                params=params,
                json=payload,
                timeout=self._timeout,
            ) as response:
                return await self._handle_response(response)
        except aiohttp.ClientError as e:
            raise GatewayError(f"Network error: {e}") from e
        except TimeoutError as e:
            raise GatewayError("Request timed out") from e

    async def _handle_response(self, response: aiohttp.ClientResponse) -> Any:
        """Parse and validate response."""
        if response.status >= 400:
            raise GatewayHTTPError(
                f"HTTP {response.status} from {self._base_url}", status=response.status
            )

        body = await response.read()
        try:
            return orjson.loads(body)
        except orjson.JSONDecodeError as e:
            raise GatewayPayloadError(f"Invalid JSON response: {e}") from e

    async def __aenter__(self) -> "JsonGateway":
        await self._get_session()
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()

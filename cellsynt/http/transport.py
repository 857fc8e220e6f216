"""
HTTP Transport
==============
The POST capability the client is built on.

The client only needs "POST this body, give me the response text". Anything
providing ``post(url, body, content_type) -> str`` with a ``bytes`` body can
be injected; the httpx based transports below are the defaults.
"""

import httpx
from typing import Optional, Protocol

from .exceptions import TransportError

DEFAULT_TIMEOUT = 30.0


class Transport(Protocol):
    def post(self, url: str, body: bytes, content_type: str) -> str: ...

    def close(self) -> None: ...


class AsyncTransport(Protocol):
    async def post(self, url: str, body: bytes, content_type: str) -> str: ...

    async def aclose(self) -> None: ...


def _map_exception(exc: Exception) -> TransportError:
    """Map httpx exceptions to TransportError."""
    if isinstance(exc, httpx.InvalidURL):
        return TransportError(f"Invalid URL: {exc}", details=str(exc))
    if isinstance(exc, httpx.TimeoutException):
        return TransportError("Request timed out", details=str(exc))
    if isinstance(exc, (httpx.ConnectError, httpx.NetworkError)):
        return TransportError(f"Failed to connect: {exc}", details=str(exc))
    return TransportError(f"HTTP request failed: {exc}", details=str(exc))


class HttpxTransport:
    """
    Blocking transport backed by ``httpx.Client``.

    The HTTP status is not inspected; the gateway reports failures in the
    response body.
    """

    def __init__(
        self,
        client: Optional[httpx.Client] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=timeout)

    def post(self, url: str, body: bytes, content_type: str) -> str:
        try:
            response = self._client.post(
                url,
                content=body,
                headers={"Content-Type": content_type},
            )
            return response.text
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise _map_exception(e) from e

    def close(self) -> None:
        """Close the underlying client if this transport created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()


class AsyncHttpxTransport:
    """Async transport backed by ``httpx.AsyncClient``."""

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)

    async def post(self, url: str, body: bytes, content_type: str) -> str:
        try:
            response = await self._client.post(
                url,
                content=body,
                headers={"Content-Type": content_type},
            )
            return response.text
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise _map_exception(e) from e

    async def aclose(self) -> None:
        """Close the underlying client if this transport created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *args):
        await self.aclose()

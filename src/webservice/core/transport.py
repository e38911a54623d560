"""HTTP transport implementation using httpx."""

import asyncio
import logging

import httpx

from ..errors import TransportError
from .protocols import Request, Response

DEFAULT_USER_AGENT = "Webservice/0.1 (+https://github.com/webservice)"

_LOGGER = logging.getLogger(__name__)


class HttpTransport:
    """Async HTTP transport using httpx."""

    def __init__(
        self,
        timeout: float = 10.0,
        user_agent: str = DEFAULT_USER_AGENT,
        follow_redirects: bool = True,
        mock_transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.timeout = httpx.Timeout(timeout)
        self.user_agent = user_agent
        self.follow_redirects = follow_redirects
        self._mock_transport = mock_transport
        self._client: httpx.AsyncClient | None = None
        self._lock = asyncio.Lock()

    async def __aenter__(self) -> "HttpTransport":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client with double-checked locking."""
        if self._client is None:
            async with self._lock:
                if self._client is None:
                    self._client = httpx.AsyncClient(
                        timeout=self.timeout,
                        headers={"User-Agent": self.user_agent},
                        follow_redirects=self.follow_redirects,
                        transport=self._mock_transport,
                    )
        return self._client

    async def send(self, request: Request) -> Response:
        """Send the request and return the response."""
        client = await self._get_client()
        _LOGGER.debug("%s %s", request.method, request.url)
        try:
            resp = await client.request(
                request.method,
                request.url,
                content=request.body,
                headers=request.headers,
            )
        except httpx.HTTPError as exc:
            raise TransportError(str(exc) or type(exc).__name__, url=request.url) from exc

        return Response(
            url=str(resp.url),
            status=resp.status_code,
            content=resp.content,
            headers=dict(resp.headers),
        )

    async def close(self):
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

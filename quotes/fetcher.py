"""
Requesters: the collaborators that turn a URL into a status code and a body.

HTTPFetcher keeps all network code (redirects, client timeout, headers,
connection pooling) out of the transform step.
"""

import time
from typing import Any, Dict, Optional, Protocol

import httpx
import structlog

from .models import Response

logger = structlog.get_logger(__name__)


class Requester(Protocol):
    async def request(self, locator: str) -> Response:
        """Issue one request; raise on transport failure."""
        ...


class HTTPFetcher:
    def __init__(
        self,
        user_agent: str = 'ArnieQuotes/1.0',
        timeout: float = 30.0,
        max_redirects: int = 5,
        max_connections: int = 20,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize the HTTP fetcher with a pooled async client."""
        self.user_agent = user_agent
        self.timeout = timeout
        self.max_redirects = max_redirects

        headers = {
            'User-Agent': self.user_agent,
            'Accept': 'application/json,text/plain;q=0.9,*/*;q=0.8',
            'Accept-Encoding': 'gzip, deflate',
            'Connection': 'keep-alive',
        }
        self._client = httpx.AsyncClient(
            timeout=httpx.Timeout(self.timeout),
            follow_redirects=True,
            max_redirects=self.max_redirects,
            headers=headers,
            limits=httpx.Limits(
                max_connections=max_connections,
                max_keepalive_connections=max(1, max_connections // 2),
            ),
            transport=transport,
        )

    async def request(self, locator: str) -> Response:
        """GET a URL and return its status and decoded body.

        Every HTTP status is returned as-is; only transport errors raise.
        """
        start_time = time.time()
        try:
            response = await self._client.get(locator)
        except httpx.HTTPError as e:
            logger.warning("fetch_failed",
                           url=locator,
                           error=str(e),
                           fetch_time=round(time.time() - start_time, 3))
            raise

        logger.info("fetch_completed",
                    url=locator,
                    status_code=response.status_code,
                    final_url=str(response.url),
                    size=len(response.content),
                    fetch_time=round(time.time() - start_time, 3))
        return Response(status=response.status_code, body=response.text)

    async def aclose(self):
        await self._client.aclose()

    async def __aenter__(self) -> "HTTPFetcher":
        return self

    async def __aexit__(self, *exc_info):
        await self.aclose()


async def create_fetcher(settings: Optional[Dict[str, Any]] = None) -> HTTPFetcher:
    """Create an HTTPFetcher from the ``fetcher`` config section."""
    settings = settings or {}
    kwargs = {
        key: settings[key]
        for key in ('user_agent', 'timeout', 'max_redirects', 'max_connections')
        if settings.get(key) is not None
    }
    return HTTPFetcher(**kwargs)

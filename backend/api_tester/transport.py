from logging import getLogger
from typing import Protocol

import httpx

from .builder import OutboundRequest
from .errors import TransportError
from .normalizer import RawResponse

logger = getLogger(__name__)


class Transport(Protocol):
    async def send(self, request: OutboundRequest) -> RawResponse: ...


class HttpxTransport:
    """Sends one request per call on a short-lived ``httpx.AsyncClient``."""

    def __init__(self, timeout: float = 30.0, follow_redirects: bool = True):
        self.timeout = timeout
        self.follow_redirects = follow_redirects

    async def send(self, request: OutboundRequest) -> RawResponse:
        kwargs = request.body.to_httpx_kwargs() if request.body else {}
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, follow_redirects=self.follow_redirects
            ) as client:
                r = await client.request(
                    method=request.method.value,
                    url=request.url,
                    headers=request.headers,
                    **kwargs,
                )
        except (httpx.HTTPError, httpx.InvalidURL, ValueError, TypeError) as exc:
            # ValueError covers header values httpx cannot encode as ASCII.
            logger.warning("%s %s failed: %r", request.method.value, request.url, exc)
            raise TransportError(str(exc)) from exc

        return RawResponse(
            status=r.status_code,
            status_text=r.reason_phrase,
            headers=dict(r.headers.items()),
            text=r.text,
        )

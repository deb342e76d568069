"""
Fetch-like transports.

A transport is an async callable taking ``(url, options)`` and returning an
httpx.Response (or anything exposing the same attributes). The options dict
is the one assembled by the dispatcher: ``method``, ``headers``, ``body``
and any passthrough keyword arguments.
"""

from typing import Any, Dict, Mapping, Optional, Protocol

import httpx
import structlog

from .config import get_config

logger = structlog.get_logger(__name__)


class Fetch(Protocol):
    async def __call__(self, url: str, options: Dict[str, Any]) -> httpx.Response:
        ...


class HttpxTransport:
    """Adapts an httpx.AsyncClient to the fetch-like transport contract.

    When no client is given a short-lived client is opened for every call,
    configured from the `transport` section of the config (base_url, timeout,
    follow_redirects).
    """

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        base_url: str = None,
        timeout: float = None,
        follow_redirects: bool = None,
    ):
        self._client = client
        self.base_url = base_url
        self.timeout = timeout
        self.follow_redirects = follow_redirects

    def _client_settings(self) -> Dict[str, Any]:
        transport_config = get_config().transport
        base_url = self.base_url if self.base_url is not None else transport_config.get('base_url', '')
        timeout = self.timeout if self.timeout is not None else transport_config.get('timeout', 30.0)
        follow_redirects = (
            self.follow_redirects
            if self.follow_redirects is not None
            else transport_config.get('follow_redirects', True)
        )
        return {
            'base_url': base_url or '',
            'timeout': httpx.Timeout(timeout),
            'follow_redirects': follow_redirects,
        }

    async def __call__(self, url: str, options: Dict[str, Any]) -> httpx.Response:
        kwargs = dict(options)
        method = kwargs.pop('method', 'GET').upper()
        body = kwargs.pop('body', None)
        if body is not None:
            if isinstance(body, Mapping):
                kwargs['data'] = body
            else:
                kwargs['content'] = body

        if self._client is not None:
            return await self._client.request(method, url, **kwargs)

        settings = self._client_settings()
        logger.debug("default_transport_request", base_url=settings['base_url'], method=method, url=url)
        async with httpx.AsyncClient(**settings) as client:
            return await client.request(method, url, **kwargs)


default_fetch = HttpxTransport()

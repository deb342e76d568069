"""
Calls Netlify functions: builds the /.netlify/functions URL, encodes the
payload, runs the transport and turns the response into a LambdogResponse
(or a FunctionError when the function did not answer with a 2xx).
"""

import asyncio
import json
from typing import Any, Dict, Mapping, Optional

import httpx
import structlog

from .errors import FunctionError
from .response import LambdogResponse
from .transport import Fetch, default_fetch
from .url_builder import Params, build_url

logger = structlog.get_logger(__name__)

CONTENT_TYPE = 'content-type'
APPLICATION_JSON = 'application/json'
FUNCTIONS_PREFIX = '/.netlify/functions/'


def has_data(data: Any) -> bool:
    """Whether `data` counts as a payload, using JavaScript truthiness.

    Only None, False, zero, NaN and empty str/bytes are missing; empty
    dicts and lists are still sent.
    """
    if data is None or data is False:
        return False
    if isinstance(data, (str, bytes)):
        return len(data) > 0
    if isinstance(data, (int, float)) and not isinstance(data, bool):
        return data == data and data != 0
    return True


def _find_header(headers: Mapping[str, str], name: str) -> Optional[str]:
    """Case-insensitive header lookup."""
    for key, value in headers.items():
        if key.lower() == name:
            return value
    return None


def build_headers(headers: Optional[Mapping[str, str]], data: Any) -> Dict[str, str]:
    """Return a new header dict, defaulting content-type to JSON when there is data."""
    merged = dict(headers or {})
    if has_data(data) and _find_header(merged, CONTENT_TYPE) is None:
        merged[CONTENT_TYPE] = APPLICATION_JSON
    return merged


def encode_body(data: Any, headers: Mapping[str, str]) -> Any:
    """JSON-encode `data` if the request is application/json, else pass it through."""
    if has_data(data) and _find_header(headers, CONTENT_TYPE) == APPLICATION_JSON:
        # same output as JSON.stringify
        return json.dumps(data, separators=(',', ':'), ensure_ascii=False, allow_nan=False)
    return data


def build_fetch_options(headers: Dict[str, str], body: Any, rest: Dict[str, Any]) -> Dict[str, Any]:
    """Assemble the options handed to the transport, leaving out empty parts."""
    options: Dict[str, Any] = {}
    if headers:
        options['headers'] = headers
    if has_data(body):
        options['body'] = body
        options['method'] = 'POST'
    # caller options last so an explicit method wins over the POST default
    options.update(rest)
    return options


async def _read_data(response: httpx.Response) -> Any:
    await response.aread()
    if response.headers.get(CONTENT_TYPE) == APPLICATION_JSON:
        return response.json()
    return response.text


class Lambdog:
    """Client for Netlify functions.

    Calling the instance returns the full LambdogResponse. The verb helpers
    (get, delete, head, post, put, patch) return only the response data.

    Args:
        fetch: Transport used when a call does not pass its own `fetch`.
               Defaults to the httpx transport configured from config.yaml.
    """

    def __init__(self, fetch: Optional[Fetch] = None):
        self.fetch = fetch

    async def __call__(
        self,
        function_path: str,
        *,
        fetch: Optional[Fetch] = None,
        params: Optional[Params] = None,
        data: Any = None,
        headers: Optional[Mapping[str, str]] = None,
        **rest: Any,
    ) -> LambdogResponse:
        fetch = fetch or self.fetch or default_fetch

        url = build_url(FUNCTIONS_PREFIX + function_path, params)
        request_headers = build_headers(headers, data)
        body = encode_body(data, request_headers)
        options = build_fetch_options(request_headers, body, rest)

        logger.debug("function_request", url=url, method=options.get('method', 'GET'))
        try:
            response = await fetch(url, options)
        except httpx.TransportError as e:
            logger.warning("transport_error", url=url, error=str(e))
            raise
        except asyncio.CancelledError:
            logger.warning("request_cancelled", url=url)
            raise

        if not response.is_success:
            await response.aread()
            message = response.text
            logger.warning("function_failed", url=url, status=response.status_code)
            raise FunctionError(
                message,
                status=response.status_code,
                headers=dict(response.headers.items()),
                response=response,
            )

        try:
            result = await _read_data(response)
        except json.JSONDecodeError as e:
            logger.warning("invalid_json_response", url=url, error=str(e))
            raise

        logger.debug("function_response", url=url, status=response.status_code)
        return LambdogResponse(
            status=response.status_code,
            status_text=response.reason_phrase,
            headers=dict(response.headers.items()),
            data=result,
            response=response,
        )

    async def request(self, **options: Any) -> LambdogResponse:
        """Same as calling the client, with the path given as `function_path` (or `name`)."""
        function_path = options.pop('function_path', None)
        name = options.pop('name', None)
        if function_path and name:
            raise TypeError("request() takes either 'function_path' or 'name', not both")
        function_path = function_path or name
        if not function_path:
            raise TypeError("request() needs a 'function_path' or 'name' option")
        return await self(function_path, **options)

    async def _data_for(self, method: str, function_path: str, options: Dict[str, Any]) -> Any:
        options['method'] = method
        response = await self(function_path, **options)
        return response.data

    async def get(self, function_path: str, **options: Any) -> Any:
        return await self._data_for('GET', function_path, options)

    async def delete(self, function_path: str, **options: Any) -> Any:
        return await self._data_for('DELETE', function_path, options)

    async def head(self, function_path: str, **options: Any) -> Any:
        return await self._data_for('HEAD', function_path, options)

    async def post(self, function_path: str, data: Any = None, **options: Any) -> Any:
        options['data'] = data
        return await self._data_for('POST', function_path, options)

    async def put(self, function_path: str, data: Any = None, **options: Any) -> Any:
        options['data'] = data
        return await self._data_for('PUT', function_path, options)

    async def patch(self, function_path: str, data: Any = None, **options: Any) -> Any:
        options['data'] = data
        return await self._data_for('PATCH', function_path, options)


invoke = Lambdog()

"""Base HTTP client with error translation and optional retry."""

from typing import Any

import httpx
from loguru import logger
from pydantic import TypeAdapter, ValidationError
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from settings import API_TIMEOUT, UPSTREAM_RETRY_ATTEMPTS
from upstream_client.errors import UpstreamDecodeError, UpstreamTransportError


class BaseClient:
    """Base async HTTP client bound to one upstream host.

    Usable as an async context manager, or opened once with ``open()`` and
    closed with ``close()`` for a long-lived client.
    """

    def __init__(self, base_url: str, transport: httpx.AsyncBaseTransport | None = None):
        self._base_url = base_url.rstrip("/")
        self._transport = transport
        self._client: httpx.AsyncClient | None = None
        self._request_count = 0
        logger.debug("{}: base_url={}", self.__class__.__name__, self._base_url)

    async def __aenter__(self):
        await self.open()
        return self

    async def __aexit__(self, *_):
        await self.close()

    async def open(self) -> None:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                timeout=API_TIMEOUT,
                transport=self._transport,
                limits=httpx.Limits(max_connections=20, max_keepalive_connections=10),
            )

    async def close(self) -> None:
        if self._client:
            logger.info("{}: total requests {}", self.__class__.__name__, self._request_count)
            await self._client.aclose()
            self._client = None

    @retry(
        stop=stop_after_attempt(UPSTREAM_RETRY_ATTEMPTS),
        wait=wait_exponential(multiplier=1, min=1, max=10),
        retry=retry_if_exception_type((httpx.ConnectError, httpx.ReadError)),
        reraise=True,
    )
    async def _send(self, method: str, path: str, **kwargs) -> httpx.Response:
        if self._client is None:
            raise RuntimeError(f"{self.__class__.__name__} is not open")
        self._request_count += 1
        logger.debug("{} {}{}", method, self._base_url, path)
        return await self._client.request(method, path, **kwargs)

    async def _request(self, method: str, path: str, check: bool = True, **kwargs) -> httpx.Response:
        """Send a request, translating httpx failures to UpstreamTransportError."""
        try:
            resp = await self._send(method, path, **kwargs)
            if check:
                resp.raise_for_status()
        except httpx.HTTPError as e:
            raise UpstreamTransportError(f"{method} {path}: {e}") from e
        return resp

    async def _get(self, path: str, **kwargs) -> Any:
        """GET and decode JSON."""
        return self._json(await self._request("GET", path, **kwargs))

    async def _post(self, path: str, payload: dict, **kwargs) -> Any:
        """POST a JSON body and decode JSON."""
        return self._json(await self._request("POST", path, json=payload, **kwargs))

    @staticmethod
    def _json(resp: httpx.Response) -> Any:
        try:
            return resp.json()
        except ValueError as e:
            raise UpstreamDecodeError(f"Invalid JSON from {resp.request.url}: {e}") from e

    @staticmethod
    def _parse(schema: Any, data: Any) -> Any:
        """Validate decoded JSON against a pydantic schema or type."""
        try:
            return TypeAdapter(schema).validate_python(data)
        except ValidationError as e:
            raise UpstreamDecodeError(f"Unexpected response shape: {e}") from e


def parse_count(value: int | str) -> int:
    """Parse a non-negative counter that may arrive serialized as a string."""
    try:
        count = int(value)
    except (TypeError, ValueError) as e:
        raise UpstreamDecodeError(f"Invalid count: {value!r}") from e
    if count < 0:
        raise UpstreamDecodeError(f"Negative count: {count}")
    return count

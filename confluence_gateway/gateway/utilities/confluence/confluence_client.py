import asyncio
import json
import logging
from contextlib import asynccontextmanager
from logging import Logger
from typing import Any, AsyncGenerator, Dict, Optional, Type, TypeVar, Union

import httpx
from pydantic import BaseModel, ValidationError

from confluence_gateway.gateway.http.http_client_factory import HttpClientFactory
from confluence_gateway.gateway.utilities.confluence.confluence_config import (
    ConfluenceConfig,
)
from confluence_gateway.gateway.utilities.confluence.confluence_errors import (
    ConfluenceApiError,
    ConfluenceDecodeError,
    ConfluenceEncodingError,
    ConfluenceNetworkError,
)

T = TypeVar("T", bound=BaseModel)

RequestBody = Union[BaseModel, Dict[str, Any]]

DEFAULT_TIMEOUT_SECONDS: float = 30.0
ERROR_BODY_LIMIT: int = 1024


class ConfluenceClient:
    def __init__(
        self,
        *,
        http_client_factory: HttpClientFactory,
        confluence_config: ConfluenceConfig,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        """
        Authenticated access to the Confluence REST API.

        All calls share one httpx client, and with it one connection pool. The
        client is created on first use and released by aclose().

        Args:
            http_client_factory: creates the pooled httpx client
            confluence_config: base URL (ending in /rest/api) and bearer token
            timeout: limit in seconds for a whole call, body included
        """
        self.http_client_factory: HttpClientFactory = http_client_factory
        self.logger: Logger = logging.getLogger(__name__)
        self.base_url: str = confluence_config.base_url.rstrip("/")
        self.timeout: float = timeout
        self._http_client: Optional[httpx.AsyncClient] = None

        self.headers: Dict[str, str] = {
            "Authorization": f"Bearer {confluence_config.token}",
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    @property
    def http_client(self) -> httpx.AsyncClient:
        if self._http_client is None or self._http_client.is_closed:
            self._http_client = self.http_client_factory.create_http_client(
                base_url=self.base_url, headers=self.headers, timeout=self.timeout
            )
        return self._http_client

    async def aclose(self) -> None:
        if self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None

    def build_url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    @staticmethod
    def encode_body(body: Optional[RequestBody]) -> Optional[bytes]:
        if body is None:
            return None
        try:
            if isinstance(body, BaseModel):
                return body.model_dump_json(exclude_none=True).encode("utf-8")
            return json.dumps(body).encode("utf-8")
        except (TypeError, ValueError) as e:
            raise ConfluenceEncodingError(str(e)) from e

    @asynccontextmanager
    async def execute_request(
        self,
        *,
        method: str,
        path: str,
        query: Optional[Dict[str, str]] = None,
        body: Optional[RequestBody] = None,
    ) -> AsyncGenerator[httpx.Response, None]:
        """
        Performs an authenticated request and yields the streamed response.

        The response is closed when the context exits, whether or not the
        body was read. Network failures, and calls still running after the
        timeout, are raised as ConfluenceNetworkError; this covers reading the
        body inside the context.
        """
        content: Optional[bytes] = self.encode_body(body)
        url: str = self.build_url(path)
        self.logger.info(f"Making Confluence request: {method} {url} params={query}")

        try:
            # httpx timeouts apply per phase; this bounds the call as a whole
            async with asyncio.timeout(self.timeout):
                async with self.http_client.stream(
                    method, url, params=query or None, content=content
                ) as response:
                    yield response
        except httpx.RequestError as e:
            raise ConfluenceNetworkError(
                method, url, str(e) or type(e).__name__
            ) from e
        except TimeoutError as e:
            raise ConfluenceNetworkError(
                method, url, f"no complete response within {self.timeout}s"
            ) from e

    async def do_request(
        self,
        *,
        method: str,
        path: str,
        query: Optional[Dict[str, str]] = None,
        body: Optional[RequestBody] = None,
    ) -> bytes:
        """
        Performs an authenticated request and returns the whole response body.

        :return: raw response bytes
        """
        async with self.execute_request(
            method=method, path=path, query=query, body=body
        ) as response:
            response_bytes: bytes = await response.aread()

        if response.status_code >= 400:
            raise ConfluenceApiError(
                response.status_code, response_bytes.decode("utf-8", errors="replace")
            )
        return response_bytes

    async def get_json(
        self, *, path: str, query: Optional[Dict[str, str]], target: Type[T]
    ) -> T:
        """
        Performs an authenticated GET and decodes the JSON body into target.

        Only the first ERROR_BODY_LIMIT bytes of an error body are read.
        """
        async with self.execute_request(
            method="GET", path=path, query=query
        ) as response:
            if response.status_code >= 400:
                snippet: bytes = await self.read_limited(response, ERROR_BODY_LIMIT)
                raise ConfluenceApiError(
                    response.status_code, snippet.decode("utf-8", errors="replace")
                )
            response_bytes: bytes = await response.aread()

        try:
            return target.model_validate_json(response_bytes)
        except ValidationError as e:
            raise ConfluenceDecodeError(str(e)) from e

    @staticmethod
    async def read_limited(response: httpx.Response, limit: int) -> bytes:
        buffer: bytearray = bytearray()
        async for chunk in response.aiter_bytes():
            buffer.extend(chunk)
            if len(buffer) >= limit:
                break
        return bytes(buffer[:limit])

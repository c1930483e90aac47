"""Base HTTP client with retry logic."""

import asyncio
from typing import Any

import httpx
from loguru import logger
from tenacity import (
    retry,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from site_client.errors import BackendError
from site_client.schemas import ExternalBlob

# Default settings
API_BASE_URL = "http://localhost:8000/api"
API_TIMEOUT = 60


def set_api_config(base_url: str, timeout: int) -> None:
    """Set API configuration."""
    global API_BASE_URL, API_TIMEOUT
    API_BASE_URL = base_url
    API_TIMEOUT = timeout


def _is_retryable_error(exc: BaseException) -> bool:
    """Check if exception is retryable (network errors + 5xx server errors)."""
    if isinstance(exc, (httpx.ReadError, httpx.ConnectError, httpx.TimeoutException)):
        return True
    return isinstance(exc, BackendError) and exc.status_code >= 500


def _error_detail(resp: httpx.Response) -> str:
    """Extract the backend's error message."""
    try:
        body = resp.json()
    except ValueError:
        return resp.text or resp.reason_phrase
    if isinstance(body, dict):
        return str(body.get("detail") or body.get("error") or body)
    return str(body)


class BaseClient:
    """Base async HTTP client with rate limiting and exponential backoff for reads."""

    def __init__(
        self,
        max_concurrent: int = 20,
        token: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        base_url: str | None = None,
    ):
        self._client: httpx.AsyncClient | None = None
        self._base_url = base_url
        self._sem = asyncio.Semaphore(max_concurrent)
        self._token = token
        self._transport = transport
        self._request_count = 0
        logger.info("{}: max_concurrent={}", self.__class__.__name__, max_concurrent)

    @property
    def request_count(self) -> int:
        return self._request_count

    async def __aenter__(self):
        headers = {"Accept": "application/json"}
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        self._client = httpx.AsyncClient(
            base_url=self._base_url or API_BASE_URL,
            timeout=API_TIMEOUT,
            headers=headers,
            transport=self._transport,
            limits=httpx.Limits(max_connections=100, max_keepalive_connections=20),
        )
        return self

    async def __aexit__(self, *_):
        logger.info("Total API requests: {}", self._request_count)
        if self._client:
            await self._client.aclose()
            self._client = None

    async def _send(self, method: str, path: str, json: Any = None) -> httpx.Response:
        """Send one request, turning non-2xx responses into BackendError."""
        if self._client is None:
            raise RuntimeError(f"{self.__class__.__name__} is not open")
        async with self._sem:
            self._request_count += 1
            resp = await self._client.request(method, path, json=json)
        if resp.is_error:
            detail = _error_detail(resp)
            logger.debug("{} {} -> {} {}", method, path, resp.status_code, detail)
            raise BackendError(resp.status_code, detail)
        return resp

    @staticmethod
    def _payload(resp: httpx.Response) -> Any:
        if not resp.content:
            return None
        return resp.json()

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=1, max=30),
        retry=retry_if_exception(_is_retryable_error),
        reraise=True,
    )
    async def _get(self, path: str) -> Any:
        """GET request with retry logic."""
        return self._payload(await self._send("GET", path))

    async def _post(self, path: str, json: Any = None) -> Any:
        """POST request, sent exactly once."""
        return self._payload(await self._send("POST", path, json))

    async def _put(self, path: str, json: Any = None) -> Any:
        """PUT request, sent exactly once."""
        return self._payload(await self._send("PUT", path, json))

    async def _delete(self, path: str) -> Any:
        """DELETE request, sent exactly once."""
        return self._payload(await self._send("DELETE", path))

    # ========== Blobs ==========

    async def upload_blob(self, data: bytes, content_type: str = "application/octet-stream") -> ExternalBlob:
        """POST /blobs - store bytes externally and return a handle."""
        if self._client is None:
            raise RuntimeError(f"{self.__class__.__name__} is not open")
        async with self._sem:
            self._request_count += 1
            resp = await self._client.post("blobs", content=data, headers={"Content-Type": content_type})
        if resp.is_error:
            raise BackendError(resp.status_code, _error_detail(resp))
        return ExternalBlob.model_validate(resp.json())

    async def blob_bytes(self, blob: ExternalBlob) -> bytes:
        """Fetch the bytes behind a blob handle via its direct URL."""
        if self._client is None:
            raise RuntimeError(f"{self.__class__.__name__} is not open")
        async with self._sem:
            self._request_count += 1
            resp = await self._client.get(blob.url)
        if resp.is_error:
            raise BackendError(resp.status_code, _error_detail(resp))
        return resp.content


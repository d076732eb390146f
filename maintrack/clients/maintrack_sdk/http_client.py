from __future__ import annotations

import asyncio
from collections.abc import Callable
from typing import Any

import httpx

from maintrack.clients.maintrack_sdk.errors import ApiError


class HttpClient:
    def __init__(
        self,
        base_url: str,
        timeout_seconds: float = 30,
        verify_ssl: bool = True,
        retry_max_attempts: int = 3,
        retry_backoff_ms: int = 150,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.retry_max_attempts = max(1, retry_max_attempts)
        self.retry_backoff_ms = max(0, retry_backoff_ms)
        self._client = client or httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout_seconds,
            verify=verify_ssl,
        )
        self._auth_error_handler: Callable[[ApiError], None] | None = None

    def register_auth_error_handler(self, handler: Callable[[ApiError], None] | None) -> None:
        self._auth_error_handler = handler

    async def request(
        self,
        method: str,
        path: str,
        token: str | None = None,
        json_body: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """Send a request and return the decoded JSON body, or None for an empty body."""
        request_headers = {"Accept": "application/json", "Content-Type": "application/json"}
        request_headers.update(headers or {})
        if token:
            request_headers["Authorization"] = f"Bearer {token}"

        normalized_path = path if path.startswith("/") else f"/{path}"
        allow_retry = method.upper() == "GET"

        for attempt in range(1, self.retry_max_attempts + 1):
            try:
                response = await self._client.request(
                    method,
                    normalized_path,
                    json=json_body,
                    params=params,
                    headers=request_headers,
                )
            except httpx.TimeoutException as exc:
                if (not allow_retry) or attempt >= self.retry_max_attempts:
                    raise ApiError(code="TIMEOUT_ERROR", message="Request timed out", details=str(exc)) from exc
                await self._backoff(attempt)
                continue
            except httpx.TransportError as exc:
                if (not allow_retry) or attempt >= self.retry_max_attempts:
                    raise ApiError(code="NETWORK_ERROR", message="Network error", details=str(exc)) from exc
                await self._backoff(attempt)
                continue

            if response.status_code >= 400:
                error = ApiError.from_http_response(response)
                if allow_retry and self._is_retryable_status(response.status_code) and attempt < self.retry_max_attempts:
                    await self._backoff(attempt)
                    continue
                if error.status_code == 401 and token and self._auth_error_handler:
                    self._auth_error_handler(error)
                raise error

            if not response.content or not response.content.strip():
                return None
            try:
                return response.json()
            except ValueError as exc:
                raise ApiError(
                    code="INVALID_RESPONSE",
                    message=None,
                    details=response.text,
                    status_code=response.status_code,
                ) from exc

        raise ApiError(code="NETWORK_ERROR", message="Network error", details="retry exhausted")

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _backoff(self, attempt: int) -> None:
        await asyncio.sleep((self.retry_backoff_ms * attempt) / 1000)

    @staticmethod
    def _is_retryable_status(status_code: int) -> bool:
        return 500 <= status_code <= 599

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import httpx

TRANSPORT_ERROR_CODES = {"NETWORK_ERROR", "TIMEOUT_ERROR", "INVALID_RESPONSE"}


@dataclass
class ApiError(Exception):
    code: str
    message: str | None
    details: dict[str, Any] | list[Any] | str | None = None
    status_code: int | None = None

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"

    @property
    def is_transport_error(self) -> bool:
        return self.code in TRANSPORT_ERROR_CODES

    @classmethod
    def from_http_response(cls, response: httpx.Response) -> "ApiError":
        try:
            payload = response.json()
        except ValueError:
            return cls(
                code="INVALID_RESPONSE",
                message=None,
                details=response.text or None,
                status_code=response.status_code,
            )

        if isinstance(payload, dict):
            message = payload.get("message")
            return cls(
                code="HTTP_ERROR",
                message=str(message) if message else None,
                details=payload.get("details"),
                status_code=response.status_code,
            )

        return cls(
            code="INVALID_RESPONSE",
            message=None,
            details=payload,
            status_code=response.status_code,
        )

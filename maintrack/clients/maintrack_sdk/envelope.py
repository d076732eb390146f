from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")

NOT_AUTHENTICATED_MESSAGE = "not authenticated"
CONNECTION_ERROR_MESSAGE = "Unable to connect to the server"


@dataclass(frozen=True)
class Envelope(Generic[T]):
    """Uniform outcome of every gateway call."""

    success: bool
    message: str
    data: T | None = None
    code: str | None = None

    @classmethod
    def ok(cls, message: str, data: T | None = None) -> "Envelope[T]":
        return cls(success=True, message=message, data=data)

    @classmethod
    def failure(cls, message: str, code: str | None = None) -> "Envelope[T]":
        return cls(success=False, message=message, code=code)

    @classmethod
    def not_authenticated(cls) -> "Envelope[T]":
        return cls.failure(NOT_AUTHENTICATED_MESSAGE)

    @classmethod
    def connection_error(cls) -> "Envelope[T]":
        return cls.failure(CONNECTION_ERROR_MESSAGE)

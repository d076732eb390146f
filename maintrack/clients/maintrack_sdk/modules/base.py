from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from maintrack.app.infrastructure.logging.logger import get_logger, log_action
from maintrack.clients.maintrack_sdk.auth_store import TokenStore
from maintrack.clients.maintrack_sdk.envelope import Envelope
from maintrack.clients.maintrack_sdk.errors import ApiError
from maintrack.clients.maintrack_sdk.http_client import HttpClient
from maintrack.clients.maintrack_sdk.normalizers import (
    build_query_params,
    extract_entity,
    extract_message,
    extract_rows,
)

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)

logger = get_logger("maintrack.gateway")


class ResourceGateway:
    """Shared request plumbing: token gate, envelope conversion and call logging."""

    module = "resource"

    def __init__(self, http: HttpClient, auth_store: TokenStore) -> None:
        self.http = http
        self.auth_store = auth_store

    async def _call(
        self,
        action: str,
        method: str,
        path: str,
        *,
        parse: Callable[[Any], T] | None = None,
        json_body: dict[str, Any] | None = None,
        filters: dict[str, Any] | None = None,
        require_auth: bool = True,
        success_message: str,
        failure_message: str,
    ) -> Envelope[T]:
        token = self.auth_store.get_token()
        if require_auth and not token:
            log_action(logger, self.module, action, "not_authenticated")
            return Envelope.not_authenticated()

        try:
            payload = await self.http.request(
                method,
                path,
                token=token if require_auth else None,
                json_body=json_body,
                params=build_query_params(filters),
            )
            data = parse(payload) if parse else None
        except ApiError as error:
            if error.is_transport_error:
                log_action(logger, self.module, action, "transport_error", code=error.code)
                return Envelope.connection_error()
            code = str(error.status_code) if error.status_code is not None else None
            log_action(logger, self.module, action, "error", code=code)
            return Envelope.failure(error.message or failure_message, code=code)
        except Exception:
            logger.exception("Unexpected failure in %s.%s", self.module, action)
            return Envelope.connection_error()

        log_action(logger, self.module, action, "success")
        return Envelope.ok(extract_message(payload) or success_message, data)


def parse_rows(model: type[M]) -> Callable[[Any], list[M]]:
    def _parse(payload: Any) -> list[M]:
        return [
            model.model_validate(row)
            for row in extract_rows(payload)
            if isinstance(row, dict) and row.get("id") is not None
        ]

    return _parse


def parse_entity(model: type[M]) -> Callable[[Any], M | None]:
    def _parse(payload: Any) -> M | None:
        entity = extract_entity(payload)
        if entity is None or "id" not in entity:
            return None
        return model.model_validate(entity)

    return _parse


def to_payload(data: BaseModel | dict[str, Any], model: type[BaseModel]) -> dict[str, Any]:
    if isinstance(data, BaseModel):
        return data.model_dump(by_alias=True, exclude_none=True)
    return model.model_validate(data).model_dump(by_alias=True, exclude_none=True)


def describe_validation_error(error: ValidationError) -> str:
    first = error.errors()[0]
    field = ".".join(str(part) for part in first.get("loc", ()))
    return f"{field}: {first.get('msg')}" if field else str(first.get("msg"))


def validation_failure(error: ValidationError) -> Envelope[Any]:
    return Envelope.failure(describe_validation_error(error), code="VALIDATION_ERROR")

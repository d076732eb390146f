from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from maintrack.clients.maintrack_sdk.auth_store import TokenStore
from maintrack.clients.maintrack_sdk.envelope import Envelope
from maintrack.clients.maintrack_sdk.http_client import HttpClient
from maintrack.clients.maintrack_sdk.models import AuthResponse, LoginCredentials, RegisterData, User
from maintrack.clients.maintrack_sdk.modules.base import ResourceGateway, to_payload, validation_failure
from maintrack.clients.maintrack_sdk.normalizers import extract_entity


def _parse_auth(payload: Any) -> AuthResponse:
    return AuthResponse.model_validate(payload if isinstance(payload, dict) else {})


def _parse_user(payload: Any) -> User | None:
    if not isinstance(payload, dict):
        return None
    nested = payload.get("user")
    return User.model_validate(nested if isinstance(nested, dict) else extract_entity(payload))


class AuthClient(ResourceGateway):
    module = "auth"

    def __init__(self, http: HttpClient, auth_store: TokenStore, session_ttl_days: float = 7) -> None:
        super().__init__(http, auth_store)
        self.session_ttl_days = session_ttl_days

    async def login(self, credentials: LoginCredentials | dict[str, Any]) -> Envelope[AuthResponse]:
        try:
            body = to_payload(credentials, LoginCredentials)
        except ValidationError as error:
            return validation_failure(error)
        result = await self._call(
            "login",
            "POST",
            "/user/auth",
            parse=_parse_auth,
            json_body=body,
            require_auth=False,
            success_message="Logged in",
            failure_message="Authentication failed",
        )
        if result.success and result.data is not None and result.data.token:
            self.auth_store.set_token(result.data.token, self.session_ttl_days)
        return result

    async def register(self, data: RegisterData | dict[str, Any]) -> Envelope[AuthResponse]:
        try:
            body = to_payload(data, RegisterData)
        except ValidationError as error:
            return validation_failure(error)
        return await self._call(
            "register",
            "POST",
            "/user/register",
            parse=_parse_auth,
            json_body=body,
            require_auth=False,
            success_message="Account created",
            failure_message="Registration failed",
        )

    async def profile(self) -> Envelope[User]:
        return await self._call(
            "profile",
            "GET",
            "/user/profile",
            parse=_parse_user,
            success_message="Profile loaded",
            failure_message="Failed to load profile",
        )

    def logout(self) -> None:
        self.auth_store.clear_token()

    def is_authenticated(self) -> bool:
        return self.auth_store.has_valid_session()

from __future__ import annotations

from dataclasses import dataclass

import httpx

from maintrack.app.config import AppConfig
from maintrack.app.controllers import (
    AuthController,
    DashboardController,
    MaintenanceController,
    VehiclesController,
)
from maintrack.app.infrastructure.logging.logger import get_logger, log_json
from maintrack.app.notifications import NotificationCenter
from maintrack.app.session_store import CookieSessionStore
from maintrack.clients.maintrack_sdk.auth_store import TokenStore
from maintrack.clients.maintrack_sdk.errors import ApiError
from maintrack.clients.maintrack_sdk.http_client import HttpClient
from maintrack.clients.maintrack_sdk.modules import AuthClient, MaintenanceClient, VehiclesClient

logger = get_logger("maintrack.bootstrap")


@dataclass
class Services:
    config: AppConfig
    session: TokenStore
    http: HttpClient
    notifications: NotificationCenter
    auth: AuthClient
    vehicles: VehiclesClient
    maintenance: MaintenanceClient

    def auth_controller(self) -> AuthController:
        return AuthController(self.auth, self.notifications)

    def dashboard_controller(self) -> DashboardController:
        return DashboardController(self.vehicles, self.maintenance, self.notifications)

    def vehicles_controller(self) -> VehiclesController:
        return VehiclesController(self.vehicles, self.maintenance, self.notifications, self.session)

    def maintenance_controller(self) -> MaintenanceController:
        return MaintenanceController(self.maintenance, self.notifications)

    async def aclose(self) -> None:
        await self.http.aclose()


def build_services(
    config: AppConfig,
    session_store: TokenStore | None = None,
    client: httpx.AsyncClient | None = None,
) -> Services:
    session = session_store or CookieSessionStore.from_config(config)
    http = HttpClient(
        base_url=config.base_url,
        timeout_seconds=config.timeout_seconds,
        verify_ssl=config.verify_ssl,
        retry_max_attempts=config.retry_max_attempts,
        retry_backoff_ms=config.retry_backoff_ms,
        client=client,
    )

    def _on_auth_error(error: ApiError) -> None:
        log_json(logger, {"event": "session_rejected", "status_code": error.status_code})
        session.clear_token()

    http.register_auth_error_handler(_on_auth_error)
    return Services(
        config=config,
        session=session,
        http=http,
        notifications=NotificationCenter(),
        auth=AuthClient(http, session, session_ttl_days=config.session_ttl_days),
        vehicles=VehiclesClient(http, session),
        maintenance=MaintenanceClient(http, session),
    )

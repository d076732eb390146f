from __future__ import annotations

from maintrack.app.notifications import NotificationLevel, Notifier
from maintrack.clients.maintrack_sdk.envelope import Envelope
from maintrack.clients.maintrack_sdk.models import AuthResponse
from maintrack.clients.maintrack_sdk.modules.auth_client import AuthClient


class AuthController:
    def __init__(self, client: AuthClient, notifier: Notifier) -> None:
        self.client = client
        self.notifier = notifier

    async def login(self, email: str, password: str) -> Envelope[AuthResponse]:
        result = await self.client.login({"email": email, "password": password})
        self._report(result)
        return result

    async def register(self, name: str, email: str, password: str) -> Envelope[AuthResponse]:
        result = await self.client.register({"name": name, "email": email, "password": password})
        self._report(result)
        return result

    def logout(self) -> None:
        self.client.logout()
        self.notifier.notify(NotificationLevel.INFO, "Signed out")

    def is_authenticated(self) -> bool:
        return self.client.is_authenticated()

    def _report(self, result: Envelope[AuthResponse]) -> None:
        level = NotificationLevel.SUCCESS if result.success else NotificationLevel.ERROR
        self.notifier.notify(level, result.message)

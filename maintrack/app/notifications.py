from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from maintrack.app.infrastructure.logging.logger import get_logger, log_json

logger = get_logger("maintrack.notifications")


class NotificationLevel(str, Enum):
    SUCCESS = "success"
    ERROR = "error"
    INFO = "info"
    WARNING = "warning"


@dataclass(frozen=True)
class Notification:
    level: NotificationLevel
    message: str


class Notifier(Protocol):
    def notify(self, level: NotificationLevel, message: str) -> None: ...


class NotificationCenter:
    """Toast queue: controllers push, the presentation layer drains."""

    def __init__(self, max_pending: int = 50) -> None:
        self._pending: deque[Notification] = deque(maxlen=max_pending)

    def notify(self, level: NotificationLevel, message: str) -> None:
        self._pending.append(Notification(level=level, message=message))
        log_json(logger, {"event": "notification", "level": level.value, "message": message})

    def success(self, message: str) -> None:
        self.notify(NotificationLevel.SUCCESS, message)

    def error(self, message: str) -> None:
        self.notify(NotificationLevel.ERROR, message)

    @property
    def pending(self) -> list[Notification]:
        return list(self._pending)

    def drain(self) -> list[Notification]:
        drained = list(self._pending)
        self._pending.clear()
        return drained

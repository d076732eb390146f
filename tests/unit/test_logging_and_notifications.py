import json
import logging

from maintrack.app.infrastructure.logging.logger import log_action, log_json
from maintrack.app.notifications import Notification, NotificationCenter, NotificationLevel


class CaptureHandler(logging.Handler):
    def __init__(self):
        super().__init__()
        self.records = []

    def emit(self, record):
        self.records.append(record)


def _capture(name: str) -> CaptureHandler:
    logger = logging.getLogger(name)
    logger.handlers = []
    logger.setLevel(logging.DEBUG)
    handler = CaptureHandler()
    logger.addHandler(handler)
    return handler


def test_log_action_contains_required_fields() -> None:
    handler = _capture("maintrack.test.actions")

    log_action(logging.getLogger("maintrack.test.actions"), "vehicles", "delete", "error", code="404")

    payload = json.loads(handler.records[0].getMessage())
    for key in ["ts", "module", "action", "outcome", "code"]:
        assert key in payload
    assert payload["code"] == "404"
    assert handler.records[0].levelno == logging.WARNING


def test_log_json_redacts_secrets() -> None:
    handler = _capture("maintrack.test.redact")

    log_json(logging.getLogger("maintrack.test.redact"), {"event": "login", "token": "abc", "Password": "pw"})

    message = handler.records[0].getMessage()
    assert "abc" not in message
    assert "pw" not in message
    assert json.loads(message)["event"] == "login"


def test_notification_center_queues_and_drains() -> None:
    center = NotificationCenter()

    center.success("Vehicle added")
    center.error("placa duplicada")

    assert center.pending == [
        Notification(NotificationLevel.SUCCESS, "Vehicle added"),
        Notification(NotificationLevel.ERROR, "placa duplicada"),
    ]
    assert len(center.drain()) == 2
    assert center.pending == []

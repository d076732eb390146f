from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any

REDACTED_KEYS = {"token", "password", "authorization", "access_token"}


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format="%(message)s")


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def log_json(logger: logging.Logger, payload: dict[str, Any], level: int = logging.INFO) -> None:
    safe = {key: ("***" if key.lower() in REDACTED_KEYS else value) for key, value in payload.items()}
    logger.log(level, json.dumps(safe, ensure_ascii=False, default=str))


def log_action(
    logger: logging.Logger,
    module: str,
    action: str,
    outcome: str,
    code: str | None = None,
    **extra: Any,
) -> None:
    level = logging.INFO if outcome == "success" else logging.WARNING
    log_json(
        logger,
        {
            "ts": datetime.now(timezone.utc).isoformat(),
            "module": module,
            "action": action,
            "outcome": outcome,
            "code": code,
            **extra,
        },
        level=level,
    )

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_BASE_URL = "http://localhost:3000"
DEFAULT_TOKEN_COOKIE = "authToken"


class ConfigError(ValueError):
    pass


@dataclass(frozen=True)
class AppConfig:
    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float = 30.0
    verify_ssl: bool = True
    retry_max_attempts: int = 3
    retry_backoff_ms: int = 150
    token_cookie_name: str = DEFAULT_TOKEN_COOKIE
    session_ttl_days: float = 7
    cookie_domain: str = "localhost"
    session_dir: str | None = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, env_file: str | None = ".env") -> "AppConfig":
        """Load config from environment with optional .env override."""
        if env_file:
            load_dotenv(env_file)
        config = cls(
            base_url=(os.getenv("MAINTRACK_API_BASE_URL") or DEFAULT_BASE_URL).strip().rstrip("/"),
            timeout_seconds=_read_float("MAINTRACK_TIMEOUT_SECONDS", "30"),
            verify_ssl=_coerce_bool(os.getenv("MAINTRACK_VERIFY_SSL"), True),
            retry_max_attempts=_read_int("MAINTRACK_RETRY_MAX_ATTEMPTS", "3"),
            retry_backoff_ms=_read_int("MAINTRACK_RETRY_BACKOFF_MS", "150"),
            token_cookie_name=(os.getenv("MAINTRACK_TOKEN_COOKIE") or DEFAULT_TOKEN_COOKIE).strip(),
            session_ttl_days=_read_float("MAINTRACK_SESSION_TTL_DAYS", "7"),
            cookie_domain=(os.getenv("MAINTRACK_COOKIE_DOMAIN") or "localhost").strip(),
            session_dir=(os.getenv("MAINTRACK_SESSION_DIR") or "").strip() or None,
            log_level=(os.getenv("MAINTRACK_LOG_LEVEL") or "INFO").strip().upper(),
        )
        config.validate()
        return config

    def validate(self) -> None:
        if not self.base_url:
            raise ConfigError("MAINTRACK_API_BASE_URL must not be empty")
        if self.timeout_seconds <= 0:
            raise ConfigError(f"Invalid MAINTRACK_TIMEOUT_SECONDS: expected > 0, got {self.timeout_seconds}")
        if self.retry_max_attempts < 1:
            raise ConfigError(f"Invalid MAINTRACK_RETRY_MAX_ATTEMPTS: expected >= 1, got {self.retry_max_attempts}")
        if self.retry_backoff_ms < 0:
            raise ConfigError(f"Invalid MAINTRACK_RETRY_BACKOFF_MS: expected >= 0, got {self.retry_backoff_ms}")
        if not self.token_cookie_name:
            raise ConfigError("MAINTRACK_TOKEN_COOKIE must not be empty")
        if self.session_ttl_days < 1:
            raise ConfigError(f"Invalid MAINTRACK_SESSION_TTL_DAYS: expected >= 1, got {self.session_ttl_days}")


def _coerce_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _read_float(name: str, default: str) -> float:
    raw = os.getenv(name, default)
    try:
        return float(raw)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"Invalid {name}: expected a number, got {raw!r}") from exc


def _read_int(name: str, default: str) -> int:
    raw = os.getenv(name, default)
    try:
        return int(raw)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"Invalid {name}: expected an integer, got {raw!r}") from exc

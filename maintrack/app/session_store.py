from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass
from http.cookiejar import Cookie, LoadError, MozillaCookieJar
from pathlib import Path

from platformdirs import user_data_dir

from maintrack.app.config import DEFAULT_TOKEN_COOKIE, AppConfig
from maintrack.app.infrastructure.logging.logger import get_logger

SECONDS_PER_DAY = 86400

logger = get_logger("maintrack.session")


@dataclass(frozen=True)
class StoredToken:
    value: str
    expires_at: float


class MemorySessionStore:
    """Process-local token holder with the same expiry rules as the cookie store."""

    def __init__(self, now: Callable[[], float] | None = None) -> None:
        self._now = now or time.time
        self._token: StoredToken | None = None

    def set_token(self, token: str, ttl_days: float) -> None:
        self._token = StoredToken(value=token, expires_at=self._now() + ttl_days * SECONDS_PER_DAY)

    def get_token(self) -> str | None:
        if self._token is None:
            return None
        if self._token.expires_at <= self._now():
            self._token = None
            return None
        return self._token.value

    def clear_token(self) -> None:
        self._token = None

    def has_valid_session(self) -> bool:
        return self.get_token() is not None


class CookieSessionStore:
    """Token persisted as a cookie in a Mozilla-format cookie jar on disk."""

    def __init__(
        self,
        path: Path | str | None = None,
        cookie_name: str = DEFAULT_TOKEN_COOKIE,
        domain: str = "localhost",
        now: Callable[[], float] | None = None,
    ) -> None:
        self.path = Path(path) if path else default_cookie_path()
        self.cookie_name = cookie_name
        self.domain = domain
        self._now = now or time.time

    @classmethod
    def from_config(cls, config: AppConfig) -> "CookieSessionStore":
        path = Path(config.session_dir) / "cookies.txt" if config.session_dir else None
        return cls(path=path, cookie_name=config.token_cookie_name, domain=config.cookie_domain)

    def set_token(self, token: str, ttl_days: float) -> None:
        jar = self._load()
        jar.set_cookie(self._build_cookie(token, int(self._now() + ttl_days * SECONDS_PER_DAY)))
        self._save(jar)

    def get_token(self) -> str | None:
        jar = self._load()
        cookie = self._find(jar)
        if cookie is None:
            return None
        if cookie.is_expired(int(self._now())):
            self.clear_token()
            return None
        return cookie.value or None

    def clear_token(self) -> None:
        jar = self._load()
        if self._find(jar) is None:
            return
        jar.clear(self.domain, "/", self.cookie_name)
        self._save(jar)

    def has_valid_session(self) -> bool:
        return self.get_token() is not None

    def _find(self, jar: MozillaCookieJar) -> Cookie | None:
        for cookie in jar:
            if cookie.name == self.cookie_name and cookie.domain == self.domain:
                return cookie
        return None

    def _load(self) -> MozillaCookieJar:
        jar = MozillaCookieJar(str(self.path))
        if not self.path.exists():
            return jar
        try:
            jar.load(ignore_discard=True, ignore_expires=True)
        except LoadError:
            logger.warning("Discarding unreadable session cookie jar at %s", self.path)
            self.path.unlink(missing_ok=True)
            return MozillaCookieJar(str(self.path))
        return jar

    def _save(self, jar: MozillaCookieJar) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        jar.save(ignore_discard=True, ignore_expires=True)
        try:
            self.path.chmod(0o600)
        except OSError:
            pass

    def _build_cookie(self, token: str, expires: int) -> Cookie:
        return Cookie(
            version=0,
            name=self.cookie_name,
            value=token,
            port=None,
            port_specified=False,
            domain=self.domain,
            domain_specified=True,
            domain_initial_dot=False,
            path="/",
            path_specified=True,
            secure=False,
            expires=expires,
            discard=False,
            comment=None,
            comment_url=None,
            rest={},
        )


def default_cookie_path() -> Path:
    return Path(user_data_dir("maintrack", "maintrack")) / "cookies.txt"

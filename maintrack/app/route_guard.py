from __future__ import annotations

from dataclasses import dataclass, field

LOGIN_PATH = "/auth/login"
REGISTER_PATH = "/auth/register"
DASHBOARD_PATH = "/dashboard"
HOME_PATH = "/"

PROTECTED_PATHS = ("/dashboard", "/vehicles", "/maintenance")
AUTH_ONLY_PATHS = (LOGIN_PATH, REGISTER_PATH)
UNGUARDED_PREFIXES = ("/api", "/static", "/favicon.ico", "/health")

NO_CACHE_HEADERS = {
    "Cache-Control": "private, no-cache, no-store, must-revalidate",
    "Pragma": "no-cache",
    "Expires": "0",
}


@dataclass(frozen=True)
class RouteDecision:
    allowed: bool
    redirect_to: str | None = None
    headers: dict[str, str] = field(default_factory=dict)

    @classmethod
    def allow(cls, headers: dict[str, str] | None = None) -> "RouteDecision":
        return cls(allowed=True, headers=dict(headers or {}))

    @classmethod
    def redirect(cls, location: str) -> "RouteDecision":
        return cls(allowed=False, redirect_to=location)


def _matches(path: str, prefixes: tuple[str, ...]) -> bool:
    return any(path == prefix or path.startswith(f"{prefix}/") for prefix in prefixes)


def normalize_path(path: str) -> str:
    if not path:
        return HOME_PATH
    clean = path.split("?", 1)[0].split("#", 1)[0]
    if len(clean) > 1:
        clean = clean.rstrip("/")
    return clean or HOME_PATH


def is_protected(path: str) -> bool:
    return _matches(normalize_path(path), PROTECTED_PATHS)


def is_auth_only(path: str) -> bool:
    return _matches(normalize_path(path), AUTH_ONLY_PATHS)


def should_guard(path: str) -> bool:
    return not _matches(normalize_path(path), UNGUARDED_PREFIXES)


def evaluate_route(path: str, session_valid: bool) -> RouteDecision:
    """Decide one navigation. The protected check runs before the home check."""
    target = normalize_path(path)
    if is_protected(target):
        if not session_valid:
            return RouteDecision.redirect(LOGIN_PATH)
        return RouteDecision.allow(NO_CACHE_HEADERS)
    if is_auth_only(target):
        return RouteDecision.redirect(DASHBOARD_PATH) if session_valid else RouteDecision.allow()
    if target == HOME_PATH:
        return RouteDecision.redirect(DASHBOARD_PATH) if session_valid else RouteDecision.allow()
    return RouteDecision.allow()

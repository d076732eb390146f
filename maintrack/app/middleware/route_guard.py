from __future__ import annotations

import logging

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import RedirectResponse, Response
from starlette.types import ASGIApp

from maintrack.app.config import DEFAULT_TOKEN_COOKIE
from maintrack.app.infrastructure.logging.logger import get_logger, log_json
from maintrack.app.route_guard import evaluate_route, should_guard

logger = get_logger("maintrack.route_guard")


class RouteGuardMiddleware(BaseHTTPMiddleware):
    def __init__(self, app: ASGIApp, cookie_name: str = DEFAULT_TOKEN_COOKIE) -> None:
        super().__init__(app)
        self.cookie_name = cookie_name

    async def dispatch(self, request: Request, call_next):
        path = request.url.path
        if not should_guard(path):
            return await call_next(request)

        session_valid = bool(request.cookies.get(self.cookie_name))
        decision = evaluate_route(path, session_valid)

        if not decision.allowed:
            log_json(
                logger,
                {"event": "route_redirect", "path": path, "redirect_to": decision.redirect_to},
                level=logging.DEBUG,
            )
            return RedirectResponse(url=decision.redirect_to, status_code=307)

        response: Response = await call_next(request)
        for name, value in decision.headers.items():
            response.headers[name] = value
        return response

from __future__ import annotations

from fastapi import FastAPI
from fastapi.responses import HTMLResponse

from maintrack.app.config import AppConfig
from maintrack.app.infrastructure.logging.logger import configure_logging
from maintrack.app.middleware.route_guard import RouteGuardMiddleware

PAGES = {
    "/": "Vehicle maintenance tracking",
    "/auth/login": "Sign in",
    "/auth/register": "Create account",
    "/dashboard": "Dashboard",
    "/vehicles": "My vehicles",
    "/maintenance": "Maintenance records",
}


def _page_endpoint(title: str):
    async def endpoint() -> HTMLResponse:
        return HTMLResponse(f"<!doctype html><html><head><title>{title}</title></head><body><h1>{title}</h1></body></html>")

    return endpoint


def create_app(config: AppConfig | None = None) -> FastAPI:
    config = config or AppConfig.from_env()
    configure_logging(config.log_level)
    app = FastAPI(title="maintrack")
    app.add_middleware(RouteGuardMiddleware, cookie_name=config.token_cookie_name)

    for path, title in PAGES.items():
        app.add_api_route(path, _page_endpoint(title), methods=["GET"], response_class=HTMLResponse)

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    return app

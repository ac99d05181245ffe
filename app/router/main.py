# app/router/main.py
"""
Front router: serves the single-page frontend and forwards API traffic.

Run it as its own process next to the API service:
    uvicorn app.router.main:app --port 8080
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional, Sequence

import httpx
from fastapi import FastAPI, Request

from app.config import settings
from app.log_config import configure_logging
from app.middleware import install_access_log, install_security_headers
from app.router import static
from app.router.proxy import forward
from app.router.routes import API, DEFAULT_ROUTES, Route, match_upstream

logger = logging.getLogger(__name__)

PROXY_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def create_app(
    static_dir: Optional[str] = None,
    api_upstream: Optional[str] = None,
    routes: Sequence[Route] = DEFAULT_ROUTES,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FastAPI:
    root = Path(static_dir or settings.STATIC_DIR)
    base_url = api_upstream or settings.API_UPSTREAM

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Router serving %s, forwarding API traffic to %s", root, base_url)
        if not (root / static.ENTRY_DOCUMENT).is_file():
            logger.warning(
                "No %s under %s; unmatched paths will fail", static.ENTRY_DOCUMENT, root
            )
        yield
        client = app.state.upstream_client
        if client is not None:
            await client.aclose()

    app = FastAPI(
        title="Hayam Wiki Router",
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.upstream_client = None

    def upstream_client() -> httpx.AsyncClient:
        # Created lazily so it binds to the serving event loop.
        if app.state.upstream_client is None:
            app.state.upstream_client = httpx.AsyncClient(
                base_url=base_url,
                timeout=settings.UPSTREAM_TIMEOUT,
                transport=transport,
            )
        return app.state.upstream_client

    install_security_headers(app)
    install_access_log(app)

    @app.api_route("/{full_path:path}", methods=PROXY_METHODS, include_in_schema=False)
    async def dispatch(request: Request, full_path: str):
        if match_upstream(request.url.path, routes) == API:
            return await forward(upstream_client(), request)
        return static.serve(root, full_path)

    return app


configure_logging(settings.LOG_LEVEL)
app = create_app()

from __future__ import annotations

from datetime import datetime, timezone
import logging
from typing import Optional

from fastapi import APIRouter, FastAPI, HTTPException, Request
from fastapi.responses import Response
from starlette.middleware.cors import CORSMiddleware

from .config import settings
from .csp import SecurityHeadersMiddleware
from .drink_builder import DrinkBuilder
from .logging_utils import configure_logging
from .metrics import CONTENT_TYPE_LATEST, REQUESTS_TOTAL, generate_latest
from .rate_limit import AttemptLimiter
from .routers.auth import router as auth_router
from .routers.drinks import router as drinks_router
from .services.auth_backend import AuthBackend, get_auth_backend
from .services.auth_flow import AuthFlow

configure_logging()
logger = logging.getLogger("drinkcraft.app")


def _health_payload() -> dict[str, str]:
    return {"status": "ok", "ts": datetime.now(timezone.utc).isoformat()}


def create_app(
    auth_backend: Optional[AuthBackend] = None,
    limiter: Optional[AttemptLimiter] = None,
    drink_builder: Optional[DrinkBuilder] = None,
) -> FastAPI:
    app = FastAPI(title="DrinkCraft API", version="1.0.0")
    api_router = APIRouter(prefix="/api")

    # One limiter per process; the auth flow keys it by action and client address.
    limiter = limiter or AttemptLimiter(settings.auth_max_attempts, settings.auth_window_ms)
    app.state.auth_flow = AuthFlow(
        limiter=limiter,
        backend=auth_backend or get_auth_backend(),
        display_name_max_length=settings.display_name_max_length,
    )
    app.state.drink_builder = drink_builder or DrinkBuilder(max_drinks=settings.max_drinks_in_progress)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    if settings.enable_security_headers:
        app.add_middleware(SecurityHeadersMiddleware)

    @app.middleware("http")
    async def request_metrics_middleware(request: Request, call_next):
        response = await call_next(request)
        REQUESTS_TOTAL.labels(
            method=request.method,
            path=request.url.path,
            status=str(response.status_code),
        ).inc()
        return response

    @app.on_event("startup")
    async def startup_event() -> None:
        logger.info(
            "Backend startup complete",
            extra={
                "event": "startup",
                "reason": "auth_backend_configured" if settings.auth_backend_configured else "auth_backend_missing",
            },
        )

    @api_router.get("/")
    async def root() -> dict[str, str]:
        return {"message": "DrinkCraft API"}

    @api_router.get("/health")
    async def api_healthcheck() -> dict[str, str]:
        return _health_payload()

    @app.get("/health")
    async def healthcheck() -> dict[str, str]:
        return _health_payload()

    @app.get("/metrics")
    async def metrics() -> Response:
        if not settings.enable_prometheus_metrics:
            raise HTTPException(status_code=404, detail="Metrics disabled")
        return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)

    api_router.include_router(auth_router)
    api_router.include_router(drinks_router)
    app.include_router(api_router)
    return app


app = create_app()

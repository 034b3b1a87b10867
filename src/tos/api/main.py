from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import Counter, Histogram
from sqlalchemy.engine import Engine
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from tos.api.error_handling import register_exception_handlers
from tos.api.middleware.request_id import RequestIDMiddleware
from tos.api.routes.health import router as health_router
from tos.api.routes.metrics import router as metrics_router
from tos.api.routes.table_orders import router as table_orders_router
from tos.application.ports.repositories import TableOrderRepository
from tos.core.config import Settings, get_settings
from tos.infrastructure.db.repositories.order_repo import SqlAlchemyTableOrderRepository
from tos.infrastructure.db.session import get_engine
from tos.infrastructure.observability.logging_config import configure_logging
from tos.infrastructure.observability.otel import configure_otel

logger = logging.getLogger("tos.api.access")

REQUEST_COUNT = Counter(
    "http_requests_total",
    "Total number of HTTP requests",
    ["method", "path", "status_code"],
)
REQUEST_LATENCY = Histogram(
    "http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "path"],
)


UNMATCHED_ROUTE = "unmatched"


def _cors_allow_origins(settings: Settings) -> list[str]:
    env = settings.app_env.lower()

    # Dev/test: unblock everything (no credentials allowed)
    if env in {"dev", "test"}:
        return ["*"]

    # Staging/prod: restrict to explicit allowlist
    return [origin.strip() for origin in settings.cors_allow_origins.split(",") if origin.strip()]


def _route_template(request: Request) -> str:
    # Template of the matched route; every unmatched path shares one label.
    route = request.scope.get("route")
    return getattr(route, "path", UNMATCHED_ROUTE)


class AccessLogMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        started = time.perf_counter()
        method = request.method
        try:
            response = await call_next(request)
        except Exception:
            duration_ms = (time.perf_counter() - started) * 1000
            route = _route_template(request)
            REQUEST_COUNT.labels(method=method, path=route, status_code="500").inc()
            REQUEST_LATENCY.labels(method=method, path=route).observe(duration_ms / 1000)
            logger.exception(
                "request_error",
                extra={
                    "method": method,
                    "path": request.url.path,
                    "status_code": 500,
                    "duration_ms": round(duration_ms, 2),
                },
            )
            raise

        duration_ms = (time.perf_counter() - started) * 1000
        route = _route_template(request)
        REQUEST_COUNT.labels(method=method, path=route, status_code=str(response.status_code)).inc()
        REQUEST_LATENCY.labels(method=method, path=route).observe(duration_ms / 1000)
        logger.info(
            "request_complete",
            extra={
                "method": method,
                "path": request.url.path,
                "status_code": response.status_code,
                "duration_ms": round(duration_ms, 2),
            },
        )
        return response


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    logger.info(
        "service_started",
        extra={"max_tables": settings.max_tables},
    )
    yield
    logger.info("service_stopped")


def create_app(
    settings: Settings | None = None,
    engine: Engine | None = None,
    order_repository: TableOrderRepository | None = None,
) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings)

    engine = engine or get_engine(settings)

    app = FastAPI(title="Table Order Service", version="0.1.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.engine = engine
    app.state.order_repository = order_repository or SqlAlchemyTableOrderRepository(engine)

    register_exception_handlers(app)
    app.include_router(health_router)
    app.include_router(metrics_router)
    app.include_router(table_orders_router)

    app.add_middleware(AccessLogMiddleware)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=_cors_allow_origins(settings),
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-Id"],
    )

    configure_otel(app, settings)
    return app


app = create_app()

"""FastAPI application wiring for the Jobly API."""

import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from jobly.api import auth, companies, errors, health, jobs, metrics, users
from jobly.core import settings, setup_logging
from jobly.core.logging import get_logger
from jobly.core.metrics import (
    HTTP_REQUEST_DURATION_SECONDS,
    HTTP_REQUESTS_IN_PROGRESS,
    HTTP_REQUESTS_TOTAL,
    set_app_info,
)
from jobly.db import SessionLocal, seed_default_data
from jobly.domain.exceptions import DomainError

setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create tables and the default admin; a failed seed is logged, not fatal."""
    session = SessionLocal()
    try:
        seed_default_data(session)
    except Exception as exc:  # pragma: no cover - best effort
        logger.warning("Skipping default seed: %s", exc)
    finally:
        session.close()
    yield


app = FastAPI(title=settings.api_title, version=settings.api_version, lifespan=lifespan)
set_app_info(version=settings.api_version, environment=settings.environment)

app.state.limiter = auth.limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

UNTRACKED_PATHS = frozenset({"/metrics"})


def _endpoint_label(path: str) -> str:
    """Collapse numeric job ids so the label set stays bounded."""
    return "/".join("{id}" if part.isdigit() else part for part in path.split("/"))


@app.middleware("http")
async def track_requests(request: Request, call_next):
    """Count requests and time them, labelled by method and endpoint."""
    if request.url.path in UNTRACKED_PATHS:
        return await call_next(request)

    labels = {"method": request.method, "endpoint": _endpoint_label(request.url.path)}
    in_progress = HTTP_REQUESTS_IN_PROGRESS.labels(**labels)
    in_progress.inc()
    started = time.perf_counter()
    status_code = 500
    try:
        response = await call_next(request)
        status_code = response.status_code
        return response
    finally:
        in_progress.dec()
        HTTP_REQUEST_DURATION_SECONDS.labels(**labels).observe(time.perf_counter() - started)
        HTTP_REQUESTS_TOTAL.labels(**labels, status_code=str(status_code)).inc()


@app.exception_handler(DomainError)
async def domain_error_handler(request: Request, exc: DomainError):
    http_exc = errors.to_http(exc)
    return JSONResponse(status_code=http_exc.status_code, content={"detail": http_exc.detail})


app.include_router(health.router)
app.include_router(metrics.router)
for module in (auth, companies, jobs, users):
    app.include_router(module.router, prefix=settings.api_prefix)


@app.get("/")
async def root() -> dict:
    return {"message": settings.api_title, "version": settings.api_version, "docs": "/docs"}

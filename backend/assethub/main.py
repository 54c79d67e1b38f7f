"""Main FastAPI application."""

import time

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from assethub.api import (
    asset_types,
    assets,
    device_element_schemas,
    device_types,
    errors,
    labels,
    tenants,
)
from assethub.core import settings, setup_logging
from assethub.core.audit import (
    AuditOutcome,
    action_for_route,
    audit_log,
    create_audit_context_from_request,
)
from assethub.core.logging import get_logger
from assethub.core.metrics import (
    HTTP_REQUEST_DURATION_SECONDS,
    HTTP_REQUESTS_IN_PROGRESS,
    HTTP_REQUESTS_TOTAL,
    normalize_endpoint,
    set_app_info,
)
from assethub.db import SessionLocal, seed_default_data
from assethub.domain.exceptions import DomainError

# Setup logging
setup_logging()
logger = get_logger(__name__)

ENTITY_COLLECTIONS = ("assets", "assettypes", "devicetypes", "deviceelementschemas", "tenants")

# Create app
app = FastAPI(
    title=settings.api_title,
    version=settings.api_version,
)

# Set application info metric
set_app_info(version=settings.api_version, environment=settings.environment)

# Rate limiter - disabled during testing
limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[settings.rate_limit_default],
    storage_uri=settings.rate_limit_storage_uri,
    enabled=not settings.testing,
)
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_middleware(SlowAPIMiddleware)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def prometheus_metrics_middleware(request: Request, call_next):
    """Collect Prometheus metrics for all HTTP requests."""
    # Skip the metrics endpoint itself
    if request.url.path == "/metrics":
        return await call_next(request)

    method = request.method
    endpoint = normalize_endpoint(request.url.path, ENTITY_COLLECTIONS)

    HTTP_REQUESTS_IN_PROGRESS.labels(method=method, endpoint=endpoint).inc()
    start_time = time.perf_counter()

    try:
        response = await call_next(request)
        status_code = str(response.status_code)
    except Exception:
        status_code = "500"
        raise
    finally:
        duration = time.perf_counter() - start_time
        HTTP_REQUESTS_IN_PROGRESS.labels(method=method, endpoint=endpoint).dec()
        HTTP_REQUEST_DURATION_SECONDS.labels(method=method, endpoint=endpoint).observe(duration)
        HTTP_REQUESTS_TOTAL.labels(method=method, endpoint=endpoint, status_code=status_code).inc()

    return response


# Include routers
app.include_router(tenants.router, prefix=settings.api_prefix)
app.include_router(asset_types.router, prefix=settings.api_prefix)
app.include_router(assets.router, prefix=settings.api_prefix)
app.include_router(device_element_schemas.router, prefix=settings.api_prefix)
app.include_router(device_types.router, prefix=settings.api_prefix)
app.include_router(labels.router, prefix=settings.api_prefix)


@app.on_event("startup")
async def seed_defaults() -> None:
    """Seed default data on startup; ignore failures but log them."""
    try:
        db = SessionLocal()
    except SQLAlchemyError as exc:  # pragma: no cover - best effort
        logger.warning("Skipping default seed (session error): %s", exc)
        return
    try:
        seed_default_data(db)
    except (SQLAlchemyError, DomainError, OSError) as exc:  # pragma: no cover - best effort
        logger.warning("Skipping default seed (operation error): %s", exc)
    finally:
        db.close()


@app.get("/metrics", tags=["metrics"])
async def metrics() -> Response:
    """Prometheus metrics in text exposition format (outside the API prefix)."""
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)


@app.get("/health")
async def health() -> dict:
    """Basic health check endpoint (alias for /health/live)."""
    return {"status": "healthy"}


@app.get("/health/live")
async def health_live() -> dict:
    """Liveness probe endpoint.

    Returns 200 if the application is running. It does not touch the
    database.
    """
    return {"status": "healthy"}


@app.get("/health/ready")
def health_ready():
    """Readiness check endpoint with dependency status.

    Returns 200 when the database answers, 503 otherwise.
    """
    status = {"database": {"status": "healthy"}}
    overall_healthy = True

    db = SessionLocal()
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        status["database"] = {"status": "unhealthy", "error": str(e)}
        overall_healthy = False
    finally:
        db.close()

    result = {
        "status": "healthy" if overall_healthy else "unhealthy",
        "dependencies": status,
    }

    if overall_healthy:
        return result
    return JSONResponse(status_code=503, content=result)


@app.get("/")
async def root() -> dict:
    """Root endpoint."""
    return {
        "message": settings.api_title,
        "version": settings.api_version,
        "docs": "/docs",
    }


@app.exception_handler(DomainError)
async def domain_exception_handler(request: Request, exc: DomainError):
    """Translate domain errors to HTTP responses globally."""
    http_exc = errors.to_http(exc)
    logger.log(
        errors.log_level(exc),
        "%s %s failed: %s",
        request.method,
        request.url.path,
        exc.message,
        extra={"code": exc.code.value, "status_code": http_exc.status_code},
    )
    _audit_refused_mutation(request, exc)
    return JSONResponse(status_code=http_exc.status_code, content=errors.error_body(exc))


def _audit_refused_mutation(request: Request, exc: DomainError) -> None:
    """Record a failed create, update or delete in the audit log."""
    route = request.scope.get("route")
    audited = action_for_route(request.method, getattr(route, "path", request.url.path))
    if audited is None:
        return

    action, resource_type = audited
    context = create_audit_context_from_request(request)
    context.tenant_token = request.headers.get("x-tenant-token") or settings.default_tenant_token
    audit_log(
        action,
        AuditOutcome.FAILURE,
        context=context,
        resource_type=resource_type,
        resource_token=request.path_params.get("token"),
        details={"code": exc.code.value},
        error_message=exc.message,
    )

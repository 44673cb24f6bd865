from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from sqlmodel import SQLModel

from src.domain.errors import DomainError
from .error import domain_error_response, error_response
from .middleware import RequestLoggingMiddleware, request_id_filter
import logging

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s [%(request_id)s] %(name)s: %(message)s"

VALIDATION_LOCATIONS = {"body": "body", "query": "query", "path": "params"}


async def handle_domain_error(request: Request, exc: DomainError):
    logger.warning(f"{exc.name} on {request.method} {request.url.path}: {exc.message}")
    return domain_error_response(exc)


async def handle_validation_error(request: Request, exc: RequestValidationError):
    details = {"body": [], "query": [], "params": []}
    for error in exc.errors():
        location, *path = error["loc"]
        details.setdefault(VALIDATION_LOCATIONS.get(location, location), []).append(
            {"path": ".".join(str(part) for part in path), "message": error["msg"]}
        )
    logger.warning(f"Validation failed on {request.method} {request.url.path}: {details}")
    return error_response(
        "ValidationError",
        "Validation failed",
        status.HTTP_400_BAD_REQUEST,
        details={key: value for key, value in details.items() if value},
    )


async def handle_unexpected_error(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return error_response(
        "InternalServerError",
        "An unexpected error occurred",
        status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def configure_logging(level: str) -> None:
    logging.basicConfig(format=LOG_FORMAT)
    root = logging.getLogger()
    root.setLevel(level.upper())
    for handler in root.handlers:
        handler.addFilter(request_id_filter)


def create_app(ApplicationConfig) -> FastAPI:
    configure_logging(ApplicationConfig.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if ApplicationConfig.AUTO_CREATE_SCHEMA:
            from src.depends import engine

            logger.info("Creating database schema")
            async with engine.begin() as conn:
                await conn.run_sync(SQLModel.metadata.create_all)
        yield

    app = FastAPI(title="Tenant Management API", version="0.1.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-Id"],
    )
    if ApplicationConfig.ENABLE_LOGGING_MIDDLEWARE:
        app.add_middleware(RequestLoggingMiddleware)

    from src.api.routes import (
        group,
        health_check,
        role,
        shared_service,
        tenant,
        tenant_request,
        user,
    )

    prefix = ApplicationConfig.API_PREFIX
    app.include_router(health_check.router, prefix=prefix, tags=["Health"])
    app.include_router(tenant.router, prefix=prefix, tags=["Tenant"])
    app.include_router(user.router, prefix=prefix, tags=["User"])
    app.include_router(role.router, prefix=prefix, tags=["Role"])
    app.include_router(group.router, prefix=prefix, tags=["Group"])
    app.include_router(shared_service.router, prefix=prefix, tags=["Shared Service"])
    app.include_router(tenant_request.router, prefix=prefix, tags=["Tenant Request"])

    app.add_exception_handler(DomainError, handle_domain_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)

    return app

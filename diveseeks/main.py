import socket
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from . import __version__
from .application.client_service import ClientRegistry
from .config import AppConfig, resolve_app_config
from .domain.exceptions import DomainError
from .logging_config import get_logger, setup_logging
from .logging_utils import log_system_info
from .middleware import log_requests_middleware
from .presentation.api_routes import api_router
from .presentation.error_handlers import (
    extract_request_field_errors,
    handle_domain_error,
    problem_response,
)
from .presentation.problem_details import ProblemDetailFactory
from .rate_limiting import RateLimiter, rate_limit_middleware
from .telemetry import setup_telemetry


@asynccontextmanager
async def lifespan(app: FastAPI):
    config: AppConfig = app.state.config

    # Setup logging first
    setup_logging(config)
    logger = get_logger(__name__)

    hostname = socket.gethostname()
    try:
        ip_addr = socket.gethostbyname(hostname)
    except OSError:
        ip_addr = "unknown"
    log_system_info(hostname, ip_addr, config.node_env, config.port)

    yield

    logger.info("Application shutdown completed")


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Global handler for domain-specific errors."""
    logger = get_logger(__name__)
    logger.warning(
        "Domain error occurred",
        error_type=type(exc).__name__,
        error_message=str(exc),
        path=request.url.path,
        method=request.method,
    )
    return handle_domain_error(exc, request)


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Global handler for Pydantic request validation errors."""
    logger = get_logger(__name__)
    logger.warning(
        "Request validation error occurred",
        errors=exc.errors(),
        path=request.url.path,
        method=request.method,
    )

    problem = ProblemDetailFactory.validation_failed(
        detail="Request validation failed",
        instance=str(request.url.path),
        field_errors=extract_request_field_errors(list(exc.errors())),
    )
    return problem_response(problem)


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Global handler for unexpected errors."""
    logger = get_logger(__name__)
    logger.error(
        "Unexpected error occurred",
        error_type=type(exc).__name__,
        error_message=str(exc),
        path=request.url.path,
        method=request.method,
        exc_info=True,
    )

    problem = ProblemDetailFactory.internal_server_error(
        detail="An unexpected error occurred. Please try again.",
        instance=str(request.url.path),
    )
    return problem_response(problem)


def create_app(config: AppConfig | None = None) -> FastAPI:
    """Build the API application around a resolved configuration.

    Args:
        config: Configuration to serve with; resolved from the process
            environment when omitted

    Returns:
        Configured FastAPI application
    """
    if config is None:
        config = resolve_app_config()

    app = FastAPI(
        title="DiveSeeks API",
        version=__version__,
        debug=config.is_development,
        lifespan=lifespan,
        description="DiveSeeks multi-tenant retail and restaurant backend API.",
        openapi_tags=[
            {"name": "clients", "description": "Register and list API clients"},
            {"name": "uploads", "description": "Image uploads"},
            {
                "name": "enumerations",
                "description": "Domain vocabularies and their wire values",
            },
            {"name": "system", "description": "Health and configuration"},
        ],
    )

    # Process-lifetime state, shared by request handlers through dependencies
    app.state.config = config
    app.state.rate_limiter = RateLimiter.from_config(config)
    app.state.client_registry = ClientRegistry()

    setup_telemetry(app, config.node_env)

    # Add middleware (order matters: rate limiting before logging)
    app.middleware("http")(rate_limit_middleware)
    app.middleware("http")(log_requests_middleware)

    app.add_exception_handler(
        DomainError,
        domain_error_handler,  # type: ignore[arg-type]
    )
    app.add_exception_handler(
        RequestValidationError,
        validation_exception_handler,  # type: ignore[arg-type]
    )
    app.add_exception_handler(Exception, general_exception_handler)

    app.include_router(api_router)

    return app

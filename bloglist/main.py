# bloglist/main.py

"""Bloglist Backend - blog posts with ownership-checked deletion."""

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import ORJSONResponse
from uvicorn.middleware.proxy_headers import ProxyHeadersMiddleware

from bloglist.configs import settings
from bloglist.db import ping
from bloglist.errors import (
    DatabaseError,
    ForbiddenError,
    PasswordHashingError,
    UserAuthenticationError,
    ValidationError,
    auth_exception_handler,
    database_exception_handler,
    password_hashing_exception_handler,
    request_validation_exception_handler,
    validation_error_handler,
)
from bloglist.middleware import (
    LoggingMiddleware,
    SecurityHeadersMiddleware,
    configure_cors,
    lifespan,
)
from bloglist.routes import auth_router, blog_router, user_router
from bloglist.schemas import HealthCheckResponse
from bloglist.utils.helpers import today_str

app = FastAPI(
    title=settings.APP_NAME,
    description="Bloglist Backend API",
    version="1.0.0",
    lifespan=lifespan,
    swagger_ui_parameters={
        "docExpansion": "none",
        "operationsSorter": "method",
    },
)

configure_cors(app)

app.add_middleware(LoggingMiddleware)
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(GZipMiddleware, minimum_size=1000)
app.add_middleware(ProxyHeadersMiddleware, trusted_hosts="*")


routes = [
    auth_router,
    user_router,
    blog_router,
]

_ = [app.include_router(router) for router in routes]

errors = [
    (ValidationError, validation_error_handler),
    (UserAuthenticationError, auth_exception_handler),
    (ForbiddenError, auth_exception_handler),
    (PasswordHashingError, password_hashing_exception_handler),
    (DatabaseError, database_exception_handler),
    (RequestValidationError, request_validation_exception_handler),
]

_ = [app.add_exception_handler(exc_type, handler) for exc_type, handler in errors]


@app.get(
    "/health",
    tags=["🩺 Health"],
    summary="Health check endpoint",
    response_model=HealthCheckResponse,
    response_class=ORJSONResponse,
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "version": "1.0.0",
                        "status": "ok",
                        "timestamp": "2025-01-01",
                        "database": "connected",
                    },
                },
            },
        },
    },
    operation_id="health_check",
)
async def health_check() -> HealthCheckResponse:
    """
    Health check endpoint.

    Returns
    -------
    HealthCheckResponse
        API version, date and database connectivity.

    Examples
    --------
    Request
        GET /health
    Response
        200 OK
        {"version": "1.0.0", "status": "ok", "timestamp": "2025-01-01", "database": "connected"}
    """
    database_ok = await ping()
    return HealthCheckResponse(
        version=app.version,
        status="ok" if database_ok else "degraded",
        timestamp=today_str(),
        database="connected" if database_ok else "unavailable",
    )

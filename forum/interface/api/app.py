"""FastAPI application."""

import logfire
from dishka import AsyncContainer
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from forum.domain.error import BusinessRuleViolationError, NotFoundError
from forum.interface.api.routes import health, likes, notifications, replies, threads
from forum.interface.error import AuthenticationRequiredError
from forum.util.di.container import create_container, setup_di
from forum.util.observability import instrument_fastapi, instrument_httpx


def _register_error_handlers(app: FastAPI) -> None:
    """Map errors that escape use cases to HTTP responses."""

    @app.exception_handler(AuthenticationRequiredError)
    async def handle_unauthenticated(
        request: Request, exc: AuthenticationRequiredError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED, content={"detail": str(exc)}
        )

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError) -> JSONResponse:
        logfire.info("Resource not found", resource=exc.resource, path=request.url.path)
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)}
        )

    @app.exception_handler(BusinessRuleViolationError)
    async def handle_rule_violation(
        request: Request, exc: BusinessRuleViolationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"detail": str(exc)},
        )


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Args:
        container: DI container to use, a production container by default

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    """
    # Instrument httpx for outbound mail relay requests
    instrument_httpx()

    app_instance = FastAPI(
        title="Forum API",
        description="Backend API for the discussion forum: threads, replies, likes and notifications",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    setup_di(app_instance, container or create_container())

    _register_error_handlers(app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(threads.router)
    app_instance.include_router(replies.router)
    app_instance.include_router(likes.router)
    app_instance.include_router(notifications.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
app = create_app()

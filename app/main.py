"""Application entry point wiring the shared request services into FastAPI."""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from infrastructure.configuration import Settings
from infrastructure.logging import configure_logging, get_module_logger
from infrastructure.services import (
    configure_services,
    get_error_reporter,
    get_settings,
)
from infrastructure.sessions import SessionMiddleware

logger = get_module_logger()

load_dotenv()


async def handle_unexpected_exception(request: Request, exc: Exception) -> JSONResponse:
    """Report an exception that escaped a route and answer with its notice."""
    notice = get_error_reporter().handle_exception(exc)
    return JSONResponse(status_code=500, content=notice.to_dict())


def create_app(
    settings: Optional[Settings] = None,
    replace_services: bool = False,
    **service_overrides,
) -> FastAPI:
    """Create the FastAPI application with the shared services wired in.

    Args:
        settings: Settings to use (default: get_settings()).
        replace_services: Replace services configured earlier in this process.
        **service_overrides: Passed to configure_services().

    Returns:
        FastAPI application.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        configure_logging(settings=settings)
        services = configure_services(
            settings, replace=replace_services, **service_overrides
        )
        services.error_reporter.install()
        logger.info(
            "application_startup",
            log_file_path=str(services.log_service.log_file_path),
            default_locale=settings.get("localization.default_locale"),
        )
        try:
            yield
        finally:
            services.error_reporter.uninstall()
            logger.info("application_shutdown")

    app = FastAPI(lifespan=lifespan)
    app.add_middleware(
        SessionMiddleware,
        cookie_name=settings.get("session.cookie_name", "session_id"),
    )
    app.add_exception_handler(Exception, handle_unexpected_exception)
    return app

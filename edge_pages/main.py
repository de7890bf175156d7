import logging
import sys
import time
from collections.abc import AsyncGenerator, Callable
from contextlib import asynccontextmanager

import structlog
from fastapi import APIRouter, FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.trustedhost import TrustedHostMiddleware
from fastapi.responses import JSONResponse

from edge_pages.api.countdown_routes import router as countdown_router
from edge_pages.api.routes import router as weather_router
from edge_pages.config.settings import Settings, settings
from edge_pages.config.utils import get_config_summary, validate_configuration
from edge_pages.pages.documents import countdown_document, weather_document
from edge_pages.services.weather_service import create_weather_service
from edge_pages.utils.exceptions import WeatherAPIError


def setup_logging(settings_obj: Settings) -> None:
    """Configure structured logging for the application."""

    log_level = getattr(logging, settings_obj.log_level.upper())

    if settings_obj.log_format == "json" and not settings_obj.is_development:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.StackInfoRenderer(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Manage application lifespan - startup and shutdown events.

    Reports configuration problems at startup without refusing to start:
    a missing API key is answered per request with a 500.
    """
    logger = structlog.get_logger(__name__)
    settings_obj: Settings = app.state.settings

    logger.info("Starting service", **get_config_summary(settings_obj))

    validation = validate_configuration(settings_obj)
    for warning in validation["warnings"]:
        logger.warning("Configuration warning", warning=warning)
    for error in validation["errors"]:
        logger.error("Configuration error", error=error)

    yield  # Application is running

    logger.info("Shutting down service", site=app.state.site)


def _build_app(
    settings_obj: Settings,
    site: str,
    router: APIRouter,
    document: str,
    description: str,
) -> FastAPI:
    app = FastAPI(
        title=settings_obj.app_name,
        version=settings_obj.app_version,
        description=description,
        docs_url="/docs" if settings_obj.expose_docs else None,
        redoc_url=None,
        openapi_url="/openapi.json" if settings_obj.expose_docs else None,
        lifespan=lifespan,
    )

    app.state.settings = settings_obj
    app.state.site = site
    app.state.document = document

    app.add_middleware(
        TrustedHostMiddleware,
        allowed_hosts=settings_obj.allowed_hosts,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings_obj.cors_allow_origins,
        allow_credentials=False,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def logging_middleware(
        request: Request, call_next: Callable
    ) -> Response:
        """Log requests and add processing time headers."""
        logger = structlog.get_logger(__name__)

        start_time = time.time()
        request_id = f"req_{int(start_time * 1000000)}"

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            site=site,
            method=request.method,
            path=request.url.path,
            client_ip=request.client.host if request.client else None,
        )

        logger.info("Request started")

        try:
            response = await call_next(request)

            process_time = time.time() - start_time
            response.headers["X-Process-Time"] = str(process_time)
            response.headers["X-Request-ID"] = request_id

            logger.info(
                "Request completed",
                status_code=response.status_code,
                process_time=process_time,
            )

            return response

        except Exception as e:
            process_time = time.time() - start_time
            logger.error(
                "Request failed",
                error=str(e),
                error_type=type(e).__name__,
                process_time=process_time,
            )
            raise

    @app.exception_handler(WeatherAPIError)
    async def weather_api_error_handler(
        _request: Request, exc: WeatherAPIError
    ) -> JSONResponse:
        """Render weather errors as an error payload with their status."""
        logger = structlog.get_logger(__name__)
        logger.error(
            "Weather request failed",
            error=exc.message,
            error_type=type(exc).__name__,
            status_code=exc.status_code,
            reason=getattr(exc, "reason", None),
        )

        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.message},
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Handle unexpected errors gracefully."""
        logger = structlog.get_logger(__name__)
        logger.error(
            "Unhandled exception", error=str(exc), error_type=type(exc).__name__
        )

        return JSONResponse(
            status_code=500,
            content={"error": "Internal server error"},
        )

    app.include_router(router)

    return app


def create_app(settings_obj: Settings = settings) -> FastAPI:
    """
    Create and configure the weather proxy application.

    Returns:
        FastAPI application serving `/weather*` from OpenWeatherMap and the
        weather UI on every other path
    """

    setup_logging(settings_obj)

    app = _build_app(
        settings_obj,
        site="weather",
        router=weather_router,
        document=weather_document(),
        description="Proxy for OpenWeatherMap current weather with a single-page UI",
    )
    app.state.weather_service = create_weather_service(settings_obj)
    return app


def create_countdown_app(settings_obj: Settings = settings) -> FastAPI:
    """
    Create and configure the countdown page application.

    Returns:
        FastAPI application serving the countdown page on every path except
        the `/countdown/stream` event stream
    """

    setup_logging(settings_obj)

    return _build_app(
        settings_obj,
        site="countdown",
        router=countdown_router,
        document=countdown_document(settings_obj),
        description="Countdown page to a fixed instant",
    )


app = create_app()
countdown_app = create_countdown_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "edge_pages.main:app"
        if settings.site == "weather"
        else "edge_pages.main:countdown_app",
        host=settings.host,
        port=settings.port,
        workers=settings.workers,
        reload=settings.is_development,
        log_level=settings.log_level.lower(),
    )

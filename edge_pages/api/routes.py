import structlog
from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, JSONResponse

from edge_pages.config.settings import Settings
from edge_pages.models.weather import ErrorPayload, NormalizedWeather, ProviderConfig
from edge_pages.services.weather_service import WeatherService
from edge_pages.utils.exceptions import CityNotProvidedError

logger = structlog.get_logger(__name__)
router = APIRouter()

# Dispatch is by path alone, whatever the method.
ROUTED_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def get_weather_service(request: Request) -> WeatherService:
    """
    Dependency injection for weather service.

    Retrieves the weather service instance from the application state.
    This service is created by the application factory.
    """
    return request.app.state.weather_service


def get_provider_config(request: Request) -> ProviderConfig:
    """Build the per-request provider configuration from application settings."""
    settings: Settings = request.app.state.settings
    return ProviderConfig(provider_api_key=settings.openweather_api_key)


@router.api_route(
    "/weather{suffix:path}",
    methods=ROUTED_METHODS,
    response_model=NormalizedWeather,
    summary="Get current weather data",
    description="""
    Proxy the current weather for a city from OpenWeatherMap.

    Every path beginning with `/weather` lands here.

    **Query Parameters:**
    - `city`: Name of the city (required, the first occurrence wins)
    """,
    responses={
        400: {"model": ErrorPayload, "description": "City not provided"},
        500: {"model": ErrorPayload, "description": "Misconfiguration or fetch failure"},
    },
    tags=["Weather"],
)
async def get_weather(
    request: Request,
    config: ProviderConfig = Depends(get_provider_config),
    weather_service: WeatherService = Depends(get_weather_service),
) -> JSONResponse:
    """
    Get current weather data for a specified city.

    Errors are raised as WeatherAPIError subclasses and rendered by the
    application's exception handler.
    """
    cities = request.query_params.getlist("city")
    city = cities[0] if cities else None
    if not city:
        logger.warning("Weather request without city")
        raise CityNotProvidedError()

    logger.info("Weather request received", city=city)

    weather = await weather_service.get_weather(city, config)

    logger.info("Weather request completed successfully", city=city)

    return JSONResponse(
        content=weather.model_dump(),
        headers={"Access-Control-Allow-Origin": "*"},
    )


@router.api_route(
    "/{path:path}",
    methods=ROUTED_METHODS,
    response_class=HTMLResponse,
    summary="Weather UI",
    tags=["Pages"],
)
async def weather_page(request: Request) -> HTMLResponse:
    """Serve the single-page weather UI for every other path."""
    return HTMLResponse(content=request.app.state.document)

import logging
from typing import Any

import httpx

from edge_pages.config.settings import Settings
from edge_pages.models.weather import UpstreamReply
from edge_pages.utils.exceptions import (
    ConfigurationError,
    FetchFailedError,
    UpstreamError,
)

logger = logging.getLogger(__name__)


class WeatherClient:
    """
    Async client for the external weather API (OpenWeatherMap).

    One instance serves one request: it opens its own HTTP client on entry
    and closes it on exit. There is no retry and no circuit breaking.
    """

    def __init__(self, settings: Settings):
        self.settings = settings
        self.client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "WeatherClient":
        """Async context manager entry"""
        self.client = httpx.AsyncClient(
            timeout=httpx.Timeout(self.settings.weather_api_timeout),
        )
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit"""
        if self.client:
            await self.client.aclose()

    async def fetch_weather_data(self, city: str, api_key: str) -> UpstreamReply:
        """Fetch the raw provider payload for a city"""
        if not self.client:
            raise ConfigurationError(
                "Weather client not initialized. Use async context manager."
            )

        logger.info(f"Fetching weather data for city: {city}")

        response = await self._make_api_request(city, api_key)
        data = self._parse_body(response, city)

        if response.status_code != 200:
            message = data.get("message") if isinstance(data, dict) else None
            logger.warning(
                f"Weather API returned status {response.status_code} for {city}"
            )
            raise UpstreamError(response.status_code, str(message) if message else None)

        if not isinstance(data, dict):
            raise FetchFailedError(f"Expected a JSON object, got {type(data).__name__}")

        return UpstreamReply(status_code=response.status_code, body=data)

    async def _make_api_request(self, city: str, api_key: str) -> httpx.Response:
        """Make HTTP request to weather API"""
        params = {
            "q": city,
            "appid": api_key,
            "units": "metric",  # Celsius
        }

        try:
            return await self.client.get(
                str(self.settings.weather_api_url), params=params
            )
        except httpx.RequestError as e:
            logger.error(f"Request error for city {city}: {e}")
            raise FetchFailedError(f"Request failed: {str(e)}") from e

    def _parse_body(self, response: httpx.Response, city: str) -> Any:
        """Decode the JSON body, whatever the status"""
        try:
            return response.json()
        except ValueError as e:
            logger.error(f"Failed to parse JSON response for {city}: {e}")
            raise FetchFailedError(f"Invalid JSON response: {str(e)}") from e

"""
Weather service orchestrating the proxy flow.

Checks configuration, calls the weather client once and normalizes the
provider payload. Nothing is cached or stored between requests.
"""

import logging

from edge_pages.config.settings import Settings
from edge_pages.models.weather import NormalizedWeather, ProviderConfig
from edge_pages.services.normalizer import normalize_weather
from edge_pages.services.weather_client import WeatherClient
from edge_pages.utils.exceptions import (
    CityNotProvidedError,
    ConfigurationError,
    FetchFailedError,
    WeatherAPIError,
)

logger = logging.getLogger(__name__)


class WeatherService:
    """
    Weather service handling one proxied request at a time:
    1. Validate the city and the provider configuration
    2. Fetch from the external API
    3. Normalize the payload for clients
    """

    def __init__(self, settings: Settings):
        self.settings = settings

    async def get_weather(self, city: str, config: ProviderConfig) -> NormalizedWeather:
        """Get normalized weather data for a city."""
        if not city:
            raise CityNotProvidedError()

        api_key = config.provider_api_key
        if not api_key:
            logger.error("Weather API key is not configured")
            raise ConfigurationError()

        logger.info(f"Processing weather request for city: {city}")

        try:
            async with WeatherClient(self.settings) as client:
                reply = await client.fetch_weather_data(city, api_key)
            weather = normalize_weather(reply.body)
        except WeatherAPIError:
            raise
        except Exception as e:
            logger.error(f"Unexpected error fetching weather data for {city}: {e}")
            raise FetchFailedError(f"Unexpected error: {str(e)}") from e

        logger.info(f"Successfully processed weather request for {city}")
        return weather


def create_weather_service(settings: Settings) -> WeatherService:
    """Factory function to create a weather service"""
    return WeatherService(settings)
